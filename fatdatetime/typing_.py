"""Certain types used across the package."""

from __future__ import annotations

from typing_extensions import Buffer, TypeAlias

__all__ = ["ReadableBuffer"]


# PEP 688 does not allow us to distinguish read-only and writable buffers.
ReadableBuffer: TypeAlias = Buffer
