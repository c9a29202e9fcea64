"""Timestamps of a FAT 8.3 directory entry."""

from __future__ import annotations

import logging
import struct
from dataclasses import dataclass
from datetime import datetime
from typing import ClassVar

from .base import ValidationError
from .dos import parse_fat_datetime
from .typing_ import ReadableBuffer

__all__ = ['ENTRY_SIZE', 'EntryTimestamps']


log = logging.getLogger(__name__)


ENTRY_SIZE = 32


@dataclass(frozen=True)
class EntryTimestamps:
    """Raw DOS date and time words found in an 8.3 directory entry.

    The 10 ms creation time count at offset 0x0D is not read.
    """

    created_time: int
    created_date: int
    last_accessed_date: int
    last_modified_time: int
    last_modified_date: int

    # 0x0E created time, 0x10 created date, 0x12 last accessed date,
    # 0x16 last modified time, 0x18 last modified date
    FORMAT: ClassVar[str] = '<14xHHH2xHH6x'

    @classmethod
    def from_bytes(cls, b: ReadableBuffer) -> EntryTimestamps:
        """Parse the timestamp fields of the 8.3 directory entry ``b``.

        ``b`` must be exactly ``ENTRY_SIZE`` bytes long. Otherwise,
        ``ValidationError`` is raised.
        """
        with memoryview(b) as view:
            size = view.nbytes
            if size != ENTRY_SIZE:
                raise ValidationError(
                    f'Directory entry must be {ENTRY_SIZE} bytes long, got {size}'
                )
            return cls(*struct.unpack(cls.FORMAT, view))

    def _parse(self, name: str, dos_date: int, dos_time: int = 0) -> datetime | None:
        parsed = parse_fat_datetime(dos_date, dos_time)
        if parsed is None:
            log.debug(
                f'Invalid {name} timestamp (date {dos_date:#06x}, time {dos_time:#06x})'
            )
        return parsed

    @property
    def created(self) -> datetime | None:
        """Creation datetime or ``None`` if invalid."""
        return self._parse('creation', self.created_date, self.created_time)

    @property
    def last_accessed(self) -> datetime | None:
        """Datetime of last access or ``None`` if invalid; always at midnight."""
        return self._parse('last access', self.last_accessed_date)

    @property
    def last_modified(self) -> datetime | None:
        """Datetime of last modification or ``None`` if invalid."""
        return self._parse(
            'last modification', self.last_modified_date, self.last_modified_time
        )
