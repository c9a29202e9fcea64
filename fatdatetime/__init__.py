"""Decoding of the packed DOS date and time fields of FAT directory entries.

See https://en.wikipedia.org/wiki/Design_of_the_FAT_file_system.
See https://www.cs.fsu.edu/~cop4610t/assignments/project3/spec/fatspec.pdf.
"""

from .dos import parse_fat_date, parse_fat_datetime, parse_fat_time

__all__ = ["parse_fat_date", "parse_fat_time", "parse_fat_datetime"]
