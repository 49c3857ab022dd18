"""
Script contains functions for writing records to pipe-delimited CSV files
"""

from __future__ import annotations

import csv
import logging
from pathlib import Path
from typing import Sequence, Union

from configs.constants import Constants
from src.fetcher.errors import EmptyInputError, FileSystemError
from src.fetcher.receiver import CsvEntry

LOGGER = logging.getLogger(__name__)

PathLike = Union[str, Path]


def create_dir(path: PathLike) -> Path:
    path = Path(path)
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise FileSystemError(f"Could not create directory {path}: {exc}") from exc
    return path


def create_file(dest: PathLike, fname: str) -> Path:
    """Creates *dest* if needed and an empty *fname* inside it.

    An existing file is truncated so a rerun starts from a clean file.
    """
    path = create_dir(dest) / fname
    try:
        path.write_text("", encoding="utf-8")
    except OSError as exc:
        raise FileSystemError(f"Could not create {path}: {exc}") from exc
    return path


def to_csv(csv_file: PathLike, entries: Sequence[CsvEntry]) -> None:
    """Appends a header row and one row per entry to *csv_file*.

    The header comes from the first entry, so every entry must share its
    columns.

    Raises:
        EmptyInputError: *entries* is empty; nothing is written.
        FileSystemError: the file could not be opened or written.
    """
    if not entries:
        raise EmptyInputError(f"No entries to write to {csv_file}")

    try:
        with open(csv_file, "a", newline="", encoding="utf-8") as file:
            writer = csv.writer(
                file, delimiter=Constants.CSV_DELIMITER, lineterminator="\n"
            )
            writer.writerow(entries[0].get_header())
            for entry in entries:
                writer.writerow(entry.to_slice())
    except OSError as exc:
        raise FileSystemError(f"Could not write {csv_file}: {exc}") from exc

    LOGGER.info("Wrote %d rows to %s", len(entries), csv_file)
