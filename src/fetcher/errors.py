"""Exceptions raised by the PokeAPI CSV exporter."""

from __future__ import annotations

from typing import Optional


class PokeCsvError(Exception):
    """Base class for every error the exporter raises."""


class FetchError(PokeCsvError):
    """A resource could not be fetched or understood."""

    def __init__(self, message: str, url: Optional[str] = None) -> None:
        super().__init__(message)
        self.url = url


class NetworkError(FetchError):
    """The HTTP request failed or returned a non-success status."""


class DecodeError(FetchError):
    """The response body was not JSON or did not have the expected shape."""


class EmptyInputError(PokeCsvError):
    """``to_csv`` was called without any rows to derive a header from."""


class FileSystemError(PokeCsvError):
    """An output directory or file could not be created or written."""


class ReceiverStateError(PokeCsvError):
    """A receiver method was called out of lifecycle order."""
