"""
Receivers collect one kind of PokeAPI entity (pokémon, moves, abilities).

A receiver owns a slot array sized to the count the list endpoint reports.
Each fetch thread decodes one entity and writes exactly one slot; the
pipeline waits on the receiver's completion barrier before anything reads
the slots, then ``post_process`` derives the relation rows.

Lifecycle::

    UNINITIALIZED --init--> INITIALIZED --add_worker--> FETCHING
        --wait--> AGGREGATED --post_process--> POST_PROCESSED

``csv_entries`` and ``get_csv_relations`` are only valid once the receiver
is POST_PROCESSED; earlier calls raise ReceiverStateError.
"""

from __future__ import annotations

import dataclasses
import enum
import logging
import threading
from abc import ABC, abstractmethod
from typing import Any, Iterable, List, Optional

from src.fetcher.errors import FetchError, ReceiverStateError
from utils.custom_threading import CompletionBarrier

# Field metadata marking relation references that are not CSV columns
NOT_A_COLUMN = {"csv": False}


def format_cell(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class CsvEntry:
    """
    Mixin for dataclass records that can be written as one CSV row.

    Column names are the dataclass field names, in declaration order.
    Fields whose metadata carries ``csv=False`` are skipped.
    """

    @classmethod
    def _columns(cls) -> List[dataclasses.Field]:
        return [f for f in dataclasses.fields(cls) if f.metadata.get("csv", True)]

    def get_header(self) -> List[str]:
        return [f.name for f in self._columns()]

    def to_slice(self) -> List[str]:
        return [format_cell(getattr(self, f.name)) for f in self._columns()]


class ReceiverState(enum.Enum):
    UNINITIALIZED = "uninitialized"
    INITIALIZED = "initialized"
    FETCHING = "fetching"
    AGGREGATED = "aggregated"
    POST_PROCESSED = "post-processed"


class APIReceiver(ABC):
    """
    Abstract base for the per-entity receivers.

    Subclasses set :py:attr:`endpoint` and implement :py:meth:`build_record`;
    those with relation rows also override :py:meth:`derive_relations`.

    Parameters
    ----------
    client
        Object with ``get(url)`` returning decoded JSON and
        ``list_resources(limit, endpoint)``; normally a PokeAPIClient.
    """

    endpoint: str = ""

    def __init__(self, client) -> None:
        self.client = client
        self.logger = logging.getLogger(self.__class__.__name__)

        self._barrier = CompletionBarrier()
        self._lock = threading.Lock()
        self._entries: List[Optional[CsvEntry]] = []
        self._relations: List[CsvEntry] = []
        self._failed = 0
        self._state = ReceiverState.UNINITIALIZED

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    @property
    def state(self) -> ReceiverState:
        return self._state

    @property
    def failed(self) -> int:
        """Number of fetches that failed since the last ``init``."""
        with self._lock:
            return self._failed

    def get_endpoint(self) -> str:
        return self.endpoint

    # ------------------------------------------------------------------
    # Fetch lifecycle
    # ------------------------------------------------------------------

    def init(self, count: int) -> None:
        """Allocate *count* empty slots. Must run before any fetch starts."""
        if self._state is ReceiverState.FETCHING:
            raise ReceiverStateError(
                f"{self.__class__.__name__}: init() while fetches are in flight"
            )
        if count < 0:
            raise ValueError(f"count must be >= 0, got {count}")
        self._entries = [None] * count
        self._relations = []
        with self._lock:
            self._failed = 0
        self._state = ReceiverState.INITIALIZED

    def add_worker(self) -> None:
        """Register one fetch with the barrier; call before starting it."""
        if self._state not in (ReceiverState.INITIALIZED, ReceiverState.FETCHING):
            raise ReceiverStateError(
                f"{self.__class__.__name__}: add_worker() in state {self._state.value}"
            )
        self._barrier.add()
        self._state = ReceiverState.FETCHING

    def fetch_entries(self, url: str, lang: str, index: int) -> None:
        """
        Fetch and decode the entity at *url* into slot *index*.

        Runs on a fetch thread.  The barrier is signalled whether or not the
        fetch succeeds; a FetchError leaves the slot empty.
        """
        try:
            payload = self.client.get(url)
            self._entries[index] = self.build_record(payload, lang, url)
        except FetchError as exc:
            with self._lock:
                self._failed += 1
            self.logger.warning(f"Slot {index} left empty: {exc}")
        finally:
            self._barrier.done()

    def wait(self) -> None:
        """Block until every registered fetch has signalled completion."""
        self._barrier.wait()
        if self._state in (ReceiverState.INITIALIZED, ReceiverState.FETCHING):
            self._state = ReceiverState.AGGREGATED

    def post_process(self) -> None:
        """Derive relation rows in slot order, then reference order."""
        if self._state not in (ReceiverState.AGGREGATED, ReceiverState.POST_PROCESSED):
            raise ReceiverStateError(
                f"{self.__class__.__name__}: post_process() in state {self._state.value}"
            )
        self._relations = [
            relation
            for entry in self._entries
            if entry is not None
            for relation in self.derive_relations(entry)
        ]
        self._state = ReceiverState.POST_PROCESSED

        if self.failed:
            self.logger.warning(
                f"{self.failed} of {len(self._entries)} {self.endpoint} entries failed to fetch"
            )
        self.logger.info(
            f"{self.endpoint}: {len(self.csv_entries())} entries, "
            f"{len(self._relations)} relations"
        )

    # ------------------------------------------------------------------
    # Results
    # ------------------------------------------------------------------

    def _require(self, *states: ReceiverState) -> None:
        if self._state not in states:
            raise ReceiverStateError(
                f"{self.__class__.__name__}: results read in state {self._state.value}"
            )

    def get_entries(self) -> List[Optional[CsvEntry]]:
        """Copy of the slot array; failed fetches appear as ``None``."""
        self._require(ReceiverState.AGGREGATED, ReceiverState.POST_PROCESSED)
        return list(self._entries)

    def get_relations(self) -> List[CsvEntry]:
        self._require(ReceiverState.POST_PROCESSED)
        return list(self._relations)

    def csv_entries(self) -> List[CsvEntry]:
        self._require(ReceiverState.POST_PROCESSED)
        return [entry for entry in self._entries if entry is not None]

    def get_csv_relations(self) -> List[CsvEntry]:
        return self.get_relations()

    # ------------------------------------------------------------------
    # Abstract contract
    # ------------------------------------------------------------------

    @abstractmethod
    def build_record(self, payload: Any, lang: str, url: str) -> CsvEntry:
        """Decode one detail payload into a record. Raise DecodeError on bad input."""
        ...

    def derive_relations(self, entry: CsvEntry) -> Iterable[CsvEntry]:
        """Relation rows for one record. Entities without relations yield none."""
        return ()
