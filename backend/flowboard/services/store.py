"""
FlowBoard Backend: Record Stores
================================

What:  Append-only, ordered collections for leads and contact messages.
How:   RecordStore is the abstract contract; InMemoryRecordStore keeps records
       in a list for the lifetime of the process.
Who:   One lead store and one message store are created per application
       (see main.create_app) and handed to the services.

Contract:
    append(record)          add at the end, return the record
    size() / len(store)     number of records
    slice(start, stop)      snapshot in insertion order, Python slice semantics
    filter(predicate)       snapshot of matching records in insertion order

There is no update or delete. Snapshots are new lists; callers cannot
reorder or drop stored entries through them.

Durability:
    InMemoryRecordStore is cleared when the process restarts and is not shared
    between worker processes. A durable store only has to implement the four
    methods above.
"""

import threading
from abc import ABC, abstractmethod
from typing import Callable, Generic, List, Optional, TypeVar

T = TypeVar("T")


class RecordStore(ABC, Generic[T]):
    """Abstract append-only record store."""

    @abstractmethod
    def append(self, record: T) -> T:
        """
        Add a record after all existing ones.

        Must be atomic with respect to concurrent callers: no append is lost
        and each record occupies exactly one position.
        """
        ...

    @abstractmethod
    def size(self) -> int:
        """Number of records appended so far."""
        ...

    @abstractmethod
    def slice(self, start: Optional[int] = None, stop: Optional[int] = None) -> List[T]:
        """Records in insertion order, `records[start:stop]`."""
        ...

    @abstractmethod
    def filter(self, predicate: Callable[[T], bool]) -> List[T]:
        """Records for which `predicate` is true, in insertion order."""
        ...

    def __len__(self) -> int:
        return self.size()


class InMemoryRecordStore(RecordStore[T]):
    """
    Process-memory record store.

    A single lock serializes appends and snapshots. Handlers run on the event
    loop while tests and sync code may call from threads, so a threading lock
    covers both; every critical section is a list operation.
    """

    def __init__(self, name: str = "records"):
        self.name = name
        self._records: List[T] = []
        self._lock = threading.Lock()

    def append(self, record: T) -> T:
        with self._lock:
            self._records.append(record)
        return record

    def size(self) -> int:
        with self._lock:
            return len(self._records)

    def slice(self, start: Optional[int] = None, stop: Optional[int] = None) -> List[T]:
        with self._lock:
            return self._records[start:stop]

    def filter(self, predicate: Callable[[T], bool]) -> List[T]:
        with self._lock:
            snapshot = list(self._records)
        return [record for record in snapshot if predicate(record)]

    def __repr__(self) -> str:
        return f"InMemoryRecordStore(name={self.name!r}, size={self.size()})"
