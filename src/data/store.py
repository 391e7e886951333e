"""Read-only store boundary for entity snapshots.

The engine never talks to storage directly; callers hand it a Snapshot, an
immutable copy of every stored entity taken at one point in time.
"""

import json
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol, runtime_checkable

from pydantic import ValidationError

from src.data.records import SnapshotRecord
from src.models.asset import Asset
from src.models.event import LifeEvent
from src.models.loan import Loan
from src.models.transaction import Transaction

logger = logging.getLogger(__name__)


class StoreError(Exception):
    """Stored data failed boundary validation."""


@dataclass(frozen=True)
class Snapshot:
    transactions: tuple[Transaction, ...] = field(default_factory=tuple)
    loans: tuple[Loan, ...] = field(default_factory=tuple)
    events: tuple[LifeEvent, ...] = field(default_factory=tuple)
    assets: tuple[Asset, ...] = field(default_factory=tuple)

    def get_loan(self, loan_id: str) -> Loan | None:
        for loan in self.loans:
            if loan.id == loan_id:
                return loan
        return None

    @classmethod
    def from_record(cls, record: SnapshotRecord) -> "Snapshot":
        return cls(
            transactions=tuple(r.to_domain() for r in record.transactions),
            loans=tuple(r.to_domain() for r in record.loans),
            events=tuple(r.to_domain() for r in record.events),
            assets=tuple(r.to_domain() for r in record.assets),
        )


@runtime_checkable
class SnapshotStore(Protocol):
    def snapshot(self) -> Snapshot: ...

    def list_transactions(self) -> list[Transaction]: ...

    def list_loans(self) -> list[Loan]: ...

    def list_events(self) -> list[LifeEvent]: ...

    def list_assets(self) -> list[Asset]: ...


class _SnapshotListMixin(ABC):
    @abstractmethod
    def snapshot(self) -> Snapshot:
        """Current snapshot of every stored entity."""

    def list_transactions(self) -> list[Transaction]:
        return list(self.snapshot().transactions)

    def list_loans(self) -> list[Loan]:
        return list(self.snapshot().loans)

    def list_events(self) -> list[LifeEvent]:
        return list(self.snapshot().events)

    def list_assets(self) -> list[Asset]:
        return list(self.snapshot().assets)


class InMemoryStore(_SnapshotListMixin):
    """Store over an already-built snapshot."""

    def __init__(self, snapshot: Snapshot | None = None):
        self._snapshot = snapshot or Snapshot()

    def snapshot(self) -> Snapshot:
        return self._snapshot


class JsonFileStore(_SnapshotListMixin):
    """Store reading the app's JSON storage document from disk.

    The file is re-read on every snapshot() call so callers always see the
    latest saved state, and each call returns an independent copy.
    """

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def snapshot(self) -> Snapshot:
        if not self.path.exists():
            logger.info("No data file at %s, starting with an empty snapshot", self.path)
            return Snapshot()

        try:
            raw = json.loads(self.path.read_text(encoding="utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            logger.warning("Unreadable data file %s, starting empty: %s", self.path, e)
            return Snapshot()

        try:
            record = SnapshotRecord.model_validate(raw)
        except ValidationError as e:
            logger.error("Invalid records in %s: %s", self.path, e)
            raise StoreError(f"invalid records in {self.path}") from e

        snapshot = Snapshot.from_record(record)
        logger.debug(
            "Loaded %d transactions, %d loans, %d events, %d assets from %s",
            len(snapshot.transactions), len(snapshot.loans),
            len(snapshot.events), len(snapshot.assets), self.path,
        )
        return snapshot
