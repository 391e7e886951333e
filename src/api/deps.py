"""FastAPI dependency injection."""

from src.config import settings
from src.data.store import JsonFileStore, Snapshot, SnapshotStore


def get_store() -> SnapshotStore:
    return JsonFileStore(settings.data_file)


def load_snapshot(store: SnapshotStore) -> Snapshot:
    # One snapshot per request so a single response never mixes two saves.
    return store.snapshot()
