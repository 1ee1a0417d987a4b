# core/checkin_store.py
"""
Check-in history store.

Philosophy:
- Append only. Entries are never edited or deleted here.
- One flat JSON list under one key, newest appended last.
- Reading never fails: bad data degrades to samples or to nothing.

Storage is a tiny port (get / set a named blob) so the store runs the same
on disk and in memory.
"""

import json
import logging
from datetime import date, datetime, timezone
from pathlib import Path
from typing import Callable, Dict, Iterator, List, Optional

from pydantic import ValidationError

from core import settings
from core.insight_engine import insight_for_phase
from core.models import CheckIn, HistoryEntry, Insight, Phase, Sleep

logger = logging.getLogger(__name__)

# ==================================================
# PATHS
# ==================================================
DATA_DIR = settings.get_data_dir()


# ==================================================
# ERRORS
# ==================================================
class StorageError(Exception):
    """Persistence medium unavailable, full, or holding unusable data."""


class CorruptPayloadError(StorageError):
    """Stored history exists but is not a readable JSON list."""


# ==================================================
# STORAGE PORTS
# ==================================================
class FileStorage:
    """One JSON file per key inside a directory."""

    def __init__(self, root: Path):
        self.root = Path(root)

    def _path(self, key: str) -> Path:
        return self.root / f"{key}.json"

    def get(self, key: str) -> Optional[str]:
        path = self._path(key)
        if not path.exists():
            return None
        try:
            return path.read_text(encoding="utf-8")
        except UnicodeDecodeError as exc:
            raise CorruptPayloadError(f"{path} is not UTF-8 text") from exc
        except OSError as exc:
            raise StorageError(f"Could not read {path}: {exc}") from exc

    def set(self, key: str, blob: str) -> None:
        path = self._path(key)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(blob, encoding="utf-8")
        except OSError as exc:
            raise StorageError(f"Could not write {path}: {exc}") from exc


class MemoryStorage:
    """
    In-memory blobs.
    `capacity` (in characters) mimics a browser storage quota.
    """

    def __init__(self, capacity: Optional[int] = None):
        self.capacity = capacity
        self.blobs: Dict[str, str] = {}

    def get(self, key: str) -> Optional[str]:
        return self.blobs.get(key)

    def set(self, key: str, blob: str) -> None:
        if self.capacity is not None and len(blob) > self.capacity:
            raise StorageError(
                f"Storage quota exceeded ({len(blob)} > {self.capacity})"
            )
        self.blobs[key] = blob


# ==================================================
# SAMPLE DATA (shown when stored history is unreadable)
# ==================================================
_SAMPLES = [
    ("1", date(2024, 1, 15), 7, 8, Sleep.GOOD, Phase.FOLLICULAR, 90),
    ("2", date(2024, 1, 14), 6, 7, Sleep.GOOD, Phase.FOLLICULAR, 85),
    ("3", date(2024, 1, 13), 4, 5, Sleep.OKAY, Phase.LATE_LUTEAL, 80),
]


def sample_entries() -> List[HistoryEntry]:
    """
    Illustrative history, most recent first.
    """
    entries = []
    for entry_id, day, mood, energy, sleep, phase, confidence in _SAMPLES:
        insight = insight_for_phase(phase).model_copy(
            update={"confidence": confidence}
        )
        entries.append(HistoryEntry(
            id=entry_id,
            mood=mood,
            energy=energy,
            sleep=sleep,
            date=day,
            insight=insight,
            timestamp=datetime(
                day.year, day.month, day.day, tzinfo=timezone.utc
            ).isoformat(),
        ))
    return entries


def is_sample_history(entries: List[HistoryEntry]) -> bool:
    """True when `entries` is the illustrative fallback, not real check-ins."""
    return list(entries) == sample_entries()


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


# ==================================================
# STORE
# ==================================================
class CheckInStore:
    def __init__(
        self,
        storage,
        key: str = settings.STORAGE_KEY,
        clock: Callable[[], datetime] = _utc_now,
    ):
        self.storage = storage
        self.key = key
        self.clock = clock

    # ---------------- internal ----------------
    def _load_records(self) -> List:
        blob = self.storage.get(self.key)
        if blob is None:
            return []

        try:
            data = json.loads(blob)
        except ValueError as exc:
            raise CorruptPayloadError(f"History under '{self.key}' is not JSON") from exc

        if not isinstance(data, list):
            raise CorruptPayloadError(f"History under '{self.key}' is not a list")

        return data

    def _next_id(self, records: List, now: datetime) -> str:
        candidate = int(now.timestamp() * 1000)

        latest = 0
        for r in records:
            try:
                latest = max(latest, int(r.get("id", 0)))
            except (AttributeError, TypeError, ValueError):
                continue

        # same millisecond as the previous entry
        if candidate <= latest:
            candidate = latest + 1
        return str(candidate)

    # ---------------- public ----------------
    def append(self, check_in: CheckIn, insight: Insight) -> HistoryEntry:
        """
        Store a check-in with its insight.
        Raises StorageError if the medium is unavailable, full, or corrupt.
        """
        records = self._load_records()
        now = self.clock()

        entry = HistoryEntry(
            id=self._next_id(records, now),
            mood=check_in.mood,
            energy=check_in.energy,
            sleep=check_in.sleep,
            date=check_in.date,
            insight=insight,
            timestamp=now.isoformat(),
        )
        records.append(entry.model_dump(mode="json"))

        self.storage.set(self.key, json.dumps(records, indent=2))
        logger.info("Stored check-in %s (%s)", entry.id, entry.phase_label)
        return entry

    def list_entries(self) -> Iterator[HistoryEntry]:
        """
        All entries, most recent first.
        Unparseable history yields the sample entries instead.
        """
        try:
            records = self._load_records()
        except CorruptPayloadError as exc:
            logger.warning("%s; showing sample history", exc)
            yield from sample_entries()
            return
        except StorageError as exc:
            logger.error("History unavailable: %s", exc)
            return

        for record in reversed(records):
            try:
                yield HistoryEntry.model_validate(record)
            except ValidationError as exc:
                logger.warning(
                    "Skipping malformed history record: %s",
                    exc.errors()[0].get("msg", "invalid"),
                )

    def has_history(self) -> bool:
        return next(self.list_entries(), None) is not None

    def average_mood(self) -> float:
        return _mean(e.mood for e in self.list_entries())

    def average_energy(self) -> float:
        return _mean(e.energy for e in self.list_entries())


def _mean(values) -> float:
    values = list(values)
    if not values:
        return 0.0
    return sum(values) / len(values)


def default_store() -> CheckInStore:
    return CheckInStore(FileStorage(DATA_DIR))
