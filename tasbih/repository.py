"""
Design (repository.py)
- Purpose: Own the authoritative tally mapping and total behind a tiny API, and keep them
           durable. UI and controller never touch the dict directly.
- Inputs: Phrase keys; a KeyValueStorage; an optional clock.
- Outputs: New counts from increment(); Snapshots (copies) for rendering.
- Side effects: Every mutation writes the record to storage (best effort).
- Thread-safety: Single-threaded by design (Tk event loop); no lock.
"""

import logging
from datetime import datetime, timezone
from typing import Callable, Dict, Optional, Sequence, Tuple

from .config import PHRASES, STORAGE_KEY
from .models import Snapshot, decode_record, encode_record
from .storage import KeyValueStorage, LoadFailure, PersistFailure

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class CounterStore:
    """
    Design (CounterStore)
    - State:
        _counts: {phrase -> int >= 0}, keys fixed at construction
        _total: int, always sum(_counts.values()) after each public call
        _storage: host key-value slot, record stored under _key
    - Construction loads the persisted record, so a store is ready as soon as it exists.
    """

    def __init__(
        self,
        storage: KeyValueStorage,
        phrases: Sequence[str] = PHRASES,
        key: str = STORAGE_KEY,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._storage = storage
        self._phrases: Tuple[str, ...] = tuple(phrases)
        self._key = key
        self._clock = clock
        self._counts: Dict[str, int] = {p: 0 for p in self._phrases}
        self._total = 0
        self.load()

    @property
    def phrases(self) -> Tuple[str, ...]:
        return self._phrases

    # -------- Persistence --------

    def load(self) -> None:
        """
        Purpose: Restore counts from storage; fall back to all zeros on any LoadFailure.
        Side effects: Replaces _counts/_total. Never raises for storage problems.
        """
        self._counts = {p: 0 for p in self._phrases}
        self._total = 0
        try:
            raw = self._storage.get_item(self._key)
            if raw is None:
                logger.info("No saved counters under %r; starting from zero", self._key)
                return
            counts, stored_total = decode_record(raw, self._phrases)
        except LoadFailure as e:
            logger.warning("Failed to load counters, using defaults: %s", e)
            return

        self._counts = counts
        self._total = sum(counts.values())
        if stored_total is not None and stored_total != self._total:
            logger.warning(
                "Stored total %d disagrees with counts (sum %d); using the sum",
                stored_total, self._total,
            )
        logger.info("Loaded counters, total %d", self._total)

    def persist(self) -> bool:
        """
        Purpose: Write {counts, totalCount, lastUpdated} to storage.
        Outputs: True if written; False if storage rejected the write (state stays in memory).
        """
        record = encode_record(self._counts, self._total, self._clock())
        try:
            self._storage.set_item(self._key, record)
        except PersistFailure as e:
            logger.warning("Failed to save counters, keeping them in memory only: %s", e)
            return False
        return True

    # -------- Mutations --------

    def increment(self, phrase: str) -> Optional[int]:
        """
        Purpose: Add one to a phrase tally and to the total, then persist.
        Outputs: New count for the phrase; None (and no change) for unknown phrases.
        """
        if phrase not in self._counts:
            logger.debug("Ignoring increment of unknown phrase %r", phrase)
            return None
        self._counts[phrase] += 1
        self._total += 1
        self.persist()
        return self._counts[phrase]

    def reset_all(self) -> None:
        """
        Purpose: Zero every tally and the total, then persist.
        The caller must have obtained confirmation; the store never prompts.
        """
        for phrase in self._counts:
            self._counts[phrase] = 0
        self._total = 0
        self.persist()
        logger.info("All counters reset")

    # -------- Snapshots for safe reading --------

    def snapshot(self) -> Snapshot:
        return Snapshot(counts=self._counts, total=self._total)
