"""
Trip History Store

Persistent, ordered collection of saved trips.

- Newest trip first; new trips are prepended
- Trip ids are unique; a duplicate id is a programming error and fails hard
- The whole collection is serialized to JSON and rewritten on every change
- Unreadable stored data loads as an empty history and is overwritten by
  the next save

Copyright (c) 2026 Andre. All rights reserved.
"""

import json
import time
import uuid
from typing import Iterable, List, Optional

from calculators.trip_models import TripInputs, TripRecord, TripSummary, CalculationResults, Currency
from core.blob_store import BlobStore, BlobDecryptionError
from utils.logging_config import setup_logger, get_perf_logger

logger = setup_logger(__name__)

# Storage key of the trip history (unchanged since the first release)
SAVED_TRIPS_KEY = "transportCalculator_savedTrips"


class DuplicateTripIdError(Exception):
    """Raised when a trip with the same id is already in the history."""


def new_trip_id(created_at_epoch_ms: int) -> str:
    """Creation-time based id with a random suffix, e.g. '1718000000000-3f2a9c1e'."""
    return f"{created_at_epoch_ms}-{uuid.uuid4().hex[:8]}"


def create_trip_record(
    inputs: TripInputs,
    results: CalculationResults,
    display_currency: Currency,
    trip_date: Optional[str] = None,
    created_at_epoch_ms: Optional[int] = None,
) -> TripRecord:
    """
    Build a new history record from the current inputs and results.

    The stored profit is always in PLN; display_currency records which
    currency the user was looking at when saving.
    """
    if created_at_epoch_ms is None:
        created_at_epoch_ms = int(time.time() * 1000)

    return TripRecord(
        id=new_trip_id(created_at_epoch_ms),
        created_at_epoch_ms=created_at_epoch_ms,
        trip_date=trip_date or None,
        inputs=inputs,
        summary=TripSummary(total_net_profit=results.total_net_profit, currency=Currency(display_currency)),
    )


class TripStore:
    """
    Trip history backed by a blob store.

    Features:
    - append / delete_by_id / replace_all, each rewriting the whole collection
    - load_all returning records newest-first
    - Tolerant loading: corrupt data means an empty history, corrupt
      individual entries are skipped
    """

    def __init__(self, blob_store: BlobStore, key: str = SAVED_TRIPS_KEY):
        """
        Args:
            blob_store: Backing storage
            key: Storage key of the collection
        """
        self.blob_store = blob_store
        self.key = key

    def load_all(self) -> List[TripRecord]:
        """
        Load the full history.

        Returns:
            Records in stored (newest-first) order; empty if nothing is
            stored or the stored data is unreadable
        """
        with get_perf_logger(logger, "load trip history", threshold_ms=500):
            try:
                raw = self.blob_store.read(self.key)
            except BlobDecryptionError as e:
                logger.warning(f"Trip history could not be decrypted, starting empty: {e}")
                return []

            if not raw:
                return []

            try:
                payload = json.loads(raw)
            except json.JSONDecodeError as e:
                logger.warning(f"Trip history is not valid JSON, starting empty: {e}")
                return []

            if not isinstance(payload, list):
                logger.warning(f"Trip history has unexpected type {type(payload).__name__}, starting empty")
                return []

            records = []
            seen_ids = set()
            for index, entry in enumerate(payload):
                try:
                    record = TripRecord.from_dict(entry)
                except (ValueError, TypeError, KeyError) as e:
                    logger.warning(f"Skipping unreadable trip at position {index}: {e}")
                    continue

                if record.id in seen_ids:
                    logger.warning(f"Skipping repeated trip id {record.id} at position {index}")
                    continue

                seen_ids.add(record.id)
                records.append(record)

        logger.debug(f"Loaded {len(records)} trips")
        return records

    def append(self, record: TripRecord) -> None:
        """
        Add a record at the front of the history.

        Raises:
            DuplicateTripIdError: If a record with the same id already exists
        """
        records = self.load_all()

        if any(existing.id == record.id for existing in records):
            raise DuplicateTripIdError(f"Trip id already in history: {record.id}")

        self._write([record] + records)
        logger.info(f"Trip saved: {record.id} ({len(records) + 1} in history)")

    def delete_by_id(self, trip_id: str) -> bool:
        """
        Remove the record with this id.

        Returns:
            True if a record was removed, False if there was none
        """
        records = self.load_all()
        remaining = [record for record in records if record.id != trip_id]

        if len(remaining) == len(records):
            logger.debug(f"Delete ignored, no trip with id {trip_id}")
            return False

        self._write(remaining)
        logger.info(f"Trip deleted: {trip_id}")
        return True

    def replace_all(self, records: Iterable[TripRecord]) -> None:
        """
        Replace the whole history.

        Raises:
            DuplicateTripIdError: If the new collection repeats an id
        """
        records = list(records)
        ids = [record.id for record in records]
        if len(ids) != len(set(ids)):
            raise DuplicateTripIdError("Trip history cannot contain repeated ids")

        self._write(records)
        logger.info(f"Trip history replaced ({len(records)} trips)")

    def clear(self) -> None:
        self.replace_all([])

    def _write(self, records: List[TripRecord]) -> None:
        payload = json.dumps([record.to_dict() for record in records], ensure_ascii=False)
        self.blob_store.write(self.key, payload)
