"""
Shared fixtures for the trip calculator tests.

Copyright (c) 2026 Andreas Wagner. All rights reserved.
"""

import os
import tempfile

import pytest

from calculators.trip_models import TripInputs, FlatAmount, PerKmRate
from core.blob_store import MemoryBlobStore, SQLiteBlobStore


@pytest.fixture
def scenario_a():
    """500 km, 2000 PLN flat freight, Polish tax residency, default costs."""
    return TripInputs(distance_km=500.0, revenue=FlatAmount(2000.0))


@pytest.fixture
def scenario_b():
    """Same trip as scenario A, priced at 4 PLN per km."""
    return TripInputs(distance_km=500.0, revenue=PerKmRate(4.0))


@pytest.fixture
def memory_store():
    return MemoryBlobStore()


@pytest.fixture
def sqlite_store():
    """Plain (unencrypted) SQLite blob store in a temporary directory."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield SQLiteBlobStore(db_path=os.path.join(tmpdir, "test_trips.db"))
