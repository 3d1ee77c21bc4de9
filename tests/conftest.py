"""Pytest config: project root on sys.path plus shared storage fixtures.

Running pytest from another working directory would otherwise fail with
"No module named 'tasbih'" when the package is not installed.
"""
import os
import sys
from datetime import datetime, timezone

import pytest

_HERE = os.path.dirname(__file__)
PROJECT_ROOT = os.path.abspath(os.path.join(_HERE, ".."))

if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from tasbih.storage import JsonFileStorage, MemoryStorage  # noqa: E402

FIXED_NOW = datetime(2026, 10, 18, 9, 30, 15, 123000, tzinfo=timezone.utc)


@pytest.fixture
def memory_storage():
    return MemoryStorage()


@pytest.fixture
def file_storage(tmp_path):
    return JsonFileStorage(tmp_path / "tasbih_storage.json")


@pytest.fixture
def clock():
    return lambda: FIXED_NOW
