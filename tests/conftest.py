"""Pytest configuration and shared fixtures."""

import csv
from pathlib import Path

import pytest

from psprofile.models.row import Row
from psprofile.server.app import create_app
from psprofile.server.assets import MemoryAssetProvider
from psprofile.service.store.row_store import RowStore
from tests.helpers import at


@pytest.fixture
def sample_rows():
    return [
        Row(date=at("10:00:00"), cpu_percent=5.0, mem_percent=2.0, process="myproc"),
        Row(date=at("11:00:00"), cpu_percent=3.0, mem_percent=1.0, process="other proc"),
        Row(date=at("11:00:05"), cpu_percent=120.5, mem_percent=12.25, process='python3 -c "print(1, 2)"'),
    ]


@pytest.fixture
def profile_path(tmp_path: Path) -> Path:
    return tmp_path / "profile.csv"


@pytest.fixture
def store(profile_path: Path) -> RowStore:
    return RowStore(profile_path)


@pytest.fixture
def assets():
    return MemoryAssetProvider({
        "index.html": b"<html><body>chart</body></html>",
        "chart.js": b"console.log('chart');",
    })


@pytest.fixture
def client(store, assets):
    app = create_app(store, assets)
    app.config["TESTING"] = True
    return app.test_client()


@pytest.fixture
def csv_field_limit():
    """Temporarily lower the csv field size limit to the given value."""
    original = csv.field_size_limit()

    def lower(limit: int) -> None:
        csv.field_size_limit(limit)

    yield lower
    csv.field_size_limit(original)


@pytest.fixture
def capture_logger(caplog):
    """Attach caplog to a package logger (they do not propagate to the root)."""
    attached = []

    def attach(logger):
        logger.addHandler(caplog.handler)
        attached.append(logger)
        return caplog

    yield attach
    for logger in attached:
        logger.removeHandler(caplog.handler)
