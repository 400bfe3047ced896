# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
import os
import time

import pytest
from fastapi.testclient import TestClient

# Set test environment before importing app
os.environ["ROSTER_LOAD_SAMPLE_DATA"] = "false"

from roster.config import Settings
from roster.context import RosterContext, build_context
from roster.main import create_app
from roster.services.date_store import DateStore
from roster.services.member_store import MemberStore


@pytest.fixture
def context() -> RosterContext:
    """Create fresh, empty stores for each test."""
    return build_context()


@pytest.fixture
def member_store(context) -> MemberStore:
    return context.members


@pytest.fixture
def date_store(context) -> DateStore:
    return context.dates


@pytest.fixture(scope="function")
def client():
    """Create a test client backed by empty stores."""
    app = create_app(Settings(load_sample_data=False))
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture(scope="function")
def seeded_client():
    """Create a test client whose stores hold the sample data."""
    app = create_app(Settings(load_sample_data=True))
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def pacific_time(monkeypatch):
    """Run the test with the process-local timezone set to US Pacific."""
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset is not available on this platform")
    monkeypatch.setenv("TZ", "PST8PDT,M3.2.0,M11.1.0")
    time.tzset()
    yield
    monkeypatch.undo()
    time.tzset()
