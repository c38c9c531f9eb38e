"""Shared test fixtures: fake HTTP sessions, stub providers and an in-memory record store."""

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from nladdress.db.database import Base, BusinessDB
from nladdress.db.store import GeocodeRecordStore
from nladdress.providers.base import NoMatch


class FakeResponse:
    """Minimal stand-in for requests.Response."""

    def __init__(self, status_code=200, payload=None, invalid_json=False):
        self.status_code = status_code
        self._payload = payload
        self._invalid_json = invalid_json

    def json(self):
        if self._invalid_json:
            raise ValueError("Expecting value: line 1 column 1 (char 0)")
        return self._payload


class FakeSession:
    """
    Replays queued responses (or raises queued exceptions) in order and
    records every call made through it.
    """

    def __init__(self, *responses):
        self._responses = list(responses)
        self.calls = []

    def get(self, url, **kwargs):
        self.calls.append({"url": url, **kwargs})
        if not self._responses:
            raise AssertionError(f"Unexpected request to {url}")
        item = self._responses.pop(0)
        if isinstance(item, Exception):
            raise item
        return item


class StubProvider:
    """Provider double returning a fixed ProviderResult and counting calls."""

    def __init__(self, name, result=None, configured=True):
        self.name = name
        self.result = result if result is not None else NoMatch(name)
        self.configured = configured
        self.calls = 0
        self.queries = []

    def is_configured(self):
        return self.configured

    def resolve(self, query):
        self.calls += 1
        self.queries.append(query)
        return self.result


class MappingGeocoder:
    """Geocoder double: address text -> ProviderResult, in call order."""

    name = "stub-geocoder"

    def __init__(self, results):
        self.results = results
        self.calls = []

    def resolve(self, address):
        self.calls.append(address)
        result = self.results[address]
        if isinstance(result, Exception):
            raise result
        return result


@pytest.fixture()
def fake_session():
    def _make(*responses):
        return FakeSession(*responses)

    return _make


@pytest.fixture()
def session_factory():
    """Fresh in-memory SQLite database with the businesses table."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    factory = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    yield factory
    engine.dispose()


@pytest.fixture()
def seed(session_factory):
    def _seed(*rows):
        db = session_factory()
        for row in rows:
            db.add(BusinessDB(**row))
        db.commit()
        db.close()

    return _seed


@pytest.fixture()
def store(session_factory):
    return GeocodeRecordStore(session_factory)


@pytest.fixture()
def fetch_record(session_factory):
    def _fetch(record_id):
        db = session_factory()
        try:
            return db.query(BusinessDB).filter(BusinessDB.id == record_id).one()
        finally:
            db.close()

    return _fetch
