import pytest

from order_engine.config import Settings
from order_engine.facade import OrderFacade
from order_engine.reporting import RecordingReporter
from order_engine.store import OrderStore


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None)


@pytest.fixture
def reporter() -> RecordingReporter:
    return RecordingReporter()


@pytest.fixture
def store() -> OrderStore:
    return OrderStore()


@pytest.fixture
def facade(reporter, store, settings) -> OrderFacade:
    return OrderFacade(reporter, store=store, settings=settings)
