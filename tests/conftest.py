from collections.abc import Generator

import pytest

from src.core.patterns.singleton import Singleton
from src.main.config import get_settings


@pytest.fixture(autouse=True)
def _reset_singletons() -> Generator[None]:
    Singleton.reset_instances()
    yield
    Singleton.reset_instances()


@pytest.fixture(autouse=True)
def _reset_settings_cache() -> Generator[None]:
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
