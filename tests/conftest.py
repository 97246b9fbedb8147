from decimal import Decimal
from typing import Generator

import pytest

from config import config
from tests.helpers.gas_helpers import StubRateProvider, StubRates


@pytest.fixture(autouse=True)
def _reset_config_cache() -> Generator[None, None, None]:
    config.cache_clear()
    yield
    config.cache_clear()


@pytest.fixture(scope="function")
def rates() -> StubRates:
    return StubRates(fee_rate=Decimal("50"), exchange_rate=Decimal("2000"))


@pytest.fixture(scope="function")
def rate_provider(rates: StubRates) -> StubRateProvider:
    return StubRateProvider(rates)
