from __future__ import annotations

import logging
from datetime import datetime, timezone

from config import config
from domain.errors import NotInitialized, OracleUnavailable

from .etherscan_client import EtherscanAPIError, EtherscanClient
from .rate_types import RateSnapshot

logger = logging.getLogger(__name__)


class RateSource:
    """Captures the live gas price and ether price once per session.

    The source starts uninitialized. ``initialize`` performs both oracle reads and
    only publishes a snapshot once both succeeded; a failed attempt leaves the
    previous state untouched.
    """

    def __init__(
        self,
        *,
        client: EtherscanClient | None = None,
        source_name: str = "etherscan",
    ) -> None:
        if client is None:
            settings = config()
            client = EtherscanClient(
                base_url=settings.etherscan_base_url,
                chain_id=settings.etherscan_chain_id,
                timeout=settings.etherscan_timeout_seconds,
            )
        self.client = client
        self.source_name = source_name
        self._snapshot: RateSnapshot | None = None

    @property
    def is_initialized(self) -> bool:
        return self._snapshot is not None

    def initialize(self, api_key: str | None = None) -> RateSnapshot:
        key = config().etherscan_api_key if api_key is None else api_key
        if not key:
            msg = "api_key must be provided"
            raise ValueError(msg)

        try:
            gas_oracle = self.client.get_gas_oracle(api_key=key)
            eth_price = self.client.get_eth_price(api_key=key)
        except EtherscanAPIError as exc:
            logger.warning("Rate oracle %s unavailable: %s", self.source_name, exc)
            raise OracleUnavailable(f"Rate oracle {self.source_name} unavailable: {exc}") from exc

        snapshot = RateSnapshot(
            fee_rate=gas_oracle.safe_gas_price,
            exchange_rate=eth_price.eth_usd,
            fetched_at=datetime.now(timezone.utc),
            source=self.source_name,
        )
        self._snapshot = snapshot
        logger.info(
            "Captured rates from %s: gas %s gwei, ether US$ %s",
            self.source_name,
            snapshot.fee_rate,
            snapshot.exchange_rate,
        )
        return snapshot

    def current_snapshot(self) -> RateSnapshot:
        if self._snapshot is None:
            raise NotInitialized("Rate source has not been initialized; call initialize() first")
        return self._snapshot


__all__ = ["RateSource"]
