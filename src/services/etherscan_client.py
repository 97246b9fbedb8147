from __future__ import annotations

import logging
from datetime import datetime, timezone
from decimal import Decimal
from typing import Any

import requests
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from requests import Response

logger = logging.getLogger(__name__)

# API docs: https://docs.etherscan.io/etherscan-v2 (V1 endpoints are retired; V2 needs chainid)
#           https://docs.etherscan.io/api-endpoints/gas-tracker
#           https://docs.etherscan.io/api-endpoints/stats-1


class EtherscanAPIError(Exception):
    def __init__(self, message: str, *, status_code: int | None = None, payload: Any | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.payload = payload


class GasOracle(BaseModel):
    """Gas prices in gwei as reported by the gas tracker."""

    model_config = ConfigDict(frozen=True)

    safe_gas_price: Decimal = Field(alias="SafeGasPrice", ge=0)
    propose_gas_price: Decimal | None = Field(default=None, alias="ProposeGasPrice", ge=0)
    fast_gas_price: Decimal | None = Field(default=None, alias="FastGasPrice", ge=0)
    suggested_base_fee: Decimal | None = Field(default=None, alias="suggestBaseFee", ge=0)
    last_block: int | None = Field(default=None, alias="LastBlock")


class EthPrice(BaseModel):
    model_config = ConfigDict(frozen=True)

    eth_usd: Decimal = Field(alias="ethusd", ge=0)
    eth_btc: Decimal | None = Field(default=None, alias="ethbtc", ge=0)
    eth_usd_timestamp: datetime | None = Field(default=None, alias="ethusd_timestamp")

    @field_validator("eth_usd_timestamp", mode="before")
    @classmethod
    def _parse_timestamp(cls, value: Any) -> datetime | None:
        if value is None or isinstance(value, datetime):
            return value
        if isinstance(value, bool) or not isinstance(value, (str, int)):
            raise ValueError(f"ethusd_timestamp must be a unix timestamp, got {type(value).__name__}")
        try:
            return datetime.fromtimestamp(int(value), tz=timezone.utc)
        except (OverflowError, OSError) as exc:
            raise ValueError(f"ethusd_timestamp out of range: {value!r}") from exc


class EtherscanClient:
    """Minimal Etherscan client covering the gas oracle and ether price endpoints."""

    def __init__(
        self,
        *,
        base_url: str = "https://api.etherscan.io/v2/api",
        chain_id: int = 1,
        timeout: float = 10.0,
        session: requests.Session | None = None,
    ) -> None:
        if timeout <= 0:
            msg = "timeout must be > 0"
            raise ValueError(msg)

        self.base_url = base_url.rstrip("/")
        self.chain_id = chain_id
        self.timeout = timeout
        self._session = session or requests.Session()

    def get_gas_oracle(self, *, api_key: str) -> GasOracle:
        result = self._request(module="gastracker", action="gasoracle", api_key=api_key)
        try:
            return GasOracle.model_validate(result)
        except ValidationError as exc:
            raise EtherscanAPIError("Etherscan gas oracle payload is malformed", payload=result) from exc

    def get_eth_price(self, *, api_key: str) -> EthPrice:
        result = self._request(module="stats", action="ethprice", api_key=api_key)
        try:
            return EthPrice.model_validate(result)
        except ValidationError as exc:
            raise EtherscanAPIError("Etherscan ether price payload is malformed", payload=result) from exc

    def _request(self, *, module: str, action: str, api_key: str) -> dict[str, Any]:
        params = {"chainid": self.chain_id, "module": module, "action": action, "apikey": api_key}
        logger.debug("Etherscan request %s/%s", module, action)
        try:
            response = self._session.request("GET", self.base_url, params=params, timeout=self.timeout)
            response.raise_for_status()
        except requests.HTTPError as exc:
            resp = exc.response
            raise EtherscanAPIError(
                "Etherscan request failed",
                status_code=getattr(resp, "status_code", None),
                payload=self._extract_payload(resp),
            ) from exc
        except requests.RequestException as exc:
            status_code = getattr(getattr(exc, "response", None), "status_code", None)
            raise EtherscanAPIError("Etherscan request failed", status_code=status_code) from exc

        try:
            payload = response.json()
        except ValueError as exc:
            raise EtherscanAPIError("Etherscan returned invalid JSON", payload=response.text) from exc

        if not isinstance(payload, dict):
            raise EtherscanAPIError("Etherscan returned unexpected payload type", payload=payload)

        # Errors come back as HTTP 200 with status "0" and the reason in "result".
        if str(payload.get("status")) != "1":
            result = payload.get("result")
            message = result if isinstance(result, str) and result else payload.get("message") or "Etherscan error"
            raise EtherscanAPIError(str(message), status_code=response.status_code, payload=payload)

        result = payload.get("result")
        if not isinstance(result, dict):
            raise EtherscanAPIError("Etherscan payload missing result object", payload=payload)
        return result

    @staticmethod
    def _extract_payload(response: Response | None) -> Any:
        if response is None:
            return None
        try:
            return response.json()
        except ValueError:
            return response.text


__all__ = ["EthPrice", "EtherscanAPIError", "EtherscanClient", "GasOracle"]
