from __future__ import annotations

from functools import cache
from typing import Any

from pydantic import BaseModel
from pydantic_settings import BaseSettings, SettingsConfigDict


class TokenDeploySettings(BaseModel):
    name: str
    symbol: str
    initial_supply: int
    max_supply: int
    transaction_fee: int

    def constructor_args(self) -> list[Any]:
        return [self.name, self.symbol, self.initial_supply, self.max_supply, self.transaction_fee]


class AppSettings(BaseSettings):
    etherscan_api_key: str = ""
    etherscan_base_url: str = "https://api.etherscan.io/v2/api"
    etherscan_chain_id: int = 1
    etherscan_timeout_seconds: float = 10.0

    token_name: str = "Token"
    token_symbol: str = "TKN"
    token_initial_supply: int = 10 * 10**18
    token_max_supply: int = 100 * 10**18
    token_transaction_fee: int = 10

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    def token(self) -> TokenDeploySettings:
        return TokenDeploySettings(
            name=self.token_name,
            symbol=self.token_symbol,
            initial_supply=self.token_initial_supply,
            max_supply=self.token_max_supply,
            transaction_fee=self.token_transaction_fee,
        )


@cache
def config() -> AppSettings:
    return AppSettings()
