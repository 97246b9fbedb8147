from __future__ import annotations

from decimal import Decimal
from unittest.mock import Mock

import pytest

from config import config
from domain.errors import NotInitialized, OracleUnavailable, UnknownOperation
from domain.usage import AttributeOperations
from services.etherscan_client import EtherscanClient
from services.gas_report_session import GasReportSession
from services.rate_source import RateSource
from tests.helpers.gas_helpers import StubToken, TableUsageEstimator


def _response(payload: dict) -> Mock:
    response = Mock()
    response.status_code = 200
    response.json.return_value = payload
    response.raise_for_status.return_value = None
    return response


def _etherscan_session(gas_price: str = "50", eth_price: str = "2000") -> Mock:
    session = Mock()
    session.request.side_effect = [
        _response({"status": "1", "message": "OK", "result": {"SafeGasPrice": gas_price}}),
        _response({"status": "1", "message": "OK", "result": {"ethusd": eth_price}}),
    ]
    return session


def test_full_report_run(capsys: pytest.CaptureFixture[str]) -> None:
    http = _etherscan_session()
    session = GasReportSession(RateSource(client=EtherscanClient(session=http)))
    token = StubToken()
    instance = AttributeOperations(token)
    usage = TableUsageEstimator(
        units={"Token": 1_200_000, token.transfer: 51_000, token.balanceOf: 24_000},
    )

    snapshot = session.start("token")
    session.deploy(usage, "Token", config().token().constructor_args())
    session.call(usage, instance, "transfer", ["0xrecipient", 1000])
    session.call(usage, instance, "balanceOf", ["0xdeployer"])
    session.summary()

    assert snapshot.fee_rate == Decimal("50")
    assert [p.label for p in session.projections] == ["deploy", "transfer", "balanceOf"]
    assert [p.usage_units for p in session.projections] == [1_200_000, 51_000, 24_000]
    assert session.projections[0].fiat_cost == Decimal("120")
    assert http.request.call_count == 2

    out = capsys.readouterr().out
    assert out.startswith("Current rates\n")
    assert "Deploy Cost" in out
    assert "Method: transfer" in out
    assert "Method: balanceOf" in out
    assert "Estimated costs (USD):" in out


def test_estimates_before_start_raise_and_record_nothing(capsys: pytest.CaptureFixture[str]) -> None:
    http = Mock()
    session = GasReportSession(RateSource(client=EtherscanClient(session=http)))
    usage = TableUsageEstimator(units={"Token": 1})

    with pytest.raises(NotInitialized):
        session.deploy(usage, "Token", [])

    assert session.projections == ()
    assert not session.rate_source.is_initialized
    assert usage.calls == []
    http.request.assert_not_called()
    assert capsys.readouterr().out == ""


def test_oracle_failure_propagates_without_report(capsys: pytest.CaptureFixture[str]) -> None:
    http = _etherscan_session(eth_price="n/a")
    session = GasReportSession(RateSource(client=EtherscanClient(session=http)))

    with pytest.raises(OracleUnavailable):
        session.start("token")

    assert capsys.readouterr().out == ""


def test_unknown_operation_makes_no_network_calls() -> None:
    http = _etherscan_session()
    session = GasReportSession(RateSource(client=EtherscanClient(session=http)))
    session.start("token")
    http.request.reset_mock()

    with pytest.raises(UnknownOperation):
        session.call(TableUsageEstimator(units={}), AttributeOperations(StubToken()), "approve", [])

    http.request.assert_not_called()
    assert session.projections == ()
