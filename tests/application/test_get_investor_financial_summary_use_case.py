"""Tests for the GetInvestorFinancialSummaryUseCase."""

from decimal import Decimal
from unittest.mock import MagicMock

from src.application.use_cases.get_investor_financial_summary import (
    GetInvestorFinancialSummaryUseCase,
)
from src.application.use_cases.request_cache import RequestCache


def test_execute_returns_sorted_summaries(fleet_store) -> None:
    """Investors are summarized and sorted by net balance."""
    use_case = GetInvestorFinancialSummaryUseCase(fleet_store, logger=MagicMock())

    result = use_case.execute()

    assert not result.degraded
    assert [summary.investor_id for summary in result.value] == ["ana", "beto"]
    ana, beto = result.value
    assert ana.total_income == Decimal("1050")
    assert ana.total_expenses == Decimal("200")
    assert ana.net_balance == Decimal("850")
    assert ana.vehicle_count == 1
    assert beto.vehicle_count == 0
    assert beto.net_balance == Decimal("0")
    assert beto.last_transaction_date is None


def test_execute_filters_by_investor(fleet_store) -> None:
    """A given investor id restricts the output to that investor."""
    use_case = GetInvestorFinancialSummaryUseCase(fleet_store, logger=MagicMock())

    result = use_case.execute(investor_id="beto")

    assert [summary.investor_id for summary in result.value] == ["beto"]
    assert ("list_investors", ("investor", "beto")) in fleet_store.calls


def test_investor_fetch_failure_returns_empty_result(fleet_store) -> None:
    """A failed investor read yields no summaries and a warning."""
    fleet_store.failing.add("list_investors")
    logger = MagicMock()
    use_case = GetInvestorFinancialSummaryUseCase(fleet_store, logger=logger)

    result = use_case.execute()

    assert result.value == []
    assert result.degraded
    assert result.warnings[0].startswith("Error fetching investors:")
    logger.error.assert_called_once()
    assert fleet_store.count("list_vehicles") == 0


def test_vehicle_fetch_failure_degrades_to_zero_totals(fleet_store) -> None:
    """Without vehicles every investor is still listed with zeros."""
    fleet_store.failing.add("list_vehicles")
    use_case = GetInvestorFinancialSummaryUseCase(fleet_store, logger=MagicMock())

    result = use_case.execute()

    assert result.degraded
    assert len(result.value) == 2
    assert all(summary.vehicle_count == 0 for summary in result.value)
    assert all(summary.net_balance == Decimal("0") for summary in result.value)
    assert fleet_store.count("list_financial_records") == 0


def test_records_fetch_failure_keeps_vehicle_counts(fleet_store) -> None:
    """Missing records zero the totals but keep the vehicles."""
    fleet_store.failing.add("list_financial_records")
    use_case = GetInvestorFinancialSummaryUseCase(fleet_store, logger=MagicMock())

    result = use_case.execute()

    ana = next(s for s in result.value if s.investor_id == "ana")
    assert ana.vehicle_count == 1
    assert ana.total_income == Decimal("0")
    assert result.warnings == (
        "Error fetching financial records: list_financial_records unavailable",
    )


def test_execute_is_idempotent(fleet_store) -> None:
    """Two runs over unchanged data produce equal output."""
    use_case = GetInvestorFinancialSummaryUseCase(fleet_store, logger=MagicMock())

    assert use_case.execute().value == use_case.execute().value


def test_shared_cache_avoids_repeated_reads(fleet_store) -> None:
    """A shared RequestCache serves the second run without store calls."""
    use_case = GetInvestorFinancialSummaryUseCase(fleet_store, logger=MagicMock())
    cache = RequestCache()

    first = use_case.execute(cache=cache)
    calls_after_first = len(fleet_store.calls)
    second = use_case.execute(cache=cache)

    assert first.value == second.value
    assert len(fleet_store.calls) == calls_after_first
    assert cache.hits == 3
