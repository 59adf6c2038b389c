"""Unit tests for debt repayment ordering and net worth"""

import pytest
from finwell_gateway.domain.models import Debt
from finwell_gateway.domain.debts import (
    NO_DEBTS_MESSAGE,
    build_debt_strategy,
    highest_interest_debt,
    rank_debts,
)
from finwell_gateway.domain.net_worth import calculate_net_worth


@pytest.fixture
def debts() -> list[Debt]:
    return [
        Debt("Student Loan", monthly_payment=800, interest_rate=7.0),
        Debt("Credit Card", monthly_payment=1500, interest_rate=22.0),
        Debt("Store Card", monthly_payment=300, interest_rate=22.0),
        Debt("Car Loan", monthly_payment=3000, interest_rate=11.5),
        Debt("Family Loan", monthly_payment=300),
    ]


def test_avalanche_orders_by_rate_descending(debts):
    ordered = rank_debts(debts, "avalanche")

    rates = [d.interest_rate for d in ordered]
    assert rates == sorted(rates, reverse=True)
    # Equal rates keep input order
    assert [d.name for d in ordered[:2]] == ["Credit Card", "Store Card"]
    assert ordered[-1].name == "Family Loan"


def test_snowball_orders_by_payment_ascending(debts):
    ordered = rank_debts(debts, "snowball")

    payments = [d.monthly_payment for d in ordered]
    assert payments == sorted(payments)
    assert [d.name for d in ordered[:2]] == ["Store Card", "Family Loan"]


def test_strategy_defaults_to_avalanche(debts):
    assert rank_debts(debts) == rank_debts(debts, "avalanche")
    assert rank_debts(debts, None) == rank_debts(debts, "avalanche")


def test_unknown_strategy_rejected(debts):
    with pytest.raises(ValueError):
        rank_debts(debts, "highest-balance")


def test_rank_debts_does_not_mutate_input(debts):
    names = [d.name for d in debts]
    rank_debts(debts, "snowball")
    assert [d.name for d in debts] == names


def test_build_debt_strategy(debts):
    result = build_debt_strategy("Sipho", debts, "snowball")

    assert result.strategy == "snowball"
    assert result.recommended_order[0] == "Store Card"
    assert result.total_monthly_payments == 5900
    assert result.message is None


def test_build_debt_strategy_no_debts():
    result = build_debt_strategy("Lerato", [])

    assert result.strategy == "avalanche"
    assert result.recommended_order == []
    assert result.total_monthly_payments == 0
    assert result.message == NO_DEBTS_MESSAGE


def test_highest_interest_debt_first_seen_wins(debts):
    assert highest_interest_debt(debts).name == "Credit Card"
    assert highest_interest_debt([]) is None


def test_highest_interest_debt_all_zero_rates_picks_first():
    debts = [Debt("A", 100), Debt("B", 200)]
    assert highest_interest_debt(debts).name == "A"


def test_net_worth_status():
    assert calculate_net_worth([500000, 20000], [150000]).status == "positive"
    assert calculate_net_worth([1000], [5000]).status == "negative"
    assert calculate_net_worth([], []).status == "balanced"

    summary = calculate_net_worth([500000, 20000], [150000, 70000])
    assert summary.total_assets == 520000
    assert summary.total_liabilities == 220000
    assert summary.net_worth == 300000
