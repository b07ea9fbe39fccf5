import pytest

from monefy.exercises.interest import (
    annual_balance_update,
    interest,
    interest_rate,
    years_before_desired_balance,
)

THRESHOLD = 1e-5


def approx(want):
    return pytest.approx(want, rel=THRESHOLD, abs=THRESHOLD)


@pytest.mark.parametrize(
    "balance, want",
    [
        (0, 0.5),
        (0.000001, 0.5),
        (999.9999, 0.5),
        (1000.0, 1.621),
        (1000.0001, 1.621),
        (4999.9990, 1.621),
        (5000.0000, 2.475),
        (5000.0001, 2.475),
        (5639998.742909, 2.475),
        (-0.000001, 3.213),
        (-0.123, 3.213),
        (-300.0, 3.213),
        (-152964.231, 3.213),
    ],
)
def test_interest_rate(balance, want):
    assert interest_rate(balance) == approx(want)


@pytest.mark.parametrize(
    "balance, want",
    [
        (-10000.0, -321.3),
        (555.55, 2.77775),
        (4999.99, 81.0498379),
        (34600.80, 856.369767),
    ],
)
def test_interest(balance, want):
    assert interest(balance) == approx(want)


@pytest.mark.parametrize(
    "balance, want",
    [
        (0.0, 0.0),
        (0.000001, 0.000001005),
        (1000.0, 1016.21),
        (1000.0001, 1016.210101621),
        (898124017.826243404425, 920352586.410925),
        (-0.123, -0.12695199),
        (-152964.231, -157878.971832),
    ],
)
def test_annual_balance_update(balance, want):
    assert annual_balance_update(balance) == approx(want)


@pytest.mark.parametrize(
    "balance, target, want",
    [
        (100.0, 125.80, 47),
        (1000.0, 1100.0, 6),
        (8080.80, 9090.90, 5),
        (2345.67, 12345.6789, 85),
    ],
)
def test_years_before_desired_balance(balance, target, want):
    assert years_before_desired_balance(balance, target) == want


def test_years_when_target_already_reached():
    assert years_before_desired_balance(500.0, 400.0) == 0


@pytest.mark.parametrize("balance", [0.0, -100.0])
def test_years_unreachable_target(balance):
    with pytest.raises(ValueError):
        years_before_desired_balance(balance, 1000.0)