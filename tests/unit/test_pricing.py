"""Unit tests for subscription price computation."""

import pytest
from libs.common.errors import InvalidRequestError
from services.orders_service.services.pricing import (
    compute_final_price,
    describe_duration,
    duration_discount,
)


@pytest.mark.unit
def test_three_months_gets_fifteen_percent_off():
    assert compute_final_price(6000, 3) == 15300


@pytest.mark.unit
@pytest.mark.parametrize(
    "months,expected",
    [(1, 6000), (6, 29520), (12, 57600)],
)
def test_duration_tiers(months, expected):
    assert compute_final_price(6000, months) == expected


@pytest.mark.unit
def test_promo_applies_after_duration_discount():
    # 6000 * 3 * 0.85 * 0.9
    assert compute_final_price(6000, 3, promo_percentage=10) == 13770


@pytest.mark.unit
def test_full_promo_makes_order_free():
    assert compute_final_price(6000, 12, promo_percentage=100) == 0


@pytest.mark.unit
def test_rounds_half_up():
    # 4999 * 0.85 = 4249.15 * 3 months -> 12747.45 -> 12747
    assert compute_final_price(4999, 3) == 12747
    # 5 * 0.9 = 4.5 -> 5
    assert compute_final_price(5, 1, promo_percentage=10) == 5


@pytest.mark.unit
def test_unsupported_duration_is_rejected():
    with pytest.raises(InvalidRequestError) as exc_info:
        duration_discount(2)
    assert exc_info.value.status_code == 400
    assert "allowed: 1, 3, 6, 12" in exc_info.value.detail


@pytest.mark.unit
def test_describe_duration():
    assert describe_duration(1) == "1 Month"
    assert describe_duration(6) == "6 Months"
    assert describe_duration(12) == "1 Year"
