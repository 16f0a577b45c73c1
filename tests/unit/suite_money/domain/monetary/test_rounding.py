from __future__ import annotations

from decimal import Decimal

import pytest

from suite_money.domain.monetary.rounding import RoundingMode, quantum, round_to_exponent


def test_quantum() -> None:
    assert quantum(0) == Decimal("1")
    assert quantum(2) == Decimal("0.01")
    assert quantum(3) == Decimal("0.001")


def test_round_to_exponent_zero_digits() -> None:
    assert round_to_exponent(Decimal("2.5"), 0, RoundingMode.HALF_EVEN) == Decimal("2")
    assert round_to_exponent(Decimal("2.5"), 0, RoundingMode.HALF_UP) == Decimal("3")


def test_round_to_exponent_keeps_long_integer_part() -> None:
    value = Decimal("1" * 40 + ".555")
    assert round_to_exponent(value, 2, RoundingMode.HALF_UP) == Decimal("1" * 40 + ".56")


def test_round_to_exponent_rejects_non_mode() -> None:
    with pytest.raises(TypeError):
        round_to_exponent(Decimal("1"), 2, "HALF_UP")
