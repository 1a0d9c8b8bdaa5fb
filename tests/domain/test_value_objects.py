"""Unit tests for domain value objects and lenient numeric parsing."""

from decimal import Decimal

import pytest

from ecomarket.domain.exceptions import ValidationError
from ecomarket.domain.model.value_objects import (
    Money,
    lenient_decimal,
    lenient_int,
    lenient_money,
)


# ── Money ────────────────────────────────────────────────────────────────────


class TestMoney:

    def test_creation(self):
        m = Money(Decimal("10.50"))
        assert m.amount == Decimal("10.50")
        assert m.currency == "USD"

    def test_of_factory_from_string(self):
        assert Money.of("25.99").amount == Decimal("25.99")

    def test_of_rejects_garbage(self):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            Money.of("twelve")

    def test_negative_amount_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Money(Decimal("-1"))

    def test_non_finite_rejected(self):
        with pytest.raises(ValidationError, match="finite"):
            Money.of("NaN")

    def test_total(self):
        assert Money.total([Money.of("1.10"), Money.of("2.20")]) == Money.of("3.30")

    def test_total_of_nothing_is_zero(self):
        assert Money.total([]) == Money.zero()

    def test_currency_mismatch_rejected(self):
        with pytest.raises(ValidationError, match="Cannot combine"):
            Money(Decimal("10"), "USD") + Money(Decimal("5"), "EUR")

    def test_str_formatting(self):
        assert str(Money.of("15")) == "$15.00"


# ── Lenient parsing ──────────────────────────────────────────────────────────


class TestLenientParsing:

    @pytest.mark.parametrize(
        "raw, expected",
        [(5, Decimal("5")), ("2.5", Decimal("2.5")), (" 3 ", Decimal("3")), (1.25, Decimal("1.25"))],
    )
    def test_valid_numbers(self, raw, expected):
        assert lenient_decimal(raw) == expected

    @pytest.mark.parametrize("raw", [None, "", "abc", "-1", "NaN", "-Infinity", False, [1]])
    def test_malformed_reads_as_zero(self, raw):
        assert lenient_decimal(raw) == Decimal("0")

    def test_malformed_value_is_logged(self, caplog):
        with caplog.at_level("WARNING"):
            lenient_decimal("lots", "quantity")
        assert "Malformed quantity 'lots'" in caplog.text

    def test_int_truncates(self):
        assert lenient_int("7.9") == 7

    def test_money(self):
        assert lenient_money("oops") == Money.zero()
        assert lenient_money(19.99) == Money.of("19.99")

    def test_huge_int_is_exact(self):
        assert lenient_decimal(10**5000) == Decimal(10**5000)

    def test_negative_int_reads_as_zero(self):
        assert lenient_decimal(-3) == Decimal("0")
