"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Iterable

from ecomarket.domain.exceptions import ValidationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Money:
    """Monetary amount with currency.

    Uses Decimal to avoid floating-point rounding errors when summing
    order totals for spend and revenue figures.
    """

    amount: Decimal
    currency: str = "USD"

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if not self.amount.is_finite():
            raise ValidationError(f"Money amount must be finite, got {self.amount}")
        if self.amount < Decimal("0"):
            raise ValidationError(
                f"Money amount cannot be negative, got {self.amount}"
            )

    # --- Arithmetic helpers ---------------------------------------------------

    def __add__(self, other: Money) -> Money:
        self._assert_same_currency(other)
        return Money(self.amount + other.amount, self.currency)

    # --- Display --------------------------------------------------------------

    def __str__(self) -> str:
        return f"${self.amount:.2f}"

    # --- Internal helpers -----------------------------------------------------

    def _assert_same_currency(self, other: Money) -> None:
        if self.currency != other.currency:
            raise ValidationError(
                f"Cannot combine {self.currency} with {other.currency}"
            )

    # --- Factories ------------------------------------------------------------

    @staticmethod
    def of(amount: str | float | int | Decimal) -> Money:
        """Convenient factory that coerces to Decimal safely."""
        try:
            return Money(Decimal(str(amount)))
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid money amount: {amount!r}") from exc

    @staticmethod
    def zero(currency: str = "USD") -> Money:
        return Money(Decimal("0"), currency)

    @staticmethod
    def total(amounts: Iterable[Money]) -> Money:
        result = Money.zero()
        for amount in amounts:
            result = result + amount
        return result


def lenient_decimal(raw: object, field_name: str = "value") -> Decimal:
    """Coerce a stored numeric field to a non-negative Decimal.

    Records come from stores we do not own, so a single unparseable or
    negative value must not break a whole dashboard. Such values are
    logged and read as zero.
    """
    if raw is None or raw == "":
        return Decimal("0")
    if isinstance(raw, bool):
        logger.warning("Malformed %s %r read as 0", field_name, raw)
        return Decimal("0")
    if isinstance(raw, int):
        # Decimal(int) is exact; str() of a huge int is refused.
        value = Decimal(raw)
        if value < 0:
            logger.warning("Out-of-range %s read as 0", field_name)
            return Decimal("0")
        return value
    try:
        value = Decimal(str(raw).strip())
    except (InvalidOperation, ValueError):
        logger.warning("Malformed %s %r read as 0", field_name, raw)
        return Decimal("0")
    if not value.is_finite() or value < 0:
        logger.warning("Out-of-range %s %r read as 0", field_name, raw)
        return Decimal("0")
    return value


def lenient_money(raw: object, field_name: str = "price") -> Money:
    return Money(lenient_decimal(raw, field_name))


def lenient_int(raw: object, field_name: str = "value") -> int:
    """Like ``lenient_decimal`` but truncates to a whole number."""
    return int(lenient_decimal(raw, field_name))
