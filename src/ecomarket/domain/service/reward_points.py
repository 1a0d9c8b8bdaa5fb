"""Domain service: Reward Point Calculator.

Points are credited per kilogram of material, at a rate that depends on
the plastic resin type. Quantities are normalized to kilograms first.
"""

from __future__ import annotations

from decimal import (
    MAX_EMAX,
    MIN_EMIN,
    ROUND_HALF_UP,
    Context,
    Decimal,
    Overflow,
    localcontext,
)
from enum import Enum

from ecomarket.domain.model.value_objects import lenient_decimal


class Unit(Enum):
    KG = "kg"
    G = "g"
    TON = "ton"
    PCS = "pcs"

    @staticmethod
    def parse(raw: str | None) -> Unit:
        """Unknown or missing units are read as kilograms."""
        try:
            return Unit((raw or "kg").strip().lower())
        except ValueError:
            return Unit.KG


# ---------------------------------------------------------------------------
# Rates and conversion constants
# ---------------------------------------------------------------------------
POINTS_PER_KG: dict[str, int] = {
    "PET": 8,
    "HDPE": 7,
    "PVC": 4,
    "LDPE": 6,
    "PP": 7,
    "PS": 5,
}
DEFAULT_POINTS_PER_KG = 5
DEFAULT_PIECE_WEIGHT_KG = Decimal("0.1")

# Upper bound for a single award; larger quotes are clamped to it.
MAX_POINTS = 10**15

_UNIT_TO_KG: dict[Unit, Decimal] = {
    Unit.KG: Decimal("1"),
    Unit.G: Decimal("0.001"),
    Unit.TON: Decimal("1000"),
}

# Stored quantities may carry any exponent a Decimal can hold.
_WIDE_CONTEXT = Context(Emax=MAX_EMAX, Emin=MIN_EMIN)


def rate_for(material_type: str | None) -> int:
    return POINTS_PER_KG.get((material_type or "").strip().upper(), DEFAULT_POINTS_PER_KG)


def to_kilograms(
    quantity: object,
    unit: str | Unit | None,
    piece_weight_kg: Decimal = DEFAULT_PIECE_WEIGHT_KG,
) -> Decimal:
    """Normalize a quantity in any supported unit to kilograms."""
    amount = lenient_decimal(quantity, "quantity")
    unit = unit if isinstance(unit, Unit) else Unit.parse(unit)
    factor = piece_weight_kg if unit is Unit.PCS else _UNIT_TO_KG[unit]
    with localcontext(_WIDE_CONTEXT):
        return amount * factor


def compute_points(
    material_type: str | None,
    quantity: object,
    unit: str | Unit | None = Unit.KG,
    piece_weight_kg: Decimal = DEFAULT_PIECE_WEIGHT_KG,
) -> int:
    """Reward points for *quantity* of *material_type*.

    Never raises: a malformed or negative quantity scores zero, and
    awards above MAX_POINTS are clamped to it.

    >>> compute_points("HDPE", 100, "g")
    1
    """
    try:
        kilograms = to_kilograms(quantity, unit, piece_weight_kg)
        with localcontext(_WIDE_CONTEXT):
            points = (kilograms * rate_for(material_type)).to_integral_value(
                rounding=ROUND_HALF_UP
            )
    except Overflow:
        return MAX_POINTS
    return int(min(points, MAX_POINTS))

