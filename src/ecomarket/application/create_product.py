"""Application service: Create Product use case.

Validates the submitted listing, stores its image, credits reward points
for the material being sold and persists the listing.
"""

from __future__ import annotations

import logging
from decimal import Decimal, InvalidOperation

from ecomarket.application._auth import require_identity
from ecomarket.application.dto import ImageUpload, ProductSpec
from ecomarket.domain.exceptions import PermissionDenied, ValidationError
from ecomarket.domain.model.account import SELLER_ROLES, Identity
from ecomarket.domain.model.product import Product
from ecomarket.domain.model.value_objects import Money
from ecomarket.domain.repository.image_store import ImageStore
from ecomarket.domain.repository.product_repository import ProductRepository
from ecomarket.domain.service.reward_points import (
    DEFAULT_PIECE_WEIGHT_KG,
    Unit,
    compute_points,
)

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = (
    ("name", "name"),
    ("price", "price"),
    ("category", "category"),
    ("description", "description"),
    ("quantity", "quantity"),
    ("plastic_type", "plasticType"),
)

# Upper bounds for the numbers on a listing.
MAX_QUANTITY = 10**9
MAX_PRICE = Decimal("1000000000")
MAX_DISCOUNT = 100


class CreateProductHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        image_store: ImageStore,
        piece_weight_kg: Decimal = DEFAULT_PIECE_WEIGHT_KG,
    ) -> None:
        self._product_repo = product_repo
        self._image_store = image_store
        self._piece_weight_kg = piece_weight_kg

    def handle(
        self,
        identity: Identity | None,
        spec: ProductSpec,
        image: ImageUpload | None,
    ) -> Product:
        """Create a listing for the caller.

        Steps:
        1. Only individuals and collectors may sell.
        2. Reject a missing image or any missing required field.
        3. Parse numbers strictly; this is a write, not a read.
        4. Store the image, compute reward points, persist.
        """
        identity = require_identity(identity)
        if identity.role not in SELLER_ROLES:
            raise PermissionDenied(
                "Unauthorized - Only individuals and collectors can create products"
            )

        if image is None or not image.payload:
            raise ValidationError("Missing product image")

        for attr, label in REQUIRED_FIELDS:
            value = getattr(spec, attr)
            if value is None or not str(value).strip():
                raise ValidationError(f"Missing required field: {label}")

        price = Money.of(spec.price)  # type: ignore[arg-type]
        if price.amount > MAX_PRICE:
            raise ValidationError(f"Invalid price: {spec.price!r}")
        quantity = self._parse_whole(spec.quantity, "quantity", MAX_QUANTITY)
        discount = self._parse_whole(spec.discount or "0", "discount", MAX_DISCOUNT)
        unit = Unit.parse(spec.unit)
        reward_points = compute_points(
            spec.plastic_type, quantity, unit, self._piece_weight_kg
        )

        # Only a fully validated listing gets its image stored.
        image_path = self._image_store.save(image.payload, image.content_type, image.filename)

        product = Product(
            id=None,
            seller_id=identity.account_id,
            name=spec.name.strip(),  # type: ignore[union-attr]
            price=price,
            category=spec.category.strip(),  # type: ignore[union-attr]
            description=spec.description.strip(),  # type: ignore[union-attr]
            image=image_path,
            quantity=quantity,
            unit=unit.value,
            plastic_type=spec.plastic_type.strip(),  # type: ignore[union-attr]
            discount=discount,
            reward_points=reward_points,
        )
        self._product_repo.save(product)
        logger.info(
            "Product %s listed by %s (%d reward points)",
            product.id,
            identity.account_id,
            reward_points,
        )
        return product

    @staticmethod
    def _parse_whole(raw: str | None, field: str, maximum: int) -> int:
        try:
            value = Decimal(str(raw).strip())
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid {field}: {raw!r}") from exc
        if not value.is_finite() or value < 0 or value > maximum:
            raise ValidationError(f"Invalid {field}: {raw!r}")
        return int(value)
