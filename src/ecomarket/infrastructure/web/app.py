"""Flask JSON API over the application handlers.

The session is issued by the external identity provider; this layer only
reads ``user_id`` / ``user_type`` from it and passes an explicit Identity
into the handlers.
"""

from __future__ import annotations

import logging

from flask import Flask, jsonify, request, session

from ecomarket.application.dto import (
    ImageUpload,
    ProductSpec,
    activity_payload,
    dashboard_payload,
    listing_payload,
    product_payload,
)
from ecomarket.domain.exceptions import (
    AuthenticationRequired,
    DataAccessError,
    DomainException,
    PermissionDenied,
    ValidationError,
)
from ecomarket.domain.model.account import Identity, Role
from ecomarket.infrastructure.bootstrap import Handlers, build_handlers
from ecomarket.infrastructure.config import Settings, load_settings

logger = logging.getLogger(__name__)

_STATUS_BY_ERROR: list[tuple[type[DomainException], int]] = [
    (AuthenticationRequired, 401),
    (PermissionDenied, 403),
    (ValidationError, 400),
    (DataAccessError, 500),
]


def current_identity() -> Identity | None:
    user_id = session.get("user_id")
    if not user_id:
        return None
    return Identity(
        account_id=str(user_id),
        role=Role.parse(session.get("user_type")),
        email=session.get("email"),
    )


def create_app(settings: Settings | None = None, handlers: Handlers | None = None) -> Flask:
    settings = settings or load_settings()
    handlers = handlers or build_handlers(settings)

    app = Flask(__name__)
    app.secret_key = settings.secret_key

    @app.errorhandler(DomainException)
    def handle_domain_error(exc: DomainException):
        status = next(
            (code for error, code in _STATUS_BY_ERROR if isinstance(exc, error)), 500
        )
        if status >= 500:
            logger.error("Request %s %s failed: %s", request.method, request.path, exc)
        return jsonify({"success": False, "error": str(exc)}), status

    @app.get("/api/dashboard")
    def dashboard():
        metrics = handlers.dashboard.handle(current_identity())
        return jsonify({"success": True, **dashboard_payload(metrics)})

    @app.get("/api/recent-activity")
    def recent_activity():
        activities = handlers.recent_activity.handle(current_identity())
        return jsonify({"success": True, "activities": activity_payload(activities)})

    @app.get("/api/products")
    def list_products():
        listings = handlers.list_products.handle(request.args.get("category"))
        return jsonify({"products": [listing_payload(listing) for listing in listings]})

    @app.get("/api/products/user")
    def seller_products():
        products = handlers.seller_products.handle(current_identity())
        return jsonify({"success": True, "products": [product_payload(p) for p in products]})

    @app.post("/api/products")
    def create_product():
        form = request.form
        spec = ProductSpec(
            name=form.get("name"),
            price=form.get("price"),
            category=form.get("category"),
            description=form.get("description"),
            quantity=form.get("quantity"),
            plastic_type=form.get("plasticType"),
            unit=form.get("unit"),
            discount=form.get("discount"),
        )
        upload = request.files.get("image")
        image = None
        if upload is not None and upload.filename:
            image = ImageUpload(
                payload=upload.read(),
                content_type=upload.mimetype or "",
                filename=upload.filename,
            )

        product = handlers.create_product.handle(current_identity(), spec, image)
        return (
            jsonify(
                {
                    "success": True,
                    "message": "Product created successfully",
                    "product": product_payload(product),
                }
            ),
            201,
        )

    return app
