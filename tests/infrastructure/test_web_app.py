"""Tests for the Flask JSON API, backed by fake repositories."""

import io
from dataclasses import replace
from datetime import datetime, timezone

import pytest

from ecomarket.application.create_product import CreateProductHandler
from ecomarket.application.list_products import (
    ListProductsHandler,
    ListSellerProductsHandler,
)
from ecomarket.application.show_dashboard import ShowDashboardHandler
from ecomarket.application.show_recent_activity import ShowRecentActivityHandler
from ecomarket.domain.model.account import Account
from ecomarket.infrastructure.bootstrap import Handlers
from ecomarket.infrastructure.config import Settings
from ecomarket.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from ecomarket.infrastructure.web.app import create_app
from tests.fakes import (
    BrokenOrderRepository,
    FakeAccountRepository,
    FakeCollectionRepository,
    FakeImageStore,
    FakeOrderRepository,
    FakeProductRepository,
    make_collection,
    make_order,
    make_product,
)

NOW = datetime(2024, 4, 1, tzinfo=timezone.utc)


def _handlers(order_repo=None) -> Handlers:
    accounts = FakeAccountRepository([Account(id="u1", email="u1@example.com", name="Uma", points=55)])
    collections = FakeCollectionRepository([make_collection(id="c1", day=2)])
    orders = order_repo or FakeOrderRepository(
        [make_order(id="abcdef1234", day=3, status="PAID", total="20.00")]
    )
    products = FakeProductRepository([make_product(id="p1")])
    return Handlers(
        dashboard=ShowDashboardHandler(accounts, collections, orders, products, clock=lambda: NOW),
        recent_activity=ShowRecentActivityHandler(collections, orders, clock=lambda: NOW),
        create_product=CreateProductHandler(products, FakeImageStore()),
        list_products=ListProductsHandler(products, accounts),
        seller_products=ListSellerProductsHandler(products),
    )


@pytest.fixture
def client():
    app = create_app(Settings(secret_key="test"), _handlers())
    return app.test_client()


def _login(client, user_id="u1", user_type="INDIVIDUAL"):
    with client.session_transaction() as sess:
        sess["user_id"] = user_id
        sess["user_type"] = user_type


class TestDashboardEndpoint:

    def test_unauthorized_without_session(self, client):
        response = client.get("/api/dashboard")
        assert response.status_code == 401
        assert response.get_json() == {"success": False, "error": "Unauthorized"}

    def test_business_dashboard(self, client):
        _login(client, user_type="business")
        body = client.get("/api/dashboard").get_json()

        assert body["success"] is True
        assert body["points"] == 55
        assert body["totalCollections"] == 1
        assert body["totalOrders"] == 1
        assert body["totalSpent"] == 20
        assert body["totalRevenue"] == 0
        assert [a["type"] for a in body["recentActivity"]] == ["order", "collection"]
        assert body["recentActivity"][0]["description"] == "Order #abcdef12 - Payment received"

    def test_store_failure_is_server_error(self):
        app = create_app(Settings(), _handlers(order_repo=BrokenOrderRepository()))
        client = app.test_client()
        _login(client)
        response = client.get("/api/dashboard")
        assert response.status_code == 500
        assert response.get_json()["success"] is False


class TestRecentActivityEndpoint:

    def test_activities(self, client):
        _login(client)
        body = client.get("/api/recent-activity").get_json()
        assert body["success"] is True
        assert [a.get("orderId") or a.get("collectionId") for a in body["activities"]] == [
            "abcdef1234",
            "c1",
        ]

    def test_unauthorized(self, client):
        assert client.get("/api/recent-activity").status_code == 401


class TestProductEndpoints:

    def test_list_is_public(self, client):
        body = client.get("/api/products?category=all").get_json()
        assert [p["id"] for p in body["products"]] == ["p1"]
        assert body["products"][0]["seller"] == {
            "id": "u1",
            "name": "Uma",
            "userType": "INDIVIDUAL",
        }

    def test_list_mine(self, client):
        _login(client)
        body = client.get("/api/products/user").get_json()
        assert [p["name"] for p in body["products"]] == ["PET flakes"]

    def _form(self, **overrides):
        form = {
            "name": "HDPE caps",
            "price": "4.00",
            "category": "plastic",
            "description": "Mixed colours",
            "quantity": "2",
            "plasticType": "HDPE",
            "image": (io.BytesIO(b"img"), "caps.jpg", "image/jpeg"),
        }
        form.update(overrides)
        return form

    def test_create(self, client):
        _login(client, user_type="COLLECTOR")
        response = client.post(
            "/api/products", data=self._form(), content_type="multipart/form-data"
        )
        assert response.status_code == 201
        product = response.get_json()["product"]
        assert product["rewardPoints"] == 14
        assert product["sellerId"] == "u1"
        assert product["image"].endswith("caps.jpg")

    def test_create_forbidden_for_business(self, client):
        _login(client, user_type="BUSINESS")
        response = client.post(
            "/api/products", data=self._form(), content_type="multipart/form-data"
        )
        assert response.status_code == 403

    def test_create_missing_field(self, client):
        _login(client)
        form = self._form()
        del form["category"]
        response = client.post("/api/products", data=form, content_type="multipart/form-data")
        assert response.status_code == 400
        assert response.get_json()["error"] == "Missing required field: category"

    def test_create_missing_image(self, client):
        _login(client)
        form = self._form()
        del form["image"]
        response = client.post("/api/products", data=form, content_type="multipart/form-data")
        assert response.status_code == 400
        assert response.get_json()["error"] == "Missing product image"

    def test_corrupt_store_gives_json_error(self, tmp_path):
        path = tmp_path / "products.json"
        path.write_text("{oops", encoding="utf-8")
        handlers = replace(
            _handlers(),
            list_products=ListProductsHandler(JsonProductRepository(path), FakeAccountRepository()),
        )
        response = create_app(Settings(), handlers).test_client().get("/api/products")

        assert response.status_code == 500
        assert response.is_json
        assert response.get_json() == {"success": False, "error": "Failed to read products.json"}
