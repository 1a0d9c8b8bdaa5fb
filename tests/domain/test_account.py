"""Unit tests for role resolution."""

import pytest

from ecomarket.domain.model.account import SELLER_ROLES, Role


class TestRoleParse:

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("BUSINESS", Role.BUSINESS),
            ("collector", Role.COLLECTOR),
            (" Individual ", Role.INDIVIDUAL),
            (None, Role.INDIVIDUAL),
            ("", Role.INDIVIDUAL),
            ("admin", Role.INDIVIDUAL),
        ],
    )
    def test_parse(self, raw, expected):
        assert Role.parse(raw) is expected

    def test_business_cannot_sell(self):
        assert Role.BUSINESS not in SELLER_ROLES
        assert {Role.INDIVIDUAL, Role.COLLECTOR} <= SELLER_ROLES
