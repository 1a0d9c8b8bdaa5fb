"""Tests for environment-driven settings."""

from decimal import Decimal
from pathlib import Path

import pytest
from pydantic import ValidationError as PydanticValidationError

from ecomarket.domain.exceptions import ValidationError
from ecomarket.infrastructure.config import Settings, load_settings


class TestLoadSettings:

    def test_defaults(self):
        settings = load_settings({})
        assert settings == Settings()
        assert settings.piece_weight_kg == Decimal("0.1")
        assert settings.sample_activity is False
        assert settings.mongo_uri is None

    def test_overrides(self):
        settings = load_settings(
            {
                "ECOMARKET_DATA_DIR": "/srv/data",
                "MONGO_URI": "mongodb://db:27017/",
                "ECOMARKET_PIECE_WEIGHT_KG": "0.25",
                "ECOMARKET_SAMPLE_ACTIVITY": "yes",
                "ECOMARKET_FEED_ACTIVITY_CAP": "20",
            }
        )
        assert settings.data_dir == Path("/srv/data")
        assert settings.mongo_uri == "mongodb://db:27017/"
        assert settings.piece_weight_kg == Decimal("0.25")
        assert settings.sample_activity is True
        assert settings.feed_activity_cap == 20

    def test_blank_mongo_uri_means_none(self):
        assert load_settings({"MONGO_URI": ""}).mongo_uri is None

    @pytest.mark.parametrize(
        "key, value",
        [
            ("ECOMARKET_ORDER_ROW_CAP", "ten"),
            ("ECOMARKET_ORDER_ROW_CAP", "-1"),
            ("ECOMARKET_PIECE_WEIGHT_KG", "heavy"),
            ("ECOMARKET_PIECE_WEIGHT_KG", "-0.1"),
        ],
    )
    def test_invalid_values_rejected(self, key, value):
        with pytest.raises(ValidationError, match=key):
            load_settings({key: value})

    def test_every_bad_key_is_reported(self):
        with pytest.raises(ValidationError) as excinfo:
            load_settings({"ECOMARKET_ORDER_ROW_CAP": "-5", "ECOMARKET_FEED_ACTIVITY_CAP": "many"})
        message = str(excinfo.value)
        assert message.startswith("Invalid configuration:")
        assert "ECOMARKET_ORDER_ROW_CAP" in message
        assert "ECOMARKET_FEED_ACTIVITY_CAP" in message

    def test_settings_are_frozen(self):
        with pytest.raises(PydanticValidationError):
            Settings().order_row_cap = 3
