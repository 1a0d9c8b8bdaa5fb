"""Runtime configuration, read from the environment.

A ``.env`` file in the working directory is loaded first, so local
development needs no exported variables.
"""

from __future__ import annotations

import os
from decimal import Decimal
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from ecomarket.domain.exceptions import ValidationError
from ecomarket.domain.service.reward_points import DEFAULT_PIECE_WEIGHT_KG

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})


class Settings(BaseModel):
    model_config = ConfigDict(frozen=True)

    data_dir: Path = Field(default=Path("data"))
    upload_dir: Path = Field(default=Path("public") / "uploads" / "products")
    mongo_uri: str | None = Field(default=None)
    mongo_db: str = Field(default="ecomarket")
    secret_key: str = Field(default="dev")
    log_level: str = Field(default="INFO", description="Python logging level name")
    piece_weight_kg: Decimal = Field(
        default=DEFAULT_PIECE_WEIGHT_KG,
        ge=0,
        allow_inf_nan=False,
        description="Weight of one piece when a quantity is given in pcs.",
    )
    sample_activity: bool = Field(default=False)
    dashboard_activity_cap: int = Field(default=5, ge=0)
    feed_activity_cap: int = Field(default=10, ge=0)
    collection_row_cap: int = Field(default=5, ge=0)
    order_row_cap: int = Field(default=10, ge=0)


ENV_KEYS = {
    "data_dir": "ECOMARKET_DATA_DIR",
    "upload_dir": "ECOMARKET_UPLOAD_DIR",
    "mongo_uri": "MONGO_URI",
    "mongo_db": "MONGO_DB",
    "secret_key": "ECOMARKET_SECRET_KEY",
    "log_level": "ECOMARKET_LOG_LEVEL",
    "piece_weight_kg": "ECOMARKET_PIECE_WEIGHT_KG",
    "dashboard_activity_cap": "ECOMARKET_DASHBOARD_ACTIVITY_CAP",
    "feed_activity_cap": "ECOMARKET_FEED_ACTIVITY_CAP",
    "collection_row_cap": "ECOMARKET_COLLECTION_ROW_CAP",
    "order_row_cap": "ECOMARKET_ORDER_ROW_CAP",
}
SAMPLE_ACTIVITY_KEY = "ECOMARKET_SAMPLE_ACTIVITY"


def load_settings(env: dict[str, str] | None = None) -> Settings:
    """Build Settings from *env* (defaults to ``os.environ`` plus ``.env``)."""
    if env is None:
        load_dotenv()
        env = dict(os.environ)

    # Blank values fall back to the field default.
    settings_data: dict[str, object] = {
        field: env[key] for field, key in ENV_KEYS.items() if env.get(key, "").strip()
    }
    settings_data["sample_activity"] = (
        env.get(SAMPLE_ACTIVITY_KEY, "").strip().lower() in _TRUE_VALUES
    )

    try:
        return Settings.model_validate(settings_data)
    except PydanticValidationError as exc:
        problems = "; ".join(
            f"{ENV_KEYS.get(str(error['loc'][0]), error['loc'][0])}: {error['msg']}"
            for error in exc.errors()
        )
        raise ValidationError(f"Invalid configuration: {problems}") from exc
