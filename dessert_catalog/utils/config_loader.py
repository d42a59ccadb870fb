"""
Configuration loader for the dessert catalog client
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field, ValidationError

logger = logging.getLogger(__name__)

BASE_URL_ENV = "MEALDB_API_BASE_URL"


class MealDBApiConfig(BaseModel):
    """TheMealDB endpoint configuration"""

    base_url: str = "https://www.themealdb.com/api/json/v1/1"
    catalog_path: str = "filter.php"
    lookup_path: str = "lookup.php"
    category: str = "Dessert"
    timeout_seconds: float = Field(default=10.0, gt=0.0, le=120.0)


class RecipeSchemaConfig(BaseModel):
    """Flat recipe schema settings"""

    slot_count: int = Field(default=20, ge=1, le=100)


class CatalogConfig(BaseModel):
    api: MealDBApiConfig = Field(default_factory=MealDBApiConfig)
    recipe: RecipeSchemaConfig = Field(default_factory=RecipeSchemaConfig)


def default_config_path() -> Path:
    return Path(__file__).parent.parent.parent / "config" / "catalog_config.yml"


def load_catalog_config(config_path: Optional[Path] = None) -> CatalogConfig:
    """
    Load and validate catalog configuration from YAML file

    Args:
        config_path: Path to config file. Defaults to config/catalog_config.yml

    Returns:
        Validated CatalogConfig object

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValidationError: If config doesn't match schema
    """
    if config_path is None:
        config_path = default_config_path()

    if not config_path.exists():
        raise FileNotFoundError(f"Catalog config file not found: {config_path}")

    with open(config_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    try:
        cfg = CatalogConfig(**data)
    except ValidationError as e:
        logger.error("Catalog config validation failed: %s", e)
        raise

    base_url = os.getenv(BASE_URL_ENV, "").strip()
    if base_url:
        logger.info("Overriding API base URL from %s", BASE_URL_ENV)
        cfg = cfg.model_copy(update={"api": cfg.api.model_copy(update={"base_url": base_url})})

    logger.info("Successfully loaded catalog config from %s", config_path)
    return cfg
