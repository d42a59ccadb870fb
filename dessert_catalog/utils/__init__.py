"""
Utility modules for the dessert catalog client
"""
from .config_loader import CatalogConfig, MealDBApiConfig, RecipeSchemaConfig, load_catalog_config

__all__ = [
    'CatalogConfig',
    'MealDBApiConfig',
    'RecipeSchemaConfig',
    'load_catalog_config',
]
