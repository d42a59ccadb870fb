#!/usr/bin/env python3
"""
Browse the dessert catalog from the terminal:
- refresh the catalog and list desserts sorted by name
- print a normalized recipe with --recipe ID

Offline mode: run with --offline to serve the sample payloads in data/sample/.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from dotenv import load_dotenv

load_dotenv()

from dessert_catalog.catalog_store import CatalogStore
from dessert_catalog.error_handler import ErrorHandler
from dessert_catalog.integrations import CatalogFetcher, CatalogIntegrationError, RecipeFetcher
from dessert_catalog.integrations.clients.mocks import LocalCatalogTransport
from dessert_catalog.integrations.clients.real_http import HttpTransport
from dessert_catalog.utils.config_loader import load_catalog_config

SAMPLE_DIR = Path(__file__).parent.parent / "data" / "sample"


def setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")


def print_recipe(recipe) -> None:
    print(f"\n### {recipe.name}\n")
    print(f"Image: {recipe.thumbnail_ref}\n")
    print("Ingredients/Measurements")
    for ingredient, measurement in recipe.pairs():
        print(f"  {ingredient} : {measurement}")
    print("\nInstructions\n")
    print(recipe.instructions)


async def run(args: argparse.Namespace) -> int:
    cfg = load_catalog_config(Path(args.config) if args.config else None)
    if args.offline:
        transport = LocalCatalogTransport.from_directory(SAMPLE_DIR, cfg.api)
    else:
        transport = HttpTransport(timeout_seconds=cfg.api.timeout_seconds)

    if args.recipe:
        fetcher = RecipeFetcher(transport, cfg.api, slot_count=cfg.recipe.slot_count)
        try:
            recipe = await fetcher.fetch_recipe(args.recipe)
        except CatalogIntegrationError as e:
            print(ErrorHandler().handle_exception(e, {"recipe_id": args.recipe})["message"])
            return 1
        print_recipe(recipe)
        return 0

    failures = []
    handler = ErrorHandler()

    def sink(exc, context):
        failures.append(handler.handle_exception(exc, context))

    async with CatalogStore(CatalogFetcher(transport, cfg.api), error_sink=sink) as store:
        await store.refresh()
        desserts = store.desserts

    if failures:
        print(failures[0]["message"])
        return 1

    print(f"\n### {cfg.api.category}s ({len(desserts)})\n")
    for dessert in sorted(desserts, key=lambda d: d.name):
        print(f"{dessert.id:>8}  {dessert.name}")
    return 0


def main() -> None:
    parser = argparse.ArgumentParser(description="List desserts or show one recipe from TheMealDB")
    parser.add_argument("--recipe", metavar="ID", help="Show the recipe with this id instead of the list")
    parser.add_argument("--config", help="Path to catalog config YAML (default: config/catalog_config.yml)")
    parser.add_argument("--offline", action="store_true", help="Serve sample payloads from data/sample/")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    args = parser.parse_args()

    setup_logging(args.verbose)
    sys.exit(asyncio.run(run(args)))


if __name__ == "__main__":
    main()
