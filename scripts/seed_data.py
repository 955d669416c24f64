#!/usr/bin/env python3
"""
Seeds the local catalog (SQLite + media directory) with example data.

Usage:
    python scripts/seed_data.py
    python scripts/seed_data.py --db data/demo.db
"""
import argparse
import asyncio
import os
import sys
from decimal import Decimal

# Make the package importable when run from a checkout
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from dotenv import load_dotenv

load_dotenv()

from catalog_admin.config import logger as log
from catalog_admin.stores.local.factory import create_local_container


CATEGORIES = ["Acessórios", "Calçados", "Camisetas", "Eletrônicos", "Livros"]

CARRIERS = ["Correios", "Jadlog", "Loggi", "Total Express"]

PRODUCTS = [
    ("Camiseta Básica", "Algodão 100%", "39.90", "Camisetas", "https://picsum.photos/seed/tee/400"),
    ("Tênis Corrida", "Amortecimento em gel", "299.00", "Calçados", "https://picsum.photos/seed/run/400"),
    ("Fone Bluetooth", "Cancelamento de ruído", "189.50", "Eletrônicos", None),
    ("Mochila Urbana", "Compartimento para notebook", "149.90", "Acessórios", None),
]


async def seed(db_path=None):
    container = create_local_container(db_path=db_path)

    if (await container.categories.list_page(1, 1)).total:
        log.warn("seed", "catalog already has categories, skipping")
        return

    categories = {}
    for name in CATEGORIES:
        category = await container.categories.create({"name": name})
        categories[name] = category.id

    for name in CARRIERS:
        await container.carriers.create({"name": name})

    for title, description, price, category, image_url in PRODUCTS:
        await container.products.create(
            {
                "title": title,
                "description": description,
                "price": Decimal(price),
                "category_id": categories[category],
                "image_url": image_url,
            }
        )

    log.info(
        "seed",
        "done",
        categories=len(CATEGORIES),
        carriers=len(CARRIERS),
        products=len(PRODUCTS),
    )


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--db", help="SQLite file (default: CATALOG_DB_PATH or data/catalog.db)")
    args = parser.parse_args()
    asyncio.run(seed(args.db))
