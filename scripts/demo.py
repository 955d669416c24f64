#!/usr/bin/env python3
"""
Prints catalog listings page by page.

Usage:
    python scripts/demo.py                      # local SQLite catalog
    python scripts/demo.py --supabase           # hosted project (SUPABASE_URL / SUPABASE_KEY)
    python scripts/demo.py --resource products --page 2 --page-size 8
"""
import argparse
import asyncio
import os
import sys

# Make the package importable when run from a checkout
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from dotenv import load_dotenv

load_dotenv()

from rich.console import Console
from rich.table import Table

from catalog_admin.config import logger as log
from catalog_admin.errors import CatalogError
from catalog_admin.stores.local.factory import create_local_container
from catalog_admin.stores.supabase.factory import create_supabase_container

console = Console()

COLUMNS = {
    "categories": ("id", "name"),
    "carriers": ("id", "name"),
    "products": ("id", "title", "price", "category_name", "image_url"),
}


def render(resource: str, page) -> Table:
    table = Table(
        title=f"{resource} - page {page.page}/{page.total_pages} ({page.total} records)"
    )
    for column in COLUMNS[resource]:
        table.add_column(column)
    for item in page.items:
        row = item.to_dict()
        if hasattr(item, "price_formatted"):
            row["price"] = item.price_formatted
        table.add_row(*(str(row.get(column) or "") for column in COLUMNS[resource]))
    return table


async def run_demo(args):
    if args.supabase:
        container = await create_supabase_container()
    else:
        container = create_local_container(db_path=args.db)

    repository = getattr(container, args.resource)
    page = await repository.list_page(args.page, args.page_size)
    console.print(render(args.resource, page))
    hints = []
    if page.has_previous:
        hints.append(f"previous: --page {page.page - 1}")
    if page.has_next:
        hints.append(f"next: --page {page.page + 1}")
    if hints:
        console.print(f"[dim]{' | '.join(hints)}[/dim]")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--resource", choices=sorted(COLUMNS), default="categories")
    parser.add_argument("--page", type=int, default=1)
    parser.add_argument("--page-size", type=int, default=None)
    parser.add_argument("--db", help="SQLite file for the local catalog")
    parser.add_argument("--supabase", action="store_true", help="Use the hosted project")
    parser.add_argument("--verbose", action="store_true", help="Log store calls")
    args = parser.parse_args()

    if args.verbose:
        log.set_level("debug")

    try:
        asyncio.run(run_demo(args))
    except CatalogError as e:
        console.print(f"[red]Error:[/red] {e}")
        sys.exit(1)
