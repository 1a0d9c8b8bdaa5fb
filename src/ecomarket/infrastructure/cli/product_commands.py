"""CLI commands for marketplace listings."""

from __future__ import annotations

import click

from ecomarket.application.dto import ProductListing
from ecomarket.domain.exceptions import DomainException
from ecomarket.domain.model.account import Identity
from ecomarket.domain.model.product import Product
from ecomarket.infrastructure.bootstrap import build_handlers
from ecomarket.infrastructure.config import load_settings


def _display_products(products: list[Product]) -> None:
    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'Name':<24} {'Category':<14} {'Price':>10} {'Qty':>6} {'Points':>7}")
    click.echo("-" * 65)
    for p in products:
        click.echo(
            f"{p.name:<24} {p.category:<14} {str(p.price):>10} "
            f"{p.quantity:>6} {p.reward_points:>7}"
        )


def _display_listings(listings: list[ProductListing]) -> None:
    if not listings:
        click.echo("No products found.")
        return

    click.echo(f"{'Name':<24} {'Category':<14} {'Price':>10} {'Points':>7}  Seller")
    click.echo("-" * 75)
    for listing in listings:
        p = listing.product
        seller = listing.seller.name if listing.seller else "(unknown)"
        click.echo(
            f"{p.name:<24} {p.category:<14} {str(p.price):>10} {p.reward_points:>7}  {seller}"
        )


@click.command("list")
@click.option("--category", default=None, help="Only this category ('all' for every one).")
def product_list(category: str | None) -> None:
    """List marketplace products."""
    handlers = build_handlers(load_settings())

    try:
        listings = handlers.list_products.handle(category)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_listings(listings)


@click.command("mine")
@click.option("--user", "user_id", required=True, help="Seller account ID.")
def product_mine(user_id: str) -> None:
    """List the products a seller has listed, newest first."""
    handlers = build_handlers(load_settings())

    try:
        products = handlers.seller_products.handle(Identity(account_id=user_id))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_products(products)
