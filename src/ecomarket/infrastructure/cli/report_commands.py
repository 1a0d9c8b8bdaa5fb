"""CLI commands for the dashboard, the activity feed and point quotes."""

from __future__ import annotations

import click

from ecomarket.domain.exceptions import DomainException
from ecomarket.domain.model.account import Identity, Role
from ecomarket.domain.model.activity import ActivityItem
from ecomarket.domain.service.reward_points import Unit, compute_points, to_kilograms
from ecomarket.infrastructure.bootstrap import build_handlers
from ecomarket.infrastructure.config import load_settings

_ROLE_CHOICE = click.Choice([r.value for r in Role], case_sensitive=False)
_UNIT_CHOICE = click.Choice([u.value for u in Unit], case_sensitive=False)


def _display_activity(items: list[ActivityItem]) -> None:
    if not items:
        click.echo("No recent activity.")
        return
    click.echo(f"  {'When':<20} {'Title':<24} Description")
    click.echo(f"  {'-'*70}")
    for item in items:
        marker = " (sample)" if item.synthetic else ""
        click.echo(
            f"  {item.timestamp:%Y-%m-%d %H:%M}{'':<4} {item.title:<24} "
            f"{item.description}{marker}"
        )


@click.command("points")
@click.option("--material", required=True, help="Plastic type, e.g. PET or HDPE.")
@click.option("--quantity", required=True, help="Amount of material.")
@click.option("--unit", type=_UNIT_CHOICE, default="kg", show_default=True)
def points_quote(material: str, quantity: str, unit: str) -> None:
    """Quote the reward points for an amount of material."""
    settings = load_settings()
    kilograms = to_kilograms(quantity, unit, settings.piece_weight_kg)
    points = compute_points(material, quantity, unit, settings.piece_weight_kg)
    click.echo(f"{material.upper()} {kilograms.normalize():f}kg -> {points} points")


@click.command("dashboard")
@click.option("--user", "user_id", required=True, help="Account ID.")
@click.option("--role", type=_ROLE_CHOICE, default="INDIVIDUAL", show_default=True)
def dashboard_show(user_id: str, role: str) -> None:
    """Show dashboard counters for an account."""
    handlers = build_handlers(load_settings())
    identity = Identity(account_id=user_id, role=Role.parse(role))

    try:
        metrics = handlers.dashboard.handle(identity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Dashboard for {user_id}  (role={identity.role.value})")
    click.echo(f"  Points:       {metrics.points}")
    click.echo(f"  Collections:  {metrics.total_collections}")
    click.echo(f"  Orders:       {metrics.total_orders}")
    click.echo(f"  Products:     {metrics.total_products}")
    if identity.role is Role.BUSINESS:
        click.echo(f"  Total spent:  {metrics.total_spent}")
    elif identity.role is Role.COLLECTOR:
        click.echo(f"  Revenue:      {metrics.total_revenue}")
    click.echo()
    _display_activity(metrics.recent_activity)


@click.command("activity")
@click.option("--user", "user_id", required=True, help="Account ID.")
@click.option("--role", type=_ROLE_CHOICE, default="INDIVIDUAL", show_default=True)
def activity_show(user_id: str, role: str) -> None:
    """Show the recent activity feed for an account."""
    handlers = build_handlers(load_settings())
    identity = Identity(account_id=user_id, role=Role.parse(role))

    try:
        items = handlers.recent_activity.handle(identity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_activity(items)
