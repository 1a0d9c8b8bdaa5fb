import click

from ecomarket.domain.exceptions import DomainException
from ecomarket.infrastructure.cli.product_commands import product_list, product_mine
from ecomarket.infrastructure.cli.report_commands import (
    activity_show,
    dashboard_show,
    points_quote,
)
from ecomarket.infrastructure.config import load_settings
from ecomarket.infrastructure.logging_utils import configure_logging


@click.group()
def cli() -> None:
    """ecomarket: recycling marketplace"""
    try:
        settings = load_settings()
    except DomainException as exc:
        raise click.ClickException(str(exc))
    configure_logging(settings.log_level)


@cli.group()
def product() -> None:
    """Browse marketplace products."""


@cli.command("serve")
@click.option("--host", default="127.0.0.1", show_default=True)
@click.option("--port", default=5000, show_default=True, type=int)
@click.option("--debug", is_flag=True, default=False)
def serve(host: str, port: int, debug: bool) -> None:
    """Run the JSON API with Flask's development server."""
    from ecomarket.infrastructure.web.app import create_app

    create_app().run(host=host, port=port, debug=debug)


# Register subcommands
cli.add_command(points_quote)
cli.add_command(dashboard_show)
cli.add_command(activity_show)
product.add_command(product_list)
product.add_command(product_mine)
