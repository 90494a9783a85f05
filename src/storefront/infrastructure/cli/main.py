import click

from storefront.domain.exceptions import DomainException
from storefront.infrastructure.cli.catalog_commands import catalog
from storefront.infrastructure.cli.checkout_commands import checkout, demo
from storefront.infrastructure.logging import configure_logging
from storefront.infrastructure.settings import load_settings


@click.group()
@click.option(
    "--log-level",
    default=None,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Override STOREFRONT_LOG_LEVEL.",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str | None) -> None:
    """Storefront: in-memory checkout simulator"""
    try:
        settings = load_settings()
    except DomainException as exc:
        raise click.ClickException(f"Invalid configuration: {exc}")

    configure_logging(log_level.upper() if log_level else settings.log_level)
    ctx.obj = settings


# Register subcommands
cli.add_command(catalog)
cli.add_command(checkout)
cli.add_command(demo)
