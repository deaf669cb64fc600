"""Main CLI entry point for hyperprov."""

import sys

import click
from rich.console import Console
from rich.table import Table

from hyperprov import __version__
from hyperprov.core.exceptions import BootstrapError, ConfigurationError
from hyperprov.core.models import ProvisioningResult

console = Console()


def render_summary(results: list[ProvisioningResult]) -> None:
    """Print a table of per-cluster outcomes."""
    table = Table(title="Hosted Cluster Provisioning Summary")
    table.add_column("Cluster", style="bold")
    table.add_column("Region")
    table.add_column("Zone")
    table.add_column("Status")
    table.add_column("Duration", justify="right")
    table.add_column("Error")

    for result in results:
        status = "[green]succeeded[/green]" if result.succeeded else "[red]failed[/red]"
        table.add_row(
            result.cluster_name,
            result.region,
            result.zone,
            status,
            f"{result.duration_seconds:.0f}s",
            result.error or "",
        )

    console.print(table)

    succeeded = sum(1 for r in results if r.succeeded)
    console.print(f"  Total: {len(results)}")
    console.print(f"  [green]Succeeded: {succeeded}[/green]")
    console.print(f"  [red]Failed: {len(results) - succeeded}[/red]\n")


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(version=__version__)
@click.argument("config_file", required=False, type=click.Path(dir_okay=False))
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=None,
    help="Override the configured log level",
)
@click.option(
    "--log-format",
    type=click.Choice(["json", "console"]),
    default=None,
    help="Override the configured log format",
)
@click.pass_context
def cli(
    ctx: click.Context,
    config_file: str | None,
    log_level: str | None,
    log_format: str | None,
) -> None:
    """Bootstrap a managing cluster and create HyperShift clusters on PowerVS.

    CONFIG_FILE is a YAML or JSON document listing the regions, vpc regions
    and zones to provision. The IBM Cloud API key is read from the
    environment (IBMCLOUD_API_KEY by default).
    """
    if config_file is None:
        click.echo(ctx.get_help())
        return

    from hyperprov.core.config import HyperprovConfig
    from hyperprov.runner import run_e2e
    from hyperprov.utils.logging import get_logger, log_error, setup_logging

    try:
        config = HyperprovConfig.from_file(config_file)
        api_key = config.get_api_key()
    except ConfigurationError as e:
        console.print(f"[red]Configuration error: {e}[/red]")
        sys.exit(1)

    setup_logging(
        level=log_level or config.logging.level,
        format=log_format or config.logging.format,
        output=config.logging.output,
    )
    logger = get_logger(__name__)
    logger.info(
        "run_started",
        config_file=config_file,
        management_cluster=config.management_cluster,
        regions=config.regions,
    )

    try:
        results = run_e2e(config, api_key)
    except BootstrapError as e:
        log_error(logger, e, operation="bootstrap")
        console.print(f"[red]Bootstrap failed ({type(e).__name__}): {e}[/red]")
        sys.exit(1)

    render_summary(results)
    logger.info(
        "run_completed",
        total=len(results),
        succeeded=sum(1 for r in results if r.succeeded),
    )


if __name__ == "__main__":
    cli()
