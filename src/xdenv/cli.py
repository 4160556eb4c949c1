import json
import logging
import os

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from .constants import DEFAULT_CONFIG_NAME
from .core import XdEnvironment
from .errors import ConfigurationError

logging.basicConfig(
    level="INFO",
    format="%(message)s",
    datefmt="[%X]",
    handlers=[
        RichHandler(
            console=Console(stderr=True),
            rich_tracebacks=True,
            show_level=False,
            show_path=False,
        )
    ],
)


def _render_table(values) -> Table:
    table = Table(title="XD deployment environment")
    table.add_column("Property", style="cyan", no_wrap=True)
    table.add_column("Value")
    for key, value in values.items():
        if isinstance(value, list):
            value = "\n".join(value)
        table.add_row(key, "" if value is None else str(value))
    return table


@click.command()
@click.option(
    "--artifact",
    required=False,
    type=click.Path(),
    help="Path to the node artifact CSV. Defaults to ec2servers.csv in the working directory.",
)
@click.option(
    "--config",
    required=False,
    type=click.Path(),
    help="Path to a YAML property file. Defaults to .xdenv.yml if present.",
)
@click.option("--json", "as_json", is_flag=True, default=False, help="Print the environment as JSON")
@click.option(
    "--show-secrets",
    is_flag=True,
    default=False,
    help="Print the JDBC password and private key instead of masking them.",
)
@click.option("--verbose", is_flag=True, default=False, help="Enable verbose logging")
@click.option("--log-file", type=click.Path(), help="Path to log file")
def main(artifact, config, as_json, show_secrets, verbose, log_file):
    """Resolve and print the XD cluster the integration tests will target."""
    logger = logging.getLogger("xdenv")

    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)
        logger.setLevel(logging.DEBUG)
    else:
        logger.setLevel(logging.INFO)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(logging.DEBUG if verbose else logging.INFO)
        file_handler.setFormatter(logging.Formatter("%(asctime)s [%(levelname)s] %(message)s"))
        logger.addHandler(file_handler)

    resolved_config = config
    if resolved_config is None:
        default_config_path = os.path.join(os.getcwd(), DEFAULT_CONFIG_NAME)
        if os.path.exists(default_config_path):
            resolved_config = default_config_path

    try:
        environment = XdEnvironment(artifact_path=artifact, config_path=resolved_config)
    except ConfigurationError as exc:
        raise click.ClickException(str(exc)) from exc

    values = environment.as_dict(mask_secrets=not show_secrets)
    if as_json:
        click.echo(json.dumps(values, indent=2))
        return

    Console().print(_render_table(values))


if __name__ == "__main__":
    main()
