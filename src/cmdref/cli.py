"""cmdref command-line entry point.

Run with no arguments inside a project that configures ``[tool.cmdref]``
(or ships a ``cmdref.toml``) to regenerate its command reference.
"""

import logging
import sys
from dataclasses import replace
from pathlib import Path

import click

from .command_tree import build_tree, load_command
from .config import FORMATS, ConfigManager
from .errors import CmdrefError, ConfigError
from .generator import generate_docs

logger = logging.getLogger(__name__)


@click.command(name="cmdref")
@click.option("--config", "config_path", help="Config file (default: cmdref.toml or pyproject.toml)")
@click.option("--cli", "cli_ref", help="Root Click command as module:attribute")
@click.option("--output-dir", "-o", help="Directory for generated documentation")
@click.option(
    "--format",
    "fmt",
    type=click.Choice(FORMATS),
    help="Output format (yaml writes one shared record file)",
)
@click.option("--verbose", "-v", is_flag=True, help="Verbose output")
def main(
    config_path: str | None,
    cli_ref: str | None,
    output_dir: str | None,
    fmt: str | None,
    verbose: bool,
) -> None:
    """Generate reference pages for every command of a Click application.

    \b
    Examples:
        # Use the settings in pyproject.toml
        cmdref

        # Document another CLI into a custom directory
        cmdref --cli myapp.cli:main -o site/reference
    """
    logging.basicConfig(level=logging.DEBUG if verbose else logging.INFO, format="%(message)s")

    try:
        config = ConfigManager.load_config(config_path)

        overrides = {
            key: value
            for key, value in (("cli", cli_ref), ("output_dir", output_dir), ("format", fmt))
            if value is not None
        }
        config = replace(config, **overrides)
        config.validate()

        if not config.cli:
            raise ConfigError("No CLI configured. Set 'cli' in [tool.cmdref] or pass --cli")

        # The documented CLI usually lives in the project being built
        cwd = str(Path.cwd())
        if cwd not in sys.path:
            sys.path.insert(0, cwd)

        click.echo("Scanning available commands...")
        command = load_command(config.cli)
        root = build_tree(
            command, name=config.prog_name, disable_autogen_tag=config.disable_autogen_tag
        )

        click.echo(f"Generating {config.format} docs...")
        written = generate_docs(root, config)
        logger.debug(f"{len(written)} documents written")

        click.echo(f"Documentation generated at {config.output_dir}")

    except CmdrefError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(e.exit_code)


if __name__ == "__main__":
    main()
