"""scss-kit CLI entry point: Click group with subcommands."""

import logging
from pathlib import Path

import click

from scss_kit import __version__

LOG_FORMAT = "[scss-kit] %(message)s"


@click.group()
@click.version_option(version=__version__, prog_name="scss-kit")
@click.option(
    "--root",
    type=click.Path(file_okay=False, path_type=Path),
    default=".",
    show_default=True,
    help="Project root containing scss-kit.config.json",
)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, root: Path, verbose: bool) -> None:
    """scss-kit - responsive SCSS tooling for Shopify themes."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING, format=LOG_FORMAT
    )
    ctx.obj = root.resolve()


# Import and register subcommands
from scss_kit.cli.project import create, doctor, generate, init  # noqa: E402
from scss_kit.cli.responsive import responsive  # noqa: E402
from scss_kit.cli.watch import watch  # noqa: E402

cli.add_command(init)
cli.add_command(generate)
cli.add_command(doctor)
cli.add_command(create)
cli.add_command(responsive)
cli.add_command(watch)
