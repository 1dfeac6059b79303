"""Command line entry point for the SOLID demos."""

from __future__ import annotations

import logging

import click
from dotenv import find_dotenv, load_dotenv

from solid_principles.core.config import (
    get_json_logging_enabled,
    get_log_level,
    log_config,
)
from solid_principles.core.logging_config import setup_logging
from solid_principles.demos import DEMOS, get_demo

logger = logging.getLogger(__name__)


@click.group()
def cli() -> None:
    """Run the SOLID principle demos."""
    # Search from the working directory, not from the installed package
    load_dotenv(find_dotenv(usecwd=True))

    log_level = get_log_level()
    use_json_format = get_json_logging_enabled()
    setup_logging(log_level=log_level, use_json_format=use_json_format)
    log_config(log_level, use_json_format)


def _make_demo_command(name: str) -> click.Command:
    demo = DEMOS[name]

    @click.command(name=demo.name, help=f"{demo.title} demo.")
    def command() -> None:
        logger.debug("Running demo", extra={"context": {"demo": demo.name}})
        demo.run()

    return command


for _name in DEMOS:
    cli.add_command(_make_demo_command(_name))


@cli.command("all")
def run_all() -> None:
    """Run every demo, separated by a blank line."""
    for index, name in enumerate(DEMOS):
        if index:
            print()
        get_demo(name).run()


@cli.command("list")
def list_command() -> None:
    """List the available demos."""
    for demo in DEMOS.values():
        print(f"{demo.name}  {demo.title}")


if __name__ == "__main__":
    cli()
