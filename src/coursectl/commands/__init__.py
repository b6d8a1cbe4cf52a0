"""Subcommand modules for coursectl.

register_commands() imports lazily so ``coursectl --help`` stays fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the ``course`` group and the standalone ``demo`` command."""
    from coursectl.commands.course import course
    from coursectl.commands.demo import demo

    cli.add_command(course)
    cli.add_command(demo)
