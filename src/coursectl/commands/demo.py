"""Command: run the create/find/update/delete walkthrough."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from coursectl.commands._base import CourseCommand

if TYPE_CHECKING:
    from coursectl.commands._context import AppContext


@click.command(
    cls=CourseCommand,
    examples="""\
  coursectl demo
  coursectl --json demo
  coursectl --database-url sqlite:///demo.db demo""",
)
@click.pass_obj
def demo(app: AppContext) -> None:
    """Walk one course through its whole lifecycle."""
    app.emit(app.courses.walkthrough())
