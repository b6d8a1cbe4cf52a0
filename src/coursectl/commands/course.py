"""Command group: course create, show, update, delete, list."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from coursectl.commands._base import CourseGroup

if TYPE_CHECKING:
    from coursectl.commands._context import AppContext


@click.group(
    cls=CourseGroup,
    examples="""\
  coursectl course create "Spring Boot Masterclass" --category "Web Development"
  coursectl --database-url sqlite:///courses.db course list
  coursectl course show 1""",
)
def course() -> None:
    """Create, inspect, change and remove courses."""


@course.command(
    examples="""\
  coursectl course create "Spring Boot Masterclass" --category "Web Development"
  coursectl --json course create "Intro to SQL" --category Databases --description "Basics" """,
)
@click.argument("name")
@click.option("--category", "category_name", required=True, help="Name of a new category.")
@click.option("--description", default="", help="Course description.")
@click.pass_obj
def create(app: AppContext, name: str, category_name: str, description: str) -> None:
    """Create a course and its category."""
    app.emit(app.courses.create_course(name, category_name, description))


@course.command(
    examples="""\
  coursectl course show 1
  coursectl --json course show 1""",
)
@click.argument("course_id", type=int)
@click.pass_obj
def show(app: AppContext, course_id: int) -> None:
    """Show a course with its category."""
    app.emit(app.courses.get_course(course_id))


@course.command(
    examples="""\
  coursectl course update 1 --description "Advanced patterns"
  coursectl course update 1 --name "Spring Boot 3" --category-id 2""",
)
@click.argument("course_id", type=int)
@click.option("--name", default=None, help="New course name.")
@click.option("--description", default=None, help="New description.")
@click.option("--category-id", type=int, default=None, help="ID of an existing category.")
@click.pass_obj
def update(
    app: AppContext,
    course_id: int,
    name: str | None,
    description: str | None,
    category_id: int | None,
) -> None:
    """Update the supplied fields of a course."""
    app.emit(
        app.courses.update_course(
            course_id,
            name=name,
            description=description,
            category_id=category_id,
        )
    )


@course.command(
    examples="""\
  coursectl course delete 1""",
)
@click.argument("course_id", type=int)
@click.pass_obj
def delete(app: AppContext, course_id: int) -> None:
    """Delete a course. Its category is kept."""
    app.emit(app.courses.delete_course(course_id))


@course.command(
    name="list",
    examples="""\
  coursectl course list
  coursectl -v course list
  coursectl -q course list""",
)
@click.pass_obj
def list_cmd(app: AppContext) -> None:
    """List every course."""
    app.emit(app.courses.list_courses())
