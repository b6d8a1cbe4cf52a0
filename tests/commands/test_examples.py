"""Tests for the --examples flag."""

from __future__ import annotations

import pytest
from click.testing import CliRunner

from coursectl.cli import cli

EXAMPLES_COMMANDS: list[tuple[list[str], list[str]]] = [
    (["course", "--examples"], ["coursectl course create", "coursectl course show"]),
    (["course", "create", "--examples"], ["--category"]),
    (["course", "show", "--examples"], ["coursectl course show 1"]),
    (["course", "update", "--examples"], ["--description", "--category-id"]),
    (["course", "delete", "--examples"], ["coursectl course delete"]),
    (["course", "list", "--examples"], ["coursectl -q course list"]),
    (["demo", "--examples"], ["coursectl demo"]),
]


@pytest.mark.parametrize(
    ("args", "keywords"),
    EXAMPLES_COMMANDS,
    ids=["_".join(a for a in args if a != "--examples") for args, _ in EXAMPLES_COMMANDS],
)
def test_examples_flag(cli_runner: CliRunner, args: list[str], keywords: list[str]) -> None:
    result = cli_runner.invoke(cli, args)
    assert result.exit_code == 0, result.output
    assert "Examples for" in result.output
    for keyword in keywords:
        assert keyword in result.output
