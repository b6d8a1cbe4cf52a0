"""Tests for format_result and OutputSettings."""

import json

from coursectl.output.formatters import OutputSettings, format_result
from coursectl.services.result import ServiceError, ServiceResult

COURSE = {
    "id": 1,
    "name": "Spring Boot Masterclass",
    "description": "Enterprise apps",
    "category": {"id": 1, "name": "Web Development"},
}


def _ok(op: str = "get_course", **data: object) -> ServiceResult:
    return ServiceResult(ok=True, op=op, data=dict(data))


def _err(op: str = "get_course", msg: str = "fail") -> ServiceResult:
    return ServiceResult(ok=False, op=op, error=ServiceError(code="NOT_FOUND", message=msg))


class TestOutputSettings:
    def test_defaults(self) -> None:
        s = OutputSettings()
        assert (s.json_output, s.quiet, s.verbose) == (False, False, False)


class TestJsonMode:
    def test_returns_valid_json(self) -> None:
        output = format_result(_ok(**COURSE), settings=OutputSettings(json_output=True))
        data = json.loads(output)
        assert data["ok"] is True
        assert data["data"]["category"]["name"] == "Web Development"

    def test_error_json(self) -> None:
        data = json.loads(format_result(_err(), settings=OutputSettings(json_output=True)))
        assert data["error"]["code"] == "NOT_FOUND"


class TestQuietMode:
    def test_single_id(self) -> None:
        assert format_result(_ok(**COURSE), settings=OutputSettings(quiet=True)) == "1"

    def test_list_ids(self) -> None:
        result = _ok("list_courses", items=[COURSE, {**COURSE, "id": 2}], count=2)
        assert format_result(result, settings=OutputSettings(quiet=True)) == "1\n2"

    def test_error(self) -> None:
        output = format_result(_err(msg="No course"), settings=OutputSettings(quiet=True))
        assert output == "ERROR: get_course: No course"


class TestHumanMode:
    def test_course(self) -> None:
        output = format_result(_ok(**COURSE))
        assert output.startswith("OK: get_course")
        assert "Spring Boot Masterclass" in output
        assert "Web Development (#1)" in output

    def test_error(self) -> None:
        output = format_result(_err(msg="No course found with ID: 9"))
        assert output == "ERROR: get_course: No course found with ID: 9"
