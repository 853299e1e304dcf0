"""Tests for the per-operation Rich renderers."""

from __future__ import annotations

from timeman.output.renderers import render_quiet, render_result
from timeman.services.result import ServiceError, ServiceResult


def _span(units: list[str]) -> ServiceResult:
    return ServiceResult(
        ok=True,
        op="since",
        data={
            "text": "1 Second, 32 Nanoseconds",
            "encoded": "PT1.32S",
            "seconds": 1,
            "nanoseconds": 32,
            "units": units,
        },
    )


def _help(mode: str, items: list[dict[str, str]]) -> ServiceResult:
    return ServiceResult(ok=True, op="help-format", data={"mode": mode, "items": items})


class TestValueRenderer:
    def test_prints_text(self) -> None:
        result = ServiceResult(ok=True, op="now", data={"text": "[bold]x[/]", "iso": "y"})
        assert render_result(result) == "[bold]x[/]"

    def test_verbose_adds_fields_and_meta(self) -> None:
        result = ServiceResult(
            ok=True, op="now", data={"text": "x", "iso": "y"}, meta={"format": "%F"}
        )
        assert render_result(result, verbose=True).splitlines() == [
            "x",
            "  iso: y",
            "  format: %F",
        ]

    def test_unknown_op_falls_back_to_text(self) -> None:
        result = ServiceResult(ok=True, op="something-else", data={"text": "value"})
        assert render_result(result) == "value"


class TestSpanRenderer:
    def test_plain(self) -> None:
        assert render_result(_span(["SECOND", "NANOS"])) == "1 Second, 32 Nanoseconds"

    def test_verbose(self) -> None:
        lines = render_result(_span(["SECOND", "NANOS"]), verbose=True).splitlines()
        assert lines == [
            "1 Second, 32 Nanoseconds",
            "  encoded: PT1.32S",
            "  seconds: 1",
            "  nanoseconds: 32",
            "  units: SECOND, NANOS",
        ]

    def test_verbose_empty_units(self) -> None:
        output = render_result(_span([]), verbose=True)
        assert "  units: (none)" in output.splitlines()


class TestFormatHelpRenderer:
    def test_exact(self) -> None:
        result = _help("exact", [{"directive": "%T", "description": "Time like: 17:46:05"}])
        assert render_result(result) == "%T : Time like: 17:46:05"

    def test_listing_pads_keys(self) -> None:
        result = _help(
            "all",
            [
                {"directive": "%%", "description": "A literal %"},
                {"directive": "%Y", "description": "Year"},
            ],
        )
        assert render_result(result).splitlines() == ["%% : A literal %", "%Y : Year"]

    def test_empty_listing(self) -> None:
        assert render_result(_help("search", [])) == ""

    def test_quiet_lists_keys(self) -> None:
        result = _help("all", [{"directive": "%a", "description": "a"}, {"directive": "%b", "description": "b"}])
        assert render_quiet(result) == "%a\n%b"


class TestErrorRenderer:
    def _failed(self) -> ServiceResult:
        return ServiceResult(
            ok=False,
            op="add-duration",
            error=ServiceError(
                code="INVALID_DURATION",
                message="Unknown duration character 'X'",
                detail={"kind": "DurationDecodeError"},
            ),
        )

    def test_plain(self) -> None:
        assert render_result(self._failed()) == (
            "ERROR: add-duration - Unknown duration character 'X'"
        )

    def test_verbose(self) -> None:
        lines = render_result(self._failed(), verbose=True).splitlines()
        assert lines[1:] == ["  code: INVALID_DURATION", "  kind: DurationDecodeError"]

    def test_quiet(self) -> None:
        assert render_quiet(self._failed()) == (
            "ERROR: add-duration - Unknown duration character 'X'"
        )

    def test_missing_error_payload(self) -> None:
        result = ServiceResult(ok=False, op="now")
        assert render_result(result) == "ERROR: now - Unknown error"
        assert render_quiet(result) == "ERROR: now - Unknown error"
