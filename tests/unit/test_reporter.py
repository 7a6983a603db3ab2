"""Unit tests for cs2.reporter — Reporter, report and summarize."""
from __future__ import annotations

import io

from rich.console import Console

from cs2.core.diagnostics import Diagnostic, Severity
from cs2.reporter import Reporter, Summary, report, summarize


def _diag(
    file: str = "a.c",
    line: int | None = 5,
    column: int | None = 1,
    severity: Severity = Severity.MINOR,
    rule: str = "C-S1",
    description: str = "trailing space",
    suppressed: bool = False,
    occurrences: int = 1,
) -> Diagnostic:
    return Diagnostic(
        file=file,
        line=line,
        column=column,
        severity=severity,
        rule=rule,
        description=description,
        suppressed=suppressed,
        occurrences=occurrences,
    )


def _output(console: Console) -> list[str]:
    return console.file.getvalue().splitlines()  # type: ignore[attr-defined]


# ===========================================================================
# summarize
# ===========================================================================


class TestSummarize:
    def test_counts_per_severity(self) -> None:
        summary = summarize(
            [_diag(severity=Severity.FATAL), _diag(severity=Severity.MINOR), _diag(severity=Severity.MINOR)]
        )
        assert summary.by_severity == {
            Severity.FATAL: 1,
            Severity.MAJOR: 0,
            Severity.MINOR: 2,
            Severity.INFO: 0,
        }
        assert summary.visible == 3
        assert summary.suppressed == 0

    def test_suppressed_counted_separately(self) -> None:
        summary = summarize([_diag(suppressed=True), _diag()])
        assert summary.suppressed == 1
        assert summary.visible == 1

    def test_occurrences_do_not_inflate_counts(self) -> None:
        assert summarize([_diag(occurrences=5)]).visible == 1

    def test_empty(self) -> None:
        summary = summarize([])
        assert summary.visible == 0
        assert summary.has_findings is False

    def test_severity_order_is_fixed(self) -> None:
        summary = summarize([_diag(severity=Severity.INFO)])
        assert list(summary.by_severity) == list(Severity)

    def test_default_summary_is_empty(self) -> None:
        assert Summary(suppressed=0).has_findings is False


# ===========================================================================
# Reporter body
# ===========================================================================


class TestReporterBody:
    def test_header_and_line(self, plain_console: Console) -> None:
        Reporter(plain_console).report([_diag()])
        lines = _output(plain_console)
        assert lines[0] == "a.c:"
        assert lines[1] == "MINOR [C-S1]: trailing space (a.c:5:1)"

    def test_occurrence_suffix(self, plain_console: Console) -> None:
        Reporter(plain_console).report([_diag(occurrences=2)])
        assert _output(plain_console)[1] == "MINOR [C-S1]: trailing space (a.c:5:1) (x2)"

    def test_absent_location_parts_are_omitted(self, plain_console: Console) -> None:
        Reporter(plain_console).report(
            [_diag(file="b.c", line=None, column=None, severity=Severity.FATAL, rule="C-H1", description="missing header")]
        )
        assert _output(plain_console)[1] == "FATAL [C-H1]: missing header (b.c)"

    def test_header_once_per_run_of_same_file(self, plain_console: Console) -> None:
        Reporter(plain_console).report(
            [_diag("a.c", line=1), _diag("a.c", line=2), _diag("b.c"), _diag("a.c", line=3)]
        )
        lines = _output(plain_console)
        assert lines.count("a.c:") == 2
        assert lines.count("b.c:") == 1

    def test_suppressed_diagnostics_are_not_printed(self, plain_console: Console) -> None:
        Reporter(plain_console).report([_diag("gen.c", suppressed=True), _diag("a.c")])
        lines = _output(plain_console)
        assert "gen.c:" not in lines
        assert not any("gen.c" in line for line in lines)

    def test_header_for_file_after_suppressed_run(self, plain_console: Console) -> None:
        Reporter(plain_console).report([_diag("a.c", suppressed=True), _diag("a.c", line=9)])
        lines = _output(plain_console)
        assert lines[0] == "a.c:"
        assert lines[1].endswith("(a.c:9:1)")

    def test_description_with_brackets_is_printed_verbatim(self, plain_console: Console) -> None:
        Reporter(plain_console).report([_diag(description="use [bold] braces")])
        assert "use [bold] braces" in _output(plain_console)[1]

    def test_render_uses_severity_style(self) -> None:
        text = Reporter(Console(file=io.StringIO())).render(_diag(severity=Severity.INFO))
        assert str(text.spans[0].style) == Severity.INFO.style

    def test_render_plain_text(self) -> None:
        text = Reporter(Console(file=io.StringIO())).render(_diag(occurrences=4))
        assert text.plain == "MINOR [C-S1]: trailing space (a.c:5:1) (x4)"


# ===========================================================================
# Reporter summary
# ===========================================================================


class TestReporterSummary:
    def test_no_errors_message(self, plain_console: Console) -> None:
        Reporter(plain_console).report([])
        assert _output(plain_console) == ["There are no coding style errors!"]

    def test_counts_line(self, plain_console: Console) -> None:
        Reporter(plain_console).report(
            [_diag("a.c", severity=Severity.MINOR), _diag("b.c", severity=Severity.FATAL)]
        )
        assert _output(plain_console)[-1] == "2 error(s): 1 fatal, 0 major, 1 minor, 0 info"

    def test_ignored_hint(self, plain_console: Console) -> None:
        Reporter(plain_console).report([_diag(suppressed=True), _diag("b.c")])
        lines = _output(plain_console)
        assert "1 ignored errors (use --no-ignore to see them)" in lines
        assert lines[-1] == "1 error(s): 0 fatal, 0 major, 1 minor, 0 info"

    def test_all_suppressed(self, plain_console: Console) -> None:
        Reporter(plain_console).report([_diag(suppressed=True), _diag("b.c", suppressed=True)])
        assert _output(plain_console) == [
            "2 ignored errors (use --no-ignore to see them)",
            "There are no coding style errors!",
        ]

    def test_fatal_count_is_bold(self) -> None:
        console = Console(file=io.StringIO(), force_terminal=True, color_system="standard", width=200)
        Reporter(console).report([_diag(severity=Severity.FATAL)])
        output = console.file.getvalue()  # type: ignore[attr-defined]
        assert "\x1b[1;31m1 fatal" in output


# ===========================================================================
# Return value
# ===========================================================================


class TestReportReturnValue:
    def test_false_for_empty_list(self, plain_console: Console) -> None:
        assert report([], console=plain_console) is False

    def test_false_when_everything_suppressed(self, plain_console: Console) -> None:
        assert report([_diag(suppressed=True)], console=plain_console) is False

    def test_true_with_one_visible_diagnostic(self, plain_console: Console) -> None:
        assert report([_diag(suppressed=True), _diag("b.c")], console=plain_console) is True

    def test_info_alone_still_counts(self, plain_console: Console) -> None:
        assert report([_diag(severity=Severity.INFO)], console=plain_console) is True
