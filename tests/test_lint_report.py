"""Unit tests for module-lint report parsing."""

import pytest

from lintbot.lint_report import (
    LintReportParseError,
    calculate_percentage,
    format_percentage,
    parse_lint_output,
    read_lint_output_file,
)

REPORT = """\
utils
-----

- Does the package have a well-formed manifest (`package.json`)? ✅
- Does the `src/` directory exist? ❌
  - `src/` does not exist in this project.

Results:       12 passed, 3 failed, 1 errored, 16 total
Elapsed time:  1234 ms"""


def test_parse_full_report():
    """Test parsing the summary section at the end of a report."""
    parsed = parse_lint_output(REPORT)

    assert parsed.passed == 12
    assert parsed.failed == 3
    assert parsed.errored == 1
    assert parsed.total == 16
    assert parsed.duration_with_unit == "1234 ms"
    assert parsed.percentage == 75.0


def test_parse_summary_only():
    """Test a report made of nothing but the summary lines."""
    parsed = parse_lint_output(
        "Results:   12 passed, 3 failed, 1 errored, 16 total\nElapsed time: 1.2s"
    )

    assert (parsed.passed, parsed.failed, parsed.errored, parsed.total) == (
        12,
        3,
        1,
        16,
    )
    assert parsed.duration_with_unit == "1.2s"


def test_parse_without_labels():
    """The labels are optional; the counts are found anywhere in the line."""
    parsed = parse_lint_output("5 passed, 0 failed, 0 errored, 5 total\n42 ms")

    assert parsed.total == 5
    assert parsed.duration_with_unit == "42 ms"


def test_parse_only_uses_last_section():
    """Counts in earlier sections are ignored."""
    report = (
        "Results: 1 passed, 1 failed, 0 errored, 2 total\nElapsed time: 1 ms"
        "\n\n"
        "Results: 3 passed, 0 failed, 0 errored, 3 total\nElapsed time: 2 ms"
    )

    parsed = parse_lint_output(report)

    assert parsed.passed == 3
    assert parsed.duration_with_unit == "2 ms"


def test_parse_missing_elapsed_time_line():
    """A summary section with a single line is rejected."""
    with pytest.raises(LintReportParseError, match="Couldn't parse module-lint"):
        parse_lint_output("Results: 5 passed, 0 failed, 0 errored, 5 total")


def test_parse_missing_counts():
    """A summary without the passed/failed/errored/total pattern is rejected."""
    with pytest.raises(LintReportParseError):
        parse_lint_output("Results: 5 passed, 0 failed, 5 total\nElapsed time: 1 ms")


def test_parse_counts_outside_last_section():
    """Counts in an earlier section do not rescue a malformed last section."""
    report = (
        "Results: 5 passed, 0 failed, 0 errored, 5 total\nElapsed time: 1 ms"
        "\n\n"
        "Something else entirely\nElapsed time: 1 ms"
    )

    with pytest.raises(LintReportParseError):
        parse_lint_output(report)


def test_parse_zero_total():
    """A report with no rules fails with a clear message."""
    with pytest.raises(LintReportParseError, match="0 total rules") as exc_info:
        parse_lint_output(
            "Results: 0 passed, 0 failed, 0 errored, 0 total\nElapsed time: 1 ms"
        )

    assert isinstance(exc_info.value.__cause__, ZeroDivisionError)


def test_calculate_percentage_zero_total():
    """The percentage itself does not guard the division."""
    with pytest.raises(ZeroDivisionError):
        calculate_percentage(0, 0)


@pytest.mark.parametrize(
    "passed,total,expected",
    [
        (10, 10, 100.0),
        (1, 3, 33.3),
        (2, 3, 66.7),
        (0, 4, 0.0),
        (1, 16, 6.3),
        (1, 8, 12.5),
    ],
)
def test_calculate_percentage(passed, total, expected):
    """Test rounding to one decimal place."""
    assert calculate_percentage(passed, total) == expected


def test_calculate_percentage_rounds_half_up():
    """6.25% rounds up to 6.3% rather than to the nearest even digit."""
    assert calculate_percentage(1, 16) == 6.3
    assert calculate_percentage(3, 16) == 18.8


def test_format_percentage():
    """Whole numbers are rendered without a decimal part."""
    assert format_percentage(100.0) == "100"
    assert format_percentage(0.0) == "0"
    assert format_percentage(33.3) == "33.3"
    assert format_percentage(66.7) == "66.7"


def test_read_lint_output_file(tmp_path):
    """The output file is read and stripped."""
    (tmp_path / "utils--output.txt").write_text(f"\n{REPORT}\n\n", encoding="utf-8")

    assert read_lint_output_file("utils", str(tmp_path)) == REPORT


def test_read_lint_output_file_missing(tmp_path):
    """A missing output file is an I/O error and is not wrapped."""
    with pytest.raises(FileNotFoundError):
        read_lint_output_file("utils", str(tmp_path))


def test_read_lint_output_file_invalid_utf8(tmp_path):
    """Undecodable bytes are replaced so the report can still be posted."""
    (tmp_path / "utils--output.txt").write_bytes(
        b"bad \xff byte\n\nResults: 1 passed, 0 failed, 0 errored, 1 total\nElapsed time: 1 ms"
    )

    lint_output = read_lint_output_file("utils", str(tmp_path))

    assert lint_output.startswith("bad � byte")
    assert parse_lint_output(lint_output).passed == 1
