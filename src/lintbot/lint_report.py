"""Parsing the text report written by a module-lint run."""

import math
import re
from pathlib import Path

from .models import LintbotError, ParsedLintOutput

OUTPUT_FILE_SUFFIX = "--output.txt"

RESULTS_LABEL = re.compile(r"^Results:[ ]+")
ELAPSED_TIME_LABEL = re.compile(r"^Elapsed time:[ ]+")
RESULTS_SUMMARY = re.compile(
    r"(\d+) passed, (\d+) failed, (\d+) errored, (\d+) total", re.ASCII
)


class LintReportParseError(LintbotError):
    """Raised when the summary at the end of a report cannot be parsed."""

    def __init__(self, message: str = "Couldn't parse module-lint report output"):
        super().__init__(message)


def read_lint_output_file(project_name: str, module_lint_runs_directory: str) -> str:
    """
    Read the output file of a previous module-lint run.

    Args:
        project_name: The name of the project that was linted
        module_lint_runs_directory: The directory holding the output file

    Returns:
        The file content with leading and trailing whitespace removed
    """
    output_file = Path(module_lint_runs_directory) / f"{project_name}{OUTPUT_FILE_SUFFIX}"
    return output_file.read_text(encoding="utf-8", errors="replace").strip()


def calculate_percentage(passed: int, total: int) -> float:
    """
    Express passed/total as a percentage rounded to one decimal place.

    Halves round up, so 0.05 becomes 0.1. A total of zero is not guarded
    against and raises ZeroDivisionError.
    """
    return math.floor(passed / total * 1000 + 0.5) / 10


def format_percentage(percentage: float) -> str:
    """Render a percentage without a trailing ".0" for whole numbers."""
    if percentage.is_integer():
        return str(int(percentage))
    return repr(percentage)


def parse_lint_output(lint_output: str) -> ParsedLintOutput:
    """
    Parse the output of a module-lint run into its summary numbers.

    The last blank-line separated section of the report is expected to look
    like:

        Results:       12 passed, 3 failed, 1 errored, 16 total
        Elapsed time:  1234 ms

    Args:
        lint_output: The report text

    Returns:
        The parsed summary

    Raises:
        LintReportParseError: If the summary section is malformed or reports
            no rules at all
    """
    summary_section = lint_output.split("\n\n")[-1]

    lines = summary_section.split("\n")
    if len(lines) < 2:
        raise LintReportParseError()
    report_summary_line, elapsed_time_line = lines[0], lines[1]

    report_summary = RESULTS_LABEL.sub("", report_summary_line, count=1)
    match = RESULTS_SUMMARY.search(report_summary)
    if match is None:
        raise LintReportParseError()

    passed, failed, errored, total = (int(group) for group in match.groups())
    duration_with_unit = ELAPSED_TIME_LABEL.sub("", elapsed_time_line, count=1)

    try:
        percentage = calculate_percentage(passed, total)
    except ZeroDivisionError as e:
        raise LintReportParseError(
            "Couldn't compute a pass percentage: module-lint reported 0 total rules"
        ) from e

    return ParsedLintOutput(
        passed=passed,
        failed=failed,
        errored=errored,
        total=total,
        duration_with_unit=duration_with_unit,
        percentage=percentage,
    )
