"""
lintbot - Slack reporting for module-lint runs

This package turns the artifacts left behind by module-lint into Slack
payloads:
1. `lintbot initial` checks the exit codes of every run and opens a thread
2. `lintbot project` parses one project's report and posts it to the thread
"""

from .cli import main
from .exit_codes import ExitCodeParseError
from .environment import MissingEnvironmentVariableError
from .lint_report import LintReportParseError, parse_lint_output
from .models import LintbotError, ParsedLintOutput
from .reporter import report_initial, report_project

__all__ = [
    "ExitCodeParseError",
    "LintReportParseError",
    "LintbotError",
    "MissingEnvironmentVariableError",
    "ParsedLintOutput",
    "main",
    "parse_lint_output",
    "report_initial",
    "report_project",
]
