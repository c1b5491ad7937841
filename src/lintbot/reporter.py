"""Report runs: read module-lint artifacts and emit a Slack payload."""

import sys
from typing import Any, Dict, Mapping

from .environment import get_initial_inputs, get_project_inputs
from .exit_codes import all_runs_successful, read_exit_code_files
from .lint_report import format_percentage, parse_lint_output, read_lint_output_file
from .output import SLACK_PAYLOAD_OUTPUT, emit_payload
from .payloads import build_initial_payload, build_project_payload


def _status(message: str) -> None:
    # stdout is reserved for the payload preview
    print(message, file=sys.stderr)


def report_initial(environ: Mapping[str, str], verbose: bool = False) -> Dict[str, Any]:
    """
    Emit the message that opens the Slack thread for a module-lint run.

    Args:
        environ: The environment to read inputs from
        verbose: Whether to print progress to stderr

    Returns:
        The emitted payload
    """
    inputs = get_initial_inputs(environ)
    if verbose:
        _status(f"📂 Reading exit codes from {inputs.module_lint_runs_directory}")

    exit_codes = read_exit_code_files(inputs.module_lint_runs_directory)
    successful = all_runs_successful(exit_codes)
    if verbose:
        failing = sum(1 for exit_code in exit_codes if exit_code != 0)
        _status(f"📊 Read {len(exit_codes)} exit codes, {failing} failing")
        _status("✅ All runs passed" if successful else "❌ Some runs failed")

    payload = build_initial_payload(inputs, successful)
    emit_payload(payload, inputs.is_running_on_ci, environ)
    if verbose and inputs.is_running_on_ci:
        _status(f"📤 Wrote {SLACK_PAYLOAD_OUTPUT} step output")

    return payload


def report_project(environ: Mapping[str, str], verbose: bool = False) -> Dict[str, Any]:
    """
    Emit the thread reply describing a single project's module-lint run.

    Args:
        environ: The environment to read inputs from
        verbose: Whether to print progress to stderr

    Returns:
        The emitted payload
    """
    inputs = get_project_inputs(environ)
    if verbose:
        _status(f"📂 Reading module-lint output for {inputs.project_name}")

    lint_output = read_lint_output_file(
        inputs.project_name, inputs.module_lint_runs_directory
    )
    parsed = parse_lint_output(lint_output)
    if verbose:
        _status(
            f"📊 {parsed.passed} passed, {parsed.failed} failed, "
            f"{parsed.errored} errored, {parsed.total} total "
            f"({format_percentage(parsed.percentage)}%) in {parsed.duration_with_unit}"
        )

    payload = build_project_payload(inputs, lint_output, parsed)
    emit_payload(payload, inputs.is_running_on_ci, environ)
    if verbose and inputs.is_running_on_ci:
        _status(f"📤 Wrote {SLACK_PAYLOAD_OUTPUT} step output")

    return payload
