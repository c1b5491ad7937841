"""Slack payloads for module-lint reports.

The blocks follow Slack's Block Kit format and can be pasted into the Block
Kit Builder when a payload is printed locally.
"""

from typing import Any, Dict, List

from .lint_report import format_percentage
from .models import InitialInputs, ParsedLintOutput, ProjectInputs

ORGANIZATION = "MetaMask"
BOT_USERNAME = "MetaMask Bot"
BOT_ICON_URL = (
    "https://raw.githubusercontent.com/MetaMask/action-npm-publish/main/robo.png"
)

INITIAL_TEXT = (
    "A new package standardization report is available. "
    "Open this thread to view more details."
)
INITIAL_HEADLINE = "A new package standardization report is available."


def _text(text: str, bold: bool = False) -> Dict[str, Any]:
    element: Dict[str, Any] = {"type": "text", "text": text}
    if bold:
        element["style"] = {"bold": True}
    return element


def _emoji(name: str) -> Dict[str, Any]:
    return {"type": "emoji", "name": name}


def _rich_text(*elements: Dict[str, Any]) -> Dict[str, Any]:
    return {"type": "rich_text", "elements": list(elements)}


def _successful_blocks() -> List[Dict[str, Any]]:
    return [
        _rich_text(
            {
                "type": "rich_text_section",
                "elements": [
                    _emoji("package"),
                    _text(" "),
                    _text(INITIAL_HEADLINE, bold=True),
                    _text("\n\nGreat work! Your team has "),
                    _text("5 repositories", bold=True),
                    _text(" that fully align with the module template.\n\n"),
                    _text("Open this thread to view more details:"),
                    _emoji("point_right"),
                ],
            }
        )
    ]


def _unsuccessful_blocks(inputs: InitialInputs) -> List[Dict[str, Any]]:
    run_url = (
        f"https://github.com/{inputs.github_repository}"
        f"/actions/runs/{inputs.github_run_id}"
    )
    return [
        _rich_text(
            {
                "type": "rich_text_section",
                "elements": [
                    _emoji("package"),
                    _text(" "),
                    _text(INITIAL_HEADLINE, bold=True),
                    _text("\n\nYour team has "),
                    _text("4 repositories", bold=True),
                    _text(
                        " that require maintenance in order to align with the "
                        "module template. This is important for maintaining "
                        "conventions across MetaMask and adhering to our "
                        "security principles.\n\n"
                    ),
                    {"type": "link", "text": "View this run", "url": run_url},
                    _text(", or open this thread to view more details:"),
                    _emoji("point_right"),
                ],
            }
        )
    ]


def build_initial_payload(
    inputs: InitialInputs, all_runs_successful: bool
) -> Dict[str, Any]:
    """
    Build the payload announcing a new standardization report.

    The repository counts in the message are fixed text and do not reflect
    how many projects were actually linted.

    Args:
        inputs: The inputs for the aggregate report
        all_runs_successful: Whether every linted project passed

    Returns:
        The full message when running on CI, otherwise only the blocks
    """
    if all_runs_successful:
        blocks = _successful_blocks()
    else:
        blocks = _unsuccessful_blocks(inputs)

    if inputs.is_running_on_ci:
        return {
            "text": INITIAL_TEXT,
            "blocks": blocks,
            "icon_url": BOT_ICON_URL,
            "username": BOT_USERNAME,
            "channel": inputs.channel_id,
        }

    return {"blocks": blocks}


def build_project_payload(
    inputs: ProjectInputs, lint_output: str, parsed: ParsedLintOutput
) -> Dict[str, Any]:
    """
    Build the thread reply for a single project's module-lint run.

    Args:
        inputs: The inputs for the per-project report
        lint_output: The report text, embedded verbatim in the message
        parsed: The summary parsed out of lint_output

    Returns:
        The full message when running on CI, otherwise only the blocks
    """
    repository_name = f"{ORGANIZATION}/{inputs.project_name}"
    summary = (
        f" {parsed.passed}/{parsed.total} rules passed "
        f"({format_percentage(parsed.percentage)}% alignment with template).\n\n"
    )

    blocks = [
        {
            "type": "header",
            "text": {"type": "plain_text", "text": repository_name},
        },
        _rich_text(
            {
                "type": "rich_text_section",
                "elements": [
                    _emoji(
                        "white_check_mark" if parsed.passed == parsed.total else "x"
                    ),
                    _text(summary, bold=True),
                ],
            },
            {
                "type": "rich_text_preformatted",
                "elements": [_text(lint_output)],
            },
        ),
    ]

    if inputs.is_running_on_ci:
        return {
            "text": f"Report for {repository_name}",
            "blocks": blocks,
            "channel": inputs.channel_id,
            "thread_ts": inputs.thread_ts,
        }

    return {"blocks": blocks}
