"""Emitting Slack payloads, either as a GitHub Actions step output or to the console."""

import json
import uuid
from typing import Any, Dict, Mapping

SLACK_PAYLOAD_OUTPUT = "SLACK_PAYLOAD"


def _escape_command_data(value: str) -> str:
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def _escape_command_property(value: str) -> str:
    return _escape_command_data(value).replace(":", "%3A").replace(",", "%2C")


def set_output(name: str, value: str, environ: Mapping[str, str]) -> None:
    """
    Set a step output the way GitHub Actions expects.

    Appends a heredoc-style entry to the file named by GITHUB_OUTPUT. Runners
    without GITHUB_OUTPUT get the legacy ``::set-output`` command on stdout.

    Args:
        name: The output name
        value: The output value
        environ: The environment to look up GITHUB_OUTPUT in
    """
    output_file = environ.get("GITHUB_OUTPUT", "")

    if not output_file:
        print()
        print(
            f"::set-output name={_escape_command_property(name)}::"
            f"{_escape_command_data(value)}"
        )
        return

    delimiter = f"ghadelimiter_{uuid.uuid4()}"
    if delimiter in name:
        raise ValueError(
            f'Unexpected input: name should not contain the delimiter "{delimiter}"'
        )
    if delimiter in value:
        raise ValueError(
            f'Unexpected input: value should not contain the delimiter "{delimiter}"'
        )

    with open(output_file, "a", encoding="utf-8") as handle:
        handle.write(f"{name}<<{delimiter}\n{value}\n{delimiter}\n")


def emit_payload(
    payload: Dict[str, Any], is_running_on_ci: bool, environ: Mapping[str, str]
) -> None:
    """
    Hand the payload to a later workflow step, or print it for a local preview.

    On CI the payload becomes the SLACK_PAYLOAD step output as compact JSON.
    Locally it is pretty-printed so it can be pasted into Slack's Block Kit
    Builder.
    """
    if is_running_on_ci:
        set_output(
            SLACK_PAYLOAD_OUTPUT,
            json.dumps(payload, separators=(",", ":"), ensure_ascii=False),
            environ,
        )
    else:
        print(json.dumps(payload, indent=2, ensure_ascii=False))
