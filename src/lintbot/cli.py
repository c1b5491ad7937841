"""Command line interface for lintbot."""

import argparse
import os
import sys
from importlib.metadata import version

from .models import LintbotError
from .reporter import report_initial, report_project


def main(environ=None):
    """Main function with command line argument parsing."""
    pkg_version = version("lintbot")

    parser = argparse.ArgumentParser(
        description="lintbot - Slack payloads for module-lint runs"
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"lintbot {pkg_version}",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    initial_parser = subparsers.add_parser(
        "initial",
        help="Build the message that opens the report thread",
    )
    project_parser = subparsers.add_parser(
        "project",
        help="Build the thread reply for a single project",
    )
    for subparser in (initial_parser, project_parser):
        subparser.add_argument(
            "-v",
            "--verbose",
            action="store_true",
            help="Show progress on stderr",
        )

    args = parser.parse_args()

    if environ is None:
        environ = os.environ

    reporters = {"initial": report_initial, "project": report_project}

    try:
        reporters[args.command](environ, verbose=args.verbose)
    except LintbotError as e:
        print(f"💀 FATAL: {e}", file=sys.stderr)
        sys.exit(1)
