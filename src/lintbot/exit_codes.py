"""Reading the exit code files left behind by module-lint runs."""

import math
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Iterable, List

from .models import LintbotError

EXIT_CODE_FILE_SUFFIX = "--exitcode.txt"


class ExitCodeParseError(LintbotError):
    """Raised when an exit code file does not hold a number."""

    pass


def read_exit_code_file(exit_code_file: Path) -> float:
    """
    Read a single exit code file.

    Blank files count as 0. Anything that reads as a number is accepted, so
    "0.0" is a success too.
    """
    content = exit_code_file.read_text(encoding="utf-8", errors="replace").strip()
    if not content:
        return 0
    try:
        return int(content)
    except ValueError:
        pass
    try:
        exit_code = float(content)
    except ValueError as e:
        raise ExitCodeParseError(f"Could not parse '{content}' as exit code") from e
    if math.isnan(exit_code):
        raise ExitCodeParseError(f"Could not parse '{content}' as exit code")
    return exit_code


def read_exit_code_files(module_lint_runs_directory: str) -> List[float]:
    """
    Read the exit code files produced by previous module-lint runs.

    Args:
        module_lint_runs_directory: The directory that holds the exit code files

    Returns:
        The exit codes, ordered by file name
    """
    directory = Path(module_lint_runs_directory)
    exit_code_files = sorted(
        entry
        for entry in directory.iterdir()
        if entry.name.endswith(EXIT_CODE_FILE_SUFFIX)
    )

    if not exit_code_files:
        return []

    with ThreadPoolExecutor() as executor:
        return list(executor.map(read_exit_code_file, exit_code_files))


def all_runs_successful(exit_codes: Iterable[float]) -> bool:
    """True if every run exited with 0 (or there were no runs)."""
    return all(exit_code == 0 for exit_code in exit_codes)
