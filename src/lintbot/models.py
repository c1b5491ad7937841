"""Data models for lintbot."""

from dataclasses import dataclass


class LintbotError(Exception):
    """Base class for errors that abort a report run."""

    pass


@dataclass
class InitialInputs:
    """Inputs for the aggregate report posted at the start of a thread."""

    github_repository: str
    github_run_id: str
    module_lint_runs_directory: str
    channel_id: str
    is_running_on_ci: bool = False


@dataclass
class ProjectInputs:
    """Inputs for the per-project report posted as a thread reply."""

    github_repository: str
    github_run_id: str
    project_name: str
    module_lint_runs_directory: str
    channel_id: str
    thread_ts: str
    is_running_on_ci: bool = False


@dataclass
class ParsedLintOutput:
    """The summary numbers pulled out of a module-lint report."""

    passed: int
    failed: int
    errored: int
    total: int
    duration_with_unit: str  # e.g. "1234 ms", kept verbatim
    percentage: float
