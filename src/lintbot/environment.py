"""Reading script inputs from environment variables."""

from typing import Mapping

from .models import InitialInputs, LintbotError, ProjectInputs


class MissingEnvironmentVariableError(LintbotError):
    """Raised when a required environment variable has not been set."""

    pass


def require_environment_variable(
    variable_name: str, environ: Mapping[str, str], allow_empty: bool = False
) -> str:
    """
    Obtain the given environment variable, raising if it has not been set.

    Args:
        variable_name: The name of the desired environment variable
        environ: The environment to read from
        allow_empty: Whether an empty string counts as being set

    Returns:
        The value of the environment variable

    Raises:
        MissingEnvironmentVariableError: If the variable is unset (or empty,
            unless allow_empty is true)
    """
    value = environ.get(variable_name)

    if value is None or (value == "" and not allow_empty):
        raise MissingEnvironmentVariableError(
            f"Missing environment variable {variable_name}."
        )

    return value


def is_running_on_ci(environ: Mapping[str, str]) -> bool:
    """Check whether CI is set, whatever its value."""
    return "CI" in environ


def get_initial_inputs(environ: Mapping[str, str]) -> InitialInputs:
    """Obtain the inputs for the aggregate report."""
    return InitialInputs(
        github_repository=require_environment_variable("GITHUB_REPOSITORY", environ),
        github_run_id=require_environment_variable("GITHUB_RUN_ID", environ),
        module_lint_runs_directory=require_environment_variable(
            "MODULE_LINT_RUNS_DIRECTORY", environ
        ),
        channel_id=require_environment_variable("SLACK_CHANNEL_ID", environ),
        is_running_on_ci=is_running_on_ci(environ),
    )


def get_project_inputs(environ: Mapping[str, str]) -> ProjectInputs:
    """Obtain the inputs for a per-project report.

    Unlike the aggregate report, empty values are accepted here.
    """

    def require(variable_name: str) -> str:
        return require_environment_variable(variable_name, environ, allow_empty=True)

    return ProjectInputs(
        github_repository=require("GITHUB_REPOSITORY"),
        github_run_id=require("GITHUB_RUN_ID"),
        project_name=require("PROJECT_NAME"),
        module_lint_runs_directory=require("MODULE_LINT_RUNS_DIRECTORY"),
        channel_id=require("SLACK_CHANNEL_ID"),
        thread_ts=require("SLACK_THREAD_TS"),
        is_running_on_ci=is_running_on_ci(environ),
    )
