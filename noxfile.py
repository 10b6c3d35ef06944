"""Nox configuration for apikey-config quality assurance tasks."""

import nox  # pyright: ignore[reportMissingImports] # noqa: I001

# Configure nox to use uv for faster package installs
nox.options.default_venv_backend = "uv"

PYTHON_VERSIONS = ["3.11", "3.12", "3.13"]

RUFF_TOOL = ["uv", "tool", "run", "ruff"]
TYPECHECK_TOOL = ["uv", "tool", "run", "mypy"]
SOURCE_PATHS = ["apikey_config/", "tests/"]


@nox.session(python=PYTHON_VERSIONS[-1])
def lint(session: nox.Session) -> None:
    """Run linting with ruff check."""
    session.install("-e", ".[dev]")
    session.run(*RUFF_TOOL, "check", *SOURCE_PATHS, *session.posargs, external=True)


@nox.session(python=PYTHON_VERSIONS[-1])
def mypy(session: nox.Session) -> None:
    """Run type checking with mypy."""
    session.install("-e", ".[dev]")
    session.run(*TYPECHECK_TOOL, *SOURCE_PATHS, external=True)


@nox.session(python=PYTHON_VERSIONS[-1])
def format_check(session: nox.Session) -> None:
    """Check code formatting with ruff format."""
    session.install("-e", ".[dev]")
    session.run(
        *RUFF_TOOL, "format", *SOURCE_PATHS, "--check", "--diff", external=True
    )


@nox.session(python=PYTHON_VERSIONS[-1])
def format(session: nox.Session) -> None:
    """Format code with ruff format."""
    session.install("-e", ".[dev]")
    session.run(*RUFF_TOOL, "format", *SOURCE_PATHS, external=True)


@nox.session(python=PYTHON_VERSIONS)
def tests(session: nox.Session) -> None:
    """Run tests with pytest."""
    session.install("-e", ".[dev]")
    session.run("pytest", "--verbose")
