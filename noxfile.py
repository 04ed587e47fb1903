import os
from pathlib import Path
import nox

# Reuse existing virtualenvs for faster runs
nox.options.reuse_existing_virtualenvs = True
# Default sessions when running "nox"
nox.options.sessions = ["lint", "unit", "integration"]

# Common dependencies for test sessions
COMMON_DEPS = ["-e", ".[test]"]

# Environment variables to propagate
PASSED_ENV_VARS = [
    "DATA_DIR",
    "DATABASE_URL",
    "DB_DRIVER",
    "LOG_LEVEL",
]


def _set_env(session):
    """
    Propagate database and logging environment variables into the session.
    """
    session.env["PYTHONPATH"] = str(Path.cwd())
    for var in PASSED_ENV_VARS:
        if var in os.environ:
            session.env[var] = os.environ[var]


@nox.session(name="lint")
def lint(session):
    """
    Code formatting, linting, and type-checks:
      - isort
      - black
      - flake8
      - mypy
    """
    _set_env(session)
    session.install("isort", "black", "flake8", "mypy")
    session.run("isort", "votebox/", "tests/")
    session.run("black", "votebox/", "tests/")
    session.run("flake8", "votebox/", "tests/")
    session.run("mypy", "votebox/")


@nox.session(name="unit")
def unit(session):
    """
    Run unit tests against throwaway SQLite databases.
    Usage:
      nox -s unit
      nox -s unit -- tests/unit/test_schema.py::TestIdempotence
    """
    _set_env(session)
    session.install(*COMMON_DEPS)
    tests = session.posargs or ["tests/unit"]
    session.run(
        "pytest",
        *tests,
        "-m",
        "unit",
        "-vv",
        "--tb=short",
        "--cov=votebox",
        "--cov-report=term-missing",
        "--cov-fail-under=80",
    )


@nox.session(name="integration")
def integration(session):
    """
    Drive the HTTP application through the test client.
    Usage:
      nox -s integration
    """
    _set_env(session)
    session.install(*COMMON_DEPS)
    tests = session.posargs or ["tests/integration"]
    session.run(
        "pytest",
        *tests,
        "--maxfail=1",
        "-vv",
        "--tb=short",
    )
