"""
Nox sessions for buffered-statsd.

``tests_minimal`` installs no extras, so the client is also exercised
without prometheus_client.
"""

import nox

# Only the full suite runs by default; UDP integration tests bind loopback
nox.options.sessions = ["tests"]
nox.options.default_venv_backend = "uv"


@nox.session(python=["3.10", "3.11", "3.12", "3.13"])
def tests(session):
    """Run unit and loopback UDP integration tests with every extra."""
    session.install(".[full,dev]")
    session.run("pytest", "tests/", "-q", "--no-cov", *session.posargs)


@nox.session(python=["3.10", "3.11", "3.12", "3.13"])
def tests_minimal(session):
    """Run the test suite without optional extras installed."""
    session.install(".[dev]")
    session.run("pytest", "tests/", "-q", "--no-cov", *session.posargs)


@nox.session(python=["3.10", "3.11", "3.12", "3.13"])
def type_check(session):
    """Type-check the package with strict mypy."""
    session.install(".[full,dev]")
    session.run("mypy", "src/buffered_statsd", *session.posargs)


@nox.session(python="3.12")
def benchmarks(session):
    """Run the throughput benchmarks."""
    session.install(".[dev]")
    session.run("pytest", "benchmarks/", "-q", "--no-cov", "-s", *session.posargs)
