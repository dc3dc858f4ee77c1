# type: ignore
from invoke import task


@task
def venv(ctx):
    """Create the development environment with uv."""
    ctx.run("uv sync --extra dev")


@task
def lint(ctx):
    """
    Check style and types of the package and its tests.
    """
    ctx.run("ruff check src tests", pty=True)
    ctx.run("ruff format --check src tests", pty=True)
    ctx.run("mypy src", pty=True)


@task
def test(ctx):
    """
    Run tests with coverage information.
    """
    ctx.run("pytest --cov=osprobe --cov-report=term-missing", pty=True)


@task
def build_package(ctx):
    """
    Build sdist and wheel with uv.
    """
    ctx.run("rm -rf dist")
    ctx.run("uv build")


@task
def scan_localhost(ctx):
    """Scan 127.0.0.1 with the current config, as a quick smoke test."""
    ctx.run("osprobe scan 127.0.0.1 --output /tmp/osprobe-smoke.txt", pty=True)
