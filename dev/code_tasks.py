"""Code quality tasks (linting, formatting, testing)."""

from __future__ import annotations

from typing import TYPE_CHECKING

from invoke.tasks import task

if TYPE_CHECKING:
    from invoke.context import Context

from dev import output


@task(name="lint")
@output.with_banner
def lint(ctx: Context) -> None:
    """Run linting (no fixes) - for CI."""
    output.print_info("Running ruff check...")
    ctx.run("uv run ruff check")

    output.print_info("Running ruff format check...")
    ctx.run("uv run ruff format --check")

    output.print_success("All checks passed")


@task(name="format")
def format_and_check(c: Context) -> None:
    """Format code using ruff - for local dev."""
    c.run("uv run ruff check src dev tests --fix --unsafe-fixes")
    c.run("uv run ruff format src dev tests")


@task(name="test")
@output.with_banner
def run_tests(ctx: Context) -> None:
    """Run the unit tests. They drive a fake interface, no browser needed."""
    output.print_info("Running tests...")
    ctx.run("uv run pytest -m 'not integration'")

    output.print_success("All tests passed")


@task(name="test-integration", help={"app_url": "Base URL of the running map application", "headed": "Show the browser"})
@output.with_banner
def run_integration_tests(ctx: Context, app_url: str = "http://localhost:3000", headed: bool = False) -> None:
    """Run the browser tests against a running map application."""
    output.print_info("Installing Playwright browser...")
    ctx.run("uv run playwright install chromium")

    output.print_info("Running integration tests...")
    headed_flag = " --headed" if headed else ""
    ctx.run(f"uv run pytest -m integration tests/integration --app_url={app_url}{headed_flag}")

    output.print_success("All integration tests passed")
