"""Terminal output for invoke tasks, using Rich."""

from __future__ import annotations

import functools
from typing import TYPE_CHECKING, ParamSpec, TypeVar

from rich.console import Console
from rich.panel import Panel

if TYPE_CHECKING:
    from collections.abc import Callable

P = ParamSpec("P")
R = TypeVar("R")

console = Console()


def print_banner(title: str) -> None:
    console.print()
    console.print(Panel(f"[bold]{title}[/]", style="blue"))


def print_info(message: str) -> None:
    console.print(f"  {message}")


def print_success(message: str = "SUCCESS") -> None:
    console.print()
    console.print(f"[bold green]✓ {message}[/]")


def with_banner(func: Callable[P, R]) -> Callable[P, R]:
    """Print the task name in a banner before running it."""

    @functools.wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
        print_banner(func.__name__.replace("_", " ").upper())  # type: ignore[attr-defined]
        return func(*args, **kwargs)

    return wrapper


__all__ = ["console", "print_banner", "print_info", "print_success", "with_banner"]
