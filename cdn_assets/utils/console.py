"""Coloured terminal output shared by the publish and release commands."""

from collections.abc import Callable

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.prompt import Confirm
from rich.rule import Rule
from rich.text import Text

Confirmer = Callable[[str, bool], bool]


def print_banner(console: Console, title: str, subtitle: str) -> None:
    body = Align.center(Text.assemble(Text(title, style="bold cyan"), "\n", Text(subtitle, style="dim")))
    console.print(Panel(body, border_style="cyan", padding=(0, 4)))


def print_header(console: Console, title: str, style: str = "bold green") -> None:
    console.print()
    console.print(Rule(Text(title, style=style), style=style))
    console.print()


def print_step(console: Console, message: str) -> None:
    console.print(f"▶ {message}", style="bold cyan", markup=False, highlight=False)


def print_success(console: Console, message: str) -> None:
    console.print(f"✅ {message}", style="green", markup=False, highlight=False)


def print_info(console: Console, message: str) -> None:
    console.print(f"ℹ️  {message}", style="blue", markup=False, highlight=False)


def print_warning(console: Console, message: str) -> None:
    console.print(f"⚠️  WARNING: {message}", style="yellow", markup=False, highlight=False)


def print_error(console: Console, message: str) -> None:
    console.print(f"❌ ERROR: {message}", style="red", markup=False, highlight=False)


def print_dry_run(console: Console, message: str) -> None:
    console.print(f"[DRY-RUN] {message}", markup=False, highlight=False, soft_wrap=True)


def build_confirmer(console: Console, assume_yes: bool = False) -> Confirmer:
    """Return a yes/no prompt bound to *console*.

    Without a human at the terminal, or with *assume_yes*, every question is
    answered yes and the preceding warning stands on its own.
    """

    def confirm(question: str, default: bool = False) -> bool:
        if assume_yes or not console.is_interactive:
            console.print(f"{question} yes (non-interactive)", style="dim", markup=False, highlight=False)
            return True
        return Confirm.ask(question, console=console, default=default)

    return confirm
