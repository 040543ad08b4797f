"""
n8nctl - UI Components
Standardized headers and usage hints
"""

from typing import Optional

from rich.console import Console
from rich.markup import escape

LOGO = "n8nctl"

BRAND_COLOR = "cyan"


def show_header(
    title: str,
    subtitle: Optional[str] = None,
    details: Optional[dict] = None,
    console: Optional[Console] = None,
):
    """
    Display a standardized n8nctl command header.

    Args:
        title: Main title (e.g., "Start Services", "Create Backup")
        subtitle: Optional subtitle line
        details: Additional key-value pairs to display
        console: Rich Console instance (creates new if None)

    Example:
        show_header(
            title="Scale Workers",
            details={"Service": "n8n-worker", "Replicas": "3"}
        )
    """
    if console is None:
        console = Console()

    prefix = f" [bold color(214)]{LOGO}[/bold color(214)] [dim]›[/dim]"

    console.print(f"{prefix} [bold white]{title}[/bold white]")

    if subtitle:
        console.print(f"{prefix} [dim]{subtitle}[/dim]")

    if details:
        for key, value in details.items():
            console.print(f"{prefix} {key}: [{BRAND_COLOR}]{escape(str(value))}[/{BRAND_COLOR}]")

    console.print()


def report_check_result(logger, result) -> None:
    """
    Log one CheckResult at the severity its outcome implies.

    Args:
        logger: StackLogger instance
        result: CheckResult to report
    """
    if result.is_satisfied:
        logger.success(result.message)
    elif result.is_remediated:
        logger.warning(result.message)
    else:
        context = result.error.context if result.error is not None else None
        logger.error(result.message, context=context)
