"""
cli_interactive.py - Console Review and Confirmation

Prints the rename plan and asks the operator before anything is renamed
"""

from typing import Callable, Optional

from ..core import RenamePlan


def print_header(title: str, echo: Callable[[str], None] = print):
    """Print header"""
    echo("")
    echo("=" * 60)
    echo(f"  {title}")
    echo("=" * 60)
    echo("")


def format_op(old: str, new_name: str) -> str:
    """Format one planned rename"""
    return f"rename [{old}] -> [{new_name}]"


def review_plan(plan: RenamePlan, echo: Callable[[str], None] = print) -> None:
    """Print every planned rename, in plan order"""
    print_header(f"Will perform {plan.total_count} rename operations", echo)
    for op in plan.ops:
        note = " (case only)" if op.is_case_only_change else ""
        echo(format_op(str(op.src), op.new_name) + note)
    echo("-" * 60)


def console_confirm(
    plan: RenamePlan,
    input_func: Optional[Callable[[str], str]] = None,
) -> bool:
    """
    Wait for the operator before renaming

    Args:
        plan: Plan about to be executed
        input_func: Line reader (defaults to input)

    Returns:
        True to proceed, False if the operator typed q or input ended
    """
    if input_func is None:
        input_func = input
    try:
        value = input_func(f"\nPress Enter to rename {plan.total_count} files (q to cancel): ")
    except EOFError:
        return False
    return value.strip().lower() != 'q'
