"""
Interactive prompts for the publish and upload commands.

Thin layer over rich's Prompt so the commands can collect answers with the
stored preferences as defaults.
"""

from typing import Optional, Sequence

from rich.console import Console
from rich.prompt import Prompt

console = Console()


def ask_text(
    message: str,
    default: Optional[str] = None,
    required: bool = False,
    field: str = "Value",
) -> str:
    """
    Ask for a line of text.

    Args:
        message: Prompt shown to the operator
        default: Value used when the operator just presses enter
        required: Re-prompt until a non-empty answer is given
        field: Name used in the "is required" message

    Returns:
        str: The answer, stripped of surrounding whitespace
    """
    while True:
        if default:
            answer = Prompt.ask(message, default=default, console=console)
        else:
            answer = Prompt.ask(message, default="", show_default=False, console=console)
        answer = (answer or "").strip()
        if answer or not required:
            return answer
        console.print(f"[red]{field} is required[/]")


def ask_choice(
    message: str, choices: Sequence[str], default: Optional[str] = None
) -> str:
    """
    Ask the operator to pick one of choices from a numbered list.

    Args:
        message: Prompt shown to the operator
        choices: Values to pick from
        default: Value preselected when it is one of choices

    Returns:
        str: The chosen value
    """
    if not choices:
        raise ValueError("No choices to select from")

    console.print(message)
    for index, choice in enumerate(choices, start=1):
        console.print(f"  {index}) {choice}")

    numbers = [str(index) for index in range(1, len(choices) + 1)]
    preselected = (
        str(list(choices).index(default) + 1) if default in choices else numbers[0]
    )
    answer = Prompt.ask(
        "Enter a number", choices=numbers, default=preselected, console=console
    )
    return choices[int(answer) - 1]
