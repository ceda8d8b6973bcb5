"""Terminal prompts for the scaffolding questions."""
from typing import Optional, Sequence

import typer
from rich.console import Console
from rich.prompt import Prompt

from create_standard.cli_support import print_error
from create_standard.core.orchestrator import Choice, OperationCancelled, Validator


class TyperPrompter:
    """Asks questions on the terminal; Ctrl-C or EOF cancels the run."""

    def __init__(self, console: Console):
        self.console = console

    def text(self, message: str, default: str, validate: Optional[Validator] = None) -> str:
        while True:
            try:
                answer = typer.prompt(
                    message, default=default, show_default=bool(default), prompt_suffix=" "
                )
            except (typer.Abort, KeyboardInterrupt, EOFError) as exc:
                raise OperationCancelled() from exc

            if validate is None:
                return answer
            verdict = validate(answer)
            if verdict is True:
                return answer
            print_error(self.console, verdict if isinstance(verdict, str) else "Invalid value")

    def confirm(self, message: str) -> bool:
        try:
            return typer.confirm(message, default=False)
        except (typer.Abort, KeyboardInterrupt, EOFError) as exc:
            raise OperationCancelled() from exc

    def select(self, message: str, choices: Sequence[Choice], default: int = 0) -> str:
        self.console.print(message)
        for choice in choices:
            self.console.print(f"  [{choice.style}]{choice.title}[/{choice.style}]")

        try:
            return Prompt.ask(
                ">",
                console=self.console,
                choices=[choice.value for choice in choices],
                default=choices[default].value,
                show_choices=False,
            )
        except (KeyboardInterrupt, EOFError) as exc:
            raise OperationCancelled() from exc
