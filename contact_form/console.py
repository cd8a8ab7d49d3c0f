"""Terminal front end for the contact form, built on rich."""

from typing import Callable, Optional

from rich.console import Console, Group
from rich.panel import Panel
from rich.rule import Rule
from rich.text import Text

from contact_form.controller import FormController
from contact_form.presenter import DEFAULT_TITLE, FormView, present
from contact_form.state import FormState


class ConsoleRenderer:
    def __init__(self, console: Optional[Console] = None, title: str = DEFAULT_TITLE):
        self.console = console or Console()
        self.title = title

    def render(self, view: FormView) -> None:
        parts = []

        for field in view.fields:
            line = Text(f"{field.label}: ", style="red" if field.is_error else "bold")
            line.append(field.value)
            parts.append(line)

        parts.append(Text(f"[ {view.submit_label} ]", style="green"))

        for message in view.errors:
            parts.append(Text(message, style="red"))

        if view.summary is not None:
            parts.append(Rule(style="grey70"))
            for line in view.summary.lines():
                parts.append(Text(line))

        self.console.print(Panel(Group(*parts), title=view.title, expand=False))

    def show(self, state: FormState) -> None:
        self.render(present(state, title=self.title))

    def attach(self, controller: FormController) -> Callable[[], None]:
        return controller.subscribe(self.show)
