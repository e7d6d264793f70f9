"""Interactive option prompts and yes/no confirmation."""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple, Union

import click

from gitsy.errors import PromptRejected

Option = Tuple[str, str]


@dataclass(frozen=True)
class Selected:
    """Input resolved to a known option."""
    label: str


@dataclass(frozen=True)
class Rejected:
    """Input matched no option."""
    default_label: str

    @property
    def message(self) -> str:
        return f"Invalid option selected. Defaulting to: {self.default_label}"


PromptOutcome = Union[Selected, Rejected]


@dataclass
class OptionPrompt:
    """A single question with a fixed set of (key, label) options.

    The default pair does not have to be one of the options; empty input
    always selects the default key.

    Example:
        prompt = OptionPrompt('Continue?', [('y', 'Yes'), ('n', 'No')], ('n', 'No'))
        outcome = prompt.prompt()
    """

    message: str
    options: List[Option] = field(default_factory=list)
    default: Option = ('', '')

    def with_option(self, key: str, label: str) -> 'OptionPrompt':
        self.options.append((key, label))
        return self

    def option_label(self, key: str) -> Optional[str]:
        """Label registered under key (case-insensitive), or None."""
        for option_key, label in self.options:
            if option_key.lower() == key.lower():
                return label
        return None

    def is_default(self, selection: str) -> bool:
        selection = selection.lower()
        return selection in (self.default[0].lower(), self.default[1].lower())

    def render(self) -> str:
        lines = []
        for key, label in sorted(self.options):
            tag = '[Default]' if (key, label) == self.default else ''
            lines.append(f"\t{key}: {label} {tag}")
        return '\n'.join([self.message] + lines)

    def match(self, answer: str) -> PromptOutcome:
        """Interpret one line of input."""
        answer = answer.strip()
        selection = (answer or self.default[0]).lower()

        for key, label in self.options:
            if key.lower() == selection or label.lower() == selection:
                return Selected(label)

        default_label = self.option_label(self.default[0])
        if default_label is None:
            default_label = self.default[1]
        return Rejected(default_label)

    def prompt(self) -> PromptOutcome:
        """Show the options and read one line from the terminal.

        Blocks until a line is available. A closed input stream raises
        click.Abort.
        """
        click.echo(self.render())
        answer = click.prompt('=>', default='', show_default=False, prompt_suffix=' ')
        return self.match(answer)

    def choose(self) -> str:
        """Like prompt(), but raise PromptRejected instead of returning it."""
        outcome = self.prompt()
        if isinstance(outcome, Rejected):
            raise PromptRejected(outcome.default_label)
        return outcome.label


def confirm(message: str) -> bool:
    """Ask a yes/no question that defaults to No.

    Returns:
        True only when the user picked an option other than the default.
        Unrecognised input is reported and counts as No.
    """
    prompt = OptionPrompt(message, [('y', 'Yes'), ('n', 'No')], ('n', 'No'))
    outcome = prompt.prompt()

    if isinstance(outcome, Rejected):
        click.secho(outcome.message, fg='yellow', err=True)
        return False
    return not prompt.is_default(outcome.label)
