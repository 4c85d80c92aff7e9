import json
import logging
from typing import Any, Callable

from template_init.console import colorize

logger = logging.getLogger(__name__)

YES_ANSWERS = {"y", "yes"}
NO_ANSWERS = {"n", "no"}


def format_default(value: Any) -> str:
    """Render a manifest value for display in a prompt or summary."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return json.dumps(value, ensure_ascii=False)


class Prompter:
    def __init__(self, input_func: Callable[[str], str] | None = None):
        """Initialize the prompter.

        Args:
            input_func: Function that displays a prompt and returns one line of input.
                Defaults to the builtin input(), which reads from stdin.
        """
        self.input_func = input_func or input

    def _read(self, question: str) -> str:
        answer = self.input_func(colorize(question, "cyan"))
        return answer.strip()

    def ask(self, question: str, default: Any = None) -> Any:
        """Ask a free-text question, falling back to the default on empty input.

        Args:
            question: Question text, without the trailing default
            default: Value returned when the answer is empty

        Returns:
            The trimmed answer, or the default
        """
        answer = self._read(f"{question} ({format_default(default)}): ")
        if not answer:
            logger.debug(f"Keeping default for {question!r}")
            return default
        return answer

    def ask_yes_no(self, question: str) -> bool:
        """Ask a yes/no question that defaults to no."""
        return self._read(f"{question} (y/N): ").lower() in YES_ANSWERS

    def confirm(self, question: str) -> bool:
        """Ask for confirmation. Anything but an explicit no proceeds."""
        return self._read(f"{question} (Y/n): ").lower() not in NO_ANSWERS
