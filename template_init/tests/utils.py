"""Test utilities."""

from typing import List


class ScriptedInput:
    """Stands in for input(), replaying answers and recording prompts."""

    def __init__(self, answers: List[str]):
        self.answers = list(answers)
        self.prompts: List[str] = []

    def __call__(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self.answers:
            raise EOFError("no more scripted answers")
        return self.answers.pop(0)
