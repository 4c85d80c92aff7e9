"""Interactive template initialization.

The initializer walks through a fixed sequence of states:

    PROMPTING -> SUMMARIZING -> CONFIRMING -> APPLYING -> DONE
                                          \\-> CANCELLED

Nothing on disk changes before the operator confirms.
"""

import enum
import logging
from pathlib import Path
from typing import Any, Dict

from template_init import console
from template_init.cleaner import remove_example_paths
from template_init.config import get_config
from template_init.history import reset_history
from template_init.prompts import Prompter, format_default
from template_init.utils.manifest import ManifestManager, ProjectAnswers

logger = logging.getLogger(__name__)


class InitState(enum.Enum):
    PROMPTING = "prompting"
    SUMMARIZING = "summarizing"
    CONFIRMING = "confirming"
    APPLYING = "applying"
    DONE = "done"
    CANCELLED = "cancelled"


class TemplateInitializer:
    def __init__(
        self,
        root: Path,
        prompter: Prompter | None = None,
        config: Dict[str, Any] | None = None,
    ) -> None:
        self.root = Path(root)
        self.prompter = prompter or Prompter()
        self.config = config if config is not None else get_config(self.root)
        self.manifest = ManifestManager(
            self.root / self.config["manifest_path"], indent=self.config["indent"]
        )
        self.state = InitState.PROMPTING

    def _set_state(self, state: InitState) -> None:
        logger.debug(f"{self.state.value} -> {state.value}")
        self.state = state

    def collect_answers(self, manifest: Dict[str, Any]) -> ProjectAnswers:
        """Prompt for project details and cleanup options."""
        console.log("📝 Project Information\n", "blue")
        ask = self.prompter.ask
        name = ask("Project name", manifest.get("name"))
        description = ask("Project description", manifest.get("description"))
        author = ask("Author name", manifest.get("author"))
        repository = ask("Repository URL", manifest.get("repository"))

        console.log("\n🧹 Cleanup Options\n", "blue")
        remove_examples = self.prompter.ask_yes_no("Remove example tests?")
        reinit_git = self.prompter.ask_yes_no(
            "Reinitialize git repository (removes history)?"
        )

        return ProjectAnswers(
            name=name,
            description=description,
            author=author,
            repository=repository,
            remove_examples=remove_examples,
            reinit_git=reinit_git,
        )

    def print_summary(self, answers: ProjectAnswers) -> None:
        console.log("\n📋 Summary of Changes:\n", "yellow")
        console.log(f"  • Project Name: {format_default(answers.name)}")
        console.log(f"  • Description: {format_default(answers.description)}")
        console.log(f"  • Author: {format_default(answers.author)}")
        console.log(f"  • Repository: {format_default(answers.repository)}")
        console.log(f"  • Remove Examples: {'Yes' if answers.remove_examples else 'No'}")
        console.log(f"  • Reinitialize Git: {'Yes' if answers.reinit_git else 'No'}")

    def apply(self, manifest: Dict[str, Any], answers: ProjectAnswers) -> None:
        """Write the manifest, then optionally clean examples and reset history."""
        console.log("\n⚙️  Applying changes...\n", "green")

        self.manifest.update(manifest, answers, version=self.config["reset_version"])
        self.manifest.save(manifest)
        console.log(f"✅ Updated {self.config['manifest_path']}", "green")

        if answers.remove_examples:
            remove_example_paths(self.root, self.config["example_paths"])

        if answers.reinit_git:
            reset_history(self.root, self.config["commit_message"])

    def print_next_steps(self) -> None:
        console.log("\n🎉 Template initialization complete!\n", "bright", "green")
        console.log("Next steps:", "blue")
        for i, step in enumerate(self.config["next_steps"], 1):
            console.log(f"  {i}. {step}")
        if self.config.get("footer"):
            console.log(f"\n{self.config['footer']}\n")

    def run(self) -> InitState:
        """Run the full interactive initialization.

        Returns:
            DONE if changes were applied, CANCELLED if the operator declined
        """
        console.log("\n🎭 Template Initialization\n", "bright")
        console.log(
            "This script will help you customize the template for your project.\n"
        )

        manifest = self.manifest.load()
        answers = self.collect_answers(manifest)

        self._set_state(InitState.SUMMARIZING)
        self.print_summary(answers)

        self._set_state(InitState.CONFIRMING)
        if not self.prompter.confirm("\nProceed with these changes?"):
            console.log("\n❌ Initialization cancelled.\n", "yellow")
            self._set_state(InitState.CANCELLED)
            return self.state

        self._set_state(InitState.APPLYING)
        self.apply(manifest, answers)

        self._set_state(InitState.DONE)
        self.print_next_steps()
        return self.state
