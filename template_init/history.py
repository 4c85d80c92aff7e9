"""Version-control history reset.

Replaces the template's git history with a single commit of the current tree.
Failures here are reported as warnings; the rest of the initialization has
already been applied and stays in place.
"""

import logging
import shutil
from pathlib import Path

from template_init import console

logger = logging.getLogger(__name__)

DEFAULT_COMMIT_MESSAGE = "chore: initialize project from template"


def _report_failure(root: Path, error: Exception) -> None:
    logger.debug(f"Git reinitialization failed in {root}", exc_info=True)
    console.log(f"⚠️  Git reinitialization failed: {error}", "yellow")


def reset_history(root: Path, message: str = DEFAULT_COMMIT_MESSAGE) -> bool:
    """Remove existing git metadata and create a fresh repository with one commit.

    Args:
        root: Project root directory
        message: Message for the initial commit

    Returns:
        True if the new history was created, False if a step failed
    """
    root = Path(root)
    try:
        # GitPython looks for the git executable on import
        import git
    except ImportError as e:
        _report_failure(root, e)
        return False

    try:
        git_dir = root / ".git"
        if git_dir.exists():
            shutil.rmtree(git_dir)
            console.log("✅ Removed .git directory", "green")

        repo = git.Repo.init(root)
        console.log("✅ Reinitialized git repository", "green")

        repo.git.add(".")
        repo.git.commit("-m", message)
        console.log("✅ Created initial commit", "green")
    except (git.GitError, OSError) as e:
        _report_failure(root, e)
        return False
    return True
