"""CLI entry point for template-init.

Run with no arguments from the root of a freshly copied template:

    template-init

or point it at another directory:

    template-init --root path/to/project
"""

import logging

import fire

from template_init import console
from template_init.config import get_project_root
from template_init.initializer import TemplateInitializer

logger = logging.getLogger(__name__)


def setup_logging(log_level: str) -> None:
    """Configure logging with the specified level."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def init_template(root: str | None = None, log_level: str = "WARNING") -> None:
    """
    Customize the template for a new project.

    Args:
        root: Project root directory. Defaults to the current working directory.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """
    setup_logging(log_level)
    try:
        state = TemplateInitializer(get_project_root(root)).run()
        logger.info(f"Initialization finished in state {state.value}")
    except (Exception, KeyboardInterrupt) as e:
        logger.debug("Initialization failed", exc_info=True)
        console.log(f"\n❌ Error: {str(e) or type(e).__name__}\n", "bright")
        raise SystemExit(1)


def main() -> None:
    fire.Fire(init_template)


if __name__ == "__main__":
    main()
