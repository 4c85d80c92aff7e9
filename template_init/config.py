import os
import yaml
from pathlib import Path, PurePath
from typing import Any, Dict
from dotenv import dotenv_values
import logging

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "template-init.yaml"
ENV_PREFIX = "TEMPLATE_INIT_"

DEFAULT_EXAMPLE_PATHS = [
    "tests/api-tests/articles",
    "tests/api-tests/tags",
    "tests/api-tests/user",
    "tests/ui-tests/feature/login",
    "tests/ui-tests/pages/Homepage",
    "tests/ui-tests/pages/LoginPage",
    "tests/response-schemas/articles",
    "tests/response-schemas/profiles",
    "tests/response-schemas/tags",
    "tests/response-schemas/users",
    "request-objects/articles",
    "request-objects/user",
]

DEFAULT_CONFIG: Dict[str, Any] = {
    "manifest_path": "package.json",
    "reset_version": "1.0.0",
    "commit_message": "chore: initialize project from template",
    "indent": "\t",
    "example_paths": DEFAULT_EXAMPLE_PATHS,
    "next_steps": [
        "Update .env with your configuration (cp .env.example .env)",
        "Update playwright.config.ts with your baseURL",
        "Update tests/utils/constants.ts with your API endpoints",
        "Start writing your tests!",
    ],
    "footer": "📖 See TEMPLATE_SETUP.md and PROJECT_CUSTOMIZATION.md for detailed guidance.",
}

# Keys that may be overridden from the environment
SCALAR_KEYS = ("manifest_path", "reset_version", "commit_message")


def get_project_root(root: str | Path | None = None) -> Path:
    """Get the root directory of the project being initialized.

    Args:
        root: Explicit root directory. If None, uses the current working directory.

    Returns:
        Resolved path to the project root
    """
    return Path(root if root is not None else Path.cwd()).resolve()


def _load_config_file(root: Path) -> Dict[str, Any]:
    env_path = os.getenv(f"{ENV_PREFIX}CONFIG_PATH")
    if env_path:
        config_path = Path(env_path)
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")
    else:
        config_path = root / CONFIG_FILENAME
        if not config_path.exists():
            logger.debug(f"No config file at {config_path}, using defaults")
            return {}

    with open(config_path, "r") as f:
        data = yaml.safe_load(f)

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file must contain a mapping: {config_path}")

    logger.info(f"Loaded config from {config_path}")
    return data


def _env_overrides(root: Path) -> Dict[str, str]:
    values: Dict[str, Any] = {}
    dotenv_path = root / ".env"
    if dotenv_path.is_file():
        logger.debug(f"Loading overrides from {dotenv_path}")
        values.update(dotenv_values(dotenv_path))
    # Process environment takes precedence over .env
    values.update(os.environ)

    overrides = {}
    for key in SCALAR_KEYS:
        value = values.get(f"{ENV_PREFIX}{key.upper()}")
        if value:
            overrides[key] = value
    return overrides


def _check_example_paths(paths: Any) -> None:
    if not isinstance(paths, list):
        raise ValueError("example_paths must be a list of relative paths")
    for rel_path in paths:
        if not isinstance(rel_path, str) or not rel_path.strip():
            raise ValueError(f"Invalid example path: {rel_path!r}")
        parts = PurePath(rel_path).parts
        if PurePath(rel_path).is_absolute() or ".." in parts or not parts:
            raise ValueError(
                f"Example path must stay inside the project root: {rel_path!r}"
            )


def get_config(root: str | Path | None = None) -> Dict[str, Any]:
    """Get configuration by merging defaults, the YAML config file and environment variables.

    Environment variables (from .env or the process) take precedence over the
    config file, which takes precedence over the built-in defaults.

    Args:
        root: Project root containing the optional template-init.yaml

    Returns:
        Dictionary containing merged configuration
    """
    root = get_project_root(root)
    config = dict(DEFAULT_CONFIG)

    for key, value in _load_config_file(root).items():
        if key not in DEFAULT_CONFIG:
            logger.warning(f"Ignoring unknown config key: {key}")
            continue
        config[key] = value

    config.update(_env_overrides(root))

    _check_example_paths(config["example_paths"])

    return config
