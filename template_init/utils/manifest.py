from typing import Any, Dict
import json
import logging
from pathlib import Path

from pydantic import BaseModel

# Set up logging
logger = logging.getLogger(__name__)

# Manifest fields that are filled from the operator's answers
PROJECT_FIELDS = ("name", "description", "author", "repository")


class ManifestParseError(ValueError):
    """Raised when the manifest is not a well-formed JSON object."""


class ProjectAnswers(BaseModel):
    """Answers collected from the operator."""

    name: Any = None
    description: Any = None
    author: Any = None
    repository: Any = None
    remove_examples: bool = False
    reinit_git: bool = False


class ManifestManager:
    def __init__(self, path: str | Path, indent: str | int = "\t"):
        """Initialize the manifest manager.

        Args:
            path: Path to the JSON manifest (e.g. package.json)
            indent: Indentation used when writing the manifest back
        """
        self.path = Path(path)
        self.indent = indent

    def load(self) -> Dict[str, Any]:
        """Load and parse the manifest file.

        Returns:
            Manifest data, keys in file order

        Raises:
            ManifestParseError: If the file is not a UTF-8 encoded JSON object
            OSError: If the file cannot be read
        """
        logger.debug(f"Loading manifest from {self.path}")
        try:
            text = self.path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise ManifestParseError(
                f"Manifest {self.path} is not valid UTF-8: {e}"
            ) from e
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise ManifestParseError(f"Invalid JSON in {self.path}: {e}") from e
        if not isinstance(data, dict):
            raise ManifestParseError(
                f"Manifest {self.path} must contain a JSON object, "
                f"got {type(data).__name__}"
            )
        return data

    def update(
        self,
        manifest: Dict[str, Any],
        answers: ProjectAnswers,
        version: str = "1.0.0",
    ) -> Dict[str, Any]:
        """Apply the operator's answers to a manifest in place.

        Fields absent from the manifest stay absent when the answer is empty.
        The version is always reset.

        Args:
            manifest: Manifest data as returned by load()
            answers: Collected project answers
            version: Version to reset the project to

        Returns:
            The same manifest object, updated
        """
        for field in PROJECT_FIELDS:
            value = getattr(answers, field)
            if value is None:
                continue
            manifest[field] = value
        manifest["version"] = version
        return manifest

    def save(self, manifest: Dict[str, Any]) -> Path:
        """Write the manifest back, overwriting the original file.

        Args:
            manifest: Manifest data to store

        Returns:
            Path where the manifest was stored
        """
        logger.info(f"Storing manifest at {self.path}")
        manifest_json = json.dumps(manifest, indent=self.indent, ensure_ascii=False)
        self.path.write_text(manifest_json + "\n", encoding="utf-8")
        logger.debug(f"Successfully stored manifest at {self.path}")
        return self.path
