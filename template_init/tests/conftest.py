"""Shared test fixtures and utilities."""

import json
import os
import pytest
from pathlib import Path
from typing import Any, Callable, Dict, Generator, List
from unittest.mock import patch

from template_init.prompts import Prompter
from template_init.tests.utils import ScriptedInput


@pytest.fixture(autouse=True)
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run every test from a clean directory without TEMPLATE_INIT_* overrides."""
    for key in list(os.environ):
        if key.startswith("TEMPLATE_INIT_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def manifest_data() -> Dict[str, Any]:
    return {
        "name": "old",
        "description": "d",
        "author": "a",
        "repository": "r",
        "version": "0.1.0",
    }


@pytest.fixture
def project_dir(tmp_path: Path, manifest_data: Dict[str, Any]) -> Path:
    """Create a template project with a package.json manifest."""
    root = tmp_path / "project"
    root.mkdir()
    (root / "package.json").write_text(json.dumps(manifest_data, indent="\t"))
    return root


@pytest.fixture
def block_git() -> Generator[None, None, None]:
    """Fail the test if any git repository is created."""

    def raise_on_git_init(*args: Any, **kwargs: Any) -> None:
        raise RuntimeError("git should not be called during this test!")

    with patch("git.Repo.init", side_effect=raise_on_git_init):
        yield


@pytest.fixture
def scripted_prompter() -> Callable[[List[str]], Prompter]:
    def make(answers: List[str]) -> Prompter:
        return Prompter(input_func=ScriptedInput(answers))

    return make
