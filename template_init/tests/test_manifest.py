import pytest
from pathlib import Path
from typing import Any, Dict
import json

from template_init.utils.manifest import (
    ManifestManager,
    ManifestParseError,
    ProjectAnswers,
)


@pytest.fixture
def manifest_path(tmp_path: Path) -> Path:
    """Create a package.json with extra fields that must survive edits."""
    path = tmp_path / "package.json"
    data = {
        "name": "playwright-template",
        "version": "0.3.2",
        "description": "Template",
        "type": "module",
        "scripts": {"test": "playwright test", "init-template": "node init.js"},
        "author": "Template Author",
        "repository": {"type": "git", "url": "https://example.com/template.git"},
        "devDependencies": {"@playwright/test": "^1.40.0"},
    }
    path.write_text(json.dumps(data, indent="\t"))
    return path


@pytest.fixture
def manifest_manager(manifest_path: Path) -> ManifestManager:
    return ManifestManager(manifest_path)


def test_load_manifest(manifest_manager: ManifestManager) -> None:
    manifest = manifest_manager.load()
    assert manifest["name"] == "playwright-template"
    assert list(manifest)[:3] == ["name", "version", "description"]


def test_load_invalid_json(tmp_path: Path) -> None:
    path = tmp_path / "package.json"
    path.write_text('{"name": "broken",')
    with pytest.raises(ManifestParseError):
        ManifestManager(path).load()


def test_load_non_object(tmp_path: Path) -> None:
    path = tmp_path / "package.json"
    path.write_text('["not", "an", "object"]')
    with pytest.raises(ManifestParseError, match="JSON object"):
        ManifestManager(path).load()


def test_load_missing_file(tmp_path: Path) -> None:
    with pytest.raises(OSError):
        ManifestManager(tmp_path / "package.json").load()


def test_update_preserves_other_fields(manifest_manager: ManifestManager) -> None:
    """Test that only the project fields and version change."""
    original = manifest_manager.load()
    manifest = manifest_manager.load()
    answers = ProjectAnswers(
        name="myapp",
        description="My app",
        author="Jane Doe",
        repository="https://example.com/myapp.git",
    )

    result = manifest_manager.update(manifest, answers)

    assert result is manifest
    assert manifest["name"] == "myapp"
    assert manifest["description"] == "My app"
    assert manifest["author"] == "Jane Doe"
    assert manifest["repository"] == "https://example.com/myapp.git"
    assert manifest["version"] == "1.0.0"

    changed = {"name", "description", "author", "repository", "version"}
    assert {k: v for k, v in manifest.items() if k not in changed} == {
        k: v for k, v in original.items() if k not in changed
    }
    assert list(manifest) == list(original)


def test_update_custom_version(manifest_manager: ManifestManager) -> None:
    manifest = manifest_manager.load()
    manifest_manager.update(manifest, ProjectAnswers(name="x"), version="0.0.1")
    assert manifest["version"] == "0.0.1"


def test_update_keeps_absent_fields_absent() -> None:
    manifest: Dict[str, Any] = {"name": "old"}
    ManifestManager("unused.json").update(
        manifest, ProjectAnswers(name="new", author=None)
    )
    assert manifest == {"name": "new", "version": "1.0.0"}


def test_save_format(manifest_manager: ManifestManager, manifest_path: Path) -> None:
    """Test that the manifest is written with tab indentation."""
    manifest = manifest_manager.load()
    manifest["description"] = "Beschreibung für Tests"
    manifest_manager.save(manifest)

    text = manifest_path.read_text(encoding="utf-8")
    assert text.endswith("}\n")
    assert '\n\t"name": "playwright-template",\n' in text
    assert "für" in text
    assert json.loads(text) == manifest


def test_save_round_trip(manifest_manager: ManifestManager) -> None:
    manifest = manifest_manager.load()
    manifest_manager.save(manifest)
    assert manifest_manager.load() == manifest


def test_load_not_utf8(tmp_path: Path) -> None:
    path = tmp_path / "package.json"
    path.write_bytes(b'\xff\xfe{"name": "latin"}')
    with pytest.raises(ManifestParseError, match="UTF-8"):
        ManifestManager(path).load()
