import logging
import os
import shutil
from pathlib import Path
from typing import Iterable, List

from template_init import console

logger = logging.getLogger(__name__)


def remove_example_paths(root: Path, paths: Iterable[str]) -> List[str]:
    """Delete the template's example content.

    Paths that do not exist are skipped, so running this twice is harmless.
    A failed deletion propagates and aborts the remaining paths. Paths that
    resolve outside the root raise ValueError.

    Args:
        root: Project root the paths are relative to
        paths: Relative file or directory paths to delete

    Returns:
        The relative paths that were removed
    """
    root = Path(root).resolve()
    targets = []
    for rel_path in paths:
        full_path = Path(os.path.normpath(root / rel_path))
        if full_path == root or not full_path.is_relative_to(root):
            raise ValueError(f"Refusing to remove {rel_path!r}: not inside {root}")
        targets.append((rel_path, full_path))

    removed = []
    for rel_path, full_path in targets:
        if full_path.is_dir() and not full_path.is_symlink():
            shutil.rmtree(full_path)
        elif full_path.exists() or full_path.is_symlink():
            full_path.unlink()
        else:
            logger.debug(f"Skipping missing example path {full_path}")
            continue
        removed.append(rel_path)
        console.log(f"✅ Removed {rel_path}", "green")
    logger.info(f"Removed {len(removed)} example path(s)")
    return removed
