from pathlib import Path
from typing import Optional

# Files that mark the root of a Haskell project, checked in this order
ROOT_MARKERS = ("cabal.project", "stack.yaml", "package.yaml", ".git")

def _is_project_root(directory: Path) -> bool:
    if any((directory / marker).exists() for marker in ROOT_MARKERS):
        return True
    return any(directory.glob("*.cabal"))

def find_project_root(start=None) -> Optional[Path]:
    """
    Walk from `start` (default: cwd) up to the filesystem root and return the
    first directory that looks like a project root, or None.
    """
    current = Path(start).resolve() if start is not None else Path.cwd()
    for directory in (current, *current.parents):
        if directory.is_dir() and _is_project_root(directory):
            return directory
    return None
