"""Project workspace: find the source file and serialize edits to it."""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from pathlib import Path

from seam.config import SeamConfig
from seam.engine import read_class_expression, update_class
from seam.parser import dialect_for_path

__all__ = [
    "COMMON_ENTRY_PATTERNS",
    "UpdateResult",
    "Workspace",
    "WorkspaceError",
    "discover_entry_file",
]

logger = logging.getLogger(__name__)

# Checked in order; the first one that exists wins.
COMMON_ENTRY_PATTERNS = (
    "src/App.tsx",
    "src/App.jsx",
    "frontend/src/App.tsx",
    "frontend/src/App.jsx",
    "app/src/App.tsx",
    "app/src/App.jsx",
    "packages/frontend/src/App.tsx",
    "packages/web/src/App.tsx",
    "packages/app/src/App.tsx",
)


class WorkspaceError(Exception):
    """Raised when the project or its source file cannot be used."""


def discover_entry_file(project_root: str | Path) -> str | None:
    """Return the first common entry file under *project_root*, if any."""
    root = Path(project_root)
    for candidate in COMMON_ENTRY_PATTERNS:
        if (root / candidate).is_file():
            return candidate
    return None


@dataclass(frozen=True)
class UpdateResult:
    """Outcome of Workspace.update_class."""

    file: str  # relative to the project root, forward slashes
    changed: bool


class Workspace:
    """Reads and rewrites source files inside one project.

    Every read-modify-write of a file happens under that file's lock, so
    two overlapping updates cannot both start from the same stale text.
    """

    def __init__(
        self,
        project_root: str | Path,
        source_file: str | None = None,
        attribute: str = "className",
    ) -> None:
        self.root = Path(project_root).resolve()
        if not self.root.is_dir():
            raise WorkspaceError(f"Project directory not found: {self.root}")
        if source_file is None:
            source_file = discover_entry_file(self.root)
            if source_file is None:
                raise WorkspaceError(
                    "No entry file found. Tried: "
                    + ", ".join(COMMON_ENTRY_PATTERNS)
                    + ". Pass a file explicitly."
                )
        self.attribute = attribute
        self.default_file = self.resolve(source_file)
        # One lock per file ever touched. Bounded by the files in the project, so
        # entries are never pruned.
        self._locks: dict[Path, threading.Lock] = {}
        self._locks_guard = threading.Lock()

    @classmethod
    def from_config(cls, config: SeamConfig) -> Workspace:
        return cls(config.project, config.file, attribute=config.attribute)

    # --- paths ----------------------------------------------------------------

    def resolve(self, file: str | None = None) -> Path:
        """Absolute path of *file* (default: the workspace's source file)."""
        if file is None:
            return self.default_file
        path = (self.root / file).resolve()
        if not path.is_relative_to(self.root):
            raise WorkspaceError(f"Path escapes the project root: {file}")
        if not path.is_file():
            raise WorkspaceError(f"Source file not found: {path}")
        return path

    def relative(self, path: Path) -> str:
        return path.relative_to(self.root).as_posix()

    def _read_source(self, path: Path) -> str:
        # Bytes in, bytes out: keeps CRLF line endings intact.
        try:
            return path.read_bytes().decode("utf-8")
        except UnicodeDecodeError as e:
            raise WorkspaceError(
                f"{self.relative(path)} is not valid UTF-8: {e.reason} at byte {e.start}"
            ) from e

    def lock_for(self, path: Path) -> threading.Lock:
        with self._locks_guard:
            lock = self._locks.get(path)
            if lock is None:
                lock = self._locks[path] = threading.Lock()
            return lock

    # --- operations -----------------------------------------------------------

    def read_class(
        self, tag_name: str, ordinal: int | None = None, file: str | None = None
    ) -> str | None:
        """Current class value of the addressed element; ParseError propagates."""
        path = self.resolve(file)
        with self.lock_for(path):
            source = self._read_source(path)
        return read_class_expression(
            source, tag_name, ordinal, self.attribute, dialect_for_path(path)
        )

    def update_class(
        self,
        tag_name: str,
        new_value: str,
        ordinal: int | None = None,
        file: str | None = None,
    ) -> UpdateResult:
        """Rewrite the addressed element's class value on disk."""
        path = self.resolve(file)
        with self.lock_for(path):
            source = self._read_source(path)
            updated = update_class(
                source,
                tag_name,
                new_value,
                ordinal,
                self.attribute,
                dialect_for_path(path),
            )
            changed = updated != source
            if changed:
                path.write_bytes(updated.encode("utf-8"))
        logger.info(
            "update <%s>[%s] in %s: %s",
            tag_name,
            "*" if ordinal is None else ordinal,
            self.relative(path),
            "written" if changed else "no change",
        )
        return UpdateResult(file=self.relative(path), changed=changed)
