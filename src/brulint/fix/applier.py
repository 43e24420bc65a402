"""Writes fixed files back to disk."""

from __future__ import annotations

from pathlib import Path

from brulint.core.models import FileResult


class FixApplier:
    """Persists a file's fixed text when it differs from what was read."""

    def __init__(self, project_path: Path):
        self.project_path = project_path

    def apply(self, result: FileResult) -> bool:
        """Write ``result.text`` to its file. Returns True if the file was written.

        I/O errors are not caught: a run that cannot write its fixes must fail.
        """
        if not result.changed:
            return False

        file_path = self._resolve_file(Path(result.file))
        with open(file_path, "w", encoding="utf-8", newline="") as f:
            f.write(result.text)
        return True

    def _resolve_file(self, file: Path) -> Path:
        """Resolve a possibly relative file path."""
        if file.is_absolute():
            return file
        return self.project_path / file
