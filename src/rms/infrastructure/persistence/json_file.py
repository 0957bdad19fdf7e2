"""A JSON array on disk, rewritten atomically.

Every write serializes the whole collection to a temporary file next to
the target and renames it over the original, so readers see either the
old contents or the new ones, never a partial write.
"""

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path

from rms.domain.exceptions import PersistenceError


class JsonFile:

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    @property
    def path(self) -> Path:
        return self._file_path

    def load(self) -> list[dict]:
        try:
            return json.loads(self._file_path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            raise PersistenceError(f"Cannot read {self._file_path.name}: {exc}") from exc

    def write(self, records: list[dict]) -> None:
        payload = json.dumps(records, indent=2, ensure_ascii=False) + "\n"
        tmp_name = None
        try:
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=self._file_path.parent,
                prefix=f".{self._file_path.name}.",
                delete=False,
            ) as tmp:
                tmp_name = tmp.name
                tmp.write(payload)
            os.replace(tmp_name, self._file_path)
        except OSError as exc:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise PersistenceError(f"Cannot write {self._file_path.name}: {exc}") from exc

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
