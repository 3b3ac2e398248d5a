from __future__ import annotations

import os
from pathlib import Path
from typing import Optional, Sequence


class JsonFileStorage:
    """One ``<key>.json`` file per key inside a directory.

    Plays the role browser local storage plays for a single-page app: a
    small per-key document store on the local machine.
    """

    def __init__(self, directory: str | Path):
        self._dir = Path(directory)
        self._dir.mkdir(parents=True, exist_ok=True)

    @property
    def directory(self) -> Path:
        return self._dir

    def _path(self, key: str) -> Path:
        return self._dir / f"{key}.json"

    def get(self, key: str) -> Optional[str]:
        path = self._path(key)
        if not path.exists():
            return None
        return path.read_text(encoding="utf-8")

    def set(self, key: str, value: str) -> None:
        path = self._path(key)
        tmp = path.with_suffix(".json.tmp")
        tmp.write_text(value, encoding="utf-8")
        os.replace(tmp, path)

    def keys(self) -> Sequence[str]:
        return sorted(p.stem for p in self._dir.glob("*.json"))
