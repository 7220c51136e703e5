"""Lazily populated cache of asset bytes keyed by filename."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Union


class AssetCache:
    """Read files under ``root`` once and keep their bytes for the process.

    Names are plain filenames relative to ``root``; anything resolving
    outside of it is refused.
    """

    def __init__(self, root: Union[str, Path]) -> None:
        self.root = Path(root).resolve()
        self._data: Dict[str, bytes] = {}

    def __contains__(self, name: str) -> bool:
        return name in self._data

    def load(self, name: str) -> bytes:
        cached = self._data.get(name)
        if cached is not None:
            return cached
        path = (self.root / name).resolve()
        if self.root not in path.parents:
            raise ValueError(f"Asset {name!r} is outside {self.root}")
        data = path.read_bytes()
        self._data[name] = data
        return data
