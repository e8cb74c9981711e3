# infrastructure/result/loader_registry.py
from __future__ import annotations

from pathlib import Path
from typing import Dict

from infrastructure.result.base_loader import RunResultLoaderBase, RunResultLoadError
from infrastructure.result.json_loader import JsonRunResultLoader
from infrastructure.result.yaml_loader import YamlRunResultLoader


class RunResultLoaderRegistry:
    def __init__(self) -> None:
        self._loaders: Dict[str, RunResultLoaderBase] = {
            ".yaml": YamlRunResultLoader(),
            ".yml": YamlRunResultLoader(),
            ".json": JsonRunResultLoader(),
        }

    def get_loader(self, path: Path) -> RunResultLoaderBase:
        ext = path.suffix.lower()
        loader = self._loaders.get(ext)
        if loader is None:
            raise RunResultLoadError(f"Unsupported run result format: {ext}")
        return loader
