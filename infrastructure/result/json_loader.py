# infrastructure/result/json_loader.py
from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from infrastructure.result.base_loader import RunResultLoaderBase


class JsonRunResultLoader(RunResultLoaderBase):
    def _load_file(self, path: Path) -> Any:
        with path.open("r", encoding="utf-8") as handle:
            return json.load(handle)
