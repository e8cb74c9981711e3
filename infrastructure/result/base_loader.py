# infrastructure/result/base_loader.py
from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Union

from pydantic import ValidationError as SchemaError

from domain.exceptions import ValidationError
from domain.run_result import RunResult
from infrastructure.result.report_models import RunResultReport


class RunResultLoadError(Exception):
    pass


class RunResultLoaderBase(ABC):
    def load_from_file(self, path: Union[str, Path]) -> RunResult:
        p = Path(path)
        if not p.exists():
            raise RunResultLoadError(f"Run result file not found: {p}")

        try:
            data = self._load_file(p)
        except RunResultLoadError:
            raise
        except Exception as e:
            raise RunResultLoadError(f"Run result file is malformed: {p}: {e}") from e

        if data is None:
            raise RunResultLoadError(f"Run result file is empty: {p}")
        if not isinstance(data, dict):
            raise RunResultLoadError(f"Run result file is invalid: {p}")

        try:
            return self.load_from_dict(data)
        except RunResultLoadError as e:
            raise RunResultLoadError(f"{p}: {e}") from e

    def load_from_dict(self, data: Dict[str, Any]) -> RunResult:
        try:
            report = RunResultReport.model_validate(data)
            return report.to_domain()
        except (SchemaError, ValidationError, ValueError) as e:
            raise RunResultLoadError(f"Invalid run result: {e}") from e

    @abstractmethod
    def _load_file(self, path: Path) -> Any:
        ...
