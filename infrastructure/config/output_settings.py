# infrastructure/config/output_settings.py
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from dotenv import dotenv_values

from domain.exceptions import ValidationError


_env_path = Path(__file__).parent.parent.parent / ".env"

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off", ""}


def _parse_bool(name: str, raw: Optional[str], default: bool) -> bool:
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ValidationError(f"{name} must be a boolean, got: {raw}")


@dataclass(frozen=True)
class OutputSettings:
    include_headers: bool = False
    color: bool = False
    output: Optional[str] = None
    base_url: str = ""
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, Optional[str]]] = None) -> "OutputSettings":
        """
        Settings from WEBPOST_* variables.

        Without an explicit mapping, the project .env file is read first and
        the process environment wins over it. NO_COLOR (any value) turns
        color off.
        """
        if env is None:
            merged: dict = dict(dotenv_values(_env_path)) if _env_path.exists() else {}
            merged.update(os.environ)
            env = merged

        color = _parse_bool("WEBPOST_COLOR", env.get("WEBPOST_COLOR"), False)
        if env.get("NO_COLOR") is not None:
            color = False

        return cls(
            include_headers=_parse_bool(
                "WEBPOST_INCLUDE_HEADERS", env.get("WEBPOST_INCLUDE_HEADERS"), False
            ),
            color=color,
            output=env.get("WEBPOST_OUTPUT") or None,
            base_url=env.get("WEBPOST_BASE_URL") or "",
            log_level=(env.get("WEBPOST_LOG_LEVEL") or "INFO").upper(),
        )
