"""Config loader from env + yaml."""

from __future__ import annotations

from pathlib import Path
import os
from typing import Any

import yaml
from pydantic import BaseModel, Field

from phish_email_analyzer.errors import ConfigError

PACKAGE_ROOT = Path(__file__).resolve().parents[1]
DEFAULT_CONFIG_PATH = PACKAGE_ROOT / "config" / "defaults.yaml"
DEFAULT_STATE_FILE = "./data/appState.json"
ENV_PREFIX = "PHISH_ANALYZER_"


class AppConfig(BaseModel):

    state_file: str = Field(default=DEFAULT_STATE_FILE)
    log_level: str = Field(default="INFO")
    log_format: str = Field(default="plain")
    audit_events: bool = Field(default=True)
    default_config_path: str = Field(default=str(DEFAULT_CONFIG_PATH))


def load_yaml(path: str | Path) -> dict[str, Any]:
    p = Path(path)
    if not p.exists():
        return {}
    try:
        payload = yaml.safe_load(p.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"config file {p} is not valid YAML") from exc
    return payload if isinstance(payload, dict) else {}


def _pick_env(name: str, fallback: Any) -> Any:
    value = os.getenv(f"{ENV_PREFIX}{name}")
    return value if value not in (None, "") else fallback


def _parse_bool(raw: Any, fallback: bool) -> bool:
    if isinstance(raw, bool):
        return raw
    if raw is None:
        return fallback
    value = str(raw).strip().lower()
    if value in {"1", "true", "yes", "on"}:
        return True
    if value in {"0", "false", "no", "off"}:
        return False
    return fallback


def _parse_str(raw: Any, fallback: str) -> str:
    value = str(raw if raw is not None else "").strip()
    return value or fallback


def _parse_log_format(raw: Any) -> str:
    value = _parse_str(raw, "plain").lower()
    return value if value in {"plain", "json"} else "plain"


def _resolve_default_config_path(path: str | Path | None) -> Path:
    if path is not None:
        return Path(path)
    env_default_path = os.getenv(f"{ENV_PREFIX}DEFAULT_CONFIG_PATH")
    if env_default_path:
        return Path(env_default_path)
    return DEFAULT_CONFIG_PATH


def load_config(path: str | Path | None = None) -> tuple[AppConfig, dict[str, Any]]:
    default_path = _resolve_default_config_path(path)
    merged = load_yaml(default_path)

    payload = {
        "state_file": _parse_str(_pick_env("STATE_FILE", merged.get("state_file")), DEFAULT_STATE_FILE),
        "log_level": _parse_str(_pick_env("LOG_LEVEL", merged.get("log_level")), "INFO").upper(),
        "log_format": _parse_log_format(_pick_env("LOG_FORMAT", merged.get("log_format"))),
        "audit_events": _parse_bool(_pick_env("AUDIT_EVENTS", merged.get("audit_events")), True),
        "default_config_path": str(default_path),
    }

    cfg = AppConfig.model_validate(payload)
    return cfg, merged
