"""YAML config loader: parses, interpolates env vars, validates, and emits observer events."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from feedback_triage.config.domain.config import TriageConfig
from feedback_triage.config.domain.observer import ConfigObserver
from feedback_triage.config.infrastructure.env_interpolation import (
    collect_missing_vars,
    interpolate,
)
from feedback_triage.config.infrastructure.errors import (
    ConfigLoadError,
    ConfigValidationError,
    MissingEnvVarsError,
)


class YamlConfigLoader:
    """Loads, interpolates, validates, and returns a TriageConfig from a YAML file."""

    def __init__(self, observer: ConfigObserver) -> None:
        self._observer = observer

    def load(self, path: Path) -> TriageConfig:
        """
        Load, interpolate, validate, and return a TriageConfig from a YAML file.

        Raises:
            ConfigLoadError: if the file does not exist or is not valid YAML.
            MissingEnvVarsError: if any ${ENV_VAR} references are unset (all collected first).
            ConfigValidationError: if the schema is violated.
        """
        raw = _parse_yaml(path=path)
        _check_missing_env_vars(raw=raw)
        cfg = _build_config(interpolated=interpolate(raw))
        _emit_warnings(cfg=cfg, observer=self._observer)
        self._observer.config_loaded(name=cfg.name, model=cfg.model.name)
        return cfg


def _parse_yaml(path: Path) -> Any:
    try:
        with path.open("r", encoding="utf-8") as fh:
            return yaml.safe_load(fh)
    except FileNotFoundError as exc:
        raise ConfigLoadError(path=path) from exc
    except yaml.YAMLError as exc:
        raise ConfigLoadError(path=path, reason="invalid YAML") from exc


def _check_missing_env_vars(raw: Any) -> None:
    """Raise MissingEnvVarsError if any ${ENV_VAR} references in raw are unset."""
    missing = collect_missing_vars(raw)
    if missing:
        raise MissingEnvVarsError(missing)


def _build_config(interpolated: Any) -> TriageConfig:
    try:
        return TriageConfig.model_validate(interpolated)
    except ValidationError as exc:
        raise ConfigValidationError(str(exc)) from exc


def _emit_warnings(cfg: TriageConfig, observer: ConfigObserver) -> None:
    if cfg.model.temperature > 0.0:
        observer.config_model_temperature_warning(cfg.model.temperature)
