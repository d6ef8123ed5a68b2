from __future__ import annotations

import json
from typing import Any
from pydantic import BaseModel, Field, ValidationError
from PySide6.QtCore import QSettings

# QSettings scope
ORG = "PersonalApps"
APP = "MyFriend"


class UIState(BaseModel):
    geometry: dict = Field(default_factory=dict)


class GridConfig(BaseModel):
    columns: int = Field(default=5, ge=1)
    thumbnail_size: int = Field(default=200, ge=32)


class CaptureConfig(BaseModel):
    last_image_dir: str = ""
    reprompt_empty_caption: bool = False


class Config(BaseModel):
    ui: UIState = Field(default_factory=UIState)
    grid: GridConfig = Field(default_factory=GridConfig)
    capture: CaptureConfig = Field(default_factory=CaptureConfig)
    log_level: str = "INFO"


def _s() -> QSettings:
    return QSettings(ORG, APP)


def _read_json(s: QSettings, key: str, default: dict) -> dict:
    raw = s.value(key, "")
    if isinstance(raw, dict):
        return raw  # some backends can store native types
    if not raw:
        return default
    try:
        value = json.loads(raw)
    except (TypeError, ValueError):
        return default
    return value if isinstance(value, dict) else default


def _write_json(s: QSettings, key: str, obj: dict | list) -> None:
    s.setValue(key, json.dumps(obj, ensure_ascii=False))


def _read_bool(s: QSettings, key: str, default: bool) -> bool:
    raw: Any = s.value(key, default)
    if isinstance(raw, str):
        return raw.strip().lower() in {"1", "true", "yes", "on"}
    return bool(raw)


def _model(cls: type[BaseModel], data: dict) -> BaseModel:
    try:
        return cls.model_validate(data)
    except ValidationError:
        return cls()


def load_config(settings: QSettings | None = None) -> Config:
    s = settings if settings is not None else _s()

    # --- UI ---
    s.beginGroup("ui")
    geometry = _read_json(s, "geometry", {})
    s.endGroup()

    # --- Grid ---
    s.beginGroup("grid")
    grid = _read_json(s, "layout", {})
    s.endGroup()

    # --- Capture ---
    s.beginGroup("capture")
    last_image_dir = str(s.value("last_image_dir", "", str))
    reprompt = _read_bool(s, "reprompt_empty_caption", False)
    s.endGroup()

    # --- Logging ---
    s.beginGroup("logging")
    log_level = str(s.value("level", "INFO", str)) or "INFO"
    s.endGroup()

    return Config(
        ui=UIState(geometry=geometry),
        grid=_model(GridConfig, grid),
        capture=CaptureConfig(last_image_dir=last_image_dir, reprompt_empty_caption=reprompt),
        log_level=log_level,
    )


def save_config(cfg: Config, settings: QSettings | None = None) -> None:
    s = settings if settings is not None else _s()

    # --- UI ---
    s.beginGroup("ui")
    _write_json(s, "geometry", dict(cfg.ui.geometry))
    s.endGroup()

    # --- Grid ---
    s.beginGroup("grid")
    _write_json(s, "layout", cfg.grid.model_dump())
    s.endGroup()

    # --- Capture ---
    s.beginGroup("capture")
    s.setValue("last_image_dir", cfg.capture.last_image_dir)
    s.setValue("reprompt_empty_caption", cfg.capture.reprompt_empty_caption)
    s.endGroup()

    # --- Logging ---
    s.beginGroup("logging")
    s.setValue("level", cfg.log_level)
    s.endGroup()
    s.sync()
