from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtCore import QSettings  # type: ignore[import]

from ..utils.logging_setup import get_logger

log = get_logger("storage.settings")

# 표현 계층의 애니메이션 길이와 같은 값을 공유해야 함
TRANSITION_MS = 800
HINT_REMOVAL_MS = 500
SWIPE_THRESHOLD_PX = 50
RESIZE_DEBOUNCE_MS = 250
LAZY_LOAD_MARGIN = 100


@dataclass(frozen=True)
class GalleryConfig:
    transition_ms: int = TRANSITION_MS
    hint_removal_ms: int = HINT_REMOVAL_MS
    swipe_threshold_px: int = SWIPE_THRESHOLD_PX
    resize_debounce_ms: int = RESIZE_DEBOUNCE_MS
    lazy_load_margin: int = LAZY_LOAD_MARGIN


# (필드, QSettings 키)
_KEYS = (
    ("transition_ms", "timing/transition_ms"),
    ("hint_removal_ms", "timing/hint_removal_ms"),
    ("swipe_threshold_px", "input/swipe_threshold_px"),
    ("resize_debounce_ms", "timing/resize_debounce_ms"),
    ("lazy_load_margin", "media/lazy_load_margin"),
)


def default_settings() -> QSettings:
    return QSettings("VGallery", "VGallery")


def _read_int(settings: QSettings, key: str, default: int) -> int:
    raw = settings.value(key, default)
    try:
        value = int(raw)
    except (TypeError, ValueError):
        log.warning("settings_bad_value | key=%s | value=%r", key, raw)
        return default
    if value < 0:
        log.warning("settings_negative_value | key=%s | value=%d", key, value)
        return default
    return value


def load_config(settings: QSettings | None = None) -> GalleryConfig:
    settings = settings if settings is not None else default_settings()
    defaults = GalleryConfig()
    values = {
        field: _read_int(settings, key, getattr(defaults, field))
        for field, key in _KEYS
    }
    cfg = GalleryConfig(**values)
    log.debug("settings_loaded | %s", cfg)
    return cfg


def save_config(cfg: GalleryConfig, settings: QSettings | None = None) -> None:
    settings = settings if settings is not None else default_settings()
    for field, key in _KEYS:
        settings.setValue(key, int(getattr(cfg, field)))
    settings.sync()
