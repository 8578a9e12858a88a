from PyQt6.QtCore import QSettings

from vgallery.storage.settings_store import GalleryConfig, load_config, save_config


def ini(tmp_path):
    return QSettings(str(tmp_path / "vgallery.ini"), QSettings.Format.IniFormat)


def test_defaults_when_empty(qtbot, tmp_path):
    cfg = load_config(ini(tmp_path))
    assert cfg == GalleryConfig()
    assert (cfg.transition_ms, cfg.hint_removal_ms, cfg.swipe_threshold_px,
            cfg.resize_debounce_ms, cfg.lazy_load_margin) == (800, 500, 50, 250, 100)


def test_save_then_load(qtbot, tmp_path):
    cfg = GalleryConfig(transition_ms=600, swipe_threshold_px=30)
    save_config(cfg, ini(tmp_path))
    assert load_config(ini(tmp_path)) == cfg


def test_bad_values_fall_back_to_defaults(qtbot, tmp_path):
    s = ini(tmp_path)
    s.setValue("timing/transition_ms", "fast")
    s.setValue("media/lazy_load_margin", -20)
    s.setValue("timing/hint_removal_ms", "750")
    s.sync()
    cfg = load_config(ini(tmp_path))
    assert cfg.transition_ms == 800
    assert cfg.lazy_load_margin == 100
    assert cfg.hint_removal_ms == 750
