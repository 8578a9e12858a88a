import logging

from vgallery.utils import logging_setup


def test_setup_writes_session_tagged_lines(tmp_path):
    root = logging.getLogger()
    old_level = root.level
    try:
        logging_setup.setup_logging("DEBUG", log_dir=str(tmp_path))
        # 두 번째 호출은 레벨만 갱신
        logging_setup.setup_logging("DEBUG", log_dir=str(tmp_path / "other"))
        logging_setup.get_logger("core.navigator").info("nav_accept | from=%d | to=%d", 0, 1)
    finally:
        logging_setup.shutdown_logging()
        root.setLevel(old_level)
    text = (tmp_path / "app.log").read_text(encoding="utf-8")
    assert "nav_accept | from=0 | to=1" in text
    assert f"sid={logging_setup.session_id()}" in text
    assert "core.navigator" in text
    assert not (tmp_path / "other").exists()


def test_shutdown_without_setup_is_noop():
    logging_setup.shutdown_logging()
