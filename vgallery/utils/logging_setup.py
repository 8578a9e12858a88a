import os
import sys
import uuid
import logging
import logging.handlers
import queue
from typing import Optional

_SESSION_ID = uuid.uuid4().hex[:8]
_listener: logging.handlers.QueueListener | None = None

TEXT_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | sid=%(session_id)s | %(message)s"
JSON_FORMAT = '{"ts":"%(asctime)s","level":"%(levelname)s","name":"%(name)s","sid":"%(session_id)s","msg":"%(message)s"}'


class _SessionFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:  # noqa: D401
        if not hasattr(record, "session_id"):
            record.session_id = _SESSION_ID
        return True


def _default_log_dir() -> str:
    try:
        if sys.platform == "win32":
            base = os.getenv("LOCALAPPDATA") or os.path.expanduser("~\\AppData\\Local")
        else:
            base = os.getenv("XDG_STATE_HOME") or os.path.expanduser("~/.local/state")
        path = os.path.join(base, "VGallery", "logs")
        os.makedirs(path, exist_ok=True)
        return path
    except OSError:
        return os.getcwd()


def session_id() -> str:
    return _SESSION_ID


def setup_logging(level: str = "INFO", log_dir: Optional[str] = None, json: bool = False) -> None:
    """Initialize app-wide logging with rotating file handler and queue listener."""
    global _listener
    if _listener is not None:
        set_level(level)
        return

    lvl = getattr(logging, str(level).upper(), logging.INFO)
    q: "queue.Queue[logging.LogRecord]" = queue.Queue(maxsize=10000)
    qh = logging.handlers.QueueHandler(q)
    qh.addFilter(_SessionFilter())

    root = logging.getLogger()
    root.setLevel(lvl)
    root.addHandler(qh)

    log_dir = log_dir or _default_log_dir()
    os.makedirs(log_dir, exist_ok=True)
    log_path = os.path.join(log_dir, "app.log")

    fh = logging.handlers.RotatingFileHandler(
        log_path, maxBytes=5 * 1024 * 1024, backupCount=10, encoding="utf-8"
    )
    fmt = logging.Formatter(JSON_FORMAT if json else TEXT_FORMAT)
    fh.setFormatter(fmt)

    sh = logging.StreamHandler(stream=sys.stderr)
    sh.setLevel(lvl)
    sh.setFormatter(fmt)

    _listener = logging.handlers.QueueListener(q, fh, sh, respect_handler_level=True)
    _listener.start()


def shutdown_logging() -> None:
    """큐 리스너를 멈추고 루트 로거에서 큐 핸들러를 떼어낸다."""
    global _listener
    if _listener is None:
        return
    _listener.stop()
    for h in list(_listener.handlers):
        h.close()
    root = logging.getLogger()
    for h in list(root.handlers):
        if isinstance(h, logging.handlers.QueueHandler):
            root.removeHandler(h)
    _listener = None


def set_level(level: str) -> None:
    lvl = getattr(logging, str(level).upper(), logging.INFO)
    logging.getLogger().setLevel(lvl)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
