import sys
import time
import argparse
from PyQt6.QtWidgets import QApplication  # type: ignore[import]

from vgallery.storage.settings_store import load_config
from vgallery.ui.gallery_view import GalleryWindow
from vgallery.utils.file_utils import collect_images
from vgallery.utils.logging_setup import setup_logging, shutdown_logging, get_logger


def parse_args(argv):
    parser = argparse.ArgumentParser(prog="vgallery", description="Full-screen vertical image gallery")
    parser.add_argument("paths", nargs="*", help="image files or folders")
    parser.add_argument("--log-level", default="INFO")
    parser.add_argument("--log-json", action="store_true")
    parser.add_argument("--windowed", action="store_true", help="do not start in full screen")
    return parser.parse_known_args(argv)[0]


def main(argv=None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)
    setup_logging(args.log_level, json=args.log_json)
    log = get_logger("main")
    t0 = time.perf_counter()
    app = QApplication(sys.argv)
    paths = collect_images(args.paths)
    if not paths:
        log.warning("no_images | args=%s", args.paths)
    window = GalleryWindow(paths, load_config())
    if args.windowed:
        window.show()
    else:
        window.showFullScreen()
    window.setFocus()
    log.info("gallery_init_done | slides=%d | ms=%.2f", len(paths), (time.perf_counter() - t0) * 1000.0)
    try:
        return app.exec()
    finally:
        shutdown_logging()


if __name__ == "__main__":
    sys.exit(main())
