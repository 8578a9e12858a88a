import os
import re
from typing import Iterable, List

from .logging_setup import get_logger
log = get_logger("utils.file")

SUPPORTED_FORMATS = [".jpeg", ".jpg", ".png", ".bmp", ".gif", ".tiff", ".webp"]


def is_supported_image(path: str) -> bool:
    return os.path.splitext(path or "")[1].lower() in SUPPORTED_FORMATS


def natural_sort_key(name: str):
    """숫자를 숫자처럼 비교하는 자연 정렬 키(대소문자 무시).

    int/str가 섞여 비교되지 않도록 각 토큰을 (종류, 값) 쌍으로 만든다.
    """
    out = []
    for part in re.split(r"(\d+)", name or ""):
        if not part:
            continue
        if part.isdigit():
            out.append((0, int(part), ""))
        else:
            out.append((1, 0, part.lower()))
    return out


def scan_directory(dir_path: str) -> List[str]:
    if not dir_path or not os.path.isdir(dir_path):
        log.warning("scan_dir_missing | dir=%s", dir_path)
        return []
    names = [n for n in os.listdir(dir_path) if is_supported_image(n)]
    names.sort(key=natural_sort_key)
    files = [os.path.join(dir_path, n) for n in names if os.path.isfile(os.path.join(dir_path, n))]
    log.info("scan_dir_done | dir=%s | count=%d", os.path.basename(dir_path), len(files))
    return files


def collect_images(args: Iterable[str]) -> List[str]:
    """명령줄 인자(파일/폴더)를 덱 순서의 이미지 경로 목록으로 변환."""
    files: List[str] = []
    seen: set[str] = set()
    for arg in args:
        if not arg:
            continue
        path = os.path.abspath(os.path.expanduser(arg))
        if os.path.isdir(path):
            candidates = scan_directory(path)
        elif os.path.isfile(path) and is_supported_image(path):
            candidates = [path]
        else:
            log.warning("skip_arg | path=%s", arg)
            continue
        for p in candidates:
            key = os.path.normcase(p)
            if key not in seen:
                seen.add(key)
                files.append(p)
    return files
