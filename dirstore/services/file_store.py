from __future__ import annotations
import logging
import os

log = logging.getLogger(__name__)


def create_file(path: str, text: str) -> None:
    """
    Write a new file, creating parent directories as needed. A write that
    fails part way removes the file again before the error propagates.
    """
    os.makedirs(os.path.dirname(path), exist_ok=True)
    f = open(path, "w", encoding="utf-8", newline="")
    try:
        with f:
            f.write(text)
    except BaseException:
        try:
            os.remove(path)
        except FileNotFoundError:
            pass
        except OSError:
            log.warning("could not remove partial file %s", path, exc_info=True)
        raise
    log.info("created %s (%d chars)", path, len(text))


def modify_file(path: str, text: str) -> None:
    # r+ never creates; the file must still exist
    with open(path, "r+", encoding="utf-8", newline="") as f:
        f.truncate(0)
        f.write(text)
    log.info("modified %s (%d chars)", path, len(text))


def remove_file(path: str) -> None:
    os.remove(path)
    log.info("removed %s", path)


def read_file(path: str) -> str:
    with open(path, "rb") as f:
        data = f.read()
    # invalid UTF-8 becomes U+FFFD in the JSON response
    return data.decode("utf-8", errors="replace")
