from __future__ import annotations
import os
import stat

from ..models import FileLocation
from .errors import Conflict, NotFound


def _stat(path: str):
    # Unusable names (embedded NUL, over-long components) count as missing.
    try:
        return os.stat(path)
    except (OSError, ValueError):
        return None


def require_exists(location: FileLocation) -> None:
    st = _stat(location.abs_path)
    if st is None or stat.S_ISDIR(st.st_mode):
        raise NotFound("File does not exist")


def require_absent(location: FileLocation) -> None:
    # Only a plain "no such file" lets a create through.
    try:
        os.stat(location.abs_path)
    except FileNotFoundError:
        return
    except (OSError, ValueError):
        pass
    raise Conflict("File does exist")


def require_directory_exists(location: FileLocation) -> None:
    st = _stat(location.abs_path)
    if st is None or not stat.S_ISDIR(st.st_mode):
        raise NotFound("Folder does not exist")
