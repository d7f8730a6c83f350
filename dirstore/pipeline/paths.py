from __future__ import annotations
import os
import posixpath

from ..models import FileLocation
from .errors import RoutingError

DEFAULT_EXTENSION = ".txt"


def strip_prefix(path_prefix: str, request_path: str) -> str:
    """Return the part of ``request_path`` after ``path_prefix``."""
    if not request_path.startswith(path_prefix):
        raise RoutingError()
    return request_path[len(path_prefix):]


def _absolute_root(root_dir: str) -> str:
    # Relative roots follow the current working directory at call time.
    if os.path.isabs(root_dir):
        return os.path.normpath(root_dir)
    return os.path.normpath(os.path.join(os.getcwd(), root_dir))


def resolve_location(
    root_dir: str,
    path_prefix: str,
    request_path: str,
    extension: str = DEFAULT_EXTENSION,
) -> FileLocation:
    """
    Map a URL path onto a location under ``root_dir``.

    The caller has already checked that ``request_path`` starts with
    ``path_prefix``. An empty suffix, or one ending in "/", addresses a
    directory and gets a trailing separator; anything else addresses a
    content file and gets ``extension`` appended.

    The suffix is normalised as an absolute path first, so ".." can never
    climb above ``root_dir``.
    """
    suffix = request_path[len(path_prefix):]
    relative = posixpath.normpath("/" + suffix).lstrip("/")

    root = _absolute_root(root_dir)
    directory_shaped = not suffix or suffix.endswith("/") or not relative
    path = os.path.join(root, *relative.split("/")) if relative else root

    if directory_shaped:
        if not path.endswith(os.sep):
            path += os.sep
    else:
        path += extension
    return FileLocation(abs_path=path, is_directory_shaped=directory_shaped)
