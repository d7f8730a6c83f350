from __future__ import annotations
import re
from typing import Dict, List, Mapping, Tuple

from pydantic import ValidationError

from ..models import RequestContent
from ..schemas import ContentBody
from .errors import BadRequest, UnsupportedMediaType

JSON_MEDIA_TYPE = "application/json"
JSON_CHARSET = "utf-8"

# RFC 2045 token: any visible ASCII except tspecials
_TOKEN_RE = re.compile(r"^[!#$%&'*+\-.^_`|~0-9A-Za-z]+$")


def _unquote(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] == '"':
        return re.sub(r"\\(.)", r"\1", value[1:-1])
    if not _TOKEN_RE.match(value):
        raise ValueError(f"invalid parameter value: {value!r}")
    return value


def _split_params(value: str) -> List[str]:
    """Split on ";" outside of quoted strings."""
    parts: List[str] = []
    start = 0
    quoted = escaped = False
    for i, ch in enumerate(value):
        if escaped:
            escaped = False
        elif quoted and ch == "\\":
            escaped = True
        elif ch == '"':
            quoted = not quoted
        elif ch == ";" and not quoted:
            parts.append(value[start:i])
            start = i + 1
    if quoted:
        raise ValueError(f"unterminated quoted string: {value!r}")
    parts.append(value[start:])
    return parts


def parse_media_type(value: str) -> Tuple[str, Dict[str, str]]:
    """
    Split a Content-Type header into a lower-cased media type and its
    parameters. Raises ValueError for anything that is not
    ``type/subtype *( ";" name "=" value )``.
    """
    parts = _split_params(value)
    media_type = parts[0].strip().lower()
    major, sep, minor = media_type.partition("/")
    if not sep or not _TOKEN_RE.match(major) or not _TOKEN_RE.match(minor):
        raise ValueError(f"invalid media type: {value!r}")

    params: Dict[str, str] = {}
    for raw in parts[1:]:
        raw = raw.strip()
        if not raw:
            continue
        name, eq, val = raw.partition("=")
        name = name.strip().lower()
        if not eq or not _TOKEN_RE.match(name):
            raise ValueError(f"invalid parameter: {raw!r}")
        if name in params:
            raise ValueError(f"duplicate parameter: {name}")
        params[name] = _unquote(val.strip())
    return media_type, params


def ensure_json_utf8(headers: Mapping[str, str]) -> None:
    ctype = headers.get("content-type") or ""
    try:
        media_type, params = parse_media_type(ctype)
    except ValueError:
        raise UnsupportedMediaType()
    if media_type != JSON_MEDIA_TYPE:
        raise UnsupportedMediaType()
    charset = params.get("charset")
    if charset is None or charset.lower() != JSON_CHARSET:
        raise UnsupportedMediaType()


def decode_content(headers: Mapping[str, str], body: bytes) -> RequestContent:
    """
    Validate the declared content type, then strictly decode
    ``{"Content": "<text>"}``. The text is returned as sent.
    """
    ensure_json_utf8(headers)
    if not body:
        raise BadRequest("Bad request, no content")
    try:
        parsed = ContentBody.model_validate_json(body)
    except ValidationError:
        raise BadRequest("Bad request, json parse failed")
    if not parsed.content:
        raise BadRequest("Bad request, json parse failed")
    return RequestContent(text=parsed.content)
