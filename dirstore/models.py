from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

@dataclass(frozen=True)
class FileLocation:
    abs_path: str
    is_directory_shaped: bool

@dataclass(frozen=True)
class RequestContent:
    text: str

@dataclass
class RequestContext:
    location: FileLocation
    content: Optional[RequestContent] = None
