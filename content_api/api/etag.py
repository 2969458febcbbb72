"""JSON rendering and ETag helpers for conditional GETs"""

import hashlib
import json
from typing import Any


def render_json(payload: Any) -> bytes:
    """Serialize a response body; the ETag is computed over these exact bytes"""
    return json.dumps(payload, indent=4, ensure_ascii=False).encode("utf-8")


def generate_etag(body: bytes) -> str:
    """Quoted MD5 of the response body"""
    return '"' + hashlib.md5(body).hexdigest() + '"'


def etag_matches(if_none_match: str | None, etag: str) -> bool:
    """Check if the client's cached copy is still valid"""
    return if_none_match is not None and if_none_match == etag
