"""Render flat records as ADI text."""

from __future__ import annotations

import os
import re
from typing import Iterable, Mapping, Optional

from .exceptions import AdifWriteError

TAG_RE = re.compile(r"[A-Za-z0-9_]+")


def _hdr_line(tag: str, val: str) -> str:
    return f"<{tag}:{len(val)}>{val}\n"


def _encode_field(tag: str, value: str) -> str:
    return f"<{tag}:{len(value)}>{value}"


def _check(tag: object, value: object) -> None:
    if not isinstance(tag, str) or not isinstance(value, str):
        raise AdifWriteError(f"ADIF field must be strings: {tag}={value}")
    if not TAG_RE.fullmatch(tag):
        raise AdifWriteError(f"Invalid ADIF field name: {tag!r}")


def render_header(fields: Mapping[str, str]) -> str:
    header = []
    for tag, val in fields.items():
        _check(tag, val)
        header.append(_hdr_line(tag.upper(), val))
    header.append("<EOH>\n")
    return "".join(header)


def render_record(fields: Mapping[str, str]) -> str:
    rec = []
    for tag, val in fields.items():
        _check(tag, val)
        rec.append(_encode_field(tag.upper(), val))
    rec.append("<EOR>\n")
    return "".join(rec)


def render_document(
    header: Optional[Mapping[str, str]], records: Iterable[Mapping[str, str]]
) -> str:
    """Render a whole document; the header block is skipped when ``header`` is None."""
    parts = []
    if header is not None:
        parts.append(render_header(header))
    for rec in records:
        parts.append(render_record(rec))
    return "".join(parts)


def write_document(path: str, text: str) -> None:
    """Write ADI text to ``path`` atomically."""
    os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
    tmp = path + ".tmp"
    try:
        with open(tmp, "w", encoding="utf-8") as f:
            f.write(text)
        os.replace(tmp, path)
    except Exception:
        # Clean up temp file if write failed
        if os.path.exists(tmp):
            os.remove(tmp)
        raise
