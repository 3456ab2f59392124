"""Split ADI text into flat records.

Each record is a ``dict`` from uppercase tag name to raw string value. Empty
values are dropped, so a missing key and an empty value look the same.
"""

from __future__ import annotations

import re
from typing import Dict, Iterator, List

from .exceptions import AdifStructureError

ADIF_FIELD_RE = re.compile(
    r"<(?P<name>[A-Za-z0-9_]+):(?P<len>\d+)(:[A-Za-z0-9]+)?>",
    re.IGNORECASE,
)


def iter_records(content: str) -> Iterator[Dict[str, str]]:
    """Lazily yield the records of an ADI document.

    A fresh generator is returned per call. Fields ahead of an ``<EOH>`` that
    precedes the first ``<EOR>`` belong to the header and are skipped. Raises
    AdifStructureError when a field runs past the end of input.
    """
    idx = 0
    length = len(content)
    current: Dict[str, str] = {}
    lower_content = content.lower()
    # Only the first end-of-record/end-of-header tag actually scanned decides
    # whether a header was present; values are skipped by length, never searched
    seen_marker = False
    while idx < length:
        if lower_content.startswith("<eor>", idx):
            if current:
                yield current
            current = {}
            seen_marker = True
            idx += 5
            continue
        if lower_content.startswith("<eoh>", idx):
            if seen_marker and current:
                raise AdifStructureError("<EOH> found after the first record")
            current = {}
            seen_marker = True
            idx += 5
            continue
        m = ADIF_FIELD_RE.match(content, idx)
        if not m:
            idx += 1
            continue
        name = m.group("name").upper()
        field_len = int(m.group("len"))
        value_start = m.end()
        value_end = value_start + field_len
        if value_end > length:
            raise AdifStructureError(
                f"Field {name} declares {field_len} characters but only "
                f"{length - value_start} remain"
            )
        value = content[value_start:value_end]
        if value:
            current[name] = value
        idx = value_end
    # Handle file not ending with <EOR>
    if current:
        yield current


def read_records(content: str) -> List[Dict[str, str]]:
    return list(iter_records(content))
