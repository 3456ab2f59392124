"""Whole-document conversion between ADI text and the Adif structure."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime, timezone
from typing import Dict, Iterable, List, Optional

from adif_text.reader import iter_records
from adif_text.writer import render_document
from models.qso import Adif, Header, Qso

from .decoder import decode_record
from .encoder import encode_qso
from .fields import Field
from .scalars import format_date, format_time

logger = logging.getLogger(__name__)

ADIF_VERSION = "3.1.1"
PROGRAMID = "adif-json-bridge"
PROGRAMVERSION = "0.1.0"


def make_header(
    created: Optional[datetime] = None,
    adif_version: str = ADIF_VERSION,
    program_id: str = PROGRAMID,
    program_version: str = PROGRAMVERSION,
) -> Header:
    return Header(
        adif_version=adif_version,
        created_timestamp=created or datetime.now(timezone.utc),
        program_id=program_id,
        program_version=program_version,
    )


def decode_records(records: Iterable[Dict[str, str]], workers: int = 1) -> List[Qso]:
    """Decode records in input order, optionally across a thread pool."""
    if workers <= 1:
        return [decode_record(r) for r in records]
    with ThreadPoolExecutor(max_workers=workers) as pool:
        # map() yields results in submission order
        return list(pool.map(decode_record, records))


def adif_to_document(
    content: str,
    created: Optional[datetime] = None,
    workers: int = 1,
    header: Optional[Header] = None,
) -> Adif:
    """Parse ADI text into an Adif document.

    The header is static boilerplate (see make_header) rather than a copy of
    the input header. AdifStructureError from the reader aborts the batch.
    """
    doc = Adif(header=header or make_header(created))
    doc.qsos = decode_records(iter_records(content), workers=workers)
    logger.info("Decoded %d QSO records", len(doc.qsos))
    return doc


def header_fields(header: Optional[Header]) -> Optional[Dict[str, str]]:
    if header is None:
        return None
    fields: Dict[str, str] = {}
    if header.adif_version:
        fields[Field.ADIF_VER.value] = header.adif_version
    if format_date(header.created_timestamp):
        created = header.created_timestamp
        fields[Field.CREATED_TIMESTAMP.value] = f"{format_date(created)} {format_time(created)}"
    if header.program_id:
        fields[Field.PROGRAMID.value] = header.program_id
    if header.program_version:
        fields[Field.PROGRAMVERSION.value] = header.program_version
    return fields


def document_to_adif(doc: Adif) -> str:
    """Render an Adif document as ADI text; the header is passed through."""
    records = [encode_qso(q) for q in doc.qsos]
    logger.info("Encoded %d QSO records", len(records))
    return render_document(header_fields(doc.header), records)
