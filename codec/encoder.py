"""Structured Qso -> flat ADIF record.

Only values that differ from their type's default are written: booleans
when true, numbers when non-zero, strings when non-empty and timestamps when
set. Nested entities that are None contribute nothing.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from models.qso import Qsl, Qso

from . import fields as f
from .fields import Field, QslFields, Table
from .scalars import format_date, format_string, format_time, format_upload_status

FlatRecord = Dict[str, str]


def _put(rec: FlatRecord, tag: str, text: str) -> None:
    if text:
        rec[tag] = text


def _apply(source: Any, table: Table, rec: FlatRecord) -> None:
    for mapping in table:
        _put(rec, mapping.field.value, mapping.codec.format(getattr(source, mapping.attr)))


def write_top_level(qso: Qso, rec: FlatRecord) -> None:
    _apply(qso, f.TOP_LEVEL, rec)
    for date_field, time_field, attr in f.TIMESTAMPS:
        value = getattr(qso, attr)
        _put(rec, date_field.value, format_date(value))
        _put(rec, time_field.value, format_time(value))


def write_app_defined(qso: Qso, rec: FlatRecord) -> None:
    for name, value in (qso.app_defined or {}).items():
        _put(rec, name.upper(), value)


def write_contacted_station(qso: Qso, rec: FlatRecord) -> None:
    if qso.contacted_station is None:
        return
    _apply(qso.contacted_station, f.CONTACTED_STATION, rec)


def write_logging_station(qso: Qso, rec: FlatRecord) -> None:
    if qso.logging_station is None:
        return
    _apply(qso.logging_station, f.LOGGING_STATION, rec)


def write_contest(qso: Qso, rec: FlatRecord) -> None:
    if qso.contest is None:
        return
    _put(rec, Field.CONTEST_ID.value, format_string(qso.contest.contest_id))
    _apply(qso.contest, f.CONTEST, rec)
    # Serials go to both slots so readers of either convention find them
    for numeric, text, attr in f.CONTEST_SERIALS:
        serial = format_string(getattr(qso.contest, attr))
        _put(rec, numeric.value, serial)
        _put(rec, text.value, serial)


def write_propagation(qso: Qso, rec: FlatRecord) -> None:
    if qso.propagation is None:
        return
    _apply(qso.propagation, f.PROPAGATION, rec)


def write_uploads(qso: Qso, rec: FlatRecord) -> None:
    for service in f.UPLOADS:
        upload = getattr(qso, service.attr)
        if upload is None:
            continue
        _put(rec, service.status.value, format_upload_status(upload.upload_status))
        _put(rec, service.date.value, format_date(upload.upload_date))


def write_qsl(qsl: Optional[Qsl], family: QslFields, rec: FlatRecord) -> None:
    if qsl is None:
        return
    _put(rec, family.sent.value, format_string(qsl.sent_status))
    _put(rec, family.sent_date.value, format_date(qsl.sent_date))
    _put(rec, family.received.value, format_string(qsl.received_status))
    _put(rec, family.received_date.value, format_date(qsl.received_date))


def write_qsls(qso: Qso, rec: FlatRecord) -> None:
    if qso.card is not None:
        write_qsl(qso.card, f.CARD_QSL, rec)
        _apply(qso.card, f.CARD_QSL_EXTRA, rec)
    # The shared electronic slot is written to every electronic family
    for family in f.ELECTRONIC_QSL:
        write_qsl(qso.eqsl, family, rec)


def encode_qso(qso: Qso) -> FlatRecord:
    """Build the sparse flat record for one Qso."""
    rec: FlatRecord = {}
    write_top_level(qso, rec)
    write_app_defined(qso, rec)
    write_contacted_station(qso, rec)
    write_logging_station(qso, rec)
    write_contest(qso, rec)
    write_propagation(qso, rec)
    write_uploads(qso, rec)
    write_qsls(qso, rec)
    return rec
