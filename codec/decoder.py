"""Flat ADIF record -> structured Qso.

Decoding never fails. A value that cannot be coerced falls back to its
type's default and is logged at DEBUG level.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional

from models.qso import ContestData, Propagation, Qsl, Qso, Station, Upload

from . import fields as f
from .fields import APP_PREFIX, Field, QslFields, Table
from .scalars import parse_date, parse_timestamp, parse_upload_status

logger = logging.getLogger(__name__)

FlatRecord = Mapping[str, str]


class _Record:
    """Case-insensitive view of a flat record; missing tags read as ``""``."""

    def __init__(self, record: FlatRecord):
        self.fields: Dict[str, str] = {str(k).upper(): v for k, v in record.items()}

    def get(self, tag: Field) -> str:
        return self.fields.get(tag.value, "") or ""


def _coerce(tag: str, codec_name: str, value: Any, ok: bool, text: str) -> Any:
    if not ok:
        logger.debug("%s: could not read %r as %s, using default", tag, text, codec_name)
    return value


def _apply(record: _Record, table: Table, target: Any) -> None:
    for mapping in table:
        text = record.get(mapping.field)
        value, ok = mapping.codec.parse(text)
        setattr(target, mapping.attr, _coerce(mapping.field.value, mapping.codec.name, value, ok, text))


def parse_top_level(record: _Record, qso: Qso) -> None:
    _apply(record, f.TOP_LEVEL, qso)
    for date_field, time_field, attr in f.TIMESTAMPS:
        date_text, time_text = record.get(date_field), record.get(time_field)
        value, ok = parse_timestamp(date_text, time_text)
        setattr(qso, attr, _coerce(date_field.value, "timestamp", value, ok, f"{date_text} {time_text}"))


def parse_app_defined(record: _Record, qso: Qso) -> None:
    app_defined = {
        name.lower(): value
        for name, value in record.fields.items()
        if name.startswith(APP_PREFIX) and value
    }
    if app_defined:
        qso.app_defined = app_defined


def parse_contacted_station(record: _Record, qso: Qso) -> None:
    qso.contacted_station = Station()
    _apply(record, f.CONTACTED_STATION, qso.contacted_station)


def parse_logging_station(record: _Record, qso: Qso) -> None:
    qso.logging_station = Station()
    _apply(record, f.LOGGING_STATION, qso.logging_station)


def parse_contest(record: _Record, qso: Qso) -> None:
    contest_id = record.get(Field.CONTEST_ID)
    if not contest_id:
        return
    contest = ContestData(contest_id=contest_id)
    _apply(record, f.CONTEST, contest)
    # SRX/STX and their _STRING forms are alternative slots for one value
    for numeric, text, attr in f.CONTEST_SERIALS:
        setattr(contest, attr, record.get(numeric) or record.get(text))
    qso.contest = contest


def parse_propagation(record: _Record, qso: Qso) -> None:
    qso.propagation = Propagation()
    _apply(record, f.PROPAGATION, qso.propagation)


def parse_uploads(record: _Record, qso: Qso) -> None:
    for service in f.UPLOADS:
        status_text = record.get(service.status)
        if not status_text:
            continue
        status, ok = parse_upload_status(status_text)
        date_text = record.get(service.date)
        date, date_ok = parse_date(date_text)
        upload = Upload(
            upload_status=_coerce(service.status.value, "upload status", status, ok, status_text),
            upload_date=_coerce(service.date.value, "date", date, date_ok, date_text),
        )
        setattr(qso, service.attr, upload)


def parse_qsl(record: _Record, family: QslFields) -> Optional[Qsl]:
    sent = record.get(family.sent)
    received = record.get(family.received)
    if sent in f.NO_QSL_STATUSES and received in f.NO_QSL_STATUSES:
        return None
    sent_date_text = record.get(family.sent_date)
    received_date_text = record.get(family.received_date)
    sent_date, sent_ok = parse_date(sent_date_text)
    received_date, received_ok = parse_date(received_date_text)
    return Qsl(
        sent_status=sent,
        sent_date=_coerce(family.sent_date.value, "date", sent_date, sent_ok, sent_date_text),
        received_status=received,
        received_date=_coerce(
            family.received_date.value, "date", received_date, received_ok, received_date_text
        ),
    )


def parse_qsls(record: _Record, qso: Qso) -> None:
    card = parse_qsl(record, f.CARD_QSL)
    if card is not None:
        _apply(record, f.CARD_QSL_EXTRA, card)
    qso.card = card

    # eQSL.cc and LoTW share one slot; the later family wins when both are set
    for family in f.ELECTRONIC_QSL:
        qsl = parse_qsl(record, family)
        if qsl is not None:
            qso.eqsl = qsl


def decode_record(record: FlatRecord) -> Qso:
    """Build a Qso from one flat record of tag -> string value."""
    view = _Record(record)
    qso = Qso()
    parse_top_level(view, qso)
    parse_app_defined(view, qso)
    parse_contacted_station(view, qso)
    parse_logging_station(view, qso)
    parse_contest(view, qso)
    parse_propagation(view, qso)
    parse_uploads(view, qso)
    parse_qsls(view, qso)
    return qso
