"""Tests for reading and writing ADI text."""

import pytest

from adif_text.exceptions import AdifStructureError, AdifWriteError
from adif_text.reader import iter_records, read_records
from adif_text.writer import render_document, render_header, render_record, write_document


def test_read_single_record() -> None:
    adif = "<CALL:5>K1ABC<BAND:3>40M<MODE:2>CW<QSO_DATE:8>20240101<EOR>"
    records = read_records(adif)
    assert records == [{"CALL": "K1ABC", "BAND": "40M", "MODE": "CW", "QSO_DATE": "20240101"}]


def test_read_multiple_with_header_and_missing_eor() -> None:
    adif = (
        "Generated by hand\n"
        "<adif_ver:5>3.1.4 <programid:4>TEST<eoh>\n"
        "<call:5>K1ABC<band:3>40M<eor>\n"
        "<CALL:6>WA9XYZ<BAND:3>20M"  # no <EOR>
    )
    records = read_records(adif)
    assert [r["CALL"] for r in records] == ["K1ABC", "WA9XYZ"]


def test_read_type_indicator_and_empty_values() -> None:
    adif = "<CALL:4:S>W1AW<FREQ:6:N>14.074<COMMENT:0><EOR>"
    assert read_records(adif) == [{"CALL": "W1AW", "FREQ": "14.074"}]


def test_value_length_governs_not_delimiters() -> None:
    adif = "<COMMENT:9>a <b> c:d<CALL:4>W1AW<EOR>"
    assert read_records(adif) == [{"COMMENT": "a <b> c:d", "CALL": "W1AW"}]


def test_header_fields_are_not_records() -> None:
    adif = "<ADIF_VER:5>3.1.4<PROGRAMID:4>TEST<EOH>\n<CALL:4>W1AW<EOR>\n"
    assert read_records(adif) == [{"CALL": "W1AW"}]


def test_eoh_inside_value_without_header() -> None:
    adif = "<CALL:4>W1AW<COMMENT:9>see <EOH><EOR>\n<CALL:4>K1AB<EOR>\n"
    records = read_records(adif)
    assert records == [{"CALL": "W1AW", "COMMENT": "see <EOH>"}, {"CALL": "K1AB"}]


def test_eoh_inside_header_value() -> None:
    adif = "<PROGRAMID:10>log <EOR>x<EOH>\n<CALL:4>W1AW<EOR>\n"
    assert read_records(adif) == [{"CALL": "W1AW"}]


def test_eoh_after_first_record_is_structural_error() -> None:
    with pytest.raises(AdifStructureError):
        read_records("<CALL:4>W1AW<EOR><CALL:4>K1AB<EOH><CALL:4>N0CA<EOR>")


def test_iter_records_is_lazy_and_restartable() -> None:
    adif = "<CALL:4>W1AW<EOR><CALL:4>K1AB<EOR>"
    gen = iter_records(adif)
    assert next(gen) == {"CALL": "W1AW"}
    assert [r["CALL"] for r in iter_records(adif)] == ["W1AW", "K1AB"]


def test_truncated_field_is_structural_error() -> None:
    records = iter_records("<CALL:4>W1AW<EOR><CALL:20>K1AB<EOR>")
    assert next(records) == {"CALL": "W1AW"}
    with pytest.raises(AdifStructureError):
        next(records)


def test_render_record_and_header() -> None:
    assert render_record({"CALL": "W1AW", "band": "20m"}) == "<CALL:4>W1AW<BAND:3>20m<EOR>\n"
    assert render_header({"ADIF_VER": "3.1.1"}) == "<ADIF_VER:5>3.1.1\n<EOH>\n"


def test_render_document_without_header() -> None:
    text = render_document(None, [{"CALL": "W1AW"}, {"CALL": "K1AB"}])
    assert text == "<CALL:4>W1AW<EOR>\n<CALL:4>K1AB<EOR>\n"


def test_rendered_text_reads_back() -> None:
    records = [{"CALL": "W1AW", "COMMENT": "tnx <fer> qso"}]
    text = render_document({"PROGRAMID": "x"}, records)
    assert read_records(text) == records


@pytest.mark.parametrize("fields", [{"BAD TAG": "x"}, {"CALL": 5}, {"<CALL>": "W1AW"}])
def test_render_rejects_invalid_fields(fields) -> None:
    with pytest.raises(AdifWriteError):
        render_record(fields)


def test_write_document(tmp_path) -> None:
    path = tmp_path / "out" / "log.adi"
    write_document(str(path), "<CALL:4>W1AW<EOR>\n")
    assert path.read_text(encoding="utf-8") == "<CALL:4>W1AW<EOR>\n"
    assert not (tmp_path / "out" / "log.adi.tmp").exists()
