"""Tests for the adif-convert command line tool."""

import json

from adif_text.reader import read_records
from cli.convert import main

ADIF = "<CALL:4>W1AW<QSO_DATE:8>20230615<TIME_ON:4>1230<BAND:3>20m<EOR>\n"


def test_adif2json_to_file(tmp_path) -> None:
    src = tmp_path / "log.adi"
    src.write_text(ADIF, encoding="utf-8")
    out = tmp_path / "log.json"
    assert main(["adif2json", str(src), "-o", str(out)]) == 0
    data = json.loads(out.read_text(encoding="utf-8"))
    assert data["qsos"][0]["contactedStation"]["stationCall"] == "W1AW"
    assert data["qsos"][0]["band"] == "20m"


def test_json2adif_to_stdout(tmp_path, capsys) -> None:
    src = tmp_path / "log.json"
    src.write_text(
        '{"qsos": [{"band": "20m", "timeOn": "2023-06-15T12:30:00Z",'
        ' "contactedStation": {"stationCall": "W1AW"}}]}',
        encoding="utf-8",
    )
    assert main(["json2adif", str(src)]) == 0
    out = capsys.readouterr().out
    assert "<CALL:4>W1AW" in out
    assert "<QSO_DATE:8>20230615" in out
    assert "<TIME_ON:6>123000" in out
    assert "<EOH>" not in out


def test_round_trip_through_files(tmp_path) -> None:
    src = tmp_path / "log.adi"
    src.write_text(ADIF, encoding="utf-8")
    as_json = tmp_path / "log.json"
    back = tmp_path / "back.adi"
    assert main(["adif2json", str(src), "-o", str(as_json), "--workers", "2"]) == 0
    assert main(["json2adif", str(as_json), "-o", str(back)]) == 0
    text = back.read_text(encoding="utf-8")
    assert "<EOH>" in text
    assert read_records(text) == [
        {"BAND": "20m", "QSO_DATE": "20230615", "TIME_ON": "123000", "CALL": "W1AW"}
    ]


def test_errors_exit_nonzero(tmp_path, capsys) -> None:
    src = tmp_path / "bad.adi"
    src.write_text("<CALL:99>W1AW<EOR>", encoding="utf-8")
    assert main(["adif2json", str(src)]) == 1
    assert "error:" in capsys.readouterr().err
    assert main(["json2adif", str(tmp_path / "missing.json")]) == 1
