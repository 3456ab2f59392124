"""Tests for Qso -> flat record encoding."""

from datetime import datetime, timezone

from codec.encoder import encode_qso
from models.qso import EPOCH, ContestData, Credit, Propagation, Qsl, Qso, Station, Upload
from models.upload_status import UploadStatus


def utc(*args) -> datetime:
    return datetime(*args, tzinfo=timezone.utc)


def test_default_qso_encodes_to_nothing() -> None:
    qso = Qso(
        logging_station=Station(),
        contacted_station=Station(),
        propagation=Propagation(),
    )
    assert encode_qso(qso) == {}


def test_sparse_write_skips_default_values() -> None:
    qso = Qso(
        contacted_station=Station(station_call="W1AW", age=0, silent_key=False, latitude=0.0),
        freq=0.0,
        random=False,
        mode="",
        time_on=EPOCH,
    )
    assert encode_qso(qso) == {"CALL": "W1AW"}


def test_top_level_fields() -> None:
    qso = Qso(
        band="20m",
        freq=14.074,
        freq_rx=14.0755,
        mode="FT8",
        distance_km=5432,
        random=True,
        swl=True,
        rst_sent="-10",
        rst_received="+03",
        complete="Y",
        time_on=utc(2023, 6, 15, 12, 30),
        time_off=utc(2023, 6, 15, 12, 31, 15),
        award_granted=["WAS", "DXCC"],
        credit_submitted=[Credit("CQ", "CARD"), Credit("DXCC")],
    )
    assert encode_qso(qso) == {
        "BAND": "20m",
        "FREQ": "14.074",
        "FREQ_RX": "14.0755",
        "MODE": "FT8",
        "DISTANCE": "5432",
        "QSO_RANDOM": "Y",
        "SWL": "Y",
        "RST_SENT": "-10",
        "RST_RCVD": "+03",
        "QSO_COMPLETE": "Y",
        "QSO_DATE": "20230615",
        "TIME_ON": "123000",
        "QSO_DATE_OFF": "20230615",
        "TIME_OFF": "123115",
        "AWARD_GRANTED": "WAS,DXCC",
        "CREDIT_SUBMITTED": "CQ:CARD,DXCC",
    }


def test_station_families() -> None:
    qso = Qso(
        contacted_station=Station(station_call="W1AW", power=100.0, latitude=41.7146, cq_zone=5),
        logging_station=Station(
            station_call="K1XYZ", power=5.0, longitude=-71.0583, antenna_azimuth=-15, street="1 Main St"
        ),
    )
    assert encode_qso(qso) == {
        "CALL": "W1AW",
        "RX_PWR": "1e+02",
        "LAT": "N041 42.876",
        "CQZ": "5",
        "STATION_CALLSIGN": "K1XYZ",
        "TX_PWR": "5",
        "MY_LON": "W071 03.498",
        "ANT_AZ": "-15",
        "MY_STREET": "1 Main St",
    }


def test_contest_serials_written_to_both_slots() -> None:
    qso = Qso(contest=ContestData(contest_id="CQ-WW-CW", serial_received="123", serial_sent="7", check="68"))
    assert encode_qso(qso) == {
        "CONTEST_ID": "CQ-WW-CW",
        "CHECK": "68",
        "SRX": "123",
        "SRX_STRING": "123",
        "STX": "7",
        "STX_STRING": "7",
    }


def test_absent_contest_writes_nothing() -> None:
    assert encode_qso(Qso(contest=None)) == {}


def test_uploads() -> None:
    qso = Qso(
        qrzcom=Upload(UploadStatus.UPLOAD_COMPLETE, utc(2023, 7, 1)),
        hrdlog=Upload(UploadStatus.DO_NOT_UPLOAD),
        clublog=Upload(UploadStatus.UNKNOWN, utc(2023, 7, 2)),
    )
    assert encode_qso(qso) == {
        "QRZCOM_QSO_UPLOAD_STATUS": "Y",
        "QRZCOM_QSO_UPLOAD_DATE": "20230701",
        "HRDLOG_QSO_UPLOAD_STATUS": "N",
        # Unknown status is omitted
        "CLUBLOG_QSO_UPLOAD_DATE": "20230702",
    }


def test_card_qsl() -> None:
    qso = Qso(
        card=Qsl(
            sent_status="Y",
            sent_date=utc(2023, 6, 16),
            received_status="R",
            sent_via="B",
            received_message="TNX",
        )
    )
    assert encode_qso(qso) == {
        "QSL_SENT": "Y",
        "QSLSDATE": "20230616",
        "QSL_RCVD": "R",
        "QSL_SENT_VIA": "B",
        "QSLMSG": "TNX",
    }


def test_electronic_qsl_written_to_both_services() -> None:
    qso = Qso(eqsl=Qsl(received_status="Y", received_date=utc(2023, 6, 10)))
    assert encode_qso(qso) == {
        "EQSL_QSL_RCVD": "Y",
        "EQSL_QSLRDATE": "20230610",
        "LOTW_QSL_RCVD": "Y",
        "LOTW_QSLRDATE": "20230610",
    }


def test_app_defined_fields() -> None:
    qso = Qso(app_defined={"app_n1mm_id": "abc", "app_empty": ""})
    assert encode_qso(qso) == {"APP_N1MM_ID": "abc"}


def test_no_default_values_in_output() -> None:
    qso = Qso(
        contacted_station=Station(station_call="W1AW", dxcc=291, fists=0),
        logging_station=Station(),
        propagation=Propagation(sat_name="AO-91", k_index=0),
        card=Qsl(sent_status="Y"),
    )
    rec = encode_qso(qso)
    assert all(value not in ("", "0", "N") for value in rec.values())
    assert rec == {"CALL": "W1AW", "DXCC": "291", "SAT_NAME": "AO-91", "QSL_SENT": "Y"}
