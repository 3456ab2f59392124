"""ADIF tag vocabulary and the per-entity mapping tables.

Both directions of the conversion walk the same tables, so a tag can only
be added or renamed in one place.
"""

from __future__ import annotations

from enum import Enum
from typing import NamedTuple, Tuple

from . import scalars
from .scalars import ScalarCodec

APP_PREFIX = "APP_"


class Field(str, Enum):
    # Header
    ADIF_VER = "ADIF_VER"
    CREATED_TIMESTAMP = "CREATED_TIMESTAMP"
    PROGRAMID = "PROGRAMID"
    PROGRAMVERSION = "PROGRAMVERSION"

    # Contact
    BAND = "BAND"
    BAND_RX = "BAND_RX"
    COMMENT = "COMMENT"
    DISTANCE = "DISTANCE"
    FREQ = "FREQ"
    FREQ_RX = "FREQ_RX"
    MODE = "MODE"
    NOTES = "NOTES"
    PUBLIC_KEY = "PUBLIC_KEY"
    QSO_COMPLETE = "QSO_COMPLETE"
    QSO_DATE = "QSO_DATE"
    TIME_ON = "TIME_ON"
    QSO_DATE_OFF = "QSO_DATE_OFF"
    TIME_OFF = "TIME_OFF"
    QSO_RANDOM = "QSO_RANDOM"
    RST_RCVD = "RST_RCVD"
    RST_SENT = "RST_SENT"
    SUBMODE = "SUBMODE"
    SWL = "SWL"

    # Contacted station
    ADDRESS = "ADDRESS"
    AGE = "AGE"
    CALL = "CALL"
    CNTY = "CNTY"
    CONT = "CONT"
    CONTACTED_OP = "CONTACTED_OP"
    COUNTRY = "COUNTRY"
    CQZ = "CQZ"
    DARC_DOK = "DARC_DOK"
    DXCC = "DXCC"
    EMAIL = "EMAIL"
    EQ_CALL = "EQ_CALL"
    FISTS = "FISTS"
    FISTS_CC = "FISTS_CC"
    GRIDSQUARE = "GRIDSQUARE"
    IOTA = "IOTA"
    IOTA_ISLAND_ID = "IOTA_ISLAND_ID"
    ITUZ = "ITUZ"
    LAT = "LAT"
    LON = "LON"
    NAME = "NAME"
    PFX = "PFX"
    QSL_VIA = "QSL_VIA"
    QTH = "QTH"
    REGION = "REGION"
    RIG = "RIG"
    RX_PWR = "RX_PWR"
    SIG = "SIG"
    SIG_INFO = "SIG_INFO"
    SILENT_KEY = "SILENT_KEY"
    SKCC = "SKCC"
    SOTA_REF = "SOTA_REF"
    STATE = "STATE"
    TEN_TEN = "TEN_TEN"
    UKSMG = "UKSMG"
    USACA_COUNTIES = "USACA_COUNTIES"
    VUCC_GRIDS = "VUCC_GRIDS"
    WEB = "WEB"

    # Logging station
    ANT_AZ = "ANT_AZ"
    ANT_EL = "ANT_EL"
    MY_ANTENNA = "MY_ANTENNA"
    MY_CITY = "MY_CITY"
    MY_CNTY = "MY_CNTY"
    MY_COUNTRY = "MY_COUNTRY"
    MY_CQ_ZONE = "MY_CQ_ZONE"
    MY_DXCC = "MY_DXCC"
    MY_FISTS = "MY_FISTS"
    MY_GRIDSQUARE = "MY_GRIDSQUARE"
    MY_IOTA = "MY_IOTA"
    MY_IOTA_ISLAND_ID = "MY_IOTA_ISLAND_ID"
    MY_ITU_ZONE = "MY_ITU_ZONE"
    MY_LAT = "MY_LAT"
    MY_LON = "MY_LON"
    MY_NAME = "MY_NAME"
    MY_POSTAL_CODE = "MY_POSTAL_CODE"
    MY_RIG = "MY_RIG"
    MY_SIG = "MY_SIG"
    MY_SIG_INFO = "MY_SIG_INFO"
    MY_SOTA_REF = "MY_SOTA_REF"
    MY_STATE = "MY_STATE"
    MY_STREET = "MY_STREET"
    MY_USACA_COUNTIES = "MY_USACA_COUNTIES"
    MY_VUCC_GRIDS = "MY_VUCC_GRIDS"
    OPERATOR = "OPERATOR"
    OWNER_CALLSIGN = "OWNER_CALLSIGN"
    STATION_CALLSIGN = "STATION_CALLSIGN"
    TX_PWR = "TX_PWR"

    # Contest
    CONTEST_ID = "CONTEST_ID"
    ARRL_SECT = "ARRL_SECT"
    CLASS = "CLASS"
    CHECK = "CHECK"
    PRECEDENCE = "PRECEDENCE"
    SRX = "SRX"
    SRX_STRING = "SRX_STRING"
    STX = "STX"
    STX_STRING = "STX_STRING"

    # Propagation
    A_INDEX = "A_INDEX"
    ANT_PATH = "ANT_PATH"
    FORCE_INIT = "FORCE_INIT"
    K_INDEX = "K_INDEX"
    MAX_BURSTS = "MAX_BURSTS"
    MS_SHOWER = "MS_SHOWER"
    NR_BURSTS = "NR_BURSTS"
    NR_PINGS = "NR_PINGS"
    PROP_MODE = "PROP_MODE"
    SAT_MODE = "SAT_MODE"
    SAT_NAME = "SAT_NAME"
    SFI = "SFI"

    # Awards and credit
    AWARD_SUBMITTED = "AWARD_SUBMITTED"
    AWARD_GRANTED = "AWARD_GRANTED"
    CREDIT_SUBMITTED = "CREDIT_SUBMITTED"
    CREDIT_GRANTED = "CREDIT_GRANTED"

    # Online log uploads
    CLUBLOG_QSO_UPLOAD_DATE = "CLUBLOG_QSO_UPLOAD_DATE"
    CLUBLOG_QSO_UPLOAD_STATUS = "CLUBLOG_QSO_UPLOAD_STATUS"
    HRDLOG_QSO_UPLOAD_DATE = "HRDLOG_QSO_UPLOAD_DATE"
    HRDLOG_QSO_UPLOAD_STATUS = "HRDLOG_QSO_UPLOAD_STATUS"
    QRZCOM_QSO_UPLOAD_DATE = "QRZCOM_QSO_UPLOAD_DATE"
    QRZCOM_QSO_UPLOAD_STATUS = "QRZCOM_QSO_UPLOAD_STATUS"

    # QSL confirmations
    QSL_SENT = "QSL_SENT"
    QSL_RCVD = "QSL_RCVD"
    QSLSDATE = "QSLSDATE"
    QSLRDATE = "QSLRDATE"
    QSL_SENT_VIA = "QSL_SENT_VIA"
    QSL_RCVD_VIA = "QSL_RCVD_VIA"
    QSLMSG = "QSLMSG"
    EQSL_QSL_SENT = "EQSL_QSL_SENT"
    EQSL_QSL_RCVD = "EQSL_QSL_RCVD"
    EQSL_QSLSDATE = "EQSL_QSLSDATE"
    EQSL_QSLRDATE = "EQSL_QSLRDATE"
    LOTW_QSL_SENT = "LOTW_QSL_SENT"
    LOTW_QSL_RCVD = "LOTW_QSL_RCVD"
    LOTW_QSLSDATE = "LOTW_QSLSDATE"
    LOTW_QSLRDATE = "LOTW_QSLRDATE"


class FieldMapping(NamedTuple):
    field: Field
    attr: str
    codec: ScalarCodec


Table = Tuple[FieldMapping, ...]

TOP_LEVEL: Table = (
    FieldMapping(Field.BAND, "band", scalars.STRING),
    FieldMapping(Field.BAND_RX, "band_rx", scalars.STRING),
    FieldMapping(Field.COMMENT, "comment", scalars.STRING),
    FieldMapping(Field.DISTANCE, "distance_km", scalars.UINT),
    FieldMapping(Field.FREQ, "freq", scalars.FREQ),
    FieldMapping(Field.FREQ_RX, "freq_rx", scalars.FREQ),
    FieldMapping(Field.MODE, "mode", scalars.STRING),
    FieldMapping(Field.NOTES, "notes", scalars.STRING),
    FieldMapping(Field.PUBLIC_KEY, "public_key", scalars.STRING),
    FieldMapping(Field.QSO_COMPLETE, "complete", scalars.STRING),
    FieldMapping(Field.QSO_RANDOM, "random", scalars.BOOL),
    FieldMapping(Field.RST_RCVD, "rst_received", scalars.STRING),
    FieldMapping(Field.RST_SENT, "rst_sent", scalars.STRING),
    FieldMapping(Field.SUBMODE, "submode", scalars.STRING),
    FieldMapping(Field.SWL, "swl", scalars.BOOL),
    FieldMapping(Field.AWARD_SUBMITTED, "award_submitted", scalars.AWARDS),
    FieldMapping(Field.AWARD_GRANTED, "award_granted", scalars.AWARDS),
    FieldMapping(Field.CREDIT_SUBMITTED, "credit_submitted", scalars.CREDITS),
    FieldMapping(Field.CREDIT_GRANTED, "credit_granted", scalars.CREDITS),
)

# (date field, time field, attribute)
TIMESTAMPS = (
    (Field.QSO_DATE, Field.TIME_ON, "time_on"),
    (Field.QSO_DATE_OFF, Field.TIME_OFF, "time_off"),
)

CONTACTED_STATION: Table = (
    FieldMapping(Field.ADDRESS, "address", scalars.STRING),
    FieldMapping(Field.AGE, "age", scalars.UINT),
    FieldMapping(Field.CALL, "station_call", scalars.STRING),
    FieldMapping(Field.CNTY, "county", scalars.STRING),
    FieldMapping(Field.CONT, "continent", scalars.STRING),
    FieldMapping(Field.CONTACTED_OP, "op_call", scalars.STRING),
    FieldMapping(Field.COUNTRY, "country", scalars.STRING),
    FieldMapping(Field.CQZ, "cq_zone", scalars.UINT),
    FieldMapping(Field.DARC_DOK, "darc_dok", scalars.STRING),
    FieldMapping(Field.DXCC, "dxcc", scalars.UINT),
    FieldMapping(Field.EMAIL, "email", scalars.STRING),
    FieldMapping(Field.EQ_CALL, "owner_call", scalars.STRING),
    FieldMapping(Field.FISTS, "fists", scalars.UINT),
    FieldMapping(Field.FISTS_CC, "fists_cc", scalars.UINT),
    FieldMapping(Field.GRIDSQUARE, "grid_square", scalars.STRING),
    FieldMapping(Field.IOTA, "iota", scalars.STRING),
    FieldMapping(Field.IOTA_ISLAND_ID, "iota_island_id", scalars.UINT),
    FieldMapping(Field.ITUZ, "itu_zone", scalars.UINT),
    FieldMapping(Field.LAT, "latitude", scalars.LAT),
    FieldMapping(Field.LON, "longitude", scalars.LON),
    FieldMapping(Field.NAME, "op_name", scalars.STRING),
    FieldMapping(Field.PFX, "pfx", scalars.STRING),
    FieldMapping(Field.QSL_VIA, "qsl_via", scalars.STRING),
    FieldMapping(Field.QTH, "city", scalars.STRING),
    FieldMapping(Field.REGION, "region", scalars.STRING),
    FieldMapping(Field.RIG, "rig", scalars.STRING),
    FieldMapping(Field.RX_PWR, "power", scalars.POWER),
    FieldMapping(Field.SIG, "sig", scalars.STRING),
    FieldMapping(Field.SIG_INFO, "sig_info", scalars.STRING),
    FieldMapping(Field.SILENT_KEY, "silent_key", scalars.BOOL),
    FieldMapping(Field.SKCC, "skcc", scalars.STRING),
    FieldMapping(Field.SOTA_REF, "sota_ref", scalars.STRING),
    FieldMapping(Field.STATE, "state", scalars.STRING),
    FieldMapping(Field.TEN_TEN, "ten_ten", scalars.UINT),
    FieldMapping(Field.UKSMG, "uksmg", scalars.UINT),
    FieldMapping(Field.USACA_COUNTIES, "usaca_counties", scalars.STRING),
    FieldMapping(Field.VUCC_GRIDS, "vucc_grids", scalars.STRING),
    FieldMapping(Field.WEB, "web", scalars.STRING),
)

LOGGING_STATION: Table = (
    FieldMapping(Field.ANT_AZ, "antenna_azimuth", scalars.INT),
    FieldMapping(Field.ANT_EL, "antenna_elevation", scalars.INT),
    FieldMapping(Field.MY_ANTENNA, "antenna", scalars.STRING),
    FieldMapping(Field.MY_CITY, "city", scalars.STRING),
    FieldMapping(Field.MY_CNTY, "county", scalars.STRING),
    FieldMapping(Field.MY_COUNTRY, "country", scalars.STRING),
    FieldMapping(Field.MY_CQ_ZONE, "cq_zone", scalars.UINT),
    FieldMapping(Field.MY_DXCC, "dxcc", scalars.UINT),
    FieldMapping(Field.MY_FISTS, "fists", scalars.UINT),
    FieldMapping(Field.MY_GRIDSQUARE, "grid_square", scalars.STRING),
    FieldMapping(Field.MY_IOTA, "iota", scalars.STRING),
    FieldMapping(Field.MY_IOTA_ISLAND_ID, "iota_island_id", scalars.UINT),
    FieldMapping(Field.MY_ITU_ZONE, "itu_zone", scalars.UINT),
    FieldMapping(Field.MY_LAT, "latitude", scalars.LAT),
    FieldMapping(Field.MY_LON, "longitude", scalars.LON),
    FieldMapping(Field.MY_NAME, "op_name", scalars.STRING),
    FieldMapping(Field.MY_POSTAL_CODE, "postal_code", scalars.STRING),
    FieldMapping(Field.MY_RIG, "rig", scalars.STRING),
    FieldMapping(Field.MY_SIG, "sig", scalars.STRING),
    FieldMapping(Field.MY_SIG_INFO, "sig_info", scalars.STRING),
    FieldMapping(Field.MY_SOTA_REF, "sota_ref", scalars.STRING),
    FieldMapping(Field.MY_STATE, "state", scalars.STRING),
    FieldMapping(Field.MY_STREET, "street", scalars.STRING),
    FieldMapping(Field.MY_USACA_COUNTIES, "usaca_counties", scalars.STRING),
    FieldMapping(Field.MY_VUCC_GRIDS, "vucc_grids", scalars.STRING),
    FieldMapping(Field.OPERATOR, "op_call", scalars.STRING),
    FieldMapping(Field.OWNER_CALLSIGN, "owner_call", scalars.STRING),
    FieldMapping(Field.STATION_CALLSIGN, "station_call", scalars.STRING),
    FieldMapping(Field.TX_PWR, "power", scalars.POWER),
)

# CONTEST_ID and the serial numbers are handled by the decoder/encoder
CONTEST: Table = (
    FieldMapping(Field.ARRL_SECT, "arrl_section", scalars.STRING),
    FieldMapping(Field.CLASS, "station_class", scalars.STRING),
    FieldMapping(Field.CHECK, "check", scalars.STRING),
    FieldMapping(Field.PRECEDENCE, "precedence", scalars.STRING),
)

# (numeric field, string field, attribute)
CONTEST_SERIALS = (
    (Field.SRX, Field.SRX_STRING, "serial_received"),
    (Field.STX, Field.STX_STRING, "serial_sent"),
)

PROPAGATION: Table = (
    FieldMapping(Field.A_INDEX, "a_index", scalars.UINT),
    FieldMapping(Field.ANT_PATH, "ant_path", scalars.STRING),
    FieldMapping(Field.FORCE_INIT, "force_init", scalars.BOOL),
    FieldMapping(Field.K_INDEX, "k_index", scalars.UINT),
    FieldMapping(Field.MAX_BURSTS, "max_bursts", scalars.UINT),
    FieldMapping(Field.MS_SHOWER, "meteor_shower_name", scalars.STRING),
    FieldMapping(Field.NR_BURSTS, "nr_bursts", scalars.UINT),
    FieldMapping(Field.NR_PINGS, "nr_pings", scalars.UINT),
    FieldMapping(Field.PROP_MODE, "propagation_mode", scalars.STRING),
    FieldMapping(Field.SAT_MODE, "sat_mode", scalars.STRING),
    FieldMapping(Field.SAT_NAME, "sat_name", scalars.STRING),
    FieldMapping(Field.SFI, "solar_flux_index", scalars.UINT),
)


class UploadFields(NamedTuple):
    attr: str
    status: Field
    date: Field


UPLOADS = (
    UploadFields("qrzcom", Field.QRZCOM_QSO_UPLOAD_STATUS, Field.QRZCOM_QSO_UPLOAD_DATE),
    UploadFields("hrdlog", Field.HRDLOG_QSO_UPLOAD_STATUS, Field.HRDLOG_QSO_UPLOAD_DATE),
    UploadFields("clublog", Field.CLUBLOG_QSO_UPLOAD_STATUS, Field.CLUBLOG_QSO_UPLOAD_DATE),
)


class QslFields(NamedTuple):
    sent: Field
    received: Field
    sent_date: Field
    received_date: Field


CARD_QSL = QslFields(Field.QSL_SENT, Field.QSL_RCVD, Field.QSLSDATE, Field.QSLRDATE)

# Card-only extras
CARD_QSL_EXTRA: Table = (
    FieldMapping(Field.QSL_SENT_VIA, "sent_via", scalars.STRING),
    FieldMapping(Field.QSL_RCVD_VIA, "received_via", scalars.STRING),
    FieldMapping(Field.QSLMSG, "received_message", scalars.STRING),
)

# Both services feed Qso.eqsl, in this order
ELECTRONIC_QSL = (
    QslFields(Field.EQSL_QSL_SENT, Field.EQSL_QSL_RCVD, Field.EQSL_QSLSDATE, Field.EQSL_QSLRDATE),
    QslFields(Field.LOTW_QSL_SENT, Field.LOTW_QSL_RCVD, Field.LOTW_QSLSDATE, Field.LOTW_QSLRDATE),
)

# Statuses that count as "no confirmation" when deciding whether a Qsl exists
NO_QSL_STATUSES = ("", "N")
