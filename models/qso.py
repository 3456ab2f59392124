"""Structured contact records exchanged with machine clients.

Every nested entity typed ``X | None`` is absent when ``None``; a present
instance whose fields are all defaults is still present. Timestamps are UTC.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Dict, List, Optional

from .upload_status import UploadStatus

# "No value" sentinel for timestamps; the encoder treats it the same as None.
EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


@dataclass
class Credit:
    credit: str = ""
    qsl_medium: str = ""


@dataclass
class Station:
    """One party to a contact. The contacted and logging stations share this shape."""

    op_call: str = ""
    op_name: str = ""
    grid_square: str = ""
    latitude: float = 0.0
    longitude: float = 0.0
    power: float = 0.0
    rig: str = ""
    antenna: str = ""
    antenna_azimuth: int = 0
    antenna_elevation: int = 0
    owner_call: str = ""
    station_call: str = ""
    age: int = 0
    silent_key: bool = False
    qsl_via: str = ""
    address: str = ""
    street: str = ""
    city: str = ""
    postal_code: str = ""
    county: str = ""
    state: str = ""
    country: str = ""
    dxcc: int = 0
    continent: str = ""
    email: str = ""
    web: str = ""
    cq_zone: int = 0
    itu_zone: int = 0
    darc_dok: str = ""
    fists: int = 0
    fists_cc: int = 0
    iota: str = ""
    iota_island_id: int = 0
    pfx: str = ""
    region: str = ""
    skcc: str = ""
    sig: str = ""
    sig_info: str = ""
    sota_ref: str = ""
    ten_ten: int = 0
    usaca_counties: str = ""
    uksmg: int = 0
    vucc_grids: str = ""


@dataclass
class ContestData:
    contest_id: str = ""
    serial_sent: str = ""
    serial_received: str = ""
    arrl_section: str = ""
    station_class: str = ""
    check: str = ""
    precedence: str = ""


@dataclass
class Propagation:
    propagation_mode: str = ""
    a_index: int = 0
    k_index: int = 0
    solar_flux_index: int = 0
    ant_path: str = ""
    force_init: bool = False
    max_bursts: int = 0
    meteor_shower_name: str = ""
    nr_bursts: int = 0
    nr_pings: int = 0
    sat_mode: str = ""
    sat_name: str = ""


@dataclass
class Upload:
    upload_status: UploadStatus = UploadStatus.UNKNOWN
    upload_date: Optional[datetime] = None


@dataclass
class Qsl:
    # Status tokens are kept raw (Y, N, R, Q, I, ...)
    sent_status: str = ""
    sent_date: Optional[datetime] = None
    sent_via: str = ""
    received_status: str = ""
    received_date: Optional[datetime] = None
    received_via: str = ""
    received_message: str = ""


@dataclass
class Qso:
    logging_station: Station | None = None
    contacted_station: Station | None = None
    propagation: Propagation | None = None
    band: str = ""
    band_rx: str = ""
    freq: float = 0.0
    freq_rx: float = 0.0
    mode: str = ""
    submode: str = ""
    distance_km: int = 0
    time_on: Optional[datetime] = None
    time_off: Optional[datetime] = None
    random: bool = False
    rst_received: str = ""
    rst_sent: str = ""
    swl: bool = False
    complete: str = ""
    comment: str = ""
    notes: str = ""
    contest: ContestData | None = None
    award_submitted: List[str] = field(default_factory=list)
    award_granted: List[str] = field(default_factory=list)
    credit_submitted: List[Credit] = field(default_factory=list)
    credit_granted: List[Credit] = field(default_factory=list)
    public_key: str = ""
    clublog: Upload | None = None
    hrdlog: Upload | None = None
    qrzcom: Upload | None = None
    # Shared by eQSL.cc and LoTW confirmations
    eqsl: Qsl | None = None
    card: Qsl | None = None
    app_defined: Optional[Dict[str, str]] = None


@dataclass
class Header:
    adif_version: str = ""
    created_timestamp: Optional[datetime] = None
    program_id: str = ""
    program_version: str = ""


@dataclass
class Adif:
    header: Header | None = None
    qsos: List[Qso] = field(default_factory=list)
