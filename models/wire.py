"""JSON wire form of the Adif document.

Field names are camelCase on the wire and snake_case in Python. Upload
statuses travel by enum name (``UPLOAD_COMPLETE``), timestamps as ISO 8601.
"""

from __future__ import annotations

from datetime import datetime
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic.alias_generators import to_camel

from adif_text.exceptions import ConversionError

from . import qso as domain
from .upload_status import UploadStatus


class WireModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True
    )


class CreditModel(WireModel):
    credit: str = ""
    qsl_medium: str = ""


class StationModel(WireModel):
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
    age: int = Field(default=0, ge=0)
    silent_key: bool = False
    qsl_via: str = ""
    address: str = ""
    street: str = ""
    city: str = ""
    postal_code: str = ""
    county: str = ""
    state: str = ""
    country: str = ""
    dxcc: int = Field(default=0, ge=0)
    continent: str = ""
    email: str = ""
    web: str = ""
    cq_zone: int = Field(default=0, ge=0)
    itu_zone: int = Field(default=0, ge=0)
    darc_dok: str = ""
    fists: int = Field(default=0, ge=0)
    fists_cc: int = Field(default=0, ge=0)
    iota: str = ""
    iota_island_id: int = Field(default=0, ge=0)
    pfx: str = ""
    region: str = ""
    skcc: str = ""
    sig: str = ""
    sig_info: str = ""
    sota_ref: str = ""
    ten_ten: int = Field(default=0, ge=0)
    usaca_counties: str = ""
    uksmg: int = Field(default=0, ge=0)
    vucc_grids: str = ""


class ContestDataModel(WireModel):
    contest_id: str = ""
    serial_sent: str = ""
    serial_received: str = ""
    arrl_section: str = ""
    station_class: str = ""
    check: str = ""
    precedence: str = ""


class PropagationModel(WireModel):
    propagation_mode: str = ""
    a_index: int = Field(default=0, ge=0)
    k_index: int = Field(default=0, ge=0)
    solar_flux_index: int = Field(default=0, ge=0)
    ant_path: str = ""
    force_init: bool = False
    max_bursts: int = Field(default=0, ge=0)
    meteor_shower_name: str = ""
    nr_bursts: int = Field(default=0, ge=0)
    nr_pings: int = Field(default=0, ge=0)
    sat_mode: str = ""
    sat_name: str = ""


class UploadModel(WireModel):
    upload_status: UploadStatus = UploadStatus.UNKNOWN
    upload_date: Optional[datetime] = None


class QslModel(WireModel):
    sent_status: str = ""
    sent_date: Optional[datetime] = None
    sent_via: str = ""
    received_status: str = ""
    received_date: Optional[datetime] = None
    received_via: str = ""
    received_message: str = ""


class QsoModel(WireModel):
    logging_station: Optional[StationModel] = None
    contacted_station: Optional[StationModel] = None
    propagation: Optional[PropagationModel] = None
    band: str = ""
    band_rx: str = ""
    freq: float = 0.0
    freq_rx: float = 0.0
    mode: str = ""
    submode: str = ""
    distance_km: int = Field(default=0, ge=0)
    time_on: Optional[datetime] = None
    time_off: Optional[datetime] = None
    random: bool = False
    rst_received: str = ""
    rst_sent: str = ""
    swl: bool = False
    complete: str = ""
    comment: str = ""
    notes: str = ""
    contest: Optional[ContestDataModel] = None
    award_submitted: List[str] = Field(default_factory=list)
    award_granted: List[str] = Field(default_factory=list)
    credit_submitted: List[CreditModel] = Field(default_factory=list)
    credit_granted: List[CreditModel] = Field(default_factory=list)
    public_key: str = ""
    clublog: Optional[UploadModel] = None
    hrdlog: Optional[UploadModel] = None
    qrzcom: Optional[UploadModel] = None
    eqsl: Optional[QslModel] = None
    card: Optional[QslModel] = None
    app_defined: Optional[Dict[str, str]] = None


class HeaderModel(WireModel):
    adif_version: str = ""
    created_timestamp: Optional[datetime] = None
    program_id: str = ""
    program_version: str = ""


class AdifModel(WireModel):
    header: Optional[HeaderModel] = None
    qsos: List[QsoModel] = Field(default_factory=list)

    @classmethod
    def from_domain(cls, doc: domain.Adif) -> "AdifModel":
        return cls.model_validate(doc)

    def to_domain(self) -> domain.Adif:
        return domain.Adif(
            header=domain.Header(**self.header.model_dump()) if self.header else None,
            qsos=[_qso_to_domain(q) for q in self.qsos],
        )

    def to_json(self, indent: Optional[int] = None) -> str:
        # Like protobuf JSON, default-valued fields are left out
        return self.model_dump_json(by_alias=True, exclude_defaults=True, indent=indent)


def _optional(model: Optional[BaseModel], cls):
    return cls(**model.model_dump()) if model is not None else None


def _qso_to_domain(m: QsoModel) -> domain.Qso:
    data = m.model_dump(
        exclude={
            "logging_station",
            "contacted_station",
            "propagation",
            "contest",
            "credit_submitted",
            "credit_granted",
            "clublog",
            "hrdlog",
            "qrzcom",
            "eqsl",
            "card",
        }
    )
    return domain.Qso(
        logging_station=_optional(m.logging_station, domain.Station),
        contacted_station=_optional(m.contacted_station, domain.Station),
        propagation=_optional(m.propagation, domain.Propagation),
        contest=_optional(m.contest, domain.ContestData),
        credit_submitted=[domain.Credit(**c.model_dump()) for c in m.credit_submitted],
        credit_granted=[domain.Credit(**c.model_dump()) for c in m.credit_granted],
        clublog=_optional(m.clublog, domain.Upload),
        hrdlog=_optional(m.hrdlog, domain.Upload),
        qrzcom=_optional(m.qrzcom, domain.Upload),
        eqsl=_optional(m.eqsl, domain.Qsl),
        card=_optional(m.card, domain.Qsl),
        **data,
    )


def parse_json(text: str | bytes) -> domain.Adif:
    """Read a JSON document; raises ConversionError when it does not validate."""
    try:
        return AdifModel.model_validate_json(text).to_domain()
    except ValidationError as e:
        raise ConversionError(f"Invalid ADIF JSON document: {e}") from e


def dump_json(doc: domain.Adif, indent: Optional[int] = None) -> str:
    return AdifModel.from_domain(doc).to_json(indent=indent)
