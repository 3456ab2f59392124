from enum import Enum


class UploadStatus(str, Enum):
    UNKNOWN = "UNKNOWN"
    UPLOAD_COMPLETE = "UPLOAD_COMPLETE"
    DO_NOT_UPLOAD = "DO_NOT_UPLOAD"
    MODIFIED_AFTER_UPLOAD = "MODIFIED_AFTER_UPLOAD"


# Single-letter codes used by the *_QSO_UPLOAD_STATUS fields
CODES = {
    UploadStatus.UPLOAD_COMPLETE: "Y",
    UploadStatus.DO_NOT_UPLOAD: "N",
    UploadStatus.MODIFIED_AFTER_UPLOAD: "M",
}

SYNONYMS = {code: status for status, code in CODES.items()}


def from_code(code: str) -> UploadStatus:
    return SYNONYMS.get(code, UploadStatus.UNKNOWN)


def to_code(status: UploadStatus) -> str:
    return CODES.get(status, "")
