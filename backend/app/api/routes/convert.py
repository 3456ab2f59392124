"""Conversion routes between ADI text and the JSON document form."""

from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import PlainTextResponse, Response

from adif_text.exceptions import AdifError
from app.core.config import get_settings
from codec.document import adif_to_document, document_to_adif, make_header
from models.wire import dump_json, parse_json

router = APIRouter(prefix="/convert", tags=["convert"])

JSON_MEDIA_TYPE = "application/json"


@router.post("/adif-to-json", summary="Convert ADI text to a JSON document")
async def adif_to_json(request: Request) -> Response:
    """Read raw ADI text from the request body and return the JSON document.

    Default-valued fields are left out of the response.
    """
    settings = get_settings()
    raw = await request.body()
    text = raw.decode("utf-8", errors="replace")
    header = make_header(
        adif_version=settings.adif_version,
        program_id=settings.program_id,
        program_version=settings.program_version,
    )
    try:
        doc = adif_to_document(text, workers=settings.workers, header=header)
    except AdifError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    return Response(content=dump_json(doc), media_type=JSON_MEDIA_TYPE)


@router.post(
    "/json-to-adif",
    response_class=PlainTextResponse,
    summary="Convert a JSON document to ADI text",
)
async def json_to_adif(request: Request) -> PlainTextResponse:
    raw = await request.body()
    try:
        doc = parse_json(raw)
        text = document_to_adif(doc)
    except AdifError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    return PlainTextResponse(text)
