"""
Contact-form endpoint.

POST    /contact — validate, verify the CAPTCHA, publish to the topic
OPTIONS /contact — CORS preflight, bare 200

The raw body is handed to ContactService untouched so that malformed JSON
gets the same JSON_PARSE_ERROR envelope as on Lambda, instead of FastAPI's
own 422.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request, Response
from fastapi.responses import JSONResponse

from dependencies import get_contact_service
from services.contact_service import ContactService

router = APIRouter(tags=["contact"])


@router.api_route("/contact", methods=["POST", "OPTIONS"])
async def submit_contact_form(
    request: Request,
    service: ContactService = Depends(get_contact_service),
) -> Response:
    envelope = await service.handle(request.method, await request.body())
    body = envelope.body()
    if body is None:
        return Response(status_code=envelope.status_code)
    return JSONResponse(status_code=envelope.status_code, content=body)
