"""
Response envelope returned for every contact-form invocation.

ResponseEnvelope — {status_code, success, error_code, message}

One envelope per outcome. The Lambda entry point serialises it to the API
Gateway proxy shape via to_lambda_response(); the FastAPI surface uses
body() directly.
"""

from __future__ import annotations

import json
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict


class ResponseEnvelope(BaseModel):
    """Fixed response shape: HTTP status plus the JSON body fields."""

    model_config = ConfigDict(frozen=True)

    status_code: int
    success: bool
    message: str = ""
    error_code: Optional[str] = None
    # The CORS preflight answer is a bare 200 with no body
    has_body: bool = True

    def body(self) -> Optional[dict[str, Any]]:
        if not self.has_body:
            return None
        payload: dict[str, Any] = {"success": self.success}
        if self.error_code is not None:
            payload["errorCode"] = self.error_code
        payload["message"] = self.message
        return payload

    def to_lambda_response(self, allow_origin: str = "*") -> dict[str, Any]:
        response: dict[str, Any] = {
            "statusCode": self.status_code,
            "headers": {
                "Content-Type": "application/json",
                "Access-Control-Allow-Origin": allow_origin,
                "Access-Control-Allow-Headers": "Content-Type",
                "Access-Control-Allow-Methods": "OPTIONS,POST",
            },
        }
        body = self.body()
        if body is not None:
            response["body"] = json.dumps(body)
        return response


PREFLIGHT_OK = ResponseEnvelope(status_code=200, success=True, has_body=False)

FORM_SUBMITTED_SUCCESSFULLY = ResponseEnvelope(
    status_code=200, success=True, message="Form submitted successfully"
)
