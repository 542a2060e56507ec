"""HTTP endpoint that turns a user idea into a structured prompt.

Mounted into the Reflex backend through ``rx.App(api_transformer=api)`` but
usable on its own, which is how the tests drive it.
"""

import json
import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, Response

from .enhancer import enhance_prompt
from .models import GeneratePromptRequest, GeneratePromptResponse

logger = logging.getLogger(__name__)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "authorization, x-client-info, apikey, content-type",
}

api = FastAPI(title="PromptForge API")


def _json(payload: dict, status_code: int) -> JSONResponse:
    # JSONResponse sets Content-Type: application/json itself.
    return JSONResponse(payload, status_code=status_code, headers=CORS_HEADERS)


def _is_missing(value) -> bool:
    # null, false, "" and 0 count as missing. Empty lists or objects are invalid, not missing.
    return value is None or value is False or value == "" or value == 0


@api.api_route("/generate-prompt", methods=["POST", "OPTIONS"])
async def generate_prompt(request: Request):
    # Handle CORS preflight requests
    if request.method == "OPTIONS":
        return Response(status_code=204, headers=CORS_HEADERS)

    try:
        payload = json.loads(await request.body())
        if payload is None:
            raise ValueError("Request body is null")

        # Arrays, strings and numbers carry no userIdea field
        fields = payload if isinstance(payload, dict) else {}
        if _is_missing(fields.get("userIdea")):
            return _json({"error": "User idea is required"}, 400)

        # Truthy non-string values fail strict validation here
        body = GeneratePromptRequest.model_validate(fields)
        if not body.userIdea.strip():
            return _json({"error": "User idea is required"}, 400)

        generated = GeneratePromptResponse(generatedPrompt=enhance_prompt(body.userIdea))
        return _json(generated.model_dump(), 200)
    except Exception:
        logger.exception("Error generating prompt")
        return _json({"error": "Failed to generate prompt"}, 500)
