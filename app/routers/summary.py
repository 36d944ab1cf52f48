"""Health summary endpoint.

Accepts a patient's records, allergies and profile, turns them into a prompt
and returns the generated summary. Every response, errors included, is JSON
shaped as ``{"summary": ...}`` or ``{"error": ...}`` and carries the CORS
headers.
"""

import logging
from collections.abc import Callable

from fastapi import APIRouter, Depends, Request, Response
from fastapi.responses import JSONResponse

from app.config import CORS_ALLOW_ORIGIN, get_platform_credentials
from app.models.summary import ErrorResponse, SummaryRequest, SummaryResponse
from app.services.auth import VerifierFactory, get_token_verifier_factory, verify_token
from app.services.llm import LLMClient, get_llm_client_factory
from app.services.prompt_builder import MAX_PROMPT_RECORDS, build_summary_prompt

logger = logging.getLogger(__name__)

router = APIRouter(tags=["summary"])

CORS_HEADERS = {
    "Access-Control-Allow-Origin": CORS_ALLOW_ORIGIN,
    "Access-Control-Allow-Methods": "POST, OPTIONS",
    "Access-Control-Allow-Headers": "authorization, content-type",
}


def _json(status_code: int, body: SummaryResponse | ErrorResponse) -> JSONResponse:
    return JSONResponse(
        content=body.model_dump(),
        status_code=status_code,
        headers=CORS_HEADERS,
    )


def _error(status_code: int, message: str) -> JSONResponse:
    return _json(status_code, ErrorResponse(error=message))


@router.api_route("/{path:path}", methods=["OPTIONS", "POST"])
async def health_summary(
    request: Request,
    verifier_factory: VerifierFactory = Depends(get_token_verifier_factory),
    llm_factory: Callable[[], LLMClient] = Depends(get_llm_client_factory),
):
    """Generate an AI health summary from a patient's medical records."""
    if request.method == "OPTIONS":
        return Response(status_code=204, headers=CORS_HEADERS)

    try:
        credentials = get_platform_credentials()
        if credentials is None:
            logger.error("PLATFORM_PROJECT_ID or PLATFORM_SECRET_KEY not set")
            return _error(500, "Missing config")

        verifier = verifier_factory(credentials)
        if not await verify_token(verifier, request.headers.get("Authorization")):
            return _error(401, "Unauthorized")

        body = await request.json()
        if not isinstance(body, dict):
            raise ValueError("Request body must be a JSON object")

        if not body.get("records"):
            return _error(400, "No records provided")

        payload = SummaryRequest.model_validate(body)
        prompt = build_summary_prompt(payload)
        logger.info(
            "Generating summary for %d records (%d in prompt)",
            len(payload.records), min(len(payload.records), MAX_PROMPT_RECORDS),
        )

        llm = llm_factory()
        result = await llm.generate_text(prompt, llm.summary_model())
        return _json(200, SummaryResponse(summary=result.text))
    except Exception:
        logger.exception("AI summary generation failed")
        return _error(500, "Failed to generate summary")
