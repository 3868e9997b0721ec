"""
HTTP API adapter for the satire service.

Architectural role:
- Expose the single generation operation over HTTP.
- Decode the request body leniently and delegate everything else to
  `satire_api.core.engine.RequestOrchestrator.handle`.
- Shape the orchestrator's status and payload into a JSON response.

Endpoint responsibilities:
- `POST /api/generate`: generate `{satire, type}` (plus `error` on degraded paths).
- Any other method on `/api/generate`: HTTP 405 `{"error": "Only POST"}`.
- `GET /health`: liveness plus whether upstream generation is configured.

Input decoding behavior:
- Undecodable or non-object JSON bodies are treated as `{}` and therefore
  produce HTTP 400 (`word is required`).

Error handling strategy:
- The orchestrator never raises for reachable failures; this module adds no
  extra wrapping.

Side effects:
- Loads environment variables at import time via `load_dotenv()`.
- Configures root logging from `SATIRE_LOG_LEVEL`.
"""

from dotenv import load_dotenv

load_dotenv()

import logging
import os
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from satire_api.core.engine import RequestOrchestrator


def resolve_log_level(name) -> str:
    """Return `name` as an upper-case level name, or `"INFO"` when it is not one."""
    level = str(name or "").strip().upper()
    if isinstance(logging.getLevelName(level), int):
        return level
    return "INFO"


logging.basicConfig(level=resolve_log_level(os.getenv("SATIRE_LOG_LEVEL", "INFO")))
logger = logging.getLogger(__name__)

GENERATE_PATH = "/api/generate"

app = FastAPI(title="satire-api")
app.state.orchestrator = RequestOrchestrator()


# ============================================================
# Response Schema
# ============================================================

class SatireResponse(BaseModel):
    """Successful or degraded generation payload."""
    satire: str
    type: str
    error: Optional[str] = None


class ErrorResponse(BaseModel):
    """Client-error payload (400/405)."""
    error: str


def render(status_code: int, payload: dict) -> JSONResponse:
    """Validate the payload against the schema for its status and serialize it."""
    if status_code == 200:
        body = SatireResponse(**payload).model_dump(exclude_none=True)
    else:
        body = ErrorResponse(**payload).model_dump()
    return JSONResponse(status_code=status_code, content=body)


async def read_fields(request: Request) -> dict:
    """Decode the JSON body; anything other than a JSON object becomes `{}`."""
    try:
        body = await request.json()
    except ValueError:
        logger.debug("Request body is not valid JSON")
        return {}
    return body if isinstance(body, dict) else {}


# ============================================================
# Generation
# ============================================================

@app.post(GENERATE_PATH)
async def generate(request: Request):
    fields = await read_fields(request)
    result = await request.app.state.orchestrator.handle("POST", fields)
    return render(result.status_code, result.payload)


@app.api_route(GENERATE_PATH, methods=["GET", "HEAD", "OPTIONS", "PUT", "PATCH", "DELETE"])
async def generate_wrong_method(request: Request):
    result = await request.app.state.orchestrator.handle(request.method, None)
    return render(result.status_code, result.payload)


# ============================================================
# Health
# ============================================================

@app.get("/health")
def health(request: Request):
    config = request.app.state.orchestrator.config
    return {
        "status": "ok",
        "provider": config.provider,
        "generation_enabled": config.generation_enabled,
    }
