"""FastAPI application exposing the ClearFind scan endpoint."""

from __future__ import annotations

import logging
from typing import Any, Dict

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from clearfind import ClearFindError, InvalidURLError, scan_url
from clearfind.config import load_scan_config
from clearfind.models import ScanRequest
from clearfind.tracing import log_event

load_dotenv()

_LOGGER = logging.getLogger("clearfind.api")

INVALID_URL_MESSAGE = "Provide a valid http(s) URL"
SCAN_FAILED_MESSAGE = "Scan failed. Try a different URL."

app = FastAPI(title="ClearFind")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(RequestValidationError)
async def _invalid_request(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(status_code=400, content={"error": INVALID_URL_MESSAGE})


@app.get("/api/health")
def health() -> Dict[str, str]:
    return {"status": "ok"}


@app.post("/api/scan")
def scan(payload: ScanRequest) -> JSONResponse:
    """Scan the requested page and return its findings.

    Pages that are not readable HTML still produce a 200 response carrying a
    single ``seo.html`` issue; only fetch failures map to a 500.
    """

    try:
        result = scan_url(payload.url, config=load_scan_config())
    except InvalidURLError:
        return JSONResponse(status_code=400, content={"error": INVALID_URL_MESSAGE})
    except ClearFindError as exc:
        log_event(_LOGGER, logging.ERROR, "api.scan.error", url=payload.url, error=str(exc))
        return JSONResponse(status_code=500, content={"error": SCAN_FAILED_MESSAGE})
    except Exception as exc:
        log_event(
            _LOGGER,
            logging.ERROR,
            "api.scan.error",
            exc_info=True,
            url=payload.url,
            error=repr(exc),
        )
        return JSONResponse(status_code=500, content={"error": SCAN_FAILED_MESSAGE})

    body: Dict[str, Any] = result.to_dict()
    return JSONResponse(content=body)
