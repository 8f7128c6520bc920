"""Search API endpoints."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from starlette.concurrency import run_in_threadpool

from search_gateway.api.dependencies import get_app_settings, get_search_backend
from search_gateway.config.logging import get_logger
from search_gateway.config.settings import AppSettings
from search_gateway.search.backend import SearchBackend
from search_gateway.search.schemas import ApiResponse, SearchRequest, parse_query_params

LOGGER = get_logger(__name__)

router = APIRouter(tags=["search"])


def _error(status_code: int, message: str) -> JSONResponse:
    payload = ApiResponse(code=status_code, message=message)
    return JSONResponse(status_code=status_code, content=payload.model_dump(exclude_none=True))


def _validation_message(exc: ValidationError) -> str:
    first = exc.errors()[0]
    location = ".".join(str(part) for part in first.get("loc", ()))
    message = first.get("msg", "invalid request")
    return f"{location}: {message}" if location else message


async def read_search_request(request: Request) -> SearchRequest:
    """Build a :class:`SearchRequest` from the query string (GET) or JSON body (POST)."""
    if request.method == "GET":
        data: Any = parse_query_params(request.query_params)
    else:
        data = await request.json()
        if not isinstance(data, dict):
            raise ValueError("request body must be a JSON object")
    return SearchRequest.model_validate(data)


@router.api_route("/search", methods=["GET", "POST"], response_model=ApiResponse)
async def search(
    request: Request,
    settings: AppSettings = Depends(get_app_settings),
    backend: SearchBackend | None = Depends(get_search_backend),
) -> Any:
    """Search channels and plugins; GET takes query parameters, POST a JSON body."""
    try:
        payload = await read_search_request(request)
    except ValidationError as exc:
        return _error(400, _validation_message(exc))
    except ValueError as exc:
        return _error(400, f"invalid request: {exc}")

    if backend is None:
        LOGGER.error("Search requested without a search backend")
        return _error(503, "search backend unavailable")

    payload = payload.normalized(settings.default_channels)
    LOGGER.info(
        "Dispatching search",
        extra={
            "keyword": payload.keyword,
            "method": request.method,
            "source_type": payload.source_type,
            "channels": len(payload.channels),
        },
    )
    result = await run_in_threadpool(backend.search, payload)
    return ApiResponse(code=0, message="success", data=result)
