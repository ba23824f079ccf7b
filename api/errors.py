"""
Mapping of domain errors to HTTP responses.

- EntityNotFoundError    -> 404 {"message": "<Entity> not found"}
- ValidationFailure      -> 400 {"message": "Invalid <entity> data", "errors": [...]}
- RequestValidationError -> 400, same shape, entity inferred from the path
- anything else          -> 500 {"message": "Server error"}, details only in logs
"""

import logging
from typing import Any, Dict, List

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from domain.errors import EntityNotFoundError, ValidationFailure

logger = logging.getLogger(__name__)

# First path segment under /api -> entity name used in error messages
_PATH_ENTITIES = {
    "users": "user",
    "exercises": "exercise",
    "routines": "routine",
    "workouts": "workout",
}


def _entity_for_path(path: str) -> str:
    """Guess which entity a request was about from its URL path."""
    segments = [segment for segment in path.split("/") if segment]
    if "exercise" in segments[2:]:
        return "exercise"
    if len(segments) >= 2 and segments[0] == "api":
        return _PATH_ENTITIES.get(segments[1], "request")
    return "request"


def _format_errors(errors: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """Keep the JSON-safe part of pydantic error dicts."""
    return [
        {
            "loc": list(error.get("loc", ())),
            "msg": error.get("msg", ""),
            "type": error.get("type", ""),
        }
        for error in errors
    ]


async def entity_not_found_handler(request: Request, exc: EntityNotFoundError) -> JSONResponse:
    logger.info("%s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=404, content={"message": exc.message})


async def validation_failure_handler(request: Request, exc: ValidationFailure) -> JSONResponse:
    logger.info("%s %s: %s", request.method, request.url.path, exc.message)
    return JSONResponse(
        status_code=400,
        content={"message": exc.message, "errors": _format_errors(exc.errors)},
    )


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    entity = _entity_for_path(request.url.path)
    errors = _format_errors(exc.errors())
    logger.info(
        "%s %s: rejected %s payload (%d errors)",
        request.method,
        request.url.path,
        entity,
        len(errors),
    )
    return JSONResponse(
        status_code=400,
        content={"message": f"Invalid {entity} data", "errors": errors},
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"message": "Server error"})


def register_exception_handlers(app: FastAPI) -> None:
    """Install the domain error handlers on an application."""
    app.add_exception_handler(EntityNotFoundError, entity_not_found_handler)
    app.add_exception_handler(ValidationFailure, validation_failure_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
