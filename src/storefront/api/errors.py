"""Exception handlers for the storefront API."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from protean.exceptions import ObjectNotFoundError
from protean.integrations.fastapi import register_exception_handlers as register_protean_handlers

from storefront.exceptions import ConstraintViolation


async def constraint_violation_handler(request: Request, exc: ConstraintViolation) -> JSONResponse:
    return JSONResponse(status_code=409, content={"error": exc.messages, "rule": exc.rule})


async def not_found_handler(request: Request, exc: ObjectNotFoundError) -> JSONResponse:
    return JSONResponse(status_code=404, content={"error": str(exc)})


def register_exception_handlers(app: FastAPI) -> None:
    """Protean's validation handlers, plus 404 for missing records and 409 for constraint violations."""
    register_protean_handlers(app)
    app.add_exception_handler(ObjectNotFoundError, not_found_handler)
    app.add_exception_handler(ConstraintViolation, constraint_violation_handler)
