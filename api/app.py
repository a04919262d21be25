"""
Accounts HTTP endpoint.

Serves the full account list under a single path prefix:
- GET returns every account ordered by name
- POST replaces every account with the submitted JSON array
- any other method is rejected with 405

Without a database connection string every request under the prefix gets
500, whatever its method or body.

Requests outside the prefix are handed to a fallback ASGI app. Each handled
request opens its own database connection and closes it before the response
is returned. Errors never escape a request; they become JSON bodies with an
``error`` field, plus ``details`` when the database supplied a message.
"""

from typing import Any, Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool
from starlette.types import ASGIApp

from errors import (
    BadRequestShape,
    ConfigMissing,
    DatabaseConnectionError,
    MethodNotAllowed,
    RosterError,
    TransactionError,
)
from logger import get_logger
from services.base import Services

logger = get_logger()

ALLOWED_METHODS = ("GET", "POST")

STATUS_CODES = {
    ConfigMissing: 500,
    DatabaseConnectionError: 500,
    TransactionError: 500,
    BadRequestShape: 400,
    MethodNotAllowed: 405,
}


def error_response(error: RosterError) -> JSONResponse:
    """Convert a Roster error into its JSON envelope and status code."""
    content = {"error": error.message}
    if error.details is not None:
        content["details"] = error.details

    headers = None
    if isinstance(error, MethodNotAllowed):
        headers = {"Allow": ", ".join(ALLOWED_METHODS)}

    return JSONResponse(
        status_code=STATUS_CODES.get(type(error), 500),
        content=content,
        headers=headers,
    )


def create_app(services: Services, fallback: Optional[ASGIApp] = None) -> FastAPI:
    """Create the accounts application.

    Args:
        services: Services container; its config supplies the path prefix.
        fallback: ASGI app that receives every request outside the prefix.
            Without one those requests get a plain 404.

    Returns:
        FastAPI application.
    """
    prefix = services.config.api_prefix
    app = FastAPI(
        title="Roster API",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )

    def list_accounts() -> list:
        with services.db_manager.connect() as conn:
            accounts = services.accounts.find_all(conn)
        return [account.to_dict() for account in accounts]

    def save_accounts(payload: list) -> dict:
        with services.db_manager.connect() as conn:
            result = services.accounts.replace_all(conn, payload)
        return {
            "message": "Accounts updated successfully",
            "saved": result.accepted,
            "skipped": len(result.skipped),
        }

    async def read_payload(request: Request) -> Any:
        try:
            payload = await request.json()
        except ValueError:
            raise BadRequestShape()
        if not isinstance(payload, list):
            raise BadRequestShape()
        return payload

    async def accounts_endpoint(request: Request):
        method = request.method
        try:
            if not services.config.database_url:
                raise ConfigMissing()

            if method == "GET":
                content = await run_in_threadpool(list_accounts)
            elif method == "POST":
                payload = await read_payload(request)
                content = await run_in_threadpool(save_accounts, payload)
            else:
                raise MethodNotAllowed(method)
            response = JSONResponse(status_code=200, content=content)
        except RosterError as e:
            if isinstance(e, (BadRequestShape, MethodNotAllowed)):
                logger.warning(f"Rejected {method} {request.url.path}: {e.message}")
            response = error_response(e)
        except Exception as e:
            logger.exception(f"API endpoint error: {e}")
            response = JSONResponse(
                status_code=500,
                content={
                    "error": "An unexpected error occurred processing the request",
                    "details": str(e),
                },
            )

        logger.info(f"{method} {request.url.path} -> {response.status_code}")
        return response

    # Plain string-prefix match: "/api/accounts", "/api/accounts/" and
    # "/api/accounts-archive" all land here. No method list, so every
    # method under the prefix reaches accounts_endpoint.
    app.router.add_route(
        prefix + "{rest:path}",
        accounts_endpoint,
        methods=None,
        include_in_schema=False,
    )

    if fallback is not None:
        app.mount("/", fallback)

    return app
