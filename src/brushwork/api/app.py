"""FastAPI app factory for the catalog query surface.

Use: brushwork serve
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from brushwork.config import ApiConfig
from brushwork.domain.errors import InvalidRequestError, StorageError

from .routes import router
from .schema import ErrorResponse

if TYPE_CHECKING:
    from brushwork.app import UnitOfWorkFactory

log = logging.getLogger(__name__)


async def _invalid_request_handler(_request: Request, exc: Exception) -> JSONResponse:
    return JSONResponse(
        status_code=400,
        content=ErrorResponse(error=str(exc)).model_dump(exclude_none=True),
    )


async def _storage_error_handler(_request: Request, exc: Exception) -> JSONResponse:
    log.error("Query error: %s", exc)
    return JSONResponse(
        status_code=500,
        content=ErrorResponse(
            error="An error occurred while querying the database.",
            details=str(exc),
        ).model_dump(),
    )


def create_app(
    unit_of_work_factory: UnitOfWorkFactory,
    *,
    config: ApiConfig | None = None,
) -> FastAPI:
    """Build the FastAPI app with CORS, routes and error mapping."""
    api_config = config or ApiConfig()
    app = FastAPI(
        title="Brushwork Catalog API",
        description="Filter episodes by broadcast month, tags and materials",
    )
    app.state.unit_of_work_factory = unit_of_work_factory
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(api_config.cors_origins),
        allow_methods=["GET"],
        allow_headers=["*"],
    )
    app.add_exception_handler(InvalidRequestError, _invalid_request_handler)
    app.add_exception_handler(StorageError, _storage_error_handler)
    app.include_router(router)
    return app
