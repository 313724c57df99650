"""
Main FastAPI Application
Entry point for the Employee Registry API.
"""
import logging
from typing import Optional
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from employee_registry.config.settings import API_TITLE, API_VERSION
from employee_registry.controllers.employee_controller import router
from employee_registry.models.errors import (
    ExternalSourceError,
    NotFoundError,
    RegistryError,
    ValidationError,
)
from employee_registry.repositories.employee_repository import EmployeeRegistry
from employee_registry.services.import_service import ImportSource
from employee_registry.services.random_user_service import RandomUserClient

logger = logging.getLogger(__name__)

# Registry error kind -> (HTTP status, message)
_ERROR_STATUS = {
    ValidationError: (400, "Invalid employee data"),
    NotFoundError: (404, "Employee not found"),
    ExternalSourceError: (502, "Error importing employees from the external API"),
}


def _error_body(message: str, error: Optional[str] = None) -> dict:
    body = {"success": False, "message": message}
    if error is not None:
        body["error"] = error
    return body


async def registry_error_handler(request: Request, exc: RegistryError):
    status_code, message = _ERROR_STATUS.get(type(exc), (500, "Internal server error"))
    logger.warning(f"[API] {request.method} {request.url.path} -> {status_code}: {exc.reason}")
    return JSONResponse(status_code=status_code, content=_error_body(message, exc.reason))


async def request_validation_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    detail = "; ".join(
        f"{'.'.join(str(part) for part in err.get('loc', ()))}: {err.get('msg', '')}"
        for err in errors
    )
    return JSONResponse(status_code=400, content=_error_body("Invalid request", detail))


async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception(f"[API] Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(status_code=500, content=_error_body("Internal server error", str(exc)))


def create_app(
    registry: Optional[EmployeeRegistry] = None,
    import_source: Optional[ImportSource] = None,
) -> FastAPI:
    """
    Build the API application around one registry instance.

    Args:
        registry: Registry to serve (a fresh, empty one by default)
        import_source: Bulk import source (the Random User API by default)
    """
    app = FastAPI(
        title=API_TITLE,
        description="In-memory employee registry with Random User API import",
        version=API_VERSION,
    )
    app.state.registry = registry if registry is not None else EmployeeRegistry()
    app.state.import_source = import_source if import_source is not None else RandomUserClient()

    app.add_exception_handler(RegistryError, registry_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

    app.include_router(router)

    @app.get("/")
    async def root():
        """Root endpoint."""
        return {
            "message": API_TITLE,
            "version": API_VERSION,
            "endpoints": {"employees": "/api/employees"},
        }

    @app.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "healthy"}

    return app
