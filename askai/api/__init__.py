"""Ask-AI API layer -- routes, schemas, and middleware."""

from askai.api.middleware import (
    ErrorHandlingMiddleware,
    RequestLoggingMiddleware,
    configure_cors,
)
from askai.api.routes import router
from askai.api.schemas import (
    AskRequest,
    AskResponse,
    ErrorResponse,
    HealthResponse,
    ProvidersResponse,
)

__all__ = [
    "AskRequest",
    "AskResponse",
    "ErrorHandlingMiddleware",
    "ErrorResponse",
    "HealthResponse",
    "ProvidersResponse",
    "RequestLoggingMiddleware",
    "configure_cors",
    "router",
]
