# Points API Integration Package
from .errors import (
    ClientError,
    LocalValidationError,
    ApiError,
    ConnectivityError,
    ResponseParseError,
)
from .normalizer import normalize_entity, normalize_collection, extract_error_message
from .points_api import PointsApiClient, ApiResult

__all__ = [
    "ClientError",
    "LocalValidationError",
    "ApiError",
    "ConnectivityError",
    "ResponseParseError",
    "normalize_entity",
    "normalize_collection",
    "extract_error_message",
    "PointsApiClient",
    "ApiResult",
]
