"""
Response Payload Normalizer

Maps points-API JSON into the canonical entity shape and picks the most
specific message out of an error payload. Callers choose the entry point
(single entity vs. collection) from the endpoint contract.
"""
from typing import Any, Dict, List

ERROR_MESSAGE_FIELDS = ("detail", "message", "error")


def normalize_entity(payload: Dict[str, Any]) -> Dict[str, Any]:
    """
    Canonicalize one server object.

    ``id`` comes from an existing ``id`` field, falling back to ``customerId``.
    Every other field (``totalPoints`` included) is passed through verbatim.
    """
    normalized = dict(payload)
    normalized["id"] = payload.get("id") or payload.get("customerId")
    return normalized


def normalize_collection(payload: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """Canonicalize every element of a list response independently"""
    return [normalize_entity(item) for item in payload]


def extract_error_message(payload: Any, status_code: int) -> str:
    """
    Most specific error message: ``detail``, then ``message``, then ``error``,
    then a generic message carrying the HTTP status.
    """
    if isinstance(payload, dict):
        for field in ERROR_MESSAGE_FIELDS:
            value = payload.get(field)
            if value:
                return str(value)
    return f"API Request Failed with status {status_code}."
