"""
Points API Client - gateway to the loyalty points-management API

Every call waits the configured NormalDelay, performs the request and hands
back an ``ApiResult``. Failures never escape as exceptions: they are carried
inside the result as a classified ``ClientError``.
"""
import asyncio
from dataclasses import dataclass
from typing import Any, Callable, Dict, Generic, List, Optional, TypeVar
from urllib.parse import quote
import httpx
import logging

from pydantic import ValidationError

from pointsdesk.core.config import settings
from pointsdesk.schemas import (
    Customer,
    CustomerRegister,
    CustomerUpdate,
    PurchaseRequest,
    RedemptionRequest,
    TransactionResult,
    PointsByTimeResult,
)
from .errors import ClientError, ApiError, ConnectivityError, ResponseParseError
from .normalizer import normalize_entity, normalize_collection, extract_error_message

logger = logging.getLogger(__name__)

T = TypeVar("T")
U = TypeVar("U")

ALLOWED_METHODS = ("GET", "POST", "PUT", "DELETE")

DELETED_RESPONSE = {"success": True, "message": "Resource deleted successfully."}


def _segment(value: str) -> str:
    """Escape a customer id for use as a single path segment"""
    return quote(str(value), safe="")


@dataclass
class ApiResult(Generic[T]):
    """Normalized data on success, a classified failure otherwise"""
    data: Optional[T] = None
    error: Optional[ClientError] = None
    status_code: Optional[int] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, data: T, status_code: Optional[int] = None) -> "ApiResult[T]":
        return cls(data=data, status_code=status_code)

    @classmethod
    def failure(cls, error: ClientError, status_code: Optional[int] = None) -> "ApiResult[T]":
        return cls(error=error, status_code=status_code)

    def unwrap(self) -> T:
        """Return the data or raise the carried failure"""
        if self.error is not None:
            raise self.error
        return self.data

    def map(self, parser: Callable[[T], U]) -> "ApiResult[U]":
        """Convert successful data with ``parser``; schema mismatches become parse failures"""
        if self.error is not None:
            return ApiResult.failure(self.error, self.status_code)
        try:
            return ApiResult.success(parser(self.data), self.status_code)
        except (ValidationError, TypeError) as e:
            logger.error(f"[points-api] Unexpected response payload: {e}")
            return ApiResult.failure(
                ResponseParseError("Server returned an unexpected response.", self.status_code, e),
                self.status_code,
            )


class PointsApiClient:
    """
    Loyalty Points API Client
    """
    SERVICE_NAME = "points-api"

    def __init__(
        self,
        base_url: Optional[str] = None,
        delay: Optional[float] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = (base_url or settings.API_BASE_URL).rstrip("/")
        self.delay = settings.NORMAL_DELAY_SECONDS if delay is None else delay
        self.timeout = settings.REQUEST_TIMEOUT_SECONDS if timeout is None else timeout
        self._transport = transport

    # ========== Core call ==========

    async def call(
        self,
        path: str,
        method: str = "GET",
        body: Optional[Dict[str, Any]] = None,
        params: Optional[Dict[str, Any]] = None,
        many: bool = False,
    ) -> ApiResult[Any]:
        """
        Perform one API call.

        ``many`` selects collection normalization (list endpoints); otherwise
        a JSON object response is normalized as a single entity.
        """
        method = method.upper()
        if method not in ALLOWED_METHODS:
            raise ValueError(f"Unsupported HTTP method: {method}")

        if self.delay > 0:
            await asyncio.sleep(self.delay)

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.request(
                    method,
                    f"{self.base_url}{path}",
                    params=params,
                    json=body,
                    headers=self._build_headers(),
                )
        except httpx.HTTPError as e:
            logger.error(f"[{self.SERVICE_NAME}] {method} {path} transport failure: {e}")
            return ApiResult.failure(ConnectivityError(cause=e))

        self._log_api_call(method, path, response.status_code)
        return self._handle_response(method, path, response, many)

    def _handle_response(self, method: str, path: str, response: httpx.Response, many: bool) -> ApiResult[Any]:
        status_code = response.status_code

        if method == "DELETE" and status_code == 204:
            return ApiResult.success(dict(DELETED_RESPONSE), status_code)

        try:
            data = response.json()
        except ValueError as e:
            if status_code == 204:
                return ApiResult.success({}, status_code)
            logger.error(f"[{self.SERVICE_NAME}] {method} {path} returned non-JSON body (status {status_code})")
            return ApiResult.failure(
                ResponseParseError(f"Server returned non-JSON response (Status {status_code}).", status_code, e),
                status_code,
            )

        if not response.is_success:
            message = extract_error_message(data, status_code)
            logger.warning(f"[{self.SERVICE_NAME}] {method} {path} failed ({status_code}): {message}")
            payload = data if isinstance(data, dict) else {}
            return ApiResult.failure(ApiError(message, status_code, payload), status_code)

        if many:
            if not isinstance(data, list) or not all(isinstance(item, dict) for item in data):
                logger.error(f"[{self.SERVICE_NAME}] {method} {path} returned a malformed collection")
                return ApiResult.failure(
                    ResponseParseError("Server returned an unexpected response.", status_code),
                    status_code,
                )
            return ApiResult.success(normalize_collection(data), status_code)

        if isinstance(data, dict):
            return ApiResult.success(normalize_entity(data), status_code)
        return ApiResult.success(data, status_code)

    # ========== Customers ==========

    async def list_customers(self) -> ApiResult[List[Customer]]:
        result = await self.call("/customers/all", many=True)
        return result.map(lambda items: [Customer.model_validate(item) for item in items])

    async def get_customer(self, customer_id: str) -> ApiResult[Customer]:
        result = await self.call(f"/customers/{_segment(customer_id)}")
        return result.map(Customer.model_validate)

    async def get_balance(self, customer_id: str) -> ApiResult[Customer]:
        result = await self.call(f"/customers/{_segment(customer_id)}/balance")
        return result.map(Customer.model_validate)

    async def register_customer(self, request: CustomerRegister) -> ApiResult[Customer]:
        result = await self.call("/customers/register", "POST", request.model_dump(by_alias=True))
        return result.map(Customer.model_validate)

    async def update_customer(self, customer_id: str, request: CustomerUpdate) -> ApiResult[Customer]:
        result = await self.call(f"/customers/{_segment(customer_id)}", "PUT", request.model_dump(by_alias=True))
        return result.map(Customer.model_validate)

    async def delete_customer(self, customer_id: str) -> ApiResult[Dict[str, Any]]:
        return await self.call(f"/customers/{_segment(customer_id)}", "DELETE")

    # ========== Points ==========

    async def record_purchase(self, request: PurchaseRequest) -> ApiResult[TransactionResult]:
        result = await self.call("/transactions/purchase", "POST", request.model_dump(by_alias=True))
        return result.map(TransactionResult.model_validate)

    async def redeem_points(self, request: RedemptionRequest) -> ApiResult[TransactionResult]:
        result = await self.call("/points/redeem", "POST", request.model_dump(by_alias=True))
        return result.map(TransactionResult.model_validate)

    async def get_points_by_time(self, customer_id: str, start_date: str, end_date: str) -> ApiResult[PointsByTimeResult]:
        result = await self.call(
            f"/customers/{_segment(customer_id)}/points-by-time",
            params={"startDate": start_date, "endDate": end_date},
        )
        return result.map(PointsByTimeResult.model_validate)

    # ========== Utilities ==========

    def _build_headers(self) -> Dict[str, str]:
        """Build common request headers"""
        return {
            "Content-Type": "application/json",
            "Accept": "application/json",
        }

    def _log_api_call(self, method: str, endpoint: str, status_code: int):
        """Log API call for debugging"""
        logger.info(f"[{self.SERVICE_NAME}] {method} {endpoint} -> {status_code}")
