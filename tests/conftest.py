"""Shared fixtures: an in-memory points server behind httpx.MockTransport."""

import json
from dataclasses import dataclass, field
from datetime import date
from typing import Dict, List, Optional

import httpx
import pytest

from pointsdesk.integrations import PointsApiClient
from pointsdesk.services import NotificationChannel
from pointsdesk.utils import DateRangeCalculator
from pointsdesk.views import build_workspace

BASE_URL = "http://points.test/api"


@dataclass
class LedgerEntry:
    customer_id: str
    points: int
    day: date


@dataclass
class FakePointsServer:
    """Mirrors the points server's behaviour for the endpoints the client uses."""

    customers: Dict[str, dict] = field(default_factory=dict)
    ledger: List[LedgerEntry] = field(default_factory=list)
    requests: List[httpx.Request] = field(default_factory=list)
    today: date = date(2024, 3, 31)
    fail_with: Optional[httpx.Response] = None

    def add_customer(self, customer_id: str, name: str, points: int = 0) -> None:
        self.customers[customer_id] = {"customerId": customer_id, "name": name, "totalPoints": points, "isDeleted": 0}

    def earn(self, customer_id: str, points: int, day: date) -> None:
        self.ledger.append(LedgerEntry(customer_id, points, day))

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handle)

    def calls(self, method: Optional[str] = None) -> List[httpx.Request]:
        return [r for r in self.requests if method is None or r.method == method]

    # ---- request handling ----

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.fail_with is not None:
            # fresh copy per request; a Response object cannot be sent twice
            return httpx.Response(
                self.fail_with.status_code,
                headers=self.fail_with.headers,
                content=self.fail_with.content,
            )

        path = request.url.path[len("/api"):]
        parts = [p for p in path.split("/") if p]
        body = json.loads(request.content) if request.content else {}

        if parts == ["customers", "all"] and request.method == "GET":
            return httpx.Response(200, json=list(self.customers.values()))
        if parts == ["customers", "register"] and request.method == "POST":
            return self._register(body)
        if parts == ["transactions", "purchase"]:
            return self._purchase(body)
        if parts == ["points", "redeem"]:
            return self._redeem(body)
        if len(parts) >= 2 and parts[0] == "customers":
            customer_id = parts[1]
            if len(parts) == 3 and parts[2] == "points-by-time":
                return self._points_by_time(customer_id, request.url.params)
            if len(parts) == 3 and parts[2] == "balance":
                return self._get(customer_id)
            if request.method == "GET":
                return self._get(customer_id)
            if request.method == "PUT":
                return self._update(customer_id, body)
            if request.method == "DELETE":
                return self._delete(customer_id)
        return httpx.Response(404, json={"error": "Not Found", "status": 404})

    def _not_found(self, detail: str = "Customer not found.") -> httpx.Response:
        return httpx.Response(404, json={"status": 404, "error": "Not Found", "detail": detail})

    def _bad_request(self, message: str) -> httpx.Response:
        return httpx.Response(400, json={"status": 400, "error": "Bad Request", "message": message})

    def _get(self, customer_id: str) -> httpx.Response:
        customer = self.customers.get(customer_id)
        if customer is None:
            return self._not_found()
        return httpx.Response(200, json=customer)

    def _register(self, body: dict) -> httpx.Response:
        customer_id = body["customerId"]
        if customer_id in self.customers:
            return self._bad_request(f"Customer ID '{customer_id}' already exists (and is active).")
        self.add_customer(customer_id, body["name"], body.get("initialPoints", 0))
        return httpx.Response(201, json=self.customers[customer_id])

    def _update(self, customer_id: str, body: dict) -> httpx.Response:
        customer = self.customers.get(customer_id)
        if customer is None:
            return self._not_found("Customer not found or is deactivated.")
        customer["name"] = body["name"]
        return httpx.Response(200, json=customer)

    def _delete(self, customer_id: str) -> httpx.Response:
        if customer_id not in self.customers:
            return self._not_found("Customer not found")
        del self.customers[customer_id]
        return httpx.Response(204)

    def _purchase(self, body: dict) -> httpx.Response:
        customer = self.customers.get(body["customerId"])
        if customer is None:
            return self._not_found("Customer not found. Cannot process transaction.")
        amount = body["amount"]
        points = int(amount // 50)
        if points > 0:
            customer["totalPoints"] += points
            self.earn(customer["customerId"], points, self.today)
            message = f"Successfully recorded purchase of ₹{amount:.2f}. Points awarded: {points}."
        else:
            message = f"Purchase of ₹{amount:.2f} recorded, but the amount did not qualify for loyalty points (must be ₹50 or more)."
        return httpx.Response(200, json={
            "message": message,
            "customerId": customer["customerId"],
            "newTotalPoints": customer["totalPoints"],
        })

    def _redeem(self, body: dict) -> httpx.Response:
        customer = self.customers.get(body["customerId"])
        if customer is None:
            return self._not_found()
        points = body["pointsToRedeem"]
        if points > customer["totalPoints"]:
            return self._bad_request(
                f"Insufficient points. Customer has {customer['totalPoints']} but tried to redeem {points}."
            )
        customer["totalPoints"] -= points
        return httpx.Response(200, json={
            "message": f"Successfully redeemed {points} points for '{body['rewardDescription']}'.",
            "customerId": customer["customerId"],
            "newTotalPoints": customer["totalPoints"],
        })

    def _points_by_time(self, customer_id: str, params: httpx.QueryParams) -> httpx.Response:
        if customer_id not in self.customers:
            return self._not_found()
        start, end = date.fromisoformat(params["startDate"]), date.fromisoformat(params["endDate"])
        if start > end:
            return self._bad_request("Start date cannot be after end date.")
        earned = sum(e.points for e in self.ledger if e.customer_id == customer_id and start <= e.day <= end)
        return httpx.Response(200, json={
            "customerId": customer_id,
            "startDate": params["startDate"],
            "endDate": params["endDate"],
            "pointsEarned": earned,
        })


@pytest.fixture
def server():
    fake = FakePointsServer()
    fake.add_customer("CUST-001", "Asha Rao", 120)
    fake.add_customer("CUST-002", "Vikram Shah", 40)
    return fake


@pytest.fixture
def api(server):
    return PointsApiClient(base_url=BASE_URL, delay=0, transport=server.transport)


@pytest.fixture
def notifier():
    return NotificationChannel(timeout=5.0)


@pytest.fixture
def calculator(server):
    return DateRangeCalculator(clock=lambda: server.today)


@pytest.fixture
def workspace(api, notifier, calculator):
    return build_workspace(api=api, notifier=notifier, calculator=calculator)


@pytest.fixture
def slow_workspace(server, notifier, calculator):
    """Workspace whose calls wait long enough for a second submission to overlap"""
    api = PointsApiClient(base_url=BASE_URL, delay=0.05, transport=server.transport)
    return build_workspace(api=api, notifier=notifier, calculator=calculator)
