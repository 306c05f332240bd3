"""
Register View - new customer registration
"""
from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional, Union

from pointsdesk.integrations import LocalValidationError
from pointsdesk.schemas import CustomerRegister
from pointsdesk.utils import parse_numeric, round_half_up
from .base import BaseViewController, CustomerRecordMixin


@dataclass
class RegisterForm:
    customer_id: str = ""
    name: str = ""
    initial_points: str = ""  # raw input; blank and "0" both submit as 0


class RegisterView(CustomerRecordMixin, BaseViewController):
    SCREEN = "register"

    def __init__(self, api, notifier):
        super().__init__(api, notifier)
        self.form = RegisterForm()
        self.customer = None

    def update_form(
        self,
        customer_id: Optional[str] = None,
        name: Optional[str] = None,
        initial_points: Optional[Union[str, int, float]] = None,
    ) -> None:
        if customer_id is not None:
            self.form.customer_id = customer_id
        if name is not None:
            self.form.name = name
        if initial_points is not None:
            self.form.initial_points = str(initial_points)

    async def submit(self, **fields) -> bool:
        """Register the customer described by the form (``fields`` update it first)"""
        if self._busy():
            return False
        self.update_form(**fields)
        form = self.form

        async def operation():
            customer_id = form.customer_id.strip()
            name = form.name.strip()
            if not customer_id:
                raise LocalValidationError("Customer ID is required.")
            if not name:
                raise LocalValidationError("Name is required.")

            request = CustomerRegister(
                customer_id=customer_id,
                name=name,
                initial_points=round_half_up(parse_numeric(form.initial_points)),
            )
            created = (await self.api.register_customer(request)).unwrap()
            self.notifier.success(f"Customer {created.name} registered successfully with ID: {created.id}.")
            self.form = RegisterForm()
            await self._resync_customer(created.id)

        return await self._run(operation, fallback_message="Registration failed.")

    def snapshot(self) -> Dict[str, Any]:
        data = super().snapshot()
        data.update({"form": asdict(self.form), "customer": self._customer_snapshot()})
        return data
