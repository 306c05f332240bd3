"""
Earn View - record a purchase and accrue points
"""
from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional, Union

from pointsdesk.integrations import LocalValidationError
from pointsdesk.schemas import PurchaseRequest
from pointsdesk.utils import parse_numeric
from .base import BaseViewController, CustomerRecordMixin


@dataclass
class EarnForm:
    customer_id: str = ""
    amount: str = ""


class EarnView(CustomerRecordMixin, BaseViewController):
    SCREEN = "earn"

    def __init__(self, api, notifier):
        super().__init__(api, notifier)
        self.form = EarnForm()
        self.customer = None

    def update_form(self, customer_id: Optional[str] = None, amount: Optional[Union[str, float]] = None) -> None:
        if customer_id is not None:
            self.form.customer_id = customer_id
        if amount is not None:
            self.form.amount = str(amount)

    async def submit(self, **fields) -> bool:
        if self._busy():
            return False
        self.update_form(**fields)
        form = self.form

        async def operation():
            amount = parse_numeric(form.amount)
            if amount <= 0:
                raise LocalValidationError("Purchase amount must be greater than zero.")
            customer_id = form.customer_id.strip()
            if not customer_id:
                raise LocalValidationError("Customer ID is required.")

            result = (await self.api.record_purchase(PurchaseRequest(customer_id=customer_id, amount=amount))).unwrap()
            self.notifier.success(result.message)
            self.form = EarnForm(customer_id=form.customer_id)
            await self._resync_customer(customer_id)

        return await self._run(operation, fallback_message="Purchase transaction failed.")

    def snapshot(self) -> Dict[str, Any]:
        data = super().snapshot()
        data.update({
            "form": asdict(self.form),
            "customer": self._customer_snapshot(),
        })
        return data
