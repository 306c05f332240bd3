"""
Redeem View - spend points on a reward
"""
from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional, Union

from pointsdesk.integrations import LocalValidationError
from pointsdesk.schemas import RedemptionRequest
from pointsdesk.utils import parse_numeric, round_half_up
from .base import BaseViewController, CustomerRecordMixin


@dataclass
class RedeemForm:
    customer_id: str = ""
    points_to_redeem: str = ""
    reward_description: str = ""


class RedeemView(CustomerRecordMixin, BaseViewController):
    SCREEN = "redeem"

    def __init__(self, api, notifier):
        super().__init__(api, notifier)
        self.form = RedeemForm()
        self.customer = None

    def update_form(
        self,
        customer_id: Optional[str] = None,
        points_to_redeem: Optional[Union[str, int, float]] = None,
        reward_description: Optional[str] = None,
    ) -> None:
        if customer_id is not None:
            self.form.customer_id = customer_id
        if points_to_redeem is not None:
            self.form.points_to_redeem = str(points_to_redeem)
        if reward_description is not None:
            self.form.reward_description = reward_description

    async def submit(self, **fields) -> bool:
        if self._busy():
            return False
        self.update_form(**fields)
        form = self.form

        async def operation():
            points = round_half_up(parse_numeric(form.points_to_redeem))
            if points <= 0:
                raise LocalValidationError("Points to redeem must be a positive number.")
            customer_id = form.customer_id.strip()
            if not customer_id:
                raise LocalValidationError("Customer ID is required.")

            request = RedemptionRequest(
                customer_id=customer_id,
                points_to_redeem=points,
                reward_description=form.reward_description,
            )
            # Business-rule rejections (e.g. insufficient points) carry the server's own message
            result = (await self.api.redeem_points(request)).unwrap()
            self.notifier.success(f"Redeemed {points} points successfully. New total: {result.new_total_points}.")
            self.form = RedeemForm(customer_id=form.customer_id)
            await self._resync_customer(customer_id)

        return await self._run(operation, fallback_message="Redemption failed.")

    def snapshot(self) -> Dict[str, Any]:
        data = super().snapshot()
        data.update({
            "form": asdict(self.form),
            "customer": self._customer_snapshot(),
        })
        return data
