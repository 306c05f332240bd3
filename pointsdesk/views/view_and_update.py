"""
View & Update View - look up one customer, rename, delete and query points by time
"""
from typing import Any, Dict, Optional
import logging

from pointsdesk.integrations import ClientError, LocalValidationError
from pointsdesk.schemas import Customer, CustomerUpdate, PointsByTimeResult
from pointsdesk.utils import DateRange, DateRangeCalculator, parse_date
from .base import BaseViewController, CustomerRecordMixin

logger = logging.getLogger(__name__)

FETCH_CUSTOMER_FIRST = "Please fetch a customer ID first."


class ViewAndUpdateView(CustomerRecordMixin, BaseViewController):
    """
    Single-customer screen.

    Holds the looked-up customer, the editable name, the delete confirmation
    flag and the points-by-time dialog (date range plus last result).
    """
    SCREEN = "view"

    def __init__(self, api, notifier, calculator: Optional[DateRangeCalculator] = None):
        super().__init__(api, notifier)
        self.calculator = calculator or DateRangeCalculator()
        self.customer_id = ""
        self.customer: Optional[Customer] = None
        self.edit_name = ""
        self.pending_delete = False
        self.range_dialog_open = False
        self.date_range = DateRange(start_date="", end_date="")
        self.points_result: Optional[PointsByTimeResult] = None

    # ========== Fetch ==========

    async def fetch(self, customer_id: Optional[str] = None) -> bool:
        """Look up a customer and load its name into the edit field"""
        if self._busy():
            return False
        if customer_id is not None:
            self.customer_id = customer_id
        lookup_id = self.customer_id.strip()
        if not lookup_id:
            return False

        async def operation():
            self.customer = None
            self.edit_name = ""
            self.points_result = None
            customer = (await self.api.get_customer(lookup_id)).unwrap()
            self.customer = customer
            self.edit_name = customer.name

        return await self._run(operation, fallback_message="Failed to fetch customer details.")

    # ========== Update ==========

    def can_update(self, name: Optional[str] = None) -> bool:
        candidate = (self.edit_name if name is None else name).strip()
        return self.customer is not None and bool(candidate) and candidate != self.customer.name

    async def update_name(self, name: Optional[str] = None) -> bool:
        """Rename the loaded customer; unchanged or blank names are a no-op"""
        if self._busy():
            return False
        if name is not None:
            self.edit_name = name
        if not self.can_update():
            return False
        trimmed = self.edit_name.strip()
        customer_id = self.customer.id

        async def operation():
            updated = (await self.api.update_customer(customer_id, CustomerUpdate(name=trimmed))).unwrap()
            self.customer = updated
            self.edit_name = updated.name
            self.notifier.success(f"Customer name updated to {updated.name}.")
            await self._resync_customer(updated.id)
            self.edit_name = self.customer.name

        return await self._run(operation, fallback_message="Failed to update customer.")

    # ========== Delete ==========

    def request_delete(self) -> bool:
        """First step of deletion: ask for confirmation"""
        if self.customer is None:
            self.notifier.info(FETCH_CUSTOMER_FIRST)
            return False
        self.pending_delete = True
        return True

    def cancel_delete(self) -> None:
        self.pending_delete = False

    async def confirm_delete(self) -> bool:
        """Second step of deletion; success clears everything this screen holds"""
        if not self.pending_delete or self.customer is None or self.loading:
            return False
        self.pending_delete = False
        customer_id = self.customer.id

        async def operation():
            (await self.api.delete_customer(customer_id)).unwrap()
            self.notifier.success(f"Customer {customer_id} successfully deleted.")
            self._reset()

        return await self._run(operation, fallback_message="Failed to delete customer.")

    def _reset(self) -> None:
        self.customer_id = ""
        self.customer = None
        self.edit_name = ""
        self.points_result = None
        self.range_dialog_open = False
        self.date_range = DateRange(start_date="", end_date="")

    # ========== Points by time ==========

    def open_range_dialog(self) -> bool:
        if self.customer is None:
            self.notifier.info(FETCH_CUSTOMER_FIRST)
            return False
        self.date_range = DateRange(start_date="", end_date="")
        self.points_result = None
        self.range_dialog_open = True
        return True

    def close_range_dialog(self) -> None:
        self.range_dialog_open = False

    def set_date_range(self, start_date: Optional[str] = None, end_date: Optional[str] = None) -> None:
        self.date_range = DateRange(
            start_date=self.date_range.start_date if start_date is None else start_date,
            end_date=self.date_range.end_date if end_date is None else end_date,
        )

    def _validated_range(self) -> DateRange:
        start, end = self.date_range.start_date.strip(), self.date_range.end_date.strip()
        if not start or not end:
            raise LocalValidationError("Start and end dates are required.")
        try:
            start_day, end_day = parse_date(start), parse_date(end)
        except ValueError:
            raise LocalValidationError("Dates must use the YYYY-MM-DD format.")
        if start_day > end_day:
            raise LocalValidationError("Start date cannot be after the end date.")
        return DateRange(start_date=start, end_date=end)

    async def fetch_points_in_range(self, start_date: Optional[str] = None, end_date: Optional[str] = None) -> bool:
        """Custom range; invalid ranges are rejected without a network call"""
        if self._busy():
            return False
        self.set_date_range(start_date, end_date)

        async def operation():
            date_range = self._validated_range()
            if self.customer is None:
                raise LocalValidationError(FETCH_CUSTOMER_FIRST)
            self.points_result = None
            result = (await self.api.get_points_by_time(
                self.customer.id, date_range.start_date, date_range.end_date
            )).unwrap()
            self.points_result = result
            self.notifier.info(f"Points data fetched successfully for {self.customer.name}.")

        def keep_dialog_open(error: ClientError):
            self.range_dialog_open = self.customer is not None

        return await self._run(
            operation,
            on_failure=keep_dialog_open,
            fallback_message="Failed to fetch points for the specified range.",
        )

    async def fetch_points_for_last_months(self, months: int) -> bool:
        """Predefined range ``[months_ago(months), today]``"""
        if self.customer is None:
            self.notifier.info(FETCH_CUSTOMER_FIRST)
            return False
        date_range = self.calculator.last_months(months)

        async def operation():
            self.points_result = None
            result = (await self.api.get_points_by_time(
                self.customer.id, date_range.start_date, date_range.end_date
            )).unwrap()
            self.points_result = result
            self.range_dialog_open = True
            self.date_range = date_range
            label = "month" if months == 1 else "months"
            self.notifier.info(f"Last {months} {label} of points fetched. Total: {result.points_earned}.")

        def close_dialog(error: ClientError):
            self.range_dialog_open = False

        return await self._run(operation, on_failure=close_dialog, fallback_message="Failed to fetch predefined range.")

    def snapshot(self) -> Dict[str, Any]:
        data = super().snapshot()
        data.update({
            "customerId": self.customer_id,
            "customer": self._customer_snapshot(),
            "editName": self.edit_name,
            "canUpdate": self.can_update(),
            "pendingDelete": self.pending_delete,
            "rangeDialogOpen": self.range_dialog_open,
            "dateRange": {"startDate": self.date_range.start_date, "endDate": self.date_range.end_date},
            "pointsResult": self.points_result.model_dump(by_alias=True) if self.points_result else None,
        })
        return data
