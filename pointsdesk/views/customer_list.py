"""
Customer List View - all registered customers with edit and delete
"""
from typing import Any, Dict, List, Optional
import logging

from pointsdesk.integrations import ClientError
from pointsdesk.schemas import Customer, CustomerUpdate
from .base import BaseViewController

logger = logging.getLogger(__name__)


class CustomerListView(BaseViewController):
    """
    List screen. Every successful edit or delete re-reads the whole
    collection from the server.
    """
    SCREEN = "list"

    def __init__(self, api, notifier):
        super().__init__(api, notifier)
        self.customers: List[Customer] = []
        self.selected_id: Optional[str] = None
        self.pending_delete_id: Optional[str] = None

    def find(self, customer_id: str) -> Optional[Customer]:
        for customer in self.customers:
            if customer.id == customer_id:
                return customer
        return None

    # ========== List-all ==========

    async def refresh(self) -> bool:
        """Fetch the full collection, reporting the count"""
        return await self._run(self._load_customers, on_failure=self._clear_customers)

    async def _load_customers(self, announce: bool = True) -> None:
        customers = (await self.api.list_customers()).unwrap()
        self.customers = customers
        if announce:
            self.notifier.info(f"Successfully loaded {len(customers)} customers.")

    def _clear_customers(self, error: ClientError) -> None:
        self.customers = []

    async def _resync(self) -> None:
        """Re-read the collection after a mutation the server has confirmed"""
        try:
            await self._load_customers(announce=False)
        except ClientError as e:
            logger.warning(f"[{self.SCREEN}] Resync after mutation failed: {e}")
            self.customers = []
            self.notifier.error(e.message)

    # ========== Detail / update ==========

    def open_detail(self, customer_id: str) -> None:
        self.selected_id = customer_id

    def close_detail(self) -> None:
        self.selected_id = None

    def can_update(self, customer_id: str, name: str) -> bool:
        trimmed = (name or "").strip()
        if not trimmed:
            return False
        current = self.find(customer_id)
        return current is None or trimmed != current.name.strip()

    async def update_customer(self, customer_id: str, name: str) -> bool:
        """Rename a customer; unchanged or blank names are a no-op"""
        if not self.can_update(customer_id, name):
            return False
        trimmed = name.strip()

        async def operation():
            (await self.api.update_customer(customer_id, CustomerUpdate(name=trimmed))).unwrap()
            self.notifier.success(f"Customer {customer_id} updated successfully.")
            self.selected_id = None
            await self._resync()

        return await self._run(operation, fallback_message="Failed to update customer.")

    # ========== Delete ==========

    def request_delete(self, customer_id: str) -> None:
        """First step of deletion: ask for confirmation"""
        self.pending_delete_id = customer_id

    def cancel_delete(self) -> None:
        self.pending_delete_id = None

    async def confirm_delete(self) -> bool:
        """Second step of deletion: perform the pending request"""
        customer_id = self.pending_delete_id
        if customer_id is None or self.loading:
            return False
        self.pending_delete_id = None

        async def operation():
            (await self.api.delete_customer(customer_id)).unwrap()
            self.notifier.success(f"Customer {customer_id} successfully deleted.")
            await self._resync()

        return await self._run(operation, fallback_message="Failed to delete customer.")

    def snapshot(self) -> Dict[str, Any]:
        data = super().snapshot()
        data.update({
            "customers": [c.model_dump(by_alias=True) for c in self.customers],
            "selectedId": self.selected_id,
            "pendingDeleteId": self.pending_delete_id,
        })
        return data
