"""
Base View Controller - per-screen async lifecycle

Idle -> Loading -> Success | Error, back through Idle on the next operation.
Only one operation runs per screen; a submission while Loading is ignored.
"""
import enum
from typing import Any, Awaitable, Callable, Dict, List, Optional
import logging

from pointsdesk.integrations import PointsApiClient, ClientError
from pointsdesk.schemas import Customer
from pointsdesk.services import NotificationChannel

logger = logging.getLogger(__name__)


class ViewStatus(str, enum.Enum):
    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


StatusListener = Callable[["BaseViewController", ViewStatus], None]


class BaseViewController:
    """
    Owns one screen's state and drives its API operations.

    Subclasses implement operations as coroutines that raise ``ClientError``
    on failure and hand them to ``_run``.
    """
    SCREEN: str = "base"

    def __init__(self, api: PointsApiClient, notifier: NotificationChannel):
        self.api = api
        self.notifier = notifier
        self.status = ViewStatus.IDLE
        self.error: Optional[str] = None
        self.mounted = True
        self._listeners: List[StatusListener] = []

    @property
    def loading(self) -> bool:
        return self.status is ViewStatus.LOADING

    # ========== Events ==========

    def subscribe(self, callback: StatusListener) -> Callable[[], None]:
        """Register a state-transition listener; returns an unsubscribe function"""
        self._listeners.append(callback)
        return lambda: self._listeners.remove(callback)

    def unmount(self) -> None:
        """
        Stop delivering transition events.

        An operation already in flight still runs to completion and applies
        its result to this controller.
        """
        self.mounted = False

    def mount(self) -> None:
        self.mounted = True

    def _transition(self, status: ViewStatus, error: Optional[str] = None) -> None:
        self.status = status
        self.error = error
        logger.debug(f"[{self.SCREEN}] -> {status.value}" + (f" ({error})" if error else ""))
        if not self.mounted:
            return
        for callback in list(self._listeners):
            callback(self, status)

    # ========== Operation runner ==========

    def _busy(self) -> bool:
        """True while an operation is in flight; new submissions must not touch state"""
        if self.loading:
            logger.info(f"[{self.SCREEN}] Operation ignored: screen is busy")
            return True
        return False

    async def _run(
        self,
        operation: Callable[[], Awaitable[None]],
        on_failure: Optional[Callable[[ClientError], None]] = None,
        fallback_message: str = "",
    ) -> bool:
        """
        Run ``operation`` under the Loading state.

        Returns True on success. A ``ClientError`` is recovered here: the
        screen-specific ``on_failure`` hook runs, one error notification is
        emitted and the screen moves to Error.
        """
        if self._busy():
            return False

        self._transition(ViewStatus.IDLE)
        self._transition(ViewStatus.LOADING)

        try:
            await operation()
        except ClientError as e:
            message = e.message or fallback_message
            if on_failure is not None:
                on_failure(e)
            self.notifier.error(message)
            self._transition(ViewStatus.ERROR, message)
            return False
        except Exception:
            # Not a classified failure: release the screen, let it propagate
            self._transition(ViewStatus.ERROR, fallback_message or None)
            raise

        self._transition(ViewStatus.SUCCESS)
        return True

    def snapshot(self) -> Dict[str, Any]:
        """JSON-ready view of the screen state"""
        return {
            "screen": self.SCREEN,
            "status": self.status.value,
            "error": self.error,
        }


class CustomerRecordMixin:
    """
    Keeps the last server-received copy of the customer a screen touched.
    """
    customer: Optional[Customer] = None

    async def _resync_customer(self, customer_id: str) -> None:
        """Re-read one customer after a confirmed mutation; failures keep the last known copy"""
        result = await self.api.get_customer(customer_id)
        if result.ok:
            self.customer = result.data
            return
        logger.warning(f"[{self.SCREEN}] Resync of customer {customer_id} failed: {result.error}")

    def _customer_snapshot(self) -> Optional[Dict[str, Any]]:
        return self.customer.model_dump(by_alias=True) if self.customer else None
