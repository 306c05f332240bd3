"""
Workspace - the five screens wired to one API client and one notification channel
"""
from dataclasses import dataclass
from typing import Optional

from pointsdesk.integrations import PointsApiClient
from pointsdesk.services import NotificationChannel
from pointsdesk.utils import DateRangeCalculator
from .customer_list import CustomerListView
from .register import RegisterView
from .earn import EarnView
from .redeem import RedeemView
from .view_and_update import ViewAndUpdateView


@dataclass
class Workspace:
    api: PointsApiClient
    notifier: NotificationChannel
    customer_list: CustomerListView
    register: RegisterView
    earn: EarnView
    redeem: RedeemView
    view: ViewAndUpdateView


def build_workspace(
    api: Optional[PointsApiClient] = None,
    notifier: Optional[NotificationChannel] = None,
    calculator: Optional[DateRangeCalculator] = None,
) -> Workspace:
    """Screens share the gateway and the notification channel, nothing else"""
    api = api or PointsApiClient()
    notifier = notifier or NotificationChannel()
    return Workspace(
        api=api,
        notifier=notifier,
        customer_list=CustomerListView(api, notifier),
        register=RegisterView(api, notifier),
        earn=EarnView(api, notifier),
        redeem=RedeemView(api, notifier),
        view=ViewAndUpdateView(api, notifier, calculator=calculator),
    )
