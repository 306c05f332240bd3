# Screen controllers
from .base import BaseViewController, ViewStatus
from .customer_list import CustomerListView
from .register import RegisterView, RegisterForm
from .earn import EarnView, EarnForm
from .redeem import RedeemView, RedeemForm
from .view_and_update import ViewAndUpdateView
from .workspace import Workspace, build_workspace

__all__ = [
    "BaseViewController", "ViewStatus",
    "CustomerListView",
    "RegisterView", "RegisterForm",
    "EarnView", "EarnForm",
    "RedeemView", "RedeemForm",
    "ViewAndUpdateView",
    "Workspace", "build_workspace",
]
