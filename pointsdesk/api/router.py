"""
API Router - JSON Endpoints over the screen controllers
"""
from fastapi import APIRouter, Depends, Path, Request
from pydantic import BaseModel, Field
from typing import Optional, Union
from datetime import datetime

from pointsdesk import __version__
from pointsdesk.views import Workspace

api_router = APIRouter(tags=["API"])


def get_workspace(request: Request) -> Workspace:
    return request.app.state.workspace


# ========== Schemas ==========

class _CamelModel(BaseModel):
    class Config:
        populate_by_name = True


class CustomerLookup(_CamelModel):
    customer_id: str = Field(alias="customerId")


class NameUpdate(BaseModel):
    name: str


class RegisterSubmit(_CamelModel):
    customer_id: Optional[str] = Field(default=None, alias="customerId")
    name: Optional[str] = None
    initial_points: Optional[Union[str, float]] = Field(default=None, alias="initialPoints")


class EarnSubmit(_CamelModel):
    customer_id: Optional[str] = Field(default=None, alias="customerId")
    amount: Optional[Union[str, float]] = None


class RedeemSubmit(_CamelModel):
    customer_id: Optional[str] = Field(default=None, alias="customerId")
    points_to_redeem: Optional[Union[str, float]] = Field(default=None, alias="pointsToRedeem")
    reward_description: Optional[str] = Field(default=None, alias="rewardDescription")


class RangeSubmit(_CamelModel):
    start_date: Optional[str] = Field(default=None, alias="startDate")
    end_date: Optional[str] = Field(default=None, alias="endDate")


def _fields(body: BaseModel) -> dict:
    return body.model_dump(exclude_none=True)


# ===================== HEALTH & STATUS =====================

@api_router.get("/status")
async def api_status():
    return {"status": "ok", "version": __version__, "timestamp": datetime.now().isoformat()}


# ===================== NOTIFICATION =====================

@api_router.get("/notification")
async def current_notification(workspace: Workspace = Depends(get_workspace)):
    message = workspace.notifier.current
    return {"notification": message.to_dict() if message else None}


@api_router.delete("/notification")
async def dismiss_notification(workspace: Workspace = Depends(get_workspace)):
    workspace.notifier.dismiss()
    return {"notification": None}


# ===================== CUSTOMER LIST =====================

@api_router.get("/customers")
async def customer_list_state(workspace: Workspace = Depends(get_workspace)):
    return workspace.customer_list.snapshot()


@api_router.post("/customers/refresh")
async def refresh_customers(workspace: Workspace = Depends(get_workspace)):
    await workspace.customer_list.refresh()
    return workspace.customer_list.snapshot()


@api_router.post("/customers/delete/confirm")
async def confirm_customer_delete(workspace: Workspace = Depends(get_workspace)):
    await workspace.customer_list.confirm_delete()
    return workspace.customer_list.snapshot()


@api_router.post("/customers/delete/cancel")
async def cancel_customer_delete(workspace: Workspace = Depends(get_workspace)):
    workspace.customer_list.cancel_delete()
    return workspace.customer_list.snapshot()


@api_router.put("/customers/{customer_id}")
async def update_listed_customer(customer_id: str, body: NameUpdate, workspace: Workspace = Depends(get_workspace)):
    await workspace.customer_list.update_customer(customer_id, body.name)
    return workspace.customer_list.snapshot()


@api_router.post("/customers/{customer_id}/delete")
async def request_customer_delete(customer_id: str, workspace: Workspace = Depends(get_workspace)):
    workspace.customer_list.request_delete(customer_id)
    return workspace.customer_list.snapshot()


# ===================== REGISTER / EARN / REDEEM =====================

@api_router.get("/register")
async def register_state(workspace: Workspace = Depends(get_workspace)):
    return workspace.register.snapshot()


@api_router.post("/register")
async def register_customer(body: RegisterSubmit, workspace: Workspace = Depends(get_workspace)):
    await workspace.register.submit(**_fields(body))
    return workspace.register.snapshot()


@api_router.get("/earn")
async def earn_state(workspace: Workspace = Depends(get_workspace)):
    return workspace.earn.snapshot()


@api_router.post("/earn")
async def earn_points(body: EarnSubmit, workspace: Workspace = Depends(get_workspace)):
    await workspace.earn.submit(**_fields(body))
    return workspace.earn.snapshot()


@api_router.get("/redeem")
async def redeem_state(workspace: Workspace = Depends(get_workspace)):
    return workspace.redeem.snapshot()


@api_router.post("/redeem")
async def redeem_points(body: RedeemSubmit, workspace: Workspace = Depends(get_workspace)):
    await workspace.redeem.submit(**_fields(body))
    return workspace.redeem.snapshot()


# ===================== VIEW & UPDATE =====================

@api_router.get("/view")
async def view_state(workspace: Workspace = Depends(get_workspace)):
    return workspace.view.snapshot()


@api_router.post("/view/fetch")
async def view_fetch(body: CustomerLookup, workspace: Workspace = Depends(get_workspace)):
    await workspace.view.fetch(body.customer_id)
    return workspace.view.snapshot()


@api_router.put("/view/name")
async def view_update_name(body: NameUpdate, workspace: Workspace = Depends(get_workspace)):
    await workspace.view.update_name(body.name)
    return workspace.view.snapshot()


@api_router.post("/view/delete")
async def view_request_delete(workspace: Workspace = Depends(get_workspace)):
    workspace.view.request_delete()
    return workspace.view.snapshot()


@api_router.post("/view/delete/confirm")
async def view_confirm_delete(workspace: Workspace = Depends(get_workspace)):
    await workspace.view.confirm_delete()
    return workspace.view.snapshot()


@api_router.post("/view/delete/cancel")
async def view_cancel_delete(workspace: Workspace = Depends(get_workspace)):
    workspace.view.cancel_delete()
    return workspace.view.snapshot()


@api_router.post("/view/points/dialog")
async def view_open_range_dialog(workspace: Workspace = Depends(get_workspace)):
    workspace.view.open_range_dialog()
    return workspace.view.snapshot()


@api_router.delete("/view/points/dialog")
async def view_close_range_dialog(workspace: Workspace = Depends(get_workspace)):
    workspace.view.close_range_dialog()
    return workspace.view.snapshot()


@api_router.post("/view/points/range")
async def view_points_in_range(body: RangeSubmit, workspace: Workspace = Depends(get_workspace)):
    await workspace.view.fetch_points_in_range(body.start_date, body.end_date)
    return workspace.view.snapshot()


@api_router.post("/view/points/last/{months}")
async def view_points_last_months(months: int = Path(..., ge=1), workspace: Workspace = Depends(get_workspace)):
    await workspace.view.fetch_points_for_last_months(months)
    return workspace.view.snapshot()
