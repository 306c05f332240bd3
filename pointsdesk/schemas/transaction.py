"""
Transaction Schemas - purchase, redemption and points-by-time payloads
"""
from pydantic import BaseModel, Field
from typing import Optional


class PurchaseRequest(BaseModel):
    customer_id: str = Field(alias="customerId")
    amount: float

    class Config:
        populate_by_name = True


class RedemptionRequest(BaseModel):
    customer_id: str = Field(alias="customerId")
    points_to_redeem: int = Field(alias="pointsToRedeem")
    reward_description: str = Field(default="", alias="rewardDescription")

    class Config:
        populate_by_name = True


class TransactionResult(BaseModel):
    """Outcome of a purchase or redemption; consumed once, never stored"""
    message: str
    customer_id: Optional[str] = Field(default=None, alias="customerId")
    new_total_points: Optional[int] = Field(default=None, alias="newTotalPoints")

    class Config:
        populate_by_name = True
        extra = "allow"


class PointsByTimeResult(BaseModel):
    customer_id: Optional[str] = Field(default=None, alias="customerId")
    start_date: str = Field(alias="startDate")
    end_date: str = Field(alias="endDate")
    points_earned: int = Field(default=0, alias="pointsEarned")

    class Config:
        populate_by_name = True
        extra = "allow"
