"""
Customer Schemas
"""
from pydantic import BaseModel, Field
from typing import Optional


class Customer(BaseModel):
    """Canonical customer entity; unknown server fields are kept as extras"""
    id: str
    name: str = ""
    total_points: Optional[int] = Field(default=None, alias="totalPoints")  # server-authoritative

    class Config:
        populate_by_name = True
        extra = "allow"
        coerce_numbers_to_str = True


class CustomerRegister(BaseModel):
    customer_id: str = Field(alias="customerId")
    name: str
    initial_points: int = Field(default=0, alias="initialPoints")

    class Config:
        populate_by_name = True


class CustomerUpdate(BaseModel):
    name: str
