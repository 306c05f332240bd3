# Pydantic Schemas Package
from .customer import Customer, CustomerRegister, CustomerUpdate
from .transaction import PurchaseRequest, RedemptionRequest, TransactionResult, PointsByTimeResult

__all__ = [
    "Customer", "CustomerRegister", "CustomerUpdate",
    "PurchaseRequest", "RedemptionRequest", "TransactionResult", "PointsByTimeResult",
]
