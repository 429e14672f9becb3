"""
Pydantic request models for the API.

Field names follow the camelCase keys of the tool-invocation layer.
"""
from pydantic import BaseModel, Field
from typing import List, Optional, Union


# ============== Matching ==============

class MatchRequest(BaseModel):
    sku: Optional[str] = None
    name: Optional[str] = None
    brand: Optional[str] = None
    category: Optional[str] = None


class LossEstimateRequest(BaseModel):
    nameOrSku: str = Field(..., min_length=1)
    quantity: float = Field(..., gt=0)


# ============== Waste Risk ==============

class WasteRiskRequest(BaseModel):
    """Risk spotlight input. Numbers may arrive as strings ("1,200")."""
    itemName: str
    sku: Optional[str] = None
    quantity: Optional[Union[float, str]] = None
    unitPrice: Optional[Union[float, str]] = None
    daysUntilExpiry: Optional[int] = None
    location: Optional[str] = None
    notes: List[str] = []


# ============== Flash Sale ==============

class FlashSaleRequest(BaseModel):
    productName: str
    currentPrice: float = Field(..., ge=0)
    stock: int = Field(..., ge=0)
    discountPercent: Optional[float] = None
