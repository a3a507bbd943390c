"""
Pydantic schemas for assets.

These define the API contract. The response schema doubles
as the snapshot format stored in audit log changes.
"""

from datetime import date, datetime
from decimal import Decimal

from pydantic import BaseModel, Field

from asset_tracker.models.enums import AssetStatus


# --- Request Schemas ---

class AssetCreate(BaseModel):
    code: str = Field(min_length=1, max_length=50)
    name: str = Field(min_length=1, max_length=200)
    specification: str | None = None
    category_id: int
    location_id: int | None = None
    status: AssetStatus = AssetStatus.GOOD
    quantity: int = Field(default=1, ge=1)
    unit: str = Field(default="unit", min_length=1, max_length=20)
    acquisition_date: date | None = None
    acquisition_price: Decimal = Field(default=Decimal("0"), ge=0, decimal_places=2)
    procurement_source: str | None = Field(default=None, max_length=100)
    economic_life_years: int = Field(default=5, ge=1)


class AssetUpdate(BaseModel):
    """
    Partial update. Only the fields the client sends are changed,
    so moving an asset is just {"location_id": 7}.
    """
    code: str | None = Field(default=None, min_length=1, max_length=50)
    name: str | None = Field(default=None, min_length=1, max_length=200)
    specification: str | None = None
    category_id: int | None = None
    location_id: int | None = None
    status: AssetStatus | None = None
    quantity: int | None = Field(default=None, ge=1)
    unit: str | None = Field(default=None, min_length=1, max_length=20)
    acquisition_date: date | None = None
    acquisition_price: Decimal | None = Field(default=None, ge=0, decimal_places=2)
    procurement_source: str | None = Field(default=None, max_length=100)
    economic_life_years: int | None = Field(default=None, ge=1)


class AssetBulkCreate(BaseModel):
    """
    Register several identical items at once. Each item becomes
    its own asset, coded "{code}-001", "{code}-002", ... with a
    quantity of one.
    """
    code: str = Field(min_length=1, max_length=45)
    name: str = Field(min_length=1, max_length=200)
    specification: str | None = None
    category_id: int
    location_id: int | None = None
    status: AssetStatus = AssetStatus.GOOD
    unit: str = Field(default="unit", min_length=1, max_length=20)
    acquisition_date: date | None = None
    acquisition_price: Decimal = Field(default=Decimal("0"), ge=0, decimal_places=2)
    procurement_source: str | None = Field(default=None, max_length=100)
    economic_life_years: int = Field(default=5, ge=1)
    count: int = Field(ge=2, le=1000)


# --- Response Schemas ---

class AssetResponse(BaseModel):
    id: int
    code: str
    name: str
    specification: str | None
    category_id: int
    location_id: int | None
    status: AssetStatus
    quantity: int
    unit: str
    acquisition_date: date | None
    acquisition_price: Decimal
    procurement_source: str | None
    economic_life_years: int
    accumulated_depreciation: Decimal
    residual_value: Decimal
    bulk_id: str | None
    bulk_sequence: int | None
    bulk_total_count: int | None
    is_bulk_parent: bool
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
