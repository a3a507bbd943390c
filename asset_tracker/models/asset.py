"""
Asset model.

A physical item being tracked. Every asset belongs to one
category and may be placed in one location. Both are
references: deleting an asset never touches them.

Assets registered together as a bulk share a bulk_id; each
member is its own row with a sequence number, and the first
member is marked as the bulk parent. Residual value and
accumulated depreciation are computed by the service on every
write that touches price, acquisition date or economic life.
"""

from datetime import date, datetime
from decimal import Decimal

from sqlalchemy import (
    String, Text, Date, DateTime, Numeric, ForeignKey, Boolean,
    Enum as SAEnum,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from asset_tracker.models.base import Base, utcnow
from asset_tracker.models.enums import AssetStatus


class Asset(Base):
    __tablename__ = "assets"

    id: Mapped[int] = mapped_column(primary_key=True)
    code: Mapped[str] = mapped_column(String(50), unique=True, nullable=False)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    specification: Mapped[str | None] = mapped_column(Text, nullable=True)
    category_id: Mapped[int] = mapped_column(
        ForeignKey("asset_categories.id"), nullable=False, index=True
    )
    location_id: Mapped[int | None] = mapped_column(
        ForeignKey("locations.id"), nullable=True, index=True
    )
    status: Mapped[AssetStatus] = mapped_column(
        SAEnum(AssetStatus, name="asset_status_enum", create_constraint=True),
        nullable=False,
        default=AssetStatus.GOOD,
    )
    quantity: Mapped[int] = mapped_column(nullable=False, default=1)
    unit: Mapped[str] = mapped_column(String(20), nullable=False, default="unit")
    acquisition_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    acquisition_price: Mapped[Decimal] = mapped_column(
        Numeric(19, 2), nullable=False, default=Decimal("0")
    )
    procurement_source: Mapped[str | None] = mapped_column(
        String(100), nullable=True
    )
    economic_life_years: Mapped[int] = mapped_column(nullable=False, default=5)
    accumulated_depreciation: Mapped[Decimal] = mapped_column(
        Numeric(19, 2), nullable=False, default=Decimal("0")
    )
    residual_value: Mapped[Decimal] = mapped_column(
        Numeric(19, 2), nullable=False, default=Decimal("0")
    )

    # Bulk registration
    bulk_id: Mapped[str | None] = mapped_column(
        String(36), nullable=True, index=True
    )
    bulk_sequence: Mapped[int | None] = mapped_column(nullable=True)
    bulk_total_count: Mapped[int | None] = mapped_column(nullable=True)
    is_bulk_parent: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, default=utcnow
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, default=utcnow, onupdate=utcnow
    )

    # Relationships
    category: Mapped["AssetCategory"] = relationship()
    location: Mapped["Location | None"] = relationship()

    def __repr__(self) -> str:
        return f"<Asset {self.code} {self.name} ({self.status.value})>"
