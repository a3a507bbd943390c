"""
Asset service — the tracked items themselves.

Assets reference a category and, optionally, a location.
This service checks that those references resolve before
writing, keeps residual value and accumulated depreciation
in step with price, acquisition date and economic life, then
hands the audited write to AuditedService.

A bulk registration creates one asset per item. Each member
is an ordinary create with its own audit record.
"""

import uuid
from datetime import date
from typing import Any

from asset_tracker.errors import NotFoundError, ValidationError
from asset_tracker.models.asset import Asset
from asset_tracker.models.category import AssetCategory
from asset_tracker.models.enums import AssetStatus, AuditEntityType
from asset_tracker.models.location import Location
from asset_tracker.observability import get_logger
from asset_tracker.repositories.asset_repository import AssetRepository
from asset_tracker.repositories.base import EntityRepository
from asset_tracker.schemas.asset import (
    AssetBulkCreate,
    AssetCreate,
    AssetUpdate,
    AssetResponse,
)
from asset_tracker.services.audit_service import AuditService
from asset_tracker.services.base import AuditedService
from asset_tracker.services.valuation import depreciate

logger = get_logger(__name__)

VALUATION_INPUTS = ("acquisition_price", "acquisition_date", "economic_life_years")


class AssetService(AuditedService[Asset]):
    entity_type = AuditEntityType.ASSET
    response_schema = AssetResponse
    required_fields = frozenset({
        "code", "name", "category_id", "status",
        "quantity", "unit", "acquisition_price", "economic_life_years",
    })

    def __init__(
        self,
        repository: AssetRepository,
        category_repository: EntityRepository[AssetCategory],
        location_repository: EntityRepository[Location],
        audit_service: AuditService,
    ):
        super().__init__(repository, audit_service)
        self.category_repository = category_repository
        self.location_repository = location_repository

    def _validate_references(self, fields: dict[str, Any]) -> None:
        """Raise ValidationError if a referenced category or location is missing."""
        try:
            if fields.get("category_id") is not None:
                self.category_repository.get(fields["category_id"])
            if fields.get("location_id") is not None:
                self.location_repository.get(fields["location_id"])
        except NotFoundError as e:
            raise ValidationError(f"Invalid reference: {e}") from e

    @staticmethod
    def _with_valuation(fields: dict[str, Any]) -> dict[str, Any]:
        accumulated, residual = depreciate(
            fields["acquisition_price"],
            fields["acquisition_date"],
            fields["economic_life_years"],
            as_of=date.today(),
        )
        return {
            **fields,
            "accumulated_depreciation": accumulated,
            "residual_value": residual,
        }

    def _derive_update(self, entity: Asset, fields: dict[str, Any]) -> dict[str, Any]:
        if not any(name in fields for name in VALUATION_INPUTS):
            return fields
        merged = {
            name: fields.get(name, getattr(entity, name))
            for name in VALUATION_INPUTS
        }
        valued = self._with_valuation(merged)
        return {
            **fields,
            "accumulated_depreciation": valued["accumulated_depreciation"],
            "residual_value": valued["residual_value"],
        }

    def create(self, request: AssetCreate, actor: str | None = None) -> Asset:
        fields = request.model_dump()
        self._validate_references(fields)
        return self._create(self._with_valuation(fields), actor)

    def create_bulk(
        self, request: AssetBulkCreate, actor: str | None = None
    ) -> list[Asset]:
        """
        Register request.count identical items under one bulk_id.

        Members are created in sequence order, each committed and
        audited on its own. If one fails (e.g. its code is taken),
        the error propagates and the members already created stay.
        """
        fields = request.model_dump(exclude={"count"})
        self._validate_references(fields)
        base_code = fields.pop("code")
        fields = self._with_valuation(fields)
        bulk_id = str(uuid.uuid4())

        members = []
        for sequence in range(1, request.count + 1):
            members.append(self._create({
                **fields,
                "code": f"{base_code}-{sequence:03d}",
                "quantity": 1,
                "bulk_id": bulk_id,
                "bulk_sequence": sequence,
                "bulk_total_count": request.count,
                "is_bulk_parent": sequence == 1,
            }, actor))

        logger.info(
            "asset_bulk_created", bulk_id=bulk_id, count=request.count, actor=actor
        )
        return members

    def update(
        self,
        asset_id: int,
        request: AssetUpdate,
        actor: str | None = None,
    ) -> Asset:
        """
        Apply a partial update. Moving an asset is an update of
        location_id; sending location_id=null takes it out of any
        location.
        """
        fields = request.model_dump(exclude_unset=True)
        self._validate_references(fields)
        return self._update(asset_id, fields, actor)

    def delete(self, asset_id: int, actor: str | None = None) -> None:
        asset = self.repository.get(asset_id)
        self._delete(asset, actor)

    def list_assets(
        self,
        category_id: int | None = None,
        location_id: int | None = None,
        status: AssetStatus | None = None,
    ) -> list[Asset]:
        return self.list_all(
            category_id=category_id,
            location_id=location_id,
            status=status,
        )

    def list_bulk(self, bulk_id: str) -> list[Asset]:
        members = self.repository.list_by_bulk(bulk_id)
        if not members:
            raise NotFoundError("Bulk", bulk_id)
        return members
