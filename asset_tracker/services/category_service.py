"""
Category service — asset categories and their audit trail.
"""

from asset_tracker.errors import ConflictError
from asset_tracker.models.category import AssetCategory
from asset_tracker.models.enums import AuditEntityType
from asset_tracker.repositories.asset_repository import AssetRepository
from asset_tracker.repositories.base import EntityRepository
from asset_tracker.schemas.category import (
    CategoryCreate,
    CategoryUpdate,
    CategoryResponse,
)
from asset_tracker.services.audit_service import AuditService
from asset_tracker.services.base import AuditedService


class CategoryService(AuditedService[AssetCategory]):
    entity_type = AuditEntityType.CATEGORY
    response_schema = CategoryResponse
    required_fields = frozenset({"code", "name"})

    def __init__(
        self,
        repository: EntityRepository[AssetCategory],
        asset_repository: AssetRepository,
        audit_service: AuditService,
    ):
        super().__init__(repository, audit_service)
        self.asset_repository = asset_repository

    def create(
        self, request: CategoryCreate, actor: str | None = None
    ) -> AssetCategory:
        return self._create(request.model_dump(), actor)

    def update(
        self,
        category_id: int,
        request: CategoryUpdate,
        actor: str | None = None,
    ) -> AssetCategory:
        return self._update(
            category_id, request.model_dump(exclude_unset=True), actor
        )

    def delete(self, category_id: int, actor: str | None = None) -> None:
        """
        Delete a category.

        Refused while any asset still references it, so assets
        never end up pointing at a missing category.
        """
        category = self.repository.get(category_id)
        in_use = self.asset_repository.count_by_category(category_id)
        if in_use:
            raise ConflictError(
                f"Category {category_id} is still used by {in_use} asset(s)"
            )
        self._delete(category, actor)
