"""Asset category persistence."""

from asset_tracker.models.category import AssetCategory
from asset_tracker.repositories.base import SQLAlchemyRepository


class CategoryRepository(SQLAlchemyRepository[AssetCategory]):
    model = AssetCategory
    entity_name = "Category"
