"""
Asset persistence.

Besides plain CRUD, the asset repository answers whether a
category or location is still referenced, which the category
and location services check before deleting, and lists the
members of a bulk registration.
"""

from sqlalchemy import select, func

from asset_tracker.models.asset import Asset
from asset_tracker.repositories.base import SQLAlchemyRepository, storage_errors


class AssetRepository(SQLAlchemyRepository[Asset]):
    model = Asset
    entity_name = "Asset"

    def count_by_category(self, category_id: int) -> int:
        return self._count(Asset.category_id == category_id)

    def count_by_location(self, location_id: int) -> int:
        return self._count(Asset.location_id == location_id)

    def list_by_bulk(self, bulk_id: str) -> list[Asset]:
        """Members of one bulk registration, in sequence order."""
        stmt = (
            select(Asset)
            .where(Asset.bulk_id == bulk_id)
            .order_by(Asset.bulk_sequence)
        )
        with storage_errors(self.db, "list bulk assets"):
            return list(self.db.execute(stmt).scalars().all())

    def _count(self, condition) -> int:
        with storage_errors(self.db, "count assets"):
            return self.db.execute(
                select(func.count(Asset.id)).where(condition)
            ).scalar_one()
