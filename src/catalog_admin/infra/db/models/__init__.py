from catalog_admin.infra.db.models.base import Base
from catalog_admin.infra.db.models.category import CategoryRow

__all__ = ["Base", "CategoryRow"]
