"""
db.py - Store facade over the data/service layers.
Single responsibility: provide the narrow store API used by the UI while
delegating to repository/service modules.
"""
from todo_tui.config import DB_PATH
from todo_tui.database.connection import Database
from todo_tui.database.schema import initialize_schema
from todo_tui.domain.filters import ItemFilter
from todo_tui.services import group_service, item_service, tag_service


class Store:
    def __init__(self, database: Database):
        self.database = database

    @classmethod
    def open(cls, path: str = DB_PATH) -> "Store":
        database = Database(path)
        initialize_schema(database)
        return cls(database)

    def close(self) -> None:
        self.database.close()

    # ---------------------------------------------------------------------------
    # Items
    # ---------------------------------------------------------------------------

    def list_items(self, flt: ItemFilter | None = None):
        return item_service.list_items(self.database, flt)

    def get_item(self, item_id: int):
        return item_service.get_item(self.database, item_id)

    def create_item(self, title: str, **fields) -> int:
        return item_service.create_item(self.database, title, **fields)

    def update_item(self, item_id: int, **fields) -> None:
        item_service.update_item(self.database, item_id, **fields)

    def toggle_item_completion(self, item_id: int) -> str:
        return item_service.toggle_completion(self.database, item_id)

    def delete_item(self, item_id: int) -> bool:
        return item_service.delete_item(self.database, item_id)

    def count_items_by_group(self) -> dict[int, int]:
        return item_service.count_by_group(self.database)

    def count_items_by_tag(self) -> dict[int, int]:
        return item_service.count_by_tag(self.database)

    # ---------------------------------------------------------------------------
    # Groups
    # ---------------------------------------------------------------------------

    def list_groups(self):
        return group_service.list_all(self.database)

    def get_group(self, group_id: int):
        return group_service.get(self.database, group_id)

    def create_group(self, name: str, description: str | None = None, color: str | None = None) -> int:
        return group_service.create(self.database, name, description, color)

    def update_group(self, group_id: int, **fields) -> None:
        group_service.update(self.database, group_id, **fields)

    def delete_group(self, group_id: int) -> bool:
        return group_service.delete(self.database, group_id)

    # ---------------------------------------------------------------------------
    # Tags
    # ---------------------------------------------------------------------------

    def list_tags(self):
        return tag_service.list_all(self.database)

    def get_tag(self, tag_id: int):
        return tag_service.get(self.database, tag_id)

    def create_tag(self, name: str, color: str | None = None) -> int:
        return tag_service.create(self.database, name, color)

    def update_tag(self, tag_id: int, **fields) -> None:
        tag_service.update(self.database, tag_id, **fields)

    def delete_tag(self, tag_id: int) -> bool:
        return tag_service.delete(self.database, tag_id)
