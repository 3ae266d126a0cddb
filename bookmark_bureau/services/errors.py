from __future__ import annotations


class NotFoundError(LookupError):
    """A requested item is not a member of its parent collection."""

    resource = "item"

    def __init__(
        self,
        message: str,
        item_id: str | None = None,
        parent_id: str | None = None,
    ) -> None:
        super().__init__(message)
        self.item_id = item_id
        self.parent_id = parent_id


class DashboardNotFoundError(NotFoundError):
    resource = "dashboard"

    @classmethod
    def for_id(cls, dashboard_id: str) -> DashboardNotFoundError:
        return cls(f"Dashboard not found: {dashboard_id}", item_id=dashboard_id)


class CategoryNotFoundError(NotFoundError):
    resource = "category"

    @classmethod
    def for_id(
        cls, category_id: str, dashboard_id: str | None = None
    ) -> CategoryNotFoundError:
        message = f"Category not found: {category_id}"
        if dashboard_id is not None:
            message = f"{message} (dashboard {dashboard_id})"
        return cls(message, item_id=category_id, parent_id=dashboard_id)


class LinkNotFoundError(NotFoundError):
    resource = "link"

    @classmethod
    def for_id(cls, link_id: str, category_id: str | None = None) -> LinkNotFoundError:
        message = f"Link not found: {link_id}"
        if category_id is not None:
            message = f"{message} (category {category_id})"
        return cls(message, item_id=link_id, parent_id=category_id)


class FavoriteNotFoundError(NotFoundError):
    resource = "favorite"

    @classmethod
    def for_dashboard_and_link(
        cls, dashboard_id: str, link_id: str
    ) -> FavoriteNotFoundError:
        return cls(
            f"Link {link_id} is not a favorite of dashboard {dashboard_id}",
            item_id=link_id,
            parent_id=dashboard_id,
        )


class DuplicateItemError(ValueError):
    """Raised when an ordered collection is built with a repeated identifier."""

    def __init__(self, item_id: str) -> None:
        self.item_id = item_id
        super().__init__(f"Duplicate item in collection: {item_id}")
