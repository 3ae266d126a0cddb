from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime, timezone
from typing import Iterable

from bookmark_bureau.models import Category, CategoryLink, Favorite, utcnow


def _isoformat(value: datetime | None) -> str | None:
    if value is None:
        return None
    # SQLite hands back naive datetimes; they are stored as UTC.
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.isoformat()


@dataclass(frozen=True)
class CategoryItem:
    category_id: str
    dashboard_id: str
    title: str
    color: str | None
    sort_order: int
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_row(cls, row: Category) -> CategoryItem:
        return cls(
            category_id=row.category_id,
            dashboard_id=row.dashboard_id,
            title=row.title,
            color=row.color,
            sort_order=row.sort_order,
            created_at=row.created_at,
            updated_at=row.updated_at,
        )

    @property
    def item_id(self) -> str:
        return self.category_id

    def with_sort_order(self, sort_order: int) -> CategoryItem:
        return replace(self, sort_order=sort_order, updated_at=utcnow())

    def as_dict(self):
        return {
            "id": self.category_id,
            "dashboard_id": self.dashboard_id,
            "title": self.title,
            "color": self.color,
            "sort_order": self.sort_order,
            "created_at": _isoformat(self.created_at),
            "updated_at": _isoformat(self.updated_at),
        }


@dataclass(frozen=True)
class CategoryLinkItem:
    category_id: str
    link_id: str
    url: str
    title: str
    sort_order: int
    created_at: datetime

    @classmethod
    def from_row(cls, row: CategoryLink) -> CategoryLinkItem:
        return cls(
            category_id=row.category_id,
            link_id=row.link_id,
            url=row.link.url,
            title=row.link.title,
            sort_order=row.sort_order,
            created_at=row.created_at,
        )

    @property
    def item_id(self) -> str:
        return self.link_id

    def with_sort_order(self, sort_order: int) -> CategoryLinkItem:
        return replace(self, sort_order=sort_order)

    def as_dict(self):
        return {
            "category_id": self.category_id,
            "link_id": self.link_id,
            "url": self.url,
            "title": self.title,
            "sort_order": self.sort_order,
            "created_at": _isoformat(self.created_at),
        }


@dataclass(frozen=True)
class FavoriteItem:
    dashboard_id: str
    link_id: str
    sort_order: int
    created_at: datetime

    @classmethod
    def from_row(cls, row: Favorite) -> FavoriteItem:
        return cls(
            dashboard_id=row.dashboard_id,
            link_id=row.link_id,
            sort_order=row.sort_order,
            created_at=row.created_at,
        )

    @property
    def item_id(self) -> str:
        return self.link_id

    def with_sort_order(self, sort_order: int) -> FavoriteItem:
        return replace(self, sort_order=sort_order)

    def as_dict(self):
        return {
            "dashboard_id": self.dashboard_id,
            "link_id": self.link_id,
            "sort_order": self.sort_order,
            "created_at": _isoformat(self.created_at),
        }


def present(items: Iterable) -> list[dict]:
    return [item.as_dict() for item in items]
