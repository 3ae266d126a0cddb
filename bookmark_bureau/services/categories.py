"""Reordering of the categories on a dashboard."""

from __future__ import annotations

from typing import Iterable, Mapping

from flask import current_app

from bookmark_bureau.extensions import db
from bookmark_bureau.models import Category, Dashboard
from bookmark_bureau.services.collection import OrderedCollection
from bookmark_bureau.services.errors import (
    CategoryNotFoundError,
    DashboardNotFoundError,
)
from bookmark_bureau.services.items import CategoryItem
from bookmark_bureau.services.reorder import ReorderEngine, SubmittedOrder


class CategoryReader:
    def read(self, dashboard_id: str) -> OrderedCollection[CategoryItem]:
        if db.session.get(Dashboard, dashboard_id) is None:
            raise DashboardNotFoundError.for_id(dashboard_id)
        rows = (
            Category.query.filter_by(dashboard_id=dashboard_id)
            .order_by(Category.sort_order.asc(), Category.created_at.asc())
            .all()
        )
        return OrderedCollection(CategoryItem.from_row(row) for row in rows)


class CategoryWriter:
    def write(
        self, dashboard_id: str, categories: OrderedCollection[CategoryItem]
    ) -> None:
        try:
            for category in categories:
                Category.query.filter_by(
                    dashboard_id=dashboard_id, category_id=category.category_id
                ).update(
                    {
                        "sort_order": category.sort_order,
                        "updated_at": category.updated_at,
                    }
                )
            db.session.commit()
        except Exception:
            db.session.rollback()
            current_app.logger.warning(
                "Rolled back category reorder for dashboard %s", dashboard_id
            )
            raise


def _category_not_found(dashboard_id: str, category_id: str) -> CategoryNotFoundError:
    return CategoryNotFoundError.for_id(category_id, dashboard_id)


def build_engine() -> ReorderEngine[CategoryItem]:
    return ReorderEngine(CategoryReader(), CategoryWriter(), _category_not_found)


def reorder_categories(
    dashboard_id: str, rows: Iterable[Mapping]
) -> OrderedCollection[CategoryItem]:
    """Apply ``[{"category_id": ..., "sort_order": ...}]`` to a dashboard."""
    submitted = SubmittedOrder.from_rows(rows, "category_id")
    return build_engine().reorder(dashboard_id, submitted)
