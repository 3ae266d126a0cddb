"""Reordering of the links inside a category."""

from __future__ import annotations

from typing import Iterable, Mapping

from flask import current_app
from sqlalchemy.orm import joinedload

from bookmark_bureau.extensions import db
from bookmark_bureau.models import Category, CategoryLink
from bookmark_bureau.services.collection import OrderedCollection
from bookmark_bureau.services.errors import CategoryNotFoundError, LinkNotFoundError
from bookmark_bureau.services.items import CategoryLinkItem
from bookmark_bureau.services.reorder import ReorderEngine, SubmittedOrder


class CategoryLinkReader:
    def read(self, category_id: str) -> OrderedCollection[CategoryLinkItem]:
        if db.session.get(Category, category_id) is None:
            raise CategoryNotFoundError.for_id(category_id)
        rows = (
            CategoryLink.query.options(joinedload(CategoryLink.link))
            .filter_by(category_id=category_id)
            .order_by(CategoryLink.sort_order.asc(), CategoryLink.created_at.asc())
            .all()
        )
        return OrderedCollection(CategoryLinkItem.from_row(row) for row in rows)


class CategoryLinkWriter:
    def write(
        self, category_id: str, links: OrderedCollection[CategoryLinkItem]
    ) -> None:
        try:
            for link in links:
                CategoryLink.query.filter_by(
                    category_id=category_id, link_id=link.link_id
                ).update({"sort_order": link.sort_order})
            db.session.commit()
        except Exception:
            db.session.rollback()
            current_app.logger.warning(
                "Rolled back link reorder for category %s", category_id
            )
            raise


def _link_not_found(category_id: str, link_id: str) -> LinkNotFoundError:
    return LinkNotFoundError.for_id(link_id, category_id)


def build_engine() -> ReorderEngine[CategoryLinkItem]:
    return ReorderEngine(CategoryLinkReader(), CategoryLinkWriter(), _link_not_found)


def reorder_category_links(
    category_id: str, rows: Iterable[Mapping]
) -> OrderedCollection[CategoryLinkItem]:
    submitted = SubmittedOrder.from_rows(rows, "link_id")
    return build_engine().reorder(category_id, submitted)
