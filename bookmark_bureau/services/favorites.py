from __future__ import annotations

from typing import Iterable, Mapping

from flask import current_app

from bookmark_bureau.extensions import db
from bookmark_bureau.models import Dashboard, Favorite
from bookmark_bureau.services.collection import OrderedCollection
from bookmark_bureau.services.errors import (
    DashboardNotFoundError,
    FavoriteNotFoundError,
)
from bookmark_bureau.services.items import FavoriteItem
from bookmark_bureau.services.reorder import ReorderEngine, SubmittedOrder


class FavoriteReader:
    def read(self, dashboard_id: str) -> OrderedCollection[FavoriteItem]:
        if db.session.get(Dashboard, dashboard_id) is None:
            raise DashboardNotFoundError.for_id(dashboard_id)
        rows = (
            Favorite.query.filter_by(dashboard_id=dashboard_id)
            .order_by(Favorite.sort_order.asc(), Favorite.created_at.asc())
            .all()
        )
        return OrderedCollection(FavoriteItem.from_row(row) for row in rows)


class FavoriteWriter:
    def write(
        self, dashboard_id: str, favorites: OrderedCollection[FavoriteItem]
    ) -> None:
        try:
            for favorite in favorites:
                Favorite.query.filter_by(
                    dashboard_id=dashboard_id, link_id=favorite.link_id
                ).update({"sort_order": favorite.sort_order})
            db.session.commit()
        except Exception:
            db.session.rollback()
            current_app.logger.warning(
                "Rolled back favorite reorder for dashboard %s", dashboard_id
            )
            raise


def build_engine() -> ReorderEngine[FavoriteItem]:
    return ReorderEngine(
        FavoriteReader(),
        FavoriteWriter(),
        FavoriteNotFoundError.for_dashboard_and_link,
    )


def reorder_favorites(
    dashboard_id: str, rows: Iterable[Mapping]
) -> OrderedCollection[FavoriteItem]:
    submitted = SubmittedOrder.from_rows(rows, "link_id")
    return build_engine().reorder(dashboard_id, submitted)
