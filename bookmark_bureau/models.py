import uuid
from datetime import datetime, timezone

from bookmark_bureau.extensions import db


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def new_id() -> str:
    return str(uuid.uuid4())


class Dashboard(db.Model):
    __tablename__ = "dashboards"

    dashboard_id = db.Column(db.String(36), primary_key=True, default=new_id)
    title = db.Column(db.String(255), nullable=False)
    description = db.Column(db.Text, nullable=False, default="")
    icon = db.Column(db.String(100), nullable=True)
    created_at = db.Column(db.DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = db.Column(
        db.DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow
    )


class Link(db.Model):
    __tablename__ = "links"

    link_id = db.Column(db.String(36), primary_key=True, default=new_id)
    url = db.Column(db.Text, nullable=False)
    title = db.Column(db.String(255), nullable=False)
    description = db.Column(db.Text, nullable=False, default="")
    icon = db.Column(db.String(100), nullable=True)
    created_at = db.Column(db.DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = db.Column(
        db.DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow
    )

    __table_args__ = (db.Index("ix_links_created_at", "created_at"),)


class Category(db.Model):
    __tablename__ = "categories"

    category_id = db.Column(db.String(36), primary_key=True, default=new_id)
    dashboard_id = db.Column(
        db.String(36),
        db.ForeignKey("dashboards.dashboard_id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    title = db.Column(db.String(255), nullable=False)
    color = db.Column(db.String(6), nullable=True)
    sort_order = db.Column(db.Integer, nullable=False, default=0)
    created_at = db.Column(db.DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = db.Column(
        db.DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow
    )

    __table_args__ = (
        db.Index("ix_categories_dashboard_sort", "dashboard_id", "sort_order"),
    )


class CategoryLink(db.Model):
    __tablename__ = "category_links"

    category_id = db.Column(
        db.String(36),
        db.ForeignKey("categories.category_id", ondelete="CASCADE"),
        primary_key=True,
    )
    link_id = db.Column(
        db.String(36),
        db.ForeignKey("links.link_id", ondelete="CASCADE"),
        primary_key=True,
    )
    sort_order = db.Column(db.Integer, nullable=False, default=0)
    created_at = db.Column(db.DateTime(timezone=True), nullable=False, default=utcnow)

    link = db.relationship("Link")

    __table_args__ = (
        db.Index("ix_category_links_sort", "category_id", "sort_order"),
    )


class Favorite(db.Model):
    __tablename__ = "favorites"

    dashboard_id = db.Column(
        db.String(36),
        db.ForeignKey("dashboards.dashboard_id", ondelete="CASCADE"),
        primary_key=True,
    )
    link_id = db.Column(
        db.String(36),
        db.ForeignKey("links.link_id", ondelete="CASCADE"),
        primary_key=True,
    )
    sort_order = db.Column(db.Integer, nullable=False, default=0)
    created_at = db.Column(db.DateTime(timezone=True), nullable=False, default=utcnow)

    __table_args__ = (
        db.Index("ix_favorites_dashboard_sort", "dashboard_id", "sort_order"),
    )
