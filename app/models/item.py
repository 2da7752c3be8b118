from app import db
from datetime import datetime
from sqlalchemy.ext.associationproxy import association_proxy
from sqlalchemy.ext.orderinglist import ordering_list
import uuid


class ItemCategory(db.Model):
    """Link row between an item and one of its categories.

    ``position`` keeps the order in which the categories were selected.
    """
    __tablename__ = 'item_categories'

    item_id = db.Column(db.String(36), db.ForeignKey('items.id', ondelete='CASCADE'), primary_key=True)
    category_id = db.Column(db.String(36), db.ForeignKey('categories.id'), primary_key=True, index=True)
    position = db.Column(db.Integer, nullable=False, default=0)

    category = db.relationship('Category', lazy='joined')


class Item(db.Model):
    __tablename__ = 'items'

    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    name = db.Column(db.String(100), nullable=False, index=True)
    description = db.Column(db.Text, nullable=False, default="")
    price = db.Column(db.Integer, nullable=False)
    numstock = db.Column(db.Integer, nullable=False, default=0)
    created_at = db.Column(db.DateTime, default=datetime.now)
    updated_at = db.Column(db.DateTime, default=datetime.now, onupdate=datetime.now)

    category_links = db.relationship(
        'ItemCategory',
        order_by='ItemCategory.position',
        collection_class=ordering_list('position'),
        cascade='all, delete-orphan',
    )
    categories = association_proxy(
        'category_links', 'category',
        creator=lambda category: ItemCategory(category=category),
    )

    @property
    def url(self):
        return f"/catalog/item/{self.id}"

    @property
    def category_ids(self):
        return [link.category_id for link in self.category_links]

    def __repr__(self):
        return f"<Item {self.name}>"
