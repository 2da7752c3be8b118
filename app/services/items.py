from app import db
from app.models.category import Category
from app.models.item import Item
from flask import current_app
from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import selectinload


def get_catalog_counts():
    """Count items and categories in a single round trip."""
    try:
        item_count, category_count = db.session.execute(
            select(
                select(func.count(Item.id)).correlate(None).scalar_subquery(),
                select(func.count(Category.id)).correlate(None).scalar_subquery(),
            )
        ).one()
        return item_count, category_count
    except SQLAlchemyError as e:
        current_app.logger.exception(f"Database error occurred {str(e)}")
        raise RuntimeError(f"Database error: {str(e)}")


def get_all_items():
    try:
        return Item.query.order_by(Item.name.asc()).all()
    except SQLAlchemyError as e:
        current_app.logger.exception(f"Database error occurred {str(e)}")
        raise RuntimeError(f"Database error: {str(e)}")


def get_item_by_id(item_id):
    try:
        return (
            Item.query
            .options(selectinload(Item.category_links))
            .filter(Item.id == item_id)
            .first()
        )
    except SQLAlchemyError as e:
        current_app.logger.exception(f"Database error occurred {str(e)}")
        raise RuntimeError(f"Database error: {str(e)}")


def resolve_categories(category_ids):
    """Load categories for ``category_ids`` keeping the given order.

    Raises ValueError if any id does not match a category.
    """
    if not category_ids:
        return []
    try:
        found = Category.query.filter(Category.id.in_(category_ids)).all()
    except SQLAlchemyError as e:
        current_app.logger.exception(f"Database error occurred {str(e)}")
        raise RuntimeError(f"Database error: {str(e)}")

    by_id = {category.id: category for category in found}
    missing = [category_id for category_id in category_ids if category_id not in by_id]
    if missing:
        raise ValueError("Selected category does not exist")
    return [by_id[category_id] for category_id in category_ids]


def create_item(data):
    categories = resolve_categories(data.get('category', []))
    try:
        item = Item(
            name=data['name'],
            description=data.get('description', ''),
            price=data['price'],
            numstock=data['numstock'],
        )
        for category in categories:
            item.categories.append(category)
        db.session.add(item)
        db.session.commit()
        current_app.logger.info(f"Item created: {item.id}")
        return item
    except SQLAlchemyError as e:
        db.session.rollback()
        current_app.logger.exception(f"Database error occurred {str(e)}")
        raise RuntimeError(f"Database error: {str(e)}")


def update_item(item_id, data):
    item = get_item_by_id(item_id)
    if not item:
        return None

    categories = resolve_categories(data.get('category', []))
    try:
        item.name = data['name']
        item.description = data.get('description', '')
        item.price = data['price']
        item.numstock = data['numstock']

        # drop the old links before adding new ones with the same keys
        item.category_links.clear()
        db.session.flush()
        for category in categories:
            item.categories.append(category)

        db.session.commit()
        current_app.logger.info(f"Item updated: {item.id}")
        return item
    except SQLAlchemyError as e:
        db.session.rollback()
        current_app.logger.exception(f"Database error occurred {str(e)}")
        raise RuntimeError(f"Database error: {str(e)}")


def delete_item(item_id):
    item = get_item_by_id(item_id)
    if not item:
        return False
    try:
        db.session.delete(item)
        db.session.commit()
        current_app.logger.info(f"Item deleted: {item_id}")
        return True
    except SQLAlchemyError as e:
        db.session.rollback()
        current_app.logger.exception(f"Database error occurred {str(e)}")
        raise RuntimeError(f"Database error: {str(e)}")
