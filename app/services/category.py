from app import db
from app.models.category import Category
from app.models.item import Item, ItemCategory
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from flask import current_app


def get_all_categories():
    try:
        return Category.query.order_by(Category.name.asc()).all()
    except SQLAlchemyError as e:
        current_app.logger.exception(f"Database error occurred: {str(e)}")
        raise RuntimeError(f"Database error: {str(e)}")


def get_category_by_id(category_id):
    try:
        return db.session.get(Category, category_id)
    except SQLAlchemyError as e:
        current_app.logger.exception(f"Database error occurred: {str(e)}")
        raise RuntimeError(f"Database error: {str(e)}")


def get_category_by_name(name):
    try:
        return Category.query.filter_by(name=name).first()
    except SQLAlchemyError as e:
        current_app.logger.exception(f"Database error occurred: {str(e)}")
        raise RuntimeError(f"Database error: {str(e)}")


def get_category_items(category_id):
    try:
        return (
            Item.query
            .filter(Item.category_links.any(ItemCategory.category_id == category_id))
            .order_by(Item.name.asc())
            .all()
        )
    except SQLAlchemyError as e:
        current_app.logger.exception(f"Database error occurred: {str(e)}")
        raise RuntimeError(f"Database error: {str(e)}")


def get_category_detail(category_id):
    """Return ``(category, items)``; ``category`` is None when missing."""
    category = get_category_by_id(category_id)
    if not category:
        return None, []
    return category, get_category_items(category_id)


def create_category(data):
    """Insert a category unless one with the same name exists.

    Returns ``(category, created)``. The unique index on ``name`` settles
    concurrent inserts: the loser rolls back and gets the existing row.
    """
    existing = get_category_by_name(data['name'])
    if existing:
        return existing, False

    try:
        new_category = Category(
            name=data['name'],
            description=data.get('description', ''),
        )
        db.session.add(new_category)
        db.session.commit()
        current_app.logger.info(f"Category created: {new_category.id}")
        return new_category, True
    except IntegrityError:
        db.session.rollback()
        current_app.logger.warning(f"Category name already taken: {data['name']}")
        existing = get_category_by_name(data['name'])
        if not existing:
            raise
        return existing, False
    except SQLAlchemyError as e:
        db.session.rollback()
        current_app.logger.exception(f"Database error occurred: {str(e)}")
        raise RuntimeError(f"Database error: {str(e)}")


def update_category(category_id, data):
    category = get_category_by_id(category_id)
    if not category:
        return None

    existing = get_category_by_name(data['name'])
    if existing and existing.id != category.id:
        raise ValueError("Category with this name already exists")

    try:
        category.name = data['name']
        category.description = data.get('description', '')
        db.session.commit()
        current_app.logger.info(f"Category updated: {category.id}")
        return category
    except IntegrityError:
        db.session.rollback()
        raise ValueError("Category with this name already exists")
    except SQLAlchemyError as e:
        db.session.rollback()
        current_app.logger.exception(f"Database error occurred: {str(e)}")
        raise RuntimeError(f"Database error: {str(e)}")


def delete_category(category_id):
    category = get_category_by_id(category_id)
    if not category:
        return False

    if get_category_items(category_id):
        raise ValueError("Cannot delete category that has items. Please remove or reassign items first.")

    try:
        db.session.delete(category)
        db.session.commit()
        current_app.logger.info(f"Category deleted: {category_id}")
        return True
    except SQLAlchemyError as e:
        db.session.rollback()
        current_app.logger.exception(f"Database error occurred: {str(e)}")
        raise RuntimeError(f"Database error: {str(e)}")
