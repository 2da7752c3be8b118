from flask import Blueprint, request, current_app, render_template, redirect, url_for, abort
from app.models.item import Item
from app.schemas.item import ItemForm
from app.utils.forms import normalize_item_form, sanitized_values, validate_form
from app.services.category import get_all_categories
from app.services.items import (
    get_catalog_counts,
    get_all_items,
    get_item_by_id,
    create_item,
    update_item as update_item_service,
    delete_item as delete_item_service,
)

items_bp = Blueprint('items', __name__)


def render_item_form(title, item=None, selected=None, errors=None):
    """Render the item form with every category; ``selected`` ids come back checked."""
    return render_template(
        "item_form.html",
        title=title,
        item=item,
        categories=get_all_categories(),
        selected=set(selected or []),
        errors=errors or [],
    )


def candidate_item(data, item_id=None):
    values = sanitized_values(data)
    item = Item(
        id=item_id,
        name=values["name"],
        description=values["description"],
        price=values["price"],
        numstock=values["numstock"],
    )
    return item, values["category"]


@items_bp.route('', methods=['GET'])
def index():
    current_app.logger.info("GET /catalog HIT...")
    item_count, category_count = get_catalog_counts()
    return render_template(
        "index.html",
        title="Inventory Home",
        item_count=item_count,
        category_count=category_count,
    )


@items_bp.route('/items', methods=['GET'])
def item_list():
    current_app.logger.info("GET /catalog/items HIT...")
    all_items = get_all_items()
    return render_template("item_list.html", title="All Items", item_list=all_items)


@items_bp.route('/item/create', methods=['GET'])
def item_create_get():
    current_app.logger.info("GET /catalog/item/create HIT...")
    return render_item_form("Create Item")


@items_bp.route('/item/create', methods=['POST'])
def item_create_post():
    current_app.logger.info("POST /catalog/item/create HIT...")
    data = normalize_item_form(request.form)
    form, errors = validate_form(ItemForm, data)

    if not errors:
        try:
            item = create_item(form.model_dump())
            return redirect(item.url)
        except ValueError as ve:
            errors = [{"param": "category", "msg": str(ve)}]

    item, selected = candidate_item(data)
    return render_item_form("Create Item", item, selected, errors)


@items_bp.route('/item/<string:item_id>', methods=['GET'])
def item_detail(item_id):
    current_app.logger.info(f"GET /catalog/item/{item_id} HIT...")
    item = get_item_by_id(item_id)
    if not item:
        abort(404, description="Item not found")
    return render_template(
        "item_detail.html",
        title=item.name,
        item=item,
        categories=list(item.categories),
    )


@items_bp.route('/item/<string:item_id>/delete', methods=['GET'])
def item_delete_get(item_id):
    current_app.logger.info(f"GET /catalog/item/{item_id}/delete HIT...")
    item = get_item_by_id(item_id)
    if not item:
        return redirect(url_for('items.item_list'))
    return render_template("item_delete.html", title="Delete Item", item=item)


@items_bp.route('/item/<string:item_id>/delete', methods=['POST'])
def item_delete_post(item_id):
    current_app.logger.info(f"POST /catalog/item/{item_id}/delete HIT...")
    delete_item_service(item_id)
    return redirect(url_for('items.item_list'))


@items_bp.route('/item/<string:item_id>/update', methods=['GET'])
def item_update_get(item_id):
    current_app.logger.info(f"GET /catalog/item/{item_id}/update HIT...")
    item = get_item_by_id(item_id)
    if not item:
        abort(404, description="Item not found")
    return render_item_form("Update Item", item, item.category_ids)


@items_bp.route('/item/<string:item_id>/update', methods=['POST'])
def item_update_post(item_id):
    current_app.logger.info(f"POST /catalog/item/{item_id}/update HIT...")
    if not get_item_by_id(item_id):
        abort(404, description="Item not found")

    data = normalize_item_form(request.form)
    form, errors = validate_form(ItemForm, data)

    if not errors:
        try:
            item = update_item_service(item_id, form.model_dump())
            if not item:
                abort(404, description="Item not found")
            return redirect(item.url)
        except ValueError as ve:
            errors = [{"param": "category", "msg": str(ve)}]

    item, selected = candidate_item(data, item_id)
    return render_item_form("Update Item", item, selected, errors)
