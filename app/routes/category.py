from flask import Blueprint, request, current_app, render_template, redirect, url_for, abort
from app.models.category import Category
from app.schemas.category import CategoryForm
from app.utils.forms import normalize_category_form, sanitized_values, validate_form
from app.services.category import (
    get_all_categories,
    get_category_by_id,
    get_category_detail,
    get_category_items,
    create_category,
    update_category as update_category_service,
    delete_category as delete_category_service,
)

category_bp = Blueprint('categories', __name__)


def render_category_form(title, category=None, errors=None):
    return render_template(
        "category_form.html",
        title=title,
        category=category,
        errors=errors or [],
    )


@category_bp.route('/categories', methods=['GET'])
def category_list():
    current_app.logger.info("GET /catalog/categories HIT...")
    all_categories = get_all_categories()
    return render_template("category_list.html", title="All Categories", category_list=all_categories)


@category_bp.route('/category/create', methods=['GET'])
def category_create_get():
    current_app.logger.info("GET /catalog/category/create HIT...")
    return render_category_form("Create Category")


@category_bp.route('/category/create', methods=['POST'])
def category_create_post():
    current_app.logger.info("POST /catalog/category/create HIT...")
    data = normalize_category_form(request.form)
    form, errors = validate_form(CategoryForm, data)

    if errors:
        values = sanitized_values(data)
        category = Category(name=values["name"], description=values["description"])
        return render_category_form("Create Category", category, errors)

    category, created = create_category(form.model_dump())
    if not created:
        current_app.logger.info(f"Category '{category.name}' already exists, redirecting")
    return redirect(category.url)


@category_bp.route('/category/<string:category_id>', methods=['GET'])
def category_detail(category_id):
    current_app.logger.info(f"GET /catalog/category/{category_id} HIT...")
    category, items = get_category_detail(category_id)
    if not category:
        abort(404, description="Category not found")
    return render_template(
        "category_detail.html",
        title=category.name,
        category=category,
        items=items,
    )


@category_bp.route('/category/<string:category_id>/delete', methods=['GET'])
def category_delete_get(category_id):
    current_app.logger.info(f"GET /catalog/category/{category_id}/delete HIT...")
    category = get_category_by_id(category_id)
    if not category:
        return redirect(url_for('categories.category_list'))
    return render_template(
        "category_delete.html",
        title="Delete Category",
        category=category,
        items=get_category_items(category_id),
    )


@category_bp.route('/category/<string:category_id>/delete', methods=['POST'])
def category_delete_post(category_id):
    current_app.logger.info(f"POST /catalog/category/{category_id}/delete HIT...")
    try:
        delete_category_service(category_id)
    except ValueError as ve:
        current_app.logger.warning(str(ve))
        return render_template(
            "category_delete.html",
            title="Delete Category",
            category=get_category_by_id(category_id),
            items=get_category_items(category_id),
            errors=[{"param": "category", "msg": str(ve)}],
        )
    return redirect(url_for('categories.category_list'))


@category_bp.route('/category/<string:category_id>/update', methods=['GET'])
def category_update_get(category_id):
    current_app.logger.info(f"GET /catalog/category/{category_id}/update HIT...")
    category = get_category_by_id(category_id)
    if not category:
        abort(404, description="Category not found")
    return render_category_form("Update Category", category)


@category_bp.route('/category/<string:category_id>/update', methods=['POST'])
def category_update_post(category_id):
    current_app.logger.info(f"POST /catalog/category/{category_id}/update HIT...")
    if not get_category_by_id(category_id):
        abort(404, description="Category not found")

    data = normalize_category_form(request.form)
    form, errors = validate_form(CategoryForm, data)
    if not errors:
        try:
            category = update_category_service(category_id, form.model_dump())
            if not category:
                abort(404, description="Category not found")
            return redirect(category.url)
        except ValueError as ve:
            errors = [{"param": "name", "msg": str(ve)}]

    values = sanitized_values(data)
    category = Category(id=category_id, name=values["name"], description=values["description"])
    return render_category_form("Update Category", category, errors)
