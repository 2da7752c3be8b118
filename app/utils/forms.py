from markupsafe import escape
from pydantic import ValidationError


def sanitize_text(value):
    """Trim surrounding whitespace and HTML-escape user input."""
    if value is None:
        return ""
    return str(escape(str(value).strip()))


def normalize_category_form(form):
    return {
        "name": form.get("name", ""),
        "description": form.get("description", ""),
    }


def normalize_item_form(form):
    """Turn a raw (multi-valued) request form into a plain dict.

    The category selection always comes back as a list: absent gives ``[]``,
    a single value gives a one-element list and repeated values keep their
    submission order. ``form`` is left untouched.
    """
    if hasattr(form, "getlist"):
        category = form.getlist("category")
    else:
        category = form.get("category")
        if category is None:
            category = []
        elif isinstance(category, (list, tuple)):
            category = list(category)
        else:
            category = [category]

    return {
        "name": form.get("name", ""),
        "description": form.get("description", ""),
        "price": form.get("price", ""),
        "numstock": form.get("numstock", ""),
        "category": category,
    }


def sanitized_values(data):
    values = {}
    for key, value in data.items():
        if isinstance(value, list):
            values[key] = [sanitize_text(v) for v in value]
        else:
            values[key] = sanitize_text(value)
    return values


def form_errors(exc):
    return [
        {"param": str(err["loc"][0]) if err["loc"] else "", "msg": err["msg"]}
        for err in exc.errors()
    ]


def validate_form(schema, data):
    """Validate ``data`` against a pydantic form schema.

    Returns ``(form, [])`` on success and ``(None, errors)`` otherwise, where
    each error is a ``{"param", "msg"}`` dict.
    """
    try:
        return schema.model_validate(data), []
    except ValidationError as exc:
        return None, form_errors(exc)
