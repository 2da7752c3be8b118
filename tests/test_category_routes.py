from app import db
from app.models import Category


def test_root_redirects_to_catalog(client):
    r = client.get("/")
    assert r.status_code == 302
    assert r.headers["Location"] == "/catalog"


def test_category_list_sorted_by_name(client, make_category):
    for name in ("Zeta", "Alpha", "Middle"):
        make_category(name)
    r = client.get("/catalog/categories")
    assert r.status_code == 200
    body = r.data
    assert body.index(b"Alpha") < body.index(b"Middle") < body.index(b"Zeta")


def test_category_detail_lists_its_items(client, make_category, make_item):
    tools = make_category("Tools", "Things to fix things")
    garden = make_category("Garden")
    make_item("Hammer", [tools])
    make_item("Shovel", [garden])

    r = client.get(tools.url)
    assert r.status_code == 200
    assert b"Things to fix things" in r.data
    assert b"Hammer" in r.data
    assert b"Shovel" not in r.data


def test_category_detail_not_found(client, ctx):
    r = client.get("/catalog/category/does-not-exist")
    assert r.status_code == 404
    assert b"Category not found" in r.data


def test_category_create_form(client):
    r = client.get("/catalog/category/create")
    assert r.status_code == 200
    assert b"Create Category" in r.data


def test_category_create_redirects_to_new_category(client, ctx):
    r = client.post("/catalog/category/create", data={"name": "  Widgets ", "description": "Small parts"})
    assert r.status_code == 302
    category = Category.query.filter_by(name="Widgets").one()
    assert r.headers["Location"] == category.url
    assert category.description == "Small parts"


def test_category_create_short_name_is_rejected(client, ctx):
    r = client.post("/catalog/category/create", data={"name": " ab ", "description": "kept"})
    assert r.status_code == 200
    assert b"Category must contain at least 3 characters" in r.data
    assert b"kept" in r.data
    assert Category.query.count() == 0


def test_category_create_duplicate_redirects_to_existing(client, ctx):
    first = client.post("/catalog/category/create", data={"name": "Widgets"})
    second = client.post("/catalog/category/create", data={"name": "Widgets", "description": "ignored"})
    assert second.status_code == 302
    assert second.headers["Location"] == first.headers["Location"]
    assert Category.query.filter_by(name="Widgets").count() == 1
    assert Category.query.filter_by(name="Widgets").one().description == ""


def test_category_create_escapes_input(client, ctx):
    client.post("/catalog/category/create", data={"name": "<b>Bold</b>"})
    assert Category.query.one().name == "&lt;b&gt;Bold&lt;/b&gt;"


def test_category_update_changes_fields(client, make_category):
    category = make_category("Tools")
    r = client.post(f"{category.url}/update", data={"name": "Hand tools", "description": "new"})
    assert r.status_code == 302
    assert r.headers["Location"] == category.url
    db.session.refresh(category)
    assert category.name == "Hand tools"
    assert category.description == "new"


def test_category_update_form_is_prefilled(client, make_category):
    category = make_category("Tools", "Fixing")
    r = client.get(f"{category.url}/update")
    assert r.status_code == 200
    assert b"Update Category" in r.data
    assert b'value="Tools"' in r.data


def test_category_update_name_taken(client, make_category):
    make_category("Garden")
    category = make_category("Tools")
    r = client.post(f"{category.url}/update", data={"name": "Garden"})
    assert r.status_code == 200
    assert b"Category with this name already exists" in r.data
    db.session.refresh(category)
    assert category.name == "Tools"


def test_category_update_validation_error(client, make_category):
    category = make_category("Tools")
    r = client.post(f"{category.url}/update", data={"name": "x"})
    assert r.status_code == 200
    assert b"Category must contain at least 3 characters" in r.data


def test_category_update_not_found(client, ctx):
    assert client.get("/catalog/category/missing/update").status_code == 404
    assert client.post("/catalog/category/missing/update", data={"name": "Tools"}).status_code == 404


def test_category_delete_unreferenced(client, make_category):
    category = make_category("Tools")
    category_id = category.id
    r = client.get(f"{category.url}/delete")
    assert r.status_code == 200
    assert b"Do you really want to delete this category?" in r.data

    r = client.post(f"/catalog/category/{category_id}/delete")
    assert r.status_code == 302
    assert r.headers["Location"] == "/catalog/categories"
    assert db.session.get(Category, category_id) is None


def test_category_delete_refused_while_referenced(client, make_category, make_item):
    category = make_category("Tools")
    make_item("Hammer", [category])
    r = client.post(f"{category.url}/delete")
    assert r.status_code == 200
    assert b"Cannot delete category that has items" in r.data
    assert b"Hammer" in r.data
    assert Category.query.count() == 1


def test_category_delete_missing_redirects_to_list(client, ctx):
    r = client.get("/catalog/category/missing/delete")
    assert r.status_code == 302
    assert r.headers["Location"] == "/catalog/categories"
    r = client.post("/catalog/category/missing/delete")
    assert r.status_code == 302


def test_category_create_long_name_is_rejected(client, ctx):
    r = client.post("/catalog/category/create", data={"name": "x" * 101})
    assert r.status_code == 200
    assert b"Category must contain at most 100 characters" in r.data
    assert Category.query.count() == 0
