from app import create_app, db
from app.models.category import Category
from app.models.item import Item, ItemCategory

from faker import Faker
import random

fake = Faker()


def seed(category_total=6, item_total=25):
    print("🔄 Clearing existing data...")
    db.session.query(ItemCategory).delete()
    db.session.query(Item).delete()
    db.session.query(Category).delete()
    db.session.commit()
    print("✅ Data cleared.")

    print("🔄 Creating categories...")
    names = set()
    while len(names) < category_total:
        names.add(fake.unique.word().capitalize())
    categories = [
        Category(name=name, description=fake.sentence(nb_words=8))
        for name in sorted(names)
    ]
    db.session.add_all(categories)
    db.session.commit()
    print(f"✅ Seeded {len(categories)} categories")

    print("🔄 Creating items...")
    for _ in range(item_total):
        item = Item(
            name=f"{fake.color_name()} {fake.word()}",
            description=fake.sentence(nb_words=12),
            price=random.randint(1, 500),
            numstock=random.randint(0, 100),
        )
        for category in random.sample(categories, k=random.randint(0, 2)):
            item.categories.append(category)
        db.session.add(item)
    db.session.commit()
    print(f"✅ Seeded {item_total} items")


if __name__ == '__main__':
    app = create_app()
    with app.app_context():
        try:
            seed()
        except Exception as e:
            db.session.rollback()
            print(f"❌ Seeding failed: {e}")
            raise
