# app/models/__init__.py
from .category import Category
from .item import Item, ItemCategory
