# pharmacy_admin/extensions.py
from flask_cors import CORS

from .config import Config
from .storage.json_store import JsonStore
from .storage.repository import NO_DEFAULT, Repository, SettingsRepository

# CORS is a real Flask extension (keeps init_app)
cors = CORS()

# Bound to DATA_DIR by create_app()
store = JsonStore()

products = Repository(store, "products", "Product")

offers = Repository(
    store, "offers", "Offer",
    fields={
        "name": "",
        "discount": 0,
        "startDate": NO_DEFAULT,
        "endDate": NO_DEFAULT,
        "description": "",
    },
)

categories = Repository(
    store, "categories", "Category",
    fields={"name": "", "description": "", "image": None},
    merge_fields=["name", "description", "image"],
)

orders = Repository(store, "orders", "Order", base={"status": "pending"}, deletable=False)

pages = Repository(
    store, "pages", "Page",
    key_field="slug",
    fields={"title": NO_DEFAULT, "content": NO_DEFAULT, "image": None},
    conflict_message="Page with this slug already exists",
)

settings = SettingsRepository(store, Config.DEFAULT_SETTINGS)

REPOSITORIES = {
    "products": products,
    "offers": offers,
    "categories": categories,
    "orders": orders,
    "pages": pages,
}
