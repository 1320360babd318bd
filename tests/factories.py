# tests/factories.py
import uuid

from shared.core import auth
from shared.models.users import Users
from pantry_service.app.crud import items_crud
from pantry_service.app.models.items import Item
from pantry_service.app.schemas.items_schemas import ItemCreate


def make_user(auth_db, name: str = "John Doe", email: str = None, role: str = "user",
              password: str = "secret123", status: str = "active") -> Users:
    user = Users(
        name=name,
        email=email or f"{uuid.uuid4().hex[:8]}@example.com",
        role=role,
        status=status,
    )
    user.set_password(password)
    auth_db.add(user)
    auth_db.commit()
    auth_db.refresh(user)
    return user


def auth_headers(user: Users) -> dict:
    token = auth.create_access_token(auth.token_payload_for(user))
    return {"Authorization": f"Bearer {token}"}


def make_item(db, user_id, name: str = "Toor Dal", **overrides) -> Item:
    data = {
        "name": name,
        "category": "dal",
        "brand": "Fortune",
        "quantity": 2.0,
        "unit": "kg",
        "min_stock_level": 1.0,
        "price": 180.0,
    }
    data.update(overrides)
    return items_crud.create_item(db, ItemCreate(**data), user_id, "John Doe")
