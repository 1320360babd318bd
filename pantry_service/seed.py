import logging
from sqlalchemy.orm import Session
from shared.core.config import settings
from shared.core.database import (
    AuthBase, AuthSessionLocal, Base, PantrySessionLocal, auth_engine, pantry_engine)
from shared.core.logging_config import setup_logging
from shared.models.users import Users
from .app.crud import items_crud
from .app.models import items, stock_updates  # noqa: F401
from .app.schemas.items_schemas import ItemCreate

logger = logging.getLogger(__name__)

SEED_USERS = [
    {"name": "Admin", "email": "admin@example.com",
        "password": "admin123", "role": "admin"},
    {"name": "John Doe", "email": "user@example.com",
        "password": "user1234", "role": "user"},
]

SAMPLE_ITEMS = [
    {"name": "Toor Dal", "category": "dal", "brand": "Fortune", "quantity": 2.0,
     "unit": "kg", "min_stock_level": 1.0, "price": 180.0, "notes": "Buy organic variety next time"},
    {"name": "Basmati Rice", "category": "rice", "brand": "India Gate", "quantity": 5.0,
     "unit": "kg", "min_stock_level": 2.0, "price": 450.0, "notes": "Premium quality"},
    {"name": "Turmeric Powder", "category": "spices", "brand": "MDH", "quantity": 0.2,
     "unit": "kg", "min_stock_level": 0.1, "price": 80.0},
    {"name": "Coconut Oil", "category": "oil", "brand": "Parachute", "quantity": 0.5,
     "unit": "liter", "min_stock_level": 0.5, "price": 150.0},
    {"name": "Onions", "category": "vegetables", "quantity": 3.0,
     "unit": "kg", "min_stock_level": 1.0, "price": 40.0},
    {"name": "Milk", "category": "dairy", "brand": "Amul", "quantity": 0,
     "unit": "liter", "min_stock_level": 2.0, "price": 60.0},
]


def seed_users(db: Session) -> dict:
    seeded = {}
    for data in SEED_USERS:
        user = db.query(Users).filter(Users.email == data["email"]).first()
        if user:
            logger.info("User already exists: %s", user.email)
        else:
            user = Users(name=data["name"], email=data["email"],
                         role=data["role"], is_email_verified=True)
            user.set_password(data["password"])
            db.add(user)
            db.commit()
            db.refresh(user)
            logger.info("Created %s user: %s", user.role, user.email)
        seeded[user.role] = user
    return seeded


def seed_items(db: Session, owner: Users):
    for data in SAMPLE_ITEMS:
        if items_crud.name_taken(db, data["name"], owner.id):
            continue
        items_crud.create_item(db, ItemCreate(**data), owner.id, owner.name)
    logger.info("Seeded %d sample items for %s", len(SAMPLE_ITEMS), owner.email)


def seed_data():
    AuthBase.metadata.create_all(bind=auth_engine)
    Base.metadata.create_all(bind=pantry_engine)

    auth_db = AuthSessionLocal()
    pantry_db = PantrySessionLocal()
    try:
        users = seed_users(auth_db)
        seed_items(pantry_db, users["user"])
    except Exception:
        auth_db.rollback()
        pantry_db.rollback()
        logger.exception("Seeding failed")
        raise
    finally:
        auth_db.close()
        pantry_db.close()


if __name__ == "__main__":
    setup_logging(settings.LOG_LEVEL)
    seed_data()
