# tests/test_items_service.py
import uuid

import pytest
from sqlalchemy import update

from shared.core.exceptions import ConflictError, ForbiddenError, NotFoundError
from shared.core.schemas import PageOptions
from pantry_service.app.crud import items_crud as crud
from pantry_service.app.crud import stock_updates_crud
from pantry_service.app.models.items import Item
from pantry_service.app.models.stock_updates import StockUpdate
from pantry_service.app.schemas.items_schemas import ItemFilters, ItemUpdate
from pantry_service.app.util.stock_level import calculate_stock_level
from tests.factories import make_item


def test_create_item_sets_level_and_audit_fields(db):
    owner = uuid.uuid4()
    item = make_item(db, owner, quantity=0.4)

    assert item.user_id == owner
    assert item.stock_level == "low"
    assert item.updated_by == "John Doe"
    assert item.last_updated is not None


def test_item_names_unique_per_owner(db):
    owner = uuid.uuid4()
    make_item(db, owner)

    with pytest.raises(ConflictError):
        make_item(db, owner)

    # another owner may reuse the name
    assert make_item(db, uuid.uuid4()).name == "Toor Dal"


def test_update_recomputes_stock_level(db):
    owner = uuid.uuid4()
    item = make_item(db, owner)

    updated = crud.update_item_by_id(
        db, item.id, ItemUpdate(min_stock_level=5.0), owner, "Jane Roe")

    assert updated.stock_level == "low"
    assert updated.updated_by == "Jane Roe"


def test_update_rejects_taken_name(db):
    owner = uuid.uuid4()
    make_item(db, owner, name="Basmati Rice", category="rice")
    item = make_item(db, owner)

    with pytest.raises(ConflictError):
        crud.update_item_by_id(db, item.id, ItemUpdate(name="Basmati Rice"), owner, "John Doe")


def test_empty_update_is_invalid():
    with pytest.raises(ValueError):
        ItemUpdate()


def test_foreign_item_is_forbidden(db):
    item = make_item(db, uuid.uuid4())

    with pytest.raises(ForbiddenError):
        crud.get_owned_item(db, item.id, uuid.uuid4())
    with pytest.raises(NotFoundError):
        crud.get_owned_item(db, uuid.uuid4(), uuid.uuid4())


def test_delete_item_removes_its_history(db):
    owner = uuid.uuid4()
    item = make_item(db, owner)
    stock_updates_crud.adjust_stock(db, item.id, 2.0, 1.0, owner, "John Doe")
    db.expire_all()

    deleted = crud.delete_item_by_id(db, item.id, owner)

    assert deleted.id == item.id
    assert db.query(StockUpdate).count() == 0
    assert crud.get_item_by_id(db, item.id, owner) is None


def test_query_items_filters_and_sorts(db):
    owner = uuid.uuid4()
    make_item(db, owner, name="Toor Dal", quantity=0)
    make_item(db, owner, name="Moong Dal", quantity=5.0)
    make_item(db, owner, name="Basmati Rice", category="rice", quantity=0.8)
    make_item(db, uuid.uuid4(), name="Chana Dal")

    dal = crud.query_items(db, ItemFilters(category="dal"),
                           PageOptions(sort_by="name:asc"), owner)
    assert [i.name for i in dal["results"]] == ["Moong Dal", "Toor Dal"]

    out = crud.query_items(db, ItemFilters(stock_level="out"), PageOptions(), owner)
    assert [i.name for i in out["results"]] == ["Toor Dal"]

    search = crud.query_items(db, ItemFilters(search="rice"), PageOptions(), owner)
    assert [i.name for i in search["results"]] == ["Basmati Rice"]

    paged = crud.query_items(db, ItemFilters(), PageOptions(limit=2, page=2, sort_by="quantity:desc"), owner)
    assert paged["total_results"] == 3
    assert paged["total_pages"] == 2
    assert [i.name for i in paged["results"]] == ["Toor Dal"]


def test_update_conflicts_with_adjustment_between_read_and_write(db, monkeypatch):
    owner = uuid.uuid4()
    item = make_item(db, owner)
    real_get = crud.get_owned_item

    def read_then_adjust(session, item_id, user_id, for_update=False):
        found = real_get(session, item_id, user_id, for_update=for_update)
        # a stock adjustment empties the shelf after our read
        session.execute(
            update(Item)
            .where(Item.id == item_id)
            .values(quantity=0.0, stock_level="out")
            .execution_options(synchronize_session=False)
        )
        return found

    monkeypatch.setattr(crud, "get_owned_item", read_then_adjust)

    with pytest.raises(ConflictError):
        crud.update_item_by_id(db, item.id, ItemUpdate(min_stock_level=5.0), owner, "Jane Roe")

    db.expire_all()
    stored = db.get(Item, item.id)
    assert stored.quantity == 2.0
    assert stored.min_stock_level == 1.0
    assert stored.stock_level == calculate_stock_level(stored.quantity, stored.min_stock_level).value


def test_update_level_matches_stored_values(db):
    owner = uuid.uuid4()
    item = make_item(db, owner)
    stock_updates_crud.adjust_stock(db, item.id, 2.0, 0.0, owner, "John Doe")

    updated = crud.update_item_by_id(
        db, item.id, ItemUpdate(min_stock_level=5.0), owner, "Jane Roe")

    assert updated.quantity == 0.0
    assert updated.min_stock_level == 5.0
    assert updated.stock_level == "out"


@pytest.mark.parametrize("field", ["name", "category", "unit", "quantity", "min_stock_level"])
def test_update_rejects_null_for_required_fields(field):
    with pytest.raises(ValueError):
        ItemUpdate(**{field: None})


def test_update_allows_clearing_optional_fields(db):
    owner = uuid.uuid4()
    item = make_item(db, owner)

    updated = crud.update_item_by_id(db, item.id, ItemUpdate(brand=None), owner, "John Doe")

    assert updated.brand is None
    assert updated.name == "Toor Dal"


@pytest.mark.parametrize("term", ["%", "_"])
def test_search_treats_wildcards_literally(db, term):
    owner = uuid.uuid4()
    make_item(db, owner, name="Basmati Rice", category="rice")
    make_item(db, owner, name="100% Whole Wheat Atta", category="others")

    found = crud.query_items(db, ItemFilters(search=term), PageOptions(), owner)

    expected = ["100% Whole Wheat Atta"] if term == "%" else []
    assert [i.name for i in found["results"]] == expected
