# app/models/items.py
import uuid
from datetime import datetime, timezone
from sqlalchemy import Column, DateTime, Float, String, Text, UniqueConstraint, Uuid, func
from shared.core.database import Base
from ..enum.inventory_enum import StockLevel


class Item(Base):
    __tablename__ = "items"
    __table_args__ = (
        UniqueConstraint("user_id", "name", name="uq_items_user_name"),
    )

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id = Column(Uuid(as_uuid=True), nullable=False, index=True)
    name = Column(String(200), nullable=False)
    category = Column(String(32), nullable=False)
    brand = Column(String(200))
    quantity = Column(Float, nullable=False, default=0)
    unit = Column(String(16), nullable=False)
    min_stock_level = Column(Float, nullable=False, default=0)
    price = Column(Float)
    # always written together with quantity / min_stock_level
    stock_level = Column(String(16), nullable=False,
                         default=StockLevel.out.value)
    notes = Column(Text)
    image_url = Column(Text)
    last_updated = Column(DateTime(timezone=True), nullable=False,
                          server_default=func.now())
    updated_by = Column(String(200), nullable=False)
    created_at = Column(DateTime(timezone=True),
                        default=lambda: datetime.now(timezone.utc))
    updated_at = Column(DateTime(timezone=True),
                        server_default=func.now(), onupdate=func.now())
