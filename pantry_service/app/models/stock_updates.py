# app/models/stock_updates.py
import uuid
from datetime import datetime, timezone
from sqlalchemy import Column, DateTime, Float, ForeignKey, String, Text, Uuid, event
from sqlalchemy.orm import relationship
from shared.core.database import Base


class ImmutableRecordError(Exception):
    pass


class StockUpdate(Base):
    """Append-only audit row for one quantity change of an item."""

    __tablename__ = "stock_updates"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    item_id = Column(
        Uuid(as_uuid=True),
        # item hard-delete removes its history at the database level
        ForeignKey("items.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )
    user_id = Column(Uuid(as_uuid=True), nullable=False, index=True)
    old_quantity = Column(Float, nullable=False)
    new_quantity = Column(Float, nullable=False)
    updated_by = Column(String(200), nullable=False)
    notes = Column(Text)
    created_at = Column(DateTime(timezone=True), nullable=False,
                        default=lambda: datetime.now(timezone.utc), index=True)

    # many-to-one only: the ORM never cascades anything onto stock updates
    item = relationship("Item")


@event.listens_for(StockUpdate, "before_update")
def _reject_update(mapper, connection, target):
    raise ImmutableRecordError(
        f"StockUpdate {target.id} is immutable and cannot be updated")


@event.listens_for(StockUpdate, "before_delete")
def _reject_delete(mapper, connection, target):
    raise ImmutableRecordError(
        f"StockUpdate {target.id} is immutable and cannot be deleted")
