"""StorageSlot ORM model: one row per persisted key-value slot."""
from sqlalchemy import Column, String, Text, DateTime
from sqlalchemy.sql import func
from eventhub.database import Base


class StorageSlot(Base):
    __tablename__ = "storage_slots"

    key = Column(String(100), primary_key=True)
    value = Column(Text, nullable=False)  # serialized JSON document
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())
