"""SQLAlchemy ORM models for stored financial profiles"""

from sqlalchemy import Column, Integer, Text, DateTime, JSON
from sqlalchemy.orm import declarative_base
from sqlalchemy.sql import func

Base = declarative_base()


class FinancialProfileRecord(Base):
    """One submitted or generated financial profile"""

    __tablename__ = "financial_profile"
    # Ids are never reused, even after the newest row is deleted
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(Text, nullable=False, index=True)
    source = Column(Text, nullable=False, default="submitted")  # submitted | generated
    document = Column(JSON, nullable=False)
    created_at = Column(Text, nullable=False, index=True)  # YYYY-MM-DDTHH:MM:SS+02:00
    inserted_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
