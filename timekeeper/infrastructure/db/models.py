"""
SQLAlchemy models for the database.
Maps domain entities to database tables.
"""

from sqlalchemy import (
    Column, Integer, String, DateTime, Text, Boolean,
    Date, ForeignKey, Index, CheckConstraint
)
from sqlalchemy.orm import relationship, declarative_base
from sqlalchemy.sql import func


Base = declarative_base()


class AccountModel(Base):
    """Account table"""
    __tablename__ = 'accounts'

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(255), nullable=False, unique=True)
    password_hash = Column(String(255), nullable=False)
    position = Column(String(20), nullable=False)
    employee_id = Column(String(100), nullable=False, unique=True)
    is_admin = Column(Boolean, nullable=False, default=False)

    # Timestamps
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    # Relationships
    time_entries = relationship(
        "TimeEntryModel", back_populates="account", cascade="all, delete-orphan"
    )

    __table_args__ = (
        Index('idx_accounts_is_admin', 'is_admin'),
    )


class TimeEntryModel(Base):
    """Time entry table"""
    __tablename__ = 'time_entries'

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey('accounts.id', ondelete='CASCADE'), nullable=False)

    date = Column(Date, nullable=False)
    start_time = Column(DateTime, nullable=False)
    end_time = Column(DateTime, nullable=False)

    # Overtime details
    overtime_reason = Column(Text)
    responsible_person = Column(Text)

    # Timestamps
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    # Relationships
    account = relationship("AccountModel", back_populates="time_entries")

    # Constraints and indexes
    __table_args__ = (
        Index('idx_time_entries_user_date', 'user_id', 'date'),
        Index('idx_time_entries_date', 'date'),
        CheckConstraint('start_time < end_time', name='time_entry_valid_range'),
    )
