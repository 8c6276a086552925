from datetime import datetime, timezone
from sqlalchemy import (
    Column,
    String,
    Integer,
    DateTime,
    ForeignKey,
    Index,
    UniqueConstraint,
    func,
)
from sqlalchemy.orm import relationship

from .session import Base


class User(Base):
    """Registered identity. Phone number is the login handle and is unique."""
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False)
    phone_number = Column(String(20), unique=True, nullable=False, index=True)
    email = Column(String(254), nullable=True)
    password = Column(String(255), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=lambda: datetime.now(timezone.utc))

    contacts = relationship("Contact", back_populates="owner", cascade="all, delete-orphan")
    spam_reports = relationship("SpamReport", back_populates="reporter", cascade="all, delete-orphan")

    __table_args__ = (Index("ix_users_name", "name"),)


class Contact(Base):
    """Personal address-book entry owned by a user; the number may or may not be registered."""
    __tablename__ = "contacts"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False)
    phone_number = Column(String(20), nullable=False)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    owner = relationship("User", back_populates="contacts")

    __table_args__ = (
        UniqueConstraint("user_id", "phone_number", name="uq_contacts_user_id_phone_number"),
        Index("ix_contacts_phone_number", "phone_number"),
        Index("ix_contacts_name", "name"),
    )


class SpamReport(Base):
    __tablename__ = "spam_reports"

    id = Column(Integer, primary_key=True, autoincrement=True)
    phone_number = Column(String(20), nullable=False)
    reported_by = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    reporter = relationship("User", back_populates="spam_reports")

    __table_args__ = (
        UniqueConstraint("phone_number", "reported_by", name="uq_spam_reports_phone_number_reported_by"),
        Index("ix_spam_reports_phone_number", "phone_number"),
    )
