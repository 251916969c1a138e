# backend/spotbnb/models/user.py
from sqlalchemy import Integer, String, Column
from sqlalchemy.orm import relationship
from .base import Base, TimestampMixin


class User(TimestampMixin, Base):
    __tablename__ = "users"
    id = Column(Integer, primary_key=True)
    first_name = Column(String(50), nullable=False)
    last_name = Column(String(50), nullable=False)
    email = Column(String(256), nullable=False, unique=True, index=True)
    hashed_password = Column(String(60), nullable=False)  # bcrypt

    spots = relationship("Spot", back_populates="owner", cascade="all, delete-orphan")
    bookings = relationship("Booking", back_populates="user", cascade="all, delete-orphan")
    reviews = relationship("Review", back_populates="user", cascade="all, delete-orphan")
