# backend/spotbnb/models/spot.py
from sqlalchemy import Integer, String, Column, ForeignKey, Float, Text
from sqlalchemy.orm import relationship
from .base import Base, TimestampMixin


class Spot(TimestampMixin, Base):
    __tablename__ = "spots"
    id = Column(Integer, primary_key=True)
    owner_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    address = Column(String, nullable=False)
    city = Column(String, nullable=False)
    state = Column(String, nullable=False)
    country = Column(String, nullable=False)
    lat = Column(Float, nullable=False)  # [-90, 90]
    lng = Column(Float, nullable=False)  # [-180, 180]
    name = Column(String(50), nullable=False)
    description = Column(Text, nullable=False)
    price = Column(Float, nullable=False)  # per night

    owner = relationship("User", back_populates="spots")
    spot_images = relationship("SpotImage", back_populates="spot", cascade="all, delete-orphan")
    bookings = relationship("Booking", back_populates="spot", cascade="all, delete-orphan")
    reviews = relationship("Review", back_populates="spot", cascade="all, delete-orphan")
