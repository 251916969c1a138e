# backend/spotbnb/models/booking.py
from sqlalchemy import Integer, Column, ForeignKey, Date
from sqlalchemy.orm import relationship
from .base import Base, TimestampMixin


class Booking(TimestampMixin, Base):
    __tablename__ = "bookings"
    id = Column(Integer, primary_key=True)
    spot_id = Column(Integer, ForeignKey("spots.id", ondelete="CASCADE"), nullable=False, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    start_date = Column(Date, nullable=False)
    end_date = Column(Date, nullable=False)

    spot = relationship("Spot", back_populates="bookings")
    user = relationship("User", back_populates="bookings")
