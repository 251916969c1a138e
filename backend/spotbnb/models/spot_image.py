# backend/spotbnb/models/spot_image.py
from sqlalchemy import Integer, String, Column, ForeignKey, Boolean
from sqlalchemy.orm import relationship
from .base import Base, TimestampMixin


class SpotImage(TimestampMixin, Base):
    __tablename__ = "spot_images"
    id = Column(Integer, primary_key=True)
    spot_id = Column(Integer, ForeignKey("spots.id", ondelete="CASCADE"), nullable=False, index=True)
    url = Column(String, nullable=False)
    preview = Column(Boolean, nullable=False, default=False)

    spot = relationship("Spot", back_populates="spot_images")
