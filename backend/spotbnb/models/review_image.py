# backend/spotbnb/models/review_image.py
from sqlalchemy import Integer, String, Column, ForeignKey
from sqlalchemy.orm import relationship
from .base import Base, TimestampMixin


class ReviewImage(TimestampMixin, Base):
    __tablename__ = "review_images"
    id = Column(Integer, primary_key=True)
    review_id = Column(Integer, ForeignKey("reviews.id", ondelete="CASCADE"), nullable=False, index=True)
    url = Column(String, nullable=False)

    review = relationship("Review", back_populates="review_images")
