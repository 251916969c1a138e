# backend/spotbnb/models/review.py
from sqlalchemy import Integer, Column, ForeignKey, Text, UniqueConstraint
from sqlalchemy.orm import relationship
from .base import Base, TimestampMixin


class Review(TimestampMixin, Base):
    __tablename__ = "reviews"
    # 1ユーザーにつき1スポット1レビュー
    __table_args__ = (UniqueConstraint("spot_id", "user_id", name="uq_reviews_spot_user"),)
    id = Column(Integer, primary_key=True)
    spot_id = Column(Integer, ForeignKey("spots.id", ondelete="CASCADE"), nullable=False, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    review = Column(Text, nullable=False)
    stars = Column(Integer, nullable=False)  # 1-5

    spot = relationship("Spot", back_populates="reviews")
    user = relationship("User", back_populates="reviews")
    review_images = relationship("ReviewImage", back_populates="review", cascade="all, delete-orphan")
