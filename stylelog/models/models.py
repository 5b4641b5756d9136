from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy import String, Integer, Float, Boolean, DateTime, Date, Text, JSON
from sqlalchemy.sql import func
from datetime import datetime, date
from stylelog.core.db import Base


class OutfitRecord(Base):
    __tablename__ = "outfit"
    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    timestamp: Mapped[datetime] = mapped_column(DateTime(timezone=True), index=True)
    photo_references: Mapped[list | None] = mapped_column(JSON, nullable=True)
    occasion_tags: Mapped[list | None] = mapped_column(JSON, nullable=True)
    style_tags: Mapped[list | None] = mapped_column(JSON, nullable=True)
    season_tags: Mapped[list | None] = mapped_column(JSON, nullable=True)
    colors: Mapped[list | None] = mapped_column(JSON, nullable=True)
    garments: Mapped[list | None] = mapped_column(JSON, nullable=True)
    mood: Mapped[str | None] = mapped_column(Text, nullable=True)
    formality_level: Mapped[int | None] = mapped_column(Integer, nullable=True)
    effort_level: Mapped[str | None] = mapped_column(String(16), nullable=True)
    weather: Mapped[dict | None] = mapped_column(JSON, nullable=True)
    location: Mapped[str | None] = mapped_column(Text, nullable=True)
    duration: Mapped[str | None] = mapped_column(Text, nullable=True)
    event_type: Mapped[str | None] = mapped_column(Text, nullable=True)
    confidence_rating: Mapped[int | None] = mapped_column(Integer, nullable=True)
    comfort_rating: Mapped[int | None] = mapped_column(Integer, nullable=True)
    success_rating: Mapped[int | None] = mapped_column(Integer, nullable=True)
    repeat_likelihood: Mapped[int | None] = mapped_column(Integer, nullable=True)
    ratings_feedback: Mapped[dict | None] = mapped_column(JSON, nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    ai_analysis: Mapped[dict | None] = mapped_column(JSON, nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())


class WardrobeItemRecord(Base):
    __tablename__ = "wardrobe_item"
    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    name: Mapped[str] = mapped_column(String(200))
    category: Mapped[str] = mapped_column(String(32), index=True)
    colors: Mapped[list | None] = mapped_column(JSON, nullable=True)
    style_tags: Mapped[list | None] = mapped_column(JSON, nullable=True)
    purchase_date: Mapped[date | None] = mapped_column(Date(), nullable=True)
    cost: Mapped[float | None] = mapped_column(Float, nullable=True)
    brand: Mapped[str | None] = mapped_column(String(200), nullable=True)
    care_instructions: Mapped[str | None] = mapped_column(Text, nullable=True)
    worn_count: Mapped[int] = mapped_column(Integer, default=0)
    last_worn: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())
