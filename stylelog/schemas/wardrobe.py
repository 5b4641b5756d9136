from datetime import date, datetime
from pydantic import BaseModel, Field, field_validator
from typing import Optional, List, Literal

from stylelog.core.tags import normalize_many

Category = Literal["tops", "bottoms", "shoes", "outerwear", "accessories", "dresses", "suits"]
CATEGORIES: tuple[str, ...] = ("tops", "bottoms", "shoes", "outerwear", "accessories", "dresses", "suits")


class WardrobeItem(BaseModel):
    id: str
    name: str
    category: Category
    colors: List[str] = Field(default_factory=list)
    style_tags: List[str] = Field(default_factory=list)
    purchase_date: Optional[date] = None
    cost: Optional[float] = Field(None, ge=0)
    brand: Optional[str] = None
    care_instructions: Optional[str] = None
    worn_count: int = Field(0, ge=0)
    last_worn: Optional[datetime] = None
    created_at: datetime


class WardrobeItemCreate(BaseModel):
    name: str = Field(min_length=1, max_length=200)
    category: Category
    colors: List[str] = Field(default_factory=list)
    style_tags: List[str] = Field(default_factory=list)
    purchase_date: Optional[date] = None
    cost: Optional[float] = Field(None, ge=0)
    brand: Optional[str] = None
    care_instructions: Optional[str] = None

    @field_validator("colors", "style_tags")
    @classmethod
    def _slugs(cls, v: List[str]) -> List[str]:
        return normalize_many(v)


class WardrobeItemUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=200)
    category: Optional[Category] = None
    colors: Optional[List[str]] = None
    style_tags: Optional[List[str]] = None
    purchase_date: Optional[date] = None
    cost: Optional[float] = Field(None, ge=0)
    brand: Optional[str] = None
    care_instructions: Optional[str] = None

    @field_validator("colors", "style_tags")
    @classmethod
    def _slugs(cls, v: Optional[List[str]]) -> Optional[List[str]]:
        return None if v is None else normalize_many(v)


class CostPerWear(BaseModel):
    item_id: str
    name: str
    category: str
    cost: float
    worn_count: int
    cost_per_wear: float


class WardrobeUsage(BaseModel):
    total_items: int
    most_worn: List[WardrobeItem]
    never_worn: List[WardrobeItem]
    by_category: dict[str, int]
