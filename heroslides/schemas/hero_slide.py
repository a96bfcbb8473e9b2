from datetime import datetime
from pydantic import BaseModel, Field
from typing import Optional


class HeroSlideOut(BaseModel):
    id: int
    title: str
    subtitle: Optional[str] = None
    description: Optional[str] = None
    imageUrl: str
    buttonText: Optional[str] = None
    buttonLink: Optional[str] = None
    displayOrder: int = 0
    isActive: bool = True
    createdAt: Optional[datetime] = None
    updatedAt: Optional[datetime] = None


# Bounds mirror the hero_slides columns so oversized input is a 422, not a database error
DISPLAY_ORDER_MIN = -2147483648
DISPLAY_ORDER_MAX = 2147483647


class HeroSlideCreate(BaseModel):
    title: str = Field(min_length=1, max_length=255)
    subtitle: Optional[str] = Field(default=None, max_length=500)
    description: Optional[str] = None
    imageUrl: str = Field(min_length=1, max_length=500)
    buttonText: Optional[str] = Field(default=None, max_length=100)
    buttonLink: Optional[str] = Field(default=None, max_length=500)
    displayOrder: int = Field(default=0, ge=DISPLAY_ORDER_MIN, le=DISPLAY_ORDER_MAX)
    isActive: bool = True


class HeroSlideUpdate(BaseModel):
    # Partial replacement: only fields present in the request body are written
    title: Optional[str] = Field(default=None, min_length=1, max_length=255)
    subtitle: Optional[str] = Field(default=None, max_length=500)
    description: Optional[str] = None
    imageUrl: Optional[str] = Field(default=None, min_length=1, max_length=500)
    buttonText: Optional[str] = Field(default=None, max_length=100)
    buttonLink: Optional[str] = Field(default=None, max_length=500)
    displayOrder: Optional[int] = Field(default=None, ge=DISPLAY_ORDER_MIN, le=DISPLAY_ORDER_MAX)
    isActive: Optional[bool] = None
