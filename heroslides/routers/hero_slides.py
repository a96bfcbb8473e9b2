from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from typing import List
import logging

from heroslides.models.user import get_db
from heroslides.models.hero_slide import HeroSlide
from heroslides.schemas.hero_slide import HeroSlideOut, HeroSlideCreate, HeroSlideUpdate
from heroslides.utils.security import require_admin

logger = logging.getLogger(__name__)

# Public carousel feed
router = APIRouter()
# Admin management endpoints
admin_router = APIRouter()

# camelCase payload field -> model column
_FIELD_MAP = {
    "title": "title",
    "subtitle": "subtitle",
    "description": "description",
    "imageUrl": "image_url",
    "buttonText": "button_text",
    "buttonLink": "button_link",
    "displayOrder": "display_order",
    "isActive": "is_active",
}
_NOT_NULL = {"title", "imageUrl", "displayOrder", "isActive"}


def _to_out(s: HeroSlide) -> HeroSlideOut:
    return HeroSlideOut(
        id=s.id,
        title=s.title,
        subtitle=s.subtitle,
        description=s.description,
        imageUrl=s.image_url,
        buttonText=s.button_text,
        buttonLink=s.button_link,
        displayOrder=s.display_order,
        isActive=s.is_active,
        createdAt=s.created_at,
        updatedAt=s.updated_at,
    )


def _ordered(query):
    # Ties on display_order keep insertion order
    return query.order_by(HeroSlide.display_order.asc(), HeroSlide.id.asc())


def _get_or_404(db: Session, id: int) -> HeroSlide:
    slide = db.query(HeroSlide).filter(HeroSlide.id == id).first()
    if not slide:
        raise HTTPException(status_code=404, detail="Slide not found")
    return slide


@router.get("", response_model=List[HeroSlideOut])
def get_active_hero_slides(db: Session = Depends(get_db)):
    slides = _ordered(db.query(HeroSlide).filter(HeroSlide.is_active.is_(True))).all()
    return [_to_out(s) for s in slides]


@admin_router.get("", response_model=List[HeroSlideOut])
def get_hero_slides(db: Session = Depends(get_db), current_user_email: str = Depends(require_admin)):
    slides = _ordered(db.query(HeroSlide)).all()
    return [_to_out(s) for s in slides]


@admin_router.post("", response_model=HeroSlideOut)
def create_hero_slide(
    payload: HeroSlideCreate,
    db: Session = Depends(get_db),
    current_user_email: str = Depends(require_admin),
):
    slide = HeroSlide(**{column: getattr(payload, field) for field, column in _FIELD_MAP.items()})
    db.add(slide)
    db.commit()
    db.refresh(slide)
    logger.info("Hero slide %s created by %s", slide.id, current_user_email)
    return _to_out(slide)


@admin_router.put("/{id}", response_model=HeroSlideOut)
def update_hero_slide(
    id: int,
    payload: HeroSlideUpdate,
    db: Session = Depends(get_db),
    current_user_email: str = Depends(require_admin),
):
    slide = _get_or_404(db, id)
    changes = payload.model_dump(exclude_unset=True)
    for field, value in changes.items():
        if value is None and field in _NOT_NULL:
            raise HTTPException(status_code=400, detail=f"{field} cannot be null")
        setattr(slide, _FIELD_MAP[field], value)
    db.commit()
    db.refresh(slide)
    logger.info("Hero slide %s updated by %s (fields: %s)", slide.id, current_user_email, ", ".join(sorted(changes)))
    return _to_out(slide)


@admin_router.delete("/{id}")
def delete_hero_slide(id: int, db: Session = Depends(get_db), current_user_email: str = Depends(require_admin)):
    slide = _get_or_404(db, id)
    db.delete(slide)
    db.commit()
    logger.info("Hero slide %s deleted by %s", id, current_user_email)
    return {"message": "Slide deleted"}
