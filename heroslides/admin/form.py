import math
import re
from typing import Any, Dict, Optional
from urllib.parse import urlparse

from heroslides.schemas.hero_slide import HeroSlideOut

TEXT_FIELDS = ("title", "subtitle", "description", "imageUrl", "buttonText", "buttonLink")
REQUIRED_FIELDS = ("title", "imageUrl")

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def parse_display_order(raw: Any) -> int:
    """Leading integer of raw, or 0 when there is none ("12abc" -> 12, "abc" -> 0)."""
    if isinstance(raw, bool):
        return 0
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float):
        return int(raw) if math.isfinite(raw) else 0
    match = _LEADING_INT.match(str(raw or ""))
    return int(match.group(1)) if match else 0


def is_switch_on(raw: Any) -> bool:
    # A switch posts "on" when checked and nothing at all when unchecked
    return raw is True or raw == "on"


def image_url_error(url: str) -> Optional[str]:
    parsed = urlparse(url)
    if not parsed.scheme:
        return None
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        return "Image URL must be a path like /public/image.jpg or an http(s) URL"
    return None


class SlideForm:
    """Editable state of the create/edit dialog, one typed value per field."""

    def __init__(
        self,
        title: str = "",
        subtitle: str = "",
        description: str = "",
        imageUrl: str = "",
        buttonText: str = "",
        buttonLink: str = "",
        displayOrder: int = 0,
        isActive: bool = True,
    ):
        self.title = title
        self.subtitle = subtitle
        self.description = description
        self.imageUrl = imageUrl
        self.buttonText = buttonText
        self.buttonLink = buttonLink
        self.displayOrder = displayOrder
        self.isActive = isActive

    @classmethod
    def blank(cls) -> "SlideForm":
        return cls()

    @classmethod
    def from_slide(cls, slide: HeroSlideOut) -> "SlideForm":
        return cls(
            title=slide.title or "",
            subtitle=slide.subtitle or "",
            description=slide.description or "",
            imageUrl=slide.imageUrl or "",
            buttonText=slide.buttonText or "",
            buttonLink=slide.buttonLink or "",
            displayOrder=slide.displayOrder or 0,
            isActive=True if slide.isActive is None else slide.isActive,
        )

    def update(self, field: str, raw: Any) -> None:
        if field in TEXT_FIELDS:
            setattr(self, field, "" if raw is None else str(raw))
        elif field == "displayOrder":
            self.displayOrder = parse_display_order(raw)
        elif field == "isActive":
            self.isActive = is_switch_on(raw)
        else:
            raise KeyError(f"Unknown slide field: {field}")

    def validate(self) -> Dict[str, str]:
        errors = {}
        for field in REQUIRED_FIELDS:
            if not getattr(self, field):
                errors[field] = "This field is required"
        if "imageUrl" not in errors:
            problem = image_url_error(self.imageUrl)
            if problem:
                errors["imageUrl"] = problem
        return errors

    def to_payload(self) -> Dict[str, Any]:
        payload = {field: getattr(self, field) for field in TEXT_FIELDS}
        payload["displayOrder"] = self.displayOrder
        payload["isActive"] = self.isActive
        return payload

    def __repr__(self) -> str:
        return f"SlideForm(title={self.title!r}, imageUrl={self.imageUrl!r}, displayOrder={self.displayOrder})"
