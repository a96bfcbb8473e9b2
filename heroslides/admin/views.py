"""
Table rendering for the slides list.
"""

from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence, Tuple

from heroslides.config import get_settings
from heroslides.schemas.hero_slide import HeroSlideOut

ImageProbe = Callable[[str], bool]

ACTIVE_LABEL = "Active"
INACTIVE_LABEL = "Inactive"
COLUMNS = ("Order", "Image", "Title", "Status", "Actions")


@dataclass(frozen=True)
class SlideRow:
    id: int
    order: int
    thumbnail: str
    title: str
    status: str
    actions: Tuple[str, ...] = ("edit", "delete")


def thumbnail_src(image_url: Optional[str], image_probe: Optional[ImageProbe] = None) -> str:
    """The declared image, or the fallback logo when it is missing or does not load."""
    fallback = get_settings().FALLBACK_IMAGE_URL
    if not image_url:
        return fallback
    if image_probe is not None and not image_probe(image_url):
        return fallback
    return image_url


def sort_slides(slides: Sequence[HeroSlideOut]) -> List[HeroSlideOut]:
    # sorted() is stable: equal displayOrder keeps the order the server sent
    return sorted(slides, key=lambda s: s.displayOrder)


def build_rows(slides: Sequence[HeroSlideOut], image_probe: Optional[ImageProbe] = None) -> List[SlideRow]:
    return [
        SlideRow(
            id=s.id,
            order=s.displayOrder,
            thumbnail=thumbnail_src(s.imageUrl, image_probe),
            title=s.title,
            status=ACTIVE_LABEL if s.isActive else INACTIVE_LABEL,
        )
        for s in sort_slides(slides)
    ]


def _truncate(value: str, width: int) -> str:
    return value if len(value) <= width else value[: width - 3] + "..."


def render_table(rows: Sequence[SlideRow], truncate: int = 40) -> str:
    if not rows:
        return "No slides yet."
    cells = [
        (str(r.order), _truncate(r.thumbnail, truncate), _truncate(r.title, truncate), r.status, " / ".join(r.actions))
        for r in rows
    ]
    widths = [max(len(COLUMNS[i]), *(len(c[i]) for c in cells)) for i in range(len(COLUMNS))]
    header = "  ".join(col.ljust(widths[i]) for i, col in enumerate(COLUMNS))
    lines = [header, "  ".join("-" * w for w in widths)]
    for c in cells:
        lines.append("  ".join(val.ljust(widths[i]) for i, val in enumerate(c)))
    return "\n".join(line.rstrip() for line in lines)
