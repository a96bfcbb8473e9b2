"""
Hero slides management screen.

View-model for the admin page: a table of slides plus a create/edit dialog.
All reads go through the query store; all writes go through mutations that
refresh the list when they succeed.
"""

import logging
from dataclasses import dataclass
from typing import Callable, List, Optional

from heroslides.admin.api import HERO_SLIDES_PATH, AdminApiClient
from heroslides.admin.errors import ValidationError
from heroslides.admin.form import SlideForm
from heroslides.admin.mutations import Failure, Mutation, Outcome
from heroslides.admin.notifications import Notifier
from heroslides.admin.store import QueryState, QueryStore
from heroslides.admin.views import ImageProbe, SlideRow, build_rows, render_table
from heroslides.schemas.hero_slide import HeroSlideOut

logger = logging.getLogger(__name__)

SLIDES_KEY = (HERO_SLIDES_PATH,)

CREATE = "create"
EDIT = "edit"

DELETE_PROMPT = "Delete this slide?"


@dataclass
class SlideDialog:
    mode: str
    form: SlideForm
    editing: Optional[HeroSlideOut] = None

    @property
    def title(self) -> str:
        return "Edit slide" if self.mode == EDIT else "New slide"

    @property
    def submit_label(self) -> str:
        return "Update" if self.mode == EDIT else "Create"


class HeroSlidesScreen:
    def __init__(
        self,
        api: AdminApiClient,
        store: Optional[QueryStore] = None,
        notifier: Optional[Notifier] = None,
        image_probe: Optional[ImageProbe] = None,
    ):
        self.api = api
        self.store = store or QueryStore()
        self.notifier = notifier or Notifier()
        self.image_probe = image_probe
        self.dialog: Optional[SlideDialog] = None

        self.store.register(SLIDES_KEY, self.api.list_slides)

        self.create_mutation = Mutation(
            "create-slide",
            self.api.create_slide,
            self.store,
            invalidates=[SLIDES_KEY],
            on_success=lambda slide, _: self._saved("Slide created successfully"),
            on_error=self._failed,
        )
        self.update_mutation = Mutation(
            "update-slide",
            lambda v: self.api.update_slide(v["id"], v["data"]),
            self.store,
            invalidates=[SLIDES_KEY],
            on_success=lambda slide, _: self._saved("Slide updated successfully"),
            on_error=self._failed,
        )
        self.delete_mutation = Mutation(
            "delete-slide",
            self.api.delete_slide,
            self.store,
            invalidates=[SLIDES_KEY],
            on_success=lambda _, __: self.notifier.success("Slide deleted successfully"),
            on_error=self._failed,
        )

    # --- list ---

    def mount(self) -> QueryState:
        return self.store.read(SLIDES_KEY)

    @property
    def state(self) -> QueryState:
        return self.store.get_state(SLIDES_KEY)

    @property
    def is_loading(self) -> bool:
        return self.state.is_loading

    @property
    def slides(self) -> List[HeroSlideOut]:
        return list(self.state.data or [])

    @property
    def error(self):
        return self.state.error

    def rows(self) -> List[SlideRow]:
        return build_rows(self.slides, self.image_probe)

    def find(self, slide_id: int) -> Optional[HeroSlideOut]:
        return next((s for s in self.slides if s.id == slide_id), None)

    # --- dialog ---

    def open_create(self) -> SlideDialog:
        self.dialog = SlideDialog(CREATE, SlideForm.blank())
        return self.dialog

    def open_edit(self, slide: HeroSlideOut) -> SlideDialog:
        self.dialog = SlideDialog(EDIT, SlideForm.from_slide(slide), editing=slide)
        return self.dialog

    def close_dialog(self) -> None:
        self.dialog = None

    def submit(self) -> Outcome:
        if self.dialog is None:
            raise RuntimeError("No slide dialog is open")
        form = self.dialog.form
        problems = form.validate()
        if problems:
            error = ValidationError(
                "; ".join(f"{field}: {msg}" for field, msg in problems.items()),
                fields=problems,
            )
            self.notifier.error(error)
            return Failure(error)

        data = form.to_payload()
        if self.dialog.editing is not None:
            return self.update_mutation.mutate({"id": self.dialog.editing.id, "data": data})
        return self.create_mutation.mutate(data)

    def _saved(self, message: str) -> None:
        self.notifier.success(message)
        self.close_dialog()

    def _failed(self, error, variables) -> None:
        # Dialog and list are left as they are so nothing typed is lost
        self.notifier.error(error)

    # --- delete ---

    def delete(self, slide_id: int, confirm: Callable[[str], bool]) -> Optional[Outcome]:
        """Delete after confirm(DELETE_PROMPT) accepts; None when cancelled."""
        if not confirm(DELETE_PROMPT):
            logger.debug("Delete of slide %s cancelled", slide_id)
            return None
        return self.delete_mutation.mutate(slide_id)

    # --- rendering ---

    def render(self) -> str:
        lines = ["Hero section slides", ""]
        if self.is_loading:
            lines.append("Loading slides...")
        elif self.error is not None and not self.slides:
            lines.append(f"Could not load slides: {self.error.user_message}")
        else:
            if self.error is not None:
                lines.append(f"Showing last loaded slides ({self.error.user_message})")
            lines.append(render_table(self.rows()))
        if self.dialog is not None:
            lines.extend(["", f"[{self.dialog.title}] ({self.dialog.submit_label})"])
        return "\n".join(lines)
