"""Help builder configuration."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from .constants import DEFAULT_MAXIMUM_DISPLAY_WIDTH


class HelpSettings(BaseModel):
    """Options for the automatically built help screen.

    ``heading``/``copyright`` left as None fall back to ``HelpDefaults``.
    ``add_dashes_to_option`` left as None means dashes for option listings and
    none for verb listings.
    """

    model_config = ConfigDict(frozen=True)

    heading: str | None = None
    copyright: str | None = None
    maximum_display_width: int = Field(default=DEFAULT_MAXIMUM_DISPLAY_WIDTH, ge=1)
    add_dashes_to_option: bool | None = None
    additional_new_line_after_option: bool = True
    add_value_set_text: bool = False
    always_print_copyright: bool = False
