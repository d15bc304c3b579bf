"""Page block model — the shared contract of every pipeline stage.

Blocks serialise to camelCase JSON (``backgroundColor``, ``cssClasses`` …),
which is the format the editor persists and renders. ``PageBlock.to_json_dict``
produces that shape; ``PageBlock.model_validate`` reads it back.
"""
from __future__ import annotations

import uuid
from typing import Any, Literal, get_args

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from pydantic_core import to_jsonable_python

BlockType = Literal[
    # Layout
    "section", "container", "columns", "spacer", "divider",
    # Basic
    "heading", "text", "image", "button", "icon", "star-rating",
    # General
    "icon-box", "image-box", "icon-list", "counter", "progress-bar",
    "testimonial", "tabs", "accordion", "toggle", "social-icons",
    "alert", "html", "menu-anchor", "read-more", "text-path",
    # Pro
    "posts", "portfolio", "slides", "form", "login", "nav-menu",
    "animated-headline", "price-list", "price-table", "flip-box",
    "call-to-action", "media-carousel", "testimonial-carousel",
    "countdown", "share-buttons", "blockquote", "facebook-embed",
    "lottie", "video", "image-gallery", "table-of-contents",
    # Marketing
    "hero", "features", "benefits", "faq", "pricing", "cta",
    "footer", "header", "banner", "reviews", "team", "stats",
    "logo-carousel", "before-after", "comparison-table",
]

BLOCK_TYPES: frozenset[str] = frozenset(get_args(BlockType))


def is_known_block_type(tag: str) -> bool:
    return tag in BLOCK_TYPES


def new_block_id() -> str:
    """Fresh opaque block id, unique for the lifetime of the process."""
    return f"block-{uuid.uuid4().hex}"


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class BlockStyle(_CamelModel):
    """Sparse map of visual properties for one breakpoint.

    Unknown properties are kept as-is so model-supplied styles round-trip.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
        coerce_numbers_to_str=True,
    )

    background_color: str | None = None
    text_color: str | None = None
    font_size: str | None = None
    font_family: str | None = None
    font_weight: str | None = None
    padding: str | None = None
    margin: str | None = None
    border_radius: str | None = None
    border_color: str | None = None
    border_width: str | None = None
    box_shadow: str | None = None
    text_align: str | None = None  # left | center | right
    display: str | None = None
    flex_direction: str | None = None
    align_items: str | None = None
    justify_content: str | None = None
    gap: str | None = None
    width: str | None = None
    max_width: str | None = None
    min_height: str | None = None
    background_image: str | None = None
    background_size: str | None = None
    background_position: str | None = None
    opacity: str | None = None
    transform: str | None = None
    transition: str | None = None


class ResponsiveStyles(_CamelModel):
    desktop: BlockStyle | None = None
    tablet: BlockStyle | None = None
    mobile: BlockStyle | None = None


class Visibility(_CamelModel):
    desktop: bool = True
    tablet: bool = True
    mobile: bool = True


class BlockLink(_CamelModel):
    url: str
    new_tab: bool = False


class BlockSettings(_CamelModel):
    visibility: Visibility | None = None
    animation: str | None = None
    animation_delay: float | None = None
    css_classes: str | None = None
    custom_css: str | None = Field(default=None, alias="customCSS")
    link: BlockLink | None = None


class PageBlock(_CamelModel):
    """One node of a page's content tree.

    ``type`` is deliberately a plain string: tags outside ``BlockType`` are
    allowed through and render with empty defaults. Use
    ``is_known_block_type`` where a closed vocabulary is required.
    """

    id: str = Field(default_factory=new_block_id)
    type: str
    content: dict[str, Any] = Field(default_factory=dict)
    styles: ResponsiveStyles = Field(default_factory=ResponsiveStyles)
    settings: BlockSettings = Field(default_factory=BlockSettings)
    children: list[PageBlock] | None = None
    position: int | None = None  # explicit sort index, set on funnel scaffolds only

    def typed_content(self) -> BaseModel | None:
        """Validate ``content`` against the variant model for this block's type.

        Returns None for types without a typed variant. Raises
        pydantic.ValidationError when the content does not fit the variant.
        """
        from models.block_content import CONTENT_MODELS  # avoid import cycle

        variant = CONTENT_MODELS.get(self.type)
        if variant is None:
            return None
        return variant.model_validate(self.content)

    def to_json_dict(self) -> dict[str, Any]:
        """Wire/persistence representation (camelCase, unset styles/settings dropped).

        ``content`` is copied verbatim: explicit nulls such as a heading's
        ``link: null`` are part of the content and must survive storage.
        """
        data: dict[str, Any] = {"id": self.id, "type": self.type}
        data["content"] = to_jsonable_python(self.content)
        data.update(self.model_dump(
            mode="json",
            by_alias=True,
            exclude_none=True,
            include={"styles", "settings", "position"},
        ))
        if self.children is not None:
            data["children"] = [child.to_json_dict() for child in self.children]
        return data


class BlockList(BaseModel):
    blocks: list[PageBlock] = Field(default_factory=list)
