"""Per-type default content and styles, and the one-level merge built on them.

Both lookups are total: an unknown type yields an empty content map and the
minimal base style, so a block with a model-invented type still renders.
"""
import copy
from typing import Any

from models.block_content import content_defaults
from models.page_block import BlockSettings, PageBlock, ResponsiveStyles, Visibility

_BASE_STYLE: dict[str, str] = {"padding": "20px", "margin": "0"}

_TYPE_STYLES: dict[str, dict[str, dict[str, str]]] = {
    "hero": {
        "desktop": {
            **_BASE_STYLE,
            "padding": "100px 20px",
            "textAlign": "center",
            "minHeight": "500px",
            "display": "flex",
            "flexDirection": "column",
            "alignItems": "center",
            "justifyContent": "center",
        },
        "tablet": {"padding": "80px 20px", "minHeight": "400px"},
        "mobile": {"padding": "60px 16px", "minHeight": "350px"},
    },
    "heading": {
        "desktop": {"fontSize": "32px", "fontWeight": "700", "margin": "0 0 16px 0"},
        "tablet": {"fontSize": "28px"},
        "mobile": {"fontSize": "24px"},
    },
    "button": {
        "desktop": {"padding": "16px 32px", "fontSize": "18px", "borderRadius": "8px"},
        "tablet": {"padding": "14px 28px", "fontSize": "16px"},
        "mobile": {"padding": "12px 24px", "fontSize": "14px"},
    },
    "features": {
        "desktop": {"padding": "60px 20px"},
        "tablet": {"padding": "50px 20px"},
        "mobile": {"padding": "40px 16px"},
    },
    "testimonial": {
        "desktop": {"padding": "40px", "borderRadius": "12px"},
        "tablet": {"padding": "32px"},
        "mobile": {"padding": "24px"},
    },
    "pricing": {
        "desktop": {"padding": "60px 20px"},
        "tablet": {"padding": "50px 20px"},
        "mobile": {"padding": "40px 16px"},
    },
}


def default_block_content(block_type: str) -> dict[str, Any]:
    return content_defaults(block_type)


def default_block_styles(block_type: str) -> dict[str, dict[str, Any]]:
    """Responsive default styles (camelCase keys). Returns a fresh copy."""
    styles = _TYPE_STYLES.get(block_type, {"desktop": _BASE_STYLE})
    return copy.deepcopy(styles)


def merge_content(block_type: str, override: Any) -> dict[str, Any]:
    """Defaults for the type with every key of ``override`` replacing the default.

    One level only: a nested list or dict in the override replaces the default
    value wholesale. Non-dict overrides are ignored.
    """
    merged = default_block_content(block_type)
    if isinstance(override, dict):
        merged.update(override)
    return merged


def merge_styles(block_type: str, override: Any) -> dict[str, Any]:
    """Same as merge_content, at breakpoint granularity."""
    merged = default_block_styles(block_type)
    if isinstance(override, dict):
        merged.update(override)
    return merged


def all_visible() -> Visibility:
    return Visibility(desktop=True, tablet=True, mobile=True)


def create_block(
    block_type: str,
    content_overrides: dict[str, Any] | None = None,
    style_overrides: dict[str, Any] | None = None,
    *,
    animation: str | None = None,
) -> PageBlock:
    """Build a block from the type defaults plus optional overrides."""
    return PageBlock(
        type=block_type,
        content=merge_content(block_type, content_overrides),
        styles=ResponsiveStyles.model_validate(merge_styles(block_type, style_overrides)),
        settings=BlockSettings(visibility=all_visible(), animation=animation),
    )
