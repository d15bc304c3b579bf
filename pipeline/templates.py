"""Template library — canned block sequences per page archetype.

One catalog serves both callers:
  - the parser's fallback, keyed by the AI template types (``sales-page`` …)
  - funnel scaffolding, keyed by funnel page types (``landing``, ``thankyou`` …),
    resolved through PAGE_TYPE_ALIASES onto the same entries.

Every block is built with create_block, so templates and AI output share the
same defaults. Each call returns fresh blocks with fresh ids.
"""
import logging
from collections.abc import Callable

from models.block_defaults import create_block
from models.page_block import PageBlock

logger = logging.getLogger(__name__)

FALLBACK_TEMPLATE = "sales-page"


def _sales_page() -> list[PageBlock]:
    return [
        create_block("hero"),
        create_block("features"),
        create_block("benefits"),
        create_block("testimonial"),
        create_block("pricing"),
        create_block("faq"),
        create_block("cta"),
    ]


def _landing_page() -> list[PageBlock]:
    return [
        create_block("hero"),
        create_block("features"),
        create_block("stats"),
        create_block("testimonial"),
        create_block("cta"),
    ]


def _product_page() -> list[PageBlock]:
    return [
        create_block("hero"),
        create_block("features"),
        create_block("benefits"),
        create_block("pricing"),
        create_block("faq"),
    ]


def _checkout_page() -> list[PageBlock]:
    return [
        create_block("heading", {"text": "Complete Your Purchase", "tag": "h1"}),
        create_block("pricing"),
        create_block("testimonial"),
    ]


def _thank_you_page() -> list[PageBlock]:
    return [
        create_block("heading", {"text": "Thank You for Your Purchase!", "tag": "h1"}),
        create_block("text", {
            "html": "<p>Your order has been confirmed. Check your email for details.</p>",
        }),
    ]


def _upsell() -> list[PageBlock]:
    return [
        create_block("hero", {
            "headline": "Wait! Special One-Time Offer",
            "subheadline": "Get 50% off this exclusive upgrade - only available now",
            "buttonText": "Yes, Add This To My Order",
            "buttonLink": "#accept",
        }),
        create_block(
            "cta",
            {
                "headline": "Upgrade Your Order",
                "subheadline": "This exclusive offer is only available right now.",
                "buttonText": "Yes! Add This For Just $47",
                "buttonLink": "#accept",
                "declineText": "No Thanks, I'll Pass",
                "declineLink": "#decline",
            },
            {"desktop": {"padding": "60px 20px", "textAlign": "center"}},
        ),
    ]


def _thank_you_funnel() -> list[PageBlock]:
    return [
        create_block("hero", {
            "headline": "Thank You for Your Purchase!",
            "subheadline": "Your order has been confirmed. Check your email for access details.",
            "buttonText": "Access Your Product",
            "buttonLink": "/downloads",
        }),
    ]


_TEMPLATES: dict[str, Callable[[], list[PageBlock]]] = {
    "sales-page": _sales_page,
    "landing-page": _landing_page,
    "product-page": _product_page,
    "checkout-page": _checkout_page,
    "thank-you-page": _thank_you_page,
    "upsell": _upsell,
}

# Funnel page-type vocabulary → template name
PAGE_TYPE_ALIASES: dict[str, str] = {
    "landing": "landing-page",
    "sales": "sales-page",
    "product": "product-page",
    "checkout": "checkout-page",
    "thankyou": "thank-you-page",
    "thank_you": "thank-you-page",
    "thank-you": "thank-you-page",
    "upsell": "upsell",
    "downsell": "upsell",
}

TEMPLATE_NAMES: tuple[str, ...] = tuple(_TEMPLATES)

# Funnel scaffolds that differ from the AI fallback template of the same name
_FUNNEL_TEMPLATES: dict[str, Callable[[], list[PageBlock]]] = {
    "thank-you-page": _thank_you_funnel,
}


def resolve_template_name(key: str) -> str:
    """Map a template type or funnel page type to a catalog entry name.

    Unknown keys resolve to the sales page.
    """
    if key in _TEMPLATES:
        return key
    name = PAGE_TYPE_ALIASES.get(key)
    if name is None:
        logger.debug("No template for %r — using %s", key, FALLBACK_TEMPLATE)
        return FALLBACK_TEMPLATE
    return name


def default_template(template_type: str) -> list[PageBlock]:
    """Template blocks for an AI template type (render order = list order)."""
    return _TEMPLATES[resolve_template_name(template_type)]()


def default_blocks_for(page_type: str) -> list[PageBlock]:
    """Scaffold blocks for a funnel page type, with explicit ``position`` set."""
    name = resolve_template_name(page_type)
    blocks = _FUNNEL_TEMPLATES.get(name, _TEMPLATES[name])()
    return [block.model_copy(update={"position": i}) for i, block in enumerate(blocks)]
