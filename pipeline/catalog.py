"""Static lookups for the editor: block palette and selectable models per provider."""
from models.catalog import BlockCatalog, BlockCatalogEntry, ModelCatalog

DEFAULT_MODELS: dict[str, str] = {
    "gemini": "gemini-2.5-flash",
    "openrouter": "meta-llama/llama-3.3-70b-instruct",
}

# (type, name, icon, description) per palette category
_PALETTE: dict[str, list[tuple[str, str, str, str]]] = {
    "layout": [
        ("section", "Section", "layout", "Full-width section container"),
        ("container", "Container", "box", "Centered content container"),
        ("columns", "Columns", "columns", "Multi-column layout"),
        ("spacer", "Spacer", "minus", "Vertical spacing"),
        ("divider", "Divider", "separator-horizontal", "Horizontal line divider"),
    ],
    "basic": [
        ("heading", "Heading", "heading", "H1-H6 headings"),
        ("text", "Text Editor", "type", "Rich text content"),
        ("image", "Image", "image", "Single image with options"),
        ("button", "Button", "mouse-pointer-click", "Call-to-action button"),
        ("icon", "Icon", "smile", "Font icon"),
        ("star-rating", "Star Rating", "star", "Star rating display"),
    ],
    "general": [
        ("icon-box", "Icon Box", "box", "Icon with title and text"),
        ("image-box", "Image Box", "image", "Image with caption"),
        ("icon-list", "Icon List", "list", "List with icons"),
        ("counter", "Counter", "hash", "Animated number counter"),
        ("progress-bar", "Progress Bar", "bar-chart", "Progress indicator"),
        ("testimonial", "Testimonial", "message-circle", "Customer testimonial"),
        ("tabs", "Tabs", "folder", "Tabbed content"),
        ("accordion", "Accordion", "chevrons-down", "Collapsible sections"),
        ("social-icons", "Social Icons", "share-2", "Social media links"),
        ("alert", "Alert", "alert-circle", "Notice/alert box"),
    ],
    "marketing": [
        ("hero", "Hero Section", "monitor", "Full-width hero with CTA"),
        ("features", "Features", "grid", "Feature grid"),
        ("benefits", "Benefits", "check-circle", "Benefits list"),
        ("faq", "FAQ", "help-circle", "FAQ accordion"),
        ("pricing", "Pricing Table", "dollar-sign", "Pricing cards"),
        ("cta", "Call to Action", "megaphone", "CTA section"),
        ("testimonial-carousel", "Testimonial Carousel", "message-square", "Scrolling testimonials"),
        ("countdown", "Countdown", "clock", "Timer countdown"),
        ("stats", "Statistics", "trending-up", "Stats/numbers display"),
        ("comparison-table", "Comparison Table", "table", "Feature comparison"),
    ],
    "media": [
        ("video", "Video", "play-circle", "Video embed"),
        ("image-gallery", "Image Gallery", "images", "Image grid gallery"),
        ("media-carousel", "Media Carousel", "layers", "Image/video slider"),
        ("before-after", "Before/After", "flip-horizontal", "Comparison slider"),
        ("logo-carousel", "Logo Carousel", "award", "Client logos slider"),
    ],
    "forms": [
        ("form", "Form", "file-text", "Contact/lead form"),
        ("login", "Login Form", "log-in", "User login form"),
    ],
}

_GEMINI_MODELS = [
    "gemini-3-pro",
    "gemini-2.5-pro",
    "gemini-2.5-flash",
    "gemini-2.5-flash-lite",
    "gemini-2.0-flash",
    "gemini-1.5-pro",
    "gemini-1.5-flash",
]

_OPENROUTER_MODELS = [
    "openai/gpt-5",
    "openai/gpt-5-mini",
    "openai/gpt-4.1",
    "openai/gpt-4.1-mini",
    "openai/gpt-4o",
    "openai/o3",
    "openai/o3-mini",
    "anthropic/claude-opus-4.1",
    "anthropic/claude-sonnet-4-0",
    "anthropic/claude-sonnet-3.7",
    "anthropic/claude-sonnet-3.5",
    "anthropic/claude-haiku-3.5",
    "google/gemini-3-pro",
    "google/gemini-2.5-pro",
    "google/gemini-2.5-flash",
    "google/gemini-2.5-flash-lite",
    "x-ai/grok-4",
    "x-ai/grok-4.1-fast",
    "x-ai/grok-3",
    "x-ai/grok-3-mini",
    "deepseek/deepseek-r1",
    "deepseek/deepseek-v3.2",
    "deepseek/deepseek-coder",
    "meta-llama/llama-4-maverick",
    "meta-llama/llama-3.3-70b-instruct",
    "mistralai/mistral-large-3",
    "mistralai/mistral-small-3.1",
    "qwen/qwen-3-235b-a22b-instruct",
]


def available_blocks() -> BlockCatalog:
    return BlockCatalog(**{
        category: [
            BlockCatalogEntry(type=t, name=name, icon=icon, description=description)
            for t, name, icon, description in entries
        ]
        for category, entries in _PALETTE.items()
    })


def available_models() -> ModelCatalog:
    return ModelCatalog(gemini=list(_GEMINI_MODELS), openrouter=list(_OPENROUTER_MODELS))
