"""Stage 1: Prompt — render a GenerationRequest into one model instruction.

Optional sections (features, benefits, audience, tone, colour scheme, seller
instructions, seller copy) are left out entirely when the request does not
carry them; they never render as empty headings.

The model is told to emit only the narrow set of marketing blocks in
GENERATION_BLOCK_TYPES, even though the parser accepts any block type.
"""
import logging

from jinja2 import Environment, StrictUndefined

from models.generation import GenerationRequest

logger = logging.getLogger(__name__)

GENERATION_BLOCK_TYPES: tuple[str, ...] = (
    "hero", "features", "benefits", "testimonial", "faq",
    "pricing", "cta", "stats", "countdown",
)

SYSTEM_PROMPT = "You are an expert landing page designer. Always respond with valid JSON only."

_PROMPT_TEMPLATE = """\
You are an expert landing page designer. Create a high-converting {{ template_type }} for a digital product.

PRODUCT INFORMATION:
- Name: {{ product.name }}
- Description: {{ product.description }}
- Price: {{ product.price }}
{% if product.features %}
- Features: {{ product.features | join(', ') }}
{% endif %}
{% if product.benefits %}
- Benefits: {{ product.benefits | join(', ') }}
{% endif %}
{% if target_audience %}

TARGET AUDIENCE: {{ target_audience }}
{% endif %}
{% if tone %}

TONE: {{ tone }}
{% endif %}
{% if colors %}

COLOR SCHEME:
- Primary: {{ colors.primary }}
- Secondary: {{ colors.secondary }}
- Accent: {{ colors.accent }}
- Background: {{ colors.background }}
- Text: {{ colors.text }}
{% endif %}
{% if custom_instructions %}

CUSTOM INSTRUCTIONS FROM SELLER:
{{ custom_instructions }}
{% endif %}
{% if provided_content %}

CONTENT PROVIDED BY SELLER (use this content in the page):
{{ provided_content }}
{% endif %}

Generate a complete page structure with the following blocks. For each block, provide:
1. The block type
2. The content for that block
3. Recommended styling

Use these block types: {{ block_types | join(', ') }}

IMPORTANT: Respond ONLY with valid JSON in this exact format:
{
  "blocks": [
    {
      "type": "hero",
      "content": {
        "headline": "...",
        "subheadline": "...",
        "buttonText": "...",
        "buttonLink": "#buy"
      }
    },
    // ... more blocks
  ]
}

Create a compelling, conversion-focused page with:
- An attention-grabbing hero section
- Clear feature/benefit highlights
- Social proof (testimonials)
- FAQ section addressing common objections
- Strong call-to-action
- Urgency elements if appropriate

Make all copy persuasive and benefit-focused. Use the provided product information to create authentic, specific content.
"""

_env = Environment(
    trim_blocks=True,
    lstrip_blocks=True,
    keep_trailing_newline=False,
    autoescape=False,  # plain-text prompt, not HTML
    undefined=StrictUndefined,
)
_template = _env.from_string(_PROMPT_TEMPLATE)


def build_prompt(request: GenerationRequest) -> str:
    """Render the request into the prompt text. Pure and deterministic."""
    prompt = _template.render(
        template_type=request.template_type,
        product=request.product_info,
        target_audience=_present(request.target_audience),
        tone=request.tone,
        colors=request.color_scheme,
        custom_instructions=_present(request.custom_instructions),
        provided_content=_present(request.provided_content),
        block_types=GENERATION_BLOCK_TYPES,
    )
    logger.debug("Built %s prompt (%d chars)", request.template_type, len(prompt))
    return prompt


def _present(value: str | None) -> str | None:
    """Whitespace-only text counts as absent."""
    if value is None or not value.strip():
        return None
    return value.strip()
