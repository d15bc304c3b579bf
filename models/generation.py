"""Generation request and result — input and output of PageGenerator.generate_page."""
import json
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from models.page_block import PageBlock

Provider = Literal["gemini", "openrouter"]
TemplateType = Literal[
    "sales-page", "landing-page", "product-page", "checkout-page", "thank-you-page",
]
Tone = Literal["professional", "casual", "urgent", "friendly", "luxury"]


class _Frozen(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class ProductInfo(_Frozen):
    name: str
    description: str
    price: str
    features: list[str] | None = None
    benefits: list[str] | None = None
    images: list[str] | None = None

    @field_validator("price", mode="before")
    @classmethod
    def price_as_text(cls, v):
        # Catalog rows carry numeric prices; the prompt only ever shows text.
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return v


class ColorScheme(_Frozen):
    primary: str
    secondary: str
    accent: str
    background: str
    text: str


class GenerationRequest(_Frozen):
    """Everything the pipeline needs for one page generation. Immutable."""

    provider: Provider
    model: str = ""  # empty → provider default
    product_info: ProductInfo
    custom_instructions: str | None = None
    provided_content: str | None = None
    template_type: TemplateType
    target_audience: str | None = None
    tone: Tone | None = None
    color_scheme: ColorScheme | None = None

    @classmethod
    def load(cls, path: Path, **defaults) -> "GenerationRequest":
        """Load a request from a .json, .yaml or .yml file (camelCase or snake_case keys).

        ``defaults`` fill fields the file leaves out, e.g. ``provider``.
        Raises FileNotFoundError if path does not exist.
        """
        text = path.read_text(encoding="utf-8")
        if path.suffix.lower() in (".yaml", ".yml"):
            import yaml  # only needed for YAML request files
            data = yaml.safe_load(text) or {}
        else:
            data = json.loads(text)
        if not isinstance(data, dict):
            raise ValueError(f"{path}: request file must contain a mapping")
        return cls.model_validate({**defaults, **data})


class GenerationResult(BaseModel):
    """Blocks produced for one request, plus whether they came from a fallback template.

    ``blocks`` is never empty. When the model reply could not be used,
    ``fallback`` is True and ``fallback_reason`` says why.
    """

    blocks: list[PageBlock] = Field(min_length=1)
    fallback: bool = False
    fallback_reason: str | None = None
    provider: Provider | None = None
    model: str | None = None

    def to_json_dict(self) -> dict:
        return {
            "blocks": [b.to_json_dict() for b in self.blocks],
            "fallback": self.fallback,
            "fallbackReason": self.fallback_reason,
            "provider": self.provider,
            "model": self.model,
        }
