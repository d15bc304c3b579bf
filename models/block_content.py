"""Typed content variants, one per block type that ships default content.

Field defaults are the placeholder copy a freshly inserted block shows, so
the default content map for a type is simply ``Variant().model_dump(by_alias=True)``.
Every variant accepts extra keys: the editor and the model may add fields
the variant does not know about, and those must survive a round trip.
"""
from datetime import datetime, timedelta, timezone
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _Content(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="allow")


# ---------------------------------------------------------------------------
# Basic
# ---------------------------------------------------------------------------

class HeadingContent(_Content):
    text: str = "Your Heading Here"
    tag: str = "h2"
    link: str | None = None


class TextContent(_Content):
    html: str = "<p>Add your text content here. You can format it with bold, italic, and more.</p>"


class ImageContent(_Content):
    src: str = ""
    alt: str = ""
    caption: str = ""
    size: str = "full"
    link_to: str = "none"


class ButtonContent(_Content):
    text: str = "Click Here"
    link: str = "#"
    size: str = "medium"
    variant: str = "primary"
    icon: str | None = None
    icon_position: str = "left"


# ---------------------------------------------------------------------------
# Marketing
# ---------------------------------------------------------------------------

class HeroContent(_Content):
    headline: str = "Transform Your Life Today"
    subheadline: str = "Discover the proven system that has helped thousands achieve their goals"
    button_text: str = "Get Started Now"
    button_link: str = "#buy"
    background_image: str = ""
    overlay: bool = True
    overlay_color: str = "rgba(0,0,0,0.5)"


class FeatureItem(_Content):
    icon: str = "check"
    title: str
    description: str


class FeaturesContent(_Content):
    title: str = "Why Choose Us"
    subtitle: str = "Everything you need to succeed"
    items: list[FeatureItem] = Field(default_factory=lambda: [
        FeatureItem(title=f"Feature {n}", description=f"Description of feature {n}")
        for n in (1, 2, 3)
    ])
    columns: int = 3


class BenefitItem(_Content):
    icon: str = "check-circle"
    text: str


class BenefitsContent(_Content):
    title: str = "What You Get"
    items: list[BenefitItem] = Field(default_factory=lambda: [
        BenefitItem(text="Benefit number one"),
        BenefitItem(text="Benefit number two"),
        BenefitItem(text="Benefit number three"),
    ])


class TestimonialContent(_Content):
    __test__ = False  # not a pytest class

    quote: str = "This product changed my life! Highly recommended."
    author: str = "John Doe"
    role: str = "Happy Customer"
    avatar: str = ""
    rating: int = 5


class FaqItem(_Content):
    question: str
    answer: str


class FaqContent(_Content):
    title: str = "Frequently Asked Questions"
    items: list[FaqItem] = Field(default_factory=lambda: [
        FaqItem(question="How does it work?", answer="Simply follow our step-by-step process..."),
        FaqItem(question="Is there a guarantee?", answer="Yes, we offer a 30-day money-back guarantee."),
        FaqItem(question="How long does it take?", answer="Results vary, but most see changes within weeks."),
    ])


class PricingPlan(_Content):
    name: str
    price: str
    currency: str = "$"
    period: str = "month"
    features: list[str] = Field(default_factory=list)
    button_text: str = "Get Started"
    highlighted: bool = False


class PricingContent(_Content):
    title: str = "Choose Your Plan"
    plans: list[PricingPlan] = Field(default_factory=lambda: [
        PricingPlan(
            name="Basic",
            price="29",
            features=["Feature 1", "Feature 2", "Feature 3"],
        ),
        PricingPlan(
            name="Pro",
            price="79",
            features=["All Basic features", "Feature 4", "Feature 5", "Priority support"],
            button_text="Get Pro",
            highlighted=True,
        ),
    ])


class CtaContent(_Content):
    headline: str = "Ready to Get Started?"
    subheadline: str = "Join thousands of satisfied customers today"
    button_text: str = "Buy Now"
    button_link: str = "#checkout"
    urgency_text: str = "Limited time offer - 50% OFF"


def _one_week_from_now() -> str:
    end = datetime.now(timezone.utc) + timedelta(days=7)
    return end.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class CountdownContent(_Content):
    end_date: str = Field(default_factory=_one_week_from_now)
    title: str = "Offer Ends In"
    show_days: bool = True
    show_hours: bool = True
    show_minutes: bool = True
    show_seconds: bool = True


class StatItem(_Content):
    value: str
    label: str


class StatsContent(_Content):
    items: list[StatItem] = Field(default_factory=lambda: [
        StatItem(value="10K+", label="Happy Customers"),
        StatItem(value="99%", label="Satisfaction Rate"),
        StatItem(value="24/7", label="Support Available"),
    ])


# ---------------------------------------------------------------------------
# General / media / forms / layout
# ---------------------------------------------------------------------------

class IconBoxContent(_Content):
    icon: str = "star"
    title: str = "Icon Box Title"
    description: str = "Add a description for your icon box here."
    icon_position: str = "top"


class AccordionItem(_Content):
    title: str
    content: str


class AccordionContent(_Content):
    items: list[AccordionItem] = Field(default_factory=lambda: [
        AccordionItem(title="Accordion Item 1", content="Content for item 1"),
        AccordionItem(title="Accordion Item 2", content="Content for item 2"),
    ])
    default_open: int = 0


class VideoContent(_Content):
    source: str = "youtube"
    video_id: str = ""
    autoplay: bool = False
    muted: bool = False
    loop: bool = False
    controls: bool = True


class FormField(_Content):
    type: str
    name: str
    label: str
    required: bool = False


class FormContent(_Content):
    fields: list[FormField] = Field(default_factory=lambda: [
        FormField(type="text", name="name", label="Name", required=True),
        FormField(type="email", name="email", label="Email", required=True),
        FormField(type="textarea", name="message", label="Message", required=False),
    ])
    submit_text: str = "Submit"
    success_message: str = "Thank you for your submission!"


class DividerContent(_Content):
    style: str = "solid"
    weight: int = 1
    color: str = "#e5e5e5"
    width: str = "100%"


class SpacerHeight(_Content):
    desktop: str = "50px"
    tablet: str = "40px"
    mobile: str = "30px"


class SpacerContent(_Content):
    height: SpacerHeight = Field(default_factory=SpacerHeight)


CONTENT_MODELS: dict[str, type[_Content]] = {
    "heading": HeadingContent,
    "text": TextContent,
    "image": ImageContent,
    "button": ButtonContent,
    "hero": HeroContent,
    "features": FeaturesContent,
    "benefits": BenefitsContent,
    "testimonial": TestimonialContent,
    "faq": FaqContent,
    "pricing": PricingContent,
    "cta": CtaContent,
    "countdown": CountdownContent,
    "stats": StatsContent,
    "icon-box": IconBoxContent,
    "accordion": AccordionContent,
    "video": VideoContent,
    "form": FormContent,
    "divider": DividerContent,
    "spacer": SpacerContent,
}


def content_defaults(block_type: str) -> dict[str, Any]:
    """Default content map for a type, or an empty dict when it has no variant."""
    variant = CONTENT_MODELS.get(block_type)
    if variant is None:
        return {}
    return variant().model_dump(mode="json", by_alias=True)
