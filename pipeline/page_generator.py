"""PageGenerator — the service object callers use.

generate_page() runs the three stages in order:
  stage1_prompt    GenerationRequest → prompt text
  stage2_generate  prompt → raw reply from the selected provider
  stage3_parse     raw reply → GenerationResult (template on malformed output)

ProviderNotConfigured and provider/transport errors from stage 2 propagate;
stage 3 never raises.
"""
import logging
from typing import Any

from models.block_defaults import default_block_content, default_block_styles
from models.catalog import BlockCatalog, ConnectionCheck, ModelCatalog, ProviderStatus
from models.generation import GenerationRequest, GenerationResult
from models.page_block import PageBlock
from pipeline import catalog, templates
from pipeline.stage1_prompt import build_prompt
from pipeline.stage2_generate import ProviderRegistry
from pipeline.stage3_parse import parse_response
from settings import Settings

logger = logging.getLogger(__name__)


class PageGenerator:
    def __init__(self, settings: Settings, registry: ProviderRegistry | None = None):
        self.settings = settings
        self.registry = registry if registry is not None else ProviderRegistry.from_settings(settings)

    def generate_page(self, request: GenerationRequest) -> GenerationResult:
        logger.info(
            "Generating %s for %r via %s",
            request.template_type, request.product_info.name, request.provider,
        )
        prompt = build_prompt(request)
        raw = self.registry.generate(request.provider, prompt, request.model)
        result = parse_response(raw, request, strict_types=self.settings.strict_block_types)
        if result.fallback:
            logger.warning("Generation fell back to template: %s", result.fallback_reason)
        else:
            logger.info("Generation complete — %d blocks", len(result.blocks))
        return result

    # -----------------------------------------------------------------------
    # Static lookups
    # -----------------------------------------------------------------------

    def default_template(self, template_type: str) -> list[PageBlock]:
        return templates.default_template(template_type)

    def default_blocks_for(self, page_type: str) -> list[PageBlock]:
        return templates.default_blocks_for(page_type)

    def block_defaults(self, block_type: str) -> dict[str, Any]:
        return {
            "content": default_block_content(block_type),
            "styles": default_block_styles(block_type),
        }

    def available_blocks(self) -> BlockCatalog:
        return catalog.available_blocks()

    def available_models(self) -> ModelCatalog:
        return catalog.available_models()

    # -----------------------------------------------------------------------
    # Provider configuration
    # -----------------------------------------------------------------------

    def is_configured(self) -> ProviderStatus:
        return self.registry.is_configured()

    def configure_gemini(self, api_key: str) -> None:
        self.registry.configure_gemini(api_key)

    def configure_openrouter(self, api_key: str) -> None:
        self.registry.configure_openrouter(api_key)

    def check_connection(self, provider: str) -> ConnectionCheck:
        return self.registry.check_connection(provider)
