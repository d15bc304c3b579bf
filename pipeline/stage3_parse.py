"""Stage 3: Parse — turn the model's raw reply into validated page blocks.

  1. Take the first ``` fenced block if the reply has one, else the whole text.
  2. Parse it as a JSON object with a non-empty ``blocks`` array.
  3. For each entry: fresh id, ``type`` taken verbatim, content and styles
     merged over the type defaults (entry wins per key), all breakpoints
     visible, animation from the entry or "none".

Any failure in steps 1–2, or a reply with no usable entries, substitutes the
template for the request's template type. This stage never raises; the
returned GenerationResult says whether a fallback happened and why.
"""
import logging
from typing import Any

from pydantic import ValidationError

from models.block_defaults import all_visible, merge_content, merge_styles
from models.generation import GenerationRequest, GenerationResult
from models.page_block import (
    BlockSettings,
    PageBlock,
    ResponsiveStyles,
    is_known_block_type,
    new_block_id,
)
from pipeline.templates import default_template
from utils.json_extract import load_json_object

logger = logging.getLogger(__name__)


def parse_response(
    raw_text: str,
    request: GenerationRequest,
    *,
    strict_types: bool = False,
) -> GenerationResult:
    """Parse a model reply into blocks, falling back to a template on failure.

    With ``strict_types`` set, entries whose type is outside the BlockType
    vocabulary are dropped instead of passed through.
    """
    try:
        parsed = load_json_object(raw_text or "")
    except ValueError as exc:
        return _fallback(request, f"reply is not a JSON object: {exc}")

    entries = parsed.get("blocks")
    if not isinstance(entries, list):
        return _fallback(request, "reply has no 'blocks' array")
    if not entries:
        return _fallback(request, "reply has an empty 'blocks' array")

    blocks: list[PageBlock] = []
    for index, entry in enumerate(entries):
        block = _block_from_entry(index, entry, strict_types)
        if block is not None:
            blocks.append(block)

    if not blocks:
        return _fallback(request, "reply has no usable blocks")

    logger.info("Parsed %d blocks (%d entries in reply)", len(blocks), len(entries))
    return GenerationResult(blocks=blocks, provider=request.provider, model=request.model or None)


def parse_blocks(raw_text: str, request: GenerationRequest) -> list[PageBlock]:
    """Blocks only; the fallback signal is dropped."""
    return parse_response(raw_text, request).blocks


# ---------------------------------------------------------------------------
# Per-entry conversion
# ---------------------------------------------------------------------------

def _block_from_entry(index: int, entry: Any, strict_types: bool) -> PageBlock | None:
    if not isinstance(entry, dict):
        logger.warning("  block %d: not an object — skipped", index)
        return None

    block_type = entry.get("type")
    if not isinstance(block_type, str) or not block_type:
        logger.warning("  block %d: missing 'type' — skipped", index)
        return None
    if strict_types and not is_known_block_type(block_type):
        logger.warning("  block %d: unknown type %r — skipped (strict mode)", index, block_type)
        return None

    animation = entry.get("animation")
    if not isinstance(animation, str) or not animation:
        animation = "none"

    return PageBlock(
        id=new_block_id(),
        type=block_type,
        content=merge_content(block_type, entry.get("content")),
        styles=_merged_styles(index, block_type, entry.get("styles")),
        settings=BlockSettings(visibility=all_visible(), animation=animation),
    )


def _merged_styles(index: int, block_type: str, override: Any) -> ResponsiveStyles:
    """Merged styles; a malformed style override is dropped in favour of the defaults."""
    try:
        return ResponsiveStyles.model_validate(merge_styles(block_type, override))
    except ValidationError as exc:
        logger.warning(
            "  block %d (%s): invalid styles ignored (%d errors)",
            index, block_type, exc.error_count(),
        )
        return ResponsiveStyles.model_validate(merge_styles(block_type, None))


def _fallback(request: GenerationRequest, reason: str) -> GenerationResult:
    logger.warning(
        "Failed to parse AI response (%s) — using %s template", reason, request.template_type,
    )
    return GenerationResult(
        blocks=default_template(request.template_type),
        fallback=True,
        fallback_reason=reason,
        provider=request.provider,
        model=request.model or None,
    )
