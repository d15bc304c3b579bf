"""Tests for Stage 3 reply parsing and template fallback."""
import json
import logging

import pytest

from models.block_defaults import default_block_content, default_block_styles
from models.generation import GenerationRequest, ProductInfo
from pipeline.stage3_parse import parse_blocks, parse_response
from utils.json_extract import extract_json_candidate, load_json_object


def _request(template_type="sales-page", **overrides) -> GenerationRequest:
    data = dict(
        provider="openrouter",
        model="openai/gpt-4o",
        product_info=ProductInfo(name="Focus Masterclass", description="Deep work", price="$49"),
        template_type=template_type,
    )
    data.update(overrides)
    return GenerationRequest(**data)


def _reply(*entries) -> str:
    return json.dumps({"blocks": list(entries)})


# ---------------------------------------------------------------------------
# JSON extraction
# ---------------------------------------------------------------------------

class TestJsonExtract:
    def test_unfenced_text_is_trimmed(self):
        assert extract_json_candidate('  {"a": 1}\n') == '{"a": 1}'

    def test_json_fence(self):
        raw = 'Here you go:\n```json\n{"a": 1}\n```\nEnjoy!'
        assert extract_json_candidate(raw) == '{"a": 1}'

    def test_untagged_fence(self):
        assert extract_json_candidate('```\n{"a": 2}\n```') == '{"a": 2}'

    def test_first_fence_wins(self):
        raw = '```json\n{"first": true}\n```\n```json\n{"second": true}\n```'
        assert load_json_object(raw) == {"first": True}

    def test_array_is_not_an_object(self):
        with pytest.raises(ValueError):
            load_json_object("[1, 2, 3]")

    def test_invalid_json(self):
        with pytest.raises(ValueError):
            load_json_object("{not json")

    @pytest.mark.parametrize("constant", ["NaN", "Infinity", "-Infinity"])
    def test_non_standard_constants_rejected(self, constant):
        with pytest.raises(ValueError, match="non-standard JSON constant"):
            load_json_object('{"value": %s}' % constant)

    def test_deep_nesting_is_a_value_error(self):
        with pytest.raises(ValueError, match="nests too deeply"):
            load_json_object("[" * 100000 + "]" * 100000)


# ---------------------------------------------------------------------------
# Successful parse
# ---------------------------------------------------------------------------

class TestParseResponse:
    def test_fenced_heading_merges_over_defaults(self):
        raw = '```json\n{"blocks":[{"type":"heading","content":{"text":"Hi"}}]}\n```'
        result = parse_response(raw, _request())
        assert result.fallback is False
        assert len(result.blocks) == 1
        block = result.blocks[0]
        assert block.type == "heading"
        assert block.content == {"text": "Hi", "tag": "h2", "link": None}
        v = block.settings.visibility
        assert (v.desktop, v.tablet, v.mobile) == (True, True, True)
        assert block.settings.animation == "none"

    def test_order_is_preserved(self):
        raw = _reply({"type": "hero"}, {"type": "faq"}, {"type": "cta"}, {"type": "stats"})
        blocks = parse_response(raw, _request()).blocks
        assert [b.type for b in blocks] == ["hero", "faq", "cta", "stats"]

    def test_ids_are_fresh_and_unique(self):
        raw = _reply({"type": "hero", "id": "dup"}, {"type": "hero", "id": "dup"})
        blocks = parse_response(raw, _request()).blocks
        assert len({b.id for b in blocks}) == 2
        assert "dup" not in {b.id for b in blocks}

    def test_unknown_type_passes_through_with_empty_defaults(self):
        raw = _reply({"type": "hologram", "content": {"beam": "blue"}})
        block = parse_response(raw, _request()).blocks[0]
        assert block.type == "hologram"
        assert block.content == {"beam": "blue"}
        assert block.to_json_dict()["styles"] == {"desktop": {"padding": "20px", "margin": "0"}}

    def test_strict_mode_drops_unknown_types(self):
        raw = _reply({"type": "hologram"}, {"type": "cta"})
        result = parse_response(raw, _request(), strict_types=True)
        assert [b.type for b in result.blocks] == ["cta"]
        assert result.fallback is False

    def test_styles_merge_per_breakpoint(self):
        raw = _reply({"type": "hero", "styles": {"desktop": {"backgroundColor": "#000"}}})
        styles = parse_response(raw, _request()).blocks[0].to_json_dict()["styles"]
        assert styles["desktop"] == {"backgroundColor": "#000"}
        assert styles["mobile"] == default_block_styles("hero")["mobile"]

    def test_invalid_styles_fall_back_to_defaults(self):
        raw = _reply({"type": "button", "styles": {"desktop": "big"}})
        block = parse_response(raw, _request()).blocks[0]
        assert block.to_json_dict()["styles"] == default_block_styles("button")

    def test_animation_is_kept(self):
        raw = _reply({"type": "cta", "animation": "fadeInUp"})
        assert parse_response(raw, _request()).blocks[0].settings.animation == "fadeInUp"

    def test_non_dict_content_uses_defaults(self):
        raw = _reply({"type": "faq", "content": "nope"})
        assert parse_response(raw, _request()).blocks[0].content == default_block_content("faq")

    def test_bad_entries_are_skipped(self, caplog):
        raw = _reply("just a string", {"content": {}}, {"type": 7}, {"type": "cta"})
        with caplog.at_level(logging.WARNING, logger="pipeline.stage3_parse"):
            result = parse_response(raw, _request())
        assert [b.type for b in result.blocks] == ["cta"]
        assert result.fallback is False
        assert "skipped" in caplog.text

    def test_result_carries_provider_and_model(self):
        result = parse_response(_reply({"type": "hero"}), _request())
        assert result.provider == "openrouter"
        assert result.model == "openai/gpt-4o"

    def test_parse_blocks_returns_list(self):
        blocks = parse_blocks(_reply({"type": "hero"}), _request())
        assert [b.type for b in blocks] == ["hero"]


# ---------------------------------------------------------------------------
# Fallback
# ---------------------------------------------------------------------------

class TestFallback:
    def test_malformed_reply_uses_landing_template(self):
        result = parse_response("not json at all", _request("landing-page"))
        assert result.fallback is True
        assert result.fallback_reason.startswith("reply is not a JSON object")
        assert [b.type for b in result.blocks] == ["hero", "features", "stats", "testimonial", "cta"]

    @pytest.mark.parametrize("raw, reason", [
        ("[]", "reply is not a JSON object: expected a JSON object, got list"),
        ('{"page": []}', "reply has no 'blocks' array"),
        ('{"blocks": {"type": "hero"}}', "reply has no 'blocks' array"),
        ('{"blocks": []}', "reply has an empty 'blocks' array"),
        ('{"blocks": [1, 2]}', "reply has no usable blocks"),
    ])
    def test_fallback_reasons(self, raw, reason):
        result = parse_response(raw, _request("checkout-page"))
        assert result.fallback is True
        assert result.fallback_reason == reason
        assert [b.type for b in result.blocks] == ["heading", "pricing", "testimonial"]

    def test_strict_mode_with_only_unknown_types_falls_back(self):
        result = parse_response(_reply({"type": "hologram"}), _request(), strict_types=True)
        assert result.fallback is True
        assert result.fallback_reason == "reply has no usable blocks"

    @pytest.mark.parametrize("raw", ["", "   ", "```", "```json\n```", "null", '"blocks"', "{"])
    def test_never_raises(self, raw):
        result = parse_response(raw, _request("thank-you-page"))
        assert result.fallback is True
        assert [b.type for b in result.blocks] == ["heading", "text"]

    def test_deeply_nested_reply_falls_back(self):
        raw = '{"blocks": [' + "[" * 100000 + "]" * 100000 + "]}"
        result = parse_response(raw, _request("landing-page"))
        assert result.fallback is True
        assert result.fallback_reason.startswith("reply is not a JSON object")
        assert [b.type for b in result.blocks] == ["hero", "features", "stats", "testimonial", "cta"]

    @pytest.mark.parametrize("constant", ["NaN", "Infinity", "-Infinity"])
    def test_non_standard_number_falls_back(self, constant):
        raw = '{"blocks": [{"type": "hero", "content": {"headline": %s}}]}' % constant
        result = parse_response(raw, _request())
        assert result.fallback is True
        json.dumps(result.to_json_dict(), allow_nan=False)

    def test_none_reply(self):
        assert parse_response(None, _request()).fallback is True

    def test_fallback_blocks_have_fresh_ids(self):
        first = parse_response("oops", _request()).blocks
        second = parse_response("oops", _request()).blocks
        assert not {b.id for b in first} & {b.id for b in second}

    def test_fallback_is_logged(self, caplog):
        with caplog.at_level(logging.WARNING, logger="pipeline.stage3_parse"):
            parse_response("oops", _request("product-page"))
        assert "using product-page template" in caplog.text
