#!/usr/bin/env python3
"""Command-line front end for the page generation pipeline.

Usage:
    pagegen generate request.yaml                 # call the provider, write blocks JSON
    pagegen generate request.json --provider openrouter --model openai/gpt-4o
    pagegen template landing-page                 # fallback template, no model call
    pagegen template thankyou --funnel            # funnel scaffold with positions
    pagegen defaults hero                         # default content + styles for a type
    pagegen blocks | models | status
    pagegen check gemini                          # one-word connection probe
"""
import argparse
import json
import logging
import re
import sys
from pathlib import Path

from models.errors import ProviderNotConfigured
from models.generation import GenerationRequest
from pipeline.page_generator import PageGenerator
from settings import Settings

logger = logging.getLogger("generate_page")


def _slugify(text: str) -> str:
    """Convert a product name to a safe ASCII filename slug."""
    text = re.sub(r"[^a-z0-9]+", "_", text.lower()).strip("_")
    return text[:50] or "page"


def _emit(data, out: Path | None) -> None:
    text = json.dumps(data, indent=2, ensure_ascii=False)
    if out is None:
        print(text)
        return
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(text + "\n", encoding="utf-8")
    logger.info("Wrote %s", out)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="pagegen", description=__doc__.splitlines()[0])
    sub = parser.add_subparsers(dest="command", required=True)

    gen = sub.add_parser("generate", help="Generate page blocks with an AI provider")
    gen.add_argument("request", type=Path, help="Request file (.json, .yaml, .yml)")
    gen.add_argument("--provider", choices=["gemini", "openrouter"],
                     help="Override the request's provider")
    gen.add_argument("--model", help="Override the request's model")
    gen.add_argument("--out", type=Path,
                     help="Output file (default: <output_dir>/<product>_<template>.json)")
    gen.add_argument("--stdout", action="store_true", help="Print JSON instead of writing a file")

    tpl = sub.add_parser("template", help="Print a built-in template")
    tpl.add_argument("name", help="Template type or funnel page type")
    tpl.add_argument("--funnel", action="store_true",
                     help="Funnel scaffold (blocks carry explicit positions)")

    dfl = sub.add_parser("defaults", help="Print default content and styles for a block type")
    dfl.add_argument("block_type")

    sub.add_parser("blocks", help="Print the block palette")
    sub.add_parser("models", help="Print selectable models and provider status")
    sub.add_parser("status", help="Print which providers are configured")

    chk = sub.add_parser("check", help="Probe a provider with a one-word request")
    chk.add_argument("provider", choices=["gemini", "openrouter"])
    return parser


def _generate(generator: PageGenerator, args: argparse.Namespace) -> int:
    settings = generator.settings
    defaults = {"provider": settings.default_provider, "model": settings.default_model}
    request = GenerationRequest.load(args.request, **defaults)
    overrides = {k: v for k, v in (("provider", args.provider), ("model", args.model)) if v}
    if overrides:
        request = request.model_copy(update=overrides)

    result = generator.generate_page(request)

    out = None
    if not args.stdout:
        out = args.out or settings.output_dir / (
            f"{_slugify(request.product_info.name)}_{request.template_type}.json"
        )
    _emit(result.to_json_dict(), out)
    return 0


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    settings = Settings()

    logging.basicConfig(
        level=settings.log_level_value,
        format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
        datefmt="%H:%M:%S",
    )

    generator = PageGenerator(settings)

    try:
        if args.command == "generate":
            return _generate(generator, args)
        if args.command == "template":
            blocks = (generator.default_blocks_for(args.name) if args.funnel
                      else generator.default_template(args.name))
            _emit({"blocks": [b.to_json_dict() for b in blocks]}, None)
        elif args.command == "defaults":
            _emit(generator.block_defaults(args.block_type), None)
        elif args.command == "blocks":
            _emit(generator.available_blocks().model_dump(mode="json"), None)
        elif args.command == "models":
            _emit({
                "models": generator.available_models().model_dump(mode="json"),
                "configured": generator.is_configured().model_dump(mode="json"),
            }, None)
        elif args.command == "status":
            _emit(generator.is_configured().model_dump(mode="json"), None)
        elif args.command == "check":
            check = generator.check_connection(args.provider)
            _emit(check.model_dump(mode="json", exclude_none=True), None)
            return 0 if check.success else 1
    except ProviderNotConfigured as exc:
        logger.error("%s — set PAGEGEN_%s_API_KEY", exc, exc.provider.upper())
        return 2
    except ValueError as exc:  # includes pydantic.ValidationError
        logger.error("Invalid request: %s", exc)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
