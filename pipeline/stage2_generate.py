"""Stage 2: Generate — send the prompt to the selected text-generation backend.

Two interchangeable backends:
  gemini      Google Gemini, single-turn generate_content with a JSON response type.
  openrouter  OpenRouter gateway, OpenAI-compatible chat completion with a
              JSON-only system message and a token ceiling.

Clients are built lazily from an API key and cached on the registry. A key
supplied later through configure_*() replaces the cached client reference.
There is no retry and no timeout here: SDK errors reach the caller unchanged.
"""
import logging
from datetime import datetime, timezone

from google import genai
from google.genai import types as genai_types
from openai import OpenAI

from models.catalog import ConnectionCheck, ProviderStatus
from models.errors import ProviderNotConfigured
from settings import Settings
from pipeline.catalog import DEFAULT_MODELS
from pipeline.stage1_prompt import SYSTEM_PROMPT

logger = logging.getLogger(__name__)

OPENROUTER_BASE_URL = "https://openrouter.ai/api/v1"

_PROBE_PROMPT = 'Say "Hello" in one word.'
_GEMINI_PROBE_MODEL = "gemini-2.0-flash"
_OPENROUTER_PROBE_MAX_TOKENS = 10

_PROVIDER_LABELS = {"gemini": "Gemini", "openrouter": "OpenRouter"}


class ProviderRegistry:
    """Holds the credentials and lazily built clients for both backends.

    Owned by one PageGenerator; nothing here is module-level state. Tests can
    pass ready-made fake clients through ``gemini_client``/``openrouter_client``.
    """

    def __init__(
        self,
        gemini_api_key: str | None = None,
        openrouter_api_key: str | None = None,
        *,
        openrouter_base_url: str = OPENROUTER_BASE_URL,
        openrouter_max_tokens: int = 8192,
        gemini_client=None,
        openrouter_client=None,
    ):
        self._gemini_api_key = gemini_api_key or None
        self._openrouter_api_key = openrouter_api_key or None
        self._openrouter_base_url = openrouter_base_url
        self._openrouter_max_tokens = openrouter_max_tokens
        self._gemini_client = gemini_client
        self._openrouter_client = openrouter_client

    @classmethod
    def from_settings(cls, settings: Settings) -> "ProviderRegistry":
        return cls(
            gemini_api_key=settings.gemini_api_key,
            openrouter_api_key=settings.openrouter_api_key,
            openrouter_base_url=settings.openrouter_base_url,
            openrouter_max_tokens=settings.openrouter_max_tokens,
        )

    # -----------------------------------------------------------------------
    # Runtime configuration
    # -----------------------------------------------------------------------

    def configure_gemini(self, api_key: str) -> None:
        self._gemini_api_key = _require_key(api_key, "gemini")
        self._gemini_client = None
        logger.info("Gemini API key configured")

    def configure_openrouter(self, api_key: str) -> None:
        self._openrouter_api_key = _require_key(api_key, "openrouter")
        self._openrouter_client = None
        logger.info("OpenRouter API key configured")

    def is_configured(self) -> ProviderStatus:
        return ProviderStatus(
            gemini=bool(self._gemini_api_key or self._gemini_client is not None),
            openrouter=bool(self._openrouter_api_key or self._openrouter_client is not None),
        )

    # -----------------------------------------------------------------------
    # Generation
    # -----------------------------------------------------------------------

    def generate(self, provider: str, prompt: str, model: str = "") -> str:
        """Return the raw reply text of the selected backend.

        Raises ProviderNotConfigured when that backend has no credential; this
        happens before any client is built. Only the named backend is touched.
        """
        if provider == "gemini":
            client = self._gemini()
            return self._call_gemini(client, prompt, model or DEFAULT_MODELS["gemini"])
        if provider == "openrouter":
            client = self._openrouter()
            return self._call_openrouter(client, prompt, model or DEFAULT_MODELS["openrouter"])
        raise ValueError(f"unknown AI provider: {provider!r}")

    def _call_gemini(self, client, prompt: str, model: str) -> str:
        logger.info("Calling Gemini (%s)", model)
        response = client.models.generate_content(
            model=model,
            contents=prompt,
            config=genai_types.GenerateContentConfig(response_mime_type="application/json"),
        )
        return response.text or ""

    def _call_openrouter(self, client, prompt: str, model: str) -> str:
        logger.info("Calling OpenRouter (%s, max_tokens=%d)", model, self._openrouter_max_tokens)
        response = client.chat.completions.create(
            model=model,
            messages=[
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": prompt},
            ],
            max_tokens=self._openrouter_max_tokens,
        )
        if not response.choices:
            return ""
        return response.choices[0].message.content or ""

    # -----------------------------------------------------------------------
    # Connection check
    # -----------------------------------------------------------------------

    def check_connection(self, provider: str) -> ConnectionCheck:
        """Send a one-word probe and report the outcome instead of raising."""
        label = _PROVIDER_LABELS.get(provider)
        if label is None:
            raise ValueError(f"unknown AI provider: {provider!r}")
        tested_at = datetime.now(timezone.utc)
        try:
            if provider == "gemini":
                self._gemini().models.generate_content(
                    model=_GEMINI_PROBE_MODEL,
                    contents=_PROBE_PROMPT,
                )
            else:
                self._openrouter().chat.completions.create(
                    model=DEFAULT_MODELS["openrouter"],
                    messages=[{"role": "user", "content": _PROBE_PROMPT}],
                    max_tokens=_OPENROUTER_PROBE_MAX_TOKENS,
                )
        except ProviderNotConfigured:
            return ConnectionCheck(
                provider=provider,
                success=False,
                error=f"{label} API key not configured",
                tested_at=tested_at,
            )
        except Exception as exc:
            logger.warning("%s connection check failed: %s", label, exc)
            return ConnectionCheck(
                provider=provider,
                success=False,
                error=str(exc) or "API call failed",
                tested_at=tested_at,
            )
        logger.info("%s connection check succeeded", label)
        return ConnectionCheck(
            provider=provider,
            success=True,
            message="Connection successful",
            tested_at=tested_at,
        )

    # -----------------------------------------------------------------------
    # Lazy clients
    # -----------------------------------------------------------------------

    def _gemini(self):
        client = self._gemini_client
        if client is None:
            if not self._gemini_api_key:
                raise ProviderNotConfigured("gemini")
            client = genai.Client(api_key=self._gemini_api_key)
            self._gemini_client = client
        return client

    def _openrouter(self):
        client = self._openrouter_client
        if client is None:
            if not self._openrouter_api_key:
                raise ProviderNotConfigured("openrouter")
            client = OpenAI(api_key=self._openrouter_api_key, base_url=self._openrouter_base_url)
            self._openrouter_client = client
        return client


def _require_key(api_key: str, provider: str) -> str:
    if not api_key or not api_key.strip():
        raise ValueError(f"{provider} API key must not be blank")
    return api_key.strip()
