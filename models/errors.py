class PageGenerationError(Exception):
    """Base class for errors raised by the page generation pipeline."""


class ProviderNotConfigured(PageGenerationError):
    """The requested text-generation provider has no API key.

    Raised before any client is built or any network call is made, so a caller
    can prompt for configuration instead of retrying.
    """

    def __init__(self, provider: str):
        self.provider = provider
        super().__init__(f"AI provider {provider} is not configured")
