from datetime import datetime

from pydantic import BaseModel, Field


class BlockCatalogEntry(BaseModel):
    type: str
    name: str
    icon: str
    description: str


class BlockCatalog(BaseModel):
    """Editor palette, grouped by category."""

    layout: list[BlockCatalogEntry] = Field(default_factory=list)
    basic: list[BlockCatalogEntry] = Field(default_factory=list)
    general: list[BlockCatalogEntry] = Field(default_factory=list)
    marketing: list[BlockCatalogEntry] = Field(default_factory=list)
    media: list[BlockCatalogEntry] = Field(default_factory=list)
    forms: list[BlockCatalogEntry] = Field(default_factory=list)

    def all_entries(self) -> list[BlockCatalogEntry]:
        return [
            *self.layout, *self.basic, *self.general,
            *self.marketing, *self.media, *self.forms,
        ]


class ModelCatalog(BaseModel):
    gemini: list[str] = Field(default_factory=list)
    openrouter: list[str] = Field(default_factory=list)


class ProviderStatus(BaseModel):
    """Which providers currently hold a credential. Never exposes the keys."""

    gemini: bool
    openrouter: bool


class ConnectionCheck(BaseModel):
    provider: str
    success: bool
    message: str | None = None
    error: str | None = None
    tested_at: datetime
