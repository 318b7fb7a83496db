"""Data models for scraped records."""
from typing import Any, Optional
from pydantic import BaseModel, ConfigDict, Field


class DeviceRecord(BaseModel):
    """Device fields extracted from one GSMArena detail page."""

    # model_name/model_code clash with pydantic's reserved "model_" prefix
    model_config = ConfigDict(frozen=True, populate_by_name=True, protected_namespaces=())

    source_url: str = Field(..., alias="url", description="Detail page URL (unique per run)")
    brand: str = Field(default="", description="First word of the page title")
    model_name: str = Field(default="", alias="model", description="Rest of the page title")
    model_code: str = Field(default="", alias="serial_code", description="Model/serial code")
    misc_model_code: str = Field(
        default="",
        alias="misc_model",
        description="Same code, set only when read from the structured models field",
    )
    code_source: Optional[str] = Field(default=None, exclude=True, description="Strategy that found model_code")

    def to_output(self) -> dict[str, Any]:
        """Record as written to the JSON dump."""
        return self.model_dump(by_alias=True)
