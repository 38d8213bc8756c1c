"""
Preview Schemas
===============
Request and response models for the live preview endpoint.
"""
from pydantic import BaseModel, Field
from typing import Optional, Dict, Any


class PreviewRequest(BaseModel):
    """Field edits keyed like the page query string.

    Omitted fields keep their defaults; fields sent as "" are treated as
    cleared and validated as such.
    """

    title: Optional[str] = None
    description: Optional[str] = None
    site_name: Optional[str] = Field(default=None, alias="siteName")
    canonical: Optional[str] = None
    type: Optional[str] = None
    twitter_card: Optional[str] = Field(default=None, alias="twitterCard")
    author: Optional[str] = None
    og_image_text: Optional[str] = Field(default=None, alias="ogImageText")
    og_bg: Optional[str] = Field(default=None, alias="ogBg")
    og_fg: Optional[str] = Field(default=None, alias="ogFg")
    jsonld_type: Optional[str] = Field(default=None, alias="jsonldType")

    class Config:
        extra = "forbid"
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "title": "Test",
                "canonical": "https://example.com/",
                "ogBg": "#000000",
                "ogFg": "#ffffff",
            }
        }

    def changes(self) -> Dict[str, str]:
        """Explicitly sent fields, keyed by query-string key."""
        sent = self.model_dump(by_alias=True, exclude_unset=True)
        return {k: ("" if v is None else v) for k, v in sent.items()}


class FieldErrorOut(BaseModel):
    """One field-local validation error"""

    kind: str = Field(..., description="required, invalid_url, invalid_hex, invalid_choice")
    message: str


class ContrastOut(BaseModel):
    """Contrast verdict for the OG image colours"""

    ratio: float = Field(default=0.0, description="WCAG ratio, 0 when unparsable")
    level: str = Field(..., description="good, large_text, low")
    message: str


class PreviewResponse(BaseModel):
    """Everything the page needs to re-render after an edit"""

    values: Dict[str, str]
    errors: Dict[str, FieldErrorOut] = Field(default_factory=dict)
    preview_url: str
    snippet: str
    contrast: ContrastOut
    jsonld: Dict[str, Any] = Field(default_factory=dict)
