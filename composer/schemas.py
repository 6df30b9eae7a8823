"""
Email Composer - Pydantic Schemas

PURE DATA MODELS - NO LOGIC
Wire names are camelCase (appName, ctaLink, backendUsed, templateName);
Python attributes are snake_case.
"""

from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, Field


class TemplateVariables(BaseModel):
    """Caller-supplied placeholder values. Unset fields fall back to defaults."""

    user: Optional[str] = Field(None, description="Recipient name")
    app_name: Optional[str] = Field(None, alias="appName", description="Product name")
    cta_link: Optional[str] = Field(None, alias="ctaLink", description="Call-to-action URL")

    class Config:
        frozen = True
        populate_by_name = True

    def as_placeholders(self) -> Dict[str, Optional[str]]:
        """Placeholder name -> value, as consumed by replace_variables()."""
        return {"user": self.user, "appName": self.app_name, "ctaLink": self.cta_link}


class GenerationRequest(BaseModel):
    """
    One generation request.

    Immutable for the whole cascade run. The prompt is accepted as-is and
    checked by EmailGenerator, so a missing, null or non-string prompt gets
    the same PromptValidationError (HTTP 400) as a short one.
    """

    prompt: Any = Field(None, description="Free-text description of the email to write")
    variables: TemplateVariables = Field(default_factory=TemplateVariables)

    class Config:
        frozen = True


class RenderedMessage(BaseModel):
    """Terminal artifact returned to the caller. Never persisted here."""

    subject: str
    body: str
    source: Literal["generated", "template"]
    backend_used: Optional[str] = Field(None, alias="backendUsed")
    template_name: Optional[str] = Field(None, alias="templateName")
    warning: Optional[str] = None

    class Config:
        populate_by_name = True


class TemplateSummary(BaseModel):
    id: str
    name: str
    keywords: List[str]


class GenerationStatus(BaseModel):
    """Read-only view of the engine configuration for the admin UI."""

    ai_configured: bool = Field(..., alias="aiConfigured")
    backends: List[str]
    templates: List[TemplateSummary]

    class Config:
        populate_by_name = True
