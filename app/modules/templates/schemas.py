"""Invocation and configuration schemas using Pydantic.

Input documents are decoded into these models at the boundary; a validation
failure is reported as InvalidInput.

Key distinction from normalizer.py:
  - schemas.py: typed contracts with full Pydantic validation
  - normalizer.py: repairs untyped configuration documents coming from the
    setup flow before they are converted into TemplateConfig
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class TenantContext(BaseModel):
    """Tenant scope of a message.

    ``env`` and ``tenant`` must be present; empty values are rejected later as
    InvalidScope rather than as a decoding error.
    """

    model_config = ConfigDict(extra="allow")

    env: str
    tenant: str
    team: Optional[str] = None
    user: Optional[str] = None
    session_id: Optional[str] = None


class MessageEnvelope(BaseModel):
    """Channel message the invocation reacts to."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    id: str
    channel: str
    tenant: TenantContext
    session_id: str = ""
    reply_scope: Optional[Any] = None
    from_: Optional[Any] = Field(default=None, alias="from")
    to: List[Any] = Field(default_factory=list)
    correlation_id: Optional[str] = None
    text: Optional[str] = None
    attachments: List[Any] = Field(default_factory=list)
    metadata: Dict[str, str] = Field(default_factory=dict)

    def to_document(self) -> Dict[str, Any]:
        """Plain JSON-compatible view exposed to templates as ``msg``."""
        return self.model_dump(mode="json", by_alias=True)


class Invocation(BaseModel):
    """One invocation: configuration, message and payload.

    ``config`` stays untyped here; locale selection reads it before it is
    validated as a TemplateConfig.
    """

    model_config = ConfigDict(extra="ignore")

    config: Any
    msg: MessageEnvelope
    payload: Any
    connections: List[str] = Field(default_factory=list)


class TemplatesConfig(BaseModel):
    """The ``templates`` section of the component configuration."""

    model_config = ConfigDict(extra="ignore")

    text: str = Field(..., min_length=1, description="Template source")
    output_path: Optional[str] = Field(
        default=None, description="Dotted path the rendered text is nested at"
    )
    wrap: bool = Field(default=True, description="Nest the rendered text in an object")
    routing: Optional[str] = Field(
        default=None, description="Routing value emitted in control"
    )


class TemplateConfig(BaseModel):
    """Typed component configuration."""

    model_config = ConfigDict(extra="ignore")

    templates: TemplatesConfig
