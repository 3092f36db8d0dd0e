"""Templates feature settings."""

from pydantic import Field, field_validator

from infrastructure.configuration.base import FeatureSettings


class TemplatesFeatureSettings(FeatureSettings):
    """Configuration for the template rendering component.

    Environment Variables:
        TEMPLATES_DEFAULT_OUTPUT_PATH: Dotted path used to nest rendered text
            when a configuration does not set ``output_path`` (default: text)
        TEMPLATES_DEFAULT_ROUTING: Routing value emitted in ``control`` when a
            configuration does not set ``routing`` (default: out)

    Example:
        ```python
        from infrastructure.configuration import settings

        path = settings.templates.default_output_path
        ```
    """

    default_output_path: str = Field(
        default="text",
        alias="TEMPLATES_DEFAULT_OUTPUT_PATH",
        description="Dotted output path used when none is configured",
    )
    default_routing: str = Field(
        default="out",
        alias="TEMPLATES_DEFAULT_ROUTING",
        description="Routing value used when none is configured",
    )

    @field_validator("default_output_path", "default_routing")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("value must not be blank")
        return v
