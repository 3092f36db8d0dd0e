"""Feature settings __init__ - exports all feature settings."""

from infrastructure.configuration.features.templates import TemplatesFeatureSettings

__all__ = [
    "TemplatesFeatureSettings",
]
