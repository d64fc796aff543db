"""Core configuration exports."""

from .config import (
    AI_CHOICES,
    BANNER,
    CATEGORY_CHOICES,
    FRAMEWORK_CHOICES,
    LEGACY_RULES_FILENAME,
    LEGACY_RULES_TOOL,
    RULES_DIRNAME,
    RULES_FILENAME,
    TAGLINE,
    TEMPLATES_ROOT_ENV,
)

__all__ = [
    "AI_CHOICES",
    "BANNER",
    "CATEGORY_CHOICES",
    "FRAMEWORK_CHOICES",
    "LEGACY_RULES_FILENAME",
    "LEGACY_RULES_TOOL",
    "RULES_DIRNAME",
    "RULES_FILENAME",
    "TAGLINE",
    "TEMPLATES_ROOT_ENV",
]
