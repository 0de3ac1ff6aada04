"""Configuration schema validation using Pydantic."""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from appcontrol.voice.triggers import DEFAULT_TRIGGER_KEYWORDS


def _default_keywords(category: str):
    return Field(default_factory=lambda: list(DEFAULT_TRIGGER_KEYWORDS[category]), min_length=1)


class TriggersConfig(BaseModel):
    """Fixed trigger keywords per category."""

    model_config = ConfigDict(extra="forbid")  # Unknown categories are typos

    advance: list[str] = _default_keywords("advance")
    retreat: list[str] = _default_keywords("retreat")
    like: list[str] = _default_keywords("like")
    dislike: list[str] = _default_keywords("dislike")
    expand: list[str] = _default_keywords("expand")

    @field_validator("advance", "retreat", "like", "dislike", "expand")
    @classmethod
    def validate_keywords(cls, v):
        """Reject blank keywords."""
        if any(not keyword.strip() for keyword in v):
            raise ValueError("Keywords must not be blank")
        return v


class ItemConfig(BaseModel):
    """One media list entry."""

    title: str = Field(min_length=1)
    description: str = ""


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    file: str | None = None
    max_size_mb: int = Field(default=10, gt=0)
    backup_count: int = Field(default=3, ge=0)

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v):
        """Accept lowercase level names."""
        return v.upper() if isinstance(v, str) else v


class AppConfig(BaseModel):
    """Top-level application configuration."""

    model_config = ConfigDict(extra="allow")

    title: str = "Voice Control Demo"
    triggers: TriggersConfig = Field(default_factory=TriggersConfig)
    items: list[ItemConfig] = Field(default_factory=list)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def validate_config(config_dict: dict[str, Any]) -> AppConfig:
    """Validate configuration dictionary.

    Args:
        config_dict: Raw configuration dictionary from YAML

    Returns:
        Validated AppConfig object

    Raises:
        ValidationError: If configuration is invalid
    """
    return AppConfig(**config_dict)


def config_to_dict(config: AppConfig) -> dict[str, Any]:
    """Convert AppConfig back to dictionary.

    Args:
        config: Validated AppConfig object

    Returns:
        Configuration dictionary
    """
    return config.model_dump()
