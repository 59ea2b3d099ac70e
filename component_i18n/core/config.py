"""Translation engine configuration settings."""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class I18nSettings(BaseSettings):
    """Engine defaults and input limits.

    Environment Variables:
        I18N_DEFAULT_LANGUAGE: Language used when a call omits one and no
            registered language is flagged as default (default: en-US)
        I18N_FALLBACK_LANGUAGE: Optional language retried when a key or
            language table is missing (default: unset, strict)
        I18N_MAX_TEMPLATE_LENGTH: Longest template accepted by t()
        I18N_MAX_KEY_LENGTH: Longest string key accepted
        I18N_MAX_COMPONENT_ID_LENGTH: Longest component id accepted
        I18N_STRICT_PLURAL_VALIDATION: Report missing plural forms as
            errors instead of warnings
    """

    default_language: str = Field(default="en-US", alias="I18N_DEFAULT_LANGUAGE")
    fallback_language: Optional[str] = Field(
        default=None, alias="I18N_FALLBACK_LANGUAGE"
    )
    max_template_length: int = Field(
        default=10000,
        alias="I18N_MAX_TEMPLATE_LENGTH",
        description="Maximum template length processed by t()",
    )
    max_key_length: int = Field(default=200, alias="I18N_MAX_KEY_LENGTH")
    max_component_id_length: int = Field(
        default=100, alias="I18N_MAX_COMPONENT_ID_LENGTH"
    )
    strict_plural_validation: bool = Field(
        default=False, alias="I18N_STRICT_PLURAL_VALIDATION"
    )
    check_unused_plural_forms: bool = Field(
        default=False, alias="I18N_CHECK_UNUSED_PLURAL_FORMS"
    )
    check_plural_variables: bool = Field(
        default=False, alias="I18N_CHECK_PLURAL_VARIABLES"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )


class Settings(BaseSettings):
    """Top-level settings aggregator.

    Environment Variables:
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR)
        ENVIRONMENT: Deployment environment name; "production" switches
            logging to JSON output

    Example:
        ```python
        from component_i18n.core.config import settings

        if settings.is_production:
            ...
        default = settings.i18n.default_language
        ```
    """

    LOG_LEVEL: str = "INFO"
    ENVIRONMENT: str = "development"

    i18n: I18nSettings

    @property
    def is_production(self) -> bool:
        """Check if the library is running in production.

        Returns:
            True if ENVIRONMENT is "production", False otherwise.
        """
        return self.ENVIRONMENT.lower() == "production"

    def __init__(self, **kwargs):
        """Initialize Settings with automatic subsettings instantiation.

        Args:
            **kwargs: Optional overrides for specific settings sections.
        """
        if "i18n" not in kwargs:
            kwargs["i18n"] = I18nSettings()
        super().__init__(**kwargs)

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )


settings = Settings()
