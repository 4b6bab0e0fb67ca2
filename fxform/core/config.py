from functools import lru_cache

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from fxform.models.constants import (
    DEFAULT_FROM,
    DEFAULT_TO,
    INVALID_AMOUNT_MESSAGE,
    PLACEHOLDER,
    UNSUPPORTED_CURRENCY_MESSAGE,
)


class NumberFormat(BaseModel):
    """Decimal/grouping convention used for both parsing and formatting.

    Defaults follow pt-BR: ``1.234,56``.
    """

    model_config = ConfigDict(frozen=True)

    decimal_separator: str = ","
    group_separator: str = "."

    @model_validator(mode="after")
    def distinct_single_chars(self) -> "NumberFormat":
        for sep in (self.decimal_separator, self.group_separator):
            if len(sep) != 1 or sep.isdigit() or sep in "+-":
                raise ValueError(f"invalid separator {sep!r}")
        if self.decimal_separator == self.group_separator:
            raise ValueError("decimal and group separators must differ")
        return self


class Settings(BaseSettings):
    """Application settings loaded from environment with defaults.

    Environment variables use the FXFORM_ prefix (e.g. FXFORM_DEBUG,
    FXFORM_DEFAULT_FROM, FXFORM_DECIMAL_SEPARATOR).
    """

    model_config = SettingsConfigDict(
        env_prefix="FXFORM_", env_file=".env", case_sensitive=False, extra="ignore"
    )

    # Basic app metadata
    app_name: str = "Conversor de Moedas"
    debug: bool = False
    version: str = "0.1.0"
    log_format: str = "json"  # 'json' or 'text'

    # Form defaults
    default_from: str = DEFAULT_FROM
    default_to: str = DEFAULT_TO
    placeholder: str = PLACEHOLDER

    # User-visible messages
    invalid_amount_message: str = INVALID_AMOUNT_MESSAGE
    unsupported_currency_message: str = UNSUPPORTED_CURRENCY_MESSAGE

    # Number convention (pt-BR by default)
    decimal_separator: str = ","
    group_separator: str = "."

    @property
    def number_format(self) -> NumberFormat:
        return NumberFormat(
            decimal_separator=self.decimal_separator,
            group_separator=self.group_separator,
        )

    def init_post_load(self) -> None:
        """Normalize currency defaults and validate derived objects."""
        self.default_from = self.default_from.strip().upper()
        self.default_to = self.default_to.strip().upper()
        if not self.default_from or not self.default_to:
            raise ValueError("default_from / default_to must not be empty")
        allowed = {"json", "text"}
        if self.log_format not in allowed:
            raise ValueError(
                f"Unsupported log_format '{self.log_format}'. Allowed: {allowed}"
            )
        # Fail early on a bad separator pair
        self.number_format


@lru_cache
def get_settings() -> Settings:
    settings = Settings()
    settings.init_post_load()
    return settings
