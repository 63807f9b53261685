from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

from pattern_cipher.models.schemas import CipherScheme, LetterNumbering
from pattern_cipher.services.engines.configuration import (
    DEFAULT_DIGIT_SYMBOLS,
    DEFAULT_KEY_SEQUENCE,
    DEFAULT_SHIFT_AMOUNT,
    DEFAULT_SUBSTITUTION_ALPHABET,
    CipherConfiguration,
    digit_symbol_map_from_string,
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Application
    app_name: str = "Pattern Cipher"
    app_env: Literal["development", "staging", "production"] = "development"
    debug: bool = False
    api_v1_prefix: str = "/api/v1"
    log_level: str = "INFO"

    # Input limits
    max_text_length: int = 100_000

    # Cipher
    cipher_scheme: CipherScheme = CipherScheme.PATTERN_KEY
    letter_numbering: LetterNumbering = LetterNumbering.ZERO_BASED
    key_sequence: list[int] = list(DEFAULT_KEY_SEQUENCE)
    source_alphabet: str = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    substitution_alphabet: str = DEFAULT_SUBSTITUTION_ALPHABET
    shift_amount: int = DEFAULT_SHIFT_AMOUNT
    digit_symbols: str = DEFAULT_DIGIT_SYMBOLS

    @property
    def is_development(self) -> bool:
        return self.app_env == "development"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def build_configuration(settings: Settings) -> CipherConfiguration:
    """
    Build the cipher configuration described by settings.

    Only the active scheme's fields are checked; digit symbols are ignored
    by the pattern-key scheme.

    Raises:
        ConfigurationError: If the settings describe a non-invertible cipher
    """
    fields = {
        "scheme": settings.cipher_scheme,
        "source_alphabet": settings.source_alphabet.upper(),
        "key_sequence": tuple(settings.key_sequence),
        "numbering": settings.letter_numbering,
        "substitution_alphabet": settings.substitution_alphabet.upper(),
        "shift_amount": settings.shift_amount,
    }
    if settings.cipher_scheme == CipherScheme.SUBSTITUTE_SHIFT:
        fields["digit_symbol_map"] = digit_symbol_map_from_string(settings.digit_symbols)

    return CipherConfiguration(**fields)
