"""Reversible keyed substitution cipher engine."""

from pattern_cipher.core.exceptions import CipherError, ConfigurationError, EmptyInputError
from pattern_cipher.models.schemas import CipherScheme, LetterNumbering
from pattern_cipher.services.engines.configuration import CipherConfiguration
from pattern_cipher.services.engines.engine import SubstitutionCipherEngine

__all__ = [
    "CipherConfiguration",
    "CipherError",
    "CipherScheme",
    "ConfigurationError",
    "EmptyInputError",
    "LetterNumbering",
    "SubstitutionCipherEngine",
]
