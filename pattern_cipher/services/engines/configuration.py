import math
import string
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from pattern_cipher.core.exceptions import ConfigurationError
from pattern_cipher.models.schemas import CipherScheme, LetterNumbering

MODULUS = 26

DEFAULT_KEY_SEQUENCE: tuple[int, ...] = (3, 5, 7, 11)
DEFAULT_SUBSTITUTION_ALPHABET = "QWERTYUIOPASDFGHJKLZXCVBNM"
DEFAULT_SHIFT_AMOUNT = 2
# Symbol for digit i sits at position i; 5 keeps %, the rest use signs absent from ordinary prose
DEFAULT_DIGIT_SYMBOLS = "¤§¶†‡%•°±×"


def mod_inverse(a: int, m: int = MODULUS) -> int | None:
    """Calculate modular multiplicative inverse using extended Euclidean algorithm."""
    if math.gcd(a, m) != 1:
        return None

    def extended_gcd(a: int, b: int) -> tuple[int, int, int]:
        if a == 0:
            return b, 0, 1
        gcd, x1, y1 = extended_gcd(b % a, a)
        x = y1 - (b // a) * x1
        y = x1
        return gcd, x, y

    _, x, _ = extended_gcd(a % m, m)
    return x % m


def digit_symbol_map_from_string(symbols: str) -> dict[str, str]:
    """Build a digit map from a 10-character string, one symbol per digit 0-9."""
    if len(symbols) != len(string.digits):
        raise ConfigurationError(
            f"Digit symbols must contain exactly 10 characters, got {len(symbols)}",
            {"digit_symbols": symbols},
        )
    return dict(zip(string.digits, symbols))


DEFAULT_DIGIT_SYMBOL_MAP = MappingProxyType(digit_symbol_map_from_string(DEFAULT_DIGIT_SYMBOLS))


@dataclass(frozen=True)
class CipherConfiguration:
    """
    Immutable parameters of a cipher engine.

    The scheme tag selects which fields drive the transform:
    - PATTERN_KEY uses key_sequence and numbering
    - SUBSTITUTE_SHIFT uses substitution_alphabet, shift_amount and digit_symbol_map

    Every constraint is checked on construction, so an instance that exists
    always describes an invertible transform.
    """

    scheme: CipherScheme = CipherScheme.PATTERN_KEY
    source_alphabet: str = string.ascii_uppercase
    key_sequence: tuple[int, ...] = DEFAULT_KEY_SEQUENCE
    numbering: LetterNumbering = LetterNumbering.ZERO_BASED
    substitution_alphabet: str = DEFAULT_SUBSTITUTION_ALPHABET
    shift_amount: int = DEFAULT_SHIFT_AMOUNT
    digit_symbol_map: Mapping[str, str] = field(default_factory=lambda: dict(DEFAULT_DIGIT_SYMBOL_MAP))

    def __post_init__(self) -> None:
        try:
            object.__setattr__(self, "scheme", CipherScheme(self.scheme))
            object.__setattr__(self, "numbering", LetterNumbering(self.numbering))
        except ValueError as e:
            raise ConfigurationError(str(e)) from e

        object.__setattr__(self, "key_sequence", tuple(self.key_sequence))
        object.__setattr__(self, "digit_symbol_map", MappingProxyType(dict(self.digit_symbol_map)))

        self._validate_source_alphabet()
        if self.scheme == CipherScheme.PATTERN_KEY:
            self._validate_key_sequence()
        else:
            self._validate_substitution_alphabet()
            self._validate_shift_amount()
            self._validate_digit_symbol_map()

    @property
    def symbol_digit_map(self) -> dict[str, str]:
        """Reverse of digit_symbol_map."""
        return {symbol: digit for digit, symbol in self.digit_symbol_map.items()}

    def _validate_source_alphabet(self) -> None:
        alphabet = self.source_alphabet
        if (
            len(alphabet) != MODULUS
            or len(set(alphabet)) != MODULUS
            or not all(c.isalpha() and c.isupper() for c in alphabet)
        ):
            raise ConfigurationError(
                "Source alphabet must contain 26 distinct uppercase letters",
                {"source_alphabet": alphabet},
            )

    def _validate_key_sequence(self) -> None:
        if not self.key_sequence:
            raise ConfigurationError("Key sequence must not be empty")

        for value in self.key_sequence:
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                raise ConfigurationError(
                    f"Invalid key value: {value!r}. Must be a positive integer.",
                    {"key_sequence": list(self.key_sequence), "value": value},
                )
            if mod_inverse(value) is None:
                raise ConfigurationError(
                    f"Invalid key value: {value}. Must be coprime with 26.",
                    {"key_sequence": list(self.key_sequence), "value": value},
                )

    def _validate_substitution_alphabet(self) -> None:
        if sorted(self.substitution_alphabet) != sorted(self.source_alphabet):
            raise ConfigurationError(
                "Substitution alphabet must be a permutation of the source alphabet",
                {"substitution_alphabet": self.substitution_alphabet},
            )

    def _validate_shift_amount(self) -> None:
        if isinstance(self.shift_amount, bool) or not isinstance(self.shift_amount, int):
            raise ConfigurationError(
                f"Invalid shift amount: {self.shift_amount!r}. Must be an integer.",
                {"shift_amount": self.shift_amount},
            )

    def _validate_digit_symbol_map(self) -> None:
        mapping = dict(self.digit_symbol_map)

        if sorted(mapping) != list(string.digits):
            raise ConfigurationError(
                "Digit map must cover exactly the digits 0-9",
                {"digits": sorted(mapping)},
            )

        symbols = list(mapping.values())
        if len(set(symbols)) != len(symbols):
            raise ConfigurationError(
                "Digit map must be a bijection: two digits share a symbol",
                {"digit_symbol_map": mapping},
            )

        for symbol in symbols:
            if not isinstance(symbol, str) or len(symbol) != 1 or symbol.isalnum() or symbol.isspace():
                raise ConfigurationError(
                    f"Invalid digit symbol: {symbol!r}. Must be one non-alphanumeric character.",
                    {"digit_symbol_map": mapping},
                )
