from typing import Any

from pattern_cipher.core.exceptions import ConfigurationError
from pattern_cipher.models.schemas import CipherScheme, LetterNumbering
from pattern_cipher.services.engines.base import SchemeStrategy
from pattern_cipher.services.engines.configuration import MODULUS, CipherConfiguration, mod_inverse
from pattern_cipher.services.engines.registry import StrategyRegistry


@StrategyRegistry.register
class PatternKeyStrategy(SchemeStrategy):
    """
    Pattern-key multiplicative cipher.

    Each letter is turned into a number, multiplied by the current key value
    modulo 26, and turned back into a letter: E(x) = (k_i * x) mod 26.
    The key sequence repeats, advancing once per letter; spaces, digits and
    punctuation do not consume a key value.

    Decryption multiplies by the modular inverse: D(y) = k_i^(-1) * y mod 26.

    With one-based numbering (A=1 ... Z=26) a product of 0 stands for 26,
    so Z stays representable.
    """

    name = "Pattern-Key Cipher"
    scheme = CipherScheme.PATTERN_KEY
    description = (
        "A polyalphabetic multiplicative cipher. Letter values are multiplied by "
        "a repeating key pattern modulo 26. Every key value must be coprime with 26."
    )

    def __init__(self, configuration: CipherConfiguration):
        super().__init__(configuration)
        self.keys = configuration.key_sequence
        self.one_based = configuration.numbering == LetterNumbering.ONE_BASED

        inverses = []
        for key in self.keys:
            inverse = mod_inverse(key, MODULUS)
            if inverse is None:
                raise ConfigurationError(
                    f"Key value {key} has no inverse modulo 26",
                    {"value": key},
                )
            inverses.append(inverse)
        self.inverses = tuple(inverses)

    def encrypt_letter(self, char: str, position: int) -> str:
        key = self.keys[position % len(self.keys)]
        return self._multiply(char, key)

    def decrypt_letter(self, char: str, position: int) -> str:
        inverse = self.inverses[position % len(self.inverses)]
        return self._multiply(char, inverse)

    def parameters(self) -> dict[str, Any]:
        return {
            "key_sequence": list(self.keys),
            "inverse_sequence": list(self.inverses),
            "numbering": self.configuration.numbering.value,
        }

    def explain(self) -> str:
        pattern = ", ".join(str(k) for k in self.keys)
        inverses = ", ".join(str(k) for k in self.inverses)
        first = "A=1" if self.one_based else "A=0"
        return (
            f"Pattern-key cipher with key pattern [{pattern}] and letters numbered from {first}. "
            f"Encryption formula: E(x) = (k * x) mod 26, with k cycling through the pattern once per letter. "
            f"Decryption multiplies by the inverses [{inverses}]."
        )

    def _to_number(self, char: str) -> int:
        index = self.alphabet.index(char)
        return index + 1 if self.one_based else index

    def _to_letter(self, number: int) -> str:
        if self.one_based:
            if number == 0:
                number = MODULUS
            return self.alphabet[number - 1]
        return self.alphabet[number]

    def _multiply(self, char: str, factor: int) -> str:
        return self._to_letter((self._to_number(char) * factor) % MODULUS)
