from typing import Any

from pattern_cipher.models.schemas import CipherScheme
from pattern_cipher.services.engines.base import SchemeStrategy
from pattern_cipher.services.engines.configuration import MODULUS, CipherConfiguration
from pattern_cipher.services.engines.registry import StrategyRegistry


@StrategyRegistry.register
class SubstituteShiftStrategy(SchemeStrategy):
    """
    Substitute-then-shift cipher with digit masking.

    A letter is replaced by the letter at the same position of the
    substitution alphabet, then moved forward within the substitution
    alphabet by a fixed shift. Digits are replaced by symbols; all other
    characters pass through.
    """

    name = "Substitute-Shift Cipher"
    scheme = CipherScheme.SUBSTITUTE_SHIFT
    description = (
        "A monoalphabetic cipher combining a keyed substitution alphabet with a "
        "fixed shift. Digits are masked as symbols."
    )

    def __init__(self, configuration: CipherConfiguration):
        super().__init__(configuration)
        self.substitution = configuration.substitution_alphabet
        self.shift = configuration.shift_amount % MODULUS
        self.digit_to_symbol = dict(configuration.digit_symbol_map)
        self.symbol_to_digit = configuration.symbol_digit_map

    def encrypt_letter(self, char: str, position: int) -> str:
        # The substituted letter sits at the plaintext letter's index, so the shift starts there
        shifted = (self.alphabet.index(char) + self.shift) % MODULUS
        return self.substitution[shifted]

    def decrypt_letter(self, char: str, position: int) -> str:
        unshifted = (self.substitution.index(char) - self.shift) % MODULUS
        return self.alphabet[unshifted]

    def encrypt_other(self, char: str) -> str:
        return self.digit_to_symbol.get(char, char)

    def decrypt_other(self, char: str) -> str:
        return self.symbol_to_digit.get(char, char)

    def parameters(self) -> dict[str, Any]:
        return {
            "substitution_alphabet": self.substitution,
            "shift_amount": self.configuration.shift_amount,
            "digit_symbol_map": dict(self.digit_to_symbol),
        }

    def explain(self) -> str:
        return (
            f"Substitute-shift cipher over the alphabet {self.substitution}. "
            f"Each letter is replaced by its counterpart in that alphabet, "
            f"then moved {self.shift} places forward within it. "
            f"Digits are masked as the symbols {''.join(self.digit_to_symbol[d] for d in sorted(self.digit_to_symbol))}."
        )
