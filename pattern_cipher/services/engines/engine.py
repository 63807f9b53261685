import logging
from typing import Any, Callable

from pattern_cipher.core.exceptions import EmptyInputError
from pattern_cipher.models.schemas import CipherOperation, CipherScheme
from pattern_cipher.services.engines.configuration import CipherConfiguration
from pattern_cipher.services.engines.registry import StrategyRegistry

logger = logging.getLogger(__name__)


class SubstitutionCipherEngine:
    """
    Reversible character-substitution cipher engine.

    The engine is configured once and never mutated. Each call uppercases the
    text and walks it left to right, keeping an alphabetic position counter
    that starts at zero and advances only on letters of the source alphabet.
    Letters are transformed by the configured scheme strategy; every other
    character goes through the strategy's passthrough hook.

    Output always has the same length as the uppercased input, and
    decrypt(encrypt(text)) == text.upper() for letters, digits, spaces and
    punctuation. The one exception is a plaintext character that is itself a
    digit mask (% under the default substitute-shift settings), which
    decrypts to its digit.
    """

    def __init__(self, configuration: CipherConfiguration | None = None):
        """
        Build an engine.

        Args:
            configuration: Cipher parameters; defaults to the pattern-key
                scheme with key [3, 5, 7, 11]

        Raises:
            ConfigurationError: If the configuration cannot be inverted
        """
        self.configuration = configuration or CipherConfiguration()
        self.strategy = StrategyRegistry.create(self.configuration)
        logger.info("Cipher engine ready: scheme=%s", self.scheme.value)

    @property
    def scheme(self) -> CipherScheme:
        return self.configuration.scheme

    def encrypt(self, text: str) -> str:
        """
        Encrypt plaintext.

        Args:
            text: The plaintext to encrypt

        Returns:
            Uppercase ciphertext of the same length

        Raises:
            EmptyInputError: If text is missing, not a string, or blank
        """
        self._validate_input(text, CipherOperation.ENCRYPT)
        return self._transform(text, self.strategy.encrypt_letter, self.strategy.encrypt_other)

    def decrypt(self, text: str) -> str:
        """
        Decrypt ciphertext.

        Args:
            text: The ciphertext to decrypt

        Returns:
            Uppercase plaintext of the same length

        Raises:
            EmptyInputError: If text is missing, not a string, or blank
        """
        self._validate_input(text, CipherOperation.DECRYPT)
        return self._transform(text, self.strategy.decrypt_letter, self.strategy.decrypt_other)

    def process(self, operation: CipherOperation, text: str) -> str:
        """Run the named operation on text."""
        if CipherOperation(operation) == CipherOperation.ENCRYPT:
            return self.encrypt(text)
        return self.decrypt(text)

    def describe(self) -> dict[str, Any]:
        """Describe the configured scheme and its public parameters."""
        return {
            "scheme": self.scheme,
            "name": self.strategy.name,
            "description": self.strategy.description,
            "explanation": self.strategy.explain(),
            "parameters": self.strategy.parameters(),
        }

    def _validate_input(self, text: Any, operation: CipherOperation) -> None:
        if not isinstance(text, str) or text.strip() == "":
            raise EmptyInputError(operation.value)

    def _transform(
        self,
        text: str,
        letter_fn: Callable[[str, int], str],
        other_fn: Callable[[str], str],
    ) -> str:
        result = []
        position = 0
        text = text.upper()

        for char in text:
            if char in self.configuration.source_alphabet:
                result.append(letter_fn(char, position))
                position += 1
            else:
                result.append(other_fn(char))

        logger.debug("Transformed %d characters (%d letters)", len(text), position)
        return "".join(result)
