from abc import ABC, abstractmethod
from typing import Any

from pattern_cipher.models.schemas import CipherScheme
from pattern_cipher.services.engines.configuration import CipherConfiguration


class SchemeStrategy(ABC):
    """
    Abstract base class for the per-character transforms of a cipher scheme.

    The engine walks the text and dispatches each character:
    - letters of the source alphabet go to encrypt_letter() / decrypt_letter()
      together with the alphabetic position counter
    - every other character goes to encrypt_other() / decrypt_other()

    Strategies read their parameters from the configuration once, at
    construction, and keep no per-call state.
    """

    # Strategy metadata
    name: str
    scheme: CipherScheme
    description: str

    def __init__(self, configuration: CipherConfiguration):
        self.configuration = configuration
        self.alphabet = configuration.source_alphabet

    @abstractmethod
    def encrypt_letter(self, char: str, position: int) -> str:
        """
        Encrypt one letter of the source alphabet.

        Args:
            char: Uppercase letter from the source alphabet
            position: Zero-based count of letters processed before this one

        Returns:
            Ciphertext letter
        """
        pass

    @abstractmethod
    def decrypt_letter(self, char: str, position: int) -> str:
        """
        Decrypt one letter of the source alphabet.

        Args:
            char: Uppercase ciphertext letter
            position: Zero-based count of letters processed before this one

        Returns:
            Plaintext letter
        """
        pass

    def encrypt_other(self, char: str) -> str:
        """Encrypt a character outside the source alphabet. Passes through by default."""
        return char

    def decrypt_other(self, char: str) -> str:
        """Decrypt a character outside the source alphabet. Passes through by default."""
        return char

    @abstractmethod
    def parameters(self) -> dict[str, Any]:
        """Public parameters of this scheme, for display."""
        pass

    @abstractmethod
    def explain(self) -> str:
        """Generate human-readable explanation of the transform."""
        pass
