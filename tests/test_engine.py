"""
Tests shared by every cipher scheme: input validation, length preservation,
passthrough and round trips.
"""
import dataclasses
import random
import string

import pytest

from pattern_cipher.core.exceptions import ConfigurationError, EmptyInputError
from pattern_cipher.models.schemas import CipherOperation, CipherScheme, LetterNumbering
from pattern_cipher.services.engines.configuration import CipherConfiguration
from pattern_cipher.services.engines.engine import SubstitutionCipherEngine
from pattern_cipher.services.engines.pattern_key import PatternKeyStrategy
from pattern_cipher.services.engines.registry import StrategyRegistry
from pattern_cipher.services.engines.substitute_shift import SubstituteShiftStrategy

# Punctuation that no default digit mask uses (only % is a mask)
SAFE_PUNCTUATION = " .,?;:'\"-/!()&#@*"

CONFIGURATIONS = [
    CipherConfiguration(),
    CipherConfiguration(key_sequence=(3, 5, 7, 11), numbering=LetterNumbering.ONE_BASED),
    CipherConfiguration(key_sequence=(25, 9, 17)),
    CipherConfiguration(scheme=CipherScheme.SUBSTITUTE_SHIFT),
    CipherConfiguration(scheme=CipherScheme.SUBSTITUTE_SHIFT, shift_amount=13),
]


@pytest.fixture(params=CONFIGURATIONS, ids=lambda c: f"{c.scheme.value}")
def engine(request):
    return SubstitutionCipherEngine(request.param)


@pytest.fixture
def sample_texts():
    rng = random.Random(1234)
    alphabet = string.ascii_letters + string.digits + SAFE_PUNCTUATION
    return [
        "HELLO WORLD",
        "Attack at dawn, 0600.",
        "x",
        "  padded  ",
    ] + ["".join(rng.choice(alphabet) for _ in range(rng.randint(1, 60))) for _ in range(20)]


class TestEngineProperties:
    """Properties every configuration must satisfy."""

    def test_roundtrip(self, engine, sample_texts):
        for text in sample_texts:
            if not text.strip():
                continue
            assert engine.decrypt(engine.encrypt(text)) == text.upper()

    def test_length_preserved(self, engine, sample_texts):
        for text in sample_texts:
            if not text.strip():
                continue
            assert len(engine.encrypt(text)) == len(text.upper())
            assert len(engine.decrypt(text)) == len(text.upper())

    def test_punctuation_passthrough(self, engine):
        text = "A.B,C?D;E:F'G\"H-I/J K!L(M)N&O#P"
        ciphertext = engine.encrypt(text)

        for i, char in enumerate(text):
            if char in SAFE_PUNCTUATION:
                assert ciphertext[i] == char

    def test_letters_stay_letters(self, engine):
        ciphertext = engine.encrypt(string.ascii_uppercase)
        assert all(c in string.ascii_uppercase for c in ciphertext)

    def test_key_cycle_determinism(self, engine):
        """Letters whose counters are congruent modulo the key length get the same transform."""
        period = len(engine.configuration.key_sequence)
        text = "Q" + "X" * (period - 1) + "Q"

        ciphertext = engine.encrypt(text)

        assert ciphertext[0] == ciphertext[period]

    def test_non_letters_do_not_advance_counter(self, engine):
        assert engine.encrypt("AB CD").replace(" ", "") == engine.encrypt("ABCD")
        assert engine.encrypt("A-B").replace("-", "") == engine.encrypt("AB")

    def test_calls_are_independent(self, engine):
        """The counter resets on every call."""
        first = engine.encrypt("HELLO")
        engine.encrypt("SOMETHING ELSE ENTIRELY")
        assert engine.encrypt("HELLO") == first

    def test_process(self, engine):
        ciphertext = engine.process(CipherOperation.ENCRYPT, "HELLO")
        assert ciphertext == engine.encrypt("HELLO")
        assert engine.process(CipherOperation.DECRYPT, ciphertext) == "HELLO"


class TestEmptyInput:
    """Per-call input validation."""

    @pytest.mark.parametrize("text", ["", "   ", "\t\n", None, 42, ["HELLO"]])
    def test_encrypt_rejects(self, engine, text):
        with pytest.raises(EmptyInputError) as exc_info:
            engine.encrypt(text)

        assert exc_info.value.operation == "encrypt"
        assert "encrypt" in exc_info.value.message

    @pytest.mark.parametrize("text", ["", "   ", None])
    def test_decrypt_rejects(self, engine, text):
        with pytest.raises(EmptyInputError) as exc_info:
            engine.decrypt(text)

        assert exc_info.value.operation == "decrypt"
        assert exc_info.value.message == "Please supply a message to decrypt."

    def test_engine_usable_after_error(self, engine):
        expected = engine.encrypt("HELLO")

        with pytest.raises(EmptyInputError):
            engine.encrypt("  ")

        assert engine.encrypt("HELLO") == expected


class TestConstruction:
    """Engine construction and the strategy registry."""

    def test_default_configuration(self):
        engine = SubstitutionCipherEngine()

        assert engine.scheme == CipherScheme.PATTERN_KEY
        assert engine.configuration.key_sequence == (3, 5, 7, 11)
        assert engine.configuration.numbering == LetterNumbering.ZERO_BASED

    def test_invalid_key_fails_at_construction(self):
        with pytest.raises(ConfigurationError):
            SubstitutionCipherEngine(CipherConfiguration(key_sequence=(2,)))

    def test_scheme_accepts_string_tag(self):
        configuration = CipherConfiguration(scheme="substitute_shift")
        assert configuration.scheme == CipherScheme.SUBSTITUTE_SHIFT

    def test_unknown_scheme(self):
        with pytest.raises(ConfigurationError):
            CipherConfiguration(scheme="enigma")

    def test_source_alphabet_must_be_uppercase_letters(self):
        with pytest.raises(ConfigurationError):
            CipherConfiguration(source_alphabet=string.ascii_lowercase)

        with pytest.raises(ConfigurationError):
            CipherConfiguration(source_alphabet="ABC")

    def test_configuration_is_frozen(self):
        configuration = CipherConfiguration()

        with pytest.raises(dataclasses.FrozenInstanceError):
            configuration.key_sequence = (2,)

    def test_all_schemes_registered(self):
        registered = StrategyRegistry.list_registered()

        assert CipherScheme.PATTERN_KEY in registered
        assert CipherScheme.SUBSTITUTE_SHIFT in registered

    def test_registry_builds_strategy_for_scheme(self):
        assert isinstance(StrategyRegistry.create(CipherConfiguration()), PatternKeyStrategy)
        assert isinstance(
            StrategyRegistry.create(CipherConfiguration(scheme=CipherScheme.SUBSTITUTE_SHIFT)),
            SubstituteShiftStrategy,
        )

    def test_engines_do_not_share_state(self):
        first = SubstitutionCipherEngine(CipherConfiguration(key_sequence=(3,)))
        second = SubstitutionCipherEngine(CipherConfiguration(key_sequence=(5,)))

        assert first.strategy is not second.strategy
        assert first.encrypt("B") == "D"
        assert second.encrypt("B") == "F"

    def test_permuted_source_alphabet(self):
        """The numeric encoding follows the configured source alphabet order."""
        engine = SubstitutionCipherEngine(
            CipherConfiguration(source_alphabet="ZYXWVUTSRQPONMLKJIHGFEDCBA", key_sequence=(3,))
        )
        # Y=1 in this ordering, 1 * 3 = 3, which is W
        assert engine.encrypt("Y") == "W"
        assert engine.decrypt("W") == "Y"
