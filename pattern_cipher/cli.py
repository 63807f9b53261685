"""Command-line harness for the cipher engine.

    pattern-cipher encrypt "Meet me at 5"
    pattern-cipher --scheme substitute_shift --shift 3 decrypt "PA %"

Exit code 0 on success, 1 on invalid input or invalid configuration.
"""

import argparse
import logging
import sys

from pydantic import ValidationError

from pattern_cipher.core.config import build_configuration, get_settings
from pattern_cipher.core.exceptions import CipherError
from pattern_cipher.core.log import configure_logging
from pattern_cipher.models.schemas import CipherOperation, CipherScheme, LetterNumbering
from pattern_cipher.services.engines.engine import SubstitutionCipherEngine

logger = logging.getLogger(__name__)


def parse_key(value: str) -> list[int]:
    """Parse a comma-separated key pattern such as '3,5,7,11'."""
    try:
        return [int(part) for part in value.replace(" ", "").split(",") if part]
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid key pattern: {value!r}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pattern-cipher",
        description="Encrypt or decrypt text with a reversible keyed substitution cipher.",
    )
    parser.add_argument("operation", choices=[op.value for op in CipherOperation],
                        help="Operation to run")
    parser.add_argument("text", nargs="*",
                        help="Text to transform (words are joined with single spaces)")

    scheme_group = parser.add_argument_group("cipher options (override settings)")
    scheme_group.add_argument("--scheme", choices=[s.value for s in CipherScheme],
                              help="Cipher scheme")
    scheme_group.add_argument("--key", type=parse_key, metavar="K1,K2,...",
                              help="Pattern key, each value coprime with 26")
    scheme_group.add_argument("--numbering", choices=[n.value for n in LetterNumbering],
                              help="Letter numbering for the pattern-key scheme")
    scheme_group.add_argument("--shift", type=int,
                              help="Shift amount for the substitute-shift scheme")
    scheme_group.add_argument("--substitution-alphabet", metavar="ALPHABET",
                              help="26-letter substitution alphabet")
    scheme_group.add_argument("--digit-symbols", metavar="SYMBOLS",
                              help="Ten symbols standing for the digits 0-9")

    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Enable debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(logging.DEBUG if args.verbose else logging.WARNING)

    overrides = {
        "cipher_scheme": args.scheme,
        "key_sequence": args.key,
        "letter_numbering": args.numbering,
        "shift_amount": args.shift,
        "substitution_alphabet": args.substitution_alphabet,
        "digit_symbols": args.digit_symbols,
    }

    try:
        settings = get_settings().model_copy(
            update={name: value for name, value in overrides.items() if value is not None}
        )
        engine = SubstitutionCipherEngine(build_configuration(settings))
        result = engine.process(CipherOperation(args.operation), " ".join(args.text))
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}" for error in e.errors()
        )
        print(f"error: invalid settings: {problems}", file=sys.stderr)
        return 1
    except CipherError as e:
        logger.debug("Operation failed: %s", e.details)
        print(f"error: {e.message}", file=sys.stderr)
        return 1

    print(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
