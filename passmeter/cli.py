"""PassMeter command-line interface.

Usage examples:
    python -m passmeter check mypassword
    python -m passmeter check -f passwords.txt --history
    python -m passmeter generate -n 20 -c 5 --no-symbols
"""

import argparse
import logging
import random
import sys

from passmeter import (
    CHARACTER_CLASSES,
    DEFAULT_LENGTH,
    REQUIREMENT_KEYS,
    InvalidConfiguration,
    PasswordGenerator,
    evaluate,
)
from passmeter.history import HistoryStore, mask_password

logger = logging.getLogger(__name__)

_REQUIREMENT_LABELS = {
    "length":    "At least 8 characters",
    "uppercase": "Uppercase letter",
    "lowercase": "Lowercase letter",
    "numbers":   "Number",
    "special":   "Special character",
}


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="passmeter",
        description="Score password strength and generate random passwords.",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    sub = parser.add_subparsers(dest="command")

    # ── check ──────────────────────────────────────────────────────────
    check_p = sub.add_parser("check", help="Score password strength")
    check_p.add_argument("passwords", nargs="*", help="Passwords to check")
    check_p.add_argument(
        "-f", "--file",
        help="Read passwords from a file (one per line)",
    )
    check_p.add_argument(
        "--history",
        action="store_true",
        help="Print the masked history of checked passwords at the end",
    )

    # ── generate ───────────────────────────────────────────────────────
    gen_p = sub.add_parser("generate", help="Generate random passwords")
    gen_p.add_argument(
        "-n", "--length", type=int, default=DEFAULT_LENGTH,
        help=f"Password length (default: {DEFAULT_LENGTH})",
    )
    for name in CHARACTER_CLASSES:
        gen_p.add_argument(f"--no-{name}", action="store_true")
    gen_p.add_argument(
        "-c", "--count", type=int, default=1,
        help="Number of passwords to generate (default: 1)",
    )
    gen_p.add_argument(
        "--secure",
        action="store_true",
        help="Draw from the operating system's random source",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command == "check":
        return _cmd_check(args)
    if args.command == "generate":
        return _cmd_generate(args)

    parser.print_help()
    return 0


def _cmd_check(args: argparse.Namespace) -> int:
    passwords = list(args.passwords)

    if args.file:
        with open(args.file) as f:
            passwords.extend(line.rstrip("\n") for line in f if line.strip())

    if not passwords:
        print("Error: provide passwords as arguments or via --file", file=sys.stderr)
        return 1

    history = HistoryStore()
    for pwd in passwords:
        result = evaluate(pwd)
        history.record(pwd, result.level, result.score)

        bar = "#" * result.score + "-" * (len(REQUIREMENT_KEYS) - result.score)
        print(f"  {result.icon} '{pwd}'  [{bar}] {result.level} ({result.score}/5)")
        for key in REQUIREMENT_KEYS:
            mark = "x" if result.requirements[key] else " "
            print(f"            [{mark}] {_REQUIREMENT_LABELS[key]}")
        print(f"            Time to crack: {result.crack_time}")
        print(f"            Tip: {result.tip}")

    if args.history:
        print("  History (most recent first):")
        for entry in history.list():
            print(f"    {mask_password(entry.password)}  {entry.level}  {entry.score}/5")

    return 0


def _cmd_generate(args: argparse.Namespace) -> int:
    classes = {
        name for name in CHARACTER_CLASSES
        if not getattr(args, f"no_{name}")
    }
    generator = PasswordGenerator(random.SystemRandom() if args.secure else None)

    try:
        for _ in range(args.count):
            print(f"  {generator.generate(args.length, classes)}")
    except InvalidConfiguration as exc:
        logger.debug("Rejected generator options: %s", exc)
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
