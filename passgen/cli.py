"""PassGen command-line interface.

Usage examples:
    passgen generate -n 20 -c 5
    passgen generate --copy
    passgen check 'Ab1@abcd' -f passwords.txt
"""

import argparse
import logging
import sys

from passgen import MAX_SCORE, evaluate_strength
from passgen.controller import DEFAULT_LENGTH, PasswordForm


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="passgen",
        description="Generate passwords and check them against the strength checklist.",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    sub = parser.add_subparsers(dest="command")

    # ── generate ───────────────────────────────────────────────────────
    gen_p = sub.add_parser("generate", help="Generate passwords")
    gen_p.add_argument(
        "-n", "--length", type=int, default=DEFAULT_LENGTH,
        help=f"Password length, 8-32 (default: {DEFAULT_LENGTH})",
    )
    gen_p.add_argument(
        "-c", "--count", type=int, default=1,
        help="Number of passwords to generate (default: 1)",
    )
    gen_p.add_argument(
        "--copy",
        action="store_true",
        help="Copy the last generated password to the clipboard",
    )

    # ── check ──────────────────────────────────────────────────────────
    check_p = sub.add_parser(
        "check", help="Check passwords against the strength checklist",
    )
    check_p.add_argument("passwords", nargs="*", help="Passwords to check")
    check_p.add_argument(
        "-f", "--file",
        help="Read passwords from a file (one per line)",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command == "generate":
        return _cmd_generate(args)
    if args.command == "check":
        return _cmd_check(args)

    parser.print_help()
    return 0


def _meter(score: int) -> str:
    return "#" * score + "-" * (MAX_SCORE - score)


def _cmd_generate(args: argparse.Namespace) -> int:
    form = PasswordForm()
    form.set_length(args.length)
    form.toggle_visibility()

    for _ in range(args.count):
        form.generate()
        print(f"  {form.displayed_password}  ({form.strength.label})")

    if args.copy:
        note = form.copy()
        if not note.ok:
            print(f"Error: {note.message}", file=sys.stderr)
            return 1
        print(note.message)

    return 0


def _cmd_check(args: argparse.Namespace) -> int:
    passwords = list(args.passwords)

    if args.file:
        with open(args.file) as f:
            passwords.extend(line.rstrip("\n") for line in f if line.strip())

    if not passwords:
        print("Error: provide passwords as arguments or via --file", file=sys.stderr)
        return 1

    all_met = True
    for pwd in passwords:
        result = evaluate_strength(pwd)
        print(f"  '{pwd}'  [{_meter(result.score)}] {result.label}")
        for req in result.requirements:
            mark = "+" if req.met else "-"
            print(f"      {mark} {req.description}")
        if result.score < MAX_SCORE:
            all_met = False

    return 0 if all_met else 1


if __name__ == "__main__":
    sys.exit(main())
