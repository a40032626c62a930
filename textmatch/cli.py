#!/usr/bin/env python
"""
Command line front end for textmatch.

Runs one matching operation against a list of subjects and reports a boolean
outcome for each one, as plain text or as JSON. Subjects are taken from the
command line, from a file (--input) or from stdin, one per line.

Examples:
    textmatch contains -p es test TEST
    textmatch starts-with -c -p ab --input names.txt --json
    textmatch contains-char -p U+1F600 "hi 😀"
    textmatch is-numeric 123 12.3 +123
"""

import argparse
import json
import logging
import sys
from typing import Callable, Dict, List, Optional

from . import core
from .codepoints import decode_code_points

# Operations taking a pattern, and whether they have an ignore-case variant.
PATTERN_OPERATIONS: Dict[str, Callable[..., bool]] = {
    "equals": core.equals,
    "contains": core.contains,
    "starts-with": core.starts_with,
    "ends-with": core.ends_with,
}
CLASS_OPERATIONS: Dict[str, Callable[[Optional[str]], bool]] = {
    "is-alpha": core.is_alphabetic,
    "is-alnum": core.is_alphanumeric,
    "is-numeric": core.is_numeric,
}
OPERATIONS = list(PATTERN_OPERATIONS) + ["contains-char"] + list(CLASS_OPERATIONS)


def parse_code_point(value: str) -> int:
    """
    Parses a code point given either as 'U+XXXX' or as a single character.

    Raises:
        ValueError: if the value is neither.
    """
    if value[:2].upper() == "U+" and len(value) > 2:
        return int(value[2:], 16)
    if len(value) == 1:
        return ord(value)
    raise ValueError(f"expected one character or U+XXXX, got {value!r}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="textmatch",
        description="Tests subjects against a pattern (equals, contains, starts-with, ends-with, contains-char) or a character class (is-alpha, is-alnum, is-numeric), comparing Unicode code points. Prints one result per subject.",
        epilog="Exit status is 0 when at least one subject matched, 1 otherwise."
    )
    parser.add_argument("operation", choices=OPERATIONS, help="The check to run on each subject")
    parser.add_argument("subjects", nargs="*", help="Subjects to test (default: read lines from --input or stdin)")
    parser.add_argument("--pattern", "-p", help="Pattern for the pattern operations; omitted means no pattern, which never matches")
    parser.add_argument("--ignore-case", "-c", action="store_true", help="Compare code points after case folding")
    parser.add_argument("--input", "-i", help="Read subjects from this file, one per line")
    parser.add_argument("--json", "-oj", action="store_true", help="Output JSON instead of text")
    parser.add_argument("--output", "-o", help="Optional output file (default: stdout)")
    parser.add_argument("--verbose", "-v", action="store_true", help="Log debug messages")
    return parser


def read_subjects(args: argparse.Namespace, parser: argparse.ArgumentParser) -> List[str]:
    """Collects the subjects from the arguments, the --input file, or stdin."""
    if args.subjects:
        return list(args.subjects)
    if args.input:
        try:
            with open(args.input, "r", encoding="utf-8", errors="surrogatepass") as f:
                return f.read().splitlines()
        except (OSError, UnicodeDecodeError) as e:
            parser.error(f"cannot read {args.input}: {e}")
    try:
        return sys.stdin.read().splitlines()
    except UnicodeDecodeError as e:
        parser.error(f"cannot read stdin: {e}")


def build_check(args: argparse.Namespace, parser: argparse.ArgumentParser) -> Callable[[str], bool]:
    """Turns the parsed options into a one-argument check."""
    op = args.operation
    if op in CLASS_OPERATIONS:
        if args.ignore_case:
            parser.error(f"{op} has no ignore-case variant")
        if args.pattern is not None:
            logging.warning(f"{op} takes no pattern; ignoring --pattern")
        return CLASS_OPERATIONS[op]

    if op == "contains-char":
        if args.ignore_case:
            parser.error("contains-char has no ignore-case variant")
        if args.pattern is None:
            parser.error("contains-char requires --pattern")
        try:
            code_point = parse_code_point(args.pattern)
        except ValueError as e:
            parser.error(str(e))
        return lambda subject: core.contains_code_point(subject, code_point)

    if args.pattern is None:
        logging.warning(f"No pattern given for {op}; an absent pattern never matches")
    operation = PATTERN_OPERATIONS[op]
    return lambda subject: operation(subject, args.pattern, ignore_case=args.ignore_case)


def printable(text: str) -> str:
    """
    Renders a subject for text output.

    Surrogate pairs are shown as the character they encode; an unpaired
    surrogate cannot be written as UTF-8 and is shown as a \\udxxx escape.
    """
    joined = "".join(chr(cp) for cp in decode_code_points(text))
    return joined.encode("utf-8", "backslashreplace").decode("utf-8")


def format_results(args: argparse.Namespace, results: List[Dict[str, object]]) -> str:
    if args.json:
        return json.dumps({
            "operation": args.operation,
            "pattern": args.pattern,
            "ignore_case": args.ignore_case,
            "results": results,
        }, indent=2)
    return "\n".join(f"{'true' if r['match'] else 'false'}\t{printable(r['subject'])}" for r in results)


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    check = build_check(args, parser)
    subjects = read_subjects(args, parser)
    results = [{"subject": subject, "match": check(subject)} for subject in subjects]
    logging.debug(f"{args.operation}: {sum(r['match'] for r in results)} of {len(results)} subjects matched")

    report = format_results(args, results)
    if args.output:
        with open(args.output, 'w', encoding='utf-8') as f:
            f.write(report + "\n")
        print(f"Output written to {args.output}")
    else:
        print(report)
    return 0 if any(r["match"] for r in results) else 1


if __name__ == "__main__":
    sys.exit(main())
