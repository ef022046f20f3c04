#!/usr/bin/env python3
"""
checker.py – syntax checker for fixed-format assembly statements.

Reads a statement file one line at a time, splits each line into
whitespace-delimited tokens and checks every token against the reserved
vocabularies for the slot it occupies:

  LABEL MNEMONIC REGISTER MEMORY     (4 tokens)
  LABEL MNEMONIC MEMORY              (3 tokens)
  LABEL MNEMONIC                     (2 tokens)
  STOP | LTORG                       (1 token)

Each line gets either "[VALID] Line n: ..." or one "Error (Line n): ..."
line per violation on stdout. Diagnostics go to stderr.

Usage:
  python3 checker.py                  # checks ./a.txt
  python3 checker.py program.asm
  python3 checker.py - < program.asm  # read stdin
"""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from typing import Iterable, List, Optional, TextIO

from io_utils import (
    REFERENCE_LINE_LENGTH, InputUnavailable, _eprintln, iter_lines, open_source, open_stdin,
)
from lexer import MAX_TOKENS, split_statement
from report import explain, write_report
from validator import validate

DEFAULT_SOURCE = "a.txt"


@dataclass
class CheckSummary:
    lines: int = 0
    valid: int = 0
    invalid: int = 0
    truncated: int = 0


def check_lines(
    lines: Iterable[str],
    out: TextIO = sys.stdout,
    max_tokens: int = MAX_TOKENS,
    reject_unsupported: bool = False,
    explain_errors: bool = False,
    err: Optional[TextIO] = None,
) -> CheckSummary:
    """Run every line through tokenizer -> validator -> report, in input order."""
    err = err if err is not None else sys.stderr
    summary = CheckSummary()
    for line_no, line in enumerate(lines, start=1):
        summary.lines += 1
        stmt = split_statement(line, max_tokens)
        if stmt.truncated:
            summary.truncated += 1
            print(f"Warning (Line {line_no}): more than {max_tokens} tokens, "
                  f"only the first {max_tokens} were checked", file=err)

        verdict = validate(stmt.words, reject_unsupported=reject_unsupported)
        write_report(line_no, verdict, out)

        if verdict.is_valid:
            summary.valid += 1
        else:
            summary.invalid += 1
            if explain_errors:
                for note in explain(verdict):
                    print(f"  note (Line {line_no}): {note}", file=err)
    return summary


def _positive_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {text!r}")
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {value}")
    return value


def build_arg_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Check assembly statements line by line.")
    ap.add_argument("source", nargs="?", default=DEFAULT_SOURCE,
                    help=f"Statement file, '-' for stdin (default: {DEFAULT_SOURCE})")
    ap.add_argument("--max-tokens", type=_positive_int, default=None,
                    help=f"Tokens checked per line; the rest is dropped (default: {MAX_TOKENS})")
    ap.add_argument("--max-line-length", type=_positive_int, default=None,
                    help="Keep only the first N characters of each line (default: unbounded)")
    ap.add_argument("--reference-limits", action="store_true",
                    help=f"Same as --max-line-length {REFERENCE_LINE_LENGTH} --max-tokens {MAX_TOKENS}")
    ap.add_argument("--reject-unsupported", action="store_true",
                    help="Report blank lines and lines of 5+ tokens as errors instead of valid")
    ap.add_argument("--strict", action="store_true",
                    help="Exit with status 1 if any statement is invalid")
    ap.add_argument("--explain", action="store_true",
                    help="Print which vocabulary each offending token belongs to (stderr)")
    return ap


def main(argv: List[str]) -> int:
    ap = build_arg_parser()
    args = ap.parse_args(argv[1:])

    max_tokens = args.max_tokens if args.max_tokens is not None else MAX_TOKENS
    max_line_length = args.max_line_length
    if args.reference_limits:
        if args.max_tokens is not None or args.max_line_length is not None:
            ap.error("--reference-limits cannot be combined with --max-tokens or --max-line-length")
        max_tokens, max_line_length = MAX_TOKENS, REFERENCE_LINE_LENGTH

    if args.source == "-":
        stream = open_stdin()
    else:
        try:
            stream = open_source(args.source)
        except InputUnavailable as e:
            _eprintln(f"Error: Could not open file '{e.path}': {e.reason}")
            return 1

    try:
        summary = check_lines(
            iter_lines(stream, max_line_length),
            out=sys.stdout,
            max_tokens=max_tokens,
            reject_unsupported=args.reject_unsupported,
            explain_errors=args.explain,
        )
    except OSError as e:
        what = "standard input" if args.source == "-" else f"file '{args.source}'"
        _eprintln(f"Error: Could not read {what}: {e.strerror or e}")
        return 1
    finally:
        if args.source != "-":
            stream.close()
        elif stream is not sys.stdin:
            # leave the process's stdin buffer open
            stream.detach()

    if args.strict and summary.invalid:
        return 1
    return 0


def run() -> None:
    sys.exit(main(sys.argv))


if __name__ == '__main__':
    run()
