# report.py
from __future__ import annotations
import sys
from typing import List, TextIO

from validator import Verdict
from vocabulary import categories_of


def format_verdict(line_no: int, verdict: Verdict) -> List[str]:
    """
    Render one verdict as report lines (no trailing newlines).

    Valid:   "[VALID] Line 3: LOOP ADD AREG DATA1 "  (each token followed by a space)
    Invalid: one "Error (Line 3): <message> '<token>'" per violation, in slot order.
    """
    if verdict.is_valid:
        return [f"[VALID] Line {line_no}: " + "".join(f"{w} " for w in verdict.words)]
    return [f"Error (Line {line_no}): {v.message} '{v.token}'" for v in verdict.violations]


def write_report(line_no: int, verdict: Verdict, out: TextIO = sys.stdout) -> None:
    for line in format_verdict(line_no, verdict):
        print(line, file=out)


def explain(verdict: Verdict) -> List[str]:
    """Say which reserved vocabularies each offending token collides with."""
    notes: List[str] = []
    for v in verdict.violations:
        hits = categories_of(v.token)
        if hits:
            kinds = " and ".join(f"an {c.singular}" if c.singular[0] in "AEIOU" else f"a {c.singular}"
                                 for c in hits)
            notes.append(f"'{v.token}' is {kinds}")
        elif v.slot is None:
            notes.append(f"no rule covers a statement of {len(verdict.words)} token(s)")
        else:
            notes.append(f"'{v.token}' is not an allowed word here")
    return notes


__all__ = ["format_verdict", "write_report", "explain"]
