# vocabulary.py
"""
Reserved-word tables
--------------------
The five vocabularies a user-chosen name must not collide with. They are
built once at import time and never mutated, so any number of readers can
share them.

Membership is exact and case-sensitive: 'ADD' is reserved, 'add' is not.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, Tuple


@dataclass(frozen=True)
class Category:
    name: str                 # plural, e.g. "Imperative Statements"
    singular: str             # used in diagnostics, e.g. "Imperative Statement"
    words: Tuple[str, ...]    # enumeration order is kept for stable output

    def __contains__(self, token: object) -> bool:
        return token in self.words

    def __iter__(self):
        return iter(self.words)

    def __len__(self) -> int:
        return len(self.words)


IMPERATIVE = Category(
    "Imperative Statements", "Imperative Statement",
    ("STOP", "ADD", "SUB", "MULT", "DIV", "PRINT", "MOVER", "MOVEM", "COMP", "BC"),
)
DECLARATIVE = Category(
    "Declarative Statements", "Declarative Statement",
    ("DS", "DC", "READ"),
)
DIRECTIVES = Category(
    "Assembler Directives", "Assembler Directive",
    ("START", "END", "ORIGIN", "EQU", "LTORG"),
)
CONDITIONS = Category(
    "Condition Codes", "Condition Code",
    ("LT", "LE", "GT", "GE", "EQ", "NE"),
)
REGISTERS = Category(
    "Registers", "Register",
    ("AREG", "BREG", "CREG", "DREG"),
)

CATEGORIES: Tuple[Category, ...] = (IMPERATIVE, DECLARATIVE, DIRECTIVES, CONDITIONS, REGISTERS)


def belongs(token: str, category: Category) -> bool:
    """Exact string equality against the category's members."""
    return token in category.words


def belongs_to_any(token: str, categories: Iterable[Category]) -> bool:
    return any(belongs(token, c) for c in categories)


def categories_of(token: str) -> Tuple[Category, ...]:
    """Categories containing `token`, in CATEGORIES order."""
    return tuple(c for c in CATEGORIES if belongs(token, c))


__all__ = ["Category", "IMPERATIVE", "DECLARATIVE", "DIRECTIVES", "CONDITIONS", "REGISTERS",
           "CATEGORIES", "belongs", "belongs_to_any", "categories_of"]
