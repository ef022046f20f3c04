# validator.py
"""
Positional rule engine
----------------------
A statement's shape is its token count. Each supported shape maps to an
ordered tuple of slot rules; a slot is violated when its token belongs to
one of the slot's forbidden vocabularies (or, for the single-token shape,
is not one of the explicitly allowed words).

  shape 4:  LABEL  MNEMONIC  REGISTER  MEMORY
  shape 3:  LABEL  MNEMONIC  MEMORY
  shape 2:  LABEL  MNEMONIC
  shape 1:  MNEMONIC            (STOP or LTORG only)

Shapes with no entry in RULES (blank lines, 5+ tokens) match nothing. By
default they pass through as valid with shape_supported=False; callers
that want them rejected pass reject_unsupported=True.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, FrozenSet, List, Optional, Sequence, Tuple

from vocabulary import (
    Category, IMPERATIVE, DECLARATIVE, DIRECTIVES, CONDITIONS, REGISTERS, belongs_to_any,
)

# Slot roles
LABEL = "label"
MNEMONIC = "mnemonic"
REGISTER = "register"
MEMORY = "memory"
SHAPE = "shape"

MESSAGES: Dict[str, str] = {
    LABEL: "Invalid Symbolic Name",
    MNEMONIC: "Invalid Mnemonic Instruction",
    REGISTER: "Invalid Register Operand",
    MEMORY: "Invalid Symbolic Name (Memory Operand)",
    SHAPE: "Unsupported statement shape",
}


@dataclass(frozen=True)
class SlotRule:
    role: str
    forbidden: Tuple[Category, ...] = ()
    allowed: Optional[FrozenSet[str]] = None

    def violated_by(self, token: str) -> bool:
        if self.allowed is not None and token not in self.allowed:
            return True
        return belongs_to_any(token, self.forbidden)

    @property
    def message(self) -> str:
        return MESSAGES[self.role]


@dataclass(frozen=True)
class Violation:
    slot: Optional[int]   # None for a whole-statement violation
    role: str
    token: str
    message: str


@dataclass(frozen=True)
class Verdict:
    words: Tuple[str, ...]
    violations: Tuple[Violation, ...] = ()
    shape_supported: bool = True

    @property
    def is_valid(self) -> bool:
        return not self.violations


_ALL = (IMPERATIVE, DECLARATIVE, DIRECTIVES, CONDITIONS, REGISTERS)
_LABEL = SlotRule(LABEL, _ALL)
_MNEMONIC = SlotRule(MNEMONIC, (DECLARATIVE, DIRECTIVES, CONDITIONS, REGISTERS))
_REGISTER = SlotRule(REGISTER, (IMPERATIVE, DECLARATIVE, DIRECTIVES, CONDITIONS))
_MEMORY = SlotRule(MEMORY, _ALL)

RULES: Dict[int, Tuple[SlotRule, ...]] = {
    4: (_LABEL, _MNEMONIC, _REGISTER, _MEMORY),
    3: (_LABEL, _MNEMONIC, _MEMORY),
    2: (_LABEL, _MNEMONIC),
    1: (SlotRule(MNEMONIC, allowed=frozenset({"STOP", "LTORG"})),),
}


def validate(words: Sequence[str], reject_unsupported: bool = False) -> Verdict:
    """
    Judge one statement. Every violated slot is recorded, in slot order.
    Pure function of its arguments.
    """
    words = tuple(words)
    rules = RULES.get(len(words))

    if rules is None:
        if not reject_unsupported:
            return Verdict(words, shape_supported=False)
        v = Violation(None, SHAPE, " ".join(words), MESSAGES[SHAPE])
        return Verdict(words, (v,), shape_supported=False)

    violations: List[Violation] = []
    for slot, (rule, token) in enumerate(zip(rules, words)):
        if rule.violated_by(token):
            violations.append(Violation(slot, rule.role, token, rule.message))
    return Verdict(words, tuple(violations))


__all__ = ["LABEL", "MNEMONIC", "REGISTER", "MEMORY", "SHAPE", "MESSAGES",
           "SlotRule", "Violation", "Verdict", "RULES", "validate"]
