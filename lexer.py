from dataclasses import dataclass
from typing import Iterator, List, Tuple

MAX_TOKENS = 10
DELIMITERS = " \t"

@dataclass(frozen=True)
class Token:
    text: str
    index: int

@dataclass(frozen=True)
class Statement:
    tokens: Tuple[Token, ...]
    truncated: bool = False

    @property
    def words(self) -> List[str]:
        return [t.text for t in self.tokens]

    def __len__(self) -> int:
        return len(self.tokens)

class LexError(ValueError):
    pass

def tokenize(line: str, max_tokens: int = MAX_TOKENS) -> Iterator[Token]:
    """
    Yield the whitespace-delimited tokens of one statement line.

    Runs of spaces/tabs separate tokens; leading and trailing runs produce
    nothing. At most `max_tokens` tokens are yielded and whatever follows
    is dropped, use split_statement() to find out whether that happened.
    """
    if max_tokens < 1:
        raise LexError(f"max_tokens must be at least 1, got {max_tokens}")
    if "\n" in line or "\r" in line:
        raise LexError(f"line terminator reached the tokenizer: {line!r}")

    i, n = 0, len(line)
    count = 0
    while i < n and count < max_tokens:
        # Delimiter run
        if line[i] in DELIMITERS:
            i += 1
            continue

        start = i
        while i < n and line[i] not in DELIMITERS:
            i += 1
        yield Token(line[start:i], count)
        count += 1

def split_statement(line: str, max_tokens: int = MAX_TOKENS) -> Statement:
    """Tokenize a whole line, flagging it when the token cap cut it short."""
    if max_tokens < 1:
        raise LexError(f"max_tokens must be at least 1, got {max_tokens}")
    # One extra token is enough to tell whether anything was discarded
    toks = list(tokenize(line, max_tokens + 1))
    if len(toks) > max_tokens:
        return Statement(tuple(toks[:max_tokens]), truncated=True)
    return Statement(tuple(toks))

__all__ = ["MAX_TOKENS", "Token", "Statement", "LexError", "tokenize", "split_statement"]
