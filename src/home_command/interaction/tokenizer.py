"""
Tokenizer for free-form commands.

Splits on whitespace and commas, trims punctuation, drops stop words.
"""
import re
from typing import List, Optional

STOP_WORDS = frozenset({"the", "a", "an", "to", "in", "at", "for", "and", "my", "please"})

_SPLIT_PATTERN = re.compile(r"[\s,]+")
_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


def tokenize(text: str) -> List[str]:
    """
    Split raw input into word tokens.
    
    Examples:
    - "turn on the kitchen light" -> ["turn", "on", "kitchen", "light"]
    - "set brightness to 50%" -> ["set", "brightness", "50%"]
    - "light.kitchen" -> ["light.kitchen"]
    """
    tokens = []
    for raw in _SPLIT_PATTERN.split(text):
        token = _trim(raw)
        if token and not is_stop_word(token):
            tokens.append(token)
    return tokens


def is_stop_word(word: str) -> bool:
    return word.lower() in STOP_WORDS


def parse_number(token: str) -> Optional[int]:
    """Parse a plain integer ("42", "-10"); anything else is None."""
    if _INTEGER_PATTERN.fullmatch(token):
        return int(token)
    return None


def parse_percentage(token: str) -> Optional[int]:
    """Parse a percentage in 0-100 ("50%", "75")."""
    value = parse_number(token.rstrip("%"))
    if value is not None and 0 <= value <= 100:
        return value
    return None


def _keep(char: str) -> bool:
    return char.isalnum() or char in "%_."


def _trim(token: str) -> str:
    start, end = 0, len(token)
    while start < end and not _keep(token[start]):
        start += 1
    while end > start and not _keep(token[end - 1]):
        end -= 1
    return token[start:end]
