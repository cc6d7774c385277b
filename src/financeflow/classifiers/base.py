import re
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Rule(Generic[T]):
    """A ``predicate -> result`` pair. Rules are evaluated in declaration order."""
    predicate: Callable[[str], bool]
    result: T


def first_match(rules: Iterable[Rule[T]], text: str, default: T) -> T:
    for rule in rules:
        if rule.predicate(text):
            return rule.result
    return default


def contains_any(*keywords: str) -> Callable[[str], bool]:
    """Substring containment against any of ``keywords``."""
    pattern = re.compile("|".join(re.escape(keyword) for keyword in keywords))
    return lambda text: pattern.search(text) is not None


def whole_word(*keywords: str) -> Callable[[str], bool]:
    """
    Match any of ``keywords`` delimited by whitespace or the string edges.

    Punctuation is not a delimiter: "pix," does not match "pix".
    """
    alternatives = "|".join(re.escape(keyword) for keyword in keywords)
    pattern = re.compile(rf"(?:^|\s)(?:{alternatives})(?:\s|$)")
    return lambda text: pattern.search(text) is not None
