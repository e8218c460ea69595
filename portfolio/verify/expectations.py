"""
Expectations evaluated against a page's HTML.

Two kinds exist: "appears at least once" (``count is None``) and "appears
exactly N times". Patterns are literal substrings unless ``literal=False``,
in which case they are regular expressions.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional


@dataclass
class CheckResult:
    name: str
    ok: bool
    detail: str
    expected: Optional[str] = None
    observed: Optional[int] = None


@dataclass(frozen=True)
class Expectation:
    name: str
    pattern: str
    count: Optional[int] = None
    literal: bool = True

    def occurrences(self, html: str) -> int:
        if self.literal:
            return html.count(self.pattern)
        return len(re.findall(self.pattern, html))

    def describe(self) -> str:
        kind = 'text' if self.literal else 'pattern'
        if self.count is None:
            return f'{kind} {self.pattern!r} at least once'
        return f'{kind} {self.pattern!r} exactly {self.count} time(s)'

    def evaluate(self, html: str) -> CheckResult:
        seen = self.occurrences(html)
        ok = seen >= 1 if self.count is None else seen == self.count
        detail = 'ok' if ok else f'expected {self.describe()}, found {seen}'
        return CheckResult(name=self.name, ok=ok, detail=detail, expected=self.describe(), observed=seen)


def contains(name: str, text: str) -> Expectation:
    return Expectation(name=name, pattern=text)


def matches(name: str, regex: str) -> Expectation:
    return Expectation(name=name, pattern=regex, literal=False)


def count_of(name: str, pattern: str, n: int, literal: bool = True) -> Expectation:
    return Expectation(name=name, pattern=pattern, count=n, literal=literal)
