"""Mineral formula parser.

Turns chemical formula strings such as ``"CaCO₃"``, ``"Mg₃Si₄O₁₀(OH)₂"`` or
``"CaSO4·2H2O"`` into element counts.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Optional

_SUBSCRIPTS = str.maketrans("₀₁₂₃₄₅₆₇₈₉", "0123456789")
_HYDRATE_SEPARATORS = ("·", "•")
_DIGITS = "0123456789"
_U32_MAX = 2**32 - 1


def _is_upper(ch: str) -> bool:
    return "A" <= ch <= "Z"


def _is_lower(ch: str) -> bool:
    return "a" <= ch <= "z"


def _to_count(digits: str) -> int:
    """Integer value of a digit run; values that overflow 32 bits count as 1."""
    value = int(digits)
    return value if value <= _U32_MAX else 1


def _read_number(text: str, pos: int) -> tuple[int, int]:
    """Read an integer subscript at ``pos``; 1 when no digits follow."""
    end = pos
    while end < len(text) and text[end] in _DIGITS:
        end += 1
    if end == pos:
        return 1, pos
    return _to_count(text[pos:end]), end


def _read_symbol(text: str, pos: int) -> tuple[str, int]:
    """Read an element symbol: one uppercase letter and any lowercase letters."""
    end = pos + 1
    while end < len(text) and _is_lower(text[end]):
        end += 1
    return text[pos:end], end


def _parse_group(text: str, pos: int) -> tuple[Counter[str], int]:
    """Parse until the end of ``text`` or a closing parenthesis.

    Returns the element counts and the position where parsing stopped.
    Commas (solid-solution separators) and unrecognised characters are skipped.
    """
    elements: Counter[str] = Counter()
    while pos < len(text):
        ch = text[pos]
        if ch == ")":
            return elements, pos
        if ch == "(":
            group, pos = _parse_group(text, pos + 1)
            if pos < len(text) and text[pos] == ")":
                pos += 1
            multiplier, pos = _read_number(text, pos)
            for symbol, count in group.items():
                elements[symbol] += count * multiplier
        elif _is_upper(ch):
            symbol, pos = _read_symbol(text, pos)
            count, pos = _read_number(text, pos)
            elements[symbol] += count
        else:
            pos += 1
    return elements, pos


def _split_coefficient(part: str) -> tuple[int, str]:
    """Split a leading integer coefficient: ``"2H2O"`` -> ``(2, "H2O")``."""
    end = 0
    while end < len(part) and part[end] in _DIGITS:
        end += 1
    if end == 0:
        return 1, part
    return _to_count(part[:end]), part[end:]


@dataclass
class Formula:
    """A parsed mineral formula: element symbol mapped to atom count."""

    elements: dict[str, int] = field(default_factory=dict)

    @classmethod
    def parse(cls, formula: str) -> Optional[Formula]:
        """Parse a chemical formula string.

        Supports plain notation (``SiO2``), parenthesised groups
        (``Ca5(PO4)3F``), Unicode subscripts (``SiO₂``), hydrates joined by a
        middle dot or bullet (``CaSO4·2H2O``) and solid solutions
        (``(Mg,Fe)2SiO4``, every alternative counted). Returns None when no
        element is found.
        """
        normalized = formula.translate(_SUBSCRIPTS)
        for separator in _HYDRATE_SEPARATORS[1:]:
            normalized = normalized.replace(separator, _HYDRATE_SEPARATORS[0])

        totals: Counter[str] = Counter()
        seen: set[str] = set()
        for raw_part in normalized.split(_HYDRATE_SEPARATORS[0]):
            part = raw_part.strip()
            if not part:
                continue
            coefficient, rest = _split_coefficient(part)
            group, _ = _parse_group(rest, 0)
            for symbol, count in group.items():
                seen.add(symbol)
                totals[symbol] += count * coefficient

        if not seen:
            return None
        return cls({symbol: totals[symbol] for symbol in sorted(seen)})

    def total_atoms(self) -> int:
        """Total number of atoms in the formula."""
        return sum(self.elements.values())

    def count(self, symbol: str) -> int:
        """Atom count of ``symbol``; 0 when the element is absent."""
        return self.elements.get(symbol, 0)