"""Polynomials kept as terms in descending order of exponent."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from dataclasses import dataclass

EMPTY_MESSAGE = "DS rong!"


@dataclass(frozen=True)
class Term:
    """One term ``coef * x^exp``."""

    coef: float
    exp: float

    def __str__(self) -> str:
        return f"{self.coef:g}x^{self.exp:g}"


class Polynomial:
    """A polynomial with at most one term per exponent, highest first."""

    def __init__(self) -> None:
        self._terms: list[Term] = []

    def __iter__(self) -> Iterator[Term]:
        return iter(self._terms)

    def __len__(self) -> int:
        return len(self._terms)

    def add_term(self, coef: float, exp: float) -> None:
        """Insert a term, or set the coefficient if ``exp`` is already present."""
        term = Term(coef, exp)
        for index, existing in enumerate(self._terms):
            if existing.exp == exp:
                self._terms[index] = term
                return
            if existing.exp < exp:
                self._terms.insert(index, term)
                return
        self._terms.append(term)

    def remove(self, exp: float) -> Term:
        """Remove and return the term with exponent ``exp``."""
        for index, term in enumerate(self._terms):
            if term.exp == exp:
                return self._terms.pop(index)
        raise ValueError(f"no term with exponent {exp:g}")

    def format(self) -> str:
        """Return ``f(x) = ...`` with terms joined by ``+``."""
        if not self._terms:
            return EMPTY_MESSAGE
        return "f(x) = " + " + ".join(str(term) for term in self._terms)


def main(argv: list[str] | None = None) -> int:
    """Build a sample polynomial and print it."""
    polynomial = Polynomial()
    polynomial.add_term(2, 3)
    polynomial.add_term(3, 2)
    polynomial.add_term(2, 1)
    polynomial.add_term(9, 2)
    print(polynomial.format(), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())