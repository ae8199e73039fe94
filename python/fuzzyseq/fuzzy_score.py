"""Fuzzy matching score in the style of text editors and launchers.

Each query character is looked up, in order, in the remainder of the term.
A hit earns one point and two bonus points when it directly follows the
previous hit, so contiguous runs are rewarded.

    >>> FuzzyScore("en").apply("Workshop", "wo")
    4
    >>> FuzzyScore("en").apply("Apache Software Foundation", "asf")
    3
"""

from __future__ import annotations

from typing import Optional

from fuzzyseq.exceptions import InvalidArgumentError, InvalidInputError
from fuzzyseq.protocols import Metric

# Languages whose dotted and dotless I lower-case differently
_DOTLESS_I_LANGUAGES = frozenset({"tr", "az"})
_DOTLESS_I_TABLE = str.maketrans({"I": "ı", "İ": "i"})


def _language(locale: str) -> str:
    return locale.replace("-", "_").split("_", 1)[0].lower()


class FuzzyScore(Metric):
    """Case-insensitive subsequence score of a query against a term.

    Args:
        locale: Locale tag such as ``"en"``, ``"en_US"`` or ``"tr-TR"``,
            used to lower-case both strings.

    Raises:
        InvalidArgumentError: If ``locale`` is None or empty.
    """

    __slots__ = ("_locale", "_dotless_i")

    def __init__(self, locale: Optional[str]):
        if locale is None:
            raise InvalidArgumentError("Locale must not be None")
        if not isinstance(locale, str) or not locale.strip():
            raise InvalidArgumentError(f"Invalid locale: {locale!r}")
        self._locale = locale
        self._dotless_i = _language(locale) in _DOTLESS_I_LANGUAGES

    @property
    def locale(self) -> str:
        return self._locale

    def _lower(self, text: str) -> str:
        if self._dotless_i:
            text = text.translate(_DOTLESS_I_TABLE)
        return text.lower()

    def apply(self, term: str, query: str) -> int:
        """Score ``query`` against ``term``; higher means a closer match.

        Raises:
            InvalidInputError: If either string is None.
        """
        if term is None or query is None:
            raise InvalidInputError("Strings must not be None")

        term_lower = self._lower(str(term))
        query_lower = self._lower(str(query))

        score = 0
        term_index = 0
        previous_match = -2
        term_length = len(term_lower)
        for query_char in query_lower:
            while term_index < term_length:
                term_char = term_lower[term_index]
                term_index += 1
                if query_char == term_char:
                    score += 1
                    if previous_match + 1 == term_index - 1:
                        score += 2
                    previous_match = term_index - 1
                    break
        return score

    def __repr__(self) -> str:
        return f"FuzzyScore({self._locale!r})"


__all__ = ["FuzzyScore"]
