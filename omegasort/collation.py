"""Locale-aware string ordering.

Without a locale, strings compare by code point (after ``str.casefold`` when
case-insensitive). With a BCP-47 locale, comparison is delegated to an ICU
collator. PyICU is optional: install ``omegasort[icu]`` to sort with a locale.
"""

from __future__ import annotations

import logging

from omegasort.errors import LocaleError
from omegasort.params import UNDETERMINED, SortParams

logger = logging.getLogger(__name__)


def _cmp(a, b) -> int:
    return (a > b) - (a < b)


def collator_for_locale(locale_name: str, case_insensitive: bool):
    """Build an ICU collator for ``locale_name``.

    Case-insensitive collation drops to secondary strength, which ignores
    case differences but still distinguishes accents.
    """
    try:
        import icu  # noqa: deferred, PyICU is optional
    except ImportError as exc:
        raise LocaleError(
            f"sorting with locale '{locale_name}' requires PyICU "
            "(pip install 'omegasort[icu]')"
        ) from exc

    logger.debug("Creating collator for locale: %s", locale_name)
    try:
        locale = icu.Locale.forLanguageTag(locale_name)
        if not locale.getLanguage():
            raise LocaleError(f"'{locale_name}' is not a valid locale")
        collator = icu.Collator.createInstance(locale)
    except icu.ICUError as exc:
        raise LocaleError(f"could not create a collator for '{locale_name}': {exc}") from exc
    if case_insensitive:
        collator.setStrength(icu.Collator.SECONDARY)
    return collator


class StringComparer:
    """Two-string ordering primitive for a fixed locale/case/direction.

    ``cmp`` is the undirected three-way comparison; calling the comparer
    answers "a sorts strictly before b" with ``reverse`` applied, so equal
    strings are never "less" in either direction.
    """

    def __init__(
        self,
        locale: str | None = UNDETERMINED,
        case_insensitive: bool = False,
        reverse: bool = False,
    ) -> None:
        self.locale = locale or UNDETERMINED
        self.case_insensitive = case_insensitive
        self.reverse = reverse
        self._collator = None
        if self.locale != UNDETERMINED:
            self._collator = collator_for_locale(self.locale, case_insensitive)

    @classmethod
    def from_params(cls, params: SortParams) -> StringComparer:
        return cls(params.locale, params.case_insensitive, params.reverse)

    def cmp(self, a: str, b: str) -> int:
        if self._collator is not None:
            return self._collator.compare(a, b)
        if self.case_insensitive:
            return _cmp(a.casefold(), b.casefold())
        return _cmp(a, b)

    def __call__(self, a: str, b: str) -> bool:
        order = self.cmp(a, b)
        return order > 0 if self.reverse else order < 0
