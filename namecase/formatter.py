"""
Name-case formatting.

Pipeline (fixed order):
- mixed-case guard (lazy)
- base capitalization
- Irish Mac/Mc handling
- particle replacements
- Roman numerals
- Spanish conjunctions

Options are resolved per call into a frozen NameCaseOptions and passed
to every pass explicitly; nothing here keeps state between calls.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional

import regex

from .models import NameCaseOptions
from .rules import (
    APOSTROPHE_LETTER,
    CONJUNCTION_RULES,
    IRISH_EXCEPTIONS,
    IRISH_MAC,
    IRISH_MC,
    MAC_PREFIX,
    MACMURDO,
    PARTICLES,
    ROMAN_NUMERAL,
    WORD_START,
    Rule,
)

logger = logging.getLogger(__name__)

DEFAULT_OPTIONS = NameCaseOptions()


def _upper(match: regex.Match) -> str:
    return match.group(0).upper()


def _lower(match: regex.Match) -> str:
    return match.group(0).lower()


def _apply(rules: Iterable[Rule], text: str) -> str:
    for rule in rules:
        text = rule.pattern.sub(rule.replacement, text)
    return text


def resolve_options(options: Optional[NameCaseOptions] = None, **overrides: bool) -> NameCaseOptions:
    """
    Build the effective options for one call.

    Defaults < options < keyword overrides. Unknown keywords raise
    pydantic.ValidationError.
    """
    base = options if options is not None else DEFAULT_OPTIONS
    if not overrides:
        return base
    return NameCaseOptions(**{**base.model_dump(), **overrides})


def skip_mixed(text: str) -> bool:
    """True when text starts uppercase and already mixes cases (e.g. "McDonald")."""
    first_letter_lower = text[0] == text[0].lower()
    all_lower_or_upper = text.lower() == text or text.upper() == text

    return not (first_letter_lower or all_lower_or_upper)


def capitalize(text: str) -> str:
    text = WORD_START.sub(_upper, text.lower())

    # Lowercase 's
    return APOSTROPHE_LETTER.sub(_lower, text)


def update_mac(text: str) -> str:
    def _fix(match: regex.Match) -> str:
        rest = match.group(2)
        return match.group(1) + rest[:1].upper() + rest[1:]

    text = MAC_PREFIX.sub(_fix, text)

    # Now fix "Mac" exceptions
    return _apply(IRISH_EXCEPTIONS, text)


def update_irish(text: str, options: NameCaseOptions = DEFAULT_OPTIONS) -> str:
    if not options.irish:
        return text

    if IRISH_MAC.search(text) or IRISH_MC.search(text):
        text = update_mac(text)

    return MACMURDO.pattern.sub(MACMURDO.replacement, text)


def update_particles(text: str) -> str:
    return _apply(PARTICLES, text)


def update_roman(text: str) -> str:
    return ROMAN_NUMERAL.sub(_upper, text)


def fix_conjunction(text: str, options: NameCaseOptions = DEFAULT_OPTIONS) -> str:
    if not options.spanish:
        return text

    return _apply(CONJUNCTION_RULES, text)


def name_case(text: str, options: Optional[NameCaseOptions] = None, **overrides: bool) -> str:
    """
    Capitalize a personal name.

    >>> name_case("mary o'brien")
    "Mary O'Brien"
    >>> name_case("macdonald", irish=False)
    'Macdonald'
    """
    if text == "":
        return text

    opts = resolve_options(options, **overrides)

    # Leave deliberately mixed-case input alone.
    if opts.lazy and skip_mixed(text):
        logger.debug("Skipping mixed-case input %r", text)
        return text

    result = capitalize(text)
    result = update_irish(result, opts)
    result = update_particles(result)
    result = update_roman(result)
    result = fix_conjunction(result, opts)

    logger.debug("name_case %r -> %r (%s)", text, result, opts)
    return result


def name_case_many(
    names: Iterable[str],
    options: Optional[NameCaseOptions] = None,
    **overrides: bool,
) -> List[str]:
    opts = resolve_options(options, **overrides)
    return [name_case(name, opts) for name in names]
