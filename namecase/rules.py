"""
Name-case rule tables.

Every table is applied in declaration order: later rules may re-match
text produced by earlier ones, so entries must not be reordered.
"""

from __future__ import annotations

import regex
from typing import NamedTuple


class Rule(NamedTuple):
    pattern: regex.Pattern
    replacement: str


def _compile(table: tuple[tuple[str, str], ...]) -> tuple[Rule, ...]:
    return tuple(Rule(regex.compile(pattern), replacement) for pattern, replacement in table)


# Irish "Mac" names that look patronymic but keep a lowercase third letter.
IRISH_EXCEPTIONS = _compile((
    (r"\bMacEdo", "Macedo"),
    (r"\bMacEvicius", "Macevicius"),
    (r"\bMacHado", "Machado"),
    (r"\bMacHar", "Machar"),
    (r"\bMacHin", "Machin"),
    (r"\bMacHlin", "Machlin"),
    (r"\bMacIas", "Macias"),
    (r"\bMacIulis", "Maciulis"),
    (r"\bMacKie", "Mackie"),
    (r"\bMacKle", "Mackle"),
    (r"\bMacKlin", "Macklin"),
    (r"\bMacKmin", "Mackmin"),
    (r"\bMacQuarie", "Macquarie"),
))

# "son (daughter) of" and other particles.
PARTICLES = _compile((
    (r"\bAl(?=\s+\w)", "al"),                   # al Arabic or forename Al
    (r"\bBin(|ti|te)\b", r"bin\1"),             # bin, binti, binte Arabic; each keeps its spelling
    (r"\bAp\b", "ap"),                          # ap Welsh
    (r"\bBen(?=\s+\w)", "ben"),                 # ben Hebrew or forename Ben
    (r"\bDell([ae])\b", r"dell\1"),             # della, delle Italian
    (r"\bD([aeiou])\b", r"d\1"),                # da, de, di Italian; du French; do Brasil
    (r"\bD([ao]s)\b", r"d\1"),                  # das, dos Brasileiros
    (r"\bDe([lrn])\b", r"de\1"),                # del Italian; der/den Dutch/Flemish
    (r"\bEl\b", "el"),                          # el Greek or El Spanish
    (r"\bLa\b", "la"),                          # la French or La Spanish
    (r"\bL([eo])\b", r"l\1"),                   # lo Italian; le French
    (r"\bTe([rn])\b", r"te\1"),                 # ten/ter Dutch/Flemish, whole word only
    (r"\bVan(?=\s+\w)", "van"),                 # van German or forename Van
    (r"\bVon\b", "von"),                        # von Dutch/Flemish
))

# Spanish conjunctions, as produced by capitalization.
CONJUNCTIONS = ("Y", "E", "I")
CONJUNCTION_RULES = tuple(
    Rule(regex.compile(rf"\b{conjunction}\b"), conjunction.lower()) for conjunction in CONJUNCTIONS
)

# Suffix numerals up to XLIX; also matches the empty string at any word boundary.
ROMAN_NUMERAL = regex.compile(
    r"\b((?:[Xx]{1,3}|[Xx][Ll]|[Ll][Xx]{0,3})?(?:[Ii]{1,3}|[Ii][VvXx]|[Vv][Ii]{0,3})?)\b"
)

WORD_START = regex.compile(r"\b\w")
APOSTROPHE_LETTER = regex.compile(r"'\w\b")

IRISH_MAC = regex.compile(r"\bMac[A-Za-z]{2,}[^aciozj]\b")
IRISH_MC = regex.compile(r"\bMc")
MAC_PREFIX = regex.compile(r"\b(Ma?c)([A-Za-z]+)")
MACMURDO = Rule(regex.compile("Macmurdo"), "MacMurdo")
