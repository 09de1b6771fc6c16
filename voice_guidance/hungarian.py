"""
Hungarian grammar rule.

Hungarian attaches the sublative suffix to the street name ("Fő utcára",
"M5-re"), and the suffix vowel must agree with the last vowel sound of the
name. Acronyms and numbers are spelled out, so their agreement follows the
pronunciation of the last spoken letter or number word. The definite article
is "az" before a vowel sound and "a" otherwise.
"""

import logging
import re
from dataclasses import replace
from enum import Enum

from .grammar import PhraseParts, register_grammar_rule
from .templates import replace_last


logger = logging.getLogger(__name__)


class Harmony(str, Enum):
    """Vowel harmony class of a word ending."""
    FRONT = "front"    # -re
    BACK = "back"      # -ra
    UNKNOWN = "unknown"


# Final vowel lengthening before a suffix: utca -> utcá(ra)
BASE_WORD_HARMONY = (
    ("e", "é"),
    ("a", "á"),
    ("ö", "ő"),
    ("ü", "ű"),
)

FRONT_VOWELS = frozenset("eéöőüű")
BACK_VOWELS = frozenset("aáoóuú")
INDETERMINATE_VOWELS = frozenset("ií")

# Spelled-out letters and digits whose name takes a back suffix
BACK_NAMES = frozenset({
    "A",  # a
    "Á",  # á
    "H",  # há
    "I",  # i
    "Í",  # í
    "K",  # ká
    "O",  # o
    "Ó",  # ó
    "U",  # u
    "Ű",  # ú
    "0",  # nulla
    "3",  # három
    "6",  # hat
    "8",  # nyolc
})

FRONT_NAMES = frozenset({
    "B", "C", "D", "E", "É", "F", "G", "J", "L", "M", "N", "Ö", "Ő", "P", "Q",
    "R", "S", "T", "Ú", "Ü", "V", "W", "X", "Y", "Z",
    "1",  # egy
    "2",  # kettő
    "4",  # négy
    "5",  # öt
    "7",  # hét
    "9",  # kilenc
})

# Tens are pronounced as their own word: tíz, negyven, ötven, hetven, kilencven
FRONT_TENS = frozenset({"10", "40", "50", "70", "90"})
# húsz, harminc, hatvan, nyolcvan
BACK_TENS = frozenset({"20", "30", "60", "80"})
# száz
BACK_HUNDRED = "100"

SUFFIX_PLACEHOLDER = "-re"

# 1, 5 and 1000 start with a vowel sound, 10 and 100 do not
VOWEL_SOUND_START = re.compile(
    r"^[5aeiouyáéíóúöüőű]|^1$|^1[^\d]|^1\d\d\d[^\d]",
    re.IGNORECASE,
)

ARTICLE_SUBSTITUTIONS = {
    "onto": ("a", "az"),
    "direction": ("Hajtson ki a", "Hajtson ki az"),
}


def base_word_transform(street: str) -> str:
    """Lengthen a final e/a/ö/ü so the suffix can follow it."""
    for base, harmonic in BASE_WORD_HARMONY:
        if street.endswith(base):
            return street[:-len(base)] + harmonic
    return street


def ends_in_acronym_or_number(text: str) -> bool:
    """
    Check whether the last word is spoken letter by letter or as a number.

    Scans backward to the previous space; any character that is neither
    an uppercase letter nor a digit ends the scan with False.
    """
    for char in reversed(text):
        if char == " ":
            break
        if char == char.lower() and char not in "0123456789":
            return False
    return True


def categorize_acronyms_and_numbers(text: str) -> Harmony:
    """
    Harmony of an uppercase/numeric ending, e.g. "M5" or "120".

    The last two characters are checked first for tens with their own word
    (10, 40, 50, 70, 90 are front; 20, 30, 60, 80 are back), then the last
    three for 100 (back). Otherwise the last letter or digit decides.
    Unknown characters such as punctuation are skipped until a match or a
    space is found.
    """
    for i in range(len(text) - 1, -1, -1):
        one = text[i]
        two = text[i - 1:i + 1] if i >= 1 else one
        three = text[i - 2:i + 1] if i >= 2 else two

        if two in FRONT_TENS:
            return Harmony.FRONT
        if two in BACK_TENS:
            return Harmony.BACK
        if three == BACK_HUNDRED:
            return Harmony.BACK

        if one in FRONT_NAMES:
            return Harmony.FRONT
        if one in BACK_NAMES:
            return Harmony.BACK
        if one == " ":
            return Harmony.BACK

    logger.warning(f"Unable to find Hungarian front/back for {text!r}")
    return Harmony.BACK


def categorize_last_word_vowels(text: str) -> Harmony:
    """
    Harmony of the last word of a street phrase.

    The last front or back vowel decides. Indeterminate vowels (i, í) mean
    back, but only if the word has no other vowel. A word without vowels is
    treated as an acronym after all.
    """
    if ends_in_acronym_or_number(text):
        return categorize_acronyms_and_numbers(text)

    found_indeterminate = False

    for char in reversed(text):
        lower = char.lower()
        if lower in FRONT_VOWELS:
            return Harmony.FRONT
        if lower in BACK_VOWELS:
            return Harmony.BACK
        if lower in INDETERMINATE_VOWELS:
            found_indeterminate = True
        if char == " ":
            if found_indeterminate:
                return Harmony.BACK
            return categorize_acronyms_and_numbers(text)

    logger.warning(f"Hungarian word not found: {text!r}")
    return Harmony.BACK


def select_suffix(template: str, harmony: Harmony) -> str:
    """Rewrite the -re placeholder of the template for the given harmony."""
    if harmony == Harmony.FRONT:
        return replace_last(template, SUFFIX_PLACEHOLDER, "re")
    if harmony == Harmony.BACK:
        return replace_last(template, SUFFIX_PLACEHOLDER, "ra")
    return replace_last(template, SUFFIX_PLACEHOLDER, "")


def starts_with_vowel_sound(street: str) -> bool:
    return VOWEL_SOUND_START.search(street) is not None


@register_grammar_rule("hu")
def apply_hungarian_grammar(parts: PhraseParts) -> PhraseParts:
    """Suffix harmony and article choice for Hungarian street announcements."""
    street = base_word_transform(parts.street)
    template = select_suffix(parts.template, categorize_last_word_vowels(street))

    onto = parts.onto
    direction = parts.direction
    if starts_with_vowel_sound(street):
        default, before_vowel = ARTICLE_SUBSTITUTIONS["onto"]
        if onto == default:
            onto = before_vowel
        default, before_vowel = ARTICLE_SUBSTITUTIONS["direction"]
        if direction == default:
            direction = before_vowel

    return replace(parts, street=street, template=template, onto=onto, direction=direction)
