"""
Sentence Template Module

Localized sentence templates arrive as printf-style strings ("%s" or
positional "%1$s" placeholders). They are parsed into literal segments and
named slots so that filling never depends on format-string mechanics.
"""

import re
from dataclasses import dataclass


# Slot order of the localized "dist_direction_onto_street" template
SLOT_NAMES = ("distance", "direction", "onto", "street", "verb")

_PLACEHOLDER = re.compile(r"%(?:(\d+)\$)?s|%%")

_FLOATING_PUNCTUATION = re.compile(r" [,.:;]+ ")
_REPEATED_SEPARATORS = re.compile(r"[ :]{2,}")
_LEADING_SPACES = re.compile(r"^ +")


@dataclass(frozen=True)
class SentenceTemplate:
    """
    Parsed template: literal text interleaved with named slots.

    parts holds either ("text", literal) or ("slot", name) entries.
    """

    parts: tuple[tuple[str, str], ...]

    @classmethod
    def parse(cls, text: str, slot_names: tuple[str, ...] = SLOT_NAMES) -> "SentenceTemplate":
        """
        Parse a printf-style template.

        Placeholders beyond the known slots are dropped, as are slots the
        template never mentions.
        """
        parts: list[tuple[str, str]] = []
        position = 0
        sequential = 0

        for match in _PLACEHOLDER.finditer(text):
            if match.start() > position:
                parts.append(("text", text[position:match.start()]))
            position = match.end()

            if match.group(0) == "%%":
                parts.append(("text", "%"))
                continue

            if match.group(1) is not None:
                index = int(match.group(1)) - 1
            else:
                index = sequential
                sequential += 1

            if 0 <= index < len(slot_names):
                parts.append(("slot", slot_names[index]))

        if position < len(text):
            parts.append(("text", text[position:]))

        return cls(tuple(parts))

    @property
    def slots(self) -> tuple[str, ...]:
        """Slot names in the order they appear."""
        return tuple(value for kind, value in self.parts if kind == "slot")

    def fill(self, **values: str) -> str:
        """Substitute slot values; a slot without a value renders empty."""
        return "".join(
            value if kind == "text" else values.get(value, "")
            for kind, value in self.parts
        )


def _clean_once(text: str) -> str:
    # remove floating punctuation
    text = _FLOATING_PUNCTUATION.sub(" ", text)
    # remove repetitious spaces or colons
    text = _REPEATED_SEPARATORS.sub(" ", text)
    # trim leading spaces
    return _LEADING_SPACES.sub("", text)


def clean_spoken_text(text: str) -> str:
    """
    Remove floating punctuation, repeated separators and leading spaces.

    The pass is applied until the text stops changing, so cleaning an
    already cleaned string is a no-op.
    """
    cleaned = _clean_once(text)
    while cleaned != text:
        text = cleaned
        cleaned = _clean_once(text)
    return cleaned


def replace_last(text: str, old: str, new: str) -> str:
    """Replace the last occurrence of old in text."""
    index = text.rfind(old)
    if index < 0:
        return text
    return text[:index] + new + text[index + len(old):]


def strip_full_stop(text: str, full_stops: tuple[str, ...]) -> str:
    """Remove a single trailing sentence-terminal glyph."""
    for stop in full_stops:
        if stop and text.endswith(stop):
            return text[:-len(stop)]
    return text
