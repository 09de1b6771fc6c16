"""
Per-locale grammar post-processing.

Some languages need the street phrase and the surrounding sentence fragments
adjusted before they are joined (suffix agreement, article choice). Each such
language registers one rule in GRAMMAR_RULES; locales without a rule pass
through unchanged.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PhraseParts:
    """Sentence fragments a grammar rule may rewrite."""

    street: str
    template: str
    onto: str
    direction: str


GrammarRule = Callable[[PhraseParts], PhraseParts]

GRAMMAR_RULES: dict[str, GrammarRule] = {}


def register_grammar_rule(locale: str) -> Callable[[GrammarRule], GrammarRule]:
    """Decorator registering a grammar rule for a locale."""
    def decorator(rule: GrammarRule) -> GrammarRule:
        GRAMMAR_RULES[locale] = rule
        return rule
    return decorator


def apply_grammar_rules(locale: str, parts: PhraseParts) -> PhraseParts:
    """Run the locale's grammar rule, if it has one."""
    rule = GRAMMAR_RULES.get(locale)
    if rule is None:
        return parts

    adjusted = rule(parts)
    logger.debug(f"Grammar rule for {locale!r}: {parts} -> {adjusted}")
    return adjusted
