"""
Announcer Module

Assembles the final text spoken for a turn notification:

1. Direction key and text
2. "Then" prefix or distance text
3. Next street phrase
4. Street sentence template, grammar rules and cleanup
"""

import logging

from . import hungarian  # noqa: F401  registers the "hu" grammar rule
from .config import AppConfig, get_config
from .contracts import contract_mode, contract_violation
from .directions import direction_text_id
from .distances import distance_text_id
from .grammar import PhraseParts, apply_grammar_rules
from .localization import DirectoryTextResolver, LocaleBinding, TextResolver
from .models import CarDirection, Notification, PedestrianDirection
from .road_names import ShieldResolver, format_full_road_name
from .templates import SentenceTemplate, clean_spoken_text, strip_full_stop


logger = logging.getLogger(__name__)


THEN_KEY = "then"
ONTO_KEY = "onto"
TAKE_EXIT_NUMBER_KEY = "take_exit_number"
STREET_TEMPLATE_KEY = "dist_direction_onto_street"
SPEED_CAMERA_KEY = "unknown_camera"

STREET_SUFFIX = "_street"
STREET_VERB_SUFFIX = "_street_verb"


def synthesize(
    binding: LocaleBinding,
    notification: Notification,
    shield_resolver: ShieldResolver | None = None,
    config: AppConfig | None = None,
) -> str:
    """
    Build the spoken text for a notification.

    Args:
        binding: Locale and resolver to take texts from
        notification: Maneuver to announce
        shield_resolver: Resolver for canonical road references
        config: Application config (typography settings, contract strictness)

    Returns:
        Text to speak, empty if nothing should be said
    """
    config = config or get_config()
    with contract_mode(config.strict_contracts):
        return _synthesize(binding, notification, shield_resolver, config)


def _synthesize(
    binding: LocaleBinding,
    notification: Notification,
    shield_resolver: ShieldResolver | None,
    config: AppConfig,
) -> str:
    typography = config.typography
    locale = binding.locale
    separator = " " if typography.uses_spaces(locale) else ""

    dir_key = direction_text_id(notification)
    dir_str = binding.text(dir_key) if dir_key else ""

    if (
        notification.distance_units == 0
        and not notification.use_then_instead_of_distance
        and notification.next_street_info.is_empty
    ):
        return dir_str

    if notification.use_then_instead_of_distance:
        if notification.is_pedestrian:
            if notification.pedestrian_direction == PedestrianDirection.NONE:
                return ""
        elif notification.car_direction == CarDirection.NONE:
            return ""

    if not dir_str:
        return ""

    then_str = ""
    if notification.use_then_instead_of_distance:
        then_str = binding.text(THEN_KEY) + separator

    dist_str = ""
    if notification.distance_units > 0:
        dist_key = distance_text_id(notification)
        dist_str = binding.text(dist_key) if dist_key else ""

    street_out = format_full_road_name(notification.next_street_info, shield_resolver)

    if not street_out:
        if dist_str:
            out = then_str + dist_str + separator + dir_str
        else:
            out = then_str + dir_str
        logger.info(f"TTS: {out}")
        return out

    # Full stops between sub-instructions break the TTS flow
    dist_str = strip_full_stop(dist_str, typography.full_stops)

    # Locale-specific phrasing before a street name, like make_a_right_turn_street
    dir_street_str = binding.text(dir_key + STREET_SUFFIX)
    if dir_street_str:
        dir_str = dir_street_str

    onto_str = binding.text(ONTO_KEY)

    # Announce the exit number; the exit phrase replaces "onto"
    if notification.next_street_info.junction_ref:
        dir_exit_str = binding.text(TAKE_EXIT_NUMBER_KEY)
        if dir_exit_str:
            dir_str = dir_exit_str
            onto_str = ""

    dir_str = strip_full_stop(dir_str, typography.full_stops)

    template_str = binding.text(STREET_TEMPLATE_KEY)
    if not template_str:
        logger.warning(f"No {STREET_TEMPLATE_KEY!r} text for locale {locale!r}")
        return ""

    dir_verb = binding.text(dir_key + STREET_VERB_SUFFIX)

    parts = apply_grammar_rules(
        locale,
        PhraseParts(street=street_out, template=template_str, onto=onto_str, direction=dir_str),
    )

    filled = SentenceTemplate.parse(parts.template).fill(
        distance=dist_str,
        direction=parts.direction,
        onto=parts.onto,
        street=parts.street,
        verb=dir_verb,
    )

    out = then_str + clean_spoken_text(filled)
    logger.info(f"TTSn: {out}")
    return out


class TurnNotificationTexts:
    """
    Generates turn notification texts for the currently bound locale.

    The locale binding is replaced as a whole by set_locale/bind; callers
    must not change the locale while a text is being generated.
    """

    def __init__(
        self,
        resolver: TextResolver | None = None,
        shield_resolver: ShieldResolver | None = None,
        config: AppConfig | None = None,
    ):
        """
        Initialize the text generator.

        Args:
            resolver: Text resolver (default: strings directory from config)
            shield_resolver: Resolver for canonical road references
            config: Application config
        """
        self.config = config or get_config()
        self.resolver = resolver or DirectoryTextResolver(self.config.strings_dir)
        self.shield_resolver = shield_resolver
        self._binding: LocaleBinding | None = None

    @classmethod
    def from_config(
        cls,
        config: AppConfig | None = None,
        shield_resolver: ShieldResolver | None = None,
    ) -> "TurnNotificationTexts":
        """Create a generator bound to the configured locale."""
        config = config or get_config()
        texts = cls(shield_resolver=shield_resolver, config=config)
        texts.set_locale(config.locale)
        return texts

    def set_locale(self, locale: str) -> None:
        """Bind a new locale using the generator's resolver."""
        self.bind(LocaleBinding(locale=locale, resolver=self.resolver))

    def bind(self, binding: LocaleBinding) -> None:
        """Replace the locale binding."""
        self._binding = binding
        logger.info(f"Voice guidance locale set to {binding.locale!r}")

    @property
    def locale(self) -> str:
        """Currently bound locale, empty if none."""
        if self._binding is None:
            with contract_mode(self.config.strict_contracts):
                contract_violation("Locale requested before set_locale")
            return ""
        return self._binding.locale

    def get_text(self, key: str) -> str:
        """Resolve a key for the bound locale."""
        with contract_mode(self.config.strict_contracts):
            if self._binding is None:
                contract_violation("Text requested before set_locale", key=key)
                return ""
            return self._binding.text(key)

    def turn_notification(self, notification: Notification) -> str:
        """Text to speak for a turn notification."""
        if self._binding is None:
            with contract_mode(self.config.strict_contracts):
                contract_violation("Turn notification requested before set_locale")
            return ""
        return synthesize(self._binding, notification, self.shield_resolver, self.config)

    def speed_camera_notification(self) -> str:
        """Text to speak when approaching a speed camera."""
        return self.get_text(SPEED_CAMERA_KEY)
