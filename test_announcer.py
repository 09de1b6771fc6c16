"""
Tests for the assembled turn notification texts.
"""

import pytest

from voice_guidance import (
    CarDirection,
    DictTextResolver,
    DirectoryTextResolver,
    LengthUnits,
    LocaleBinding,
    Notification,
    PedestrianDirection,
    RoadNameInfo,
    TurnNotificationTexts,
    synthesize,
)
from voice_guidance.config import DEFAULT_STRINGS_DIR, AppConfig, reset_config, set_config
from voice_guidance.contracts import ContractViolation
from voice_guidance.road_names import MappingShieldResolver


EN_STRINGS = {
    "in_100_meters": "In 100 meters.",
    "in_200_meters": "In 200 meters.",
    "in_200_feet": "In 200 feet.",
    "then": "Then",
    "onto": "onto",
    "dist_direction_onto_street": "%1$s %2$s %3$s %4$s",
    "take_exit_number": "Take exit",
    "go_straight": "Go straight.",
    "make_a_right_turn": "Turn right.",
    "make_a_left_turn": "Turn left.",
    "leave_the_roundabout": "Exit the roundabout.",
    "take_the_3_exit": "Take the third exit.",
    "destination": "You'll arrive.",
    "you_have_reached_the_destination": "You have reached your destination.",
    "unknown_camera": "Speed camera ahead.",
}

HU_STRINGS = {
    "in_200_meters": "200 méter múlva.",
    "then": "Majd",
    "onto": "a",
    "dist_direction_onto_street": "%1$s %2$s %3$s %4$s-re",
    "take_exit_number": "Hajtson ki a",
    "make_a_right_turn": "Forduljon jobbra.",
}

JA_STRINGS = {
    "in_200_meters": "200メートル先、",
    "then": "その先",
    "make_a_right_turn": "右折です。",
}


def make_texts(strings: dict[str, str], locale: str = "en", **kwargs) -> TurnNotificationTexts:
    """Create a generator bound to in-memory strings."""
    config = AppConfig()
    set_config(config)
    texts = TurnNotificationTexts(
        resolver=DictTextResolver({locale: strings}),
        config=config,
        **kwargs,
    )
    texts.set_locale(locale)
    return texts


def right_turn(**kwargs) -> Notification:
    return Notification.for_vehicle(CarDirection.TURN_RIGHT, **kwargs)


def test_bare_direction():
    """Test that a notification at the maneuver is the raw direction text."""
    print("\n🧪 Testing bare direction...")

    texts = make_texts(EN_STRINGS)
    assert texts.turn_notification(right_turn()) == "Turn right."

    odd = make_texts({"make_a_left_turn": "  Turn  left ,. "})
    assert odd.turn_notification(Notification.for_vehicle(CarDirection.TURN_LEFT)) == "  Turn  left ,. "

    print("   ✅ Bare direction works correctly")


def test_distance_without_street():
    """Test the short sentence path."""
    print("\n🧪 Testing distance without street...")

    texts = make_texts(EN_STRINGS)
    assert texts.turn_notification(right_turn(distance_units=200)) == "In 200 meters. Turn right."
    assert texts.turn_notification(right_turn(distance_units=180)) == "In 200 meters. Turn right."
    assert texts.turn_notification(
        right_turn(distance_units=210, length_units=LengthUnits.IMPERIAL)
    ) == "In 200 feet. Turn right."

    arrival = Notification.for_vehicle(CarDirection.REACHED_YOUR_DESTINATION, distance_units=100)
    assert texts.turn_notification(arrival) == "In 100 meters. You'll arrive."

    arrived = Notification.for_vehicle(CarDirection.REACHED_YOUR_DESTINATION)
    assert texts.turn_notification(arrived) == "You have reached your destination."

    print("   ✅ Short sentences work correctly")


def test_then_phrasing():
    """Test "then" instructions."""
    print("\n🧪 Testing then phrasing...")

    texts = make_texts(EN_STRINGS)
    then_left = Notification.for_vehicle(CarDirection.TURN_LEFT, use_then_instead_of_distance=True)
    assert texts.turn_notification(then_left) == "Then Turn left."

    roundabout = Notification.for_vehicle(
        CarDirection.LEAVE_ROUNDABOUT,
        use_then_instead_of_distance=True,
        exit_num=3,
    )
    assert texts.turn_notification(roundabout) == "Then Take the third exit."

    with_street = Notification.for_vehicle(
        CarDirection.TURN_LEFT,
        use_then_instead_of_distance=True,
        next_street_info=RoadNameInfo(name="Elm Street"),
    )
    assert texts.turn_notification(with_street) == "Then Turn left onto Elm Street"

    print("   ✅ Then phrasing works correctly")


def test_silent_notifications():
    """Test the cases where nothing is spoken."""
    texts = make_texts(EN_STRINGS)

    vehicle_none = Notification.for_vehicle(CarDirection.NONE, use_then_instead_of_distance=True)
    assert texts.turn_notification(vehicle_none) == ""

    pedestrian_none = Notification.for_pedestrian(PedestrianDirection.NONE, use_then_instead_of_distance=True)
    assert texts.turn_notification(pedestrian_none) == ""

    missing_text = Notification.for_vehicle(CarDirection.TURN_SHARP_LEFT, distance_units=200)
    assert texts.turn_notification(missing_text) == ""


def test_pedestrian_notifications():
    """Test pedestrian maneuvers."""
    texts = make_texts(EN_STRINGS)

    walk = Notification.for_pedestrian(PedestrianDirection.TURN_RIGHT, distance_units=100)
    assert texts.turn_notification(walk) == "In 100 meters. Turn right."

    then_walk = Notification.for_pedestrian(PedestrianDirection.GO_STRAIGHT, use_then_instead_of_distance=True)
    assert texts.turn_notification(then_walk) == "Then Go straight."


def test_street_sentence():
    """Test the full template path."""
    print("\n🧪 Testing street sentences...")

    texts = make_texts(EN_STRINGS)
    notification = right_turn(distance_units=200, next_street_info=RoadNameInfo(name="Main Street"))
    assert texts.turn_notification(notification) == "In 200 meters Turn right onto Main Street"

    exit_notification = right_turn(
        distance_units=100,
        next_street_info=RoadNameInfo(junction_ref="12A", destination_ref="I-95", name="Main St"),
    )
    assert texts.turn_notification(exit_notification) == "In 100 meters Take exit 12A; I-95; Main St"

    print("   ✅ Street sentences work correctly")


def test_street_overrides():
    """Test _street and _street_verb variants."""
    strings = dict(EN_STRINGS)
    strings["make_a_right_turn_street"] = "Make a right."
    texts = make_texts(strings)
    notification = right_turn(distance_units=200, next_street_info=RoadNameInfo(name="Main Street"))
    assert texts.turn_notification(notification) == "In 200 meters Make a right onto Main Street"

    strings = dict(EN_STRINGS)
    strings["dist_direction_onto_street"] = "%1$s %2$s %3$s %4$s %5$s"
    strings["make_a_right_turn_street_verb"] = "abbiegen"
    texts = make_texts(strings)
    assert texts.turn_notification(notification) == "In 200 meters Turn right onto Main Street abbiegen"

    # no verb for this direction: the trailing slot renders empty
    left = Notification.for_vehicle(
        CarDirection.TURN_LEFT,
        distance_units=200,
        next_street_info=RoadNameInfo(name="Elm"),
    )
    assert texts.turn_notification(left) == "In 200 meters Turn left onto Elm "

    # exit phrasing is ignored when the locale has none
    strings = dict(EN_STRINGS)
    del strings["take_exit_number"]
    texts = make_texts(strings)
    exit_notification = right_turn(distance_units=200, next_street_info=RoadNameInfo(junction_ref="7"))
    assert texts.turn_notification(exit_notification) == "In 200 meters Turn right onto 7"


def test_floating_punctuation():
    """Test cleanup of empty template slots."""
    strings = dict(EN_STRINGS)
    strings["dist_direction_onto_street"] = "%1$s , %2$s %3$s %4$s"
    texts = make_texts(strings)

    notification = right_turn(
        use_then_instead_of_distance=True,
        next_street_info=RoadNameInfo(name="Main Street"),
    )
    assert texts.turn_notification(notification) == "Then Turn right onto Main Street"


def test_shield_resolution():
    """Test canonical references in spoken street names."""
    texts = make_texts(EN_STRINGS, shield_resolver=MappingShieldResolver({"CA 1": ["CA-1"]}))
    notification = right_turn(
        distance_units=200,
        next_street_info=RoadNameInfo(ref="CA 1", name="Pacific Coast Hwy"),
    )
    assert texts.turn_notification(notification) == "In 200 meters Turn right onto CA-1; Pacific Coast Hwy"


def test_hungarian_sentences():
    """Test suffix harmony and articles in full sentences."""
    print("\n🧪 Testing Hungarian sentences...")

    texts = make_texts(HU_STRINGS, locale="hu")

    notification = right_turn(distance_units=200, next_street_info=RoadNameInfo(name="Fő utca"))
    assert texts.turn_notification(notification) == "200 méter múlva Forduljon jobbra a Fő utcára"

    notification = right_turn(distance_units=200, next_street_info=RoadNameInfo(name="Andrássy út"))
    assert texts.turn_notification(notification) == "200 méter múlva Forduljon jobbra az Andrássy útra"

    notification = right_turn(
        distance_units=200,
        next_street_info=RoadNameInfo(junction_ref="5", destination="Budapest"),
    )
    assert texts.turn_notification(notification) == "200 méter múlva Hajtson ki az 5; Budapestre"

    notification = right_turn(distance_units=200, next_street_info=RoadNameInfo(ref="M5"))
    assert texts.turn_notification(notification) == "200 méter múlva Forduljon jobbra a M5re"

    then = right_turn(use_then_instead_of_distance=True)
    assert texts.turn_notification(then) == "Majd Forduljon jobbra."

    print("   ✅ Hungarian sentences work correctly")


def test_no_space_locale():
    """Test locales that join components without spaces."""
    texts = make_texts(JA_STRINGS, locale="ja")

    then = right_turn(use_then_instead_of_distance=True)
    assert texts.turn_notification(then) == "その先右折です。"

    ahead = right_turn(distance_units=200)
    assert texts.turn_notification(ahead) == "200メートル先、右折です。"


def test_speed_camera():
    """Test the speed camera warning."""
    texts = make_texts(EN_STRINGS)
    assert texts.speed_camera_notification() == "Speed camera ahead."
    assert texts.locale == "en"


def test_unset_locale():
    """Test generation before a locale is bound."""
    print("\n🧪 Testing unset locale...")

    set_config(AppConfig())
    texts = TurnNotificationTexts(resolver=DictTextResolver({"en": EN_STRINGS}))
    assert texts.turn_notification(right_turn(distance_units=200)) == ""
    assert texts.speed_camera_notification() == ""
    assert texts.locale == ""

    set_config(AppConfig(strict_contracts=True))
    try:
        strict = TurnNotificationTexts(resolver=DictTextResolver({"en": EN_STRINGS}))
        with pytest.raises(ContractViolation):
            strict.turn_notification(right_turn())
    finally:
        reset_config()

    print("   ✅ Unset locale stays silent")


def test_locale_switch():
    """Test that set_locale replaces the binding."""
    set_config(AppConfig())
    texts = TurnNotificationTexts(resolver=DictTextResolver({"en": EN_STRINGS, "hu": HU_STRINGS}))

    texts.set_locale("en")
    assert texts.turn_notification(right_turn()) == "Turn right."

    texts.set_locale("hu")
    assert texts.locale == "hu"
    assert texts.turn_notification(right_turn()) == "Forduljon jobbra."


def test_functional_synthesize():
    """Test synthesize with an explicit binding."""
    config = AppConfig()
    set_config(config)
    binding = LocaleBinding(locale="en", resolver=DictTextResolver({"en": EN_STRINGS}))
    assert synthesize(binding, right_turn(distance_units=200), config=config) == "In 200 meters. Turn right."


def test_packaged_strings():
    """Test the strings shipped with the package."""
    set_config(AppConfig())
    texts = TurnNotificationTexts(resolver=DirectoryTextResolver(DEFAULT_STRINGS_DIR))

    texts.set_locale("en")
    assert texts.turn_notification(right_turn(distance_units=200)) == "In 200 meters. Turn right."
    assert texts.speed_camera_notification() == "Speed camera ahead."

    texts.set_locale("hu")
    notification = right_turn(distance_units=200, next_street_info=RoadNameInfo(name="Fő utca"))
    assert texts.turn_notification(notification) == "200 méter múlva Forduljon jobbra a Fő utcára"

    texts.set_locale("xx")
    assert texts.turn_notification(right_turn()) == ""

    config = AppConfig(locale="hu")
    set_config(config)
    configured = TurnNotificationTexts.from_config(config)
    assert configured.locale == "hu"
    assert configured.turn_notification(right_turn(distance_units=200)) == "200 méter múlva. Forduljon jobbra."


def test_missing_street_template():
    """Test that a street sentence without its template is not spoken in part."""
    strings = {key: text for key, text in EN_STRINGS.items() if key != "dist_direction_onto_street"}
    texts = make_texts(strings)
    street = RoadNameInfo(name="Main Street")

    then = right_turn(use_then_instead_of_distance=True, next_street_info=street)
    assert texts.turn_notification(then) == ""
    assert texts.turn_notification(right_turn(distance_units=200, next_street_info=street)) == ""

    assert texts.turn_notification(right_turn(distance_units=200)) == "In 200 meters. Turn right."


def test_instance_strictness():
    """Test that the generator's own config decides contract strictness."""
    print("\n🧪 Testing per-generator strict contracts...")

    set_config(AppConfig())
    try:
        strict = TurnNotificationTexts(
            resolver=DictTextResolver({"en": EN_STRINGS}),
            config=AppConfig(strict_contracts=True),
        )
        with pytest.raises(ContractViolation):
            strict.turn_notification(right_turn())
        with pytest.raises(ContractViolation):
            strict.speed_camera_notification()

        strict.set_locale("en")
        unspoken = Notification.for_vehicle(CarDirection.STAY_ON_ROUNDABOUT, distance_units=200)
        with pytest.raises(ContractViolation):
            strict.turn_notification(unspoken)

        lenient = make_texts(EN_STRINGS)
        set_config(AppConfig(strict_contracts=True))
        assert lenient.turn_notification(unspoken) == ""
    finally:
        reset_config()

    print("   ✅ Strictness follows the generator config")


def run_all_tests():
    """Run all tests."""
    print("=" * 60)
    print("Turn Notification Text Tests")
    print("=" * 60)

    test_bare_direction()
    test_distance_without_street()
    test_then_phrasing()
    test_silent_notifications()
    test_pedestrian_notifications()
    test_street_sentence()
    test_street_overrides()
    test_floating_punctuation()
    test_shield_resolution()
    test_hungarian_sentences()
    test_no_space_locale()
    test_speed_camera()
    test_unset_locale()
    test_locale_switch()
    test_functional_synthesize()
    test_packaged_strings()
    test_missing_street_template()
    test_instance_strictness()

    print("\n" + "=" * 60)
    print("🎉 All turn notification tests passed!")
    print("=" * 60)


if __name__ == "__main__":
    run_all_tests()
