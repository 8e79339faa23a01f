import pytest
from sharedstrings.resolver import create_string_resolver
from sharedstrings.strings import SharedStrings, StringKeys, demonstrate_string_access


@pytest.fixture
def shared():
    return SharedStrings(create_string_resolver("inline", locale_source=lambda: "en"))


def test_string_keys_listing():
    keys = StringKeys.all()
    assert keys["APP_NAME"] == "app_name"
    assert keys["IS_RTL"] == "is_rtl"
    assert len(keys) == 18


def test_accessors(shared):
    assert shared.app_name == "demo"
    assert shared.button_click_me == "Click me!"
    assert shared.welcome_title == "Welcome to KMP Demo"
    assert shared.action_ok == "OK"
    assert shared.action_cancel == "Cancel"
    assert shared.action_retry == "Retry"
    assert shared.error_network == "Network error occurred"
    assert shared.error_generic == "Something went wrong"
    assert shared.native_demo_title == "Native UI Demo"
    assert shared.welcome_description.startswith("This demonstrates")
    assert shared.native_demo_description.startswith("This demonstrates")


def test_accessors_follow_resolver(shared):
    assert shared.get_formatted(StringKeys.COUNTER_LABEL, 3) == "Counter: 3"
    assert shared.get("missing") == "String not found: missing"


@pytest.mark.parametrize("backend", ["document", "inline"])
def test_demonstrate_string_access_english(backend):
    resolver = create_string_resolver(backend, locale_source=lambda: "en_GB")
    demo = demonstrate_string_access(resolver)

    assert demo == {
        "App Name": "demo",
        "Welcome Title": "Welcome to KMP Demo",
        "Button Text": "Click me!",
        "OK Action": "OK",
        "Cancel Action": "Cancel",
        "Counter Example": "Counter: 42",
        "Language Info": "Current Language: en",
        "RTL Status": "Is RTL: No",
    }


def test_demonstrate_string_access_arabic():
    resolver = create_string_resolver("document", locale_source=lambda: "ar")
    demo = demonstrate_string_access(resolver)

    assert demo["Counter Example"] == "العداد: 42"
    assert demo["Language Info"] == "اللغة الحالية: ar"
    assert demo["RTL Status"] == "من اليمين إلى اليسار: Yes"
