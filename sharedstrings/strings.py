from typing import Any, Dict

from .resolver import StringResolver


class StringKeys:
    APP_NAME = "app_name"

    BUTTON_CLICK_ME = "button_click_me"

    WELCOME_TITLE = "welcome_title"
    WELCOME_DESCRIPTION = "welcome_description"

    ACTION_OK = "action_ok"
    ACTION_CANCEL = "action_cancel"
    ACTION_RETRY = "action_retry"

    ERROR_NETWORK = "error_network"
    ERROR_GENERIC = "error_generic"

    SAMPLE_TEXT_1 = "sample_text_1"
    SAMPLE_TEXT_2 = "sample_text_2"
    SAMPLE_TEXT_3 = "sample_text_3"

    NATIVE_DEMO_TITLE = "native_demo_title"
    NATIVE_DEMO_DESCRIPTION = "native_demo_description"
    COUNTER_LABEL = "counter_label"
    LANGUAGE_INFO = "language_info"
    CURRENT_LANGUAGE = "current_language"
    IS_RTL = "is_rtl"

    @classmethod
    def all(cls) -> Dict[str, str]:
        return {
            name: value
            for name, value in vars(cls).items()
            if name.isupper() and isinstance(value, str)
        }


class SharedStrings:
    """Named accessors over a resolver handed in by the caller."""

    def __init__(self, resolver: StringResolver):
        self.resolver = resolver

    def get(self, key: str) -> str:
        return self.resolver.get(key)

    def get_formatted(self, key: str, *args: Any) -> str:
        return self.resolver.get_formatted(key, *args)

    @property
    def app_name(self) -> str:
        return self.get(StringKeys.APP_NAME)

    @property
    def button_click_me(self) -> str:
        return self.get(StringKeys.BUTTON_CLICK_ME)

    @property
    def welcome_title(self) -> str:
        return self.get(StringKeys.WELCOME_TITLE)

    @property
    def welcome_description(self) -> str:
        return self.get(StringKeys.WELCOME_DESCRIPTION)

    @property
    def action_ok(self) -> str:
        return self.get(StringKeys.ACTION_OK)

    @property
    def action_cancel(self) -> str:
        return self.get(StringKeys.ACTION_CANCEL)

    @property
    def action_retry(self) -> str:
        return self.get(StringKeys.ACTION_RETRY)

    @property
    def error_network(self) -> str:
        return self.get(StringKeys.ERROR_NETWORK)

    @property
    def error_generic(self) -> str:
        return self.get(StringKeys.ERROR_GENERIC)

    @property
    def native_demo_title(self) -> str:
        return self.get(StringKeys.NATIVE_DEMO_TITLE)

    @property
    def native_demo_description(self) -> str:
        return self.get(StringKeys.NATIVE_DEMO_DESCRIPTION)


def demonstrate_string_access(resolver: StringResolver) -> Dict[str, str]:
    return {
        "App Name": resolver.get(StringKeys.APP_NAME),
        "Welcome Title": resolver.get(StringKeys.WELCOME_TITLE),
        "Button Text": resolver.get(StringKeys.BUTTON_CLICK_ME),
        "OK Action": resolver.get(StringKeys.ACTION_OK),
        "Cancel Action": resolver.get(StringKeys.ACTION_CANCEL),
        "Counter Example": resolver.get_formatted(StringKeys.COUNTER_LABEL, 42),
        "Language Info": resolver.get_formatted(
            StringKeys.CURRENT_LANGUAGE, resolver.current_locale()
        ),
        "RTL Status": resolver.get_formatted(
            StringKeys.IS_RTL, "Yes" if resolver.is_right_to_left() else "No"
        ),
    }
