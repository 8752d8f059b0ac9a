from botapp.i18n import (
    Language,
    Translator,
    get_user_language,
    get_user_translator,
    resolve_language,
    set_user_language,
    translate,
)
from botapp.i18n.strings import STRINGS
from tests.helpers import DummyContext, DummyUpdate


def test_languages_share_the_same_keys():
    assert set(STRINGS["tr"]) == set(STRINGS["en"])


def test_translate_formats_params_and_flags_unknown_keys():
    assert translate("booking.hours_option", language="en", hours=2) == "2 h"
    assert translate("booking.hours_option", language="tr", hours=2) == "2 saat"
    assert Translator("en").t("no.such.key") == "[no.such.key]"
    # A missing placeholder leaves the template untouched
    assert Translator("en").t("booking.hours_option") == "{hours} h"


def test_resolve_language_uses_prefix_and_defaults_to_turkish():
    assert resolve_language("en-GB") is Language.ENGLISH
    assert resolve_language("de") is Language.TURKISH
    assert resolve_language(None) is Language.TURKISH


def test_user_choice_overrides_client_language():
    context = DummyContext()
    update = DummyUpdate("menu_profile")

    assert get_user_translator(update, context).get_language() == "en"
    assert set_user_language(context, "tr") == "tr"
    assert get_user_translator(update, context).get_language() == "tr"
    assert get_user_language(None, "en") == "en"
