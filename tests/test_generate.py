import json

import pytest

from errata.core.canonical import ErrorAction, ErrorEntry, parse_error_config
from errata.core.errors import UnknownLocaleError
from errata.core.generate import build_locale_index, render_config_json, render_locale_bundle


def test_render_config_json_omits_absent_optionals() -> None:
    config = {
        "ERR_A": ErrorEntry(type="TOAST", message="안녕하세요"),
        "ERR_B": ErrorEntry(type="PAGE", message="m", action=ErrorAction(label="Back", type="BACK")),
    }

    text = render_config_json(config)

    assert text.endswith("\n")
    assert "안녕하세요" in text
    assert json.loads(text) == {
        "ERR_A": {"type": "TOAST", "message": "안녕하세요"},
        "ERR_B": {"type": "PAGE", "message": "m", "action": {"label": "Back", "type": "BACK"}},
    }


def test_render_config_json_reloads_to_equal_config() -> None:
    config = {
        "ERR": ErrorEntry(
            type="MODAL",
            message="m",
            title="t",
            image="https://cdn.example.com/a.png",
            severity="ERROR",
            action=ErrorAction(label="Go", type="REDIRECT", target="/"),
        )
    }

    assert parse_error_config(json.loads(render_config_json(config))) == config


def test_render_locale_bundle_writes_one_file_per_locale_and_index() -> None:
    localized = {
        "ko": {"A": ErrorEntry(type="TOAST", message="ko")},
        "en": {"A": ErrorEntry(type="TOAST", message="en")},
    }

    files = render_locale_bundle(localized, "en")

    assert sorted(files) == ["en.json", "index.json", "ko.json"]
    assert json.loads(files["index.json"]) == {"locales": ["ko", "en"], "defaultLocale": "en"}
    assert json.loads(files["ko.json"]) == {"A": {"type": "TOAST", "message": "ko"}}


def test_build_locale_index_rejects_unknown_default() -> None:
    with pytest.raises(UnknownLocaleError, match='Unknown locale: "ja". Available locales: ko, en'):
        build_locale_index(["ko", "en"], "ja")


@pytest.mark.parametrize("locale", ["index", "../outside", "en/US", "", ".hidden", "pt.BR"])
def test_build_locale_index_rejects_locale_codes_unsafe_as_file_names(locale: str) -> None:
    with pytest.raises(ValueError, match="Invalid locale code"):
        build_locale_index([locale, "en"], "en")


def test_build_locale_index_accepts_region_and_script_codes() -> None:
    assert build_locale_index(["pt-BR", "zh_Hant"], "pt-BR")["locales"] == ["pt-BR", "zh_Hant"]
