"""
Unit tests for the configuration boundary.
"""
import pytest

from agreedisclaimer.exceptions import ConfigValueError
from agreedisclaimer.settings import (
    AppConfig,
    ConfigKeys,
    check_value,
    parse_bool,
    parse_size_mb,
    read_default_lang,
)


class TestParseBool:
    @pytest.mark.parametrize("raw, expected", [("true", True), ("false", False), (" TRUE ", True), ("False", False)])
    def test_valid_flags(self, raw, expected):
        assert parse_bool("agreedisclaimerTxtFile", raw) is expected

    @pytest.mark.parametrize("raw", ["yes", "1", "", "on"])
    def test_invalid_flag_raises(self, raw):
        """Should refuse anything but true/false"""
        with pytest.raises(ConfigValueError) as exc_info:
            parse_bool("agreedisclaimerTxtFile", raw)

        assert exc_info.value.key == "agreedisclaimerTxtFile"
        assert exc_info.value.value == raw


class TestParseSizeMb:
    @pytest.mark.parametrize("raw, expected", [("1", 1.0), ("2.5", 2.5), (" 3 ", 3.0)])
    def test_valid_sizes(self, raw, expected):
        assert parse_size_mb("size", raw) == expected

    @pytest.mark.parametrize("raw", ["0", "-1", "abc", "", "nan", "inf"])
    def test_invalid_sizes_raise(self, raw):
        with pytest.raises(ConfigValueError):
            parse_size_mb("size", raw)


class TestAppConfig:
    """Tests for AppConfig.load"""

    def test_defaults_when_store_is_empty(self, make_store):
        """Should fall back to the documented defaults"""
        config = AppConfig.load(make_store())

        assert config == AppConfig(
            text_enabled=True, pdf_enabled=True, default_lang="en", max_text_size_mb=1.0
        )
        assert config.max_text_bytes == 1_048_576

    def test_stored_values(self, make_store):
        store = make_store(
            {
                "agreedisclaimerTxtFile": "false",
                "agreedisclaimerPdfFile": "true",
                "agreedisclaimerDefaultLang": "de",
                "agreedisclaimerMaxTxtFileSize": "2",
            }
        )

        config = AppConfig.load(store)

        assert config.text_enabled is False
        assert config.pdf_enabled is True
        assert config.default_lang == "de"
        assert config.max_text_bytes == 2 * 1_048_576

    def test_malformed_flag_raises(self, make_store):
        store = make_store({"agreedisclaimerPdfFile": "maybe"})

        with pytest.raises(ConfigValueError):
            AppConfig.load(store)

    def test_empty_default_lang_is_absent(self, make_store):
        store = make_store({"agreedisclaimerDefaultLang": "  "})

        assert read_default_lang(store) == "en"

    def test_keys_keep_deployed_names(self):
        keys = ConfigKeys()

        assert keys.text_file == "agreedisclaimerTxtFile"
        assert keys.pdf_file == "agreedisclaimerPdfFile"
        assert keys.default_lang == "agreedisclaimerDefaultLang"
        assert keys.max_text_size == "agreedisclaimerMaxTxtFileSize"


class TestCheckValue:
    """Tests for check_value, run before a value is stored"""

    def test_accepts_valid_values(self):
        check_value("agreedisclaimerTxtFile", "false")
        check_value("agreedisclaimerMaxTxtFileSize", "0.5")
        check_value("agreedisclaimerDefaultLang", "de_DE")

    @pytest.mark.parametrize(
        "key, raw",
        [
            ("agreedisclaimerTxtFile", "yes"),
            ("agreedisclaimerPdfFile", "1"),
            ("agreedisclaimerMaxTxtFileSize", "0"),
        ],
    )
    def test_rejects_values_the_next_read_would_refuse(self, key, raw):
        with pytest.raises(ConfigValueError):
            check_value(key, raw)

    def test_unknown_keys_pass_through(self):
        check_value("somethingElse", "anything")
