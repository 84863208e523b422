"""Tests for error message formatting helpers."""

from nsloader.settings import SettingsError
from nsloader.utils.error_format import escape_markup
from nsloader.utils.error_format import format_error_message


def test_settings_error_message(tmp_path):
    error = SettingsError(tmp_path / "nsloader.yaml", "invalid YAML")
    assert format_error_message(error) == f"{tmp_path / 'nsloader.yaml'}: invalid YAML"


def test_empty_message_falls_back_to_type_name():
    assert format_error_message(PermissionError()) == "PermissionError: (no additional details)"


def test_escape_markup_brackets():
    assert escape_markup("[red]x") == "\\[red]x"
