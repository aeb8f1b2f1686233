import logging
from pathlib import Path
from unittest.mock import patch

from powerful_connection.store.ssid_list import load_ssid_list, parse_ssid_list


def test_parse_ssid_list_ignores_empty_lines_and_line_endings():
    parsed = parse_ssid_list("HomeNet\n\nOfficeNet\r\n")
    assert parsed == frozenset({"HomeNet", "OfficeNet"})


def test_parse_ssid_list_keeps_surrounding_spaces():
    parsed = parse_ssid_list("Cafe \n HomeNet\n")
    assert parsed == frozenset({"Cafe ", " HomeNet"})
    assert "Cafe" not in parsed
    assert "HomeNet" not in parsed


def test_parse_ssid_list_keeps_case_and_inner_spaces():
    parsed = parse_ssid_list("Coffee Shop\ncoffee shop\n")
    assert "Coffee Shop" in parsed
    assert "coffee shop" in parsed
    assert "COFFEE SHOP" not in parsed


def test_load_ssid_list_missing_file(tmp_path):
    assert load_ssid_list(tmp_path / "accept-list.txt") is None


def test_load_ssid_list_empty_file_is_present_but_empty(tmp_path):
    path = tmp_path / "accept-list.txt"
    path.write_text("", encoding="utf-8")
    assert load_ssid_list(path) == frozenset()


def test_load_ssid_list_reads_entries(tmp_path):
    path = tmp_path / "reject-list.txt"
    path.write_text("Coffee\nAirport Free WiFi\n", encoding="utf-8")
    assert load_ssid_list(path) == frozenset({"Coffee", "Airport Free WiFi"})


def test_load_ssid_list_unreadable_file_is_treated_as_absent(tmp_path, caplog):
    path = tmp_path / "accept-list.txt"
    path.write_text("HomeNet\n", encoding="utf-8")

    with patch.object(Path, "read_text", side_effect=PermissionError("denied")):
        with caplog.at_level(logging.WARNING, logger="powerful_connection.store.ssid_list"):
            result = load_ssid_list(path)

    assert result is None
    assert "unreadable" in caplog.text


def test_load_ssid_list_tolerates_invalid_utf8(tmp_path):
    path = tmp_path / "accept-list.txt"
    path.write_bytes(b"HomeNet\n\xff\xfeBroken\n")

    result = load_ssid_list(path)
    assert result is not None
    assert "HomeNet" in result
