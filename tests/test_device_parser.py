"""Tests for device page field extraction."""
import pytest
from gsm_scraper.parse.device_parser import (
    CODE_STRATEGIES,
    extract_device_info,
    parse_title,
)

URL = "https://m.gsmarena.com/samsung_galaxy_s21-10625.php"
TITLE = "<title>Samsung Galaxy S21 - Full phone specifications - GSMArena.com</title>"


def _page(body: str, title: str = TITLE) -> str:
    return f"<html><head>{title}</head><body>{body}</body></html>"


def test_parse_title_strips_suffixes():
    """Test brand and model from a full GSMArena title."""
    brand, model = parse_title("Samsung Galaxy S21 - Full phone specifications - GSMArena.com")
    assert brand == "Samsung"
    assert model == "Galaxy S21"


def test_parse_title_case_insensitive_suffix():
    """Test suffix removal ignores case."""
    assert parse_title("Apple iPhone 16 Pro - GSMARENA.COM mobile") == ("Apple", "iPhone 16 Pro")


def test_parse_title_single_word():
    """Test title without whitespace goes to model name."""
    assert parse_title("Nothing - GSMArena.com") == ("", "Nothing")


def test_parse_title_whitespace_run():
    """Test split on the first run of whitespace."""
    assert parse_title("  Google   Pixel 9 Pro XL ") == ("Google", "Pixel 9 Pro XL")


def test_extract_device_info_spec_models():
    """Test structured models cell wins and fills misc model."""
    html = _page("""
    <table>
        <tr><td class="ttl">Also known as</td><td class="nfo">Galaxy S21 5G</td></tr>
        <tr><td class="ttl">Models</td><td class="nfo" data-spec="models">SM-G991B, SM-G991U</td></tr>
    </table>
    """)
    record = extract_device_info(html, URL)

    assert record.brand == "Samsung"
    assert record.model_name == "Galaxy S21"
    assert record.model_code == "SM-G991B"
    assert record.misc_model_code == "SM-G991B"
    assert record.code_source == "spec_models"


def test_extract_device_info_also_known_as():
    """Test "Also known as" row when there is no models cell."""
    html = _page("""
    <table>
        <tr><td class="ttl">Also known as</td><td class="nfo">Galaxy S21 5G</td></tr>
    </table>
    """)
    record = extract_device_info(html, URL)

    assert record.model_code == "Galaxy S21 5G"
    assert record.misc_model_code == ""
    assert record.code_source == "also_known_as"


def test_extract_device_info_placeholder_falls_through():
    """Test "-" placeholders are treated as empty."""
    html = _page("""
    <table>
        <tr><td class="ttl">Also known as</td><td class="nfo">-</td></tr>
        <tr><td class="ttl">Models</td><td class="nfo" data-spec="models">-</td></tr>
    </table>
    <p>Variant SM-G991N for Korea</p>
    """)
    record = extract_device_info(html, URL)

    assert record.model_code == "SM-G991N"
    assert record.misc_model_code == ""
    assert record.code_source == "text_pattern"


@pytest.mark.parametrize(
    "text,expected",
    [
        ("Model numbers: A2342 and A2343", "A2342"),
        ("Model A3102B sold in Japan", "A3102B"),
        ("Codes XT-2401 and XT-2402", "XT-2401"),
    ],
)
def test_extract_device_info_text_pattern(text, expected):
    """Test code-shaped tokens in free text."""
    record = extract_device_info(_page(f"<p>{text}</p>"), URL)

    assert record.model_code == expected
    assert record.code_source == "text_pattern"


def test_extract_device_info_url_fallback():
    """Test the URL id is used when the page has nothing."""
    html = _page("<p>Display 6.2 inches, 120Hz</p>")
    record = extract_device_info(html, URL)

    assert record.model_code == "GSM-10625"
    assert record.misc_model_code == ""
    assert record.code_source == "url_id"


def test_extract_device_info_nothing_found():
    """Test an unmatched URL leaves the code empty."""
    html = _page("<p>Display 6.2 inches</p>")
    record = extract_device_info(html, "https://m.gsmarena.com/device.php")

    assert record.model_code == ""
    assert record.misc_model_code == ""
    assert record.code_source is None


def test_extract_device_info_no_title():
    """Test pages without a title keep empty brand and model."""
    record = extract_device_info("<html><body><p>nothing</p></body></html>", URL)

    assert record.brand == ""
    assert record.model_name == ""
    assert record.source_url == URL


def test_extract_device_info_empty_html():
    """Test empty content still yields a record."""
    record = extract_device_info("", URL)

    assert record.source_url == URL
    assert record.model_code == "GSM-10625"


def test_cascade_order():
    """Test strongest signal first, URL inference last."""
    assert [s.name for s in CODE_STRATEGIES] == [
        "spec_models",
        "also_known_as",
        "text_pattern",
        "url_id",
    ]
    assert [s.structured for s in CODE_STRATEGIES] == [True, False, False, False]


def test_extract_device_info_also_known_as_skips_label_without_value():
    """Test a label row with no value cell does not stop the search."""
    html = _page("""
    <table>
        <tr><td class="ttl">Also known as</td></tr>
        <tr><td class="ttl">Also known as</td><td class="nfo">Foo X</td></tr>
    </table>
    """)
    record = extract_device_info(html, URL)

    assert record.model_code == "Foo X"
    assert record.code_source == "also_known_as"
