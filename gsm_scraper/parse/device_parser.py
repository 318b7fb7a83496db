"""Extract brand, model name and model code from a GSMArena device page.

The model code comes from an ordered cascade of strategies, strongest
signal first:

1. the structured ``td[data-spec="models"]`` spec cell
2. the "Also known as" spec row
3. a code-shaped token anywhere in the page text
4. the numeric device id in the page URL (``GSM-<id>``)

Each strategy returns the code or None. Empty values and the site's "-"
placeholder count as None. The first strategy with a value wins.
"""
import logging
import re
from dataclasses import dataclass
from typing import Callable, Optional

from selectolax.parser import HTMLParser, Node

from gsm_scraper.parse.links import DEVICE_HREF_PATTERN
from gsm_scraper.parse.models import DeviceRecord

logger = logging.getLogger(__name__)

PLACEHOLDER = "-"
URL_CODE_PREFIX = "GSM-"

TITLE_SUFFIXES = (
    re.compile(r" - Full phone specifications.*$", re.IGNORECASE | re.DOTALL),
    re.compile(r" - GSMArena\.com.*$", re.IGNORECASE | re.DOTALL),
)

# SM-A565, XT-2401 / A2342, A3102B
MODEL_CODE_PATTERN = re.compile(r"\b([A-Z]{2,3}-[A-Z0-9]{3,6}|[A-Z]\d{4}[A-Z]?)\b")

ALSO_KNOWN_AS = "Also known as"


def _clean(value: str | None) -> Optional[str]:
    """Strip a cell value; empty or placeholder becomes None."""
    if value is None:
        return None
    value = value.strip()
    if not value or value == PLACEHOLDER:
        return None
    return value


def parse_title(title_text: str) -> tuple[str, str]:
    """Split a page title into (brand, model_name)."""
    text = title_text.strip()
    for suffix in TITLE_SUFFIXES:
        text = suffix.sub("", text)
    text = text.strip()

    parts = re.split(r"\s+", text, maxsplit=1)
    if len(parts) == 2:
        return parts[0], parts[1]
    return "", text


def extract_title(parser: HTMLParser) -> tuple[str, str]:
    """Read brand and model name from the <title> element."""
    node = parser.css_first("title")
    if node is None:
        return "", ""
    return parse_title(node.text())


def code_from_spec_models(parser: HTMLParser, url: str) -> Optional[str]:
    """First code listed in the structured models spec cell."""
    node = parser.css_first('td[data-spec="models"]')
    if node is None:
        return None
    text = _clean(node.text())
    if text is None:
        return None
    return _clean(text.split(",")[0])


def _next_cell(node: Node) -> Optional[Node]:
    sibling = node.next
    while sibling is not None and sibling.tag != "td":
        sibling = sibling.next
    return sibling


def code_from_also_known_as(parser: HTMLParser, url: str) -> Optional[str]:
    """First value cell following an "Also known as" label cell."""
    for cell in parser.css("td"):
        if ALSO_KNOWN_AS not in cell.text(deep=False):
            continue
        value_cell = _next_cell(cell)
        if value_cell is None:
            continue
        return _clean(value_cell.text())
    return None


def code_from_text_pattern(parser: HTMLParser, url: str) -> Optional[str]:
    """First code-shaped token in the page text."""
    root = parser.root
    if root is None:
        return None
    match = MODEL_CODE_PATTERN.search(root.text(separator=" "))
    return match.group(1) if match else None


def code_from_url(parser: HTMLParser, url: str) -> Optional[str]:
    """Synthesize a code from the numeric device id in the page URL."""
    match = DEVICE_HREF_PATTERN.search(url)
    if not match:
        return None
    return f"{URL_CODE_PREFIX}{match.group(1)}"


@dataclass(frozen=True)
class CodeStrategy:
    """One step of the model code cascade."""

    name: str
    extract: Callable[[HTMLParser, str], Optional[str]]
    # Winner is also copied to misc_model_code
    structured: bool = False


CODE_STRATEGIES: tuple[CodeStrategy, ...] = (
    CodeStrategy("spec_models", code_from_spec_models, structured=True),
    CodeStrategy("also_known_as", code_from_also_known_as),
    CodeStrategy("text_pattern", code_from_text_pattern),
    CodeStrategy("url_id", code_from_url),
)


def find_model_code(
    parser: HTMLParser,
    url: str,
    strategies: tuple[CodeStrategy, ...] = CODE_STRATEGIES,
) -> tuple[Optional[str], Optional[CodeStrategy]]:
    """Run the cascade. Returns (code, winning strategy) or (None, None)."""
    for strategy in strategies:
        code = _clean(strategy.extract(parser, url))
        if code is not None:
            return code, strategy
    return None, None


def extract_device_info(html_content: str, url: str) -> DeviceRecord:
    """Build a DeviceRecord from a device detail page."""
    parser = HTMLParser(html_content or "")
    brand, model_name = extract_title(parser)

    code, strategy = find_model_code(parser, url)
    if strategy is None:
        logger.debug(f"No model code found for {url}")
        return DeviceRecord(source_url=url, brand=brand, model_name=model_name)

    if strategy.structured:
        logger.info(f"  - Found model in MISC section: {code}")
    else:
        logger.debug(f"Model code {code} from {strategy.name} for {url}")

    return DeviceRecord(
        source_url=url,
        brand=brand,
        model_name=model_name,
        model_code=code,
        misc_model_code=code if strategy.structured else "",
        code_source=strategy.name,
    )
