import logging
import re
from typing import Dict, List, Optional, Tuple

from ..core.http import Fetcher, UrllibFetcher


logger = logging.getLogger(__name__)

HEROICONS_OUTLINE_URL = "https://raw.githubusercontent.com/tailwindlabs/heroicons/master/optimized/24/outline/{name}.svg"

# Order matters: missing attributes are appended in this order.
PATH_ATTRIBUTE_DEFAULTS: List[Tuple[str, str]] = [
    ("stroke", "url(#paint1_linear_0_1)"),
    ("stroke-linejoin", "round"),
    ("stroke-linecap", "round"),
    ("stroke-width", "1"),
    ("transform", "matrix(25 0 0 25 25 0) translate(22, 0)"),
]

ATTRIBUTE_PATTERN = re.compile(r"""([^\s=<>/"']+)\s*=\s*("[^"]*"|'[^']*'|[^\s"'>/]+)""")


class IconFetchError(Exception):
    def __init__(self, icon_name: str, cause: BaseException):
        self.icon_name = icon_name
        self.cause = cause
        super().__init__(f"Failed to fetch icon '{icon_name}': {cause}")


class MalformedPathError(ValueError):
    """A ``<path`` line with no ``/>`` terminator."""

    def __init__(self, line: str, icon_name: Optional[str] = None):
        self.line = line
        self.icon_name = icon_name
        super().__init__(f"Unterminated <path> element: {line.strip()!r}")


def parse_attributes(body: str) -> Dict[str, str]:
    """Map attribute names in a ``<path ...`` tag body to their unquoted values."""
    tag_start = body.find("<path")
    if tag_start != -1:
        body = body[tag_start + len("<path"):]
    attributes: Dict[str, str] = {}
    for match in ATTRIBUTE_PATTERN.finditer(body):
        name, raw_value = match.group(1), match.group(2)
        if raw_value[:1] in ("'", '"'):
            raw_value = raw_value[1:-1]
        attributes.setdefault(name, raw_value)
    return attributes


def normalize_path(line: str) -> str:
    """Append any missing presentation attributes to a single ``<path .../>`` line.

    The original text before ``/>`` is kept verbatim, so indentation and
    attribute order survive; defaults are added after it followed by `` />``.
    """
    body, terminator, _ = line.partition("/>")
    if not terminator:
        raise MalformedPathError(line)

    attributes = parse_attributes(body)
    insertions = [f'{name}="{default}"' for name, default in PATH_ATTRIBUTE_DEFAULTS if name not in attributes]

    return body + " " + " ".join(insertions) + " />"


def normalize_icon_paths(icon_svg: str) -> str:
    paths = [line for line in icon_svg.split("\n") if "<path" in line]
    return "\n".join(normalize_path(path) for path in paths)


async def get_icon(name: str, fetcher: Optional[Fetcher] = None) -> str:
    """Fetch a Heroicons outline icon and return its normalized ``<path>`` elements.

    - name: icon name, substituted verbatim into the upstream URL
    - fetcher: HTTP GET capability; defaults to UrllibFetcher

    Raises IconFetchError on any fetch failure (single attempt, no retry) and
    MalformedPathError if the upstream SVG has an unterminated path line.
    An SVG without path elements yields an empty string.
    """
    icon_url = HEROICONS_OUTLINE_URL.format(name=name)
    if fetcher is None:
        fetcher = UrllibFetcher()

    try:
        icon_svg = await fetcher.get(icon_url)
    except Exception as e:
        logger.error(f"Error fetching {name} icon: {str(e)}")
        raise IconFetchError(name, e) from e

    try:
        return normalize_icon_paths(icon_svg)
    except MalformedPathError as e:
        e.icon_name = name
        logger.error(f"Malformed SVG for {name} icon: {str(e)}")
        raise
