import re
from typing import Mapping, Optional


PLACEHOLDER_PATTERN = re.compile(r"{{([^}]+)}}")


def interpolate(template: str, values: Mapping[str, Optional[str]]) -> str:
    """Replace ``{{key}}`` markers with ``values[key]``.

    Missing keys and empty/None values render as an empty string.
    """
    return PLACEHOLDER_PATTERN.sub(lambda match: values.get(match.group(1)) or "", template)


def uppercase_first(text: str) -> str:
    return text[:1].upper() + text[1:]
