"""Parse raw tri-state property values.

Upstream encodes each leaf property as free text: ``"Yes"``, ``"No"``, or
either followed by a note (``"Yes, via plugin"``). Empty or missing values
mean unknown. Anything else is logged and treated as unknown.
"""

import logging
import re
from collections.abc import Mapping
from typing import Any

from cms_comparison.models.cms import BooleanCmsProperty

logger = logging.getLogger(__name__)

_VALID_RE = re.compile(r"^(Yes|No|null)")
_INFO_RE = re.compile(r"(Yes|No)[,\s]\s*(.*)")


def parse_value(raw: Mapping[str, Any]) -> BooleanCmsProperty:
    """Convert one raw leaf property into a BooleanCmsProperty.

    ``"null"`` parses as False, not unknown, matching the upstream data set.
    """
    name = raw.get("name")
    value: bool | None = None
    info: str | None = None

    raw_value = raw.get("value")
    if raw_value:
        text = raw_value if isinstance(raw_value, str) else str(raw_value)
        if _VALID_RE.match(text):
            value = text.startswith("Yes")
            match = _INFO_RE.fullmatch(text)
            if match:
                info = match.group(2)
        else:
            logger.warning("Invalid value for %s: %s", name, raw_value)

    return BooleanCmsProperty(
        name=name,
        description=raw.get("description"),
        value=value,
        info=info,
    )
