"""Replace ${NAME} placeholders in template text.

NAME is uppercase letters, digits and underscores. Anything else
($NAME, ${name}, ${A-B}, unbalanced braces) is left as is. Resolved
values are inserted literally and never rescanned.
"""

from __future__ import annotations

import re
from collections.abc import Mapping

from .resolver import resolve_var

PLACEHOLDER = re.compile(r"\$\{([A-Z0-9_]+)\}")


def substitute(text: str, api: str, config: Mapping[str, str | None]) -> str:
    """Return text with every placeholder resolved.

    The first ResolutionError propagates; no partial text is returned.
    """
    return PLACEHOLDER.sub(
        lambda m: str(resolve_var(m.group(1), api, config)),
        text,
    )
