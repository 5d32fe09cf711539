"""JSON text adapter: turns expected/actual text into JSON values.

Objects and arrays are parsed with the standard ``json`` module.  Any other
text is a literal token (quoted string, number, ``true``, ``false`` or
``null``) and is kept verbatim in a ``JsonLiteral`` so the top-level API can
compare literal tokens by their text.  The non-standard constants
``NaN``, ``Infinity`` and ``-Infinity`` that ``json`` accepts by default are
rejected.
"""

from __future__ import annotations

import json
import re
from dataclasses import dataclass
from typing import Any

from json_equivalence.exceptions import JSONParseError

__all__ = ["JsonLiteral", "parse_json"]

# JSON number grammar: no octal, hex, NaN or Infinity
_NUMBER_RE = re.compile(r"-?(?:0|[1-9]\d*)(?:\.\d+)?(?:[eE][+-]?\d+)?")
_BARE_LITERALS = frozenset({"true", "false", "null"})


@dataclass(frozen=True, slots=True)
class JsonLiteral:
    """A top-level literal token, compared by its text.

    Attributes:
        text: The stripped token text, e.g. ``'"abc"'``, ``'12.5'`` or ``'null'``.
    """

    text: str

    def value(self) -> Any:
        """Decode the token into the matching Python value."""
        return json.loads(self.text)


def _loads(stripped: str, text: str) -> Any:
    def reject_constant(token: str) -> Any:
        msg = f"Unparsable JSON string: {token} is not a JSON value"
        raise JSONParseError(msg, text)

    try:
        return json.loads(stripped, parse_constant=reject_constant)
    except json.JSONDecodeError as ex:
        msg = f"Unparsable JSON string: {ex}"
        raise JSONParseError(msg, text) from ex


def parse_json(text: str) -> Any:
    """Parse JSON text into a value tree or a ``JsonLiteral``.

    Args:
        text: Raw JSON text.

    Returns:
        A ``dict`` when the text starts with ``{``, a ``list`` when it starts
        with ``[``, a ``JsonLiteral`` for a valid literal token.

    Raises:
        JSONParseError: If the text is malformed.
    """
    stripped = text.strip()
    if stripped.startswith(("{", "[")):
        return _loads(stripped, text)

    if stripped in _BARE_LITERALS or _NUMBER_RE.fullmatch(stripped):
        return JsonLiteral(stripped)
    if stripped.startswith('"') and isinstance(_loads(stripped, text), str):
        return JsonLiteral(stripped)

    msg = f"Unparsable JSON string: {text}"
    raise JSONParseError(msg, text)
