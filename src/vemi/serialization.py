"""Token serialization: JSON round-trip for vemi token streams.

Converts tokens to/from JSON-compatible dicts shaped like the token
contract: a ``type`` tag, a ``position`` and the variant's fields. Useful for:
- Handing token streams to parsers written outside Python
- Snapshot tests and fixtures
- Debugging and inspection

All output is deterministic (sorted keys) for stable diffs.

Example:
    from vemi import tokenize_blocks
    from vemi.serialization import to_json, from_json

    tokens = tokenize_blocks("# Hello")
    json_str = to_json(tokens)
    assert from_json(json_str) == tokens

Thread Safety:
    All functions are pure and safe to call from any thread.

"""

import json
from collections.abc import Iterable
from dataclasses import fields
from typing import Any

from vemi.errors import SerializationError
from vemi.location import SourcePosition
from vemi.tokens import BLOCK_TOKEN_CLASSES, INLINE_TOKEN_CLASSES, BaseToken, Token

# Registry of type tags to classes for deserialization
_TOKEN_TYPES: dict[str, type[BaseToken]] = {
    str(cls.type): cls for cls in (*BLOCK_TOKEN_CLASSES, *INLINE_TOKEN_CLASSES)
}

# Python attribute name -> wire name, where they differ
_WIRE_NAMES = {"line_in_block": "lineInBlock"}
_ATTR_NAMES = {wire: attr for attr, wire in _WIRE_NAMES.items()}


def to_dict(token: Token) -> dict[str, Any]:
    """Convert a token to a JSON-compatible dict.

    Args:
        token: Any block or inline token.

    Returns:
        Dict with ``type``, ``position`` and the token's own fields.

    """
    result: dict[str, Any] = {"type": str(token.type)}

    for f in fields(token):
        value = getattr(token, f.name)
        if isinstance(value, SourcePosition):
            value = {"line": value.line, "column": value.column, "offset": value.offset}
        result[_WIRE_NAMES.get(f.name, f.name)] = value

    return result


def from_dict(data: dict[str, Any], *, index: int | None = None) -> Token:
    """Reconstruct a typed token from a dict.

    Args:
        data: Dict with ``type`` and token fields (as produced by to_dict).
        index: Position of data in an enclosing list, for error messages.

    Returns:
        Typed token (frozen dataclass).

    Raises:
        SerializationError: If ``type`` is missing, not a string or
            unknown, or the fields do not fit the token class.

    """
    type_name = data.get("type")
    if type_name is None:
        raise SerializationError("Missing 'type' field in serialized token", index)
    if not isinstance(type_name, str):
        raise SerializationError(
            f"Token type must be a string, got {type(type_name).__name__}", index
        )

    token_cls = _TOKEN_TYPES.get(type_name)
    if token_cls is None:
        raise SerializationError(f"Unknown token type: {type_name!r}", index)

    kwargs: dict[str, Any] = {}
    for key, raw in data.items():
        if key == "type":
            continue
        name = _ATTR_NAMES.get(key, key)
        if name == "position":
            raw = _position_from_dict(raw, index)
        kwargs[name] = raw

    try:
        return token_cls(**kwargs)  # type: ignore[return-value]
    except TypeError as e:
        raise SerializationError(f"Invalid fields for {type_name!r}: {e}", index) from e


def _position_from_dict(value: Any, index: int | None) -> SourcePosition:
    if not isinstance(value, dict) or "line" not in value or "column" not in value:
        raise SerializationError("Position must have 'line' and 'column'", index)
    return SourcePosition(
        line=value["line"],
        column=value["column"],
        offset=value.get("offset", 0),
    )


def to_json(tokens: Iterable[Token], *, indent: int | None = None) -> str:
    """Serialize a token sequence to a JSON array string.

    Output is deterministic (sorted keys).

    Args:
        tokens: Tokens to serialize, in order.
        indent: JSON indentation (None for compact).

    Returns:
        JSON string.

    """
    return json.dumps(
        [to_dict(token) for token in tokens],
        sort_keys=True,
        indent=indent,
        ensure_ascii=False,
    )


def from_json(json_str: str) -> list[Token]:
    """Deserialize a JSON array string to a token list.

    Args:
        json_str: JSON string (as produced by to_json).

    Returns:
        List of typed tokens.

    Raises:
        SerializationError: If the text is not valid JSON, or not an
            array of token objects.

    """
    try:
        data = json.loads(json_str)
    except json.JSONDecodeError as e:
        raise SerializationError(f"Invalid JSON: {e}") from e
    if not isinstance(data, list):
        raise SerializationError("Expected a JSON array of tokens")

    tokens: list[Token] = []
    for i, item in enumerate(data):
        if not isinstance(item, dict):
            raise SerializationError("Expected a JSON object", i)
        tokens.append(from_dict(item, index=i))
    return tokens


__all__ = ["from_dict", "from_json", "to_dict", "to_json"]
