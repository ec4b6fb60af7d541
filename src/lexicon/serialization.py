"""Table loading and token serialization.

Classification tables can be written as JSON or TOML. Both use the same
shape, a list of entries under ``classifications``::

    # table.toml
    [[classifications]]
    label = "RESERVED"
    pattern = "if|then|else"
    attribute = 1

    [[classifications]]
    label = "ID"
    pattern = "[A-Za-z]+"
    attribute = 100

Entry order is priority order. ``base_attribute`` is accepted as an alias of
``attribute``.

All token output is deterministic (sorted keys).

Thread Safety:
    All functions are pure, apart from reading the table file.

"""

import json
import tomllib
from collections.abc import Iterable, Mapping, Sequence
from pathlib import Path
from typing import Any

from lexicon.classification import Classification
from lexicon.errors import TableError
from lexicon.tokens import ErrorToken, Token

_LOADERS = {
    ".json": json.loads,
    ".toml": tomllib.loads,
}


def table_from_rows(rows: Iterable[Sequence[Any]]) -> tuple[Classification, ...]:
    """Build a table from ``(label, pattern, attribute)`` triples.

    Raises:
        TableError: If a row is not a triple of str, str, int
    """
    table = []
    for index, row in enumerate(rows):
        if len(row) != 3:
            raise TableError(f"entry {index}: expected (label, pattern, attribute), got {row!r}")
        label, pattern, attribute = row
        table.append(_make_classification(index, label, pattern, attribute))
    return tuple(table)


def table_from_dict(data: Mapping[str, Any]) -> tuple[Classification, ...]:
    """Build a table from a mapping with a ``classifications`` list.

    Raises:
        TableError: If the mapping does not have the expected shape
    """
    entries = data.get("classifications")
    if not isinstance(entries, list):
        raise TableError("expected a 'classifications' list")

    table = []
    for index, entry in enumerate(entries):
        if not isinstance(entry, Mapping):
            raise TableError(f"entry {index}: expected a mapping, got {type(entry).__name__}")
        attribute = entry.get("attribute", entry.get("base_attribute"))
        table.append(
            _make_classification(index, entry.get("label"), entry.get("pattern"), attribute)
        )
    return tuple(table)


def table_to_dict(table: Iterable[Classification]) -> dict[str, Any]:
    """Inverse of table_from_dict."""
    return {
        "classifications": [
            {"label": c.label, "pattern": c.pattern, "attribute": c.base_attribute}
            for c in table
        ]
    }


def load_table(path: str | Path) -> tuple[Classification, ...]:
    """Load a classification table from a ``.json`` or ``.toml`` file.

    Args:
        path: Table file path

    Returns:
        Classifications in file order

    Raises:
        TableError: On unknown suffix, unparsable content or bad shape
        OSError: If the file cannot be read
    """
    path = Path(path)
    loader = _LOADERS.get(path.suffix.lower())
    if loader is None:
        raise TableError(
            f"unsupported table format {path.suffix!r} (use .json or .toml)",
            source_file=str(path),
        )

    try:
        data = loader(path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, tomllib.TOMLDecodeError) as e:
        raise TableError(f"cannot parse table: {e}", source_file=str(path)) from e

    if not isinstance(data, Mapping):
        raise TableError("expected a mapping at top level", source_file=str(path))

    try:
        return table_from_dict(data)
    except TableError as e:
        raise TableError(e.message, pattern=e.pattern, source_file=str(path)) from e


def token_to_dict(token: Token) -> dict[str, Any]:
    """Convert a token to a JSON-compatible dict.

    Error tokens carry ``"error": true`` and their line number.
    """
    result: dict[str, Any] = {"lexeme": token.lexeme, "attribute": token.attribute}
    if isinstance(token, ErrorToken):
        result["error"] = True
        result["line_number"] = token.line_number
    return result


def to_json(tokens: Iterable[Token], *, indent: int | None = None) -> str:
    """Serialize tokens to a JSON array."""
    return json.dumps([token_to_dict(t) for t in tokens], indent=indent, sort_keys=True)


def _make_classification(index: int, label: Any, pattern: Any, attribute: Any) -> Classification:
    if not isinstance(label, str) or not label:
        raise TableError(f"entry {index}: label must be a non-empty string")
    if not isinstance(pattern, str):
        raise TableError(f"entry {index}: pattern must be a string")
    # bool is an int subclass; reject it explicitly
    if not isinstance(attribute, int) or isinstance(attribute, bool):
        raise TableError(f"entry {index}: attribute must be an integer", pattern=pattern)
    return Classification(label, pattern, attribute)


__all__ = [
    "load_table",
    "table_from_dict",
    "table_from_rows",
    "table_to_dict",
    "to_json",
    "token_to_dict",
]
