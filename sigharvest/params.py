"""Helpers that prepare Solidity source and parameter lists for signature extraction."""

from __future__ import annotations

import re
from typing import Iterable, Optional

# Elementary Solidity types, optionally followed by any number of array brackets.
_PARAMETER_TYPES = re.compile(
    r"""
    (
        (
            address
            | bool
            | string
            | bytes(\d{0,3})?
            | int(\d{0,3})?
            | uint(\d{0,3})?
            | fixed
            | ufixed
        )
        (\[\d*\])*
    )
    """,
    re.VERBOSE,
)

# Line comments, block comments, and otherwise bare newlines. Removing all of them
# turns multi-line declarations into single-line ones.
_COMMENTS_AND_NEWLINES = re.compile(
    r"""
    (
        //.*$
        | /\*(.|\n)*?\*/
        | \n
    )
    """,
    re.VERBOSE | re.MULTILINE,
)


def parameter_types_are_valid(params: Iterable[str]) -> bool:
    """Return False if any non-empty parameter type is not an elementary Solidity type.

    User defined value types (for example interface or struct names) make a
    signature invalid. Empty entries are ignored.
    """
    return all(not param or _PARAMETER_TYPES.search(param) for param in params)


def split_parameter_list(raw_parameter_list: str) -> Optional[list[str]]:
    """Reduce a parameter list such as ``uint foo, uint bar`` to its types.

    Returns None when the list is empty or only whitespace. Unnamed parameters
    are kept as they are.
    """
    if not raw_parameter_list.strip():
        return None

    types = []
    for param in raw_parameter_list.split(","):
        trimmed = param.strip()
        param_type, _, _ = trimmed.partition(" ")
        types.append(param_type)
    return types


def strip_comments_and_newlines(content: str) -> str:
    """Replace every comment and every newline in ``content`` with a single space."""
    return _COMMENTS_AND_NEWLINES.sub(" ", content)