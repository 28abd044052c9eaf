"""Extract function, event and error signatures from Solidity sources and JSON ABIs."""

from __future__ import annotations

import json
import re
from typing import Any

from sigharvest.model import SignatureKind, SignatureWithMetadata
from sigharvest.params import (
    parameter_types_are_valid,
    split_parameter_list,
    strip_comments_and_newlines,
)

# Matches single-line declarations such as `function foo(uint256 a) external {`.
# The trailing group is optional: it skips ahead to a visibility keyword, or to a
# semicolon or opening brace when no visibility keyword is present.
_SIGNATURE = re.compile(
    r"""
    (?P<kind>function|event|error)
    \s+
    (?P<name>[a-zA-Z_][a-zA-Z_0-9]*)
    \s*
    \(
        (?P<params>.*?)
    \)
    (
        (.*?)?
        (
            (?P<visibility>external|public|internal|private)
            | ;
            | \{
        )
    )?
    """,
    re.VERBOSE,
)

_ABI_KINDS = frozenset({SignatureKind.FUNCTION, SignatureKind.EVENT, SignatureKind.ERROR})


class AbiParseError(ValueError):
    """Raised when ABI content is not a well-formed list of ABI entries."""


def _abi_kind(entry: dict[str, Any]) -> SignatureKind:
    if "type" not in entry:
        raise AbiParseError("ABI entry is missing field 'type'")
    value = entry["type"]
    if not isinstance(value, str):
        raise AbiParseError(f"ABI entry field 'type' must be a string, got {value!r}")
    try:
        return SignatureKind(value)
    except ValueError:
        raise AbiParseError(f"unknown ABI entry type: {value!r}") from None


def _abi_name(entry: dict[str, Any]) -> str | None:
    name = entry.get("name")
    if name is not None and not isinstance(name, str):
        raise AbiParseError(f"ABI entry field 'name' must be a string, got {name!r}")
    return name


def _abi_input_types(entry: dict[str, Any]) -> list[str]:
    inputs = entry.get("inputs")
    if inputs is None:
        return []
    if not isinstance(inputs, list):
        raise AbiParseError("ABI entry field 'inputs' must be a list")
    types = []
    for parameter in inputs:
        if not isinstance(parameter, dict) or "type" not in parameter:
            raise AbiParseError("ABI parameter is missing field 'type'")
        param_type = parameter["type"]
        if not isinstance(param_type, str):
            raise AbiParseError(f"ABI parameter field 'type' must be a string, got {param_type!r}")
        types.append(param_type)
    return types


def from_abi(content: str) -> list[SignatureWithMetadata]:
    """Return the function, event and error signatures declared in a JSON ABI.

    Entries of other kinds and entries without a name are skipped. Raises
    AbiParseError if the content is not a JSON list of ABI entries.
    """
    try:
        entries = json.loads(content)
    except json.JSONDecodeError as exc:
        raise AbiParseError(f"invalid JSON: {exc}") from exc
    if not isinstance(entries, list):
        raise AbiParseError("ABI content must be a JSON list")

    parsed = []
    for entry in entries:
        if not isinstance(entry, dict):
            raise AbiParseError("ABI entry must be a JSON object")
        parsed.append((_abi_kind(entry), _abi_name(entry), _abi_input_types(entry)))

    return [
        SignatureWithMetadata.from_text(f"{name}({','.join(types)})", kind, True)
        for kind, name, types in parsed
        if kind in _ABI_KINDS and name is not None
    ]


def from_sol(content: str) -> list[SignatureWithMetadata]:
    """Return the function, event and error signatures found in Solidity source."""
    processed = strip_comments_and_newlines(content)
    signatures = []
    for match in _SIGNATURE.finditer(processed):
        name = match.group("name")
        kind = SignatureKind.parse(match.group("kind"))
        types = split_parameter_list(match.group("params"))
        if types is None:
            text, is_valid = f"{name}()", True
        else:
            text, is_valid = f"{name}({','.join(types)})", parameter_types_are_valid(types)
        signatures.append(SignatureWithMetadata.from_text(text, kind, is_valid))
    return signatures