# sigharvest

Extract Solidity function, event and error signatures from Solidity source
files and JSON ABI files. Each signature comes back in canonical form
(for example `balanceOf(address)`), with its Keccak-256 hash and its kind.
A signature that uses a user-defined parameter type is flagged as not valid.

## Installation

```
pip install sigharvest
```

## Parsing Solidity source

```python
from sigharvest.parser import from_sol

code = """
function transfer(
    address to,      // recipient
    uint256 amount   /* in wei */
) external returns (bool);
event Transfer(address indexed from, address indexed to, uint256 value);
"""

for sig in from_sol(code):
    print(sig.kind, sig.text, sig.hash[:8], sig.is_valid)
```

Comments and line breaks are replaced by spaces first, so signatures spread
across several lines are found as well. The helpers behind this live in
`sigharvest.params`: `strip_comments_and_newlines`, `split_parameter_list`
and `parameter_types_are_valid`.

## Parsing ABI files

```python
from sigharvest.parser import from_abi, AbiParseError

try:
    with open("contract.json") as handle:
        signatures = from_abi(handle.read())
except AbiParseError as exc:
    print("not a valid ABI:", exc)
```

Only `function`, `event` and `error` entries that carry a name become
signatures; ABI signatures are always marked valid. `AbiParseError` is a
`ValueError` raised when the content is not a JSON list of ABI entries.

## Models

`sigharvest.model` holds the records the signatures live in:
`SignatureKind`, `SignatureWithMetadata` (built with
`SignatureWithMetadata.from_text(text, kind, is_valid)`), GitHub and
Etherscan records (`GithubRepository` and `GithubUser` can be read from and
written to plain dictionaries with `from_dict` / `to_dict`), signature
mappings and statistics views. `keccak256_hex(text)` returns the hex digest
that is used as a signature's hash.

```python
from sigharvest.model import SignatureKind, SignatureWithMetadata

SignatureKind.parse("Function")          # SignatureKind.FUNCTION
sig = SignatureWithMetadata.from_text("balanceOf(address)", SignatureKind.FUNCTION, True)
sig.hash[:8]                              # '70a08231'
```

## Query validation

`sigharvest.rest` holds the checks applied to lookup queries:
`validate_page`, `normalize_text_query`, `normalize_hash_query` and the
`QueryKind` filter. Each check raises `BadRequest` (a `ValueError`) when the
input is refused.

```python
from sigharvest.rest import normalize_hash_query, QueryKind

normalize_hash_query(" 0x70a08231 ")      # '70a08231'
QueryKind("all").to_signature_kind()      # None
```

## What this package does not do

It has no storage, no HTTP server and no command to run. It does not fetch
sources from GitHub, Etherscan or any other site. The records in
`sigharvest.model` and the checks in `sigharvest.rest` are building blocks;
keeping signatures in a database and serving lookups is left to the code that
uses them.

## Running the tests

```
pip install -e ".[test]"
pytest
```