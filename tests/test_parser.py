import json

import pytest

from sigharvest.model import SignatureKind
from sigharvest.parser import AbiParseError, from_abi, from_sol

CUSTOM_CODE = """
        function supportsInterface(bytes4 interfaceId) external view returns (bool);

        event Transfer(address indexed from, address indexed to, uint256 indexed tokenId);
        error Recv(address indexed from, address indexed to, uint256 indexed tokenId);

        function safeTransferFrom(
            address from,
            address to,
            uint256 tokenId
        ) external;

        function toHexString(uint256 value, uint256 length) internal pure returns (string memory) {
            ...
        }

        function functionCall(
            address target,
            bytes memory data,
            string memory errorMessage
        ) internal returns (bytes memory) {
            ...
        }

        function _transfer(
            address from,
            address to,
            uint256 tokenId
        ) internal virtual {
            ...
        }

        function tokenURI(uint256 tokenId)
        public
        view
        virtual
        override
        returns (string memory)
        {
            ...
        }

        function doesntWorkButNowDoesBecauseItsFixedYay(
            address from,   // this is a comment
            uint256 id     /* also a comment */
        ) internal {

        }
"""


def test_from_sol_custom_signatures():
    signatures = from_sol(CUSTOM_CODE)
    expected = [
        ("supportsInterface(bytes4)", SignatureKind.FUNCTION),
        ("Transfer(address,address,uint256)", SignatureKind.EVENT),
        ("Recv(address,address,uint256)", SignatureKind.ERROR),
        ("safeTransferFrom(address,address,uint256)", SignatureKind.FUNCTION),
        ("toHexString(uint256,uint256)", SignatureKind.FUNCTION),
        ("functionCall(address,bytes,string)", SignatureKind.FUNCTION),
        ("_transfer(address,address,uint256)", SignatureKind.FUNCTION),
        ("tokenURI(uint256)", SignatureKind.FUNCTION),
        ("doesntWorkButNowDoesBecauseItsFixedYay(address,uint256)", SignatureKind.FUNCTION),
    ]
    assert [(s.text, s.kind) for s in signatures[: len(expected)]] == expected


def test_from_sol_hash_of_transfer_single():
    code = (
        "event TransferSingle(address indexed operator, address indexed from, "
        "address indexed to, uint256 id, uint256 value);"
    )
    signatures = from_sol(code)
    assert len(signatures) == 1
    assert signatures[0].text == "TransferSingle(address,address,address,uint256,uint256)"
    assert signatures[0].kind is SignatureKind.EVENT
    assert signatures[0].hash == "c3d58168c5ae7397731d063d5bbf3d657854427343f4c083240f7aacaa2d0f62"


def test_from_sol_user_defined_type_is_invalid():
    code = "event Create(uint256 indexed projectId, address indexed owner, bytes32 indexed handle, string uri, ITerminal terminal, address caller);"
    signatures = from_sol(code)
    assert signatures[0].text == "Create(uint256,address,bytes32,string,ITerminal,address)"
    assert signatures[0].is_valid is False


def test_from_sol_empty_parameters_are_valid():
    signatures = from_sol("function count() external view returns (uint256);")
    assert [(s.text, s.is_valid) for s in signatures] == [("count()", True)]


def test_from_sol_no_signatures():
    assert from_sol("pragma solidity ^0.8.0;\ncontract A { uint x; }") == []


def test_from_abi_extracts_in_order():
    abi = [
        {"type": "error", "name": "Initialized", "inputs": []},
        {
            "type": "event",
            "name": "Claimed",
            "inputs": [{"type": "address"}, {"type": "uint256"}, {"type": "uint256"}],
        },
        {"type": "constructor", "inputs": [{"type": "address"}]},
        {"type": "receive"},
        {"type": "function", "name": "supportsInterface", "inputs": [{"type": "bytes4", "name": "id"}]},
        {"type": "function", "name": "releaseToCollector"},
        {"type": "function", "inputs": []},
    ]
    signatures = from_abi(json.dumps(abi))
    assert [(s.text, s.kind) for s in signatures] == [
        ("Initialized()", SignatureKind.ERROR),
        ("Claimed(address,uint256,uint256)", SignatureKind.EVENT),
        ("supportsInterface(bytes4)", SignatureKind.FUNCTION),
        ("releaseToCollector()", SignatureKind.FUNCTION),
    ]
    assert all(s.is_valid for s in signatures)
    assert signatures[0].hash == "5daa87a0e9463431830481fd4b6e3403442dfb9a12b9c07597e9f61d50b633c8"


def test_from_abi_null_inputs():
    signatures = from_abi('[{"type": "function", "name": "saleInfo", "inputs": null}]')
    assert [s.text for s in signatures] == ["saleInfo()"]


@pytest.mark.parametrize(
    "content",
    [
        "not json",
        '{"type": "function"}',
        '[{"name": "foo"}]',
        '[{"type": "unknown", "name": "foo"}]',
        '[{"type": "Function", "name": "foo"}]',
        '[{"type": "function", "name": "foo", "inputs": [{"name": "a"}]}]',
        '[{"type": "function", "name": 5}]',
        "[1]",
    ],
)
def test_from_abi_rejects_malformed(content):
    with pytest.raises(AbiParseError):
        from_abi(content)


def test_from_abi_error_is_value_error():
    with pytest.raises(ValueError):
        from_abi("[")