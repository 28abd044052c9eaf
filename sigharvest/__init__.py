"""Extract Solidity function, event and error signatures from source and ABI files."""

__version__ = "0.1.0"
__all__ = ["model", "params", "parser", "rest"]