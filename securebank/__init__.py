"""Encrypted account storage, transaction logging, file encryption and Huffman compression."""

__version__ = "0.1.0"
__all__ = ["account", "bank", "crypto", "huffman", "transaction"]