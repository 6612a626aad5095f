import pytest

from securebank.huffman import (
    HuffmanError,
    compress,
    compress_file,
    decompress,
    decompress_file,
)

SAMPLES = [
    b"ab",
    b"hello, world",
    b"abracadabra" * 20,
    bytes(range(256)),
    b"a" * 1000 + b"b" * 10 + b"c",
]


def test_single_symbol_wire_format():
    # Tree: internal node with two leaves for 'a', separator, eight '1' bits.
    assert compress(b"a" * 8) == b"\x00\x01a\x01a\x02\xff"


def test_single_symbol_exact_round_trip():
    assert decompress(compress(b"a" * 16)) == b"a" * 16


def test_padding_bits_decode_as_trailing_symbols():
    # The stream stores no length: the zero padding walks to the left leaf.
    assert decompress(compress(b"a")) == b"a" * 8


@pytest.mark.parametrize("data", SAMPLES)
def test_round_trip_keeps_data_as_prefix(data):
    restored = decompress(compress(data))
    assert restored.startswith(data)
    assert len(restored) - len(data) < 8


@pytest.mark.parametrize("data", SAMPLES)
def test_compressed_stream_starts_with_tree(data):
    blob = compress(data)
    assert blob[0] == 0
    assert 2 in blob


def test_skewed_data_shrinks():
    data = b"a" * 1000 + b"b" * 10
    assert len(compress(data)) < len(data) // 4


def test_empty_input_is_rejected():
    with pytest.raises(HuffmanError):
        compress(b"")


@pytest.mark.parametrize(
    "blob",
    [b"", b"\x05", b"\x00\x01a", b"\x00\x01"],
)
def test_malformed_tree_is_rejected(blob):
    with pytest.raises(HuffmanError):
        decompress(blob)


def test_leaf_only_tree_cannot_decode_bits():
    with pytest.raises(HuffmanError):
        decompress(b"\x01a\x02\x80")


def test_leaf_only_tree_without_data_decodes_to_nothing():
    assert decompress(b"\x01a\x02") == b""


def test_file_round_trip(tmp_path):
    data = b"the quick brown fox jumps over the lazy dog" * 30
    source = tmp_path / "plain.bin"
    packed = tmp_path / "packed.huf"
    restored = tmp_path / "restored.bin"
    source.write_bytes(data)

    compress_file(source, packed)
    decompress_file(packed, restored)

    assert packed.read_bytes() == compress(data)
    assert restored.read_bytes().startswith(data)


def test_compress_file_missing_input(tmp_path):
    with pytest.raises(FileNotFoundError):
        compress_file(tmp_path / "absent.bin", tmp_path / "out.huf")


def test_compress_file_empty_input(tmp_path):
    source = tmp_path / "empty.bin"
    source.write_bytes(b"")
    with pytest.raises(HuffmanError):
        compress_file(source, tmp_path / "out.huf")