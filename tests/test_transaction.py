import pytest

from securebank.transaction import Transaction

STAMP = "2024-05-01T10:00:00Z"


def test_serialize_layout():
    tr = Transaction(STAMP, "Deposit", 250.0, 1001)
    assert tr.serialize() == "2024-05-01T10:00:00Z|Deposit|250|1001"


def test_serialize_default():
    assert Transaction().serialize() == "||0|-1"


def test_serialize_uses_six_significant_digits():
    tr = Transaction(STAMP, "Deposit", 1234567.0)
    assert tr.serialize().endswith("|1.23457e+06|-1")


@pytest.mark.parametrize(
    "tr",
    [
        Transaction(STAMP, "Deposit", 100.5, -1),
        Transaction(STAMP, "Withdraw", 0.25, 1002),
        Transaction(STAMP, "Transfer", 42.0, 1003),
        Transaction("", "", 0.0, -1),
    ],
)
def test_round_trip(tr):
    assert Transaction.deserialize(tr.serialize()) == tr


def test_missing_related_account_defaults():
    tr = Transaction.deserialize(f"{STAMP}|Deposit|50")
    assert tr == Transaction(STAMP, "Deposit", 50.0, -1)


def test_trailing_separator_defaults_related_account():
    tr = Transaction.deserialize(f"{STAMP}|Withdraw|20|")
    assert tr.related_account == -1
    assert tr.amount == 20.0


def test_extra_fields_are_ignored():
    tr = Transaction.deserialize(f"{STAMP}|Transfer|5|1004|extra")
    assert tr == Transaction(STAMP, "Transfer", 5.0, 1004)


def test_empty_fields_are_kept():
    tr = Transaction.deserialize("||7|")
    assert tr == Transaction("", "", 7.0, -1)


@pytest.mark.parametrize("line", ["", STAMP, f"{STAMP}|Deposit", f"{STAMP}|Deposit|"])
def test_short_lines_give_empty_transaction(line):
    assert Transaction.deserialize(line) == Transaction()


def test_numbers_are_read_from_their_prefix():
    tr = Transaction.deserialize(f"{STAMP}|Deposit|12.5abc|7xyz")
    assert tr.amount == 12.5
    assert tr.related_account == 7


@pytest.mark.parametrize(
    "line",
    [
        f"{STAMP}|Deposit|abc|1",
        f"{STAMP}|Deposit|10|abc",
        f"{STAMP}|Deposit|10|99999999999",
    ],
)
def test_bad_numbers_raise(line):
    with pytest.raises(ValueError):
        Transaction.deserialize(line)