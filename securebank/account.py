"""Bank accounts holding a balance and their own transaction history."""

from __future__ import annotations

from datetime import datetime

from .transaction import Transaction, _fields, _parse_float, _parse_int

__all__ = ["current_iso_timestamp", "BankAccount"]

DEPOSIT = "Deposit"
WITHDRAW = "Withdraw"


def current_iso_timestamp() -> str:
    """Return the current local time as ``YYYY-MM-DDTHH:MM:SSZ``."""
    return datetime.now().strftime("%Y-%m-%dT%H:%M:%SZ")


class BankAccount:
    """An account with a number, a holder, a balance and its transactions."""

    def __init__(
        self, account_number: int = 0, holder_name: str = "", balance: float = 0.0
    ) -> None:
        self.account_number = account_number
        self.holder_name = holder_name
        self.balance = balance
        self.transactions: list[Transaction] = []
        if balance > 0.0:
            self.transactions.append(
                Transaction(current_iso_timestamp(), DEPOSIT, balance, -1)
            )

    def __repr__(self) -> str:
        return (
            f"BankAccount(account_number={self.account_number!r}, "
            f"holder_name={self.holder_name!r}, balance={self.balance!r})"
        )

    def deposit(self, amount: float) -> None:
        """Add ``amount`` to the balance; it must be positive."""
        if amount <= 0:
            raise ValueError(f"deposit amount must be positive, got {amount}")
        self.balance += amount
        self.transactions.append(
            Transaction(current_iso_timestamp(), DEPOSIT, amount, -1)
        )

    def withdraw(self, amount: float) -> None:
        """Take ``amount`` from the balance; it must be positive and covered."""
        if amount <= 0:
            raise ValueError(f"withdrawal amount must be positive, got {amount}")
        if amount > self.balance:
            raise ValueError(
                f"insufficient funds: balance {self.balance}, requested {amount}"
            )
        self.balance -= amount
        self.transactions.append(
            Transaction(current_iso_timestamp(), WITHDRAW, amount, -1)
        )

    def add_transaction(self, transaction: Transaction) -> None:
        """Record ``transaction``, applying deposits and withdrawals to the balance."""
        self.transactions.append(transaction)
        if transaction.type == DEPOSIT:
            self.balance += transaction.amount
        elif transaction.type == WITHDRAW:
            self.balance -= transaction.amount

    def serialize(self) -> str:
        """Return ``account_number|holder_name|balance``."""
        return f"{self.account_number}|{self.holder_name}|{self.balance:g}"

    @classmethod
    def deserialize(cls, line: str) -> "BankAccount":
        """Parse a serialized line; lines with fewer than three fields give an empty account."""
        fields = _fields(line)
        if len(fields) < 3:
            return cls()
        number_text, holder, balance_text = fields[:3]
        account = cls(_parse_int(number_text), holder)
        account.balance = _parse_float(balance_text)
        return account