"""A bank of accounts kept in an encrypted data file with an encrypted log."""

from __future__ import annotations

import os
import threading
from pathlib import Path
from typing import Optional, Union

from .account import BankAccount, current_iso_timestamp
from .crypto import CryptoError, decrypt_bytes, encrypt_bytes
from .transaction import Transaction

__all__ = ["BankError", "Bank"]

_FIRST_ACCOUNT_NUMBER = 1000

PathLike = Union[str, "os.PathLike[str]"]


class BankError(Exception):
    """Raised when the bank's files cannot be read or an account is missing."""


class Bank:
    """Accounts stored encrypted on disk, with every transaction appended to a log."""

    def __init__(
        self, data_file: PathLike, log_file: PathLike, master_password: str
    ) -> None:
        self.data_file = Path(data_file)
        self.log_file = Path(log_file)
        self._master_password = master_password
        self._accounts: list[BankAccount] = []
        self._lock = threading.RLock()

    @property
    def accounts(self) -> tuple[BankAccount, ...]:
        """All accounts, in the order they were created or loaded."""
        return tuple(self._accounts)

    def _decrypt(self, path: Path) -> bytes:
        try:
            return decrypt_bytes(path.read_bytes(), self._master_password)
        except CryptoError as exc:
            raise BankError(f"cannot decrypt {path}: {exc}") from exc

    def _next_account_number(self) -> int:
        return max(
            (acc.account_number + 1 for acc in self._accounts),
            default=_FIRST_ACCOUNT_NUMBER,
        ) if any(
            acc.account_number >= _FIRST_ACCOUNT_NUMBER for acc in self._accounts
        ) else _FIRST_ACCOUNT_NUMBER

    def _require(self, account_number: int) -> BankAccount:
        account = self.find_account(account_number)
        if account is None:
            raise BankError(f"no account numbered {account_number}")
        return account

    def load(self) -> None:
        """Replace the accounts in memory with those in the data file, if it exists."""
        with self._lock:
            self._accounts.clear()
            if not self.data_file.exists():
                return
            text = self._decrypt(self.data_file).decode("utf-8")
            try:
                self._accounts.extend(
                    BankAccount.deserialize(line)
                    for line in text.splitlines()
                    if line
                )
            except ValueError as exc:
                raise BankError(f"corrupt account data: {exc}") from exc

    def save(self) -> None:
        """Write all accounts to the data file, encrypted."""
        with self._lock:
            text = "".join(acc.serialize() + "\n" for acc in self._accounts)
            self.data_file.write_bytes(
                encrypt_bytes(text.encode("utf-8"), self._master_password)
            )

    def create_account(self, holder_name: str, initial_deposit: float) -> BankAccount:
        """Open an account with the next free number and return it."""
        with self._lock:
            account = BankAccount(
                self._next_account_number(), holder_name, initial_deposit
            )
            self._accounts.append(account)
            if initial_deposit > 0:
                self.log_transaction(
                    Transaction(current_iso_timestamp(), "Deposit", initial_deposit, -1)
                )
            return account

    def find_account(self, account_number: int) -> Optional[BankAccount]:
        """Return the account with ``account_number``, or None."""
        with self._lock:
            return next(
                (a for a in self._accounts if a.account_number == account_number),
                None,
            )

    def delete_account(self, account_number: int) -> None:
        """Remove the account with ``account_number``."""
        with self._lock:
            self._accounts.remove(self._require(account_number))

    def deposit(self, account_number: int, amount: float) -> None:
        """Deposit into an account and log the transaction."""
        with self._lock:
            self._require(account_number).deposit(amount)
            self.log_transaction(
                Transaction(current_iso_timestamp(), "Deposit", amount, account_number)
            )

    def withdraw(self, account_number: int, amount: float) -> None:
        """Withdraw from an account and log the transaction."""
        with self._lock:
            self._require(account_number).withdraw(amount)
            self.log_transaction(
                Transaction(current_iso_timestamp(), "Withdraw", amount, account_number)
            )

    def log_transaction(self, transaction: Transaction) -> None:
        """Append ``transaction`` to the encrypted log file."""
        with self._lock:
            existing = self._decrypt(self.log_file) if self.log_file.exists() else b""
            updated = existing + (transaction.serialize() + "\n").encode("utf-8")
            self.log_file.write_bytes(encrypt_bytes(updated, self._master_password))