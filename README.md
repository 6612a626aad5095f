# securebank

A small library that keeps bank accounts in an encrypted file and adds every
deposit and withdrawal to an encrypted transaction log. Its building blocks
can also be used on their own: password-based AES-256-CBC encryption of bytes
and files, and Huffman compression.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Accounts and the bank

```python
from securebank.bank import Bank, BankError

password = "password"
bank = Bank("accounts.enc", "transactions.enc", password)
bank.load()                      # reads accounts.enc if it exists

acct = bank.create_account("Alice", 100.0)
print(acct.account_number)       # the first number is 1000

bank.deposit(acct.account_number, 25.0)
bank.withdraw(acct.account_number, 10.0)
print(acct.balance)              # 115.0

print(bank.accounts)             # a tuple of every BankAccount
bank.save()                      # writes accounts.enc, encrypted
```

- `Bank.create_account(holder_name, initial_deposit)` gives the new account
  one more than the highest number in use, or 1000 when no account is
  numbered 1000 or above. A positive initial deposit is written to the log.
- `Bank.find_account(number)` returns the account or `None`.
- `Bank.delete_account`, `Bank.deposit` and `Bank.withdraw` raise `BankError`
  when no account has that number.
- A deposit or withdrawal that is not positive, or a withdrawal larger than
  the balance, raises `ValueError` (from `BankAccount.deposit` and
  `BankAccount.withdraw`), and nothing is logged.
- `Bank.load` raises `BankError` when the data file cannot be decrypted (for
  example with the wrong password) or holds a malformed line.
- Every successful deposit and withdrawal is added to the log file by
  `Bank.log_transaction`, which decrypts the log, appends one line and
  encrypts it again.

`BankAccount` can be used alone. It keeps `account_number`, `holder_name`,
`balance` and a list of `transactions`; `add_transaction` records a
`Transaction` and applies `"Deposit"` and `"Withdraw"` amounts to the balance.
`current_iso_timestamp()` returns the local time as `YYYY-MM-DDTHH:MM:SSZ`.

On disk, an account is one line of the form `number|holder|balance`
(`BankAccount.serialize` / `BankAccount.deserialize`). A transaction is one
line of the form `timestamp|type|amount|related_account`
(`Transaction.serialize` / `Transaction.deserialize`); a missing
`related_account` reads as `-1`, and a line with fewer than three fields reads
as an empty record.

## Encryption

```python
from securebank.crypto import encrypt_file, decrypt_file, encrypt_bytes, decrypt_bytes

password = "password"
blob = encrypt_bytes(b"hello", password)
assert decrypt_bytes(blob, password) == b"hello"

encrypt_file("plain.txt", "plain.txt.enc", password)
decrypt_file("plain.txt.enc", "plain.out.txt", password)
```

Encrypted data is a random 16-byte salt, then a random 16-byte IV, then the
AES-256-CBC ciphertext with PKCS#7 padding. The key comes from
PBKDF2-HMAC-SHA256 with 100,000 iterations (`derive_key(password, salt)`).
Data that is too short, not a whole number of blocks, or whose padding is
wrong (usually a wrong password) raises `CryptoError`.

## Compression

```python
from securebank.huffman import compress, decompress, compress_file, decompress_file

packed = compress(b"abracadabra")
restored = decompress(packed)

compress_file("log.txt", "log.huf")
decompress_file("log.huf", "log.txt.out")
```

The compressed form is the code tree in preorder, a `0x02` separator and the
packed bits, with the last byte padded with zero bits. No length is stored,
so when the padding bits spell out a code, `decompress` returns up to seven
extra bytes at the end. Empty input and malformed compressed data raise
`HuffmanError`.

## What it does not do

- There is no command and no graphical interface; the package is used from
  Python code.
- There is no password vault.
- The transaction log is only written to. `Bank.load` reads balances from the
  data file alone, so loaded accounts start with empty `transactions`, and
  `Bank.save` stores no per-account history.
- There are no transfers between accounts.