"""A minimal Bitcoin wallet."""

from __future__ import annotations


class Bitcoin(int):
    """An amount of Bitcoin, displayed as ``"<n> BTC"``."""

    def __str__(self) -> str:
        return f"{int(self)} BTC"

    def __repr__(self) -> str:
        return f"Bitcoin({int(self)})"


class InsufficientFundsError(Exception):
    """Raised when a withdrawal exceeds the wallet balance."""

    def __init__(self, message: str = "cannot withdraw, insufficient funds") -> None:
        super().__init__(message)


class Wallet:
    """Holds a Bitcoin balance that can be deposited into and withdrawn from."""

    def __init__(self, balance: int = 0) -> None:
        self._balance = Bitcoin(balance)

    def __repr__(self) -> str:
        return f"Wallet(balance={self._balance!r})"

    def deposit(self, amount: int) -> None:
        """Add ``amount`` to the balance."""
        self._balance = Bitcoin(self._balance + amount)

    def balance(self) -> Bitcoin:
        """Return the current balance."""
        return self._balance

    def withdraw(self, amount: int) -> None:
        """Remove ``amount`` from the balance, or raise if funds are short."""
        if amount > self._balance:
            raise InsufficientFundsError()
        self._balance = Bitcoin(self._balance - amount)