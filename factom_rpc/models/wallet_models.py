# factom_rpc/models/wallet_models.py
from typing import List

from .base_models import FactomModel


class Address(FactomModel):
    """A wallet address pair as returned by address and generate-*-address."""
    public: str
    secret: str


class Addresses(FactomModel):
    """all-addresses result."""
    addresses: List[Address] = []


class AccountBalance(FactomModel):
    ack: int
    saved: int


class WalletBalances(FactomModel):
    """wallet-balances result."""
    fctaccountbalances: AccountBalance
    ecaccountbalances: AccountBalance


class WalletProperties(FactomModel):
    """properties result from factom-walletd."""
    walletversion: str
    walletapiversion: str


class WalletHeight(FactomModel):
    """get-height result."""
    height: int
