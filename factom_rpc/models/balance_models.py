# factom_rpc/models/balance_models.py
from typing import List

from .base_models import FactomModel


class Balance(FactomModel):
    """entry-credit-balance and factoid-balance result."""
    balance: int


class Balances(FactomModel):
    """One address inside a multiple-*-balances result.

    ``ack`` includes in-flight transactions known to the node, ``saved`` is the
    last balance written to the database and ``err`` is empty on success.
    """
    ack: int
    saved: int
    err: str = ""


class MultipleBalances(FactomModel):
    """multiple-ec-balances and multiple-fct-balances result."""
    currentheight: int
    lastsavedheight: int
    balances: List[Balances]
