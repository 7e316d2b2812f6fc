# factom_rpc/models/chain_models.py
from typing import List

from .base_models import FactomModel


class ChainHead(FactomModel):
    """chain-head result."""
    chainhead: str
    chaininprocesslist: bool = False


class Entry(FactomModel):
    """entry result. ``content`` and ``extids`` are hex encoded."""
    chainid: str
    content: str
    extids: List[str] = []


class PendingEntry(FactomModel):
    """One element of the pending-entries result."""
    entryhash: str
    chainid: str
    status: str
