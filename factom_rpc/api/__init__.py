# factom_rpc/api/__init__.py
"""
Per-call methods, grouped by the endpoint that serves them and mixed into ``Factom``.
"""
from .balance import BalanceApi
from .block import BlockApi
from .chain import ChainApi
from .debug import DebugApi
from .node import NodeApi
from .wallet import WalletApi

__all__ = [
    'BalanceApi',
    'BlockApi',
    'ChainApi',
    'DebugApi',
    'NodeApi',
    'WalletApi',
]
