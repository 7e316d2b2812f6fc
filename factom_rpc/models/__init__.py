# factom_rpc/models/__init__.py
"""
Result schemas for the factomd, factom-walletd and debug APIs.
"""
from .base_models import FactomModel
from .balance_models import Balance, Balances, MultipleBalances
from .block_models import (
    AdminBlock,
    BlockHeader,
    DBlockByHeight,
    DirectoryBlock,
    DirectoryBlockHead,
    ECBlockByHeight,
    EntryBlockRef,
    FBlockByHeight,
)
from .chain_models import ChainHead, Entry, PendingEntry
from .node_models import CurrentMinute, EntryCreditRate, Heights, Properties
from .wallet_models import (
    AccountBalance,
    Address,
    Addresses,
    WalletBalances,
    WalletHeight,
    WalletProperties,
)
from .debug_models import (
    Configuration,
    Delay,
    DropRate,
    HoldingQueue,
    NetworkInfo,
    PredictiveFer,
    ProcessList,
    Servers,
)

__all__ = [
    'FactomModel',

    # Balances
    'Balance',
    'Balances',
    'MultipleBalances',

    # Blocks
    'AdminBlock',
    'BlockHeader',
    'DBlockByHeight',
    'DirectoryBlock',
    'DirectoryBlockHead',
    'ECBlockByHeight',
    'EntryBlockRef',
    'FBlockByHeight',

    # Chains and entries
    'ChainHead',
    'Entry',
    'PendingEntry',

    # Node
    'CurrentMinute',
    'EntryCreditRate',
    'Heights',
    'Properties',

    # Wallet
    'AccountBalance',
    'Address',
    'Addresses',
    'WalletBalances',
    'WalletHeight',
    'WalletProperties',

    # Debug
    'Configuration',
    'Delay',
    'DropRate',
    'HoldingQueue',
    'NetworkInfo',
    'PredictiveFer',
    'ProcessList',
    'Servers',
]
