# factom_rpc/api/chain.py
from typing import List

from factom_rpc.models import ChainHead, Entry, PendingEntry
from factom_rpc.rpc_library.core import ApiResponse


class ChainApi:
    """Chain and entry lookups served by factomd."""

    async def chain_head(self, chainid: str) -> ApiResponse[ChainHead]:
        """Returns the key merkle root of the latest entry block of a chain."""
        return await self.factomd_call("chain-head", {"chainid": chainid}, ChainHead)

    async def entry(self, hash: str) -> ApiResponse[Entry]:
        """Returns an entry by its hash."""
        return await self.factomd_call("entry", {"hash": hash}, Entry)

    async def pending_entries(self) -> ApiResponse[List[PendingEntry]]:
        return await self.factomd_call("pending-entries", {}, List[PendingEntry])
