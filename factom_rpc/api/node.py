# factom_rpc/api/node.py
from factom_rpc.models import CurrentMinute, EntryCreditRate, Heights, Properties
from factom_rpc.rpc_library.core import ApiResponse


class NodeApi:
    """Status queries served by factomd."""

    async def heights(self) -> ApiResponse[Heights]:
        """Returns the directory block, leader, entry block and entry heights."""
        return await self.factomd_call("heights", {}, Heights)

    async def properties(self) -> ApiResponse[Properties]:
        return await self.factomd_call("properties", {}, Properties)

    async def current_minute(self) -> ApiResponse[CurrentMinute]:
        return await self.factomd_call("current-minute", {}, CurrentMinute)

    async def entry_credit_rate(self) -> ApiResponse[EntryCreditRate]:
        """Returns how many factoshis one entry credit costs."""
        return await self.factomd_call("entry-credit-rate", {}, EntryCreditRate)
