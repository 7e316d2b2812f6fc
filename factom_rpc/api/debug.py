# factom_rpc/api/debug.py
from factom_rpc.models import (
    Configuration,
    Delay,
    DropRate,
    HoldingQueue,
    NetworkInfo,
    PredictiveFer,
    ProcessList,
    Servers,
)
from factom_rpc.rpc_library.core import ApiResponse


class DebugApi:
    """Calls served by the factomd debug endpoint."""

    async def holding_queue(self) -> ApiResponse[HoldingQueue]:
        """Messages held by the node while it waits for their dependencies."""
        return await self.debug_call("holding-queue", {}, HoldingQueue)

    async def network_info(self) -> ApiResponse[NetworkInfo]:
        return await self.debug_call("network-info", {}, NetworkInfo)

    async def predictive_fer(self) -> ApiResponse[PredictiveFer]:
        return await self.debug_call("predictive-fer", {}, PredictiveFer)

    async def audit_servers(self) -> ApiResponse[Servers]:
        return await self.debug_call("audit-servers", {}, Servers)

    async def federated_servers(self) -> ApiResponse[Servers]:
        return await self.debug_call("federated-servers", {}, Servers)

    async def configuration(self) -> ApiResponse[Configuration]:
        return await self.debug_call("configuration", {}, Configuration)

    async def process_list(self) -> ApiResponse[ProcessList]:
        return await self.debug_call("process-list", {}, ProcessList)

    async def drop_rate(self) -> ApiResponse[DropRate]:
        return await self.debug_call("drop-rate", {}, DropRate)

    async def delay(self) -> ApiResponse[Delay]:
        return await self.debug_call("delay", {}, Delay)

    async def reload_configuration(self) -> ApiResponse[Configuration]:
        """Asks factomd to re-read its configuration file and returns the result."""
        return await self.debug_call("reload-configuration", {}, Configuration)
