# factom_rpc/api/block.py
from factom_rpc.models import (
    AdminBlock,
    DBlockByHeight,
    DirectoryBlock,
    DirectoryBlockHead,
    ECBlockByHeight,
    FBlockByHeight,
)
from factom_rpc.rpc_library.core import ApiResponse


def _height_params(height: int) -> dict:
    if isinstance(height, bool) or not isinstance(height, int) or height < 0:
        raise ValueError(f"Block height must be a non-negative integer, got {height!r}")
    return {"height": height}


class BlockApi:
    """Block lookups served by factomd."""

    async def ablock_by_height(self, height: int) -> ApiResponse[AdminBlock]:
        """Retrieves the admin block at ``height``."""
        return await self.factomd_call("ablock-by-height", _height_params(height), AdminBlock)

    async def dblock_by_height(self, height: int) -> ApiResponse[DBlockByHeight]:
        """Retrieves the directory block at ``height``."""
        return await self.factomd_call("dblock-by-height", _height_params(height), DBlockByHeight)

    async def ecblock_by_height(self, height: int) -> ApiResponse[ECBlockByHeight]:
        """Retrieves the entry credit block at ``height``."""
        return await self.factomd_call("ecblock-by-height", _height_params(height), ECBlockByHeight)

    async def fblock_by_height(self, height: int) -> ApiResponse[FBlockByHeight]:
        """Retrieves the factoid block at ``height``."""
        return await self.factomd_call("fblock-by-height", _height_params(height), FBlockByHeight)

    async def directory_block(self, keymr: str) -> ApiResponse[DirectoryBlock]:
        return await self.factomd_call("directory-block", {"keymr": keymr}, DirectoryBlock)

    async def directory_block_head(self) -> ApiResponse[DirectoryBlockHead]:
        return await self.factomd_call("directory-block-head", {}, DirectoryBlockHead)
