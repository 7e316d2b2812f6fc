# factom_rpc/api/wallet.py
from factom_rpc.models import (
    Address,
    Addresses,
    WalletBalances,
    WalletHeight,
    WalletProperties,
)
from factom_rpc.rpc_library.core import ApiResponse


class WalletApi:
    """Calls served by factom-walletd."""

    async def address(self, address: str) -> ApiResponse[Address]:
        """Returns the public and secret key pair stored for ``address``."""
        return await self.walletd_call("address", {"address": address}, Address)

    async def all_addresses(self) -> ApiResponse[Addresses]:
        return await self.walletd_call("all-addresses", {}, Addresses)

    async def generate_ec_address(self) -> ApiResponse[Address]:
        return await self.walletd_call("generate-ec-address", {}, Address)

    async def generate_factoid_address(self) -> ApiResponse[Address]:
        return await self.walletd_call("generate-factoid-address", {}, Address)

    async def wallet_balances(self) -> ApiResponse[WalletBalances]:
        """Totals of every address in the wallet, split into factoid and EC accounts."""
        return await self.walletd_call("wallet-balances", {}, WalletBalances)

    async def wallet_properties(self) -> ApiResponse[WalletProperties]:
        return await self.walletd_call("properties", {}, WalletProperties)

    async def get_height(self) -> ApiResponse[WalletHeight]:
        """Returns the block height the wallet has synced to."""
        return await self.walletd_call("get-height", {}, WalletHeight)
