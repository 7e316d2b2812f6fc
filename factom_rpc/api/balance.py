# factom_rpc/api/balance.py
from typing import List

from factom_rpc.models import Balance, MultipleBalances
from factom_rpc.rpc_library.core import ApiResponse


class BalanceApi:
    """Balance queries served by factomd."""

    async def entry_credit_balance(self, address: str) -> ApiResponse[Balance]:
        """Returns the current balance of an entry credit address.

        Example:
            factom = Factom()
            response = await factom.entry_credit_balance(
                "EC3EAsdwvihEN3DFhGJukpMS4aMPsZvxVvRSqyz5jeEqRVJMDDXx"
            )
            assert response.success()
        """
        return await self.factomd_call("entry-credit-balance", {"address": address}, Balance)

    async def factoid_balance(self, address: str) -> ApiResponse[Balance]:
        """Returns the number of factoshis (factoids * 10^8) held by an FCT address."""
        return await self.factomd_call("factoid-balance", {"address": address}, Balance)

    async def multiple_ec_balances(self, addresses: List[str]) -> ApiResponse[MultipleBalances]:
        """Queries acknowledged and saved balances for a list of entry credit addresses.

        ``currentheight`` is the height factomd was loading and ``lastsavedheight``
        the height last saved to the database. Each element of ``balances``
        carries ``ack``, ``saved`` and ``err``; ``err`` is empty unless the
        address could not be decoded, has never been part of a transaction, or
        the node is not fully booted.

        Badly labelled parameters come back as an API error with code -32602.
        """
        return await self.factomd_call("multiple-ec-balances", {"addresses": list(addresses)}, MultipleBalances)

    async def multiple_fct_balances(self, addresses: List[str]) -> ApiResponse[MultipleBalances]:
        """Same as ``multiple_ec_balances`` for factoid addresses, amounts in factoshis."""
        return await self.factomd_call("multiple-fct-balances", {"addresses": list(addresses)}, MultipleBalances)
