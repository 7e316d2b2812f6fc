# factom_rpc/models/base_models.py
"""
Base model for result payloads returned by factomd and factom-walletd.
"""
from pydantic import BaseModel, ConfigDict


class FactomModel(BaseModel):
    """Result payload. Unknown fields sent by newer daemons are kept, not rejected."""
    model_config = ConfigDict(extra="allow")
