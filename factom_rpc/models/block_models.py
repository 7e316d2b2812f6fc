# factom_rpc/models/block_models.py
from typing import Any, Dict, List, Optional

from pydantic import Field

from .base_models import FactomModel


class BlockHeader(FactomModel):
    prevblockkeymr: str
    sequencenumber: int
    timestamp: int


class EntryBlockRef(FactomModel):
    chainid: str
    keymr: str


class DirectoryBlock(FactomModel):
    """directory-block result."""
    header: BlockHeader
    entryblocklist: List[EntryBlockRef] = Field(default_factory=list)


class DirectoryBlockHead(FactomModel):
    """directory-block-head result."""
    keymr: str


class AdminBlock(FactomModel):
    """ablock-by-height result. ``ablock`` is kept as the decoded JSON object."""
    ablock: Dict[str, Any]
    rawdata: Optional[str] = None


class DBlockByHeight(FactomModel):
    """dblock-by-height result."""
    dblock: Dict[str, Any]
    rawdata: Optional[str] = None


class ECBlockByHeight(FactomModel):
    """ecblock-by-height result."""
    ecblock: Dict[str, Any]
    rawdata: Optional[str] = None


class FBlockByHeight(FactomModel):
    """fblock-by-height result."""
    fblock: Dict[str, Any]
    rawdata: Optional[str] = None
