# factom_rpc/models/node_models.py
from typing import Optional

from .base_models import FactomModel


class Heights(FactomModel):
    """heights result."""
    directoryblockheight: int
    leaderheight: int
    entryblockheight: int
    entryheight: int


class Properties(FactomModel):
    """properties result from factomd."""
    factomdversion: str
    factomdapiversion: str


class CurrentMinute(FactomModel):
    """current-minute result."""
    leaderheight: int
    directoryblockheight: int
    minute: int
    currentblockstarttime: Optional[int] = None
    currentminutestarttime: Optional[int] = None
    currenttime: Optional[int] = None
    directoryblockinseconds: Optional[int] = None
    stalldetected: Optional[bool] = None
    faulttimeout: Optional[int] = None
    roundtimeout: Optional[int] = None


class EntryCreditRate(FactomModel):
    """entry-credit-rate result: factoshis per entry credit."""
    rate: int
