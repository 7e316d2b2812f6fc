# factom_rpc/models/debug_models.py
from typing import Any, Dict, List

from pydantic import Field

from .base_models import FactomModel


class HoldingQueue(FactomModel):
    """holding-queue result."""
    messages: List[Any] = Field(default_factory=list, alias="Messages")


class NetworkInfo(FactomModel):
    """network-info result."""
    network_number: int = Field(alias="NetworkNumber")
    network_name: str = Field(alias="NetworkName")
    network_id: int = Field(alias="NetworkID")


class PredictiveFer(FactomModel):
    """predictive-fer result."""
    predictive_fer: int = Field(alias="PredictiveFER")


class Servers(FactomModel):
    """audit-servers and federated-servers result."""
    servers: List[Dict[str, Any]] = Field(default_factory=list)


class Configuration(FactomModel):
    """configuration and reload-configuration result, one object per config section."""


class ProcessList(FactomModel):
    """process-list result."""
    process_list: Any = Field(default=None, alias="ProcessList")


class DropRate(FactomModel):
    """drop-rate result."""
    drop_rate: int = Field(alias="DropRate")


class Delay(FactomModel):
    """delay result."""
    delay: int = Field(alias="Delay")
