"""
Ledger node client configuration.
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class NodeSettings(BaseSettings):
    """Settings for talking to a ledger node"""

    # Node endpoint
    node_url: str = "http://localhost:4000"
    api_prefix: str = "/api"

    # Transport
    timeout: float = Field(30.0, gt=0, description="Request timeout in seconds")
    user_agent: str = "ledger-delegates/1.0.0"

    # Network identifier sent with every request, if set
    nethash: Optional[str] = None

    model_config = SettingsConfigDict(env_prefix="LEDGER_", case_sensitive=False)


@lru_cache()
def get_settings() -> NodeSettings:
    return NodeSettings()
