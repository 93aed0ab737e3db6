"""
A module for managing client configurations.

Classes:
- ClientConfig: Holds the options used to construct an RPC client.
"""

from typing import Dict

from pydantic import BaseModel, Field


class ClientConfig(BaseModel):
    """Options recognized when constructing an RPC client."""

    url: str
    """The node JSON-RPC endpoint."""

    debug: bool = False
    """Log the raw request and response bodies of every call."""

    timeout: float | None = None
    """Seconds to wait for the node, passed to the transport. `None` waits forever."""

    extra_headers: Dict[str, str] = Field(default_factory=dict)
    """Headers added to every request."""
