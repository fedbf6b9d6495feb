"""Pydantic settings for the martian robots server."""

import os

from pydantic import BaseModel, Field


class ServerConfig(BaseModel):
    """Where the HTTP server listens."""

    host: str = Field(
        default_factory=lambda: os.environ.get("MARTIAN_ROBOTS_HOST", "0.0.0.0"),
        description="Interface to bind",
    )
    port: int = Field(
        default_factory=lambda: int(os.environ.get("MARTIAN_ROBOTS_PORT", "5000")),
        description="TCP port to listen on",
    )
