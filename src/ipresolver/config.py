"""Configuration module for the ipresolver command line tool."""

import os
import logging
from typing import Optional

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class Config:
    """Application configuration."""

    def __init__(
        self,
        remote_addr: Optional[str] = None,
        log_level: str = "INFO",
    ):
        self.remote_addr = remote_addr
        self.log_level = log_level

    @classmethod
    def from_env(cls, remote_addr: Optional[str] = None) -> "Config":
        """Create configuration from environment variables.

        Reads IPRESOLVER_REMOTE_ADDR and LOG_LEVEL from the environment.
        An explicit remote_addr takes precedence over the environment.

        Raises:
            ValueError: If LOG_LEVEL is not a known logging level.
        """
        if remote_addr is None:
            remote_addr = os.getenv("IPRESOLVER_REMOTE_ADDR") or None

        log_level = (os.getenv("LOG_LEVEL") or "INFO").upper()
        if log_level not in LOG_LEVELS:
            raise ValueError(
                f"Invalid LOG_LEVEL {log_level!r}, expected one of: {', '.join(LOG_LEVELS)}\n"
                "Please fix it in your environment or .env file."
            )

        return cls(remote_addr=remote_addr, log_level=log_level)

    def setup_logging(self) -> None:
        """Configure logging for the application."""
        logging.basicConfig(
            level=getattr(logging, self.log_level, logging.INFO),
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    def __repr__(self) -> str:
        return f"Config(remote_addr={self.remote_addr!r}, log_level={self.log_level!r})"
