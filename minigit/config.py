"""
Configuration management for minigit.

Settings are read from environment variables (a `.env` file in the working
directory is loaded first):
- MINIGIT_DIR: name of the metadata directory inside a repository
- MINIGIT_DEFAULT_BRANCH: branch created by `init`
- MINIGIT_LOG_LEVEL: loguru level for diagnostic output
"""

import os
from typing import Literal, cast

from dotenv import load_dotenv
from pydantic import BaseModel, Field

load_dotenv()

LogLevel = Literal["TRACE", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class RepoConfig(BaseModel):
    """Repository layout settings."""

    repo_dir_name: str = Field(
        default=".minigit", description="Metadata directory inside the repository root"
    )
    default_branch: str = Field(
        default="main", description="Branch created when a repository is initialized"
    )


class LogConfig(BaseModel):
    """Configuration for diagnostic logging."""

    level: LogLevel = Field(default="WARNING", description="Logging level")
    format: str = Field(
        default="<green>{time:HH:mm:ss}</green> | "
        "<level>{level: <8}</level> | "
        "<cyan>{name}</cyan>:<cyan>{function}</cyan> - "
        "<level>{message}</level>",
        description="Log message format",
    )
    enable_console_logging: bool = Field(
        default=True, description="Whether to log to stderr"
    )


class Config(BaseModel):
    repo: RepoConfig = Field(default_factory=RepoConfig)
    logging: LogConfig = Field(default_factory=LogConfig)

    @classmethod
    def from_env(cls) -> "Config":
        """Create configuration from environment variables."""
        return cls(
            repo=RepoConfig(
                repo_dir_name=os.getenv("MINIGIT_DIR", ".minigit"),
                default_branch=os.getenv("MINIGIT_DEFAULT_BRANCH", "main"),
            ),
            logging=LogConfig(
                level=cast(LogLevel, os.getenv("MINIGIT_LOG_LEVEL", "WARNING").upper()),
            ),
        )


# Global configuration instance
config = Config.from_env()
