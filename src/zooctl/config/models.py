"""Pydantic configuration section models with code-baked defaults.

Sparse TOML contract: defaults baked here, zooctl.toml only contains
overrides.  A run needs no config file at all.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from zooctl.domain.ledger import DEFAULT_CANONICAL

SECTION_SEPARATOR = "*" * 35


class LedgerConfig(BaseModel):
    """[ledger] section."""

    model_config = {"frozen": True}

    canonical_categories: list[str] = Field(default_factory=lambda: list(DEFAULT_CANONICAL))


class LoadingConfig(BaseModel):
    """[loading] section.

    ``strict`` aborts the run on the first malformed record instead of
    skipping it with a warning.
    """

    model_config = {"frozen": True}

    strict: bool = False


class LogConfig(BaseModel):
    """[log] section — the activity log file, not diagnostic logging."""

    model_config = {"frozen": True}

    encoding: str = "utf-8"
    separator: str = SECTION_SEPARATOR
