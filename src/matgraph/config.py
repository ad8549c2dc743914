from functools import lru_cache
from typing import Any, Literal

import numpy as np
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


EdgeDType = Literal["uint8", "uint16", "uint32", "uint64"]


# ─────────────────────────────────────────────────────────────
# Section configs
# ─────────────────────────────────────────────────────────────


class LoggingSettings(BaseModel):
    level: Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"] = "INFO"
    format: str = (
        "%(asctime)-20s %(name)-40s "
        "%(levelname)-8s: %(message)s"
    )


class GraphSettings(BaseModel):
    """
    Defaults applied to every Graph that does not pass its own options.

    edge_dtype:
        Unsigned numpy dtype of the adjacency matrix. Costs that do not
        fit are rejected when written.
    """

    edge_dtype: EdgeDType = Field(
        "uint64",
        description="Unsigned integer dtype used to store edge costs.",
    )
    log_mutations: bool = Field(
        False,
        description="Emit DEBUG records for vertex/edge insertion and removal.",
    )

    def numpy_dtype(self) -> np.dtype:
        """Resolve ``edge_dtype`` to a numpy dtype."""
        return np.dtype(self.edge_dtype)


# ─────────────────────────────────────────────────────────────
# Top-level settings
# ─────────────────────────────────────────────────────────────


class AppSettings(BaseSettings):
    """
    Process-wide configuration for matgraph.

    Precedence (highest → lowest):

    1. Init kwargs (tests/overrides)
    2. Environment variables
    3. .env and .env.local
    4. Defaults in this class
    """

    model_config = SettingsConfigDict(
        env_prefix="MATGRAPH_",  # MATGRAPH_LOGGING__LEVEL, MATGRAPH_GRAPH__EDGE_DTYPE, ...
        env_file=(".env", ".env.local"),  # .env.local overrides .env
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
        validate_default=True,
    )

    logging: LoggingSettings = LoggingSettings()
    graph: GraphSettings = GraphSettings()  # type: ignore[call-arg]


@lru_cache(maxsize=1)
def get_settings(**overrides: Any) -> AppSettings:
    """
    Cached accessor for process-wide settings.

    `overrides` are init kwargs → highest precedence (handy in tests).
    """
    return AppSettings(**overrides)
