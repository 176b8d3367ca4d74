"""Settings built from CLI flags.

idiomctl reads no environment variables and no config files: the global
flags on the root command are the whole configuration surface.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel


class IdiomSettings(BaseModel):
    """Global CLI flags, frozen after construction.

    Stored on :class:`~idiomctl.commands._context.AppContext` and shared
    by every subcommand.
    """

    model_config = {"frozen": True, "extra": "forbid"}

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    @classmethod
    def from_cli(cls, **cli_flags: Any) -> IdiomSettings:
        """Construct settings from the root command's flag values."""
        return cls(**cli_flags)
