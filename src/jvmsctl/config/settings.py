"""Unified settings — CLI flags and env vars in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``JVMSCTL_*`` prefix
  3. Code defaults

Shim invocations have no flags of their own (every argument belongs to
the delegated Java tool), so they build settings from env vars alone.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic_settings import BaseSettings


class JvmsSettings(BaseSettings):
    """Settings for a single jvmsctl process, frozen after construction.

    Attributes:
        home: Explicit installation directory. None means "the directory
            of the invoked executable".
    """

    model_config = {
        "frozen": True,
        "env_prefix": "JVMSCTL_",
    }

    home: Path | None = None

    # --- Output / logging flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    @classmethod
    def from_cli(cls, *, home: str | None = None, **cli_flags: Any) -> JvmsSettings:
        """Construct settings from a CLI invocation.

        Flags left at their click defaults (False / None) are dropped so the
        matching env var can still apply.
        """
        overrides = {key: value for key, value in cli_flags.items() if value}
        if home:
            overrides["home"] = Path(home)
        return cls(**overrides)
