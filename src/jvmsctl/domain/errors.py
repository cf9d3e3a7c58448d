"""Error taxonomy for jvmsctl.

Every failure is deterministic (missing file, bad data, missing toolchain),
so nothing is retried: errors propagate unchanged to the top of the call
chain, where the CLI renders them and exits non-zero.
"""

from __future__ import annotations

from typing import Any


class JvmsError(Exception):
    """Base class for all jvmsctl failures.

    Attributes:
        code: Stable machine-readable identifier, surfaced as
            ``ServiceError.code`` in CLI output.
        detail: Extra structured context for ``--json`` output.
    """

    code = "JVMS_ERROR"

    def __init__(self, message: str, *, code: str | None = None, **detail: Any) -> None:
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code
        self.detail = detail


class ConfigurationIOError(JvmsError):
    """The configuration file could not be opened, read, or written."""

    code = "CONFIG_IO"


class MalformedConfigurationError(JvmsError):
    """The configuration file exists but its content cannot be parsed."""

    code = "CONFIG_MALFORMED"


class InvalidConfigurationError(JvmsError):
    """A configuration invariant is violated.

    ``entity`` names the toolchain or override at fault, when there is one.
    """

    code = "INVALID_CONFIGURATION"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        entity: str | None = None,
        **detail: Any,
    ) -> None:
        if entity is not None:
            detail["entity"] = entity
        super().__init__(message, code=code, **detail)
        self.entity = entity


class ToolchainNotFoundError(InvalidConfigurationError):
    """No override matched and no default toolchain is configured."""

    code = "NO_TOOLCHAIN"


class DelegateLaunchError(JvmsError):
    """The real Java tool could not be started."""

    code = "DELEGATE_LAUNCH"


class InstallError(JvmsError):
    """Copying or linking binaries into an installation directory failed."""

    code = "INSTALL_FAILED"
