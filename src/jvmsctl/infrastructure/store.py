"""ConfigurationStore — load and persist ``jvms.conf``.

The file is JSON. A missing file reads as an empty configuration; a file
that exists but cannot be read or parsed is a hard failure, never treated
as absent.

Writes go to a temp file in the same directory and are moved into place
with :func:`os.replace`, so a crash mid-write leaves the previous file
intact. Concurrent writers are not coordinated: the last replace wins.
"""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path

from pydantic import ValidationError

from jvmsctl.domain.configuration import Configuration
from jvmsctl.domain.errors import ConfigurationIOError, MalformedConfigurationError

CONFIG_FILENAME = "jvms.conf"

logger = logging.getLogger(__name__)


class ConfigurationStore:
    """Reads and writes a :class:`Configuration` at a fixed path."""

    def __init__(self, path: Path) -> None:
        self.path = path

    def load(self) -> Configuration:
        """Return the persisted configuration, or an empty one if absent.

        Raises:
            ConfigurationIOError: The file exists but could not be read.
            MalformedConfigurationError: The content is not a valid config.
        """
        if not self.path.exists():
            logger.debug("No configuration at %s, starting empty", self.path)
            return Configuration()

        try:
            # Bytes, so invalid UTF-8 surfaces as a ValidationError.
            raw = self.path.read_bytes()
        except OSError as exc:
            msg = f"Failed to open configuration file {self.path}: {exc}"
            raise ConfigurationIOError(msg, path=str(self.path)) from exc

        try:
            config = Configuration.model_validate_json(raw)
        except ValidationError as exc:
            msg = f"Failed to parse configuration file {self.path}: {exc}"
            raise MalformedConfigurationError(msg, path=str(self.path)) from exc

        logger.debug(
            "Loaded configuration from %s (%d toolchains, %d overrides)",
            self.path,
            len(config.toolchains),
            len(config.overrides),
        )
        return config

    def save(self, config: Configuration, *, skip_validation: bool = False) -> None:
        """Persist *config*, validating it first unless *skip_validation*.

        Raises:
            InvalidConfigurationError: Validation failed; nothing was written.
            ConfigurationIOError: The file could not be written.
        """
        if not skip_validation:
            config.validate_configuration()

        content = config.model_dump_json(indent=2)
        directory = self.path.parent
        tmp: str | None = None
        try:
            directory.mkdir(parents=True, exist_ok=True)
            fd, tmp = tempfile.mkstemp(
                prefix=f".{CONFIG_FILENAME}.", suffix=".tmp", dir=directory
            )
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(content)
                fh.flush()
                os.fsync(fh.fileno())
            os.replace(tmp, self.path)
            tmp = None
        except OSError as exc:
            msg = f"Failed to write configuration file {self.path}: {exc}"
            raise ConfigurationIOError(msg, path=str(self.path)) from exc
        finally:
            if tmp is not None:
                Path(tmp).unlink(missing_ok=True)

        logger.debug("Saved configuration to %s", self.path)
