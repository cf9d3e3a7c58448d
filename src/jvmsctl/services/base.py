"""BaseService — shared plumbing for the management services.

Each service receives an :class:`Installation` and works through its
:class:`ConfigurationStore`: load fresh, mutate in memory, save (validated
unless forced). A :class:`JvmsError` raised along the way becomes a failed
ServiceResult via :func:`run_action`.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from jvmsctl.domain.errors import JvmsError
from jvmsctl.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from collections.abc import Callable

    from jvmsctl.domain.configuration import Configuration
    from jvmsctl.infrastructure.installation import Installation

logger = logging.getLogger(__name__)

UNKNOWN_TOOLCHAIN = "UNKNOWN_TOOLCHAIN"


def run_action(op: str, action: Callable[[], ServiceResult]) -> ServiceResult:
    """Run *action*, converting a JvmsError into a failed result."""
    try:
        return action()
    except JvmsError as exc:
        logger.debug("%s failed: %s", op, exc.message)
        return ServiceResult(ok=False, op=op, error=ServiceError.from_exception(exc))


class BaseService:
    """Base for services operating on one installation's configuration.

    Usage::

        class ToolchainService(BaseService):
            def remove(self, name: str, *, force: bool = False) -> ServiceResult:
                return self._run("toolchain_remove", lambda: self._remove(name, force))
    """

    def __init__(self, installation: Installation) -> None:
        self._installation = installation

    def _load(self) -> Configuration:
        return self._installation.store.load()

    def _save(self, config: Configuration, *, force: bool) -> None:
        self._installation.store.save(config, skip_validation=force)

    def _run(self, op: str, action: Callable[[], ServiceResult]) -> ServiceResult:
        return run_action(op, action)

    @staticmethod
    def _unknown_toolchain(op: str, name: str) -> ServiceResult:
        return ServiceResult.failure(
            op, UNKNOWN_TOOLCHAIN, f"No toolchain found for name: {name}", name=name
        )
