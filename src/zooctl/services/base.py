"""BaseService — foundation for all zooctl services.

Every service receives the :class:`Zoo` it operates on and the run
settings.  The zoo's registries and ledger are the only shared state.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from zooctl.config.settings import ZooSettings

if TYPE_CHECKING:
    from zooctl.domain.zoo import Zoo


class BaseService:
    """Base for service-layer classes.

    Usage::

        class LoadService(BaseService):
            def load_animals(self, records: list[str]) -> ServiceResult:
                ...
                self._zoo.register_animal(animal)
    """

    def __init__(self, zoo: Zoo, settings: ZooSettings | None = None) -> None:
        self._zoo = zoo
        self._settings = settings if settings is not None else ZooSettings()

    def _banner(self, title: str) -> list[str]:
        """Separator plus ``***title***`` heading opening a log section."""
        return [self._settings.log.separator, f"***{title}***"]
