"""BaseService — common foundation for drillctl services.

Every service receives the resolved :class:`DrillSettings` at
construction time and reads its own config section from it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from drillctl.config.settings import DrillSettings


class BaseService:
    """Base for all service-layer classes.

    Usage::

        class GraphService(BaseService):
            def build(self, edges) -> ServiceResult:
                separator = self._settings.graph.separator
                ...
    """

    def __init__(self, settings: DrillSettings | None = None) -> None:
        if settings is None:
            from drillctl.config.settings import DrillSettings

            settings = DrillSettings()
        self._settings = settings
