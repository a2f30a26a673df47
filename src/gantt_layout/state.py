# SPDX-License-Identifier: MIT

from typing import Iterable, Optional

from gantt_layout.model.entity_id import EntityId


class ProjectState:
    """
    Expand/collapse flags for project groups.

    Every project reads as expanded until it is toggled. Ids are recorded
    lazily the first time a layout pass observes them.
    """

    def __init__(self, initial: Optional[dict[EntityId, bool]] = None) -> None:
        self._expanded: dict[EntityId, bool] = dict(initial or {})

    def observe(self, project_ids: Iterable[EntityId]) -> None:
        for project_id in project_ids:
            if project_id not in self._expanded:
                self._expanded[project_id] = True

    def is_expanded(self, project_id: EntityId) -> bool:
        return self._expanded.get(project_id, True)

    def toggle(self, project_id: EntityId) -> bool:
        expanded = not self.is_expanded(project_id)
        self._expanded[project_id] = expanded
        return expanded

    def snapshot(self) -> dict[EntityId, bool]:
        return dict(self._expanded)

    def __contains__(self, project_id: object) -> bool:
        return project_id in self._expanded
