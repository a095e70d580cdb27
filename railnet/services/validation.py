"""Station data-quality checks.

The graph keys stations by display name, so a name reused for two
different stations gets merged and a misspelt name gets split. This
pass reports such conflicts; it never corrects them.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from dataclasses import dataclass, field
from typing import Dict, Mapping, Set, Tuple

from ..domain.models import RailwayNetwork

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class StationConflicts:
    """Inconsistencies between station names and identifiers.

    Attributes:
        shared_names: Names used by more than one station id
        renamed_ids: Station ids that appear under more than one name
    """

    shared_names: Mapping[str, Tuple[int, ...]] = field(default_factory=dict)
    renamed_ids: Mapping[int, Tuple[str, ...]] = field(default_factory=dict)

    @property
    def is_clean(self) -> bool:
        return not self.shared_names and not self.renamed_ids


def find_station_conflicts(network: RailwayNetwork) -> StationConflicts:
    ids_by_name: Dict[str, Set[int]] = defaultdict(set)
    names_by_id: Dict[int, Set[str]] = defaultdict(set)

    for route in network.routes:
        for stop in route.stops:
            ids_by_name[stop.station_name].add(stop.station_id)
            names_by_id[stop.station_id].add(stop.station_name)

    conflicts = StationConflicts(
        shared_names={
            name: tuple(sorted(ids)) for name, ids in ids_by_name.items() if len(ids) > 1
        },
        renamed_ids={
            sid: tuple(sorted(names)) for sid, names in names_by_id.items() if len(names) > 1
        },
    )

    if not conflicts.is_clean:
        logger.warning(
            "Station name conflicts detected",
            extra={
                "network": network.network_name,
                "shared_names": len(conflicts.shared_names),
                "renamed_ids": len(conflicts.renamed_ids),
            },
        )
    return conflicts


def describe_conflicts(conflicts: StationConflicts) -> str:
    if conflicts.is_clean:
        return "No station conflicts found"
    lines = []
    for name, ids in conflicts.shared_names.items():
        lines.append(f"Station name {name!r} is used by ids {', '.join(map(str, ids))}")
    for sid, names in conflicts.renamed_ids.items():
        lines.append(f"Station id {sid} is named {', '.join(repr(n) for n in names)}")
    return "\n".join(lines)
