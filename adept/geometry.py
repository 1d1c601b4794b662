"""Geometry tree and discovery of the volumes that score energy deposits.

A geometry is a tree of physical volumes (placements).  Each placement
refers to a logical volume, which carries auxiliary information and the
placements of its own daughters.  A logical volume may be placed many times,
so one physical volume can be reached along several paths (touchables).
"""

from __future__ import annotations

import itertools
from dataclasses import dataclass, field

SENSITIVE_MARKER = "SensDet"

_instance_ids = itertools.count()


@dataclass(frozen=True)
class AuxiliaryInfo:
    """An auxiliary entry attached to a logical volume, as found in GDML."""

    type: str
    value: str = ""
    unit: str = ""


@dataclass(eq=False)
class LogicalVolume:
    """A volume shape with its auxiliary information and daughter placements."""

    name: str
    daughters: list[PhysicalVolume] = field(default_factory=list)
    auxiliary: list[AuxiliaryInfo] = field(default_factory=list)


@dataclass(eq=False)
class PhysicalVolume:
    """A placement of a logical volume; identity distinguishes placements."""

    name: str
    logical: LogicalVolume
    instance_id: int = field(default_factory=lambda: next(_instance_ids))


@dataclass
class ScoringLayout:
    """Sensitive volumes found in a geometry and counts of the touchables seen."""

    sensitive_physical_volumes: list[PhysicalVolume] = field(default_factory=list)
    sensitive_logical_volumes: list[LogicalVolume] = field(default_factory=list)
    num_touchables: int = 0
    num_sensitive_touchables: int = 0


def _is_marked_sensitive(logical: LogicalVolume) -> bool:
    return any(entry.type == SENSITIVE_MARKER for entry in logical.auxiliary)


def find_sensitive_volumes(world: PhysicalVolume, all_sensitive: bool = False) -> ScoringLayout:
    """Walk every touchable below ``world`` and collect the sensitive volumes.

    A volume is sensitive when its logical volume has an auxiliary entry of
    type ``SensDet``, or always when ``all_sensitive`` is true.  Each physical
    and logical volume is recorded once, in the order first reached by a
    depth-first walk; the touchable counts include every path.
    """
    layout = ScoringLayout()
    seen_physical: set[int] = set()
    seen_logical: set[int] = set()

    pending = [world]
    while pending:
        placement = pending.pop()
        logical = placement.logical
        layout.num_touchables += 1

        if all_sensitive or _is_marked_sensitive(logical):
            if id(placement) not in seen_physical:
                seen_physical.add(id(placement))
                layout.sensitive_physical_volumes.append(placement)
            if id(logical) not in seen_logical:
                seen_logical.add(id(logical))
                layout.sensitive_logical_volumes.append(logical)
            layout.num_sensitive_touchables += 1

        pending.extend(reversed(logical.daughters))

    return layout