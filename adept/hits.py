"""Hits scored in sensitive volumes and the detector that fills them."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from adept.geometry import LogicalVolume, PhysicalVolume, ScoringLayout
from adept.units import MeV

COLLECTION_NAME = "hits"

HIT_TYPE_UNSET = -1
HIT_TYPE_FULL_SIM = 0
HIT_TYPE_FAST_SIM = 1


@dataclass
class SimpleHit:
    """Energy deposited in one sensitive placement during an event.

    ``time`` is the earliest global time of a contributing step (-1 while
    unset); ``type`` is 0 for full simulation and 1 for fast simulation.
    """

    edep: float = 0.0
    pos: tuple[float, float, float] = (0.0, 0.0, 0.0)
    time: float = -1.0
    type: int = HIT_TYPE_UNSET
    physical_volume_name: str = ""

    def add_edep(self, edep: float) -> None:
        """Add ``edep`` to the energy deposited so far."""
        self.edep += edep

    def __str__(self) -> str:
        return f"\tHit {self.edep / MeV:g} MeV"


class SensitiveDetector:
    """Scores energy deposits with one hit per sensitive physical volume."""

    def __init__(
        self,
        name: str,
        sensitive_physical_volumes: Iterable[PhysicalVolume] = (),
        sensitive_logical_volumes: Iterable[LogicalVolume] = (),
    ) -> None:
        self.name = name
        self.collection_name = COLLECTION_NAME
        self.sensitive_physical_volumes: list[PhysicalVolume] = list(
            dict.fromkeys(sensitive_physical_volumes)
        )
        self.sensitive_logical_volumes: list[LogicalVolume] = list(
            dict.fromkeys(sensitive_logical_volumes)
        )
        self.scoring_map: dict[int, int] = {}
        self.hits: list[SimpleHit] = []
        self._num_sensitive = 0

    @classmethod
    def from_layout(cls, name: str, layout: ScoringLayout) -> SensitiveDetector:
        """Build a detector scoring the sensitive volumes found in a geometry."""
        return cls(name, layout.sensitive_physical_volumes, layout.sensitive_logical_volumes)

    def initialize(self) -> list[SimpleHit]:
        """Start a new hits collection with one empty hit per sensitive volume."""
        self.hits = []
        for hit_id, volume in enumerate(self.sensitive_physical_volumes):
            self.hits.append(SimpleHit(physical_volume_name=volume.name))
            self.scoring_map.setdefault(volume.instance_id, hit_id)
        self._num_sensitive = len(self.sensitive_physical_volumes)
        return self.hits

    def process_hits(self, edep: float, volume: PhysicalVolume, global_time: float) -> bool:
        """Score a step depositing ``edep`` in ``volume`` at ``global_time``.

        A volume not in the scoring map is scored into hit 0.
        """
        if edep == 0.0:
            return True

        hit_id = self.scoring_map.setdefault(volume.instance_id, 0)
        hit = self.retrieve_and_setup_hit(hit_id)

        hit.add_edep(edep)
        if hit.time == -1 or hit.time > global_time:
            hit.time = global_time
        if hit.type != HIT_TYPE_FAST_SIM:
            hit.type = HIT_TYPE_FULL_SIM
        return True

    def retrieve_and_setup_hit(self, hit_id: int) -> SimpleHit:
        """Return the hit with index ``hit_id`` of the current collection."""
        if not 0 <= hit_id < min(len(self.hits), self._num_sensitive or len(self.hits)):
            raise IndexError(
                f"hit {hit_id} is out of range: the hit collection holds {len(self.hits)} hits, "
                "fewer than the sensitive volumes set up in the detector construction"
            )
        return self.hits[hit_id]