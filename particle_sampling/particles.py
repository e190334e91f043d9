"""
Value types describing the samples drawn from particle distributions.

Units: MeV (natural units c = 1), matching :mod:`particle_sampling.kinematics`.
"""

from __future__ import annotations
import enum
from dataclasses import dataclass, field
from typing import Optional, Tuple

from particle import Particle as PDGParticle
from particle import PDGID

from .kinematics import FourVector


class ParticleDirection(enum.Enum):
    """Whether a particle enters or leaves a process."""

    INCOMING = "incoming"
    OUTGOING = "outgoing"
    UNKNOWN = "unknown"

    @property
    def is_known(self) -> bool:
        return self is not ParticleDirection.UNKNOWN


@dataclass(frozen=True)
class Particle:
    """
    Particle species descriptor.

    Only static properties of the species live here. The momentum and
    direction of a concrete particle are carried by :class:`ParticleStateful`.
    """

    name: str
    mass: float
    charge: float = 0.0
    spin: Optional[float] = None
    pdg_id: Optional[int] = None

    def __post_init__(self):
        if self.mass < 0:
            raise ValueError(f"Particle mass must be non-negative, got {self.mass}")

    @classmethod
    def from_pdgid(cls, pdg_id: int) -> "Particle":
        """Look up a species in the PDG tables shipped with ``particle``."""
        data = PDGParticle.from_pdgid(pdg_id)
        if data.mass is None:
            raise ValueError(f"No mass listed for PDG id {pdg_id} ({data.name})")
        return cls(
            name=data.name,
            mass=float(data.mass),
            charge=float(data.charge) if data.charge is not None else 0.0,
            spin=PDGID(pdg_id).J,
            pdg_id=int(pdg_id),
        )

    def __repr__(self):
        return f"Particle(name={self.name}, mass={self.mass:.4f} MeV/c², charge={self.charge:+g}e)"


@dataclass(frozen=True)
class ParticleStateful:
    """A particle species with a definite four-momentum and direction."""

    direction: ParticleDirection
    species: Particle
    momentum: FourVector

    @property
    def mass(self) -> float:
        return self.species.mass

    def is_on_shell(self, tol: float = 1e-6) -> bool:
        return abs(self.momentum.mass - self.species.mass) < tol


@dataclass(frozen=True)
class PhaseSpacePoint:
    """
    Kinematic configuration of a whole scattering process.

    ``incoming`` and ``outgoing`` keep the order in which the process lists
    its particles.
    """

    incoming: Tuple[ParticleStateful, ...] = field(default_factory=tuple)
    outgoing: Tuple[ParticleStateful, ...] = field(default_factory=tuple)

    def __post_init__(self):
        object.__setattr__(self, "incoming", tuple(self.incoming))
        object.__setattr__(self, "outgoing", tuple(self.outgoing))

    def momenta(self, direction: ParticleDirection) -> Tuple[FourVector, ...]:
        if direction is ParticleDirection.INCOMING:
            return tuple(p.momentum for p in self.incoming)
        if direction is ParticleDirection.OUTGOING:
            return tuple(p.momentum for p in self.outgoing)
        raise ValueError(f"Phase-space momenta need a known direction, got {direction}")

    def __len__(self):
        return len(self.incoming) + len(self.outgoing)
