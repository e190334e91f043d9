"""
Kinematics helpers for particle samples.

Units: MeV (natural units c = 1). Metric signature (+,-,-,-).
"""

from __future__ import annotations
import math
from dataclasses import dataclass
import numpy as np


# -----------------------------
# FourVector
# -----------------------------
@dataclass(frozen=True)
class FourVector:
    E: float
    px: float
    py: float
    pz: float

    @property
    def p(self) -> np.ndarray:
        return np.array([self.px, self.py, self.pz], dtype=float)

    @property
    def magnitude(self) -> float:
        return float(np.linalg.norm(self.p))

    @property
    def mass(self) -> float:
        m2 = self.dot(self)
        return math.sqrt(max(m2, 0.0))

    def dot(self, other: "FourVector") -> float:
        """Minkowski inner product."""
        return self.E * other.E - (self.px * other.px + self.py * other.py + self.pz * other.pz)

    def to_tuple(self) -> tuple:
        return (self.E, self.px, self.py, self.pz)

    @classmethod
    def from_mass(cls, mass: float, px: float = 0.0, py: float = 0.0, pz: float = 0.0) -> "FourVector":
        """On-shell four-momentum for the given rest mass and three-momentum."""
        E = math.sqrt(mass * mass + px * px + py * py + pz * pz)
        return cls(E, px, py, pz)

    def __add__(self, other: "FourVector") -> "FourVector":
        return FourVector(self.E + other.E, self.px + other.px, self.py + other.py, self.pz + other.pz)

    def __sub__(self, other: "FourVector") -> "FourVector":
        return FourVector(self.E - other.E, self.px - other.px, self.py - other.py, self.pz - other.pz)

    def __repr__(self) -> str:
        return f"FourVector(E={self.E:.6f}, px={self.px:.6f}, py={self.py:.6f}, pz={self.pz:.6f})"


# -----------------------------
# Isotropic direction
# -----------------------------
def isotropic_direction(rng: np.random.Generator) -> np.ndarray:
    """Unit 3-vector uniformly distributed on the sphere, drawn from ``rng``."""
    u = rng.uniform(-1.0, 1.0)
    phi = rng.uniform(0.0, 2.0 * math.pi)
    sint = math.sqrt(max(0.0, 1.0 - u * u))
    return np.array([sint * math.cos(phi), sint * math.sin(phi), u], dtype=float)
