"""
Distributions over several particles at once.

A multi-particle distribution produces a fixed-length array of
``ParticleStateful`` per sample. Subclasses implement:

    particles()              tuple of Particle descriptors, in sample order
    _rand_into(rng, out)     fill a length-len(d) object buffer with one sample

and the usual ``is_exact``, ``_weight`` and ``max_weight``. Overriding
``particle_directions()`` is optional.
"""

from __future__ import annotations
from abc import abstractmethod
from typing import Tuple

import numpy as np

from .particles import Particle, ParticleDirection, ParticleStateful
from .sampleable import ParticleSampleable
from .variates import MultiParticleVariate


class MultiParticleDistribution(ParticleSampleable[MultiParticleVariate]):

    variate_form = MultiParticleVariate

    @abstractmethod
    def particles(self) -> Tuple[Particle, ...]:
        """Particles associated with this distribution, in sample order."""

    def particle_directions(self) -> Tuple[ParticleDirection, ...]:
        """Direction of each particle. Default: all unknown."""
        return (ParticleDirection.UNKNOWN,) * len(self)

    @abstractmethod
    def _rand_into(self, rng: np.random.Generator, out: np.ndarray) -> None:
        """Write one sample into the 1-d object buffer ``out`` of length ``len(self)``."""

    @property
    def eltype(self) -> type:
        return ParticleStateful

    def __len__(self):
        return len(self.particles())

    @property
    def size(self) -> Tuple[int]:
        return (len(self),)

    # one sample is a buffer of len(self) particles, so batches carry it as the last axis

    def _rand(self, rng: np.random.Generator) -> np.ndarray:
        out = np.empty(len(self), dtype=object)
        self._rand_into(rng, out)
        return out

    def _batch_shape(self, dims):
        return dims + self.size

    def _check_batch_buffer(self, out):
        if out.ndim < 1 or out.shape[-1] != len(self):
            raise ValueError(
                f"Output buffer for {type(self).__name__} must have trailing axis "
                f"of length {len(self)}, got shape {out.shape}"
            )

    def _rand_batch_into(self, rng: np.random.Generator, out: np.ndarray) -> np.ndarray:
        for idx in np.ndindex(out.shape[:-1]):
            self._rand_into(rng, out[idx])
        return out


def particles(d: MultiParticleDistribution) -> Tuple[Particle, ...]:
    return d.particles()


def particle_directions(d: MultiParticleDistribution) -> Tuple[ParticleDirection, ...]:
    return d.particle_directions()


def size(d: MultiParticleDistribution) -> Tuple[int]:
    return d.size
