"""
Particle-sampleable interface.

A particle-sampleable is any distribution or sampler that draws random
particle configurations and reports the weight of a given configuration.

To implement the interface, a subclass of one of the variate-specific bases
(:class:`SingleParticleDistribution`, :class:`ProcessDistribution` or
:class:`~particle_sampling.multi_particle.MultiParticleDistribution`)
provides:

    eltype            type of one sample (innermost type for multi-particle)
    is_exact()        whether every producible sample has weight 1
    _weight(x)        raw weight of x, no input validation
    max_weight()      upper bound of _weight over the support
    _rand(rng)        one sample (single-particle and process variates)
    _rand_into(rng, out)  fill one sample buffer (multi-particle variate)

Optional hooks, all defaulting to no-ops:

    _assert_valid_input_type(x)
    _assert_valid_input(x)
    _post_processing(x, result)
    _momentum_type()

A class missing any required member raises MissingCapabilityError when it is
instantiated.
"""

from __future__ import annotations
import logging
from abc import ABC, abstractmethod
from typing import Generic, Optional, Tuple, TypeVar, Union

import numpy as np

from .errors import MissingCapabilityError, SamplingError
from .kinematics import FourVector
from .variates import ProcessLikeVariate, QEDlikeVariate, SingleParticleVariate

logger = logging.getLogger(__name__)

V = TypeVar("V", bound=QEDlikeVariate)

Dims = Union[int, Tuple[int, ...]]


def _is_count(n) -> bool:
    return isinstance(n, (int, np.integer)) and not isinstance(n, (bool, np.bool_)) and n >= 0


def _as_dims(dims: Dims) -> Tuple[int, ...]:
    if _is_count(dims):
        return (int(dims),)
    if not isinstance(dims, (tuple, list)) or not all(_is_count(n) for n in dims):
        raise ValueError(f"Sample dimensions must be a non-negative integer or a tuple of them, got {dims!r}")
    return tuple(int(n) for n in dims)


class ParticleSampleable(ABC, Generic[V]):
    """
    Abstract base for sampleable particle distributions and samplers.

    ``variate_form`` is fixed by the variate-specific subclass and tells what a
    single sample looks like. Instances are treated as atomic values
    (``is_atomic``) by vectorized helpers, never as containers.
    """

    variate_form: type = QEDlikeVariate
    is_atomic: bool = True

    def __new__(cls, *args, **kwargs):
        missing = getattr(cls, "__abstractmethods__", frozenset())
        if missing:
            raise MissingCapabilityError(cls, missing)
        return super().__new__(cls)

    # ----------------------------- required ------------------------------

    @property
    @abstractmethod
    def eltype(self) -> type:
        """Type of one sample (the innermost type for multi-particle samples)."""

    @abstractmethod
    def is_exact(self) -> bool:
        """Whether the sampler follows ``weight`` exactly, i.e. every sample has weight 1."""

    @abstractmethod
    def _weight(self, x) -> float:
        """
        Raw weight of the sample ``x``.

        Must not validate ``x``; validation is done by :meth:`weight` before
        this is called.
        """

    @abstractmethod
    def max_weight(self) -> float:
        """Upper bound of the raw weight over the whole support."""

    @abstractmethod
    def _rand(self, rng: np.random.Generator):
        """Draw one sample from ``rng``."""

    # ----------------------------- optional ------------------------------

    def _assert_valid_input_type(self, x) -> None:
        """Raise InvalidInputTypeError if ``x`` has the wrong structure. Default: no check."""

    def _assert_valid_input(self, x) -> None:
        """Raise InvalidInputError if ``x`` is not physically acceptable. Default: no check."""

    def _post_processing(self, x, result):
        return result

    def _momentum_type(self) -> type:
        return FourVector

    # ----------------------------- pipeline ------------------------------

    def weight(self, x) -> float:
        """
        Weight of the sample ``x`` according to this distribution.

        The order of calls is fixed:

            _assert_valid_input_type -> _assert_valid_input -> _weight -> _post_processing

        so a rejected sample never reaches the raw weight computation.
        """
        try:
            self._assert_valid_input_type(x)
            self._assert_valid_input(x)
        except SamplingError as e:
            logger.debug(f"{type(self).__name__} rejected sample: {e}")
            raise
        raw_result = self._weight(x)
        return float(self._post_processing(x, raw_result))

    # ----------------------------- sampling ------------------------------

    def rand(self, rng: np.random.Generator, dims: Optional[Dims] = None):
        """
        Draw one sample, or an array of samples of shape ``dims``.

        Array entries are drawn in C index order from the same ``rng``.
        """
        if dims is None:
            return self._rand(rng)
        out = np.empty(self._batch_shape(_as_dims(dims)), dtype=object)
        logger.debug(f"Sampling {out.shape} from {type(self).__name__}")
        return self._rand_batch_into(rng, out)

    def rand_into(self, rng: np.random.Generator, out: np.ndarray) -> np.ndarray:
        """Fill the preallocated object array ``out`` with samples and return it."""
        if not isinstance(out, np.ndarray) or out.dtype != object:
            raise TypeError("out must be a numpy array of dtype object")
        self._check_batch_buffer(out)
        return self._rand_batch_into(rng, out)

    def _batch_shape(self, dims: Tuple[int, ...]) -> Tuple[int, ...]:
        return dims

    def _check_batch_buffer(self, out: np.ndarray) -> None:
        pass

    def _rand_batch_into(self, rng: np.random.Generator, out: np.ndarray) -> np.ndarray:
        for idx in np.ndindex(out.shape):
            out[idx] = self._rand(rng)
        return out

    def __repr__(self):
        return f"{type(self).__name__}(variate_form={self.variate_form.__name__})"


class SingleParticleDistribution(ParticleSampleable[SingleParticleVariate]):
    """Distribution whose samples are single ``ParticleStateful`` objects."""

    variate_form = SingleParticleVariate


class ProcessDistribution(ParticleSampleable[ProcessLikeVariate]):
    """Distribution whose samples are ``PhaseSpacePoint`` objects of a scattering process."""

    variate_form = ProcessLikeVariate


# ---------------------------------------------------------------------------
# Free-function call surface
# ---------------------------------------------------------------------------

def rand(rng: np.random.Generator, d: ParticleSampleable, dims: Optional[Dims] = None):
    return d.rand(rng, dims)


def weight(d: ParticleSampleable, x) -> float:
    return d.weight(x)


def max_weight(d: ParticleSampleable) -> float:
    return d.max_weight()


def is_exact(d: ParticleSampleable) -> bool:
    return d.is_exact()


def eltype(d: ParticleSampleable) -> type:
    return d.eltype


def momentum_type(d: ParticleSampleable) -> type:
    return d._momentum_type()
