"""
Sampling and weighting protocol for particle distributions.

Usage:
    import numpy as np
    from particle_sampling import rand, weight

    rng = np.random.default_rng(42)
    x = rand(rng, dist)             # one sample
    xs = rand(rng, dist, (1000,))   # array of samples
    w = weight(dist, x)
"""
from .variates import (
    QEDlikeVariate,
    ParticleLikeVariate,
    SingleParticleVariate,
    MultiParticleVariate,
    ProcessLikeVariate,
)
from .errors import (
    SamplingError,
    InvalidInputTypeError,
    InvalidInputError,
    MissingCapabilityError,
)
from .kinematics import FourVector
from .particles import Particle, ParticleDirection, ParticleStateful, PhaseSpacePoint
from .sampleable import (
    ParticleSampleable,
    SingleParticleDistribution,
    ProcessDistribution,
    rand,
    weight,
    max_weight,
    is_exact,
    eltype,
    momentum_type,
)
from .multi_particle import MultiParticleDistribution, particles, particle_directions, size

__all__ = [
    "QEDlikeVariate",
    "ParticleLikeVariate",
    "SingleParticleVariate",
    "MultiParticleVariate",
    "ProcessLikeVariate",
    "SamplingError",
    "InvalidInputTypeError",
    "InvalidInputError",
    "MissingCapabilityError",
    "FourVector",
    "Particle",
    "ParticleDirection",
    "ParticleStateful",
    "PhaseSpacePoint",
    "ParticleSampleable",
    "SingleParticleDistribution",
    "ProcessDistribution",
    "MultiParticleDistribution",
    "rand",
    "weight",
    "max_weight",
    "is_exact",
    "eltype",
    "momentum_type",
    "particles",
    "particle_directions",
    "size",
]

__version__ = "0.1.0"
