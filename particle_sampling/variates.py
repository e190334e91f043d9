"""
Variate forms for particle distributions.

A variate form tells what one sample of a distribution looks like:

    SingleParticleVariate   one ParticleStateful
    MultiParticleVariate    fixed-length array of ParticleStateful
    ProcessLikeVariate      one PhaseSpacePoint

The forms are marker classes. They are attached to a distribution class and
never instantiated.
"""


class QEDlikeVariate:
    """Root of all variate forms used by particle distributions."""

    def __new__(cls, *args, **kwargs):
        raise TypeError(f"{cls.__name__} is a variate marker and cannot be instantiated")


class ParticleLikeVariate(QEDlikeVariate):
    """
    Variate form for samples made of particles.

    ``ndims`` is the number of axes in the space of particles:
    0 for a single particle, 1 for multiple particles.
    """

    ndims: int = -1


class SingleParticleVariate(ParticleLikeVariate):
    ndims = 0


class MultiParticleVariate(ParticleLikeVariate):
    ndims = 1


class ProcessLikeVariate(QEDlikeVariate):
    """Variate form for whole scattering processes (phase-space points)."""
