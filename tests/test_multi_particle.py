"""
Checks of the multi-particle distribution interface.

Add new tests here when multi-particle type checks get a concrete rule.
"""
import numpy as np
import pytest

from particle_sampling import (
    FourVector,
    MissingCapabilityError,
    MultiParticleDistribution,
    MultiParticleVariate,
    ParticleDirection,
    ParticleStateful,
    eltype,
    particle_directions,
    particles,
    rand,
    size,
    weight,
)
from particle_sampling.kinematics import isotropic_direction


# ------------------------------ Mock samplers ------------------------------
class AtRest(MultiParticleDistribution):
    """Every particle at rest; directions left unspecified."""

    def __init__(self, species):
        self._particles = tuple(species)
        self.n_fill_calls = 0

    def particles(self):
        return self._particles

    def is_exact(self):
        return True

    def max_weight(self):
        return 1.0

    def _weight(self, x):
        return 1.0

    def _rand_into(self, rng, out):
        self.n_fill_calls += 1
        for i, (species, direction) in enumerate(zip(self.particles(), self.particle_directions())):
            out[i] = ParticleStateful(direction, species, FourVector.from_mass(species.mass))


class IsotropicPair(MultiParticleDistribution):
    """Back-to-back outgoing pair with fixed momentum magnitude."""

    def __init__(self, species, p):
        self.species = species
        self.p = p

    def particles(self):
        return (self.species, self.species)

    def particle_directions(self):
        return (ParticleDirection.OUTGOING, ParticleDirection.OUTGOING)

    def is_exact(self):
        return True

    def max_weight(self):
        return 1.0

    def _weight(self, x):
        return 1.0

    def _rand_into(self, rng, out):
        p = self.p * isotropic_direction(rng)
        out[0] = ParticleStateful(ParticleDirection.OUTGOING, self.species, FourVector.from_mass(self.species.mass, *p))
        out[1] = ParticleStateful(ParticleDirection.OUTGOING, self.species, FourVector.from_mass(self.species.mass, *(-p)))


class NoFill(MultiParticleDistribution):
    def particles(self):
        return ()

    def is_exact(self):
        return True

    def max_weight(self):
        return 1.0

    def _weight(self, x):
        return 1.0


# ------------------------------ Structure ----------------------------------
def test_three_particle_scenario(electron, muon, photon):
    d = AtRest([electron, muon, photon])
    assert len(d) == 3
    assert size(d) == (3,)
    assert particles(d) == (electron, muon, photon)
    assert particle_directions(d) == (ParticleDirection.UNKNOWN,) * 3
    assert d.variate_form is MultiParticleVariate


@pytest.mark.parametrize("n", [0, 1, 2, 5])
def test_length_invariant(electron, n):
    d = AtRest([electron] * n)
    assert len(d) == len(d.particles()) == len(d.particle_directions()) == n
    assert all(not direction.is_known for direction in d.particle_directions())


def test_overridden_directions(electron):
    d = IsotropicPair(electron, 10.0)
    assert len(d) == len(d.particle_directions()) == 2
    assert d.particle_directions() == (ParticleDirection.OUTGOING, ParticleDirection.OUTGOING)


def test_default_eltype(electron):
    assert eltype(AtRest([electron])) is ParticleStateful


def test_missing_fill_primitive():
    with pytest.raises(MissingCapabilityError) as excinfo:
        NoFill()
    assert excinfo.value.missing == ("_rand_into",)


# ------------------------------- Sampling ----------------------------------
def test_single_sample_uses_fill_primitive(rng, electron, muon, photon):
    d = AtRest([electron, muon, photon])
    x = rand(rng, d)
    assert d.n_fill_calls == 1
    assert isinstance(x, np.ndarray)
    assert x.shape == (3,)
    assert [s.species for s in x] == [electron, muon, photon]
    assert weight(d, x) == 1.0


def test_batch_appends_particle_axis(rng, electron):
    d = IsotropicPair(electron, 10.0)
    out = rand(rng, d, (4,))
    assert out.shape == (4, 2)
    for pair in out:
        total = pair[0].momentum + pair[1].momentum
        assert total.magnitude == pytest.approx(0.0, abs=1e-9)
        assert all(s.is_on_shell() for s in pair)


def test_multi_dimensional_batch(rng, electron, muon, photon):
    d = AtRest([electron, muon, photon])
    out = rand(rng, d, (2, 3))
    assert out.shape == (2, 3, 3)
    assert d.n_fill_calls == 6
    assert all(isinstance(s, eltype(d)) for s in out.flat)


def test_rand_into_checks_particle_axis(rng, electron):
    d = IsotropicPair(electron, 1.0)
    with pytest.raises(ValueError):
        d.rand_into(rng, np.empty((3, 3), dtype=object))
    out = np.empty((3, 2), dtype=object)
    assert d.rand_into(rng, out) is out
    assert out[2, 1].species == electron
