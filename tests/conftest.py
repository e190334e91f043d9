"""Shared fixtures: a seeded RNG and a few fixed particle species."""

import sys
from pathlib import Path

import numpy as np
import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from particle_sampling import Particle


@pytest.fixture
def rng():
    return np.random.default_rng(42)


@pytest.fixture
def electron():
    return Particle("e-", 0.51099895, charge=-1.0, spin=0.5, pdg_id=11)


@pytest.fixture
def photon():
    return Particle("gamma", 0.0, charge=0.0, spin=1.0, pdg_id=22)


@pytest.fixture
def muon():
    return Particle("mu-", 105.6583755, charge=-1.0, spin=0.5, pdg_id=13)
