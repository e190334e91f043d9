"""
Vectorized weighting over arrays of distributions and samples.

Distributions are atomic: an array of them broadcasts element-wise, while a
single distribution broadcasts like a scalar. Multi-particle samples keep
their particle axis as the trailing core axis.
"""

from __future__ import annotations
import logging

import numpy as np

from .particles import ParticleStateful, PhaseSpacePoint
from .variates import MultiParticleVariate

logger = logging.getLogger(__name__)


def _scalar(obj) -> np.ndarray:
    out = np.empty((), dtype=object)
    out[()] = obj
    return out


def as_broadcastable(obj) -> np.ndarray:
    """Wrap atomic objects into 0-d object arrays; turn containers into object arrays."""
    if getattr(obj, "is_atomic", False) or isinstance(obj, (ParticleStateful, PhaseSpacePoint)):
        return _scalar(obj)
    if isinstance(obj, np.ndarray):
        return obj
    return np.array(obj, dtype=object)


def weights(dists, samples) -> np.ndarray:
    """
    Weight of every sample under the matching distribution.

    Args:
        dists: a distribution or an array-like of distributions sharing one
            variate form
        samples: a sample or an array of samples, as returned by ``rand``

    Returns:
        float array with the broadcast shape of ``dists`` and the sample grid
    """
    d_arr = as_broadcastable(dists)
    forms = {d.variate_form for d in d_arr.flat}
    if len(forms) > 1:
        raise ValueError(f"Distributions must share one variate form, got {sorted(f.__name__ for f in forms)}")

    s_arr = as_broadcastable(samples)
    core = 1 if forms == {MultiParticleVariate} else 0
    if s_arr.ndim < core:
        raise ValueError("Multi-particle samples need a trailing particle axis")
    grid = s_arr.shape[:s_arr.ndim - core]
    core_shape = s_arr.shape[s_arr.ndim - core:]

    shape = np.broadcast_shapes(d_arr.shape, grid)
    d_b = np.broadcast_to(d_arr, shape)
    s_b = np.broadcast_to(s_arr, shape + core_shape)
    logger.debug(f"Weighting {shape} samples")

    out = np.empty(shape, dtype=float)
    for idx in np.ndindex(shape):
        out[idx] = d_b[idx].weight(s_b[idx])
    return out
