"""
Threaded batch sampling.

Each chunk of the batch draws from its own child stream of a
``numpy.random.SeedSequence``, so the result depends on the seed and the
number of chunks but not on how many worker threads run them. It does not
reproduce the sequence of ``d.rand(rng, (n,))``.
"""

from __future__ import annotations
import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Optional, Union

import numpy as np

from .sampleable import ParticleSampleable

logger = logging.getLogger(__name__)

DEFAULT_CHUNKS = 8


def chunk_sizes(n: int, chunks: int) -> list[int]:
    """Split ``n`` samples into ``chunks`` contiguous, nearly equal parts."""
    base, extra = divmod(n, chunks)
    return [base + (1 if i < extra else 0) for i in range(chunks)]


def rand_parallel(
    seed: Union[int, np.random.SeedSequence, None],
    d: ParticleSampleable,
    n: int,
    n_workers: Optional[int] = None,
    chunks: Optional[int] = None,
) -> np.ndarray:
    """
    Draw ``n`` samples from ``d`` using a thread pool.

    Args:
        seed: root seed or SeedSequence; one child stream is spawned per chunk
        d: distribution to sample
        n: number of samples
        n_workers: thread count passed to ThreadPoolExecutor
        chunks: number of independent substreams (default DEFAULT_CHUNKS, at most n)

    Returns:
        array of shape ``(n,)``, or ``(n, len(d))`` for multi-particle distributions
    """
    if n < 0:
        raise ValueError(f"Number of samples must be non-negative, got {n}")
    if chunks is None:
        chunks = min(DEFAULT_CHUNKS, n)
    chunks = max(int(chunks), 1)

    root = seed if isinstance(seed, np.random.SeedSequence) else np.random.SeedSequence(seed)
    # children derived from spawn_key so the caller's SeedSequence is left untouched
    children = [
        np.random.SeedSequence(root.entropy, spawn_key=root.spawn_key + (i,), pool_size=root.pool_size)
        for i in range(chunks)
    ]
    rngs = [np.random.default_rng(child) for child in children]
    sizes = chunk_sizes(n, chunks)
    logger.debug(f"Sampling {n} from {type(d).__name__} in {chunks} chunks")

    with ThreadPoolExecutor(max_workers=n_workers) as executor:
        futures = [executor.submit(d.rand, rng, (k,)) for rng, k in zip(rngs, sizes)]
        parts = [fut.result() for fut in futures]
    return np.concatenate(parts, axis=0)
