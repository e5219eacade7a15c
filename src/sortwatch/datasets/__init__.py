"""
Datasets package public API.

Re-export the sequence generators so callers can write:
    from sortwatch.datasets import ascending, make_dataset, SUPPORTED_DISTS
"""

from .generators import SUPPORTED_DISTS, ascending, make_dataset, shuffled, uniform_random

__all__ = ["make_dataset", "SUPPORTED_DISTS", "ascending", "uniform_random", "shuffled"]
