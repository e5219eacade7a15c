"""
Sequence generators feeding the sorting algorithms.

Convenience producers:
- ascending(n)                       -> [1, 2, ..., n]
- uniform_random(n, max_value, seed) -> n draws from [1, max_value], reproducible
- shuffled(seq, rng)                 -> new list holding a random permutation of seq

Spec-driven producer (used by the experiment runner):
    make_dataset(n: int, spec: dict, rng: numpy.random.Generator) -> list[int]

Supported dists:
- "ascending":     [1, ..., n]; params and RNG unused.
- "random":        uniform integers over params["range"] (inclusive),
                   default [1, n].
- "reversed":      [n, ..., 1]; params and RNG unused.
- "nearly_sorted": start from [1, ..., n] then perform ceil(swap_frac * n)
                   random index swaps using the provided RNG.
- "few_uniques":   choose up to k distinct integers (uniform over an inclusive
                   range, default [1, n]), then fill the array by sampling them.
- "all_equal":     n copies of params["value"] (default 1).

Conventions:
- Every range in params is **inclusive** on both ends.
- Returns a Python `list[int]` (algorithms stay NumPy-agnostic).
- The caller supplies the RNG (for reproducibility across runs where applicable).
"""

from __future__ import annotations

from typing import Any, Dict, List, Sequence, Tuple

import numpy as np

SUPPORTED_DISTS = {
    "ascending",
    "random",
    "reversed",
    "nearly_sorted",
    "few_uniques",
    "all_equal",
}
__all__ = [
    "SUPPORTED_DISTS",
    "make_dataset",
    "ascending",
    "uniform_random",
    "shuffled",
]


def ascending(n: int) -> List[int]:
    """Return the identity permutation [1, ..., n]."""
    _validate_n(n)
    return list(range(1, n + 1))


def uniform_random(n: int, max_value: int, seed: int) -> List[int]:
    """
    Return `n` integers drawn uniformly from [1, max_value].

    The same (n, max_value, seed) always produces the same list.
    """
    _validate_n(n)
    if not _is_int_like(max_value) or max_value < 1:
        raise ValueError(f"max_value must be an integer >= 1; got {max_value!r}")
    rng = np.random.default_rng(seed)
    return make_dataset(n, {"dist": "random", "params": {"range": [1, int(max_value)]}}, rng)


def shuffled(seq: Sequence[Any], rng: np.random.Generator) -> List[Any]:
    """Return a new list with the elements of `seq` in a random order."""
    items = list(seq)
    order = rng.permutation(len(items))
    return [items[int(i)] for i in order]


def make_dataset(n: int, spec: Dict[str, Any], rng: np.random.Generator) -> List[int]:
    """
    Generate an integer dataset according to `spec`, using the provided RNG.

    Parameters
    ----------
    n : int
        Number of elements to generate. Must be >= 0.
    spec : dict
        Distribution specification, e.g.

            {"dist": "random", "params": {"range": [1, 1000]}}
            {"dist": "nearly_sorted", "params": {"swap_frac": 0.05}}
            {"dist": "few_uniques", "params": {"k": 8}}
            {"dist": "all_equal", "params": {"value": 7}}
            {"dist": "reversed"}

    rng : numpy.random.Generator
        Random number generator owned by the caller (seeded upstream).
        Deterministic dists ("ascending", "reversed", "all_equal") leave it untouched.

    Returns
    -------
    list[int]
        A list of length `n` containing integers consistent with `spec`.

    Raises
    ------
    ValueError
        If inputs are invalid or if the distribution is unsupported.
    """
    _validate_n(n)

    if not isinstance(spec, dict):
        raise ValueError("spec must be a dict")

    dist = spec.get("dist", None)
    if dist not in SUPPORTED_DISTS:
        raise ValueError(
            f"Unsupported dataset dist: {dist!r}. Supported: {sorted(SUPPORTED_DISTS)}"
        )

    params = spec.get("params") or {}
    if not isinstance(params, dict):
        raise ValueError(f"{dist}.params must be a dict")

    if dist == "ascending":
        return list(range(1, n + 1))

    if dist == "reversed":
        return list(range(n, 0, -1))

    if dist == "all_equal":
        value = params.get("value", 1)
        if not _is_int_like(value):
            raise ValueError(f"all_equal.params.value must be an integer; got {value!r}")
        return [int(value)] * n

    if dist == "random":
        lo, hi = _parse_optional_inclusive_range(params, default=(1, max(n, 1)))
        if n == 0:
            return []
        # np.random.Generator.integers is half-open [low, high) by default.
        arr = rng.integers(lo, hi + 1, size=n, dtype=np.int64)
        return arr.tolist()

    if dist == "nearly_sorted":
        swap_frac = _parse_swap_frac(params)
        arr = list(range(1, n + 1))
        if n == 0:
            return arr
        # ceil so a small nonzero frac makes at least one swap
        num_swaps = int(np.ceil(swap_frac * n))
        if num_swaps <= 0:
            return arr
        idxs = rng.integers(0, n, size=2 * num_swaps)
        for k in range(num_swaps):
            i = int(idxs[2 * k])
            j = int(idxs[2 * k + 1])
            # i == j is a no-op; effective swaps may be fewer than requested
            arr[i], arr[j] = arr[j], arr[i]
        return arr

    if dist == "few_uniques":
        k = _parse_k(params)
        lo, hi = _parse_optional_inclusive_range(params, default=(1, max(n, 1)))
        if n == 0:
            return []
        span = hi - lo + 1
        actual_k = int(min(k, n, span))

        # Draw from `rng` (not the random module) so determinism stays tied to it.
        chosen: List[int] = []
        seen = set()
        while len(chosen) < actual_k:
            need = actual_k - len(chosen)
            batch = rng.integers(lo, hi + 1, size=need * 2)
            for v in map(int, batch):
                if v not in seen:
                    seen.add(v)
                    chosen.append(v)
                    if len(chosen) == actual_k:
                        break

        idxs = rng.integers(0, actual_k, size=n)
        return [chosen[int(t)] for t in idxs]

    raise ValueError(f"Unhandled dataset dist: {dist!r}")


# ------------------------- helpers ------------------------- #


def _validate_n(n: int) -> None:
    if not _is_int_like(n) or isinstance(n, bool):
        raise ValueError("n must be an int")
    if n < 0:
        raise ValueError("n must be nonnegative")


def _parse_optional_inclusive_range(
    params: Dict[str, Any], default: Tuple[int, int]
) -> Tuple[int, int]:
    """
    Parse an optional inclusive integer range from params.
    If not present, return `default`.
    """
    if "range" not in params:
        return default
    spec = params["range"]
    if not isinstance(spec, (list, tuple)) or len(spec) != 2:
        raise ValueError("params.range must be a 2-element list/tuple [min, max]")
    lo_raw, hi_raw = spec
    if not _is_int_like(lo_raw) or not _is_int_like(hi_raw):
        raise ValueError("params.range values must be integers")
    lo, hi = int(lo_raw), int(hi_raw)
    if lo > hi:
        raise ValueError(f"params.range invalid: min > max ({lo} > {hi})")
    return lo, hi


def _parse_swap_frac(params: Dict[str, Any]) -> float:
    """
    Parse and validate swap_frac in [0.0, 1.0] for nearly_sorted.
    Default to 0.05 if not provided.
    """
    val = params.get("swap_frac", 0.05)
    try:
        x = float(val)
    except (TypeError, ValueError) as e:
        raise ValueError(
            f"nearly_sorted.params.swap_frac must be a float in [0.0, 1.0]; got {val!r}"
        ) from e
    if not (0.0 <= x <= 1.0):
        raise ValueError(
            f"nearly_sorted.params.swap_frac must be in [0.0, 1.0]; got {x}"
        )
    return x


def _parse_k(params: Dict[str, Any]) -> int:
    """k (desired #unique values) for few_uniques: an integer >= 1."""
    if "k" not in params:
        raise ValueError("few_uniques.params.k must be provided (int >= 1)")
    k = params["k"]
    if not isinstance(k, int) or k < 1:
        raise ValueError(f"few_uniques.params.k must be an integer >= 1; got {k!r}")
    return k


def _is_int_like(x: Any) -> bool:
    # Accept Python ints and NumPy integer types
    return isinstance(x, (int, np.integer))
