"""
Small helpers shared by the game modules: positive modulo, random indices
and the weighted random picker used to generate grid cells.

All randomness comes from the module-level `random` source, so tests can
re-seed it with random.seed().
"""
import random
from typing import Any, Dict, List, Optional, Sequence


def modulo(n: int, m: int) -> int:
    """Positive modulo: the result is always in [0, m) for m > 0."""
    return ((n % m) + m) % m


def rand_int_between(low: int, high: int) -> int:
    """Random integer in [low, high], both ends included."""
    return random.randint(low, high)


def rand_index(seq: Sequence) -> int:
    """Random valid index into seq."""
    return rand_int_between(0, len(seq) - 1)


def prepare_weights(options: Sequence[Any]) -> List[Dict[str, Any]]:
    """
    Parse options into weighted dicts.

    Anything that is not a dict is wrapped as {'val': option}. Entries with
    no 'prob' share the probability left over by the entries that have one,
    i.e. max(0, 1 - sum(given probs)) split equally.

    Example:
        >>> prepare_weights([{'val': 'a', 'prob': 0.4}, 'b', 'c'])
        [{'val': 'a', 'prob': 0.4}, {'val': 'b', 'prob': 0.3}, {'val': 'c', 'prob': 0.3}]
    """
    parsed = [dict(opt) if isinstance(opt, dict) else {'val': opt} for opt in options]

    missing = [opt for opt in parsed if opt.get('prob') is None]
    if not missing:
        return parsed

    given = sum(opt['prob'] for opt in parsed if opt.get('prob') is not None)
    share = max(0.0, 1.0 - given) / len(missing)

    for opt in missing:
        opt['prob'] = share
    return parsed


def normalise_weights(options: Sequence[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """Rescale probabilities so they sum to 1, keeping their relative weights."""
    total = sum(opt.get('prob') or 0.0 for opt in options)
    if total <= 0:
        return [dict(opt) for opt in options]

    scale = 1.0 / total
    return [{**opt, 'prob': (opt.get('prob') or 0.0) * scale} for opt in options]


def pick_rand_weighted(options: Sequence[Any], prepare: bool = True,
                       normalise: bool = False) -> Optional[Dict[str, Any]]:
    """
    Randomly pick one option according to its 'prob' weight.

    A single r is drawn from [0, 1) and the options are walked in order,
    each one covering the interval (threshold, threshold + prob]. The first
    option whose interval contains r is returned.

    Args:
        options: Dicts carrying an optional 'prob' in [0, 1], or raw values
        prepare: Wrap raw values and fill in missing probabilities first
        normalise: Rescale the probabilities to sum to exactly 1

    Returns:
        The chosen option dict, or None when no interval contains r
        (all-zero weights, weights summing below r, or r == 0).
    """
    r = random.random()

    weighted = prepare_weights(options) if prepare else list(options)
    if normalise:
        weighted = normalise_weights(weighted)

    threshold = 0.0
    for opt in weighted:
        p = opt.get('prob') or 0.0
        if threshold < r <= threshold + p:
            return opt
        threshold += p

    return None
