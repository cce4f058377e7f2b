import os
import logging
from itertools import permutations

import numpy as np

from .geometry import generate_random_segments, segment_orientations, distances
from .heuristics import compute_path_cost, curve_path, heuristics_registry_dict
from .path_builder import build

logger = logging.getLogger(__name__)

INSERTION = "Insertion"
EXACT = "Exact"

# -------------------------
# EXACT REFERENCE (SMALL INSTANCES)
# -------------------------
def exact_path(candidates, starting_point=None, max_n=8):
    """
    Shortest oriented open path by brute force.

    Every permutation is tried; for a fixed permutation the best orientations
    follow from a dynamic program over (position, orientation). Only meant as
    a reference for small instances.

    Returns (order, orientations, cost).
    """
    n = len(candidates)
    if n > max_n:
        raise ValueError(f"exact_path is limited to {max_n} elements, got {n}")
    if n == 0:
        return np.array([], dtype=int), np.array([], dtype=int), 0.0

    start = None if starting_point is None else np.asarray(starting_point, dtype=float)
    best = (np.inf, None, None)

    for perm in permutations(range(n)):
        first = candidates[perm[0]]
        cost = np.zeros(len(first)) if start is None else distances(first[:, 0], start)
        back_links = []
        for prev_i, cur_i in zip(perm, perm[1:]):
            prev, cur = candidates[prev_i], candidates[cur_i]
            # step[a, b]: arrive at cur in orientation b from prev left in orientation a
            step = cost[:, None] + distances(prev[:, 1][:, None, :], cur[:, 0][None, :, :])
            back_links.append(np.argmin(step, axis=0))
            cost = step.min(axis=0)

        last = int(np.argmin(cost))
        if cost[last] < best[0]:
            orientations = [last]
            for links in reversed(back_links):
                orientations.append(int(links[orientations[-1]]))
            best = (float(cost[last]), perm, orientations[::-1])

    cost, perm, orientations = best
    return np.array(perm, dtype=int), np.array(orientations, dtype=int), cost


# -------------------------
# ONE INSTANCE
# -------------------------
def insertion_path(candidates, starting_point=None):
    """Run the path builder over an instance given as a list of orientation arrays."""
    order, orientations = build(list(range(len(candidates))), candidates.__getitem__, starting_point)
    return np.array(order, dtype=int), np.array(orientations, dtype=int)


def evaluate_instance(candidates, starting_point=None, exact=False, exact_max_n=8):
    """
    Travel cost of every method on one instance.

    Returns a dict {method name: cost}; the exact optimum is included when
    `exact` is True. `exact_max_n` is the size limit handed to `exact_path`.
    """
    costs = {}
    order, orientations = insertion_path(candidates, starting_point)
    costs[INSERTION] = compute_path_cost(candidates, order, orientations, starting_point)

    for name, fn in heuristics_registry_dict.items():
        order, orientations = curve_path(candidates, fn, starting_point)
        costs[name] = compute_path_cost(candidates, order, orientations, starting_point)

    if exact:
        _, _, costs[EXACT] = exact_path(candidates, starting_point, max_n=exact_max_n)
    return costs


def cost_ratios(costs):
    """Each method's cost relative to the best cost found on the instance."""
    reference = costs.get(EXACT, min(costs.values()))
    if reference == 0:
        # only a zero-cost method matches a zero-cost optimum
        return {name: 1.0 if cost == 0 else float("inf") for name, cost in costs.items()}
    return {name: cost / reference for name, cost in costs.items()}


# -------------------------
# SAVE / LOAD RESULTS
# -------------------------
def save_result_to_file(segments, costs, method_names, n, folder="results"):
    """Save one .npz per instance size with every instance and its costs."""
    os.makedirs(folder, exist_ok=True)
    filename = f"{folder}/segments_n{n}.npz"

    np.savez_compressed(
        filename,
        segments=np.asarray(segments, dtype=float),
        costs=np.asarray(costs, dtype=float),
        method_names=np.array(method_names),
        n=n,
    )
    logger.info(f"Saved: {filename}")
    return filename


def load_result_from_file(n, folder="results"):
    """Load a saved .npz result."""
    filename = f"{folder}/segments_n{n}.npz"
    with np.load(filename) as data:
        return {
            "segments": data["segments"],
            "costs": data["costs"],
            "method_names": [str(name) for name in data["method_names"]],
            "n": int(data["n"]),
        }


# -------------------------
# BATCHED RUNS
# -------------------------
def run_experiments(sizes, trials=5, seed=None, exact_max_n=7, max_length=0.1,
                    starting_point=None, folder=None):
    """
    Evaluate every method on `trials` random segment instances per size.

    Instances of size <= exact_max_n are also solved exactly so ratios are
    relative to the true optimum; above that they are relative to the best
    method on the instance. Returns {size: {method: mean ratio}}.
    """
    rng = np.random.default_rng(seed)
    summary = {}

    for n in sizes:
        exact = n <= exact_max_n
        names = [INSERTION, *heuristics_registry_dict] + ([EXACT] if exact else [])
        all_segments, all_costs, all_ratios = [], [], []

        for trial in range(trials):
            segments = generate_random_segments(n, max_length=max_length, seed=rng.integers(2 ** 32))
            candidates = [segment_orientations(s) for s in segments]
            costs = evaluate_instance(candidates, starting_point, exact=exact, exact_max_n=exact_max_n)
            ratios = cost_ratios(costs)

            all_segments.append(segments)
            all_costs.append([costs[name] for name in names])
            all_ratios.append([ratios[name] for name in names])
            logger.debug(f"[n={n}] trial {trial + 1}/{trials} | "
                         + " | ".join(f"{name} {ratios[name]:.4f}" for name in names))

        mean = np.mean(all_ratios, axis=0) if all_ratios else np.full(len(names), np.nan)
        summary[n] = dict(zip(names, (float(r) for r in mean)))
        logger.info(f"n={n}: " + ", ".join(f"{name} x{ratio:.3f}" for name, ratio in summary[n].items()))

        if folder is not None and trials:
            save_result_to_file(all_segments, all_costs, names, n, folder=folder)

    return summary
