"""
Profiling script for PyOrdered tree performance analysis.

This script profiles put/get/remove/iteration workloads to identify bottlenecks.
"""

import cProfile
import pstats
import io
from pstats import SortKey
import time
import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import numpy as np
from pyordered.comparators import number_comparator
from pyordered.rbtree import Tree


def create_keys(n_keys, seed=42):
    """Create n_keys random integer keys, duplicates included."""
    rng = np.random.default_rng(seed)
    return rng.integers(0, n_keys * 2, size=n_keys).tolist()


def build_tree(keys):
    tree = Tree(number_comparator)
    for key in keys:
        tree.put(key, key)
    return tree


def profile_put(n_keys):
    """Profile random insertion."""
    build_tree(create_keys(n_keys))


def profile_get(n_keys):
    """Profile lookups of present and missing keys."""
    keys = create_keys(n_keys)
    tree = build_tree(keys)
    for key in range(n_keys * 2):
        tree.get(key)


def profile_remove(n_keys):
    """Profile removal of every inserted key."""
    keys = create_keys(n_keys)
    tree = build_tree(keys)
    for key in np.random.default_rng(7).permutation(keys).tolist():
        tree.remove(key)


def profile_iterate(n_keys):
    """Profile forward and backward iterator traversal."""
    tree = build_tree(create_keys(n_keys))
    it = tree.iterator()
    while it.next():
        pass
    while it.prev():
        pass


def run_profile(func, name, *args):
    """Run profiling for a function and print results."""
    print(f"\n{'='*80}")
    print(f"Profiling: {name}")
    print('='*80)

    pr = cProfile.Profile()

    start_time = time.time()
    pr.enable()
    func(*args)
    pr.disable()
    elapsed = time.time() - start_time

    print(f"\nTotal time: {elapsed:.3f} seconds")

    s = io.StringIO()
    ps = pstats.Stats(pr, stream=s).sort_stats(SortKey.CUMULATIVE)
    ps.print_stats(15)
    print(s.getvalue())

    return elapsed


def main():
    """Run all profiling scenarios."""
    n_keys = int(sys.argv[1]) if len(sys.argv) > 1 else 100_000
    results = {}

    results['put'] = run_profile(profile_put, f"Put ({n_keys} keys)", n_keys)
    results['get'] = run_profile(profile_get, f"Get ({n_keys * 2} probes)", n_keys)
    results['remove'] = run_profile(profile_remove, f"Remove ({n_keys} keys)", n_keys)
    results['iterate'] = run_profile(profile_iterate, f"Iterate ({n_keys} keys)", n_keys)

    print(f"\n{'='*80}")
    print("SUMMARY")
    print('='*80)
    for name, elapsed in results.items():
        print(f"{name:10s}: {elapsed:.3f}s")


if __name__ == '__main__':
    main()
