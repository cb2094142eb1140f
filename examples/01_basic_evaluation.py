#!/usr/bin/env python3
"""
Example 01: Basic Evaluation

This example evaluates a few catalog functions at single points, in
single and double precision, and then by name through the registry.

Usage:
    python 01_basic_evaluation.py [function_name ...]
"""

import sys

import numpy as np


def main():
    """Run basic evaluation example."""
    from sphcollection import beentjes_f4, cf_f1, fornberg_f1
    from sphcollection.functions import get_function, list_functions

    # Precision follows the inputs
    print(f"cf_f1<float32>(0.23, 0.42)  = {cf_f1(np.float32(0.23), np.float32(0.42))}")
    print(f"fornberg_f1(0.2, 0.1)       = {fornberg_f1(0.2, 0.1)}")
    print(f"beentjes_f4<float64>(0.5, 1.0) = {beentjes_f4(np.float64(0.5), np.float64(1.0))}")
    print()

    names = sys.argv[1:] or list_functions()
    print("Catalog at (theta, phi) = (1.0, 2.0):")
    for name in names:
        try:
            entry = get_function(name)
        except KeyError as e:
            print(f"  {name}: {e}")
            continue
        print(f"  {entry.name:<12} [{entry.source.value:<8}] {entry(1.0, 2.0): .8f}")


if __name__ == "__main__":
    main()
