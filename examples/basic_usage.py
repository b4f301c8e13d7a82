#!/usr/bin/env python3
"""
Example: Basic usage of oo-metrics as a Python library
"""

from pathlib import Path

from oo_metrics import calculate_codebase, load_codebase
from oo_metrics.metrics import sort_metrics

# Load a parsed type model
codebase = load_codebase(Path(__file__).parent / "zoo_model.json")

# Measure every type with every registered calculator
results = calculate_codebase(codebase)

for type_name, metrics in results.items():
    print(type_name)
    for metric in sort_metrics(metrics):
        print(f"  {metric.name.value:<6} {metric.formatted_value(3):>8}  {metric.description}")
    print()

unresolved = sum(len(parents) for parents in codebase.graph.unresolved.values())
print(f"Analysis complete: {len(results)} type(s), {unresolved} unresolved parent reference(s)")
