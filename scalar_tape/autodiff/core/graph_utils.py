"""
Graph utilities
Printing and analysis of the computation graph below a root node.
"""

import numpy as np
from typing import Dict
from collections import Counter

from .engine import topological_order


def get_graph_stats(root) -> Dict:
    """
    Collect graph statistics (no printing).

    Fan-in counts operands of a node; fan-out counts consumers of a node
    within the subgraph reachable from `root`.

    Returns:
        statistics dict
    """
    order = topological_order(root)
    n_nodes = len(order)
    n_edges = sum(len(node.operands) for node in order)

    # fan-in
    fan_ins = [len(node.operands) for node in order]

    # fan-out
    fan_out = Counter()
    for node in order:
        for p in node.operands:
            fan_out[id(p)] += 1
    fan_outs = [fan_out[id(node)] for node in order]

    op_counter = Counter(node.operation.name.lower() for node in order)

    return {
        'nodes': n_nodes,
        'edges': n_edges,
        'leaves': sum(1 for node in order if node.is_leaf),
        'max_fan_in': max(fan_ins),
        'avg_fan_in': float(np.mean(fan_ins)),
        'max_fan_out': max(fan_outs),
        'avg_fan_out': float(np.mean(fan_outs)),
        'operations': dict(op_counter)
    }


def print_graph_summary(root, detailed: bool = False) -> Dict:
    """
    Print a summary of the graph below `root`.

    Args:
        root: output node
        detailed: also print one line per node (graphs of up to 100 nodes)

    Returns:
        the statistics dict from get_graph_stats
    """
    stats = get_graph_stats(root)
    n_nodes = stats['nodes']

    print("\n" + "="*70)
    print("COMPUTATION GRAPH SUMMARY")
    print("="*70)
    print(f"Total nodes:        {n_nodes:,}")
    print(f"Total edges:        {stats['edges']:,}")
    print(f"Leaves:             {stats['leaves']:,}")
    print(f"Max fan-in:         {stats['max_fan_in']}")
    print(f"Avg fan-in:         {stats['avg_fan_in']:.2f}")
    print(f"Max fan-out:        {stats['max_fan_out']}")
    print(f"Avg fan-out:        {stats['avg_fan_out']:.2f}")
    print()
    print("Operation breakdown:")
    for op_type, count in Counter(stats['operations']).most_common(10):
        pct = 100.0 * count / n_nodes
        print(f"  {op_type:12s}: {count:6,} ({pct:5.1f}%)")

    if detailed and n_nodes <= 100:
        print()
        print("="*70)
        print("DETAILED NODE LIST")
        print("="*70)
        print_nodes(root)

    print("="*70 + "\n")
    return stats


def print_nodes(root, max_nodes: int = 100) -> None:
    order = topological_order(root)
    index = {id(node): i for i, node in enumerate(order)}
    for i, node in enumerate(order[:max_nodes]):
        name = str(node)
        if node.operands:
            parent_info = ", ".join(f"Node{index[id(p)]}" for p in node.operands)
            print(f"Node {i:4d}: {name:14s} value={float(node.value):10.6f} "
                  f"grad={float(node.gradient):10.6f} <- [{parent_info}]")
        else:
            print(f"Node {i:4d}: {name:14s} value={float(node.value):10.6f} "
                  f"grad={float(node.gradient):10.6f} [leaf]")
    if len(order) > max_nodes:
        print(f"... ({len(order) - max_nodes} more nodes)")


def print_computation_graph(root, max_nodes: int = 20) -> None:
    """
    Print the graph structure, operands before consumers.

    Args:
        root: output node
        max_nodes: how many nodes to print at most
    """
    print("\n" + "="*70)
    print("COMPUTATION GRAPH STRUCTURE")
    print("="*70)
    print_nodes(root, max_nodes)
    print("="*70 + "\n")


def analyze_graph_complexity(root) -> str:
    """
    Analyze graph complexity and return a text report.
    """
    stats = get_graph_stats(root)

    report = []
    report.append("Graph Complexity Analysis:")
    report.append(f"  Total nodes: {stats['nodes']:,}")
    report.append(f"  Total connections: {stats['edges']:,}")
    report.append(f"  Average branching: {stats['avg_fan_out']:.2f}")

    if stats['nodes'] < 1000:
        complexity = "Low"
    elif stats['nodes'] < 10000:
        complexity = "Medium"
    else:
        complexity = "High"

    report.append(f"  Complexity level: {complexity}")

    top_ops = sorted(stats['operations'].items(), key=lambda x: x[1], reverse=True)[:3]
    report.append("  Top operations:")
    for op, count in top_ops:
        pct = 100.0 * count / stats['nodes']
        report.append(f"    - {op}: {pct:.1f}%")

    return "\n".join(report)
