"""
Graph utilities.
Summaries of the computation graph reachable from a root Var.
"""

from collections import Counter
from typing import Dict

import numpy as np

from .engine import topological_order
from .var import Var


def get_graph_stats(root: Var) -> Dict:
    """
    Collect statistics of the graph reachable from `root` (no printing).

    Fan-out only counts consumers inside this graph; a Var used elsewhere
    (e.g. by another loss) is not seen from here.

    Returns:
        dict with nodes, edges, leaves, fan-in/fan-out maxima and averages,
        and the per-operation node count
    """
    order = topological_order(root)
    n_nodes = len(order)

    fan_ins = [len(v.parents) for v in order]
    fan_outs = Counter()
    for v in order:
        for p in v.parents:
            fan_outs[id(p)] += 1
    fan_out_list = [fan_outs[id(v)] for v in order]

    op_counter = Counter(v.node.op_tag for v in order)

    return {
        'nodes': n_nodes,
        'edges': sum(fan_ins),
        'leaves': sum(1 for v in order if v.is_leaf),
        'max_fan_in': max(fan_ins),
        'avg_fan_in': float(np.mean(fan_ins)),
        'max_fan_out': max(fan_out_list),
        'avg_fan_out': float(np.mean(fan_out_list)),
        'operations': dict(op_counter),
    }


def print_graph_summary(root: Var, detailed: bool = False) -> Dict:
    """
    Print a summary of the graph reachable from `root`.

    Args:
        root: the Var the graph is summarised from (e.g. a loss)
        detailed: also list every node (only for graphs of at most 100 nodes)

    Returns:
        the dict from get_graph_stats
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
        order = topological_order(root)
        index = {id(v): i for i, v in enumerate(order)}
        print()
        print("="*70)
        print("DETAILED NODE LIST")
        print("="*70)
        for i, v in enumerate(order):
            parent_info = ", ".join(f"Node{index[id(p)]}" for p in v.parents)
            print(f"Node {i:3d}: {v.node.op_tag:12s} ({float(v.val):10.6f}) <- [{parent_info}]")

    print("="*70 + "\n")

    return stats
