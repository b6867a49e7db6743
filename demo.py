"""
Ordered Tree Demo — Traversals, deletion cases, and height before/after balance().

Generates:
- viz/*.png — Individual visualization files
- report.pdf — Comprehensive PDF report
"""

import logging
import os
import sys
from pathlib import Path
from typing import Dict, List, Sequence, Tuple

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.backends.backend_pdf import PdfPages

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "src"))

from ordered_tree import OrderedTree, VisitingOrder

SEED = 42

VIZ_DIR = Path(__file__).parent / "viz"


def measure_heights(sizes: Sequence[int], seed: int = SEED) -> Dict[str, np.ndarray]:
    """
    Measure tree height for each size under three build strategies.

    Args:
        sizes: Number of elements to insert for each measurement
        seed: Seed for the shuffled insertion order

    Returns:
        Dict with 'sizes', 'sorted', 'shuffled', 'balanced' and 'ideal' arrays,
        where 'ideal' is ceil(log2(n + 1))
    """
    rng = np.random.default_rng(seed)
    sizes = np.asarray(sizes, dtype=int)
    heights = {name: np.zeros(len(sizes), dtype=int) for name in ("sorted", "shuffled", "balanced")}

    for i, n in enumerate(sizes):
        sorted_tree: OrderedTree[int] = OrderedTree()
        for value in range(n):
            sorted_tree += value
        heights["sorted"][i] = sorted_tree.height()

        shuffled_tree: OrderedTree[int] = OrderedTree()
        for value in rng.permutation(n):
            shuffled_tree += int(value)
        heights["shuffled"][i] = shuffled_tree.height()

        sorted_tree.balance()
        heights["balanced"][i] = sorted_tree.height()

    heights["sizes"] = sizes
    heights["ideal"] = np.ceil(np.log2(sizes + 1)).astype(int)
    return heights


def tree_layout(tree: OrderedTree) -> Tuple[Dict[int, Tuple[object, int, int]], List[Tuple[int, int]]]:
    """
    Place each node at (in-order rank, -depth) using only the public root accessors.

    Returns:
        Tuple of (positions keyed by node key as (value, x, y), edges as (parent key, child key))
    """
    positions: Dict[int, Tuple[object, int, int]] = {}
    edges: List[Tuple[int, int]] = []
    if tree.is_empty():
        return positions, edges

    stack: List[Tuple[int, object, object, int]] = []
    current = (tree.root_value(), tree.root_left(), tree.root_right(), 0, None)
    next_key = 0
    rank = 0
    while stack or current is not None:
        while current is not None:
            value, left, right, depth, parent = current
            key = next_key
            next_key += 1
            if parent is not None:
                edges.append((parent, key))
            stack.append((key, value, right, depth))
            current = None if left is None else (left.value, left.left, left.right, depth + 1, key)
        key, value, right, depth = stack.pop()
        positions[key] = (value, rank, -depth)
        rank += 1
        current = None if right is None else (right.value, right.left, right.right, depth + 1, key)

    return positions, edges


def plot_tree(ax, tree: OrderedTree, title: str) -> None:
    positions, edges = tree_layout(tree)
    for parent, child in edges:
        _, x0, y0 = positions[parent]
        _, x1, y1 = positions[child]
        ax.plot([x0, x1], [y0, y1], color="gray", linewidth=1.5, zorder=1)
    for value, x, y in positions.values():
        ax.scatter([x], [y], s=700, color="steelblue", zorder=2)
        ax.text(x, y, str(value), ha="center", va="center", color="white", fontweight="bold", zorder=3)
    ax.set_title(title)
    ax.axis("off")


def example_1_traversals():
    """The classic seven-node tree in all three visiting orders."""
    print("=" * 60)
    print("Example 1: Traversal Orders")
    print("=" * 60)

    tree: OrderedTree[int] = OrderedTree()
    for value in [5, 3, 8, 1, 4, 7, 9]:
        tree += value

    for order in VisitingOrder:
        tree.set_order(order)
        print(f"{order.name:<10} {tree}")
    tree.set_order(VisitingOrder.IN_ORDER)

    print(f"height = {tree.height()}, min = {tree.min()}, max = {tree.max()}")

    fig, axes = plt.subplots(1, 2, figsize=(12, 5))
    plot_tree(axes[0], tree, f"Inserted 5 3 8 1 4 7 9 (height {tree.height()})")

    print(f"delete(3) -> {tree.delete(3)}, contains(3) -> {tree.contains(3)}")
    print(f"after delete: {tree}")
    plot_tree(axes[1], tree, "After delete(3)")

    fig.tight_layout()
    fig.savefig(VIZ_DIR / "01_traversals.png", dpi=150)
    plt.close(fig)

    return fig, tree


def example_2_deletion_cases():
    """Walk through leaf, one-child and two-child deletions."""
    print("\n" + "=" * 60)
    print("Example 2: Deletion Cases")
    print("=" * 60)

    tree: OrderedTree[int] = OrderedTree(order=VisitingOrder.PRE_ORDER)
    for value in [50, 30, 70, 20, 40, 60, 80, 65]:
        tree += value
    print(f"start (pre-order):      {tree}")

    fig, axes = plt.subplots(1, 2, figsize=(12, 5))
    plot_tree(axes[0], tree, "Before deletions")

    for value, case in [(20, "leaf"), (60, "one child"), (50, "two children"), (99, "absent")]:
        removed = tree.delete(value)
        print(f"delete {value:>2} ({case:<12}) -> {removed!s:<5} {tree}")

    plot_tree(axes[1], tree, "After delete 20, 60, 50")
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "02_deletion_cases.png", dpi=150)
    plt.close(fig)

    return fig, tree


def example_3_height_growth():
    """Height of sorted vs shuffled insertion, and after balance()."""
    print("\n" + "=" * 60)
    print("Example 3: Height Growth")
    print("=" * 60)

    heights = measure_heights(np.arange(50, 1001, 50))
    for n, s, r, b, ideal in zip(heights["sizes"], heights["sorted"], heights["shuffled"],
                                 heights["balanced"], heights["ideal"]):
        if n % 250 == 0:
            print(f"n = {n:>4}: sorted {s:>4}  shuffled {r:>3}  balanced {b:>2}  ideal {ideal:>2}")

    fig, axes = plt.subplots(1, 2, figsize=(12, 5))

    axes[0].plot(heights["sizes"], heights["sorted"], color="firebrick", linewidth=2, label="Sorted insertion")
    axes[0].plot(heights["sizes"], heights["shuffled"], color="steelblue", linewidth=2, label="Shuffled insertion")
    axes[0].plot(heights["sizes"], heights["balanced"], color="seagreen", linewidth=2, label="After balance()")
    axes[0].set_xlabel("Number of elements")
    axes[0].set_ylabel("Height")
    axes[0].set_title("Tree Height by Insertion Order")
    axes[0].legend()
    axes[0].grid(True, alpha=0.3)

    axes[1].plot(heights["sizes"], heights["shuffled"], color="steelblue", linewidth=2, label="Shuffled insertion")
    axes[1].plot(heights["sizes"], heights["balanced"], "o", color="seagreen", label="After balance()")
    axes[1].plot(heights["sizes"], heights["ideal"], "k--", linewidth=1.5, label="ceil(log2(n + 1))")
    axes[1].set_xlabel("Number of elements")
    axes[1].set_ylabel("Height")
    axes[1].set_title("Balanced Height vs Optimum")
    axes[1].legend()
    axes[1].grid(True, alpha=0.3)

    fig.tight_layout()
    fig.savefig(VIZ_DIR / "03_height_growth.png", dpi=150)
    plt.close(fig)

    return fig, heights


def generate_pdf_report(figures_data):
    """Generate the PDF report: a title page followed by every example figure."""
    print("\n" + "=" * 60)
    print("Generating PDF Report")
    print("=" * 60)

    pdf_path = VIZ_DIR.parent / "report.pdf"

    with PdfPages(pdf_path) as pdf:
        fig = plt.figure(figsize=(11, 8.5))
        fig.text(0.5, 0.6, "Ordered Tree", fontsize=36, ha="center", fontweight="bold")
        fig.text(0.5, 0.5, "Binary Search Tree with On-Demand Rebalancing", fontsize=20, ha="center")
        fig.text(0.5, 0.2, f"Seed: {SEED}", fontsize=12, ha="center", color="gray")
        pdf.savefig(fig)
        plt.close(fig)

        for title, fig in figures_data:
            fig.suptitle(title, fontsize=14, fontweight="bold")
            pdf.savefig(fig)

    print(f"PDF report saved to: {pdf_path}")
    return pdf_path


def main():
    verbose = "-v" in sys.argv[1:]
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    VIZ_DIR.mkdir(exist_ok=True)

    print(f"\nRandom seed: {SEED}")
    print(f"Output directory: {VIZ_DIR}")

    figures = []

    fig1, _ = example_1_traversals()
    figures.append(("Example 1: Traversal Orders", fig1))

    fig2, _ = example_2_deletion_cases()
    figures.append(("Example 2: Deletion Cases", fig2))

    fig3, _ = example_3_height_growth()
    figures.append(("Example 3: Height Growth", fig3))

    generate_pdf_report(figures)

    print("\n" + "=" * 60)
    print("DEMO COMPLETE")
    print("=" * 60)
    print(f"\nGenerated files:")
    for f in sorted(VIZ_DIR.glob("*.png")):
        print(f"  - {f.relative_to(VIZ_DIR.parent)}")
    print(f"  - report.pdf")


if __name__ == "__main__":
    main()
