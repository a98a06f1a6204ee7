"""
Binary Search Tree Demo -- Tree shapes, the four deletion cases, traversal
orders, and height growth under sorted vs random insertion.

Generates:
- viz/*.png -- Individual visualization files
- report.pdf -- Comprehensive PDF report
"""

from pathlib import Path
from typing import Dict, List, Optional, Tuple

import numpy as np
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
from matplotlib.backends.backend_pdf import PdfPages

from binary_search_tree import BinarySearchTree

SEED = 42

VIZ_DIR = Path(__file__).parent / "viz"
REPORT_PATH = Path(__file__).parent / "report.pdf"

SAMPLE = [50, 30, 70, 20, 40, 60, 80]
SIZES = [10, 25, 50, 100, 200, 400]
TRIALS = 20

COLORS = {
    "node": "#3498db",
    "highlight": "#e74c3c",
    "edge": "#7f8c8d",
    "sorted": "#e74c3c",
    "random": "#27ae60",
    "log": "#9b59b6",
    "pre": "#e67e22",
    "in": "#3498db",
    "post": "#27ae60",
    "level": "#9b59b6",
}


def layout(tree: BinarySearchTree) -> Tuple[Dict[int, Tuple[float, float]], List[Tuple[int, int]], Dict[int, object]]:
    """Place each node at (in-order index, -depth).

    Returns positions and labels keyed by ``id(node)`` plus parent->child edges.
    """
    positions: Dict[int, Tuple[float, float]] = {}
    labels: Dict[int, object] = {}
    edges: List[Tuple[int, int]] = []
    stack = []
    node, depth = tree.root, 0
    index = 0
    while stack or node is not None:
        while node is not None:
            stack.append((node, depth))
            for child in (node.left, node.right):
                if child is not None:
                    edges.append((id(node), id(child)))
            node, depth = node.left, depth + 1
        node, depth = stack.pop()
        positions[id(node)] = (float(index), float(-depth))
        labels[id(node)] = node.value
        index += 1
        node, depth = node.right, depth + 1
    return positions, edges, labels


def draw_tree(ax, tree: BinarySearchTree, title: str, highlight: Optional[object] = None):
    positions, edges, labels = layout(tree)
    for parent, child in edges:
        (x0, y0), (x1, y1) = positions[parent], positions[child]
        ax.plot([x0, x1], [y0, y1], color=COLORS["edge"], linewidth=1.5, zorder=1)
    for key, (x, y) in positions.items():
        color = COLORS["highlight"] if labels[key] == highlight else COLORS["node"]
        ax.scatter([x], [y], s=650, color=color, zorder=2)
        ax.text(x, y, str(labels[key]), ha="center", va="center",
                color="white", fontsize=10, fontweight="bold", zorder=3)
    ax.set_title(title, fontsize=12, fontweight="bold")
    ax.axis("off")
    if positions:
        xs = [p[0] for p in positions.values()]
        ys = [p[1] for p in positions.values()]
        ax.set_xlim(min(xs) - 0.8, max(xs) + 0.8)
        ax.set_ylim(min(ys) - 0.6, max(ys) + 0.6)
    else:
        ax.text(0.5, 0.5, "(empty)", ha="center", va="center", transform=ax.transAxes)


def measure_heights(sizes: List[int], trials: int, rng: np.random.Generator):
    """Tree height for sorted insertion and for ``trials`` random permutations.

    Returns (sizes, sorted_heights, random_mean, random_std) as numpy arrays.
    """
    sorted_heights = []
    random_mean = []
    random_std = []
    for n in sizes:
        sorted_heights.append(BinarySearchTree(range(n)).height())
        heights = np.array([
            BinarySearchTree(rng.permutation(n).tolist()).height()
            for _ in range(trials)
        ], dtype=float)
        random_mean.append(heights.mean())
        random_std.append(heights.std())
    return (np.asarray(sizes), np.asarray(sorted_heights),
            np.asarray(random_mean), np.asarray(random_std))


def example_1_tree_shape():
    """Draw the sample tree and report its basic queries."""
    print("=" * 60)
    print("Example 1: Building the Sample Tree")
    print("=" * 60)

    tree = BinarySearchTree(SAMPLE)
    print(f"  Inserted: {SAMPLE}")
    print(f"  size={tree.size()}, height={tree.height()}, "
          f"min={tree.get_min_value()}, max={tree.get_max_value()}")
    print(f"  search(60)={tree.search(60)}, search(65)={tree.search(65)}")

    fig, ax = plt.subplots(figsize=(8, 5))
    draw_tree(ax, tree, f"BST from insertion order {SAMPLE}")
    fig.tight_layout()
    path = VIZ_DIR / "01_tree_shape.png"
    fig.savefig(path, dpi=150)
    plt.close(fig)

    print()
    return [path]


def example_2_deletion_cases():
    """Before/after drawings for leaf, one-child, and two-children removals."""
    print("=" * 60)
    print("Example 2: The Four Deletion Cases")
    print("=" * 60)

    # each case: (label, setup removals, target)
    cases = [
        ("Leaf", [], 20),
        ("Only right child", [20], 30),
        ("Only left child", [40], 30),
        ("Two children (root)", [], 50),
    ]

    fig, axes = plt.subplots(len(cases), 2, figsize=(12, 4 * len(cases)))
    for row, (label, setup, target) in enumerate(cases):
        tree = BinarySearchTree(SAMPLE)
        for value in setup:
            tree.remove(value)
        draw_tree(axes[row][0], tree, f"{label}: before remove({target})", highlight=target)
        removed = tree.remove(target)
        new_root = tree.root.value if tree.root is not None else None
        draw_tree(axes[row][1], tree, f"{label}: after (root={new_root})")
        print(f"  {label:22s} remove({target}) -> {removed}, in-order={tree.in_order()}")

    fig.suptitle("BST Deletion Cases", fontsize=16, fontweight="bold", y=0.995)
    fig.tight_layout(rect=[0, 0, 1, 0.98])
    path = VIZ_DIR / "02_deletion_cases.png"
    fig.savefig(path, dpi=150)
    plt.close(fig)

    print()
    return [path]


def example_3_traversal_orders():
    """Plot visiting position against value for every traversal order."""
    print("=" * 60)
    print("Example 3: Traversal Orders")
    print("=" * 60)

    rng = np.random.default_rng(SEED)
    values = rng.choice(100, size=15, replace=False).tolist()
    tree = BinarySearchTree(values)
    orders = [
        ("pre", "Pre-order", tree.pre_order()),
        ("in", "In-order", tree.in_order()),
        ("post", "Post-order", tree.post_order()),
        ("level", "Level-order", tree.level_order()),
    ]

    fig, axes = plt.subplots(2, 2, figsize=(12, 8))
    axes = axes.flatten()
    for ax, (key, name, sequence) in zip(axes, orders):
        print(f"  {name:12s}: {sequence}")
        ax.plot(np.arange(len(sequence)), sequence, marker="o",
                color=COLORS[key], linewidth=1.8)
        ax.set_title(name, fontsize=13, fontweight="bold")
        ax.set_xlabel("visit index")
        ax.set_ylabel("value")
        ax.grid(True, alpha=0.3)

    fig.suptitle(f"Traversal Orders of 15 Random Keys (seed {SEED})",
                 fontsize=15, fontweight="bold", y=0.98)
    fig.tight_layout(rect=[0, 0, 1, 0.95])
    path = VIZ_DIR / "03_traversal_orders.png"
    fig.savefig(path, dpi=150)
    plt.close(fig)

    print()
    return [path]


def example_4_height_growth():
    """Sorted insertion degenerates to a chain; random insertion stays near log2(n)."""
    print("=" * 60)
    print("Example 4: Height Growth -- Sorted vs Random Insertion")
    print("=" * 60)

    rng = np.random.default_rng(SEED)
    sizes, sorted_heights, random_mean, random_std = measure_heights(SIZES, TRIALS, rng)

    for n, h_sorted, h_mean, h_std in zip(sizes, sorted_heights, random_mean, random_std):
        print(f"  n={n:4d}: sorted height={h_sorted:4d}, "
              f"random height={h_mean:6.2f} +/- {h_std:.2f}, log2(n+1)={np.log2(n + 1):.2f}")

    fig, ax = plt.subplots(figsize=(10, 6))
    ax.plot(sizes, sorted_heights, marker="s", color=COLORS["sorted"],
            linewidth=2, label="sorted insertion")
    ax.errorbar(sizes, random_mean, yerr=random_std, marker="o", color=COLORS["random"],
                linewidth=2, capsize=4, label=f"random insertion ({TRIALS} trials)")
    ax.plot(sizes, np.log2(sizes + 1), linestyle="--", color=COLORS["log"],
            linewidth=1.5, label="log2(n+1) lower bound")
    ax.set_xscale("log")
    ax.set_yscale("log")
    ax.set_xlabel("number of keys n", fontsize=12)
    ax.set_ylabel("tree height", fontsize=12)
    ax.set_title("Unbalanced BST Height", fontsize=14, fontweight="bold")
    ax.legend(fontsize=11)
    ax.grid(True, alpha=0.3, which="both")
    fig.tight_layout()
    path = VIZ_DIR / "04_height_growth.png"
    fig.savefig(path, dpi=150)
    plt.close(fig)

    print()
    return [path]


def generate_pdf_report(all_figures):
    """Generate comprehensive PDF report with all visualizations."""
    print("=" * 60)
    print("Generating PDF Report")
    print("=" * 60)

    with PdfPages(REPORT_PATH) as pdf:
        fig, ax = plt.subplots(figsize=(10, 7))
        ax.axis("off")
        ax.text(0.5, 0.7, "Binary Search Tree", fontsize=28, fontweight="bold",
                ha="center", va="center", transform=ax.transAxes)
        ax.text(0.5, 0.55, "Demo and Visualization Report",
                fontsize=16, ha="center", va="center", transform=ax.transAxes,
                color="gray")
        ax.text(0.5, 0.40,
                "insert | search | remove | min/max | pre/in/post/level order",
                fontsize=13, ha="center", va="center", transform=ax.transAxes,
                color="#555555")
        ax.text(0.5, 0.25, f"Seed: {SEED}  |  Pure-Python unbalanced BST",
                fontsize=11, ha="center", va="center", transform=ax.transAxes,
                color="#888888")
        fig.tight_layout()
        pdf.savefig(fig)
        plt.close(fig)

        fig, ax = plt.subplots(figsize=(10, 7))
        ax.axis("off")
        summary_text = (
            "Summary of Key Findings\n"
            "========================\n\n"
            "1. Shape: keys smaller than a node live in its left subtree,\n"
            "   equal or larger keys in its right subtree.\n\n"
            "2. Deletion: leaves are detached, one-child nodes are spliced\n"
            "   out, two-children nodes are replaced by their in-order\n"
            "   successor (leftmost node of the right subtree).\n\n"
            "3. Traversals: in-order visits keys in ascending order;\n"
            "   pre-order starts at the root, post-order ends at it,\n"
            "   level-order walks the tree layer by layer.\n\n"
            "4. Height: sorted insertion builds a chain of height n,\n"
            "   random insertion stays within a small factor of log2(n)."
        )
        ax.text(0.05, 0.95, summary_text, fontsize=11, va="top", ha="left",
                transform=ax.transAxes, family="monospace")
        fig.tight_layout()
        pdf.savefig(fig)
        plt.close(fig)

        titles = [
            "Example 1: Sample Tree Shape",
            "Example 2: Deletion Cases",
            "Example 3: Traversal Orders",
            "Example 4: Height Growth",
        ]

        for fig_path, title in zip(all_figures, titles):
            if fig_path.exists():
                img = plt.imread(str(fig_path))
                fig, ax = plt.subplots(figsize=(11, 8))
                ax.imshow(img)
                ax.axis("off")
                ax.set_title(title, fontsize=14, fontweight="bold", pad=10)
                fig.tight_layout()
                pdf.savefig(fig)
                plt.close(fig)

    print(f"  Report saved to: {REPORT_PATH}")
    print()


def main():
    VIZ_DIR.mkdir(exist_ok=True)

    print()
    print("*" * 60)
    print("  BINARY SEARCH TREE -- DEMO")
    print(f"  Seed: {SEED}")
    print("*" * 60)
    print()

    all_figures = []

    all_figures.extend(example_1_tree_shape())
    all_figures.extend(example_2_deletion_cases())
    all_figures.extend(example_3_traversal_orders())
    all_figures.extend(example_4_height_growth())

    generate_pdf_report(all_figures)

    print("=" * 60)
    print("DEMO COMPLETE")
    print("=" * 60)
    print(f"  Visualizations: {VIZ_DIR}/")
    for f in sorted(VIZ_DIR.glob("*.png")):
        print(f"    - {f.name}")
    print(f"  PDF Report:     {REPORT_PATH}")
    print()


if __name__ == "__main__":
    main()
