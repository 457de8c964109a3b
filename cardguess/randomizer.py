from __future__ import annotations

from typing import List, Sequence

import numpy as np

from .huffman import Internal, Leaf, Node

MASK_BITS = 53
MAX_MASK_BITS = 1024


def random_mask(n_bits: int = MASK_BITS, rng=None) -> List[int]:
    """
    Genera n_bits bits uniformes (uno por profundidad del árbol).
    `rng` puede ser una semilla entera, un np.random.Generator o None.
    """
    if not (0 <= n_bits <= MAX_MASK_BITS):
        raise ValueError(f"mask_bits debe estar entre 0 y {MAX_MASK_BITS}")
    rng = np.random.default_rng(rng)
    return rng.integers(0, 2, size=n_bits, dtype=np.int8).tolist()


def swap_children(node: Node, mask: Sequence[int], current_depth: int = 0) -> Node:
    """
    Reconstruye el árbol: si mask[profundidad] es 1 se intercambian los hijos
    de todos los nodos a esa profundidad. Más allá del largo de la máscara
    no se intercambia nada. El árbol original no se toca.
    """
    if isinstance(node, Leaf):
        return Leaf(node.symbol, node.weight)

    left = swap_children(node.left, mask, current_depth + 1)
    right = swap_children(node.right, mask, current_depth + 1)
    if current_depth < len(mask) and mask[current_depth] == 1:
        left, right = right, left
    return Internal(node.weight, left=left, right=right)


def randomize(root: Node, mask_bits: int = MASK_BITS, rng=None) -> Node:
    """Variante del árbol con el 0/1 de cada profundidad invertido al azar."""
    return swap_children(root, random_mask(mask_bits, rng=rng))
