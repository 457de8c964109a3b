from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Dict, Hashable, Iterable, Mapping, Union

from .heap import MinHeap


@dataclass(frozen=True)
class Leaf:
    symbol: Hashable
    weight: int


@dataclass(frozen=True)
class Internal:
    weight: int
    left: "Node"
    right: "Node"


Node = Union[Leaf, Internal]


def count_frequencies(symbols: Iterable[Hashable]) -> Counter:
    """Cuenta apariciones de cada símbolo (la repetición es la frecuencia)."""
    counts = Counter(symbols)
    if not counts:
        raise ValueError("La secuencia de símbolos está vacía")
    return counts


def build_tree(frequencies: Mapping[Hashable, int]) -> Node:
    """
    Construye el árbol de Huffman para una tabla {simbolo: frecuencia}.

    Se insertan las hojas en el orden de iteración de la tabla; en cada paso
    se extraen los dos nodos de menor peso `a` y `b` y se reinsertan como
    Internal(a.weight + b.weight, left=a, right=b).
    Con un solo símbolo la raíz es la propia hoja (código vacío).
    """
    if not frequencies:
        raise ValueError("La tabla de frecuencias está vacía")

    heap = MinHeap()
    for s, f in frequencies.items():
        if int(f) < 1:
            raise ValueError(f"Frecuencia inválida para {s!r}: {f} (debe ser >= 1)")
        heap.insert(Leaf(s, int(f)))

    while len(heap) > 1:
        a = heap.extract_min()
        b = heap.extract_min()
        heap.insert(Internal(a.weight + b.weight, left=a, right=b))

    return heap.extract_min()


def build_code(root: Node) -> Dict[Hashable, str]:
    """
    Recorre el árbol en profundidad y devuelve {simbolo: 'cadena_de_bits'}.
    Izquierda agrega '0', derecha agrega '1'. No modifica el árbol.
    """
    code = {}

    def walk(n, prefix):
        if isinstance(n, Leaf):
            code[n.symbol] = prefix
            return
        walk(n.left, prefix + '0')
        walk(n.right, prefix + '1')

    walk(root, '')
    return code


def encode(symbols: Iterable[Hashable], code: Mapping[Hashable, str]) -> str:
    """Concatena los códigos de cada símbolo en orden."""
    try:
        return ''.join(code[s] for s in symbols)
    except KeyError as e:
        raise ValueError(f"Símbolo sin código: {e.args[0]!r}") from None


def code_lengths(code: Mapping[Hashable, str]) -> Dict[Hashable, int]:
    return {s: len(c) for s, c in code.items()}


def weighted_length(code: Mapping[Hashable, str], frequencies: Mapping[Hashable, int]) -> int:
    """Suma de frecuencia * longitud de código (costo total del código)."""
    return sum(len(code[s]) * f for s, f in frequencies.items())


def mean_length(code: Mapping[Hashable, str], frequencies: Mapping[Hashable, int]) -> float:
    """Longitud media de código (bits/símbolo), es decir, preguntas esperadas."""
    total = sum(frequencies.values())
    return weighted_length(code, frequencies) / total
