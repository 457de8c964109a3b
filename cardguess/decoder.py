"""Decodificación de respuestas sí/no sobre el árbol de Huffman.

    - decode(root, bits): decodificación continua, vuelve a la raíz en cada hoja.
    - is_decodable(root, bits): recorre un único camino y dice si termina en hoja.
"""

from typing import Hashable, Iterable, List, Union

from .bits_utils import Bit, parse_bits
from .huffman import Leaf, Node


def _step(node: Node, bit: int) -> Node:
    return node.left if bit == 0 else node.right


def decode(root: Node, bits: Union[str, Iterable[Bit]]) -> List[Hashable]:
    """
    Recorre el árbol según los bits (0 = izquierda, 1 = derecha). Cada vez que
    se llega a una hoja se emite su símbolo y se vuelve a la raíz. Un camino
    incompleto al final no emite nada.

    Árbol de una sola hoja: se emite el símbolo una vez por bit, y una vez si
    no hay bits (la carta queda identificada sin preguntas).
    """
    bits = parse_bits(bits)
    if isinstance(root, Leaf):
        return [root.symbol] * max(1, len(bits))

    out = []
    node = root
    for b in bits:
        node = _step(node, b)
        if isinstance(node, Leaf):
            out.append(node.symbol)
            node = root
    return out


def is_decodable(root: Node, bits: Union[str, Iterable[Bit]]) -> bool:
    """
    True si los bits, leídos una sola vez desde la raíz y sin reiniciar,
    terminan exactamente en una hoja. Si faltan bits (se termina en un nodo
    interno) o sobran (se intenta bajar desde una hoja) devuelve False.
    """
    node = root
    for b in parse_bits(bits):
        if isinstance(node, Leaf):
            return False
        node = _step(node, b)
    return isinstance(node, Leaf)
