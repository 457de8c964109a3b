from collections import OrderedDict
from typing import Callable, Dict, Hashable, List, Mapping, Optional

from .deck import card_sort_key, parse_card


def collect_by_bit(code: Mapping[Hashable, str]) -> List[List[Hashable]]:
    """
    Invierte la tabla de códigos: la posición i de la salida lista los
    símbolos cuyo código tiene un '1' en el bit i. La cantidad de posiciones
    es la longitud máxima de código (profundidad del árbol).
    """
    max_len = max((len(c) for c in code.values()), default=0)
    result = [[] for _ in range(max_len)]
    for sym, bits in code.items():
        for i, b in enumerate(bits):
            if b == '1':
                result[i].append(sym)
    return result


def sort_questions(questions: List[List[Hashable]], key: Optional[Callable] = card_sort_key) -> List[List[Hashable]]:
    # Solo para que sea fácil buscar la carta en pantalla; no afecta la decodificación
    return [sorted(q, key=key) for q in questions]


def build_questions(code: Mapping[Hashable, str], key: Optional[Callable] = card_sort_key) -> List[List[Hashable]]:
    return sort_questions(collect_by_bit(code), key=key)


def group_by_suit(cards: List[str]) -> Dict[str, List[str]]:
    """Agrupa un conjunto de preguntas en filas por palo, respetando el orden recibido."""
    grouped = OrderedDict()
    for card in cards:
        _, suit = parse_card(card)
        grouped.setdefault(suit, []).append(card)
    return grouped
