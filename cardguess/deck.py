"""Baraja de 52 cartas y tabla estática de frecuencias de elección.

Las cartas se escriben rango + palo: 'AS', '10H', 'QD', ...
Palos: S (picas), H (corazones), C (tréboles), D (diamantes).
"""

from typing import Dict, List, Tuple

SUIT_ORDER = ['S', 'H', 'C', 'D']
RANK_ORDER = ['A', '2', '3', '4', '5', '6', '7', '8', '9', '10', 'J', 'Q', 'K']

SUIT_SYMBOLS = {'S': '♠', 'H': '♡', 'C': '♣', 'D': '♢'}

# Cuántas veces fue elegida cada carta (más frecuente -> menos preguntas)
DECK_FREQUENCIES: Dict[str, int] = {
    'AS': 49, '7H': 26, 'AH': 21, 'JS': 18, 'KS': 18, '7S': 16, '3H': 15,
    '8S': 15, '3S': 14, 'AD': 13, '7D': 12, '5H': 12, '8H': 10, 'QH': 10,
    '2S': 10, '6S': 9, '8D': 8, '7C': 8, 'JC': 8, '2H': 8, '4H': 8,
    '10H': 8, '4S': 8, '3C': 7, '5S': 7, 'JH': 6, '10S': 6, 'QS': 6,
    '4D': 5, '4C': 5, '5C': 5, '9S': 5, '9D': 4, 'KD': 4, '10D': 3,
    'QD': 3, 'AC': 3, '2C': 3, '6C': 3, '9C': 3, 'QC': 3, '6H': 3,
    'KH': 3, '2D': 2, '3D': 2, '5D': 2, '6D': 2, '8C': 2, '9H': 2,
    'JD': 1, '10C': 1, 'KC': 1,
}


def sample_cards() -> List[str]:
    """Multiconjunto equivalente a DECK_FREQUENCIES (cada carta repetida según su frecuencia)."""
    cards = []
    for card, n in DECK_FREQUENCIES.items():
        cards.extend([card] * n)
    return cards


def parse_card(card: str) -> Tuple[str, str]:
    """Separa una etiqueta en (rango, palo). Lanza ValueError si no es una carta válida."""
    if not isinstance(card, str) or len(card) < 2:
        raise ValueError(f"Carta inválida: {card!r}")
    rank, suit = card[:-1], card[-1]
    if rank not in RANK_ORDER or suit not in SUIT_ORDER:
        raise ValueError(f"Carta inválida: {card!r}")
    return rank, suit


def card_sort_key(symbol) -> tuple:
    """
    Clave de orden para mostrar: palo (S, H, C, D) y luego rango (A..K).
    Lo que no es una carta va al final, en orden lexicográfico.
    """
    try:
        rank, suit = parse_card(symbol)
    except ValueError:
        return (len(SUIT_ORDER), 0, str(symbol))
    return (SUIT_ORDER.index(suit), RANK_ORDER.index(rank), '')


def pretty(card: str) -> str:
    rank, suit = parse_card(card)
    return SUIT_SYMBOLS[suit] + rank
