"""Sesión de juego: árbol activo, preguntas y respuestas acumuladas.

Todo el estado de una partida vive en un GuessSession; el motor (huffman,
randomizer, questions, decoder) son funciones puras sobre árbol y bits.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Hashable, List, Mapping, Optional

import numpy as np

from .bits_utils import bits_to_str, parse_bit
from .deck import sample_cards
from .decoder import decode, is_decodable
from .huffman import build_code, build_tree, count_frequencies
from .questions import build_questions
from .randomizer import MASK_BITS, MAX_MASK_BITS, randomize

YES = {"yes", "y", "si", "sí", "s", "1", "true"}
NO = {"no", "n", "0", "false"}


@dataclass
class GuessParams:
    seed: Optional[int] = None
    mask_bits: int = MASK_BITS
    randomize: bool = True


def parse_answer(value) -> int:
    """sí -> 1, no -> 0. Acepta bits, booleanos y texto."""
    if isinstance(value, str):
        v = value.strip().lower()
        if v in YES:
            return 1
        if v in NO:
            return 0
        raise ValueError(f"Respuesta inválida: {value!r} (use sí/no)")
    return parse_bit(value)


def parse_flag(value, default: bool) -> bool:
    """Interpreta una opción booleana (JSON bool, sí/no, 1/0). None -> default."""
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    try:
        return bool(parse_answer(value))
    except ValueError:
        raise ValueError(f"Valor booleano inválido: {value!r}") from None


class GuessSession:
    def __init__(self, frequencies: Optional[Mapping[Hashable, int]] = None, params: Optional[GuessParams] = None):
        self.params = params or GuessParams()
        if not (0 <= self.params.mask_bits <= MAX_MASK_BITS):
            raise ValueError(f"mask_bits debe estar entre 0 y {MAX_MASK_BITS}")
        if frequencies is None:
            frequencies = count_frequencies(sample_cards())
        self.frequencies = dict(frequencies)
        self.base_tree = build_tree(self.frequencies)
        self._rng = np.random.default_rng(self.params.seed)
        self.reset()

    @classmethod
    def from_cards(cls, cards, params: Optional[GuessParams] = None) -> "GuessSession":
        """Sesión a partir del multiconjunto de elecciones (la repetición es la frecuencia)."""
        return cls(count_frequencies(cards), params)

    def reset(self):
        """Vuelve a empezar con una nueva aleatorización del árbol base."""
        if self.params.randomize:
            self.tree = randomize(self.base_tree, mask_bits=self.params.mask_bits, rng=self._rng)
        else:
            self.tree = self.base_tree
        self.code = build_code(self.tree)
        self.questions = build_questions(self.code)
        self.answers: List[int] = []
        self.index = 0
        self.guess = None
        # Un único símbolo: queda identificado sin preguntas
        if is_decodable(self.tree, self.answers):
            self.guess = decode(self.tree, self.answers)[0]

    @property
    def finished(self) -> bool:
        return self.guess is not None

    def current_question(self) -> Optional[List[Hashable]]:
        if self.finished:
            return None
        return self.questions[self.index]

    def answer(self, value):
        """Agrega una respuesta; devuelve la carta adivinada o None si hay que seguir preguntando."""
        if self.finished:
            raise RuntimeError("La sesión ya terminó; use reset() para jugar otra vez")
        self.answers.append(parse_answer(value))
        self.index += 1
        if is_decodable(self.tree, self.answers):
            self.guess = decode(self.tree, self.answers)[0]
        return self.guess

    def to_dict(self) -> dict:
        return {
            "finished": self.finished,
            "question_index": self.index,
            "question": self.current_question(),
            "total_questions": len(self.questions),
            "answers": bits_to_str(self.answers),
            "guess": self.guess,
            "params": asdict(self.params),
        }
