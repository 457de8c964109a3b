import numpy as np
import math
import numbers
from typing import Iterable, List, Tuple, Union

Bit = Union[str, int, bool]


def parse_bit(b: Bit) -> int:
    """Convierte un bit ('0'/'1', 0/1, False/True) a int. Cualquier otro valor es un error."""
    if isinstance(b, (bool, np.bool_)):
        return int(b)
    if isinstance(b, numbers.Integral) and b in (0, 1):
        return int(b)
    if isinstance(b, str) and b in ('0', '1'):
        return int(b)
    raise ValueError(f"Bit inválido: {b!r} (se espera '0' o '1')")


def parse_bits(bits: Union[str, Iterable[Bit]]) -> List[int]:
    return [parse_bit(b) for b in bits]


def bits_to_str(bits: Iterable[Bit]) -> str:
    return ''.join(str(b) for b in parse_bits(bits))


def bits_entropy_stats(bits: List[int]) -> Tuple[float, float, float, float]:
    """
    Calcula métricas del flujo de bits:
    - p0: probabilidad de 0
    - p1: probabilidad de 1
    - H: entropía (bits/bit)
    - var: varianza sobre {0,1}
    Para una secuencia vacía devuelve NaN en todas las métricas.
    """
    arr = np.array(parse_bits(bits), dtype=np.uint8)
    if arr.size == 0:
        nan = float("nan")
        return nan, nan, nan, nan
    p1 = float(arr.mean())
    p0 = 1 - p1

    def hb(p):
        if p <= 0 or p >= 1:
            return 0.0
        return -p * math.log2(p) - (1 - p) * math.log2(1 - p)

    H = hb(p1)
    var = float(arr.var())
    return p0, p1, H, var
