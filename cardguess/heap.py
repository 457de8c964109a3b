"""Cola de prioridad mínima (por peso) sobre heapq."""

from heapq import heappush, heappop
from itertools import count


class MinHeap:
    """
    Heap binario de nodos ordenados por `weight`.

    Los empates se resuelven por orden de inserción: cada entrada lleva un
    contador creciente, así que de dos nodos con igual peso sale primero el
    que entró antes.
    """

    def __init__(self):
        self._items = []
        self._seq = count()

    def insert(self, node):
        heappush(self._items, (node.weight, next(self._seq), node))

    def extract_min(self):
        if not self._items:
            raise IndexError("extract_min sobre un heap vacío")
        return heappop(self._items)[2]

    def __len__(self):
        return len(self._items)
