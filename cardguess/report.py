import os
from typing import Hashable, List, Mapping

import numpy as np
import pandas as pd
import matplotlib.pyplot as plt
from scipy.stats import entropy

from .deck import card_sort_key
from .huffman import code_lengths, mean_length


def source_entropy(frequencies: Mapping[Hashable, int]) -> float:
    """Entropía de la fuente en bits/símbolo (cota inferior de la longitud media)."""
    return float(entropy(np.array(list(frequencies.values()), dtype=np.float64), base=2))


def code_table(code: Mapping[Hashable, str], frequencies: Mapping[Hashable, int]) -> pd.DataFrame:
    syms = sorted(code, key=lambda s: (len(code[s]), card_sort_key(s)))
    rows = [(s, frequencies[s], code[s], len(code[s])) for s in syms]
    return pd.DataFrame(rows, columns=["Carta", "Frecuencia", "Código", "Preguntas"])


def summary_rows(code: Mapping[Hashable, str], frequencies: Mapping[Hashable, int]):
    H = source_entropy(frequencies)
    Lavg = mean_length(code, frequencies)
    lengths = list(code_lengths(code).values())
    return [
        ("Símbolos", len(code)),
        ("Entropía [bits/símbolo]", H),
        ("Longitud media (Huffman)", Lavg),
        ("Eficiencia H/Lavg", H / Lavg if Lavg > 0 else float("nan")),
        ("Preguntas mínimas", min(lengths)),
        ("Preguntas máximas", max(lengths)),
    ]


def save_code_table_csv(out_dir: str, code, frequencies) -> pd.DataFrame:
    df = code_table(code, frequencies)
    df.to_csv(os.path.join(out_dir, "tabla_codigos.csv"), index=False)
    pd.DataFrame(summary_rows(code, frequencies), columns=["Métrica", "Valor"]).to_csv(
        os.path.join(out_dir, "resumen_metricas.csv"), index=False
    )
    return df


def plot_code_lengths(code, frequencies, title: str, fname: str):
    """Cuántas cartas necesitan k preguntas (barras) ponderado por frecuencia."""
    n = code_lengths(code)
    lengths = np.array([n[s] for s in frequencies], dtype=int)
    weights = np.array([frequencies[s] for s in frequencies], dtype=float)
    ks = np.arange(lengths.min(), lengths.max() + 1)
    cards = [int(np.sum(lengths == k)) for k in ks]
    picks = [float(weights[lengths == k].sum()) for k in ks]
    plt.figure()
    plt.subplot(1, 2, 1)
    plt.bar(ks, cards)
    plt.xlabel('Preguntas')
    plt.ylabel('Cartas')
    plt.subplot(1, 2, 2)
    plt.bar(ks, picks)
    plt.xlabel('Preguntas')
    plt.ylabel('Elecciones')
    plt.suptitle(title)
    plt.tight_layout()
    plt.savefig(fname, dpi=140)
    plt.close()


def plot_question_sizes(questions: List[list], title: str, fname: str):
    """Tamaño de cada conjunto de preguntas."""
    sizes = [len(q) for q in questions]
    plt.figure()
    plt.bar(range(1, len(sizes) + 1), sizes)
    plt.xlabel('Pregunta')
    plt.ylabel('Cartas mostradas')
    plt.title(title)
    plt.tight_layout()
    plt.savefig(fname, dpi=140)
    plt.close()


def write_markdown(out_dir: str, questions: List[list]):
    lines = "\n".join(f"{i + 1}. {' '.join(map(str, q))}" for i, q in enumerate(questions))
    md = f"""# Adivinador de cartas – Código de Huffman

## 1) Longitudes de código
![code_lengths](figures/code_lengths.png)

## 2) Conjuntos de preguntas
![question_sizes](figures/question_sizes.png)

{lines}

## 3) Métricas
Ver **resumen_metricas.csv** y **tabla_codigos.csv**.

**Notas**
- Cada pregunta muestra las cartas cuyo código tiene un 1 en esa posición.
- La longitud media de código es la cantidad esperada de preguntas.
"""
    with open(os.path.join(out_dir, "informe.md"), "w", encoding="utf-8") as f:
        f.write(md)
