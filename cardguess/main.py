import argparse
import json
import os

from .bits_utils import bits_entropy_stats
from .deck import pretty, sample_cards
from .questions import group_by_suit
from .report import (
    plot_code_lengths,
    plot_question_sizes,
    save_code_table_csv,
    summary_rows,
    write_markdown,
)
from .session import GuessParams, GuessSession


def ensure_dirs(out_dir: str) -> str:
    os.makedirs(out_dir, exist_ok=True)
    figdir = os.path.join(out_dir, "figures")
    os.makedirs(figdir, exist_ok=True)
    return figdir


def format_question(cards) -> str:
    rows = group_by_suit(cards)
    body = "\n".join(" ".join(pretty(c) for c in row) for row in rows.values())
    return f"¿Está tu carta entre estas?\n{body}"


def play(session: GuessSession, ask=input, say=print):
    """Juega una partida por consola. Devuelve la carta adivinada."""
    while not session.finished:
        say(f"\nPregunta {session.index + 1}:")
        say(format_question(session.current_question()))
        reply = ask("(s/n) > ")
        try:
            session.answer(reply)
        except ValueError as e:
            say(str(e))
    say(f"\nTu carta es: {pretty(session.guess)} ({len(session.answers)} preguntas)")
    return session.guess


def run_report(out_dir: str, params: GuessParams):
    figdir = ensure_dirs(out_dir)
    session = GuessSession.from_cards(sample_cards(), params)

    # 1) Tabla de códigos + métricas
    save_code_table_csv(out_dir, session.code, session.frequencies)

    # 2) Figuras
    plot_code_lengths(session.code, session.frequencies, "Preguntas por carta",
                      os.path.join(figdir, "code_lengths.png"))
    plot_question_sizes(session.questions, "Cartas por pregunta",
                        os.path.join(figdir, "question_sizes.png"))

    # 3) Informe + parámetros
    write_markdown(out_dir, session.questions)
    with open(os.path.join(out_dir, "params.json"), "w", encoding="utf-8") as f:
        json.dump(session.to_dict()["params"], f, indent=2, ensure_ascii=False)

    return summary_rows(session.code, session.frequencies)


def main(argv=None):
    ap = argparse.ArgumentParser(description="Adivinador de cartas con código de Huffman")
    ap.add_argument("--seed", type=int, default=None, help="Semilla de la aleatorización")
    ap.add_argument("--mask_bits", type=int, default=53, help="Bits de la máscara de intercambio")
    ap.add_argument("--no-randomize", dest="randomize", action="store_false",
                    help="Usar el árbol de Huffman sin aleatorizar")
    ap.add_argument("--report", action="store_true", help="Generar informe en vez de jugar")
    ap.add_argument("--out", default="outputs", help="Directorio de salida del informe")
    args = ap.parse_args(argv)

    params = GuessParams(seed=args.seed, mask_bits=args.mask_bits, randomize=args.randomize)

    if args.report:
        for name, value in run_report(args.out, params):
            print(f"{name}: {value}")
        print(f"Listo. Salidas en: {args.out}")
        return

    session = GuessSession.from_cards(sample_cards(), params)
    print("Elige una carta y responde s/n a cada pregunta.")
    while True:
        play(session)
        _, p1, H, _ = bits_entropy_stats(session.answers)
        print(f"P(sí) = {p1:.2f} | H = {H:.2f} bits/respuesta")
        if input("¿Otra vez? (s/n) > ").strip().lower() not in {"s", "si", "sí", "y", "yes"}:
            break
        session.reset()


if __name__ == "__main__":
    main()
