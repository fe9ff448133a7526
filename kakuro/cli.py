"""Command-line entry point: load a grid, show it, solve it."""

from __future__ import annotations

import argparse
import sys

from .grid import Grid
from .loaders import GridFormatError, load_interactive, load_json, load_text
from .solver import solve


def _ask_path(prompt: str) -> str:
    print(prompt, end="", flush=True)
    return sys.stdin.readline().rstrip("\r\n")


def _read_choice() -> int | None:
    tokens = sys.stdin.readline().split()
    try:
        return int(tokens[0])
    except (IndexError, ValueError):
        return None


def main(argv: list[str] | None = None) -> int:
    """Run the interactive solver; return the process exit status."""
    parser = argparse.ArgumentParser(prog="kakuro", description="Solve a Kakuro grid.")
    parser.parse_args(argv)

    print("=== Solveur de Kakuro ===")
    print("Choisissez le mode de chargement de la grille :")
    print("1. Depuis un fichier texte (.kakuro)")
    print("2. Depuis l’entrée utilisateur (manuel)")
    print("3. Depuis un fichier JSON (.json)")

    choice = _read_choice()
    path = ""
    try:
        grid: Grid
        if choice == 1:
            path = _ask_path("Chemin du fichier (ex: grilles/5_4.kakuro) : ")
            grid = load_text(path)
        elif choice == 2:
            grid = load_interactive(sys.stdin, sys.stdout)
        elif choice == 3:
            path = _ask_path("Chemin du fichier JSON (ex: grilles/5_4.json) : ")
            grid = load_json(path)
        else:
            print("❌ Choix invalide.")
            return 1
    except OSError:
        print(f"Erreur : impossible d’ouvrir le fichier {path}", file=sys.stderr)
        return 0
    except GridFormatError as exc:
        print(f"Erreur : {exc}", file=sys.stderr)
        return 1

    print("\nGrille initiale :")
    print(grid.render(), end="")

    print("\nRésolution automatique en cours...")
    if solve(grid):
        print("\n✅ Grille résolue avec succès :")
        print(grid.render(), end="")
    else:
        print("\n❌ Aucune solution trouvée.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())