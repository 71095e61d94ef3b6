"""
Lecture et écriture console, passées explicitement aux menus.
"""

import sys
from typing import Optional, TextIO

import click

from student_manager.exceptions import InputError


class Terminal:
    """
    Lit des lignes ou des mots sur un flux d'entrée, écrit via click.echo.
    Lève EOFError en fin d'entrée (Ctrl-D) : le contrôleur la traite comme une sortie.
    """

    def __init__(self, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None):
        self.stdin = stdin or sys.stdin
        self.stdout = stdout

    def say(self, message: str = "") -> None:
        click.echo(message, file=self.stdout)

    def ask(self, prompt: str) -> str:
        """Affiche l'invite et retourne la ligne saisie, sans espaces autour."""
        return self.ask_raw(prompt).strip()

    def ask_raw(self, prompt: str) -> str:
        """Ligne saisie telle quelle, sans le saut de ligne final."""
        click.echo(prompt, file=self.stdout, nl=False)
        line = self.stdin.readline()
        if not line:
            raise EOFError
        return line.rstrip("\r\n")

    def ask_token(self, prompt: str) -> str:
        """Retourne le premier mot de la ligne saisie ("" si ligne vide)."""
        words = self.ask(prompt).split()
        return words[0] if words else ""

    def ask_int(self, prompt: str) -> int:
        """Lève InputError si la saisie n'est pas un entier."""
        token = self.ask_token(prompt)
        try:
            return int(token)
        except ValueError:
            raise InputError(f"Not a number: {token!r}")
