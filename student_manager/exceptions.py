"""
Taxonomie des erreurs de l'application.

Toutes sont récupérables : elles sont interceptées à la frontière du
sous-menu qui a lancé l'opération, puis le contrôle revient au menu.
"""


class InputError(ValueError):
    """Saisie menu non numérique ou hors plage. Toujours corrigée par une nouvelle saisie."""


class UnknownColumnError(InputError):
    """Colonne absente du catalogue des champs modifiables."""

    def __init__(self, column: str):
        super().__init__(f"Unknown column: {column!r}")
        self.column = column


class StoreError(Exception):
    """Erreur remontée par un appel de procédure stockée."""

    kind = "StoreError"

    def __init__(self, operation: str, message: str):
        super().__init__(message)
        self.operation = operation
        self.message = message


class ConnectivityError(StoreError):
    """Échec du transport ou du driver (serveur injoignable, connexion perdue, timeout)."""

    kind = "ConnectivityError"


class ConstraintError(StoreError):
    """Rejet côté serveur (date mal formée, contrainte violée, procédure refusée)."""

    kind = "ConstraintError"


class NotCreatedError(StoreError):
    """La procédure de création n'a renvoyé aucun identifiant."""

    kind = "NotCreated"


class RowDecodeError(StoreError):
    """Ligne renvoyée par une procédure impossible à lire comme un élève."""

    kind = "DecodeError"
