"""
Accès aux élèves via les cinq procédures stockées du serveur.

Le schéma et le corps des procédures vivent dans la base : ce module ne fait
que lier les paramètres (dans l'ordre attendu par chaque procédure), décoder
les lignes de résultat et classer les erreurs du driver.

Chaque opération est une transaction : commit si succès, rollback sinon.
"""

import logging
from typing import Iterator, Mapping, Optional

from pydantic import ValidationError
from sqlalchemy import text
from sqlalchemy.exc import (
    DataError,
    DBAPIError,
    DisconnectionError,
    IntegrityError,
    InterfaceError,
    OperationalError,
    ProgrammingError,
    SQLAlchemyError,
    TimeoutError as PoolTimeoutError,
)
from sqlalchemy.orm import Session

from student_manager.exceptions import (
    ConnectivityError,
    ConstraintError,
    NotCreatedError,
    RowDecodeError,
    StoreError,
)
from student_manager.schemas.student import Student, StudentCreate
from student_manager.services import field_catalog

logger = logging.getLogger(__name__)

INSERT_STUDENT = text(
    "CALL insert_student(:name, :gender, :dob, :phone, :email, :address, "
    ":admission_date, :department, :semester, :division, :parent_name, :parent_phone)"
)
GET_STUDENT_BY_ID = text("CALL get_student_by_id(:student_id)")
GET_ALL_STUDENTS = text("CALL get_all_students()")
UPDATE_STUDENT_FIELD = text("CALL update_student_field(:student_id, :column, :value)")
DELETE_STUDENT_BY_ID = text("CALL delete_student_by_id(:student_id)")


def classify_error(operation: str, exc: SQLAlchemyError) -> StoreError:
    """Traduit une erreur SQLAlchemy en erreur applicative."""
    message = str(getattr(exc, "orig", None) or exc)
    if isinstance(exc, DBAPIError) and exc.connection_invalidated:
        return ConnectivityError(operation, message)
    if isinstance(exc, (OperationalError, InterfaceError, DisconnectionError, PoolTimeoutError)):
        return ConnectivityError(operation, message)
    if isinstance(exc, (IntegrityError, DataError, ProgrammingError, DBAPIError)):
        return ConstraintError(operation, message)
    return ConnectivityError(operation, message)


def _to_student(row: Mapping) -> Student:
    """Construit un Student à partir d'une ligne de résultat (colonne student_id)."""
    return Student(
        id=row["student_id"],
        name=row["name"],
        gender=row["gender"],
        dob=row["dob"],
        phone=row["phone"],
        email=row["email"],
        address=row["address"],
        admission_date=row["admission_date"],
        department=row["department"],
        semester=row["semester"],
        division=row["division"],
        parent_name=row["parent_name"],
        parent_phone=row["parent_phone"],
    )


class RecordStore:
    """Enveloppe typée autour des procédures stockées. Ne détient que la session."""

    def __init__(self, db: Session):
        self.db = db

    def _failed(self, operation: str, exc: SQLAlchemyError) -> StoreError:
        self.db.rollback()
        error = classify_error(operation, exc)
        logger.warning("%s pendant %s : %s", error.kind, operation, error.message)
        return error

    def _decode(self, operation: str, row: Mapping) -> Student:
        try:
            return _to_student(row)
        except ValidationError as exc:
            error = RowDecodeError(operation, f"Unreadable student row: {exc.errors()[0]['msg']}")
            logger.warning("%s pendant %s : %s", error.kind, operation, exc)
            raise error

    def create(self, data: StudentCreate) -> str:
        """
        Crée un élève et retourne l'identifiant généré par la base.
        Lève NotCreatedError si la procédure ne renvoie aucune ligne avec student_id.
        """
        logger.info("Création de l'élève %s", data.name)
        try:
            row = self.db.execute(INSERT_STUDENT, data.procedure_params()).mappings().first()
        except SQLAlchemyError as exc:
            raise self._failed("create", exc)

        student_id = row.get("student_id") if row is not None else None
        if student_id is None or str(student_id) == "":
            self.db.rollback()
            logger.warning("NotCreated pendant create : aucun identifiant renvoyé")
            raise NotCreatedError("create", "The store returned no student id.")

        self.db.commit()
        return str(student_id)

    def get_by_id(self, student_id: str) -> Optional[Student]:
        """Retourne l'élève, ou None si aucun élève ne porte cet id."""
        logger.info("Lecture de l'élève %s", student_id)
        try:
            row = self.db.execute(GET_STUDENT_BY_ID, {"student_id": student_id}).mappings().first()
            self.db.commit()
        except SQLAlchemyError as exc:
            raise self._failed("get_by_id", exc)
        if row is None:
            return None
        return self._decode("get_by_id", row)

    def list_all(self) -> Iterator[Student]:
        """
        Parcourt tous les élèves dans l'ordre renvoyé par la base.
        La procédure est appelée à chaque nouvelle itération, pas avant.
        """
        logger.info("Lecture de tous les élèves")
        try:
            rows = self.db.execute(GET_ALL_STUDENTS).mappings().all()
            self.db.commit()
        except SQLAlchemyError as exc:
            raise self._failed("list_all", exc)
        for row in rows:
            yield self._decode("list_all", row)

    def update_field(self, student_id: str, column: str, value: str) -> None:
        """
        Modifie une seule colonne d'un élève.
        La colonne est vérifiée contre le catalogue avant tout appel ;
        la procédure ne signale pas si l'élève existait.
        """
        field_catalog.validate_column(column)
        logger.info("Mise à jour de %s pour l'élève %s", column, student_id)
        try:
            self.db.execute(
                UPDATE_STUDENT_FIELD,
                {"student_id": student_id, "column": column, "value": value},
            )
            self.db.commit()
        except SQLAlchemyError as exc:
            raise self._failed("update_field", exc)

    def delete_by_id(self, student_id: str) -> int:
        """Supprime un élève. Retourne le nombre de lignes supprimées (0 = introuvable)."""
        logger.info("Suppression de l'élève %s", student_id)
        try:
            result = self.db.execute(DELETE_STUDENT_BY_ID, {"student_id": student_id})
            if result.returns_rows:
                # Procédure terminée par SELECT ROW_COUNT()
                row = result.first()
                count = int(row[0]) if row is not None and row[0] is not None else 0
            else:
                count = max(result.rowcount, 0)
            self.db.commit()
        except SQLAlchemyError as exc:
            raise self._failed("delete_by_id", exc)
        return count
