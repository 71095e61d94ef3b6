"""
Configuration partagée pour tous les tests.
FakeProcedureSession remplace la session SQLAlchemy : elle interprète les cinq
appels CALL en mémoire, sans connexion réelle à MySQL.
"""

import io
import re
from datetime import date

import pytest
from sqlalchemy.exc import DataError

from student_manager.cli.terminal import Terminal
from student_manager.schemas.student import StudentCreate
from student_manager.services.record_store import RecordStore

CALL_REGEX = re.compile(r"CALL\s+(\w+)\s*\(")
DATE_COLUMNS = {"dob", "admission_date"}


class FakeMappings:
    def __init__(self, rows):
        self._rows = rows

    def first(self):
        return self._rows[0] if self._rows else None

    def all(self):
        return list(self._rows)

    def __iter__(self):
        return iter(self._rows)


class FakeResult:
    def __init__(self, rows=None, rowcount=-1):
        self._rows = rows
        self.returns_rows = rows is not None
        self.rowcount = rowcount

    def mappings(self):
        return FakeMappings(self._rows or [])

    def first(self):
        return tuple(self._rows[0].values()) if self._rows else None


class FakeProcedureSession:
    """Imite le comportement des procédures stockées sur une table en mémoire."""

    def __init__(self):
        self.rows = {}
        self.calls = []
        self.commits = 0
        self.rollbacks = 0
        self._next_id = 1

    def _as_date(self, statement, params, value):
        try:
            return date.fromisoformat(value)
        except ValueError:
            raise DataError(statement, params, Exception(f"Incorrect date value: '{value}'"))

    def execute(self, statement, params=None):
        params = params or {}
        sql = str(statement)
        procedure = CALL_REGEX.search(sql).group(1)
        self.calls.append((procedure, dict(params)))

        if procedure == "insert_student":
            student_id = f"STU{self._next_id:03d}"
            self._next_id += 1
            row = {"student_id": student_id}
            for key, value in params.items():
                row[key] = self._as_date(sql, params, value) if key in DATE_COLUMNS else value
            self.rows[student_id] = row
            return FakeResult([{"student_id": student_id}])

        if procedure == "get_student_by_id":
            row = self.rows.get(params["student_id"])
            return FakeResult([dict(row)] if row else [])

        if procedure == "get_all_students":
            return FakeResult([dict(r) for r in self.rows.values()])

        if procedure == "update_student_field":
            row = self.rows.get(params["student_id"])
            column, value = params["column"], params["value"]
            if column in DATE_COLUMNS:
                value = self._as_date(sql, params, value)
            elif column == "semester":
                if not value.isdigit():
                    raise DataError(sql, params, Exception(f"Incorrect integer value: '{value}'"))
                value = int(value)
            if row is not None:
                row[column] = value
            return FakeResult()

        if procedure == "delete_student_by_id":
            deleted = 1 if self.rows.pop(params["student_id"], None) else 0
            return FakeResult(rowcount=deleted)

        raise AssertionError(f"Procédure inconnue : {procedure}")

    def procedures_called(self):
        return [name for name, _ in self.calls]

    def commit(self):
        self.commits += 1

    def rollback(self):
        self.rollbacks += 1


def make_terminal(*lines: str) -> Terminal:
    """Terminal alimenté par les lignes données ; la sortie est lisible via terminal.stdout."""
    text = "".join(line + "\n" for line in lines)
    return Terminal(stdin=io.StringIO(text), stdout=io.StringIO())


def output_of(terminal: Terminal) -> str:
    return terminal.stdout.getvalue()


STUDENT_INPUT = (
    "Alice Martin",     # name
    "female",           # gender
    "2003-04-12",       # dob
    "0470123456",       # phone
    "alice@school.be",  # email
    "Rue Haute 12",     # address
    "2021-09-01",       # admission date
    "Computer Science", # department
    "3",                # semester
    "B",                # division
    "Paul Martin",      # parent name
    "0470654321",       # parent phone
)


@pytest.fixture
def fake_db():
    return FakeProcedureSession()


@pytest.fixture
def store(fake_db):
    return RecordStore(fake_db)


@pytest.fixture
def student_data():
    return StudentCreate(
        name="Alice Martin",
        gender="Female",
        dob="2003-04-12",
        phone="0470123456",
        email="alice@school.be",
        address="Rue Haute 12",
        admission_date="2021-09-01",
        department="Computer Science",
        semester=3,
        division="B",
        parent_name="Paul Martin",
        parent_phone="0470654321",
    )
