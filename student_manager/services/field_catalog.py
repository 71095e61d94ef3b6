"""
Catalogue des champs modifiables un par un (menu de mise à jour).

Seules ces colonnes peuvent être transmises à update_student_field :
aucun identifiant arbitraire n'atteint la base.
"""

from typing import List, NamedTuple

from student_manager.exceptions import InputError, UnknownColumnError

EXIT_CHOICE = 0


class Field(NamedTuple):
    choice: int
    column: str
    label: str


FIELDS: tuple = (
    Field(1, "name", "Name"),
    Field(2, "gender", "Gender"),
    Field(3, "dob", "DOB"),
    Field(4, "phone", "Phone"),
    Field(5, "email", "Email"),
    Field(6, "address", "Address"),
    Field(7, "admission_date", "Admission Date"),
    Field(8, "department", "Department"),
    Field(9, "semester", "Semester"),
    Field(10, "division", "Division"),
    Field(11, "parent_name", "Parent Name"),
    Field(12, "parent_phone", "Parent Phone"),
)

_BY_CHOICE = {f.choice: f for f in FIELDS}
COLUMNS = frozenset(f.column for f in FIELDS)


def column_for(choice: int) -> str:
    """Retourne la colonne associée au choix 1..12. Lève InputError sinon (0 compris)."""
    field = _BY_CHOICE.get(choice)
    if field is None:
        raise InputError(f"Invalid field choice: {choice}")
    return field.column


def validate_column(column: str) -> str:
    if column not in COLUMNS:
        raise UnknownColumnError(column)
    return column


def menu_lines() -> List[str]:
    return [f"{f.choice}. {f.label}" for f in FIELDS] + [f"{EXIT_CHOICE}. Exit"]
