"""
Tests du catalogue des champs modifiables.
"""

import pytest

from student_manager.exceptions import InputError, UnknownColumnError
from student_manager.services import field_catalog


def test_catalogue_ordre_des_colonnes():
    assert [f.column for f in field_catalog.FIELDS] == [
        "name", "gender", "dob", "phone", "email", "address", "admission_date",
        "department", "semester", "division", "parent_name", "parent_phone",
    ]


def test_column_for_choix_valides():
    assert field_catalog.column_for(1) == "name"
    assert field_catalog.column_for(9) == "semester"
    assert field_catalog.column_for(12) == "parent_phone"


@pytest.mark.parametrize("choice", [0, 13, -1, 99])
def test_column_for_hors_plage(choice):
    with pytest.raises(InputError):
        field_catalog.column_for(choice)


def test_validate_column():
    assert field_catalog.validate_column("admission_date") == "admission_date"
    with pytest.raises(UnknownColumnError) as exc:
        field_catalog.validate_column("student_id")
    assert exc.value.column == "student_id"


def test_menu_lines():
    lines = field_catalog.menu_lines()
    assert lines[0] == "1. Name"
    assert lines[6] == "7. Admission Date"
    assert lines[-1] == "0. Exit"
    assert len(lines) == 13
