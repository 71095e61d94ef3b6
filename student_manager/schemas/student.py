"""
Schémas Pydantic pour les élèves.
"""

from datetime import date
from enum import Enum
from typing import Any

from pydantic import BaseModel, field_validator


class Gender(str, Enum):
    MALE = "Male"
    FEMALE = "Female"


class StudentCreate(BaseModel):
    """
    Données saisies à la création d'un élève (tous les champs sauf l'id).
    L'ordre des champs est celui des paramètres de la procédure insert_student.
    """
    name: str
    gender: str
    dob: str
    phone: str
    email: str = ""
    address: str = ""
    admission_date: str
    department: str = ""
    semester: int
    division: str = ""
    parent_name: str = ""
    parent_phone: str

    @field_validator("name", "phone", "parent_phone")
    @classmethod
    def not_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("The field cannot be empty.")
        return v.strip()

    @field_validator("gender")
    @classmethod
    def known_gender(cls, v: str) -> str:
        for g in Gender:
            if v.strip().lower() == g.value.lower():
                return g.value
        raise ValueError("Gender must be Male or Female.")

    @field_validator("semester")
    @classmethod
    def positive_semester(cls, v: int) -> int:
        if v < 1:
            raise ValueError("Semester must be a positive number.")
        return v

    def procedure_params(self) -> dict:
        """Paramètres nommés liés positionnellement dans l'appel CALL."""
        return self.model_dump()


class Student(BaseModel):
    """Un élève tel que renvoyé par get_student_by_id / get_all_students."""
    id: str
    name: str
    gender: str
    dob: str
    phone: str
    email: str
    address: str
    admission_date: str
    department: str
    semester: int
    division: str
    parent_name: str
    parent_phone: str

    @field_validator("id", mode="before")
    @classmethod
    def id_as_text(cls, v: Any) -> str:
        return str(v)

    @field_validator("dob", "admission_date", mode="before")
    @classmethod
    def date_as_text(cls, v: Any) -> str:
        # Le driver renvoie des datetime.date ; on garde le format de saisie YYYY-MM-DD
        if isinstance(v, date):
            return v.isoformat()
        return "" if v is None else str(v)

    @field_validator("semester", mode="before")
    @classmethod
    def null_semester(cls, v: Any) -> Any:
        # Même lecture que getInt : NULL vaut 0
        return 0 if v is None else v

    @field_validator(
        "name", "gender", "phone", "email", "address", "department",
        "division", "parent_name", "parent_phone",
        mode="before",
    )
    @classmethod
    def null_as_empty(cls, v: Any) -> str:
        return "" if v is None else v
