"""
Mise en forme des élèves pour la console.
L'en-tête du tableau est repris tel quel par les scripts des opérateurs.
"""

from typing import Iterable, List

from student_manager.schemas.student import Student

TABLE_HEADER = (
    "ID       | Name                | Gender | DOB         | Phone          "
    "| Email                     | Address        | Admission   | Department      "
    "| Sem | Div | Parent Name         | Parent Phone"
)
TABLE_RULE = "-" * 169


def detail_lines(student: Student) -> List[str]:
    return [
        "",
        "=========== Student Details ===========",
        f"ID            : {student.id}",
        f"Name          : {student.name}",
        f"Gender        : {student.gender}",
        f"DOB           : {student.dob}",
        f"Phone         : {student.phone}",
        f"Email         : {student.email}",
        f"Address       : {student.address}",
        f"Admission Date: {student.admission_date}",
        f"Department    : {student.department}",
        f"Semester      : {student.semester}",
        f"Division      : {student.division}",
        f"Parent Name   : {student.parent_name}",
        f"Parent Phone  : {student.parent_phone}",
        "=========================================",
    ]


def table_row(s: Student) -> str:
    return (
        f"{s.id:<8} | {s.name:<20} | {s.gender:<6} | {s.dob:<10} | {s.phone:<14} "
        f"| {s.email:<25} | {s.address:<14} | {s.admission_date:<11} | {s.department:<15} "
        f"| {s.semester:<3d} | {s.division:<3} | {s.parent_name:<20} | {s.parent_phone:<12}"
    )


def table_lines(students: Iterable[Student]) -> List[str]:
    """En-tête, séparateur puis une ligne par élève (tableau vide si aucun élève)."""
    return ["", TABLE_HEADER, TABLE_RULE] + [table_row(s) for s in students]
