"""
Sous-menus de la console : création, consultation, modification, suppression.

Chaque sous-menu intercepte les erreurs du RecordStore, affiche le message
et rend la main au menu appelant : une erreur de la base n'arrête jamais
la boucle principale.
"""

from enum import IntEnum

from pydantic import ValidationError

from student_manager.cli import render
from student_manager.cli.terminal import Terminal
from student_manager.exceptions import InputError, StoreError
from student_manager.schemas.student import StudentCreate
from student_manager.services import field_catalog
from student_manager.services.record_store import RecordStore

NOT_A_NUMBER = "Invalid input! Please enter a NUMBER only."

# (champ, invite) dans l'ordre des paramètres de insert_student
CREATE_PROMPTS = (
    ("name", "Enter Name: "),
    ("gender", "Enter Gender (Male/Female): "),
    ("dob", "Enter DOB (YYYY-MM-DD): "),
    ("phone", "Enter Phone: "),
    ("email", "Enter Email: "),
    ("address", "Enter Address: "),
    ("admission_date", "Enter Admission Date (YYYY-MM-DD): "),
    ("department", "Enter Department: "),
    ("semester", "Enter Semester: "),
    ("division", "Enter Division: "),
    ("parent_name", "Enter Parent Name: "),
    ("parent_phone", "Enter Parent Phone: "),
)


class ViewCommand(IntEnum):
    INDIVIDUAL = 1
    ALL = 2
    BACK = 3


VIEW_MENU = (
    "1 :: Individual Student",
    "2 :: All Students",
    "3 :: Return to main menu",
)


def ask_student_id(terminal: Terminal, prompt: str) -> str:
    """Redemande tant que la saisie est vide."""
    while True:
        student_id = terminal.ask_token(prompt)
        if student_id:
            return student_id
        terminal.say("Student ID cannot be empty.")


def report_error(terminal: Terminal, exc: StoreError) -> None:
    terminal.say(f"Error: {exc.message}")


class CreateFlow:
    def __init__(self, store: RecordStore, terminal: Terminal):
        self.store = store
        self.terminal = terminal

    def _ask_semester(self, prompt: str) -> int:
        while True:
            try:
                return self.terminal.ask_int(prompt)
            except InputError:
                self.terminal.say("Semester must be a number.")

    def run(self) -> None:
        values = {}
        for field, prompt in CREATE_PROMPTS:
            if field == "semester":
                values[field] = self._ask_semester(prompt)
            else:
                values[field] = self.terminal.ask(prompt)

        try:
            data = StudentCreate(**values)
        except ValidationError as exc:
            for error in exc.errors():
                self.terminal.say(f"Invalid {error['loc'][0]}: {error['msg']}")
            self.terminal.say("Student not added.")
            return

        try:
            student_id = self.store.create(data)
        except StoreError as exc:
            report_error(self.terminal, exc)
            return

        self.terminal.say("\nStudent Added Successfully!")
        self.terminal.say(f"Generated Student ID: {student_id}")


class ViewFlow:
    """Sous-menu de consultation : un élève, tous les élèves, retour."""

    def __init__(self, store: RecordStore, terminal: Terminal):
        self.store = store
        self.terminal = terminal
        self._commands = {
            ViewCommand.INDIVIDUAL: self.show_one,
            ViewCommand.ALL: self.show_all,
        }

    def step(self) -> bool:
        """Traite un choix du sous-menu. Retourne False pour revenir au menu principal."""
        self.terminal.say()
        for line in VIEW_MENU:
            self.terminal.say(line)
        try:
            command = ViewCommand(self.terminal.ask_int("Enter your retrieve choice :: "))
        except InputError:
            self.terminal.say("Enter number only")
            return True
        except ValueError:
            self.terminal.say("Enter valid retrieve choice")
            return True

        if command is ViewCommand.BACK:
            self.terminal.say("Returning to Main Menu...")
            return False
        self._commands[command]()
        return True

    def show_one(self) -> None:
        student_id = ask_student_id(self.terminal, "Enter Student ID :: ")
        try:
            student = self.store.get_by_id(student_id)
        except StoreError as exc:
            report_error(self.terminal, exc)
            return
        if student is None:
            self.terminal.say("Student not found!")
            return
        for line in render.detail_lines(student):
            self.terminal.say(line)

    def show_all(self) -> None:
        try:
            lines = render.table_lines(self.store.list_all())
        except StoreError as exc:
            self.terminal.say(f"Error fetching all students: {exc.message}")
            return
        for line in lines:
            self.terminal.say(line)


class UpdateFlow:
    """
    Modification champ par champ d'un élève.
    begin() lit l'id visé, puis chaque step() traite un choix du menu
    jusqu'au choix 0.
    """

    def __init__(self, store: RecordStore, terminal: Terminal):
        self.store = store
        self.terminal = terminal
        self.student_id = None

    def begin(self) -> None:
        self.student_id = ask_student_id(self.terminal, "Enter Student ID to update: ")

    def step(self) -> bool:
        """Retourne False quand l'opérateur quitte le menu de modification."""
        self.terminal.say("\n=== Update Menu ===")
        for line in field_catalog.menu_lines():
            self.terminal.say(line)
        try:
            choice = self.terminal.ask_int("Choose field to update: ")
        except InputError:
            self.terminal.say(NOT_A_NUMBER)
            return True

        if choice == field_catalog.EXIT_CHOICE:
            self.terminal.say("Exiting update menu...")
            self.student_id = None
            return False

        try:
            column = field_catalog.column_for(choice)
        except InputError:
            self.terminal.say("Invalid choice. Try again.")
            return True

        value = self.terminal.ask_raw(f"Enter new value for {column}: ")
        try:
            self.store.update_field(self.student_id, column, value)
        except StoreError as exc:
            report_error(self.terminal, exc)
            return True

        self.terminal.say(f"{column} updated successfully!")
        return True


class DeleteFlow:
    def __init__(self, store: RecordStore, terminal: Terminal):
        self.store = store
        self.terminal = terminal

    def run(self) -> None:
        """Suppression en deux temps : id puis confirmation explicite Y."""
        student_id = ask_student_id(self.terminal, "Enter Student ID to delete: ")
        confirm = self.terminal.ask_token("Are you sure you want to delete this student? (Y/N): ")
        if confirm.lower() != "y":
            self.terminal.say("Deletion cancelled.")
            return

        try:
            deleted = self.store.delete_by_id(student_id)
        except StoreError as exc:
            report_error(self.terminal, exc)
            return

        if deleted > 0:
            self.terminal.say(f"Student with ID {student_id} deleted successfully!")
        else:
            self.terminal.say(f"No student found with ID: {student_id}")
