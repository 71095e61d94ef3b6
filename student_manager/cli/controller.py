"""
Boucle principale de la console, sous forme de machine à états.

États : MAIN_MENU (initial), VIEW_SUBMENU, UPDATE_LOOP, EXIT (seul état final).
Une saisie invalide laisse l'état inchangé ; seule la commande Exit
(ou la fin de l'entrée standard) termine la boucle.
"""

import logging
from enum import Enum, IntEnum

from student_manager.cli.flows import NOT_A_NUMBER, CreateFlow, DeleteFlow, UpdateFlow, ViewFlow
from student_manager.cli.terminal import Terminal
from student_manager.exceptions import InputError
from student_manager.services.record_store import RecordStore

logger = logging.getLogger(__name__)


class State(Enum):
    MAIN_MENU = "main_menu"
    VIEW_SUBMENU = "view_submenu"
    UPDATE_LOOP = "update_loop"
    EXIT = "exit"


class MainCommand(IntEnum):
    NEW = 1
    VIEW = 2
    UPDATE = 3
    REMOVE = 4
    EXIT = 5


MAIN_MENU = (
    "1: New Student",
    "2: View Student",
    "3: Update Student",
    "4: Remove Student",
    "5: Exit",
)
BANNER = "\n============================= Student Manager ============================="


class MainController:
    def __init__(self, store: RecordStore, terminal: Terminal):
        self.terminal = terminal
        self.create_flow = CreateFlow(store, terminal)
        self.view_flow = ViewFlow(store, terminal)
        self.update_flow = UpdateFlow(store, terminal)
        self.delete_flow = DeleteFlow(store, terminal)
        self.state = State.MAIN_MENU

        self._states = {
            State.MAIN_MENU: self._main_menu,
            State.VIEW_SUBMENU: self._view_submenu,
            State.UPDATE_LOOP: self._update_loop,
        }
        self._commands = {
            MainCommand.NEW: self._new,
            MainCommand.VIEW: lambda: State.VIEW_SUBMENU,
            MainCommand.UPDATE: self._update,
            MainCommand.REMOVE: self._remove,
            MainCommand.EXIT: lambda: State.EXIT,
        }

    def run(self) -> None:
        while self.state is not State.EXIT:
            self.state = self.step()
        self.terminal.say("Goodbye!")

    def step(self) -> State:
        """Exécute l'état courant et retourne l'état suivant."""
        try:
            return self._states[self.state]()
        except EOFError:
            logger.info("Fin de l'entrée standard, arrêt depuis l'état %s", self.state.value)
            self.terminal.say()
            return State.EXIT

    def _main_menu(self) -> State:
        self.terminal.say(BANNER)
        for line in MAIN_MENU:
            self.terminal.say(line)
        try:
            command = MainCommand(self.terminal.ask_int("Enter your choice :: "))
        except InputError:
            self.terminal.say(NOT_A_NUMBER)
            return State.MAIN_MENU
        except ValueError:
            self.terminal.say("\n> Enter valid choice")
            return State.MAIN_MENU
        return self._commands[command]()

    def _new(self) -> State:
        self.create_flow.run()
        return State.MAIN_MENU

    def _update(self) -> State:
        self.update_flow.begin()
        return State.UPDATE_LOOP

    def _remove(self) -> State:
        self.delete_flow.run()
        return State.MAIN_MENU

    def _view_submenu(self) -> State:
        return State.VIEW_SUBMENU if self.view_flow.step() else State.MAIN_MENU

    def _update_loop(self) -> State:
        return State.UPDATE_LOOP if self.update_flow.step() else State.MAIN_MENU
