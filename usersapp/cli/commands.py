"""CLI 액션 처리

list, add, edit, remove, quit 액션을 저장소 호출로 연결합니다.
"""

import logging
from enum import Enum, auto
from typing import TYPE_CHECKING

from usersapp.types import NotFoundError, UnrecognizedCommand, User

if TYPE_CHECKING:
    from .main import REPL

logger = logging.getLogger(__name__)


class Action(str, Enum):
    """사용자가 입력하는 액션 (대소문자 구분)"""

    LIST = "list"
    ADD = "add"
    EDIT = "edit"
    REMOVE = "remove"
    QUIT = "quit"


class CommandResult(Enum):
    """명령어 처리 결과"""

    CONTINUE = auto()  # REPL 계속
    EXIT = auto()  # REPL 종료


class CommandHandler:
    """액션 핸들러"""

    def __init__(self):
        self._commands = {
            Action.LIST: self._cmd_list,
            Action.ADD: self._cmd_add,
            Action.EDIT: self._cmd_edit,
            Action.REMOVE: self._cmd_remove,
            Action.QUIT: self._cmd_quit,
        }

    def handle(self, input_str: str, repl: "REPL") -> CommandResult:
        """액션 처리"""
        try:
            action = Action(input_str)
        except ValueError:
            error = UnrecognizedCommand()
            logger.info("알 수 없는 액션: %r", input_str)
            repl.display.error(str(error))
            return CommandResult.CONTINUE

        logger.debug("액션 실행: %s", action.value)
        return self._commands[action](repl)

    def _cmd_list(self, repl: "REPL") -> CommandResult:
        """전체 목록"""
        repl.users.show_all()
        return CommandResult.CONTINUE

    def _cmd_add(self, repl: "REPL") -> CommandResult:
        """사용자 추가"""
        name = repl.ask("Enter name")
        age = repl.ask_number("Enter age")
        repl.users.add(User(name=name, age=age))
        return CommandResult.CONTINUE

    def _cmd_edit(self, repl: "REPL") -> CommandResult:
        """사용자 수정

        대상이 없으면 새 값을 묻지 않고 바로 돌아갑니다.
        """
        name = repl.ask("Enter name of user to edit")
        if repl.users.find(name) is None:
            repl.display.error(str(NotFoundError()))
            return CommandResult.CONTINUE

        new_name = repl.ask("Enter new name")
        new_age = repl.ask_number("Enter new age")
        repl.users.edit(name, {"name": new_name, "age": new_age})
        return CommandResult.CONTINUE

    def _cmd_remove(self, repl: "REPL") -> CommandResult:
        """사용자 삭제"""
        name = repl.ask("Enter name")
        repl.users.remove(name)
        return CommandResult.CONTINUE

    def _cmd_quit(self, repl: "REPL") -> CommandResult:
        """종료"""
        repl.display.info("Bye bye!")
        return CommandResult.EXIT
