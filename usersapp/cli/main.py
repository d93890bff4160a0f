"""CLI 메인 진입점

대화형 REPL 루프를 실행합니다.
"""

import argparse
import logging
import sys
from typing import Callable, TextIO

from .commands import CommandHandler, CommandResult
from .display import Display
from usersapp.config import LOG_LEVELS, configure_logging, load_settings
from usersapp.store import UsersData

logger = logging.getLogger(__name__)

InputFunc = Callable[[str], str]


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """명령행 인자 파싱"""
    parser = argparse.ArgumentParser(
        description="UsersApp 대화형 CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="색상 출력 끄기",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=None,
        help="로그 레벨 (기본: USERSAPP_LOG_LEVEL 또는 WARNING)",
    )
    return parser.parse_args(argv)


class REPL:
    """대화형 REPL

    액션 프롬프트 → 필드 프롬프트 → 저장소 호출 → 다시 액션 프롬프트.
    quit 또는 입력 종료(EOF)까지 반복합니다.
    """

    def __init__(
        self,
        input_func: InputFunc = input,
        stream: TextIO = sys.stdout,
        use_color: bool = True,
    ):
        self.input_func = input_func
        self.display = Display(stream=stream, use_color=use_color)
        self.users = UsersData(display=self.display)
        self.command_handler = CommandHandler()

    def ask(self, question: str) -> str:
        """텍스트 입력 (입력한 그대로, EOFError는 호출자에게 전달)"""
        return self.input_func(self.display.prompt(question))

    def ask_number(self, question: str) -> int:
        """정수 입력 (숫자가 아니면 다시 묻기)"""
        while True:
            raw = self.ask(question)
            try:
                return int(raw.strip())
            except ValueError:
                self.display.warning("Please enter a valid number")

    def run(self) -> int:
        """REPL 메인 루프

        Returns:
            처리한 액션 수
        """
        self.display.welcome()
        handled = 0

        while True:
            try:
                action = self.ask("How can I help you?")
                result = self.command_handler.handle(action, self)
            except EOFError:
                self.display.info("Bye bye!")
                break
            except KeyboardInterrupt:
                self.display.warning("Cancelled")
                continue

            handled += 1
            if result == CommandResult.EXIT:
                break

        logger.debug("REPL 종료 (액션 %d개, 레코드 %d건)", handled, len(self.users))
        return handled


def main(argv: list[str] | None = None) -> None:
    """CLI 진입점"""
    args = parse_args(argv)
    settings = load_settings(log_level=args.log_level, no_color=args.no_color)
    configure_logging(settings.log_level)

    repl = REPL(use_color=settings.use_color)
    repl.run()


if __name__ == "__main__":
    main()
