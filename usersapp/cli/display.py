"""CLI 출력 포맷팅

색상, 상태 메시지, 사용자 표, 프롬프트 등 터미널 출력을 담당합니다.
"""

import logging
import sys
from enum import Enum
from typing import Iterable, TextIO

from rich.console import Console
from rich.table import Table

from usersapp.types import InvalidSeverity, User

logger = logging.getLogger(__name__)


class Colors:
    """ANSI 색상 코드"""

    RESET = "\033[0m"
    BOLD = "\033[1m"

    RED = "\033[31m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    BLUE = "\033[34m"
    CYAN = "\033[36m"


class Severity(Enum):
    """상태 메시지 심각도"""

    SUCCESS = "success"
    ERROR = "error"
    INFO = "info"


# 액션 이름 → 설명 (배너 범례)
ACTION_LEGEND = [
    ("list", "show all users"),
    ("add", "add new user to the list"),
    ("edit", "edit user from the list"),
    ("remove", "remove user from the list"),
    ("quit", "quit the app"),
]


class Display:
    """터미널 출력 관리"""

    def __init__(self, stream: TextIO = sys.stdout, use_color: bool = True):
        self.stream = stream
        self.use_color = use_color and stream.isatty()
        self.console = Console(
            file=stream,
            force_terminal=self.use_color,
            no_color=not self.use_color,
            highlight=False,
        )

    def _colorize(self, text: str, color: str) -> str:
        """텍스트에 색상 적용"""
        if not self.use_color:
            return text
        return f"{color}{text}{Colors.RESET}"

    def _write(self, text: str = "") -> None:
        print(text, file=self.stream)

    def welcome(self) -> None:
        """시작 배너 (제목 + 액션 범례)"""
        self._write()
        Message("Welcome to the UsersApp!", self).show()
        self._write(self._colorize("=" * 36, Colors.CYAN))
        self.info("Available actions")
        self._write()
        for action, description in ACTION_LEGEND:
            legend = Message(description, self)
            legend.capitalize()
            self._write(f"{self._colorize(action, Colors.BOLD)} – {legend.content}")
        self._write()

    def prompt(self, question: str) -> str:
        """입력 프롬프트 문자열"""
        if self.use_color:
            return f"{Colors.GREEN}?{Colors.RESET} {Colors.BOLD}{question}{Colors.RESET} "
        return f"? {question} "

    def show_colorized(self, severity: Severity | str, text: str) -> None:
        """심각도별 색상 메시지

        알 수 없는 심각도면 'Invalid option' 오류 줄만 출력합니다.
        """
        try:
            level = Severity(severity)
        except ValueError:
            logger.debug("알 수 없는 심각도: %r", severity)
            self._write(str(InvalidSeverity()))
            return

        if level is Severity.SUCCESS:
            self._write(self._colorize(f"✔ {text}", Colors.GREEN))
        elif level is Severity.ERROR:
            self._write(self._colorize(f"✖ {text}", Colors.RED))
        else:
            self._write(self._colorize(f"ℹ {text}", Colors.BLUE))

    def success(self, text: str) -> None:
        """성공 메시지"""
        self.show_colorized(Severity.SUCCESS, text)

    def error(self, text: str) -> None:
        """오류 메시지"""
        self.show_colorized(Severity.ERROR, text)

    def info(self, text: str) -> None:
        """정보 메시지"""
        self.show_colorized(Severity.INFO, text)

    def warning(self, text: str) -> None:
        """경고 메시지"""
        self._write(self._colorize(f"[!] {text}", Colors.YELLOW))

    def no_data(self) -> None:
        self._write("No data...")

    def table(self, users: Iterable[User]) -> None:
        """사용자 표 출력 (index / name / age)"""
        grid = Table(show_header=True, header_style="bold")
        grid.add_column("(index)", justify="right")
        grid.add_column("name")
        grid.add_column("age", justify="right")

        for index, user in enumerate(users):
            grid.add_row(str(index), user.name, str(user.age))

        self.console.print(grid)


class Message:
    """출력용 텍스트 래퍼

    대소문자 변환 후 show()로 출력합니다.
    """

    def __init__(self, content: str, display: Display | None = None):
        self.content = content
        self.display = display

    def show(self) -> None:
        stream = self.display.stream if self.display else sys.stdout
        print(self.content, file=stream)

    def capitalize(self) -> None:
        self.content = self.content[:1].upper() + self.content[1:].lower()

    def to_upper(self) -> None:
        self.content = self.content.upper()

    def to_lower(self) -> None:
        self.content = self.content.lower()
