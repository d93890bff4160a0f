"""pytest 공통 설정 및 fixtures"""

import io

import pytest

from usersapp.cli.display import Display
from usersapp.store import UsersData
from usersapp.types import User


class ScriptedInput:
    """미리 정한 입력을 순서대로 돌려주는 input 대체

    입력이 다 떨어지면 EOFError (Ctrl+D와 동일).
    """

    def __init__(self, answers: list[str]):
        self.answers = list(answers)
        self.prompts: list[str] = []

    def __call__(self, prompt: str = "") -> str:
        self.prompts.append(prompt)
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)


@pytest.fixture
def stream():
    """출력 캡처용 스트림 (isatty=False → 색상 없음)"""
    return io.StringIO()


@pytest.fixture
def display(stream):
    return Display(stream=stream)


@pytest.fixture
def users(display):
    """Display가 연결된 빈 저장소"""
    return UsersData(display=display)


@pytest.fixture
def populated():
    """출력 없는 저장소 (Anna, Max, Anna 중복)"""
    store = UsersData()
    store.add(User("Anna", 30))
    store.add(User("Max", 20))
    store.add(User("Anna", 45))
    return store


@pytest.fixture
def scripted():
    return ScriptedInput
