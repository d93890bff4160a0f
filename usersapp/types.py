"""공통 타입 정의

사용자 레코드, 저장소 결과, 오류 타입을 정의합니다.
"""

from dataclasses import dataclass


@dataclass
class User:
    """사용자 레코드

    Attributes:
        name: 사용자 이름 (조회 키로 사용, 중복 허용)
        age: 나이 (양의 정수)
    """

    name: str
    age: int

    def is_valid(self) -> bool:
        return len(self.name) > 0 and self.age > 0


class UsersAppError(Exception):
    """UsersApp 오류 기본 클래스"""

    message = "Unexpected error"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.message)


class ValidationError(UsersAppError):
    """이름이 비었거나 나이가 0 이하인 레코드 추가"""

    message = "Wrong data!"


class NotFoundError(UsersAppError):
    """존재하지 않는 이름으로 수정/삭제"""

    message = "User not found..."


class UnrecognizedCommand(UsersAppError):
    """알 수 없는 액션 입력"""

    message = "Command not found"


class InvalidSeverity(UsersAppError):
    """지원하지 않는 메시지 심각도"""

    message = "Invalid option"


@dataclass
class StoreResult:
    """저장소 연산 결과

    Attributes:
        ok: 성공 여부
        message: 사용자에게 보여줄 상태 메시지
        error: 실패 시 오류 (성공 시 None)
        user: 추가/수정/삭제된 레코드
    """

    ok: bool
    message: str
    error: UsersAppError | None = None
    user: User | None = None

    @classmethod
    def success(cls, message: str, user: User | None = None) -> "StoreResult":
        return cls(ok=True, message=message, user=user)

    @classmethod
    def failure(cls, error: UsersAppError) -> "StoreResult":
        return cls(ok=False, message=str(error), error=error)
