"""사용자 레코드 저장소

메모리 내 사용자 리스트를 관리합니다.
이름이 조회 키이며, 중복 이름이 있으면 첫 번째 레코드만 수정/삭제됩니다.
"""

import logging
from dataclasses import replace
from typing import TYPE_CHECKING, Iterator, Mapping

from usersapp.types import NotFoundError, StoreResult, User, ValidationError

if TYPE_CHECKING:
    from usersapp.cli.display import Display

logger = logging.getLogger(__name__)

# 수정 시 덮어쓸 수 있는 필드
EDITABLE_FIELDS = ("name", "age")


class UsersData:
    """사용자 레코드 저장소

    - 삽입 순서 유지 (list)
    - add: 이름/나이 검증 후 추가
    - edit: 첫 번째 일치 레코드에 patch 병합 (재검증 안 함)
    - remove: 첫 번째 일치 레코드 삭제
    """

    def __init__(self, display: "Display | None" = None):
        """
        Args:
            display: 상태 메시지를 출력할 Display (None이면 출력 안 함)
        """
        self.data: list[User] = []
        self.display = display

    def __len__(self) -> int:
        return len(self.data)

    def __iter__(self) -> Iterator[User]:
        return iter(self.data)

    def list(self) -> list[User]:
        """현재 레코드 목록 (복사본)"""
        return list(self.data)

    def show_all(self) -> None:
        """전체 목록 출력 (비어 있으면 'No data...')"""
        if self.display is None:
            return

        self.display.info("Users data")
        if self.data:
            self.display.table(self.data)
        else:
            self.display.no_data()

    def find(self, name: str) -> User | None:
        """이름이 정확히 일치하는 첫 번째 레코드"""
        index = self._index_of(name)
        return None if index is None else self.data[index]

    def add(self, candidate: User) -> StoreResult:
        """레코드 추가"""
        if not candidate.is_valid():
            logger.info("추가 거부: %r", candidate)
            return self._report(StoreResult.failure(ValidationError()))

        self.data.append(candidate)
        logger.debug("추가: %r (총 %d건)", candidate, len(self.data))
        return self._report(StoreResult.success("User has been successfully added!", candidate))

    def edit(self, name: str, patch: Mapping[str, object]) -> StoreResult:
        """첫 번째 일치 레코드 수정

        patch에 있는 필드만 덮어씁니다. add와 달리 검증하지 않으므로
        빈 이름이나 0 이하 나이도 그대로 반영됩니다.

        Args:
            name: 수정할 레코드 이름
            patch: {"name": ..., "age": ...} 중 일부
        """
        index = self._index_of(name)
        if index is None:
            logger.info("수정 대상 없음: %r", name)
            return self._report(StoreResult.failure(NotFoundError()))

        changes = {key: value for key, value in patch.items() if key in EDITABLE_FIELDS}
        updated = replace(self.data[index], **changes)
        self.data[index] = updated
        logger.debug("수정: index=%d %r", index, updated)
        return self._report(StoreResult.success("User has been successfully updated!", updated))

    def remove(self, name: str) -> StoreResult:
        """첫 번째 일치 레코드 삭제"""
        index = self._index_of(name)
        if index is None:
            logger.info("삭제 대상 없음: %r", name)
            return self._report(StoreResult.failure(NotFoundError()))

        removed = self.data.pop(index)
        logger.debug("삭제: index=%d %r", index, removed)
        return self._report(StoreResult.success("User deleted!", removed))

    def _index_of(self, name: str) -> int | None:
        for index, user in enumerate(self.data):
            if user.name == name:
                return index
        return None

    def _report(self, result: StoreResult) -> StoreResult:
        if self.display is not None:
            if result.ok:
                self.display.success(result.message)
            else:
                self.display.error(result.message)
        return result
