"""
하나의 트랜잭션 안에서 저장소들을 함께 사용하기 위한 Unit of Work 입니다.
"""

from typing import Callable, TypeVar

from sqlalchemy.orm import Session

from repository.class_repository import ClassRepository
from repository.reservation_repository import ReservationRepository
from repository.user_repository import UserRepository
from repository.waitlist_repository import WaitlistRepository

T = TypeVar('T')


class UnitOfWork:
    """
    하나의 트랜잭션 안에서 저장소들을 사용하게 해주는 클래스입니다.
    `with` 블록 안에서 `commit()`을 호출하지 않고 빠져나가면 모든 변경이 롤백됩니다.
    """

    def __init__(self, session: Session):
        self.session = session

    def __enter__(self) -> 'UnitOfWork':
        self.users = UserRepository(self.session)
        self.classes = ClassRepository(self.session)
        self.reservations = ReservationRepository(self.session)
        self.waitlist = WaitlistRepository(self.session)
        return self

    def __exit__(self, *args):
        self.rollback()

    def commit(self):
        self.session.commit()

    def rollback(self):
        self.session.rollback()

    def run(self, fn: Callable[['UnitOfWork'], T]) -> T:
        with self:
            result = fn(self)
            self.commit()

        return result
