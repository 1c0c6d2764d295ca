from sqlalchemy.orm import Session, selectinload
from typing import List, Optional
from db.models import Class


class ClassRepository:
    def __init__(self, session: Session):
        self.session = session

    def _with_roster(self):
        return self.session.query(Class).populate_existing().options(
            selectinload(Class.teacher),
            selectinload(Class.reservations),
            selectinload(Class.waitlist),
        )

    def get_all(self) -> List[Class]:
        return self._with_roster().order_by(Class.id).all()

    def get_by_id(self, _id: int, lock: bool = False) -> Optional[Class]:
        query = self.session.query(Class).filter_by(id=_id)
        if lock:
            query = query.with_for_update()

        return query.first()

    def get_with_reservations_and_waitlist(self, _id: int, lock: bool = False) -> Optional[Class]:
        """
        수업을 예약 목록, 대기열(`position` 오름차순)과 함께 가져옵니다.
        `lock`이 참이면 수업 row에 `FOR UPDATE` 잠금을 걸어 같은 수업에 대한 트랜잭션을 직렬화합니다.
        """
        query = self._with_roster().filter(Class.id == _id)
        if lock:
            query = query.with_for_update(of=Class)

        return query.first()

    def create(self, **data) -> Class:
        klass = Class(**data)
        self.session.add(klass)
        self.session.flush()

        return klass
