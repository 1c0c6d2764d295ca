from sqlalchemy import update
from sqlalchemy.orm import Session
from db.models import WaitlistEntry
from typing import Optional


class WaitlistRepository:
    def __init__(self, session: Session):
        self.session = session

    def get_by_class_id_user_id(self, class_id: int, user_id: int) -> Optional[WaitlistEntry]:
        return self.session.query(WaitlistEntry).filter_by(class_id=class_id, user_id=user_id).first()

    def get_head(self, class_id: int) -> Optional[WaitlistEntry]:
        return self.session.query(WaitlistEntry) \
            .filter_by(class_id=class_id) \
            .order_by(WaitlistEntry.position) \
            .first()

    def create(self, class_id: int, user_id: int, position: int) -> WaitlistEntry:
        entry = WaitlistEntry(class_id=class_id, user_id=user_id, position=position)
        self.session.add(entry)
        self.session.flush()

        return entry

    def delete(self, entry: WaitlistEntry):
        self.session.delete(entry)
        self.session.flush()

    def decrement_positions_above(self, class_id: int, position: int):
        """
        삭제된 대기 순번 뒤의 순번들을 하나씩 당겨서 1..N 이 빈칸 없이 이어지도록 합니다.
        """
        self.session.execute(
            update(WaitlistEntry)
            .where(WaitlistEntry.class_id == class_id, WaitlistEntry.position > position)
            .values(position=WaitlistEntry.position - 1)
            .execution_options(synchronize_session='fetch')
        )
        self.session.flush()
