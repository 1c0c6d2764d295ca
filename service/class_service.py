from sqlalchemy.orm import Session
from typing import List

from db.models import Class
from logger_config import logger
from schemas.classes import ClassRoster, CreateClass, ClassBase
from schemas.reservation import ReservationBase, WaitlistEntryBase
from schemas.user import TeacherSummary
from service.exceptions import ClassNotFoundError, TeacherNotFoundError
from service.unit_of_work import UnitOfWork


def build_roster(klass: Class) -> ClassRoster:
    """
    수업의 확정 예약 수, 남은 자리, 대기열을 계산합니다. 상태를 바꾸지 않는 조회 전용 함수입니다.
    """
    confirmed = [reservation for reservation in klass.reservations if reservation.status == 'confirmed']
    waitlist = sorted(klass.waitlist, key=lambda entry: entry.position)

    return ClassRoster(
        id=klass.id,
        name=klass.name,
        description=klass.description,
        date=klass.date,
        capacity=klass.capacity,
        teacher=TeacherSummary.model_validate(klass.teacher),
        confirmed_reservations=len(confirmed),
        available_spots=klass.capacity - len(confirmed),
        waitlist_count=len(waitlist),
        waitlist=[WaitlistEntryBase.model_validate(entry) for entry in waitlist],
        reservations=[ReservationBase.model_validate(reservation) for reservation in confirmed],
    )


class ClassService:
    def __init__(self, session: Session):
        self.session = session

    def list_classes(self) -> List[ClassRoster]:
        with UnitOfWork(self.session) as uow:
            return [build_roster(klass) for klass in uow.classes.get_all()]

    def get_class(self, class_id: int) -> ClassRoster:
        with UnitOfWork(self.session) as uow:
            klass = uow.classes.get_with_reservations_and_waitlist(class_id)
            if not klass:
                raise ClassNotFoundError()

            return build_roster(klass)

    def create_class(self, new_class: CreateClass) -> ClassBase:
        def _create(uow: UnitOfWork) -> ClassBase:
            teacher = uow.users.get_by_id(new_class.teacher_id)
            if not teacher or teacher.role != 'teacher':
                raise TeacherNotFoundError(f'Teacher with id {new_class.teacher_id} not found')

            klass = uow.classes.create(**new_class.model_dump())
            logger.info(f'Class {klass.id} created: {klass.name} (capacity {klass.capacity})')

            return ClassBase.model_validate(klass)

        return UnitOfWork(self.session).run(_create)
