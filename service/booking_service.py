from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

import config
from db.models import Reservation
from logger_config import logger
from schemas.reservation import BookingOutcome, CancellationOutcome, ReservationBase, WaitlistEntryBase
from service.exceptions import (MissingUserIdError, ClassNotFoundError, DuplicateBookingError,
                                ReservationNotFoundError, BookingConflictError)
from service.unit_of_work import UnitOfWork


class BookingService:
    """
    수업 예약과 취소를 처리합니다.

    예약은 정원이 남아 있으면 바로 확정되고, 정원이 찼으면 대기열의 마지막 순번으로 들어갑니다.
    확정된 예약이 취소되면 같은 트랜잭션 안에서 대기열의 첫 번째 유저가 확정 예약으로 승격되고
    나머지 대기 순번이 하나씩 당겨집니다.
    """

    def __init__(self, session: Session, allow_rebook: Optional[bool] = None):
        self.session = session
        self.allow_rebook = config.ALLOW_REBOOK_AFTER_CANCEL if allow_rebook is None else allow_rebook

    def _unit_of_work(self) -> UnitOfWork:
        return UnitOfWork(self.session)

    @staticmethod
    def _confirm(uow: UnitOfWork, class_id: int, user_id: int,
                 existing: Optional[Reservation] = None) -> Reservation:
        # (class_id, user_id)는 유일하므로 취소된 예약이 남아 있으면 새로 만들지 않고 다시 확정합니다
        if existing is None:
            existing = uow.reservations.get_by_class_id_user_id(class_id, user_id)

        if existing is not None:
            return uow.reservations.update_status(existing, 'confirmed')

        return uow.reservations.create(class_id, user_id, 'confirmed')

    def book(self, class_id: int, user_id: Optional[int]) -> BookingOutcome:
        if not user_id:
            raise MissingUserIdError()

        def _book(uow: UnitOfWork) -> BookingOutcome:
            klass = uow.classes.get_with_reservations_and_waitlist(class_id, lock=True)
            if not klass:
                raise ClassNotFoundError()

            existing_reservation = uow.reservations.get_by_class_id_user_id(class_id, user_id)
            if existing_reservation and (existing_reservation.status == 'confirmed' or not self.allow_rebook):
                raise DuplicateBookingError('User already booked this class')

            if uow.waitlist.get_by_class_id_user_id(class_id, user_id):
                raise DuplicateBookingError('User already in waitlist')

            confirmed_count = sum(1 for reservation in klass.reservations if reservation.status == 'confirmed')

            if confirmed_count < klass.capacity:
                reservation = self._confirm(uow, class_id, user_id, existing_reservation)
                logger.info(f'Reservation {reservation.id} confirmed: class={class_id} user={user_id} '
                            f'({confirmed_count + 1}/{klass.capacity})')
                return BookingOutcome(status='confirmed', reservation=ReservationBase.model_validate(reservation))

            last_position = max((entry.position for entry in klass.waitlist), default=0)
            entry = uow.waitlist.create(class_id, user_id, last_position + 1)
            logger.info(f'Class {class_id} is full, user {user_id} added to waitlist at position {entry.position}')

            return BookingOutcome(status='waitlisted', waitlist_entry=WaitlistEntryBase.model_validate(entry))

        try:
            return self._unit_of_work().run(_book)
        except IntegrityError as e:
            logger.warning(f'Booking rejected by storage: class={class_id} user={user_id}: {e.orig}')
            raise BookingConflictError() from e

    def cancel(self, class_id: int, user_id: Optional[int]) -> CancellationOutcome:
        if not user_id:
            raise MissingUserIdError()

        def _cancel(uow: UnitOfWork) -> CancellationOutcome:
            uow.classes.get_by_id(class_id, lock=True)

            reservation = uow.reservations.get_by_class_id_user_id(class_id, user_id, status='confirmed')
            if not reservation:
                raise ReservationNotFoundError()

            uow.reservations.update_status(reservation, 'cancelled')
            cancelled_reservation = ReservationBase.model_validate(reservation)
            logger.info(f'Reservation {reservation.id} cancelled: class={class_id} user={user_id}')

            head = uow.waitlist.get_head(class_id)
            if head is None:
                return CancellationOutcome(cancelled_reservation=cancelled_reservation)

            head_position = head.position
            promoted = self._confirm(uow, class_id, head.user_id)
            uow.waitlist.delete(head)
            uow.waitlist.decrement_positions_above(class_id, head_position)
            logger.info(f'User {promoted.user_id} promoted from waitlist: class={class_id} '
                        f'reservation={promoted.id}')

            return CancellationOutcome(cancelled_reservation=cancelled_reservation,
                                       promoted_reservation=ReservationBase.model_validate(promoted))

        try:
            return self._unit_of_work().run(_cancel)
        except IntegrityError as e:
            logger.warning(f'Cancellation rejected by storage: class={class_id} user={user_id}: {e.orig}')
            raise BookingConflictError('Cancellation conflicts with existing data') from e
