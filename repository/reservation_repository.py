from sqlalchemy.orm import Session
from db.models import Reservation
from typing import Optional


class ReservationRepository:
    def __init__(self, session: Session):
        self.session = session

    def get_by_class_id_user_id(self, class_id: int, user_id: int, status: Optional[str] = None) -> Optional[Reservation]:
        query = self.session.query(Reservation).filter_by(class_id=class_id, user_id=user_id)
        if status is not None:
            query = query.filter_by(status=status)

        return query.first()

    def create(self, class_id: int, user_id: int, status: str = 'confirmed') -> Reservation:
        reservation = Reservation(class_id=class_id, user_id=user_id, status=status)
        self.session.add(reservation)
        self.session.flush()

        return reservation

    def update_status(self, reservation: Reservation, status: str) -> Reservation:
        reservation.status = status
        self.session.flush()

        return reservation
