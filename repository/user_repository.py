from sqlalchemy import or_
from sqlalchemy.orm import Session, selectinload
from db.models import User, Reservation, Class
from typing import List, Optional


class UserRepository:
    def __init__(self, session: Session):
        self.session = session

    def get_all(self) -> List[User]:
        return self.session.query(User).order_by(User.id).all()

    def get_by_id(self, _id: int) -> Optional[User]:
        return self.session.query(User).filter_by(id=_id).first()

    def get_by_email(self, email: str) -> Optional[User]:
        return self.session.query(User).filter_by(email=email).first()

    def get_by_role(self, role: str) -> List[User]:
        return self.session.query(User).filter_by(role=role).order_by(User.id).all()

    def exist_by_email_or_username(self, email: str, username: str) -> bool:
        user = self.session.query(User).filter(or_(User.email == email, User.username == username)).first()
        return user is not None

    def get_confirmed_reservations(self, user_id: int) -> List[Reservation]:
        return self.session.query(Reservation) \
            .options(selectinload(Reservation.klass).selectinload(Class.teacher)) \
            .filter(Reservation.user_id == user_id, Reservation.status == 'confirmed') \
            .order_by(Reservation.id) \
            .all()

    def create(self, **data) -> User:
        user = User(**data)
        self.session.add(user)
        self.session.flush()

        return user
