import datetime

from sqlalchemy import Column, Integer, String, Date, DateTime, ForeignKey, Text, CheckConstraint, UniqueConstraint
from sqlalchemy.orm import relationship

from db.database import Base


def _utcnow():
    return datetime.datetime.now(datetime.UTC)


class User(Base):
    """
    유저를 나타내는 클래스입니다. 유저의 역할은 `role` 필드로 구분합니다 (student / teacher / admin).
    역할은 생성 시점에 정해지며 이후 변경되지 않습니다.
    """
    __tablename__ = 'users'

    id = Column(Integer, primary_key=True, nullable=False)
    name = Column(String, nullable=False)
    email = Column(String, nullable=False, unique=True)
    username = Column(String, nullable=False, unique=True)
    password_hash = Column(String, nullable=False)
    birth_date = Column(Date, nullable=False)
    role = Column(String, nullable=False, default='student')

    classes = relationship('Class', back_populates='teacher')
    reservations = relationship('Reservation', back_populates='user')
    waitlist_entries = relationship('WaitlistEntry', back_populates='user')


class Class(Base):
    """
    수업을 나타내는 클래스입니다. `capacity`는 동시에 확정될 수 있는 최대 예약 수입니다.
    """
    __tablename__ = 'classes'

    id = Column(Integer, primary_key=True, nullable=False)
    name = Column(String, nullable=False)
    description = Column(Text, nullable=False, default='')
    date = Column(DateTime, nullable=False)
    capacity = Column(Integer, nullable=False)
    teacher_id = Column(Integer, ForeignKey('users.id'), nullable=False)

    teacher = relationship('User', back_populates='classes')
    reservations = relationship('Reservation', back_populates='klass', order_by='Reservation.id')
    waitlist = relationship('WaitlistEntry', back_populates='klass', order_by='WaitlistEntry.position')

    __table_args__ = (
        CheckConstraint('capacity > 0', name='check_class_capacity_positive'),
    )


class Reservation(Base):
    """
    수업 예약을 나타내는 클래스입니다. 취소된 예약은 삭제하지 않고 `status`만 `cancelled`로 바꿉니다.
    """
    __tablename__ = 'reservations'

    id = Column(Integer, primary_key=True, nullable=False)
    class_id = Column(Integer, ForeignKey('classes.id'), nullable=False, index=True)
    user_id = Column(Integer, ForeignKey('users.id'), nullable=False, index=True)
    status = Column(String(20), nullable=False, default='confirmed')  # confirmed / cancelled
    created_at = Column(DateTime, nullable=False, default=_utcnow)

    klass = relationship('Class', back_populates='reservations')
    user = relationship('User', back_populates='reservations')

    __table_args__ = (
        UniqueConstraint('class_id', 'user_id', name='class_user_unique'),
        CheckConstraint("status IN ('confirmed', 'cancelled')", name='check_reservation_status'),
    )


class WaitlistEntry(Base):
    """
    수업 대기열을 나타내는 클래스입니다. `position`은 1부터 시작하며 한 수업 안에서 빈칸 없이 이어집니다.
    """
    __tablename__ = 'waitlist'

    id = Column(Integer, primary_key=True, nullable=False)
    class_id = Column(Integer, ForeignKey('classes.id'), nullable=False, index=True)
    user_id = Column(Integer, ForeignKey('users.id'), nullable=False, index=True)
    position = Column(Integer, nullable=False)
    created_at = Column(DateTime, nullable=False, default=_utcnow)

    klass = relationship('Class', back_populates='waitlist')
    user = relationship('User', back_populates='waitlist_entries')

    __table_args__ = (
        UniqueConstraint('user_id', 'class_id', name='waitlist_user_class_unique'),
        CheckConstraint('position > 0', name='check_waitlist_position_positive'),
    )
