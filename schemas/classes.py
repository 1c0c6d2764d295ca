import datetime

from pydantic import BaseModel, ConfigDict, Field

from schemas.reservation import ReservationBase, WaitlistEntryBase
from schemas.user import TeacherSummary


class ClassBase(BaseModel):
    model_config = ConfigDict(extra='ignore', from_attributes=True)

    id: int
    name: str
    description: str
    date: datetime.datetime
    capacity: int
    teacher_id: int


class CreateClass(BaseModel):
    model_config = ConfigDict(extra='ignore')

    name: str = Field(min_length=1, description='수업 이름', examples=['Yoga 101'])
    description: str = Field(default='', description='수업 설명', examples=['Beginner friendly yoga'])
    date: datetime.datetime = Field(description='수업 날짜', examples=['2026-02-20 12:30'])
    capacity: int = Field(gt=0, description='최대 확정 예약 수', examples=[10])
    teacher_id: int = Field(description='담당 선생님의 `id`', examples=[2])


class ClassRoster(BaseModel):
    """
    수업과 현재 예약 현황을 함께 보여주는 조회용 모델입니다.
    """
    model_config = ConfigDict(extra='ignore')

    id: int
    name: str
    description: str
    date: datetime.datetime
    capacity: int
    teacher: TeacherSummary
    confirmed_reservations: int
    available_spots: int
    waitlist_count: int
    waitlist: list[WaitlistEntryBase]
    reservations: list[ReservationBase]
