import datetime
from typing import Literal, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from schemas.base import MessageOutputBase


class ReservationBase(BaseModel):
    model_config = ConfigDict(extra='ignore', from_attributes=True)

    id: int
    class_id: int
    user_id: int
    status: str
    created_at: datetime.datetime


class WaitlistEntryBase(BaseModel):
    model_config = ConfigDict(extra='ignore', from_attributes=True)

    id: int
    class_id: int
    user_id: int
    position: int
    created_at: datetime.datetime


class BookingRequest(BaseModel):
    model_config = ConfigDict(extra='ignore')

    user_id: Optional[int] = Field(default=None, validation_alias=AliasChoices('user_id', 'userId'),
                                   description='예약할 유저의 `id`', examples=[1])


class BookingOutcome(BaseModel):
    """
    예약 결과입니다. `status`가 `confirmed`이면 `reservation`이, `waitlisted`이면 `waitlist_entry`가 채워집니다.
    """
    model_config = ConfigDict(extra='ignore')

    status: Literal['confirmed', 'waitlisted']
    reservation: Optional[ReservationBase] = None
    waitlist_entry: Optional[WaitlistEntryBase] = None


class CancellationOutcome(BaseModel):
    model_config = ConfigDict(extra='ignore')

    cancelled_reservation: ReservationBase
    promoted_reservation: Optional[ReservationBase] = None


class BookingConfirmedOutput(MessageOutputBase):
    reservation: ReservationBase


class BookingWaitlistedOutput(MessageOutputBase):
    waitlist: WaitlistEntryBase


class CancellationOutput(MessageOutputBase):
    cancelled_reservation: ReservationBase
    promoted_reservation: Optional[ReservationBase] = None
