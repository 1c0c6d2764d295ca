from typing import Annotated, List, Union

from fastapi import APIRouter, Depends
from fastapi.params import Path
from sqlalchemy.orm import Session
from starlette import status

from auth.auth_bearer import require_admin
from db.database import get_db
from schemas import classes, reservation, user
from service.booking_service import BookingService
from service.class_service import ClassService

class_router = APIRouter(
    prefix='/classes',
    tags=['수업']
)


@class_router.get('/', response_model=List[classes.ClassRoster], name='수업 목록 조회')
def get_classes(db: Session = Depends(get_db)):
    """
    모든 수업과 각 수업의 확정 예약 수, 남은 자리, 대기열을 반환합니다.
    """
    class_service = ClassService(db)
    return class_service.list_classes()


@class_router.post('/', response_model=classes.ClassBase, name='수업 생성', status_code=status.HTTP_201_CREATED,
                   responses={
                       400: {
                           "description": "`teacher_id`값을 가진 선생님이 없는 경우",
                           "content": {
                               "application/json": {
                                   "example": {"detail": "Teacher with id 1 not found"}
                               }
                           }
                       },
                       403: {
                           "description": "현재 유저가 admin이 아닌 경우",
                           "content": {
                               "application/json": {
                                   "example": {"detail": "Admin access only"}
                               }
                           }
                       }
                   })
def create_class(create_class_request: classes.CreateClass,
                 current_user: Annotated[user.TokenPayload, Depends(require_admin)],
                 db: Session = Depends(get_db)):
    """
    새로운 수업을 만듭니다. `capacity`는 1 이상이어야 합니다.
    어드민 전용 API 입니다.
    """
    class_service = ClassService(db)
    return class_service.create_class(create_class_request)


@class_router.get('/{class_id}', response_model=classes.ClassRoster, name='수업 조회', responses={
    404: {
        "description": "`class_id`값을 가진 수업이 없는 경우",
        "content": {
            "application/json": {
                "example": {"detail": "Class not found"}
            }
        }
    }
})
def get_class(db: Session = Depends(get_db), class_id: int = Path(..., description='조회할 수업의 `id`')):
    class_service = ClassService(db)
    return class_service.get_class(class_id)


@class_router.post('/{class_id}/book',
                   status_code=status.HTTP_201_CREATED,
                   response_model=Union[reservation.BookingConfirmedOutput, reservation.BookingWaitlistedOutput],
                   name='수업 예약',
                   responses={
                       404: {
                           "description": "`class_id`값을 가진 수업이 없는 경우",
                           "content": {
                               "application/json": {
                                   "example": {"detail": "Class not found"}
                               }
                           }
                       },
                       400: {
                           "description": "`user_id`가 없거나, 해당 유저가 이미 예약했거나 대기열에 있는 경우",
                           "content": {
                               "application/json": {
                                   "example": {"detail": "User already booked this class"}
                               }
                           }
                       }
                   })
def book_class(booking_request: reservation.BookingRequest,
               db: Session = Depends(get_db),
               class_id: int = Path(..., description='예약할 수업의 `id`')):
    """
    수업을 예약합니다. 남은 자리가 있으면 예약이 바로 확정되고, 자리가 없으면 대기열의 마지막 순번으로 들어갑니다.
    """
    booking_service = BookingService(db)
    outcome = booking_service.book(class_id, booking_request.user_id)

    if outcome.status == 'confirmed':
        return reservation.BookingConfirmedOutput(message='Reservation confirmed', reservation=outcome.reservation)

    return reservation.BookingWaitlistedOutput(message='Class is full, user added to waitlist',
                                               waitlist=outcome.waitlist_entry)


@class_router.post('/{class_id}/cancel', response_model=reservation.CancellationOutput, name='수업 예약 취소',
                   responses={
                       400: {
                           "description": "확정된 예약이 없거나 이미 취소된 경우",
                           "content": {
                               "application/json": {
                                   "example": {"detail": "Reservation not found or already cancelled"}
                               }
                           }
                       }
                   })
def cancel_reservation(booking_request: reservation.BookingRequest,
                       db: Session = Depends(get_db),
                       class_id: int = Path(..., description='예약을 취소할 수업의 `id`')):
    """
    확정된 예약을 취소합니다. 취소된 예약은 삭제되지 않고 `cancelled` 상태로 남습니다.
    대기열에 유저가 있으면 첫 번째 유저가 확정 예약으로 승격되고, 나머지 대기 순번이 하나씩 당겨집니다.
    """
    booking_service = BookingService(db)
    outcome = booking_service.cancel(class_id, booking_request.user_id)

    return reservation.CancellationOutput(message='Reservation cancelled successfully',
                                          cancelled_reservation=outcome.cancelled_reservation,
                                          promoted_reservation=outcome.promoted_reservation)
