from typing import Annotated, List

from fastapi import APIRouter, Depends
from fastapi.params import Path
from sqlalchemy.orm import Session
from starlette import status

from auth.auth_bearer import require_admin
from db.database import get_db
from schemas import user
from service.user_service import UserService

user_router = APIRouter(
    prefix='/users',
    tags=['유저']
)


@user_router.get('/', response_model=List[user.UserBase], name='유저 목록 조회')
def get_users(db: Session = Depends(get_db)):
    """
    모든 유저들의 리스트를 반환합니다.
    """
    user_service = UserService(db)
    return user_service.get_users()


@user_router.post('/', response_model=user.UserSummary, name='유저 생성', status_code=status.HTTP_201_CREATED,
                  responses={
                      403: {
                          "description": "현재 유저가 admin이 아닌 경우",
                          "content": {
                              "application/json": {
                                  "example": {"detail": "Admin access only"}
                              }
                          }
                      },
                      409: {
                          "description": "같은 `email`이나 `username`을 가진 유저가 이미 있는 경우",
                          "content": {
                              "application/json": {
                                  "example": {"detail": "Email or username already in use"}
                              }
                          }
                      }
                  })
def create_user(create_user_request: user.CreateUser,
                current_user: Annotated[user.TokenPayload, Depends(require_admin)],
                db: Session = Depends(get_db)):
    """
    선생님이나 어드민 유저를 만듭니다.
    어드민 전용 API 입니다.
    """
    user_service = UserService(db)
    return user_service.create_user(create_user_request)


@user_router.get('/teachers', response_model=List[user.UserSummary], name='선생님 목록 조회')
def get_teachers(db: Session = Depends(get_db)):
    user_service = UserService(db)
    return user_service.get_teachers()


@user_router.get('/{user_id}/reservations', response_model=user.UserReservationsOutput, name='유저 예약 조회',
                 responses={
                     404: {
                         "description": "`user_id`값을 가진 유저가 없는 경우",
                         "content": {
                             "application/json": {
                                 "example": {"detail": "User with id 1 not found"}
                             }
                         }
                     }
                 })
def get_user_reservations(db: Session = Depends(get_db),
                          user_id: int = Path(..., description='예약 목록을 조회할 유저의 `id`')):
    """
    특정 유저의 확정된 예약들을 수업 정보와 함께 반환합니다.
    """
    user_service = UserService(db)
    return user_service.get_user_reservations(user_id)
