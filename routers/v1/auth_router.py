from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from starlette import status

from db.database import get_db
from schemas import user
from service.user_service import UserService

auth_router = APIRouter(
    prefix='/auth',
    tags=['인증']
)


@auth_router.post('/register', name='회원가입', status_code=status.HTTP_201_CREATED, response_model=user.AuthOutput,
                  responses={
                      409: {
                          "description": "같은 `email`이나 `username`을 가진 유저가 이미 있는 경우",
                          "content": {
                              "application/json": {
                                  "example": {"detail": "Email or username already in use"}
                              }
                          }
                      }
                  })
def register(register_user: user.RegisterUser, db: Session = Depends(get_db)):
    """
    새로운 학생 유저를 만들고 jwt token을 반환합니다. 회원가입으로 만들어진 유저의 역할은 항상 `student`입니다.
    """
    user_service = UserService(db)
    return user_service.register(register_user)


@auth_router.post('/login', name='로그인', response_model=user.AuthOutput, responses={
    401: {
        "description": "잘못된 로그인 정보",
        "content": {
            "application/json": {
                "example": {"detail": "Invalid credentials"}
            }
        }
    }
})
def login(login_user: user.LoginUser, db: Session = Depends(get_db)):
    """
    입력한 `email`과 `password`로 로그인을 합니다.
    로그인에 성공할 경우 jwt token을 반환합니다.
    """
    user_service = UserService(db)
    return user_service.login(login_user)
