import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class UserBase(BaseModel):
    model_config = ConfigDict(extra='ignore', from_attributes=True)

    id: int
    name: str
    email: str
    username: str
    birth_date: datetime.date
    role: str


class UserSummary(BaseModel):
    model_config = ConfigDict(extra='ignore', from_attributes=True)

    id: int
    name: str
    email: str
    role: str


class TeacherSummary(BaseModel):
    model_config = ConfigDict(extra='ignore', from_attributes=True)

    id: int
    name: str
    username: str


class RegisterUser(BaseModel):
    model_config = ConfigDict(extra='ignore')

    name: str = Field(min_length=1, description='이름', examples=['홍길동'])
    email: str = Field(min_length=3, pattern=r'^[^@\s]+@[^@\s]+$', description='이메일', examples=['user@example.com'])
    username: str = Field(min_length=1, description='유저 아이디', examples=['user1'])
    password: str = Field(min_length=1, max_length=72, description='비밀번호', examples=['password'])
    birth_date: datetime.date = Field(description='생년월일', examples=['2000-01-01'])


class CreateUser(RegisterUser):
    role: Literal['teacher', 'admin'] = Field(description='생성할 유저의 역할', examples=['teacher'])


class LoginUser(BaseModel):
    model_config = ConfigDict(extra='ignore')

    email: str
    password: str


class AuthOutput(BaseModel):
    model_config = ConfigDict(extra='ignore')

    token: str
    user: UserSummary


class TokenPayload(BaseModel):
    model_config = ConfigDict(extra='ignore')

    id: int
    role: str
    exp: int


class UserReservation(BaseModel):
    model_config = ConfigDict(extra='ignore')

    class_id: int
    class_name: str
    date: datetime.datetime
    teacher: TeacherSummary


class UserReservationsOutput(BaseModel):
    model_config = ConfigDict(extra='ignore')

    confirmed: list[UserReservation]
