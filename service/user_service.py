from typing import List

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from logger_config import logger
from schemas.user import (UserBase, RegisterUser, CreateUser, LoginUser, AuthOutput, UserSummary,
                          UserReservation, UserReservationsOutput, TeacherSummary)
from service.exceptions import UserAlreadyExistsError, InvalidCredentialsError, UserNotFoundError
from service.unit_of_work import UnitOfWork
from util import encode_jwt, hash_password, verify_password


class UserService:
    def __init__(self, session: Session):
        self.session = session

    def _create(self, data: RegisterUser, role: str) -> UserSummary:
        # 비밀번호 해싱은 트랜잭션 밖에서 수행합니다
        password_hash = hash_password(data.password)

        def _create_user(uow: UnitOfWork) -> UserSummary:
            if uow.users.exist_by_email_or_username(data.email, data.username):
                raise UserAlreadyExistsError()

            user = uow.users.create(
                name=data.name,
                email=data.email,
                username=data.username,
                password_hash=password_hash,
                birth_date=data.birth_date,
                role=role,
            )
            logger.info(f'User {user.id} created with role {role}')

            return UserSummary.model_validate(user)

        try:
            return UnitOfWork(self.session).run(_create_user)
        except IntegrityError as e:
            raise UserAlreadyExistsError() from e

    def register(self, data: RegisterUser) -> AuthOutput:
        """
        자가 회원가입입니다. 역할은 항상 `student`로 고정됩니다.
        """
        user = self._create(data, 'student')
        return AuthOutput(token=encode_jwt(user.id, user.role), user=user)

    def create_user(self, data: CreateUser) -> UserSummary:
        return self._create(data, data.role)

    def login(self, login_user: LoginUser) -> AuthOutput:
        with UnitOfWork(self.session) as uow:
            user = uow.users.get_by_email(login_user.email)

            if not user or not verify_password(login_user.password, user.password_hash):
                raise InvalidCredentialsError()

            return AuthOutput(token=encode_jwt(user.id, user.role), user=UserSummary.model_validate(user))

    def get_users(self) -> List[UserBase]:
        with UnitOfWork(self.session) as uow:
            return [UserBase.model_validate(user) for user in uow.users.get_all()]

    def get_teachers(self) -> List[UserSummary]:
        with UnitOfWork(self.session) as uow:
            return [UserSummary.model_validate(user) for user in uow.users.get_by_role('teacher')]

    def get_user_reservations(self, user_id: int) -> UserReservationsOutput:
        with UnitOfWork(self.session) as uow:
            if not uow.users.get_by_id(user_id):
                raise UserNotFoundError(f'User with id {user_id} not found')

            reservations = uow.users.get_confirmed_reservations(user_id)

            return UserReservationsOutput(confirmed=[
                UserReservation(
                    class_id=reservation.klass.id,
                    class_name=reservation.klass.name,
                    date=reservation.klass.date,
                    teacher=TeacherSummary.model_validate(reservation.klass.teacher),
                ) for reservation in reservations
            ])
