"""
서비스에서 발생하는 도메인 에러들입니다. 각 에러는 HTTP 응답에 사용할 status code를 가지고 있습니다.
"""

from typing import Optional

from starlette import status


class DomainError(Exception):
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(message)


class MissingUserIdError(DomainError):
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str = 'user_id is required'):
        super().__init__(message)


class ClassNotFoundError(DomainError):
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, message: str = 'Class not found'):
        super().__init__(message)


class DuplicateBookingError(DomainError):
    status_code = status.HTTP_400_BAD_REQUEST


class ReservationNotFoundError(DomainError):
    # 기존 클라이언트와 맞추기 위해 404가 아닌 400으로 응답합니다
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str = 'Reservation not found or already cancelled'):
        super().__init__(message)


class BookingConflictError(DomainError):
    status_code = status.HTTP_409_CONFLICT

    def __init__(self, message: str = 'Booking conflicts with existing data'):
        super().__init__(message)


class UserAlreadyExistsError(DomainError):
    status_code = status.HTTP_409_CONFLICT

    def __init__(self, message: str = 'Email or username already in use'):
        super().__init__(message)


class InvalidCredentialsError(DomainError):
    status_code = status.HTTP_401_UNAUTHORIZED

    def __init__(self, message: str = 'Invalid credentials'):
        super().__init__(message)


class UserNotFoundError(DomainError):
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, message: str = 'User not found'):
        super().__init__(message)


class TeacherNotFoundError(DomainError):
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str = 'Teacher not found'):
        super().__init__(message)
