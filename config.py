"""
환경 변수에서 애플리케이션 설정을 읽어옵니다. `.env` 파일이 있으면 먼저 로드합니다.
"""

import os

from dotenv import load_dotenv

load_dotenv()


def _get_bool(name, default=False):
    value = os.environ.get(name)
    if value is None:
        return default

    return value.strip().lower() in ('1', 'true', 'yes', 'on')


ENVIRONMENT = os.environ.get('environment', 'dev')

SQLALCHEMY_DATABASE_URL = os.environ.get('SQLALCHEMY_DATABASE_URL', 'sqlite:///./class_booking.db')

JWT_SECRET = os.environ.get('JWT_SECRET')
if not JWT_SECRET:
    raise RuntimeError('JWT_SECRET environment variable is required')

JWT_ALGORITHM = 'HS256'
JWT_EXPIRE_SECONDS = int(os.environ.get('JWT_EXPIRE_SECONDS', 60 * 60 * 24))

BCRYPT_ROUNDS = int(os.environ.get('BCRYPT_ROUNDS', 12))

# 취소된 예약이 있는 유저가 같은 수업을 다시 예약할 수 있는지 여부
ALLOW_REBOOK_AFTER_CANCEL = _get_bool('ALLOW_REBOOK_AFTER_CANCEL', False)

LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')

ADMIN_EMAIL = os.environ.get('ADMIN_EMAIL')
ADMIN_PASSWORD = os.environ.get('ADMIN_PASSWORD')
