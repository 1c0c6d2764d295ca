"""
초기 어드민 유저를 만드는 데 사용됩니다. `ADMIN_EMAIL`, `ADMIN_PASSWORD` 환경 변수에서 정보를 가져옵니다.
"""

import datetime

from sqlalchemy import or_

import config
from db.database import SessionLocal
from db.models import User
from logger_config import logger
from util import hash_password


def init_data():
    # 테스트 실행 시에는 사전 데이터 실행 스킵
    if config.ENVIRONMENT == 'test':
        return

    if not config.ADMIN_EMAIL or not config.ADMIN_PASSWORD:
        return

    username = config.ADMIN_EMAIL.split('@')[0]

    with SessionLocal() as session:
        existing_user = session.query(User).filter(
            or_(User.email == config.ADMIN_EMAIL, User.username == username)
        ).first()

        if existing_user:
            if existing_user.email != config.ADMIN_EMAIL:
                logger.warning(f'Skipping admin seed: username {username} is already taken')
            return

        logger.info('---inserting admin user started---')
        session.add(User(
            name='admin',
            email=config.ADMIN_EMAIL,
            username=username,
            password_hash=hash_password(config.ADMIN_PASSWORD),
            birth_date=datetime.date(1970, 1, 1),
            role='admin'
        ))
        session.commit()
        logger.info('---inserting admin user ended---')
