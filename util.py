import datetime

import bcrypt
import jwt

import config


def encode_jwt(id, role):
    payload = {
        'id': id,
        'role': role,
        'exp': datetime.datetime.now(datetime.UTC) + datetime.timedelta(seconds=config.JWT_EXPIRE_SECONDS)
    }
    jwt_token = jwt.encode(payload, config.JWT_SECRET, algorithm=config.JWT_ALGORITHM)
    return jwt_token


def decode_jwt(token):
    return jwt.decode(token, config.JWT_SECRET, algorithms=[config.JWT_ALGORITHM])


def hash_password(password):
    """
    유저의 비밀번호를 bcrypt로 암호화하는 함수입니다.
    """
    return bcrypt.hashpw(password.encode('utf-8'), bcrypt.gensalt(rounds=config.BCRYPT_ROUNDS)).decode('utf-8')


def verify_password(password, password_hash):
    return bcrypt.checkpw(password.encode('utf-8'), password_hash.encode('utf-8'))
