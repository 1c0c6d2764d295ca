import os

# 앱 모듈들이 설정을 읽기 전에 테스트 환경을 고정합니다
os.environ['environment'] = 'test'
os.environ['SQLALCHEMY_DATABASE_URL'] = 'sqlite://'
os.environ['JWT_SECRET'] = 'test-secret-key-that-is-long-enough-for-hs256'
os.environ['BCRYPT_ROUNDS'] = '4'
os.environ['ALLOW_REBOOK_AFTER_CANCEL'] = 'false'
os.environ['LOG_LEVEL'] = 'WARNING'
