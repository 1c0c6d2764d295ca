from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker, declarative_base

import config


def _configure_sqlite(engine):
    """
    SQLite는 트랜잭션을 시작할 때 잠금을 걸지 않기 때문에, 모든 트랜잭션을 `BEGIN IMMEDIATE`로 시작해서
    같은 수업에 대한 예약/취소가 직렬화되도록 합니다.
    """

    @event.listens_for(engine, 'connect')
    def do_connect(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None

        cursor = dbapi_connection.cursor()
        cursor.execute('PRAGMA foreign_keys=ON')
        cursor.close()

    @event.listens_for(engine, 'begin')
    def do_begin(conn):
        conn.exec_driver_sql('BEGIN IMMEDIATE')


def create_db_engine(url, **kwargs):
    if url.startswith('sqlite'):
        connect_args = kwargs.pop('connect_args', {})
        connect_args.setdefault('check_same_thread', False)
        engine = create_engine(url, connect_args=connect_args, **kwargs)
        _configure_sqlite(engine)
        return engine

    return create_engine(url, pool_pre_ping=True, **kwargs)


engine = create_db_engine(config.SQLALCHEMY_DATABASE_URL)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, expire_on_commit=False, bind=engine)

Base = declarative_base()


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
