from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette import status

from db.database import engine
from db import models
from db.db_uploader import init_data
from logger_config import logger
from routers import api
from service.exceptions import DomainError
import uvicorn

models.Base.metadata.create_all(bind=engine)

init_data()

description = """
수업 예약 시스템 API
학생은 수업을 예약하고 취소할 수 있으며, 정원이 찬 수업은 대기열에 들어갑니다.

아래와 같은 ENDPOINT를 지원합니다
## 인증

* **회원가입**
* **로그인**

## 유저

* **유저 목록 조회**
* **유저 생성**
* **선생님 목록 조회**
* **유저 예약 조회**

## 수업
* **수업 목록 조회**
* **수업 조회**
* **수업 생성**
* **수업 예약**
* **수업 예약 취소**
"""
tags_metadata = [
    {
        'name': '인증',
        'description': '회원가입과 **로그인** API'
    },
    {
        'name': '유저',
        'description': '유저와 관련된 API'
    },
    {
        'name': '수업',
        'description': '수업과 예약에 관련된 API. 예약, 대기열, 취소 시 자동 승격을 처리합니다'
    }
]

app = FastAPI(
    title='Class Booking API',
    description=description,
    summary='수업 예약 처리 시스템',
    openapi_tags=tags_metadata
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(DomainError)
async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    logger.warning(f'{request.method} {request.url.path} -> {exc.status_code}: {exc.message}')
    return JSONResponse(status_code=exc.status_code, content={'detail': exc.message})


@app.exception_handler(Exception)
async def general_500_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.opt(exception=exc).error(f'Unhandled exception on {request.method} {request.url.path}')
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={'detail': 'Internal server error'})


app.include_router(api.router)


@app.get('/', name='Health check')
def read_root():
    """
    서버 상태 확인용 API 입니다.
    """
    return {'status': 'ok', 'message': 'API is running'}


if __name__ == '__main__':
    uvicorn.run('main:app')
