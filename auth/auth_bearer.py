from typing import Annotated

import jwt
from fastapi import Depends, HTTPException, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from pydantic import ValidationError
from starlette import status

from schemas.user import TokenPayload
from util import decode_jwt


class JWTBearer(HTTPBearer):
    """
    `Authorization: Bearer <token>` 헤더를 검증하고 토큰의 내용을 반환합니다.
    """

    def __init__(self):
        super().__init__(auto_error=False)

    async def __call__(self, request: Request) -> TokenPayload:
        credentials: HTTPAuthorizationCredentials | None = await super().__call__(request)

        if not credentials:
            raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail='Token not provided')

        try:
            return TokenPayload(**decode_jwt(credentials.credentials))
        except (jwt.PyJWTError, ValidationError):
            raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail='Invalid token')


get_current_user = JWTBearer()


def require_admin(current_user: Annotated[TokenPayload, Depends(get_current_user)]) -> TokenPayload:
    if current_user.role != 'admin':
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail='Admin access only')

    return current_user
