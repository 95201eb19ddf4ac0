from datetime import datetime, timedelta, timezone
from jose import jwt, JWTError
from ..config import settings
from ..domain.entities import User
from ..application.session_store import InvalidSessionToken


class SessionTokenCodec:
    """Подписанный токен с сериализованным текущим пользователем."""

    def __init__(self, secret_key: str = None, algorithm: str = None, ttl_minutes: int = None):
        self.secret_key = secret_key or settings.SECRET_KEY
        self.algorithm = algorithm or settings.JWT_ALGORITHM
        self.ttl_minutes = ttl_minutes or settings.SESSION_TTL_MINUTES

    def encode(self, user: User) -> str:
        exp = datetime.now(timezone.utc) + timedelta(minutes=self.ttl_minutes)
        payload = {"sub": user.email, "role": user.role.value, "user": user.to_dict(), "exp": exp}
        return jwt.encode(payload, self.secret_key, algorithm=self.algorithm)

    def decode(self, token: str) -> User:
        try:
            payload = jwt.decode(token, self.secret_key, algorithms=[self.algorithm])
        except JWTError as e:
            raise InvalidSessionToken(str(e)) from e
        try:
            return User.from_dict(payload["user"])
        except (KeyError, TypeError, ValueError) as e:
            raise InvalidSessionToken("Malformed session payload") from e
