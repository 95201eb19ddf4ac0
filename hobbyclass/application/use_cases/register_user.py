from ...domain.entities import Role, User
from ..dto import NewUser
from ..user_registry import UserRegistry

class RegisterUser:
    def __init__(self, registry: UserRegistry):
        self.registry = registry

    def execute(self, username: str, email: str, password: str) -> User:
        if not username.strip() or not password:
            raise ValueError("Username and password are required")
        if "@" not in email:
            raise ValueError("Invalid email")
        if self.registry.find_by_email(email):
            raise ValueError("Email already registered")
        # пароль не хранится: вход по демо-паролю
        return self.registry.add(NewUser(name=username.strip(), email=email, role=Role.STUDENT))
