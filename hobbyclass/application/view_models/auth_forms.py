from __future__ import annotations

from dataclasses import dataclass

from ...domain.entities import User
from ..router import LOGIN_PATH, landing_path
from ..session_store import SessionStore
from ..use_cases.register_user import RegisterUser

MISSING_FIELDS = "Please fill in all fields"


@dataclass
class FormOutcome:
    success: bool
    message: str
    redirect_to: str | None = None
    user: User | None = None


class LoginForm:
    def __init__(self, session: SessionStore):
        self.session = session
        self.error_message = ""

    def submit(self, username: str, password: str) -> FormOutcome:
        if not username or not password:
            self.error_message = MISSING_FIELDS
            return FormOutcome(False, MISSING_FIELDS)
        result = self.session.login(username, password)
        if not result.success:
            self.error_message = result.message
            return FormOutcome(False, result.message)
        self.error_message = ""
        return FormOutcome(True, result.message, landing_path(result.user), result.user)

    def snapshot(self) -> dict:
        return {"error_message": self.error_message}


class RegisterForm:
    def __init__(self, use_case: RegisterUser):
        self.use_case = use_case
        self.error_message = ""

    def submit(self, username: str, email: str, password: str) -> FormOutcome:
        if not username or not email or not password:
            self.error_message = MISSING_FIELDS
            return FormOutcome(False, MISSING_FIELDS)
        try:
            user = self.use_case.execute(username, email, password)
        except ValueError as e:
            self.error_message = str(e)
            return FormOutcome(False, str(e))
        self.error_message = ""
        return FormOutcome(True, "Registration successful", LOGIN_PATH, user)

    def snapshot(self) -> dict:
        return {"error_message": self.error_message}
