from dataclasses import dataclass

from ..domain.entities import Role, UserStatus, ClassStatus, User

@dataclass
class NewUser:
    name: str
    email: str
    role: Role = Role.STUDENT
    status: UserStatus = UserStatus.ACTIVE

@dataclass
class NewMentorClass:
    title: str
    category: str
    date: str = ""
    time: str = ""
    duration: str = ""
    max_students: int = 0
    description: str = ""
    image_url: str = ""
    status: ClassStatus = ClassStatus.ACTIVE

@dataclass
class LoginResult:
    success: bool
    message: str
    user: User | None = None

