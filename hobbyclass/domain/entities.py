from __future__ import annotations

import enum
from dataclasses import dataclass, asdict


class Role(str, enum.Enum):
    ADMIN = "admin"
    MENTOR = "mentor"
    STUDENT = "student"


class UserStatus(str, enum.Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"


class ClassStatus(str, enum.Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"
    PENDING = "pending"


class Availability(str, enum.Enum):
    AVAILABLE = "available"
    OFFLINE = "offline"
    BUSY = "busy"


@dataclass(frozen=True)
class User:
    id: int
    name: str
    email: str
    role: Role
    status: UserStatus = UserStatus.ACTIVE

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "role": self.role.value,
            "status": self.status.value,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "User":
        # ValueError / KeyError на битых данных
        return cls(
            id=int(data["id"]),
            name=str(data["name"]),
            email=str(data["email"]),
            role=Role(data["role"]),
            status=UserStatus(data.get("status", UserStatus.ACTIVE.value)),
        )


@dataclass(frozen=True)
class Session:
    """Текущий пользовательский контекст: logged_in выводится из user."""
    user: User | None = None

    @property
    def logged_in(self) -> bool:
        return self.user is not None


@dataclass
class MentorClass:
    id: str
    title: str
    category: str
    date: str = ""
    time: str = ""
    duration: str = ""
    max_students: int = 0
    current_students: int = 0
    description: str = ""
    image_url: str = ""
    status: ClassStatus = ClassStatus.ACTIVE

    def to_dict(self) -> dict:
        data = asdict(self)
        data["status"] = self.status.value
        return data


@dataclass
class StudentClass:
    id: str
    name: str
    category: str
    mentor_name: str
    date: str = ""
    time: str = ""
    status: Availability = Availability.AVAILABLE
    description: str = ""
    enrolled: bool = False

    def to_dict(self) -> dict:
        data = asdict(self)
        data["status"] = self.status.value
        return data


@dataclass
class MentorProfile:
    name: str
    title: str
    description: str
    profile_image: str = ""
    work_image: str = ""
