from pydantic import BaseModel, EmailStr, Field

from ...domain.entities import Role, UserStatus, ClassStatus, Availability

class LoginReq(BaseModel):
    username: str
    password: str

class RegisterReq(BaseModel):
    username: str = Field(min_length=1)
    email: EmailStr
    password: str = Field(min_length=1)

class UserResp(BaseModel):
    id: int
    name: str
    email: str
    role: Role
    status: UserStatus

class LoginResp(BaseModel):
    success: bool
    message: str
    user: UserResp | None = None
    redirect_to: str | None = None

class SessionResp(BaseModel):
    logged_in: bool
    user: UserResp | None = None
    is_admin: bool
    is_mentor: bool
    is_student: bool

class UserCreate(BaseModel):
    name: str = Field(min_length=1)
    email: EmailStr
    password: str | None = None  # форма админа его принимает, но не хранит
    role: Role
    status: UserStatus = UserStatus.ACTIVE

class UserUpdate(BaseModel):
    name: str | None = None
    email: EmailStr | None = None
    role: Role | None = None
    status: UserStatus | None = None

class ClassCreate(BaseModel):
    title: str = Field(min_length=1)
    category: str = Field(min_length=1)
    date: str = ""
    time: str = ""
    duration: str = ""
    max_students: int = Field(0, ge=0)
    description: str = ""
    image_url: str = ""
    status: ClassStatus = ClassStatus.ACTIVE

class ClassUpdate(BaseModel):
    title: str | None = Field(None, min_length=1)
    category: str | None = Field(None, min_length=1)
    date: str | None = None
    time: str | None = None
    duration: str | None = None
    max_students: int | None = Field(None, ge=0)
    description: str | None = None
    image_url: str | None = None
    status: ClassStatus | None = None

class MentorClassOut(BaseModel):
    id: str
    title: str
    category: str
    date: str
    time: str
    duration: str
    max_students: int
    current_students: int
    description: str
    image_url: str
    status: ClassStatus

class StudentClassOut(BaseModel):
    id: str
    name: str
    category: str
    mentor_name: str
    date: str
    time: str
    status: Availability
    description: str
    enrolled: bool

class MentorProfileOut(BaseModel):
    name: str
    title: str
    description: str
    profile_image: str
    work_image: str
    is_edit_mode: bool

class NavigationResp(BaseModel):
    requested: str
    path: str
    view: str
    redirected: bool
