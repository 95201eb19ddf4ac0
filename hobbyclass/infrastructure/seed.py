"""Демо-данные. Функции возвращают новые объекты на каждый вызов."""
from ..domain.entities import (
    Availability,
    ClassStatus,
    MentorClass,
    MentorProfile,
    Role,
    StudentClass,
    User,
    UserStatus,
)

MENTOR_IMAGE_CALLIGRAPHY = "/assets/images/mentor-dashboard/calligraphy.png"
MENTOR_IMAGE_POTTERY = "/assets/images/mentor-dashboard/pottery.png"


def seed_users() -> list[User]:
    return [
        User(1, "John Doe", "johndoe@gmail.com", Role.MENTOR, UserStatus.ACTIVE),
        User(2, "Jane Doe", "janedoe@gmail.com", Role.STUDENT, UserStatus.ACTIVE),
        User(3, "Admin User", "admin@hobbyclass.com", Role.ADMIN, UserStatus.ACTIVE),
        User(4, "Alice Student", "student@hobbyclass.com", Role.STUDENT, UserStatus.ACTIVE),
        User(5, "Bob Mentor", "mentor@hobbyclass.com", Role.MENTOR, UserStatus.ACTIVE),
    ]


def seed_mentor_classes() -> list[MentorClass]:
    return [
        MentorClass(
            id="1",
            title="Calligraphy",
            category="Art",
            date="12/09/2025",
            time="10:00am",
            duration="120 min",
            max_students=50,
            current_students=35,
            description=(
                "Expert guidance in the timeless art of calligraphy for all skill levels: "
                "technique, creativity and confidence in lettering."
            ),
            image_url=MENTOR_IMAGE_CALLIGRAPHY,
            status=ClassStatus.ACTIVE,
        ),
        MentorClass(
            id="2",
            title="Pottery",
            category="Art",
            date="22/09/2025",
            time="12:00pm",
            duration="160 min",
            max_students=55,
            current_students=42,
            description=(
                "Hands-on pottery techniques for all skill levels, building creativity "
                "and confidence with clay."
            ),
            image_url=MENTOR_IMAGE_POTTERY,
            status=ClassStatus.ACTIVE,
        ),
        MentorClass(
            id="3",
            title="Photography",
            category="Art",
            date="15/10/2025",
            time="2:00pm",
            duration="90 min",
            max_students=20,
            current_students=15,
            description=(
                "Fundamentals of digital photography: composition, lighting and basic editing."
            ),
            image_url=MENTOR_IMAGE_CALLIGRAPHY,
            status=ClassStatus.INACTIVE,
        ),
    ]


def seed_student_classes() -> list[StudentClass]:
    return [
        StudentClass(
            id="1",
            name="Oil Painting class",
            category="art",
            mentor_name="Sarah Johnson",
            date="12/09/2025",
            time="10:00am",
            status=Availability.AVAILABLE,
            description="Learn the fundamentals of oil painting with professional techniques",
        ),
        StudentClass(
            id="2",
            name="Jazz with Jazz",
            category="music",
            mentor_name="Jazz Martinez",
            date="12/09/2025",
            time="10:00am",
            status=Availability.OFFLINE,
            description="Explore the world of jazz music and improvisation",
        ),
        StudentClass(
            id="3",
            name="Dance it out",
            category="dance",
            mentor_name="Emma Wilson",
            date="12/09/2025",
            time="10:00am",
            status=Availability.BUSY,
            description="Express yourself through contemporary dance movements",
        ),
    ]


def default_mentor_profile() -> MentorProfile:
    return MentorProfile(
        name="Jane Doe",
        title="Master Calligrapher",
        description=(
            "Award-winning artist and educator with over 15 years of teaching experience "
            "in calligraphy for all skill levels."
        ),
        profile_image="/assets/images/mentor-profile/profile.png",
        work_image="/assets/images/mentor-profile/work.png",
    )
