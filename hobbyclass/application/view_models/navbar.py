from ..session_store import SessionStore


def navbar_state(session: SessionStore) -> dict:
    user = session.current_user
    return {
        "logged_in": session.is_logged_in,
        "user": user.to_dict() if user else None,
        "is_admin": session.is_admin(),
        "is_mentor": session.is_mentor(),
        "is_student": session.is_student(),
    }
