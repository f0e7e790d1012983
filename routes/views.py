from typing import Any, Dict, Optional

from config import Settings
from models.user import User


def user_payload(user: Optional[User]) -> Optional[Dict[str, Any]]:
    if user is None:
        return None
    return user.model_dump(by_alias=True)


def view(name: str, settings: Settings, current_user: Optional[User], **context: Any) -> Dict[str, Any]:
    """
    Build the document a template named `name` would be rendered with,
    including the page variables shared by every view
    """
    return {
        "view": name,
        "appName": settings.app_name,
        "copyrightYear": settings.copyright_year,
        "postNeoType": settings.post_neo_type,
        "loggedIn": current_user is not None,
        "userId": current_user.id if current_user is not None else None,
        **context,
    }
