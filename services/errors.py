class InvalidInput(ValueError):
    """Raised when a service receives input it cannot work with"""


class LoginRequired(Exception):
    """Raised by the access guard when a protected route has no logged-in user"""

    def __init__(self, login_path: str = "/login"):
        super().__init__(f"Login required, redirecting to {login_path}")
        self.login_path = login_path
