"""Admin gate for the Streamlit admin page.

The session object lives in ``st.session_state`` so a successful login
survives reruns of the script for the same browser session.
"""

from collections.abc import MutableMapping
from dataclasses import dataclass
import hmac

from src.domain.errors import AdminAuthenticationError

SESSION_KEY = "admin_session"


@dataclass
class AdminSession:
    """Authentication state of the current admin visitor.

    Attributes:
        authenticated: Whether the password check succeeded.
        failed_attempts: Number of rejected passwords in this session.
    """

    authenticated: bool = False
    failed_attempts: int = 0

    def login(self, password: str, expected: str | None) -> bool:
        """Check a password against the configured one.

        Args:
            password: Password typed by the visitor.
            expected: Configured admin password; None disables the gate.

        Returns:
            bool: True when the visitor is now authenticated.
        """
        if not expected or not password:
            self.failed_attempts += 1
            return False
        if hmac.compare_digest(password.encode(), expected.encode()):
            self.authenticated = True
            self.failed_attempts = 0
            return True
        self.failed_attempts += 1
        return False

    def logout(self) -> None:
        self.authenticated = False

    def require(self) -> None:
        """Raise when the session is not authenticated."""
        if not self.authenticated:
            raise AdminAuthenticationError("Admin login required")


def get_admin_session(session_state: MutableMapping) -> AdminSession:
    """Return the admin session stored in the Streamlit session state."""
    session = session_state.get(SESSION_KEY)
    if not isinstance(session, AdminSession):
        session = AdminSession()
        session_state[SESSION_KEY] = session
    return session


__all__ = ["SESSION_KEY", "AdminSession", "get_admin_session"]
