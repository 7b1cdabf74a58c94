"""
Session cookie management.

Handles signed session cookies that identify the authenticated user.
"""

from typing import Optional
from itsdangerous import URLSafeTimedSerializer, BadSignature, SignatureExpired

from app.core.config import settings


class SessionManager:
    """Manages signed session cookies for authentication."""
    
    def __init__(self, secret_key: str = settings.SECRET_KEY, max_age: int = settings.SESSION_MAX_AGE_SECONDS):
        self.serializer = URLSafeTimedSerializer(secret_key, salt="session")
        self.max_age = max_age
    
    def create_session_token(self, user_id: int) -> str:
        """
        Create a signed session token.
        
        Args:
            user_id: Id of the authenticated user
            
        Returns:
            Signed token string
        """
        return self.serializer.dumps({"user_id": user_id})
    
    def verify_session_token(self, token: str) -> Optional[int]:
        """
        Verify and decode a session token.
        
        Returns:
            The user id if the token is valid and not expired, None otherwise
        """
        try:
            data = self.serializer.loads(token, max_age=self.max_age)
        except (BadSignature, SignatureExpired):
            return None
        
        user_id = data.get("user_id") if isinstance(data, dict) else None
        if not isinstance(user_id, int) or isinstance(user_id, bool):
            return None
        return user_id


# Global session manager instance
session_manager = SessionManager()
