import hashlib
import time
import logging
from supabase import Client
from skillswap.modules.auth.schemas import LoginRequest, SignupRequest, TokenResponse, SignupResponse
from skillswap.modules.users.service import UserService
from skillswap.modules.skills.service import SkillService, normalize_skill_lists
from skillswap.config.settings import settings
from fastapi import HTTPException
from typing import Dict, Any

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 6

# In-memory cache for get_current_user to reduce Supabase auth calls (e.g. dashboard fan-out with same token)
_AUTH_USER_CACHE: Dict[str, tuple] = {}
_AUTH_CACHE_MAX_SIZE = 500


def clear_auth_cache():
    _AUTH_USER_CACHE.clear()


class AuthService:
    def __init__(self, supabase: Client):
        self.supabase = supabase

    def signup(self, signup_data: SignupRequest) -> SignupResponse:
        """Register with Supabase Auth, create the profile row and attach the listed skills"""
        if signup_data.password != signup_data.confirm_password:
            raise HTTPException(status_code=400, detail="Passwords do not match")
        if len(signup_data.password) < MIN_PASSWORD_LENGTH:
            raise HTTPException(
                status_code=400,
                detail=f"Password must be at least {MIN_PASSWORD_LENGTH} characters long"
            )

        offered, wanted = normalize_skill_lists(signup_data.offered_skills, signup_data.wanted_skills)

        try:
            auth_response = self.supabase.auth.sign_up({
                "email": signup_data.email,
                "password": signup_data.password,
                "options": {
                    "data": {
                        "name": signup_data.name,
                        "college": signup_data.college,
                        "role": signup_data.role,
                        "bio": signup_data.bio,
                    }
                }
            })
        except Exception as e:
            error_message = str(e)
            if "already registered" in error_message.lower() or "already exists" in error_message.lower():
                raise HTTPException(status_code=400, detail="User already exists")
            raise HTTPException(status_code=400, detail=error_message)

        if not auth_response.user:
            raise HTTPException(status_code=400, detail="Failed to register user")

        user_id = auth_response.user.id
        profile = UserService(self.supabase).create_profile(
            user_id=user_id,
            email=signup_data.email,
            name=signup_data.name,
            college=signup_data.college,
            role=signup_data.role,
            bio=signup_data.bio,
            credits=settings.starting_credits,
        )

        skill_service = SkillService(self.supabase)
        attached = {"offered": [], "wanted": []}
        for skill_type, names in (("offered", offered), ("wanted", wanted)):
            for name in names:
                try:
                    skill_service.attach_skill(user_id, name, skill_type)
                    attached[skill_type].append(name)
                except Exception as e:
                    detail = getattr(e, "detail", str(e))
                    logger.error(f"Could not attach {skill_type} skill '{name}' for {user_id}: {detail}")

        logger.info(f"Registered user {user_id} with {len(attached['offered'])} offered / {len(attached['wanted'])} wanted skills")
        return SignupResponse(
            user_id=user_id,
            email=profile.email,
            credits=profile.credits,
            offered_skills=attached["offered"],
            wanted_skills=attached["wanted"],
            message="User registered successfully"
        )

    def login(self, login_data: LoginRequest) -> TokenResponse:
        """Authenticate user using Supabase Auth"""
        try:
            auth_response = self.supabase.auth.sign_in_with_password({
                "email": login_data.email,
                "password": login_data.password
            })
        except Exception as e:
            error_message = str(e)
            if "invalid" in error_message.lower() or "credentials" in error_message.lower():
                raise HTTPException(status_code=401, detail="Invalid email or password")
            raise HTTPException(status_code=500, detail=f"Login failed: {error_message}")

        if not auth_response.user or not auth_response.session:
            raise HTTPException(status_code=401, detail="Invalid credentials")

        return TokenResponse(
            access_token=auth_response.session.access_token,
            token_type="bearer",
            user_id=auth_response.user.id,
            email=auth_response.user.email or login_data.email
        )

    def get_current_user(self, token: str) -> Dict[str, Any]:
        """Get current user details from Supabase Auth token. Uses short TTL cache to reduce auth API calls."""
        cache_key = hashlib.sha256(token.encode()).hexdigest()
        now = time.monotonic()
        if cache_key in _AUTH_USER_CACHE:
            user_data, expiry = _AUTH_USER_CACHE[cache_key]
            if now < expiry:
                return user_data
            del _AUTH_USER_CACHE[cache_key]
        try:
            user_response = self.supabase.auth.get_user(jwt=token)
        except Exception as e:
            error_msg = str(e)
            if "JWT" in error_msg or "expired" in error_msg.lower() or "invalid" in error_msg.lower():
                raise HTTPException(status_code=401, detail="Invalid or expired token")
            raise HTTPException(status_code=401, detail="Authentication failed")
        if not user_response or not user_response.user:
            raise HTTPException(status_code=401, detail="Invalid or expired token")
        user = user_response.user
        user_data = {
            "id": user.id,
            "email": user.email,
            "user_metadata": user.user_metadata or {},
        }
        if len(_AUTH_USER_CACHE) < _AUTH_CACHE_MAX_SIZE:
            _AUTH_USER_CACHE[cache_key] = (user_data, now + settings.auth_cache_ttl_sec)
        return user_data

    def logout(self, token: str) -> bool:
        """Logout user using Supabase Auth"""
        _AUTH_USER_CACHE.pop(hashlib.sha256(token.encode()).hexdigest(), None)
        try:
            # Tokens are stateless JWTs; sign_out only clears the client session
            self.supabase.auth.sign_out()
            return True
        except Exception as e:
            logger.warning(f"Sign out failed: {e}")
            return False
