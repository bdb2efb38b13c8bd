from fastapi import APIRouter, Depends
from skillswap.modules.auth.schemas import LoginRequest, SignupRequest, TokenResponse, SignupResponse
from skillswap.modules.auth.service import AuthService
from skillswap.modules.users.schemas import UserResponse
from skillswap.core.dependencies import get_auth_service, get_current_token, get_current_profile
from typing import Dict

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/signup", response_model=SignupResponse, status_code=201)
async def signup(
    signup_data: SignupRequest,
    service: AuthService = Depends(get_auth_service)
):
    """Register a new user with their profile and skills"""
    return service.signup(signup_data)


@router.post("/login", response_model=TokenResponse)
async def login(
    login_data: LoginRequest,
    service: AuthService = Depends(get_auth_service)
):
    """Login and get access token"""
    return service.login(login_data)


@router.post("/logout", status_code=200)
async def logout(
    token: str = Depends(get_current_token),
    service: AuthService = Depends(get_auth_service)
):
    """Logout and invalidate token"""
    service.logout(token)
    return {"message": "Logged out successfully"}


@router.get("/me", response_model=UserResponse)
async def get_current_user(
    profile: Dict = Depends(get_current_profile),
):
    """Get the profile of the authenticated user"""
    return profile
