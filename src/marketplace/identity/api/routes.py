"""FastAPI endpoints for authentication, account management and user info."""

from fastapi import APIRouter, Depends, Query
from protean.utils.globals import current_domain

from marketplace.api.auth import current_user_id
from marketplace.api.schemas import MessageResponse
from marketplace.identity.api.schemas import (
    AccountResponse,
    ChangePasswordRequest,
    LoggedInUser,
    LoginRequest,
    LoginResponse,
    SignUpRequest,
    SignUpResponse,
    UpdateUserInfoRequest,
    UserInfoResponse,
    UserInfoUpdatedResponse,
)
from marketplace.identity.user import credentials
from marketplace.identity.user.account import DeleteAccount
from marketplace.identity.user.profile import UpdateProfile
from marketplace.identity.user.user import User
from marketplace.identity.user.verification import VerifyEmail

router = APIRouter(prefix="/auth", tags=["auth"])
userinfo_router = APIRouter(prefix="/userinfo", tags=["userinfo"])


def _active_user(user_id: str) -> User:
    return current_domain.repository_for(User).get_active(user_id)


@router.post("/signup", status_code=201, response_model=SignUpResponse)
async def sign_up(body: SignUpRequest) -> SignUpResponse:
    result = credentials.sign_up(body.email, body.password, body.confirm_password)
    return SignUpResponse(user_id=result["user_id"], token=result["token"])


@router.get("/verify-email", response_model=MessageResponse)
async def verify_email(token: str = Query("")) -> MessageResponse:
    current_domain.process(VerifyEmail(token=token), asynchronous=False)
    return MessageResponse(msg="Email verified successfully")


@router.post("/login", response_model=LoginResponse)
async def log_in(body: LoginRequest) -> LoginResponse:
    result = credentials.log_in(body.email, body.password)
    return LoginResponse(token=result["token"], user=LoggedInUser(**result["user"]))


@router.post("/logout", response_model=MessageResponse)
async def log_out(user_id: str = Depends(current_user_id)) -> MessageResponse:
    # Tokens are not tracked server side; the client discards its copy
    return MessageResponse(msg="Logged out successfully")


@router.get("/account", response_model=AccountResponse)
async def get_account(user_id: str = Depends(current_user_id)) -> AccountResponse:
    user = _active_user(user_id)
    return AccountResponse(
        id=str(user.id),
        email=user.email,
        first_name=user.first_name,
        last_name=user.last_name,
        contact_number=user.contact_number,
        address=user.address,
        role=user.role,
        business_name=user.business_name,
        is_email_verified=user.is_email_verified,
        registered_at=user.registered_at,
    )


@router.delete("/account", response_model=MessageResponse)
async def delete_account(user_id: str = Depends(current_user_id)) -> MessageResponse:
    current_domain.process(DeleteAccount(user_id=user_id), asynchronous=False)
    return MessageResponse(msg="User deleted successfully and email notification sent")


@router.put("/account/change-password", response_model=MessageResponse)
async def change_password(body: ChangePasswordRequest, user_id: str = Depends(current_user_id)) -> MessageResponse:
    credentials.change_password(user_id, body.current_password, body.new_password)
    return MessageResponse(msg="Password changed successfully")


@userinfo_router.get("", response_model=UserInfoResponse)
async def get_user_info(user_id: str = Depends(current_user_id)) -> UserInfoResponse:
    user = _active_user(user_id)
    return UserInfoResponse(
        first_name=user.first_name,
        last_name=user.last_name,
        contact_number=user.contact_number,
        address=user.address,
        role=user.role,
        business_name=user.business_name,
    )


@userinfo_router.put("", response_model=UserInfoUpdatedResponse)
async def update_user_info(body: UpdateUserInfoRequest, user_id: str = Depends(current_user_id)) -> UserInfoUpdatedResponse:
    command = UpdateProfile(
        user_id=user_id,
        first_name=body.first_name,
        last_name=body.last_name,
        contact_number=body.contact_number,
        address=body.address,
        role=body.role,
        business_name=body.business_name,
    )
    current_domain.process(command, asynchronous=False)
    return UserInfoUpdatedResponse()
