"""Pydantic request/response schemas for the auth and user-info API."""

from datetime import datetime

from pydantic import Field

from marketplace.api.schemas import CamelModel

# --- Request Schemas ---


class SignUpRequest(CamelModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {"email": "ana@example.com", "password": "Secret123", "confirmPassword": "Secret123"},
            ]
        }
    }

    email: str = Field(..., max_length=254)
    password: str
    confirm_password: str = ""


class LoginRequest(CamelModel):
    email: str = Field(..., max_length=254)
    password: str


class ChangePasswordRequest(CamelModel):
    current_password: str = ""
    new_password: str


class UpdateUserInfoRequest(CamelModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "firstName": "Ana",
                    "lastName": "Cruz",
                    "contactNumber": "09171234567",
                    "address": "12 Mabini St, Quezon City",
                    "role": "seller",
                    "businessName": "Ana's Farm",
                }
            ]
        }
    }

    first_name: str = Field(..., max_length=100)
    last_name: str = Field(..., max_length=100)
    contact_number: str = Field(..., max_length=30)
    address: str = Field(..., max_length=500)
    role: str
    business_name: str | None = Field(None, max_length=255)


# --- Response Schemas ---


class SignUpResponse(CamelModel):
    msg: str = "User registered successfully, please verify your email"
    user_id: str
    token: str


class LoggedInUser(CamelModel):
    name: str
    email: str


class LoginResponse(CamelModel):
    token: str
    user: LoggedInUser


class AccountResponse(CamelModel):
    """The account as its owner sees it. Password material is never included."""

    id: str
    email: str
    first_name: str | None = None
    last_name: str | None = None
    contact_number: str | None = None
    address: str | None = None
    role: str | None = None
    business_name: str | None = None
    is_email_verified: bool = False
    registered_at: datetime | None = None


class UserInfoResponse(CamelModel):
    first_name: str | None = None
    last_name: str | None = None
    contact_number: str | None = None
    address: str | None = None
    role: str | None = None
    business_name: str | None = None


class UserInfoUpdatedResponse(CamelModel):
    msg: str = "User info updated successfully"
    redirect_to: str = "/account"
