from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, File, Form, Response, UploadFile, status
from pydantic import BaseModel, Field

from config import ApplicationConfig
from src.api.error import ClientError, ServerError
from src.api.utils.cookies import clear_session_cookie, set_session_cookie
from src.api.utils.jwt import SessionTokenCodec
from src.api.utils.upload import store_upload
from src.app.services.asset_guard import AssetLifecycleGuard
from src.app.services.file_storage import IFileStorage
from src.app.services.password_hasher import PasswordHasher
from src.app.services.reset_notifier import IResetNotifier
from src.app.services.reset_token_generator import ResetTokenGenerator
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth import (
    ForgotPasswordUseCase,
    LoginUseCase,
    ProfileInfo,
    ProfilePatch,
    RegisterCommand,
    RegisterUseCase,
    ResetPasswordUseCase,
    UserInfo,
)
from src.app.use_cases.users import (
    DeleteUserUseCase,
    ListUsersUseCase,
    UpdateProfileUseCase,
)
from src.depends import (
    get_asset_guard,
    get_current_user,
    get_file_storage,
    get_password_hasher,
    get_reset_notifier,
    get_reset_token_generator,
    get_session_token_codec,
    get_unit_of_work,
    require_roles,
)
from src.domain.entities import Role

router = APIRouter(prefix="/users", tags=["Authentication"])

AVATAR_FIELD = "profilePicture"


class MessageResponse(BaseModel):
    message: str


@router.post("/register", status_code=status.HTTP_201_CREATED, response_model=UserInfo)
async def register(
    response: Response,
    username: str = Form(..., description="Unique display name"),
    email: str = Form(..., description="User email address"),
    password: str = Form(..., min_length=1, description="User password"),
    profile_picture: Optional[UploadFile] = File(None, alias=AVATAR_FIELD),
    uow: UnitOfWork = Depends(get_unit_of_work),
    storage: IFileStorage = Depends(get_file_storage),
    asset_guard: AssetLifecycleGuard = Depends(get_asset_guard),
    codec: SessionTokenCodec = Depends(get_session_token_codec),
):
    """
    User Registration

    Multipart form with an optional profile picture. On success the session
    cookie is set, so the new user is logged in.

    Raises:
        - 400 Bad Request: Invalid username/email, or upload rejected
        - 409 Conflict: Email or username already registered
        - 413 Payload Too Large: Profile picture over the size limit
        - 500 Internal Server Error: Server error
    """
    stored = await store_upload(profile_picture, AVATAR_FIELD, storage)

    command = RegisterCommand(
        username=username,
        email=email,
        password=password,
        avatar=stored.filename if stored else None,
    )
    result = await RegisterUseCase(uow, asset_guard).execute(command)

    if result.is_err():
        error = result.error
        if error.code == "ALREADY_EXISTS":
            raise ClientError(error, status_code=status.HTTP_409_CONFLICT)
        elif error.code == "VALIDATION_FAILED":
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        raise ServerError(error)

    user = result.value
    set_session_cookie(response, codec.issue(user.id))
    return user


class LoginRequest(BaseModel):
    """Login HTTP request payload"""

    # Validated by the use case with the same rule registration uses
    email: str = Field(..., description="User email address")
    password: str = Field(..., description="User password")


@router.post("/login", status_code=status.HTTP_200_OK, response_model=UserInfo)
async def login(
    request: LoginRequest,
    response: Response,
    uow: UnitOfWork = Depends(get_unit_of_work),
    hasher: PasswordHasher = Depends(get_password_hasher),
    codec: SessionTokenCodec = Depends(get_session_token_codec),
):
    """
    User Login

    Verifies credentials and sets the session cookie.

    Raises:
        - 401 Unauthorized: Invalid credentials (same error for unknown email)
        - 500 Internal Server Error: Server error
    """
    result = await LoginUseCase(uow, hasher).execute(request.email, request.password)

    if result.is_err():
        error = result.error
        if error.code == "INVALID_CREDENTIALS":
            raise ClientError(error, status_code=status.HTTP_401_UNAUTHORIZED)
        raise ServerError(error)

    user = result.value
    set_session_cookie(response, codec.issue(user.id))
    return user


@router.post("/logout", status_code=status.HTTP_200_OK, response_model=MessageResponse)
async def logout(response: Response):
    """Overwrite the session cookie with an empty, already-expired value."""
    clear_session_cookie(response)
    return MessageResponse(message="Logged out successfully")


@router.get("/getallusers", status_code=status.HTTP_200_OK, response_model=List[UserInfo])
async def get_all_users(
    current_user: UserInfo = Depends(require_roles(Role.admin)),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    List Users (admin)

    Raises:
        - 401 Unauthorized: Missing or invalid session
        - 403 Forbidden: Caller is not an admin
    """
    result = await ListUsersUseCase(uow).execute()

    if result.is_err():
        raise ServerError(result.error)

    return result.value


class ForgotPasswordRequest(BaseModel):
    """Forgot password HTTP request payload"""

    # Validated by the use case with the same rule registration uses
    email: str = Field(..., description="User email address")


class ForgotPasswordResponse(BaseModel):
    message: str
    pin: Optional[str] = None


@router.post(
    "/forgotpassword",
    status_code=status.HTTP_200_OK,
    response_model=ForgotPasswordResponse,
    response_model_exclude_none=True,
)
async def forgot_password(
    request: ForgotPasswordRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    token_generator: ResetTokenGenerator = Depends(get_reset_token_generator),
    notifier: IResetNotifier = Depends(get_reset_notifier),
):
    """
    Request Password Reset

    Issues a 6-digit PIN valid for 1 hour and hands it to the reset notifier.
    The PIN is echoed in the response only when RESET_PIN_IN_RESPONSE is enabled.

    Raises:
        - 404 Not Found: No account with this email
        - 500 Internal Server Error: Server error
    """
    result = await ForgotPasswordUseCase(uow, token_generator).execute(request.email)

    if result.is_err():
        error = result.error
        if error.code == "NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    issued = result.value
    await notifier.send_reset_pin(issued.email, issued.pin)

    return ForgotPasswordResponse(
        message="Email sent successfully",
        pin=issued.pin if ApplicationConfig.RESET_PIN_IN_RESPONSE else None,
    )


class ResetPasswordRequest(BaseModel):
    """Reset password HTTP request payload"""

    token: str = Field(..., description="6-digit reset PIN")
    password: str = Field(..., min_length=1, description="New password")


@router.post("/resetpassword", status_code=status.HTTP_200_OK, response_model=MessageResponse)
async def reset_password(
    request: ResetPasswordRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Confirm Password Reset

    Raises:
        - 400 Bad Request: Wrong, expired or already used PIN; empty password
        - 500 Internal Server Error: Server error
    """
    result = await ResetPasswordUseCase(uow).execute(request.token, request.password)

    if result.is_err():
        error = result.error
        if error.code in ("INVALID_OR_EXPIRED_TOKEN", "VALIDATION_FAILED"):
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        raise ServerError(error)

    return MessageResponse(message="Password reset successful")


@router.put("/profile", status_code=status.HTTP_200_OK, response_model=ProfileInfo)
async def update_profile(
    username: Optional[str] = Form(None),
    address: Optional[str] = Form(None),
    phone: Optional[str] = Form(None),
    profile_picture: Optional[UploadFile] = File(None, alias=AVATAR_FIELD),
    current_user: UserInfo = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
    storage: IFileStorage = Depends(get_file_storage),
    asset_guard: AssetLifecycleGuard = Depends(get_asset_guard),
):
    """
    Update Own Profile

    Only non-empty fields are applied. A new profile picture replaces the
    old file once the update is saved.

    Raises:
        - 400 Bad Request: Invalid username, or upload rejected
        - 401 Unauthorized: Missing or invalid session
        - 404 Not Found: Account no longer exists
        - 409 Conflict: Username already taken
    """
    stored = await store_upload(profile_picture, AVATAR_FIELD, storage)

    fields = {
        "username": username,
        "address": address,
        "phone": phone,
        "avatar": stored.filename if stored else None,
    }
    patch = ProfilePatch(**{name: value for name, value in fields.items() if value})

    result = await UpdateProfileUseCase(uow, asset_guard).execute(current_user.id, patch)

    if result.is_err():
        error = result.error
        if error.code == "NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        elif error.code == "ALREADY_EXISTS":
            raise ClientError(error, status_code=status.HTTP_409_CONFLICT)
        elif error.code == "VALIDATION_FAILED":
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        raise ServerError(error)

    return result.value


@router.delete("/{user_id}", status_code=status.HTTP_200_OK, response_model=MessageResponse)
async def delete_user(
    user_id: UUID,
    current_user: UserInfo = Depends(require_roles(Role.admin)),
    uow: UnitOfWork = Depends(get_unit_of_work),
    asset_guard: AssetLifecycleGuard = Depends(get_asset_guard),
):
    """
    Delete User (admin)

    Raises:
        - 401 Unauthorized: Missing or invalid session
        - 403 Forbidden: Caller is not an admin
        - 404 Not Found: No such user
    """
    result = await DeleteUserUseCase(uow, asset_guard).execute(user_id)

    if result.is_err():
        error = result.error
        if error.code == "NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return MessageResponse(message="User deleted successfully")
