"""
Authentication Use Cases

All authentication-related business logic.
"""

from .register_use_case import RegisterUseCase
from .login_use_case import LoginUseCase
from .forgot_password_use_case import ForgotPasswordUseCase
from .reset_password_use_case import ResetPasswordUseCase
from .dtos import ProfileInfo, ProfilePatch, RegisterCommand, ResetPinIssued, UserInfo

__all__ = [
    # Use Cases
    "RegisterUseCase",
    "LoginUseCase",
    "ForgotPasswordUseCase",
    "ResetPasswordUseCase",
    # DTOs - Commands
    "RegisterCommand",
    "ProfilePatch",
    # DTOs - Responses
    "UserInfo",
    "ProfileInfo",
    "ResetPinIssued",
]
