"""
Use Cases

Organized into domain folders:
- auth/: Registration, login and password reset
- users/: Profile and account management
- access/: Identity resolution and role checks
- blogs/: Content management
"""

from .auth import (
    RegisterUseCase,
    LoginUseCase,
    ForgotPasswordUseCase,
    ResetPasswordUseCase,
)
from .users import (
    UpdateProfileUseCase,
    DeleteUserUseCase,
    ListUsersUseCase,
)
from .access import (
    ResolveIdentityUseCase,
    check_role,
)
from .blogs import (
    CreateBlogUseCase,
    ListBlogsUseCase,
    UpdateBlogUseCase,
    DeleteBlogUseCase,
)

__all__ = [
    # Auth
    "RegisterUseCase",
    "LoginUseCase",
    "ForgotPasswordUseCase",
    "ResetPasswordUseCase",
    # Users
    "UpdateProfileUseCase",
    "DeleteUserUseCase",
    "ListUsersUseCase",
    # Access
    "ResolveIdentityUseCase",
    "check_role",
    # Blogs
    "CreateBlogUseCase",
    "ListBlogsUseCase",
    "UpdateBlogUseCase",
    "DeleteBlogUseCase",
]
