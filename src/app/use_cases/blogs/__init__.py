"""
Blog Use Cases

Content management on top of the asset lifecycle guard.
"""

from .create_blog_use_case import CreateBlogUseCase
from .list_blogs_use_case import ListBlogsUseCase
from .update_blog_use_case import UpdateBlogUseCase
from .delete_blog_use_case import DeleteBlogUseCase
from .dtos import AuthorInfo, BlogInfo, BlogPatch, CreateBlogCommand

__all__ = [
    # Use Cases
    "CreateBlogUseCase",
    "ListBlogsUseCase",
    "UpdateBlogUseCase",
    "DeleteBlogUseCase",
    # DTOs
    "CreateBlogCommand",
    "BlogPatch",
    "BlogInfo",
    "AuthorInfo",
]
