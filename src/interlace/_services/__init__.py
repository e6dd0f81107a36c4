from ._base_service import BaseService
from .accounts_service import AccountsService
from .files_service import FilesService
from .oauth_service import OAuthService

__all__ = [
    "BaseService",
    "AccountsService",
    "FilesService",
    "OAuthService",
]
