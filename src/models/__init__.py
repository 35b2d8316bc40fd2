"""Data models for Nuclino users, teams, workspaces, pages and files."""

from src.models.file import DownloadInfo, File
from src.models.page import Collection, ContentMeta, Item, Page, PageKind
from src.models.user import IdOnly, Team, User
from src.models.workspace import (
    CurrencyConfig,
    Field,
    FieldConfig,
    FieldType,
    NumberConfig,
    Selection,
    SelectionsConfig,
    TimestampConfig,
    Workspace,
)

__all__ = [
    'Collection',
    'ContentMeta',
    'CurrencyConfig',
    'DownloadInfo',
    'Field',
    'FieldConfig',
    'FieldType',
    'File',
    'IdOnly',
    'Item',
    'NumberConfig',
    'Page',
    'PageKind',
    'Selection',
    'SelectionsConfig',
    'Team',
    'TimestampConfig',
    'User',
    'Workspace',
]
