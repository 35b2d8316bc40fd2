"""Test fixtures for Nuclino client tests.

This module provides sample API responses taken from the Nuclino API
documentation, plus the ids they contain.
"""

from .sample_responses import (
    WORKSPACE_ID,
    TEAM_ID,
    USER_ID,
    ITEM_ID,
    COLLECTION_ID,
    FILE_ID,
    SAMPLE_USER,
    SAMPLE_TEAM,
    SAMPLE_TEAM_LIST,
    SAMPLE_WORKSPACE,
    SAMPLE_WORKSPACE_LIST,
    SAMPLE_ITEM,
    SAMPLE_COLLECTION,
    SAMPLE_PAGE_LIST,
    SAMPLE_SEARCH_RESULTS,
    SAMPLE_FILE,
    SAMPLE_DELETED,
    SAMPLE_FAIL,
    SAMPLE_ERROR,
    SAMPLE_SUCCESS_WITHOUT_DATA,
)

__all__ = [
    "WORKSPACE_ID",
    "TEAM_ID",
    "USER_ID",
    "ITEM_ID",
    "COLLECTION_ID",
    "FILE_ID",
    "SAMPLE_USER",
    "SAMPLE_TEAM",
    "SAMPLE_TEAM_LIST",
    "SAMPLE_WORKSPACE",
    "SAMPLE_WORKSPACE_LIST",
    "SAMPLE_ITEM",
    "SAMPLE_COLLECTION",
    "SAMPLE_PAGE_LIST",
    "SAMPLE_SEARCH_RESULTS",
    "SAMPLE_FILE",
    "SAMPLE_DELETED",
    "SAMPLE_FAIL",
    "SAMPLE_ERROR",
    "SAMPLE_SUCCESS_WITHOUT_DATA",
]
