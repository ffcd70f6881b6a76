"""Pydantic schemas for JSON output.

Every command that accepts ``--json`` prints one of these models, so the
JSON structure stays consistent across commands:

- inspect: InspectResponse | ErrorResponse
- import: ImportSuccessResponse | ErrorResponse
- library: LibraryResponse | ErrorResponse
- add: AddSuccessResponse | ErrorResponse
- validate: ValidationSuccessResponse | ValidationFailedResponse | ErrorResponse
"""

from typing import Dict, List, Literal, Optional, Union

from pydantic import BaseModel, Field


# ============================================================================
# Base Response Models
# ============================================================================


class ErrorResponse(BaseModel):
    """Standard error response for all commands.

    Attributes:
        status: Always "error" for error responses
        error: Machine-readable error code
        message: Human-readable error message
    """

    status: Literal["error"] = "error"
    error: str = Field(
        description="Machine-readable error code",
        examples=["not_found", "format_mismatch", "truncated", "data_error"],
    )
    message: str = Field(description="Human-readable error description")


class HeaderModel(BaseModel):
    magic: str
    version: str = Field(description="Format version as major.minor")
    compressed: bool


# ============================================================================
# Inspect Command Response
# ============================================================================


class TablatureModel(BaseModel):
    created: str = Field(description="Creation time, ISO 8601 UTC")
    artist: str
    title: str
    type: str
    source_type: str
    source: str
    comment: str
    contents_length: int = Field(ge=0, description="Length of the tab body in characters")


class InspectResponse(BaseModel):
    status: Literal["success"] = "success"
    path: str
    size: int = Field(ge=0, description="File size in bytes")
    header: HeaderModel
    tablature: Optional[TablatureModel] = Field(
        default=None, description="Document fields (omitted with --quiet)"
    )


# ============================================================================
# Import Command Response
# ============================================================================


class ImportSuccessResponse(BaseModel):
    status: Literal["success"] = "success"
    source: str = Field(description="Imported text file")
    output: str = Field(description="Written tablature file")
    artist: str
    title: str
    type: str
    compressed: bool


# ============================================================================
# Library Command Responses
# ============================================================================


class LibraryTabModel(BaseModel):
    path: str
    artist: str
    title: str
    type: str
    favorited: bool
    views: int = Field(ge=0)


class LibraryPlaylistModel(BaseModel):
    path: str
    name: str
    files: int = Field(ge=0, description="Number of files in the playlist")


class SkippedModel(BaseModel):
    path: str
    kind: Literal["tablature", "playlist"]
    reason: str


class LibraryResponse(BaseModel):
    status: Literal["success"] = "success"
    path: str
    version: str
    encoding: str
    tabs: List[LibraryTabModel]
    playlists: List[LibraryPlaylistModel]
    skipped: List[SkippedModel]


class AddSuccessResponse(BaseModel):
    status: Literal["success"] = "success"
    path: str = Field(description="Library index written")
    added: int = Field(ge=0, description="Entries added")
    already_present: int = Field(ge=0, description="Entries that were already in the library")
    total: int = Field(ge=0, description="Tab entries after the update")
    dropped: List[SkippedModel] = Field(
        default_factory=list, description="Entries removed from the index because they could not be loaded"
    )


# ============================================================================
# Validate Command Responses
# ============================================================================


class ValidationFailedResponse(BaseModel):
    status: Literal["invalid"] = "invalid"
    path: str
    errors: List[str] = Field(description="List of validation errors")
    warnings: Optional[List[str]] = Field(
        default=None, description="Optional warnings (non-fatal issues)"
    )


class ValidationSuccessResponse(BaseModel):
    status: Literal["valid"] = "valid"
    path: str
    tabs: int = Field(ge=0, description="Resolved tab entries")
    playlists: int = Field(ge=0, description="Resolved playlist entries")
    warnings: Optional[List[str]] = Field(
        default=None, description="Optional warnings (non-fatal issues)"
    )


# ============================================================================
# Config Command Responses
# ============================================================================


class ConfigResponse(BaseModel):
    status: Literal["success"] = "success"
    path: str = Field(description="Configuration file")
    settings: Dict[str, Union[bool, str]]
    updated: Optional[str] = Field(default=None, description="Setting changed by --set")


# ============================================================================
# Type Unions for Each Command
# ============================================================================

InspectResult = InspectResponse | ErrorResponse
ImportResult = ImportSuccessResponse | ErrorResponse
LibraryResult = LibraryResponse | ErrorResponse
AddResult = AddSuccessResponse | ErrorResponse
ValidateResult = ValidationSuccessResponse | ValidationFailedResponse | ErrorResponse
ConfigResult = ConfigResponse | ErrorResponse
