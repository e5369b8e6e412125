"""Resource for configuration version notes."""

import json
from dataclasses import dataclass

from .._operation import AppSecRequest, Operation
from ..types import VersionNotes

NOTES_PATH = "/configs/{config_id}/versions/{version}/version-notes"


@dataclass
class GetVersionNotesRequest(AppSecRequest):
    config_id: int = 0
    version: int = 0

    required = ("config_id", "version")


@dataclass
class UpdateVersionNotesRequest(AppSecRequest):
    config_id: int = 0
    version: int = 0
    notes: str = ""

    required = ("config_id", "version")

    def body(self) -> bytes:
        return json.dumps({"notes": self.notes}).encode("utf-8")


GET_VERSION_NOTES = Operation(
    name="GetVersionNotes",
    method="GET",
    path=NOTES_PATH,
    response=VersionNotes,
)

UPDATE_VERSION_NOTES = Operation(
    name="UpdateVersionNotes",
    method="PUT",
    path=NOTES_PATH,
    response=VersionNotes,
    success=(200, 201),
)


class VersionNotesResource:
    """Free-text notes attached to a configuration version."""

    def __init__(self, client):
        self._client = client

    def get(self, config_id: int, version: int) -> VersionNotes:
        request = GetVersionNotesRequest(config_id, version)
        return self._client._call(GET_VERSION_NOTES, request)

    def update(self, config_id: int, version: int, notes: str) -> VersionNotes:
        """Replace the notes of a configuration version."""
        request = UpdateVersionNotesRequest(config_id, version, notes)
        return self._client._call(UPDATE_VERSION_NOTES, request)


class AsyncVersionNotesResource:
    def __init__(self, client):
        self._client = client

    async def get(self, config_id: int, version: int) -> VersionNotes:
        request = GetVersionNotesRequest(config_id, version)
        return await self._client._call(GET_VERSION_NOTES, request)

    async def update(self, config_id: int, version: int, notes: str) -> VersionNotes:
        request = UpdateVersionNotesRequest(config_id, version, notes)
        return await self._client._call(UPDATE_VERSION_NOTES, request)
