"""The server's file manager (``.../files``).

Paths are relative to the server's root directory. Bulk operations take a
``root`` directory plus names inside it, as the panel's file manager does.
"""

from __future__ import annotations

from urllib.parse import urlencode

from pterodactyl_client.models.client_api import (
    CompressFilesOptions,
    CopyFileOptions,
    CreateFolderOptions,
    DecompressFileOptions,
    DeleteFilesOptions,
    FileObject,
    RenameFilesOptions,
    SignedURL,
)
from pterodactyl_client.models.envelope import Envelope, PaginatedEnvelope
from pterodactyl_client.transport.requester import Body, Requester


class FilesService:
    def __init__(self, requester: Requester, server_path: str) -> None:
        self._requester = requester
        self._path = f"{server_path}/files"

    async def list(self, directory: str = "/") -> list[FileObject]:
        """List one directory. The panel returns it in a single unpaginated page."""
        request = self._requester.build_request("GET", self._endpoint("list", directory=directory))
        page = await self._requester.execute(request, PaginatedEnvelope[FileObject])
        return page.items()

    async def get_contents(self, file: str) -> str:
        """Return a file's raw contents as text."""
        request = self._requester.build_request("GET", self._endpoint("contents", file=file))
        response = await self._requester.send(request)
        return response.text

    async def download(self, file: str) -> SignedURL:
        """Get a one-time URL the file can be downloaded from."""
        request = self._requester.build_request("GET", self._endpoint("download", file=file))
        envelope = await self._requester.execute(request, Envelope[SignedURL])
        return envelope.attributes

    async def rename(self, options: RenameFilesOptions) -> None:
        await self._send("PUT", "rename", options)

    async def copy(self, options: CopyFileOptions) -> None:
        await self._send("POST", "copy", options)

    async def write(self, file: str, content: str | bytes) -> None:
        """Create or overwrite ``file`` with ``content``."""
        request = self._requester.build_request(
            "POST",
            self._endpoint("write", file=file),
            content=content,
            content_type="text/plain",
        )
        await self._requester.execute(request)

    async def compress(self, options: CompressFilesOptions) -> FileObject:
        """Archive files; returns the archive created next to them."""
        request = self._requester.build_request("POST", self._endpoint("compress"), body=options)
        envelope = await self._requester.execute(request, Envelope[FileObject])
        return envelope.attributes

    async def decompress(self, options: DecompressFileOptions) -> None:
        await self._send("POST", "decompress", options)

    async def delete(self, options: DeleteFilesOptions) -> None:
        await self._send("POST", "delete", options)

    async def create_folder(self, options: CreateFolderOptions) -> None:
        await self._send("POST", "create-folder", options)

    async def get_upload_url(self) -> SignedURL:
        request = self._requester.build_request("GET", self._endpoint("upload"))
        envelope = await self._requester.execute(request, Envelope[SignedURL])
        return envelope.attributes

    def _endpoint(self, action: str, **query: str) -> str:
        endpoint = f"{self._path}/{action}"
        if query:
            endpoint = f"{endpoint}?{urlencode(query)}"
        return endpoint

    async def _send(self, method: str, action: str, body: Body) -> None:
        request = self._requester.build_request(method, self._endpoint(action), body=body)
        await self._requester.execute(request)
