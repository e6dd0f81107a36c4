from pathlib import Path
from typing import IO, Any, List, Sequence, Tuple, Union

from .._utils import Endpoint, RequestSpec
from ..models import ApiResponse
from ._base_service import BaseService

FileContent = Union[bytes, IO[bytes]]


class FilesService(BaseService):
    """Service for uploading documents (e.g. KYC images) to Interlace.

    Files are sent as a multipart form with one ``files`` part per file and
    an ``accountId`` field. The returned payload is passed through as-is
    since its shape depends on the upload.
    """

    def upload_file(self, path: Union[str, Path], account_id: str) -> Any:
        """Upload a single file from disk.

        Args:
            path: Path to the file.
            account_id: The account the file belongs to.

        Returns:
            Any: The ``data`` field of the upload response.
        """
        return self.upload_files([path], account_id)

    def upload_files(
        self, paths: Sequence[Union[str, Path]], account_id: str
    ) -> Any:
        """Upload several files from disk in one request."""
        return self.upload(self._read_files(paths), account_id)

    def upload(self, files: Sequence[Tuple[str, FileContent]], account_id: str) -> Any:
        """Upload in-memory content given as ``(file_name, content)`` pairs."""
        response = self.request(self._upload_spec(files, account_id), ApiResponse[Any])
        return self._unwrap(response)

    async def upload_async(
        self, files: Sequence[Tuple[str, FileContent]], account_id: str
    ) -> Any:
        response = await self.request_async(
            self._upload_spec(files, account_id), ApiResponse[Any]
        )
        return self._unwrap(response)

    def _read_files(
        self, paths: Sequence[Union[str, Path]]
    ) -> List[Tuple[str, FileContent]]:
        files: List[Tuple[str, FileContent]] = []
        for path in paths:
            path = Path(path)
            files.append((path.name, path.read_bytes()))
        return files

    def _upload_spec(
        self, files: Sequence[Tuple[str, FileContent]], account_id: str
    ) -> RequestSpec:
        if not account_id:
            raise ValueError("account_id is required")
        if not files:
            raise ValueError("at least one file is required")
        return RequestSpec(
            method="POST",
            endpoint=Endpoint.api("files/upload"),
            data={"accountId": account_id},
            files=[("files", (name, content)) for name, content in files],
        )
