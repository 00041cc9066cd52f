"""HTTP helpers for streaming remote files to disk."""

from __future__ import annotations

import asyncio
import logging
import time
from typing import Dict, Optional

import aiohttp
import requests
from urllib3.exceptions import ReadTimeoutError

from .. import __version__
from ..errors import DownloadTimeoutError, PathLike
from .file_utils import atomic_write

DEFAULT_TIMEOUT = 30.0
DOWNLOAD_CHUNK_SIZE = 1 << 14

DEFAULT_HEADERS: Dict[str, str] = {
    "user-agent": f"cabinet/{__version__}",
    "accept": "*/*",
}


class HttpClient:
    """Downloads files over HTTP with shared headers and an overall time limit."""

    def __init__(self, timeout: float = DEFAULT_TIMEOUT, headers: Optional[Dict[str, str]] = None) -> None:
        self.timeout = timeout
        self._headers = DEFAULT_HEADERS.copy()
        if headers:
            self._headers.update(headers)

        self._session = requests.Session()
        self._session.headers.update(self._headers)

        self._async_session: Optional[aiohttp.ClientSession] = None
        self._async_lock: Optional[asyncio.Lock] = None
        self._async_loop: Optional[asyncio.AbstractEventLoop] = None

    def download_file(self, url: str, dest_path: PathLike) -> str:
        """Streams the body of a GET on ``url`` into ``dest_path``.

        Redirects are followed. The whole transfer must finish within
        ``timeout`` seconds, otherwise :class:`DownloadTimeoutError` is raised
        and ``dest_path`` is left untouched.
        """

        deadline = time.monotonic() + self.timeout
        logging.debug("Downloading %s to %s", url, dest_path)
        try:
            with self._session.get(url, stream=True, timeout=self.timeout) as resp:
                resp.raise_for_status()
                with atomic_write(dest_path) as file_obj:
                    for chunk in resp.iter_content(chunk_size=DOWNLOAD_CHUNK_SIZE):
                        if time.monotonic() > deadline:
                            raise DownloadTimeoutError(url, self.timeout)
                        if chunk:
                            file_obj.write(chunk)
        except requests.Timeout as exc:
            logging.error("Download from %s timed out: %s", url, exc)
            raise DownloadTimeoutError(url, self.timeout) from exc
        except requests.ConnectionError as exc:
            # a stalled body surfaces as ConnectionError wrapping urllib3's ReadTimeoutError
            if exc.args and isinstance(exc.args[0], ReadTimeoutError):
                logging.error("Download from %s timed out: %s", url, exc)
                raise DownloadTimeoutError(url, self.timeout) from exc
            logging.error("Download from %s failed: %s", url, exc)
            raise
        except requests.RequestException as exc:
            logging.error("Download from %s failed: %s", url, exc)
            raise
        logging.debug("Saved %s", dest_path)
        return str(dest_path)

    async def download_file_async(self, url: str, dest_path: PathLike) -> str:
        """Asynchronous counterpart of :meth:`download_file`."""

        session = await self._get_async_session()
        try:
            async with session.get(url) as resp:
                resp.raise_for_status()
                with atomic_write(dest_path) as file_obj:
                    async for chunk in resp.content.iter_chunked(DOWNLOAD_CHUNK_SIZE):
                        if chunk:
                            file_obj.write(chunk)
        except asyncio.TimeoutError as exc:
            logging.error("Download from %s timed out", url)
            raise DownloadTimeoutError(url, self.timeout) from exc
        except aiohttp.ClientError as exc:
            logging.error("Download from %s failed: %s", url, exc)
            raise
        return str(dest_path)

    async def _get_async_session(self) -> aiohttp.ClientSession:
        current_loop = asyncio.get_running_loop()
        if self._async_session:
            if (
                self._async_session.closed
                or not self._async_loop
                or self._async_loop.is_closed()
                or self._async_loop is not current_loop
            ):
                await self._shutdown_async_session()

        if self._async_lock is None:
            self._async_lock = asyncio.Lock()

        async with self._async_lock:
            if self._async_session and not self._async_session.closed:
                return self._async_session
            self._async_session = aiohttp.ClientSession(
                timeout=aiohttp.ClientTimeout(total=self.timeout),
                headers=self._headers.copy(),
            )
            self._async_loop = current_loop
        return self._async_session

    async def _shutdown_async_session(self) -> None:
        if self._async_session and not self._async_session.closed:
            await self._async_session.close()
        self._async_session = None
        self._async_loop = None
        self._async_lock = None

    async def aclose(self) -> None:
        await self._shutdown_async_session()

    def close(self) -> None:
        self._session.close()

        if self._async_session and not self._async_session.closed:
            if self._async_loop and not self._async_loop.is_closed() and not self._async_loop.is_running():
                self._async_loop.run_until_complete(self._async_session.close())
            else:
                logging.warning("Async HTTP session left open; call aclose() from its event loop")
        self._async_session = None
        self._async_loop = None

    def __enter__(self) -> "HttpClient":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()


def download_file(url: str, dest_path: PathLike, timeout: float = DEFAULT_TIMEOUT) -> str:
    """Downloads ``url`` to ``dest_path``, which must include the file name."""

    with HttpClient(timeout=timeout) as client:
        return client.download_file(url, dest_path)
