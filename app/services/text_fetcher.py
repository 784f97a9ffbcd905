import logging
from typing import Awaitable, Callable

import httpx

from app.errors import FetchError
from app.result import Err, Ok, Result

logger = logging.getLogger(__name__)

FetchText = Callable[[str], Awaitable[Result[str, FetchError]]]


class HttpTextFetcher:
    """
    Fetch text resources (`/{slug}.md`) from the static content server.
    Only a 200 counts as success; there is no retry.
    """

    def __init__(self, client: httpx.AsyncClient, base_url: str):
        self.client = client
        self.base_url = base_url.rstrip("/")

    async def __call__(self, path: str) -> Result[str, FetchError]:
        url = f"{self.base_url}{path}"
        try:
            response = await self.client.get(url)
        except httpx.HTTPError as e:
            logger.error(f"HTTP error fetching {url}: {e}")
            return Err(FetchError(path=path, detail=str(e)))

        if response.status_code != 200:
            return Err(
                FetchError(
                    path=path,
                    status_code=response.status_code,
                    detail=f"Unexpected status {response.status_code}",
                )
            )

        response.encoding = "utf-8"
        return Ok(response.text)
