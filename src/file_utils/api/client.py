"""
Remote File Client Module

HTTP client for downloading the content of remote files, with
timeout handling and typed network errors.
"""

import logging
from typing import Optional

import httpx

from ..config import config
from ..exceptions import NetworkError


logger = logging.getLogger(__name__)


class RemoteFileClient:
    """
    HTTP client returning the full text of a remote file.
    
    A failed fetch never yields partial content: connection errors,
    HTTP error statuses and timeouts all raise NetworkError.
    """
    
    def __init__(
        self,
        timeout: Optional[float] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        """
        Initialize the client.
        
        Args:
            timeout: Seconds before a fetch is abandoned (uses config default if None).
            transport: Optional httpx transport, used to route requests elsewhere.
        """
        self.timeout = timeout if timeout is not None else config.network.timeout_seconds
        self.transport = transport
        logger.debug(f"RemoteFileClient initialized (timeout: {self.timeout}s)")
    
    def fetch_text(self, url: str) -> str:
        """
        Fetch the content of a remote file as text.
        
        Args:
            url: URL of the file.
        
        Returns:
            The decoded response body.
        
        Raises:
            NetworkError: If the file could not be fetched.
        """
        logger.info(f"Fetching {url}")
        
        try:
            with httpx.Client(
                timeout=self.timeout,
                transport=self.transport,
                follow_redirects=config.network.follow_redirects,
                headers={"User-Agent": config.network.user_agent},
            ) as client:
                response = client.get(url)
                response.raise_for_status()
                text = response.text
        
        except httpx.TimeoutException as e:
            logger.error(f"Timed out after {self.timeout}s fetching {url}")
            raise NetworkError(
                f"Deadline exceeded while fetching {url}: {e}", url=url
            ) from e
        
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            logger.error(f"HTTP {status} fetching {url}")
            raise NetworkError(
                f"Server returned HTTP {status} for {url}",
                url=url,
                status_code=status,
            ) from e
        
        except httpx.HTTPError as e:
            logger.error(f"HTTP error fetching {url}: {e}")
            raise NetworkError(f"Could not fetch {url}: {e}", url=url) from e
        
        logger.info(f"Fetched {len(text)} characters from {url}")
        return text
