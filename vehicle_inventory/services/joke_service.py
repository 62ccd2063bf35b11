"""
Joke Service - Official Joke API Integration

Fetches one random joke per call from the Official Joke API and turns it
into the display string attached to vehicles on read.

API Documentation: https://github.com/15Dkatz/official_joke_api
"""
import logging
from typing import Dict, Optional

import httpx

from vehicle_inventory.core.config import settings
from vehicle_inventory.core.exceptions import EnrichmentUnavailable

logger = logging.getLogger(__name__)


class JokeService:
    """Single-attempt client for the random joke endpoint"""
    
    def __init__(
        self,
        url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        self.url = url or settings.JOKE_API_URL
        self.timeout = timeout if timeout is not None else settings.JOKE_API_TIMEOUT
        self.transport = transport
    
    def open_client(self) -> httpx.AsyncClient:
        """Client that several fetch_joke calls can share; the caller closes it."""
        return httpx.AsyncClient(timeout=self.timeout, transport=self.transport)
    
    async def fetch_joke(self, client: Optional[httpx.AsyncClient] = None) -> str:
        """
        Fetch a random joke.
        
        Args:
            client: Shared client from open_client; a private one is used if omitted
        
        Returns:
            "<setup> - <punchline>"
            
        Raises:
            EnrichmentUnavailable: On network error, timeout, non-2xx
                response or a body without setup/punchline text
        """
        try:
            if client is None:
                async with self.open_client() as own_client:
                    response = await own_client.get(self.url)
            else:
                response = await client.get(self.url)
            response.raise_for_status()
            data = response.json()
        except httpx.TimeoutException as e:
            logger.error(f"Timeout calling joke API after {self.timeout}s")
            raise EnrichmentUnavailable("Joke service timed out") from e
        except httpx.HTTPError as e:
            logger.error(f"Joke API request failed: {e}")
            raise EnrichmentUnavailable("Joke service unavailable") from e
        except ValueError as e:
            logger.error(f"Joke API returned invalid JSON: {e}")
            raise EnrichmentUnavailable("Joke service returned an invalid body") from e
        
        return self._parse_joke(data)
    
    def _parse_joke(self, data: Dict) -> str:
        """
        Parse joke API response.
        
        The API returns data in format:
        {"type": "general", "setup": "...", "punchline": "...", "id": 1}
        """
        if not isinstance(data, dict):
            raise EnrichmentUnavailable("Joke service returned an invalid body")
        
        setup = data.get("setup")
        punchline = data.get("punchline")
        if not isinstance(setup, str) or not isinstance(punchline, str):
            raise EnrichmentUnavailable("Joke service response is missing setup or punchline")
        
        return f"{setup} - {punchline}"


# Singleton instance
joke_service = JokeService()
