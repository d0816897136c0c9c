"""Checker service - probes a url with a single HTTP GET."""
import logging
from dataclasses import dataclass
from typing import Optional

import httpx

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10.0


@dataclass
class ProbeResult:
    """Result of a liveness probe: a status code, or the reason there is none."""
    status_code: Optional[int] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status_code is not None


class LivenessChecker:
    """Issues one GET per check. No retries."""

    def __init__(self, timeout: float = DEFAULT_TIMEOUT, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.timeout = timeout
        self.transport = transport

    async def check(self, url: str) -> ProbeResult:
        """Fetch the url and report its HTTP status code.

        Any received response counts, 4xx and 5xx included. Failures to get
        a response are returned as an error result, not raised.
        """
        try:
            # Disable SSL verification to handle self-signed certificates
            async with httpx.AsyncClient(
                timeout=self.timeout,
                follow_redirects=True,
                verify=False,
                transport=self.transport,
            ) as client:
                response = await client.get(url)
        except httpx.TimeoutException:
            logger.warning(f"Check of {url} timed out after {self.timeout}s")
            return ProbeResult(error="Request timeout")
        except httpx.ConnectError as e:
            logger.warning(f"Check of {url} failed to connect: {e}")
            return ProbeResult(error=f"Connection error: {e}")
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.warning(f"Check of {url} failed: {e}")
            return ProbeResult(error=str(e) or e.__class__.__name__)

        logger.info(f"Check of {url} returned HTTP {response.status_code}")
        return ProbeResult(status_code=response.status_code)
