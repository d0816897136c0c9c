"""One-shot messages that survive a redirect.

Handlers return a Redirect outcome carrying an optional Flash. The flash
travels in a short-lived cookie and is consumed by the next rendered page.
"""
import json
import logging
from dataclasses import dataclass
from typing import Optional
from urllib.parse import quote, unquote

from fastapi import Request
from fastapi.responses import RedirectResponse, Response

logger = logging.getLogger(__name__)

FLASH_COOKIE = "flash"
FLASH_MAX_AGE = 60  # seconds

CATEGORIES = ("success", "info", "error")


@dataclass
class Flash:
    """A message for the next page: category is success, info or error."""
    category: str
    text: str

    def encode(self) -> str:
        return quote(json.dumps({"category": self.category, "text": self.text}), safe="")

    @classmethod
    def decode(cls, raw: str) -> Optional["Flash"]:
        try:
            data = json.loads(unquote(raw))
            flash = cls(category=str(data["category"]), text=str(data["text"]))
        except (ValueError, KeyError, TypeError):
            logger.warning("Ignoring malformed flash cookie")
            return None
        if flash.category not in CATEGORIES:
            return None
        return flash


@dataclass
class Redirect:
    """Redirect target plus the message to show there."""
    target: str
    flash: Optional[Flash] = None

    def to_response(self) -> RedirectResponse:
        response = RedirectResponse(self.target, status_code=302)
        if self.flash:
            response.set_cookie(
                FLASH_COOKIE,
                self.flash.encode(),
                max_age=FLASH_MAX_AGE,
                httponly=True,
                samesite="lax",
            )
        return response


def pop_flash(request: Request) -> Optional[Flash]:
    """Read the pending flash, if any. Pair with clear_flash on the response."""
    raw = request.cookies.get(FLASH_COOKIE)
    if not raw:
        return None
    return Flash.decode(raw)


def clear_flash(request: Request, response: Response) -> Response:
    if FLASH_COOKIE in request.cookies:
        response.delete_cookie(FLASH_COOKIE, httponly=True, samesite="lax")
    return response
