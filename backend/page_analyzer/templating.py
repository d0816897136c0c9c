"""Jinja2 page rendering."""
import os
from typing import Optional

from fastapi import Request
from fastapi.templating import Jinja2Templates

from .flash import clear_flash, pop_flash

TEMPLATES_DIR = os.path.join(os.path.dirname(__file__), "templates")

templates = Jinja2Templates(directory=TEMPLATES_DIR)


def render(request: Request, name: str, context: Optional[dict] = None, status_code: int = 200):
    """Render a page, showing and then discarding any pending flash."""
    context = dict(context or {})
    context["flash"] = pop_flash(request)
    response = templates.TemplateResponse(request, name, context, status_code=status_code)
    return clear_flash(request, response)
