"""Url pages: add, list, show and check."""
import logging

from fastapi import APIRouter, Depends, Form, HTTPException, Request
from fastapi.responses import HTMLResponse
from pydantic import ValidationError

from ..container import Services, get_services
from ..errors import ConstraintViolationError
from ..flash import Flash, Redirect
from ..models import Url
from ..schemas.url import (
    UrlCreate,
    UrlCheckResponse,
    UrlDetail,
    UrlWithLatestCheck,
    first_error_message,
)
from ..templating import render

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/urls", tags=["urls"])


# Largest value an INTEGER primary key column holds
MAX_URL_ID = 2**31 - 1


async def _get_url_or_404(services: Services, url_id: str) -> Url:
    """Resolve a path id; anything that cannot be a stored id is not found."""
    if not (url_id.isascii() and url_id.isdigit()) or not 1 <= int(url_id) <= MAX_URL_ID:
        raise HTTPException(status_code=404, detail="Url not found")
    url = await services.urls.find_by_id(int(url_id))
    if not url:
        raise HTTPException(status_code=404, detail="Url not found")
    return url


@router.post("")
async def add_url(url: str = Form(""), services: Services = Depends(get_services)):
    """Validate and register a url."""
    try:
        form = UrlCreate(name=url)
    except ValidationError as e:
        return Redirect("/", Flash("error", first_error_message(e))).to_response()

    already_exists = Redirect("/urls", Flash("info", "Page already exists"))

    if await services.urls.find_by_name(form.name):
        return already_exists.to_response()

    try:
        await services.urls.create(form.name)
    except ConstraintViolationError:
        # Lost a race with a concurrent submission of the same name
        logger.warning(f"Url {form.name} was created concurrently")
        return already_exists.to_response()

    return Redirect("/urls", Flash("success", "Page successfully added")).to_response()


@router.get("", response_class=HTMLResponse)
async def list_urls(request: Request, services: Services = Depends(get_services)):
    """List all urls with their latest check, newest first."""
    rows = await services.urls.list_all_with_latest_check()

    urls = [
        UrlWithLatestCheck(
            id=url.id,
            name=url.name,
            created_at=url.created_at,
            latest_check=UrlCheckResponse.model_validate(check) if check else None,
        )
        for url, check in rows
    ]
    return render(request, "urls/index.html", {"urls": urls})


@router.get("/{url_id}", response_class=HTMLResponse)
async def show_url(url_id: str, request: Request, services: Services = Depends(get_services)):
    """Show a url and its check history."""
    url = await _get_url_or_404(services, url_id)
    checks = await services.checks.list_for_url(url.id)

    detail = UrlDetail(
        id=url.id,
        name=url.name,
        created_at=url.created_at,
        checks=[UrlCheckResponse.model_validate(c) for c in checks],
    )
    return render(request, "urls/show.html", {"url": detail})


@router.post("/{url_id}/checks")
async def check_url(url_id: str, services: Services = Depends(get_services)):
    """Probe a url now and record the status code."""
    url = await _get_url_or_404(services, url_id)

    result = await services.checker.check(url.name)

    if result.ok:
        await services.checks.create(url.id, result.status_code)
        flash = Flash("success", "Page successfully checked")
    else:
        logger.warning(f"Check of url {url.id} failed: {result.error}")
        if services.record_failed_checks:
            await services.checks.create(url.id)
        flash = Flash("error", "An error occurred during the check")

    return Redirect(f"/urls/{url.id}", flash).to_response()
