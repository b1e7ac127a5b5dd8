from datetime import date
from fastapi import APIRouter, HTTPException
from pydantic import BaseModel
from typing import Any, Dict, List, Optional

from tidyname import session
from tidyname.downloads import HeaderCache, handle_download
from tidyname.rename import NamingContext, decide_filename

router = APIRouter(tags=["api"])

# shared by every request; filled by /headers as responses arrive
header_cache = HeaderCache()


class DecideBody(BaseModel):
    original_name: str
    url: str = ""
    page_title: Optional[str] = None
    mime_type: Optional[str] = None
    content_disposition: Optional[str] = None
    today: Optional[date] = None


@router.post("/decide")
def decide(body: DecideBody) -> Dict[str, Any]:
    result = decide_filename(NamingContext(
        original_name=body.original_name,
        url=body.url,
        page_title=body.page_title,
        mime_type=body.mime_type,
        content_disposition=body.content_disposition,
    ), today=body.today)
    return {"filename": result.filename, "changed": result.changed}


class HeadersBody(BaseModel):
    url: str
    headers: Dict[str, str]


@router.post("/headers")
def observe_headers(body: HeadersBody) -> Dict[str, Any]:
    header_cache.observe(body.url, body.headers)
    return {"ok": True, "mime": header_cache.get(body.url)}


class DownloadBody(BaseModel):
    filename: str
    url: str = ""
    referrer: Optional[str] = None
    mime: Optional[str] = None
    title: Optional[str] = None
    contentDisposition: Optional[str] = None


@router.post("/downloads")
def suggest_filename(body: DownloadBody) -> Dict[str, Any]:
    if not body.filename.strip():
        raise HTTPException(status_code=400, detail="missing filename")
    return handle_download(body.model_dump(), header_cache=header_cache)


class SettingsBody(BaseModel):
    enabled: bool


@router.get("/settings")
def get_settings() -> Dict[str, Any]:
    return {"enabled": session.is_enabled()}


@router.put("/settings")
def put_settings(body: SettingsBody) -> Dict[str, Any]:
    session.set_enabled(body.enabled)
    return {"enabled": session.is_enabled()}


@router.get("/history")
def history() -> List[Dict[str, Any]]:
    return session.load_history()


@router.delete("/history")
def clear_history() -> Dict[str, Any]:
    session.clear_history()
    return {"ok": True}
