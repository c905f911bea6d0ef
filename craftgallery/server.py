"""FastAPI server for browsing and editing the gallery."""

from pathlib import Path
from urllib.parse import urlencode

from fastapi import Depends, FastAPI, Form, HTTPException, Request
from fastapi.responses import HTMLResponse, RedirectResponse, Response
from fastapi.staticfiles import StaticFiles

from .gallery import render_page
from .models import EntryForm
from .session import GallerySession, InvalidTransition
from .storage import StorageQuotaError
from .thumbnails import render_placeholder


def get_session(request: Request) -> GallerySession:
    session = getattr(request.app.state, 'session', None)
    if session is None:
        raise HTTPException(500, "Server not configured")
    return session


def _back(query: str = "") -> RedirectResponse:
    """Redirect to the gallery page, keeping the search query."""
    url = "/" + (f"?{urlencode({'q': query})}" if query else "")
    return RedirectResponse(url, status_code=303)


def _storage_full(e: StorageQuotaError) -> HTTPException:
    return HTTPException(507, f"Local storage is full: {e}")


def create_app(session: GallerySession, media_dir: Path | None = None) -> FastAPI:
    """Create app bound to `session`, serving `media_dir` under /videos if it exists."""
    app = FastAPI(title="Craft Gallery")
    app.state.session = session

    @app.exception_handler(InvalidTransition)
    async def invalid_transition(request: Request, exc: InvalidTransition):
        return Response(str(exc), status_code=409, media_type="text/plain")

    # Pages ----------------------------------------------------------

    @app.get("/", response_class=HTMLResponse)
    async def index(q: str = "", s: GallerySession = Depends(get_session)):
        return HTMLResponse(render_page(s, q))

    @app.get("/placeholder.png")
    async def placeholder():
        return Response(render_placeholder(), media_type="image/png")

    @app.post("/entries/{index}/open")
    async def open_entry(index: int, q: str = Form(""), s: GallerySession = Depends(get_session)):
        try:
            s.open_entry(index)
        except IndexError as e:
            raise HTTPException(404, str(e)) from e
        return _back(q)

    @app.post("/close")
    async def close(q: str = Form(""), s: GallerySession = Depends(get_session)):
        s.close()
        return _back(q)

    @app.post("/add")
    async def begin_add(q: str = Form(""), s: GallerySession = Depends(get_session)):
        s.begin_add()
        return _back(q)

    @app.post("/add/submit")
    async def submit_add(
        q: str = Form(""),
        title: str = Form(""),
        thumbnail: str = Form(""),
        video_url: str = Form(""),
        video_alt_url: str = Form(""),
        tags: str = Form(""),
        description: str = Form(""),
        s: GallerySession = Depends(get_session),
    ):
        form = EntryForm(
            title=title,
            thumbnail=thumbnail,
            video_url=video_url,
            video_alt_url=video_alt_url,
            tags=tags,
            description=description,
        )
        try:
            s.submit(form)
        except StorageQuotaError as e:
            raise _storage_full(e) from e
        # A rejected form stays open with the submitted values
        return _back(q)

    @app.post("/reset")
    async def begin_reset(q: str = Form(""), s: GallerySession = Depends(get_session)):
        s.begin_reset()
        return _back(q)

    @app.post("/reset/confirm")
    async def confirm_reset(q: str = Form(""), s: GallerySession = Depends(get_session)):
        s.confirm_reset()
        return _back(q)

    # JSON API -------------------------------------------------------

    @app.get("/api/entries")
    async def list_entries(q: str = "", s: GallerySession = Depends(get_session)) -> list[dict]:
        return [e.to_storage() for e in s.visible(q)]

    @app.post("/api/entries", status_code=201)
    async def add_entry(form: EntryForm, s: GallerySession = Depends(get_session)) -> dict:
        if not form.can_save():
            raise HTTPException(400, "Title and video URL are required.")
        entry = form.to_entry()
        try:
            s.add_entry(entry)
        except StorageQuotaError as e:
            raise _storage_full(e) from e
        return entry.to_storage()

    @app.post("/api/reset")
    async def reset(s: GallerySession = Depends(get_session)) -> list[dict]:
        s.reset_all()
        return [e.to_storage() for e in s.store.current()]

    @app.get("/api/session")
    async def session_state(s: GallerySession = Depends(get_session)) -> dict:
        return {
            "mode": s.mode.value,
            "active": s.active.to_storage() if s.active else None,
            "count": len(s.store),
        }

    # Static files for relative video URLs (must be after routes)
    if media_dir is not None and media_dir.is_dir():
        app.mount("/videos", StaticFiles(directory=media_dir), name="videos")

    return app


def run_server(session: GallerySession, media_dir: Path | None = None, host: str = "127.0.0.1", port: int = 8000):
    """Run the server."""
    import uvicorn

    app = create_app(session, media_dir)

    print(f"Serving gallery at http://{host}:{port}")
    if media_dir is not None and media_dir.is_dir():
        print(f"Serving videos from {media_dir}")
    uvicorn.run(app, host=host, port=port)
