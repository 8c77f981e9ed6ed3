"""Bookmark endpoints."""
from fastapi import APIRouter, Depends

from backend.explorer_core.schemas import ToggleResult

from ..dependencies import get_session
from ..schemas import BookmarkListModel
from ..services.session import ExplorerSession

router = APIRouter(prefix="/bookmarks", tags=["bookmarks"])


@router.get("", response_model=BookmarkListModel)
def list_bookmarks(session: ExplorerSession = Depends(get_session)) -> BookmarkListModel:
    """Return bookmarked ids, including ids missing from the catalog."""

    ids = session.run(lambda controller: controller.bookmarks.ids)
    return BookmarkListModel(items=ids, total=len(ids))


@router.post("/{entry_id:path}/toggle", response_model=ToggleResult)
def toggle_bookmark(entry_id: str, session: ExplorerSession = Depends(get_session)) -> ToggleResult:
    """Flip the bookmark for an entry; storage failures never undo the toggle."""

    return session.run(lambda controller: controller.toggle_bookmark(entry_id))
