"""Endpoints changing the category, search and bookmarks-only criteria."""
from fastapi import APIRouter, Depends

from backend.explorer_core.schemas import FilterCriteria

from ..dependencies import get_session
from ..schemas import CriteriaUpdate, SearchInputAccepted, SearchInputRequest
from ..services.session import ExplorerSession

router = APIRouter(prefix="/criteria", tags=["criteria"])


@router.get("", response_model=FilterCriteria)
def read_criteria(session: ExplorerSession = Depends(get_session)) -> FilterCriteria:
    """Return the current filter criteria."""

    return session.criteria()


@router.put("", response_model=FilterCriteria)
def update_criteria(
    update: CriteriaUpdate,
    session: ExplorerSession = Depends(get_session),
) -> FilterCriteria:
    """Apply the supplied criteria fields immediately."""

    def _apply(controller) -> FilterCriteria:
        if update.category is not None:
            controller.set_category(update.category)
        if update.query is not None:
            controller.set_search_query(update.query)
        if update.bookmarks_only is not None:
            controller.set_bookmarks_only(update.bookmarks_only)
        return controller.criteria

    if update.query is not None:
        session.search_input.cancel()
    return session.run(_apply)


@router.delete("/search", response_model=FilterCriteria)
def clear_search(session: ExplorerSession = Depends(get_session)) -> FilterCriteria:
    """Reset the search text, discarding any pending search input."""

    session.search_input.cancel()
    return session.run(lambda controller: controller.clear_search())


@router.post("/search-input", response_model=SearchInputAccepted, status_code=202)
def submit_search_input(
    request: SearchInputRequest,
    session: ExplorerSession = Depends(get_session),
) -> SearchInputAccepted:
    """Schedule a search update that only applies once typing pauses."""

    session.submit_search_input(request.text)
    return SearchInputAccepted(
        pending=session.search_input.pending,
        delay_ms=round(session.search_input.delay * 1000),
    )
