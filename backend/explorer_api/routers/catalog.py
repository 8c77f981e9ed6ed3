"""Catalog endpoints returning the derived explorer views."""
from fastapi import APIRouter, Depends

from ..dependencies import get_session
from ..schemas import CategoryListModel, EntryListModel, StatsModel
from ..services.session import ExplorerSession

router = APIRouter(tags=["catalog"])


@router.get("/entries", response_model=EntryListModel)
def list_entries(session: ExplorerSession = Depends(get_session)) -> EntryListModel:
    """Return the entries matching the current criteria in catalog order."""

    def _build(controller) -> EntryListModel:
        views = controller.get_entry_views()
        return EntryListModel(
            items=views,
            total=len(views),
            empty=not views,
            criteria=controller.criteria,
        )

    return session.run(_build)


@router.get("/categories", response_model=CategoryListModel)
def list_categories(session: ExplorerSession = Depends(get_session)) -> CategoryListModel:
    """Return category counts with 'All' first."""

    return CategoryListModel(items=session.run(lambda controller: controller.get_category_summary()))


@router.get("/stats", response_model=StatsModel)
def read_stats(session: ExplorerSession = Depends(get_session)) -> StatsModel:
    """Return total, bookmark and visible counts."""

    stats = session.run(lambda controller: controller.get_stats())
    return StatsModel.model_validate(stats.model_dump())
