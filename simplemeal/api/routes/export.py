from fastapi import APIRouter, Depends, HTTPException, Response

from simplemeal.api.dependencies import get_event_bus, get_repository
from simplemeal.api.routes.exchange import plan_in_window
from simplemeal.domain.ShoppingListItem import ShoppingListItem
from simplemeal.infra.pdf_utils import generate_pdf_for_plan
from simplemeal.logic.reporting.share_text import (
    detailed_meal_plan_text, meal_plan_csv, meal_plan_text,
    shopping_list_csv, shopping_list_text, simple_shopping_list_text
)
from simplemeal.utilities.export_files import export_file_name, write_export_file

router = APIRouter()


def _shopping_items(repo):
    return repo.query(ShoppingListItem)


def _plan(renderer):
    def render(repo, bus):
        scheduled, date_range = plan_in_window(repo, bus)
        return renderer(scheduled, repo.meals_by_id(), date_range)
    return render


# document -> (file prefix, extension, media type, renderer(repo, bus))
DOCUMENTS = {
    "shopping-list.csv": ("shopping-list", "csv", "text/csv", lambda repo, bus: shopping_list_csv(_shopping_items(repo))),
    "shopping-list.txt": ("shopping-list", "txt", "text/plain", lambda repo, bus: shopping_list_text(_shopping_items(repo))),
    "shopping-list-simple.txt": ("shopping-list", "txt", "text/plain",
                                 lambda repo, bus: simple_shopping_list_text(_shopping_items(repo))),
    "meal-plan.csv": ("meal-plan", "csv", "text/csv", _plan(meal_plan_csv)),
    "meal-plan.txt": ("meal-plan", "txt", "text/plain", _plan(meal_plan_text)),
    "meal-plan-detailed.txt": ("meal-plan", "txt", "text/plain", _plan(detailed_meal_plan_text)),
    "meal-plan.pdf": ("meal-plan", "pdf", "application/pdf", _plan(generate_pdf_for_plan)),
}


def _render(document: str, repo, bus):
    entry = DOCUMENTS.get(document)
    if entry is None:
        raise HTTPException(status_code=404, detail=f'Unknown export: {document}')
    prefix, extension, media_type, renderer = entry
    return export_file_name(prefix, extension), media_type, renderer(repo, bus)


@router.get('/api/export/{document}')
def download(document: str, repo=Depends(get_repository), bus=Depends(get_event_bus)):
    file_name, media_type, content = _render(document, repo, bus)
    return Response(
        content=content,
        media_type=media_type,
        headers={"Content-Disposition": f'attachment; filename="{file_name}"'},
    )


@router.post('/api/export/{document}')
def save_to_file(document: str, repo=Depends(get_repository), bus=Depends(get_event_bus)):
    """Write the export to the temp dir for the platform share sheet."""
    file_name, _, content = _render(document, repo, bus)
    path = write_export_file(content, file_name)
    return {"file_name": file_name, "path": str(path)}
