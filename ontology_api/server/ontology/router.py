from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Response

from ontology_api.obo import ROOT_CLASSES, CyclicHierarchyError, query_subclass_hierarchy, scan_root_classes
from ontology_api.serialization import dumps
from ontology_api.server.models import RootClassesResponse, SubclassesResponse
from ontology_api.server.settings import Settings, get_settings
from .source import OboFileSource, OboSourceError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/ontology", tags=["ontology"])


def get_obo_source(settings: Settings = Depends(get_settings)) -> OboFileSource:
    return OboFileSource(path=settings.obo_path)


def _read(source: OboFileSource, action: str) -> str:
    try:
        return source.read_text()
    except OboSourceError as exc:
        raise HTTPException(status_code=500, detail=f"Failed to {action}: {exc}") from exc


@router.get("/load", response_model=RootClassesResponse)
def load_ontology(source: OboFileSource = Depends(get_obo_source)) -> RootClassesResponse:
    content = _read(source, "load ontology")
    classes = scan_root_classes(content)
    logger.info("Loaded %s; root classes referenced: %s", source.path, classes)
    return RootClassesResponse(classes=classes)


@router.get(
    "/classes/{class_name}/subclasses",
    response_class=Response,
    responses={200: {"model": SubclassesResponse, "content": {"application/json": {}}}},
)
def get_subclasses(
    class_name: str,
    source: OboFileSource = Depends(get_obo_source),
) -> Response:
    content = _read(source, "fetch subclasses")
    try:
        result = query_subclass_hierarchy(content, class_name)
    except CyclicHierarchyError as exc:
        logger.warning("Hierarchy for %s is cyclic: %s", class_name, exc.cycle)
        raise HTTPException(status_code=422, detail=str(exc)) from exc

    if result is None:
        raise HTTPException(
            status_code=400,
            detail=f"Invalid class. Must be one of: {', '.join(ROOT_CLASSES)}",
        )
    if result.discarded_edges:
        logger.info(
            "Hierarchy for %s dropped %d non-primary parent edges",
            class_name,
            len(result.discarded_edges),
        )

    # Trees can nest deeper than pydantic and jsonable_encoder can recurse.
    payload = {
        "success": True,
        "class": result.class_name,
        **result.to_dict(),
        "diagnostics": result.diagnostics(),
    }
    return Response(content=dumps(payload, ensure_ascii=False), media_type="application/json")


__all__ = ["router", "get_obo_source"]
