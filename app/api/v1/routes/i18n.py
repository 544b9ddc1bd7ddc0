from typing import Optional

from fastapi import APIRouter, HTTPException, Query

from api.dependencies.i18n import I18nServiceDep

router = APIRouter(prefix="/i18n", tags=["Translations"])


@router.get("/roots")
def list_roots(service: I18nServiceDep):
    """List the workspace roots in registration order."""
    return {"roots": service.get_workspace_root_ids()}


@router.get("/roots/{root_id}/default-locale")
def get_default_locale(root_id: str, service: I18nServiceDep):
    """Get the default locale of a workspace root."""
    if root_id not in service.get_workspace_root_ids():
        raise HTTPException(status_code=404, detail=f"Unknown root: {root_id}")
    return {"root_id": root_id, "locale": service.get_default_locale_for_root(root_id)}


@router.get("/roots/{root_id}/translations/{key}")
def resolve_translation(
    root_id: str,
    key: str,
    service: I18nServiceDep,
    locale: Optional[str] = None,
):
    """Resolve a dotted key. Incomplete keys return the candidate lines."""
    if root_id not in service.get_workspace_root_ids():
        raise HTTPException(status_code=404, detail=f"Unknown root: {root_id}")

    effective_locale = locale or service.get_default_locale_for_root(root_id)
    value = service.resolve(key, effective_locale, root_id)
    if value is None:
        raise HTTPException(status_code=404, detail=f"Translation not found: {key}")
    return {
        "root_id": root_id,
        "locale": effective_locale,
        "key": key,
        "value": value,
    }


@router.get("/keys")
def list_keys(service: I18nServiceDep, prefix: str = Query(default="")):
    """List fully-qualified keys starting with a prefix (for completion)."""
    return {"keys": service.get_keys_starting_with(prefix)}
