"""FastAPI dependency for the translation lookup service."""

from typing import Annotated

from fastapi import Depends, HTTPException, Request

from infrastructure.i18n.service import I18nService


def get_i18n_service(request: Request) -> I18nService:
    """Return the lookup service built by the application lifespan.

    Raises:
        HTTPException: 503 if the service has not been initialized.
    """
    service = getattr(request.app.state, "i18n_service", None)
    if service is None:
        raise HTTPException(status_code=503, detail="Translations not loaded")
    return service


I18nServiceDep = Annotated[I18nService, Depends(get_i18n_service)]
