import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse, RedirectResponse

from shortlink_app.dependencies import get_logger, get_redirect_service
from shortlink_app.errors import NotFoundError, StorageError
from shortlink_app.schemas.url import error
from shortlink_app.services.redirect_service import RedirectService

router = APIRouter(tags=["redirect"])


@router.get("/{alias}")
async def redirect_to_url(
    alias: str,
    redirect_service: RedirectService = Depends(get_redirect_service),
    logger: logging.Logger = Depends(get_logger),
):
    """Redirect to the URL stored under alias"""
    try:
        url = await redirect_service.resolve(alias)
    except NotFoundError:
        logger.info("url not found", extra={"alias": alias})
        return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content=error("not found"))
    except StorageError:
        logger.error("failed to get url", extra={"alias": alias}, exc_info=True)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=error("internal error"),
        )

    return RedirectResponse(url=url, status_code=status.HTTP_302_FOUND)
