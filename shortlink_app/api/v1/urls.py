import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from shortlink_app.dependencies import get_logger, get_save_service
from shortlink_app.errors import (
    AliasExistsError,
    AliasSpaceExhaustedError,
    StorageError,
    ValidationError,
)
from shortlink_app.schemas.url import SaveRequest, SaveResponse, error, ok
from shortlink_app.services.save_service import SaveService

router = APIRouter(prefix="/url", tags=["urls"])

MSG_URL_EXISTS = "url already exists"
MSG_FAILED_TO_ADD = "failed to add url"


@router.post("", response_model=SaveResponse, response_model_exclude_none=True)
@router.post("/", response_model=SaveResponse, response_model_exclude_none=True,
             include_in_schema=False)
async def save_url(
    url_data: SaveRequest,
    save_service: SaveService = Depends(get_save_service),
    logger: logging.Logger = Depends(get_logger),
):
    """Create a short alias for a URL"""
    try:
        alias = await save_service.save(url_data.url, url_data.alias)
    except ValidationError as e:
        logger.info("invalid request", extra={"error": str(e)})
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=error(str(e)))
    except AliasExistsError as e:
        logger.info("url already exists", extra={"alias": e.alias})
        return JSONResponse(status_code=status.HTTP_200_OK, content=error(MSG_URL_EXISTS))
    except AliasSpaceExhaustedError:
        logger.error("failed to generate alias", exc_info=True)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=error(MSG_URL_EXISTS),
        )
    except StorageError:
        logger.error("failed to add url", exc_info=True)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=error(MSG_FAILED_TO_ADD),
        )

    return ok(alias=alias)
