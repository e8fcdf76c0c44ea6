"""
Cat routes.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Request, HTTPException, Query
from fastapi.responses import JSONResponse

from models import Cat, CatId, DataTable
from services.exceptions import NotFoundError, PersistenceError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/cats")

TOP_CATS = 3


def _persistence_failure(e: PersistenceError) -> HTTPException:
    logger.error(f"Store failure: {e}")
    return HTTPException(status_code=500, detail="Cat store is unavailable")


@router.get(
    "",
    response_model=List[Cat],
    summary="Get All Cats",
    description="Retrieves all cats from the database that are safe for work.",
)
async def list_cats(request: Request):
    """List all safe cats including images."""
    try:
        database_service = request.app.state.database_service
        return await database_service.find_all(only_safe=True)
    except PersistenceError as e:
        raise _persistence_failure(e)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error in list_cats: {e}")
        raise HTTPException(status_code=500, detail=f"Failed to list cats: {str(e)}")


@router.get(
    "/ids",
    response_model=List[CatId],
    summary="Get All Cat Ids",
    description="Retrieves all cat ids from the database, without images.",
)
async def list_cat_ids(request: Request):
    """Just return all cat ids."""
    try:
        database_service = request.app.state.database_service
        return [CatId(id=cat_id) for cat_id in await database_service.find_ids()]
    except PersistenceError as e:
        raise _persistence_failure(e)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error in list_cat_ids: {e}")
        raise HTTPException(status_code=500, detail=f"Failed to list cat ids: {str(e)}")


@router.get(
    "/topcats",
    response_model=List[Cat],
    summary="Get Top Cats",
    description="Retrieves the top 3 cats sorted by count descending.",
)
async def top_cats(request: Request):
    """Top cats by vote count."""
    try:
        database_service = request.app.state.database_service
        return await database_service.find_all(order_by_count=True, page_size=TOP_CATS)
    except PersistenceError as e:
        raise _persistence_failure(e)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error in top_cats: {e}")
        raise HTTPException(status_code=500, detail=f"Failed to get top cats: {str(e)}")


@router.get(
    "/count",
    response_model=int,
    summary="Count All Cats",
    description="Returns a count of all cats in the database.",
)
async def count_cats(request: Request):
    """Count all cats."""
    try:
        database_service = request.app.state.database_service
        return await database_service.count()
    except PersistenceError as e:
        raise _persistence_failure(e)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error in count_cats: {e}")
        raise HTTPException(status_code=500, detail=f"Failed to count cats: {str(e)}")


@router.get(
    "/datatable",
    response_model=DataTable,
    summary="Datatable Of Cats",
    description="Returns a page of cats for https://www.datatables.net/. Handy for viewing all images without the UI.",
)
async def datatable(
    request: Request,
    draw: int = Query(1),
    start: int = Query(0, ge=0),
    length: int = Query(10, gt=0),
    search_value: Optional[str] = Query(None, alias="search[value]"),
):
    """Page and optionally search cats by id."""
    try:
        database_service = request.app.state.database_service
        search = search_value.strip() if search_value else None

        page_number = start // length
        cats = await database_service.find_all(
            page_index=page_number, page_size=length, search=search
        )

        return DataTable(
            draw=draw,
            data=cats,
            records_filtered=await database_service.count(search=search),
            records_total=await database_service.count(),
        )
    except PersistenceError as e:
        raise _persistence_failure(e)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error in datatable: {e}")
        raise HTTPException(status_code=500, detail=f"Failed to build cat datatable: {str(e)}")


@router.get(
    "/loadlitter",
    summary="Preload Cats",
    description="Adds the sample litter of cats to the database if it is empty.",
)
async def load_litter(request: Request):
    """Load the sample cats into an empty store."""
    try:
        seed_service = request.app.state.seed_service
        loaded = await seed_service.load_litter(once=False)
        return {"loaded": loaded}
    except PersistenceError as e:
        raise _persistence_failure(e)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error in load_litter: {e}")
        raise HTTPException(status_code=500, detail=f"Failed to load litter: {str(e)}")


@router.get(
    "/{cat_id}",
    response_model=Cat,
    summary="Get Cat By Id",
    description="Retrieves a cat by id from the database.",
    responses={404: {"description": "Cat not found"}},
)
async def get_cat(request: Request, cat_id: str):
    """Find a cat by id."""
    try:
        database_service = request.app.state.database_service
        cat = await database_service.find_by_id(cat_id)
        if cat is None:
            raise NotFoundError(cat_id)
        return cat
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except PersistenceError as e:
        raise _persistence_failure(e)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error in get_cat: {e}")
        raise HTTPException(status_code=500, detail=f"Failed to get cat: {str(e)}")


@router.post(
    "",
    status_code=201,
    summary="Create Or Update Cat",
    description="Creates a cat, or updates it when an id is supplied. The image is resized and checked for NSFW content.",
    responses={
        201: {"description": "Cat created or updated OK"},
        400: {
            "description": "Bad image data, or image classified as not safe for work",
            "content": {
                "application/json": {
                    "examples": {
                        "bad_image": {"value": {"reason": "bad_image", "detail": "Cannot decode image"}},
                        "unsafe": {"value": {"reason": "unsafe", "id": "5f1b0c8e2a6d4e7fa1c9b3d2e4f60718"}},
                    }
                }
            },
        },
    },
)
async def create_cat(request: Request, cat: Cat):
    """Run a cat through the upload pipeline."""
    try:
        upload_pipeline = request.app.state.upload_pipeline
        result = await upload_pipeline.submit(cat)
    except PersistenceError as e:
        raise _persistence_failure(e)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error in create_cat: {e}")
        raise HTTPException(status_code=500, detail=f"Failed to create cat: {str(e)}")

    if not result.accepted:
        return JSONResponse(
            status_code=400,
            content={
                "reason": result.reason.value,
                "id": result.cat_id,
                "detail": result.detail,
            },
        )
    return result.cat_id


@router.delete(
    "/kittykiller",
    response_model=int,
    summary="⚡ Remove All Cats ⚡",
    description="Deletes all cats from the database.",
)
async def delete_all_cats(request: Request):
    """Delete all cats."""
    try:
        database_service = request.app.state.database_service
        deleted = await database_service.delete_all()
        logger.info(f"🗑️ Deleted {deleted} cats")
        return deleted
    except PersistenceError as e:
        raise _persistence_failure(e)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error in delete_all_cats: {e}")
        raise HTTPException(status_code=500, detail=f"Failed to delete cats: {str(e)}")


@router.delete(
    "/{cat_id}",
    response_model=bool,
    summary="Delete Cat By Id",
    description="Deletes a cat by id.",
    responses={404: {"description": "Cat not found"}},
)
async def delete_cat(request: Request, cat_id: str):
    """Delete a cat."""
    try:
        database_service = request.app.state.database_service
        deleted = await database_service.delete_by_id(cat_id)
        if not deleted:
            raise NotFoundError(cat_id)
        logger.info(f"🗑️ Deleted cat: {cat_id}")
        return True
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except PersistenceError as e:
        raise _persistence_failure(e)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error in delete_cat: {e}")
        raise HTTPException(status_code=500, detail=f"Failed to delete cat: {str(e)}")
