from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.concurrency import run_in_threadpool

from ..models import RequestContext
from ..pipeline.deps import CREATE, MODIFY, REMOVE, RETRIEVE
from ..schemas import ContentResponse
from ..services.file_store import create_file, modify_file, read_file, remove_file
from ..services.statistics import compute_directory_statistics

router = APIRouter(tags=["store"])

DONE = "Done"

@router.get("/{path:path}")
async def retrieve(ctx: RequestContext = Depends(RETRIEVE)):
    """
    Directory-shaped paths ("", ".../") return statistics for the directory;
    anything else returns the file content.
    """
    loc = ctx.location
    if loc.is_directory_shaped:
        return await run_in_threadpool(compute_directory_statistics, loc.abs_path)
    text = await run_in_threadpool(read_file, loc.abs_path)
    return ContentResponse(content=text)

@router.post("/{path:path}")
async def create(ctx: RequestContext = Depends(CREATE)):
    await run_in_threadpool(create_file, ctx.location.abs_path, ctx.content.text)
    return DONE

@router.put("/{path:path}")
async def modify(ctx: RequestContext = Depends(MODIFY)):
    await run_in_threadpool(modify_file, ctx.location.abs_path, ctx.content.text)
    return DONE

@router.delete("/{path:path}")
async def remove(ctx: RequestContext = Depends(REMOVE)):
    await run_in_threadpool(remove_file, ctx.location.abs_path)
    return DONE
