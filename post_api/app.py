import logging
from contextlib import asynccontextmanager
from typing import Annotated

from fastapi import FastAPI, Depends, Path
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response
from mangum import Mangum

from post_api.config import configure_logging, cors_origins
from post_api.db import Post, create_db_and_tables
from post_api.errors import render, request_validation_handler
from post_api.schemas import PostRequest, PostResponse
from post_api.service import PostService, get_post_service

logger = logging.getLogger(__name__)

# ids are 32-bit signed integers
PostId = Annotated[int, Path(ge=-2**31, le=2**31 - 1)]


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging()
    await create_db_and_tables()
    logger.info('Post API started')
    yield

app = FastAPI(title='Post API', lifespan=lifespan)
handler = Mangum(app)

app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_exception_handler(RequestValidationError, request_validation_handler)


def post_json(post: Post) -> JSONResponse:
    return JSONResponse(content=PostResponse.from_entity(post).model_dump(mode='json'))


def empty_ok(_) -> Response:
    return Response(status_code=200)


@app.get('/post/{post_id}')
async def get_post(post_id: PostId, service: PostService = Depends(get_post_service)):
    return render(await service.get(post_id), post_json)

@app.post('/post')
async def create_post(request: PostRequest, service: PostService = Depends(get_post_service)):
    return render(await service.create(request), post_json)

@app.put('/post/{post_id}')
async def update_post(
    post_id: PostId,
    request: PostRequest,
    service: PostService = Depends(get_post_service)
):
    return render(await service.update(post_id, request), post_json)

@app.delete('/post/{post_id}')
async def delete_post(post_id: PostId, service: PostService = Depends(get_post_service)):
    return render(await service.delete(post_id), empty_ok)
