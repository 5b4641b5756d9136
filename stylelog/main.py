import logging
import time
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from stylelog.core.config import settings
from stylelog.routers import analysis, chat, health, outfit_photos, outfits, recommendations, wardrobe
from stylelog.routers import auth as auth_router
from stylelog.routers import tools as tools_router
from stylelog.store import RecordNotFoundError

app = FastAPI(title=settings.APP_NAME)

# CORS
origins = settings.cors_origin_list
app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=origins != ["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

prefix = settings.API_PREFIX
app.include_router(health.router, prefix=prefix)
app.include_router(auth_router.router, prefix=prefix)
app.include_router(outfits.router, prefix=prefix)
app.include_router(outfit_photos.router, prefix=prefix)
app.include_router(wardrobe.router, prefix=prefix)
app.include_router(recommendations.router, prefix=prefix)
app.include_router(analysis.router, prefix=prefix)
app.include_router(chat.router, prefix=prefix)
app.include_router(tools_router.router, prefix=prefix)

logger = logging.getLogger("stylelog.requests")


@app.exception_handler(RecordNotFoundError)
async def record_not_found(request: Request, exc: RecordNotFoundError):
    return JSONResponse(status_code=404, content={"detail": exc.detail})


@app.middleware("http")
async def log_requests(request: Request, call_next):
    start = time.time()
    response = await call_next(request)
    duration_ms = (time.time() - start) * 1000
    logger.info("%s %s %s %.1fms", request.method, request.url.path, response.status_code, duration_ms)
    return response

@app.get("/")
async def root():
    return {"name": settings.APP_NAME, "env": settings.APP_ENV}
