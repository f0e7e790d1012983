import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse, RedirectResponse
from starlette.middleware.cors import CORSMiddleware
from starlette.middleware.sessions import SessionMiddleware

from config import get_settings
from routes.auth import router as auth_router
from routes.avatar import router as avatar_router
from routes.home import router as home_router
from routes.posts import router as posts_router
from services.errors import InvalidInput, LoginRequired
from services.seed import load_seed

settings = get_settings()

logging.basicConfig(level=settings.log_level,
                    format="%(levelname)s: %(message)s")
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Stores live for the lifetime of the process, nothing is persisted
    users, posts = load_seed(settings.seed_file)

    app.state.users = users
    app.state.posts = posts
    logger.info("%s started with %s users and %s posts", settings.app_name, len(users), len(posts))

    yield


app = FastAPI(title=settings.app_name, lifespan=lifespan)

# Signed cookie session holding the logged-in user id
app.add_middleware(
    SessionMiddleware,
    secret_key=settings.session_secret,
    max_age=settings.session_max_age,
    same_site="lax",
    https_only=settings.session_https_only,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(LoginRequired)
async def login_required_handler(request: Request, exc: LoginRequired):
    return RedirectResponse(exc.login_path, status_code=status.HTTP_302_FOUND)


@app.exception_handler(InvalidInput)
async def invalid_input_handler(request: Request, exc: InvalidInput):
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": str(exc)})


# Include routers
app.include_router(home_router, tags=["pages"])
app.include_router(auth_router, tags=["auth"])
app.include_router(posts_router, tags=["posts"])
app.include_router(avatar_router, tags=["avatar"])
