import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import get_settings
from .database import Base, engine
from .errors import register_exception_handlers
from .models import message, session  # noqa: F401  register tables on Base
from .routers.chat import router as chat_router
from .routers.health import router as health_router


settings = get_settings()


def create_app() -> FastAPI:
    # Create tables on startup (no migrations)
    Base.metadata.create_all(bind=engine)

    app = FastAPI(title=settings.app_name, version=settings.app_version)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.frontend_origin, "http://localhost:8080"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(chat_router)
    app.include_router(health_router)

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run("chat_microservice.main:app", host=settings.api_host, port=settings.api_port, reload=True)
