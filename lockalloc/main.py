from fastapi import FastAPI

from lockalloc.infrastructure.config import settings
from lockalloc.infrastructure.logging_config import configure_logging
from lockalloc.presentation.routers import router

configure_logging("lockalloc", settings.log_level)

app = FastAPI(title="lockalloc")
app.include_router(router)
