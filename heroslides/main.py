from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
import logging
from heroslides.config import get_settings
from heroslides.routers import hero_slides

logging.basicConfig(
    level=getattr(logging, get_settings().LOG_LEVEL, logging.INFO),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

def on_startup():
    # Ensure all DB tables exist after all models are imported
    from heroslides.models.user import Base, SessionLocal, engine  # Base/engine single source
    import heroslides.models.hero_slide  # register HeroSlide model
    from heroslides.utils.security import ensure_admin_user
    Base.metadata.create_all(bind=engine)

    db = SessionLocal()
    try:
        ensure_admin_user(db)
    finally:
        db.close()
    logger.info("Hero slides service ready")


@asynccontextmanager
async def lifespan(app: FastAPI):
    on_startup()
    yield


app = FastAPI(title="Hero Slides", lifespan=lifespan)

# CORS configuration for the admin frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(hero_slides.router, prefix="/api/hero-slides", tags=["hero-slides"])
app.include_router(hero_slides.admin_router, prefix="/api/admin/hero-slides", tags=["admin-hero-slides"])


# --- Entry point for local runs ---
if __name__ == "__main__":
    import uvicorn, os
    port = int(os.environ.get("PORT", 8000))
    uvicorn.run("heroslides.main:app", host="0.0.0.0", port=port, reload=False)
