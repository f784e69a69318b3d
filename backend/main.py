import logging

from fastapi import FastAPI
import uvicorn
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager

from core.config import settings
from db.database import InventoryStore
from db.seed import seed_demo_data
from routers.categories import router as categories_router
from routers.health import router as health_router
from routers.inventory import router as inventory_router
from routers.locations import router as locations_router
from routers.products import router as products_router
from routers.reports import router as reports_router

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # One store per process; discarded on shutdown.
    store = InventoryStore()
    if settings.seed_demo_data:
        seed_demo_data(store)
    app.state.store = store
    yield


app = FastAPI(
    title=settings.app_title,
    description="API for tracking warehouse products, locations and stock movements",
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


app.include_router(health_router)

# Entity CRUD routes
app.include_router(products_router, prefix="/api/products", tags=["products"])
app.include_router(categories_router, prefix="/api/categories", tags=["categories"])
app.include_router(locations_router, prefix="/api/locations", tags=["locations"])

# Stock movements, alerts and reports
app.include_router(inventory_router, prefix="/api", tags=["inventory"])
app.include_router(reports_router, prefix="/api", tags=["reports"])

if __name__ == "__main__":
    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=True)
