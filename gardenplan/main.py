import logging
import pathlib
from fastapi import FastAPI
from contextlib import asynccontextmanager

from gardenplan.create_sqlite_engine import engine
from gardenplan.load_settings import database_path, port, reset_db, temperature_data_file_path
from gardenplan.routers import gardens, locations
from gardenplan.services.seed import initialize_new_db_with_data, reset_schema

logging.basicConfig(level=logging.DEBUG)


@asynccontextmanager
async def lifespan(app):
    """Prepare the database before serving.

    A missing database file (or RESET_DB=true) gets a fresh schema with the
    example garden and the temperature data; otherwise missing tables are created.
    """
    if reset_db or not pathlib.Path(database_path).exists():
        await initialize_new_db_with_data(temperature_data_file_path)
    else:
        await reset_schema(drop_existing=False)
    try:
        yield
    finally:
        await engine.dispose()
        logging.info("Stop Server")


app = FastAPI(lifespan=lifespan)
app.include_router(gardens.garden_router, prefix="/api")
app.include_router(locations.location_router, prefix="/api")


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=port)
