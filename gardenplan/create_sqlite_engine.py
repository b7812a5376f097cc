import pathlib

from sqlalchemy.ext.asyncio import create_async_engine

from gardenplan.load_settings import database_path

file_path = pathlib.Path(database_path)
sqlite_url = f"sqlite+aiosqlite:///{file_path}"


engine = create_async_engine(url=sqlite_url, echo=False)
