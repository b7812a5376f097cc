import os
from dotenv import load_dotenv

load_dotenv()

database_path = os.getenv("DATABASE_PATH", "gardenplan.sqlite3")
reset_db = os.getenv("RESET_DB", "false").lower() == "true"
temperature_data_file_path = os.getenv(
    "TEMPERATURE_DATA_FILE_PATH", "data/temperatures.yaml"
)
api_base_url = os.getenv("API_BASE_URL", "http://localhost:3000/api")
port = int(os.getenv("PORT", "3000"))

if __name__ == "__main__":
    print(database_path, reset_db, temperature_data_file_path, api_base_url, port)
