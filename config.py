# config.py
import logging
import os

from dotenv import load_dotenv

load_dotenv()

DATA_FILE = os.getenv("HOTEL_DATA_FILE") or "Record.json"
LOG_LEVEL = os.getenv("HOTEL_LOG_LEVEL") or "WARNING"
HOST = os.getenv("HOTEL_HOST") or "127.0.0.1"
PORT = int(os.getenv("HOTEL_PORT", 5000))
DEBUG = os.getenv("FLASK_DEBUG", "false").lower() == "true"


def configure_logging(level: str = LOG_LEVEL) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
