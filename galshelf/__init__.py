import os
from pathlib import Path
from flask import Flask

from .logger import setup_logger
from .routes import bp as routes_bp
from .models import DetectedGame
from .scanning import detect_game_from_folder, scan_games, MAX_SCAN_DEPTH

# Bind only localhost unless overridden
BIND = os.environ.get("BIND", "127.0.0.1")
PORT = int(os.environ.get("PORT", "5000"))
DEBUG = os.environ.get("GALSHELF_DEBUG", "") not in ("", "0")

def default_data_dir() -> str:
    return os.environ.get("GALSHELF_DATA", os.path.join(os.path.expanduser("~"), ".galshelf"))

def create_app(data_dir: str, *, log_to_file: bool = True) -> Flask:
    data = Path(data_dir)
    data.mkdir(parents=True, exist_ok=True)
    setup_logger(data / "logs" if log_to_file else None, debug=DEBUG)

    app = Flask(__name__)
    app.secret_key = os.environ.get("FLASK_SECRET", "dev-" + os.urandom(8).hex())
    app.config["APP_TITLE"] = "Galgame Shelf"
    app.config["DATA_DIR"] = str(data)
    app.config["SETTINGS_FILE"] = str(data / "settings.json")
    app.config["SESSIONS_FILE"] = str(data / "sessions.json")
    app.config["COVERS_DIR"] = str(data / "covers")
    app.config["SCREENSHOTS_DIR"] = str(data / "screenshots")
    app.config["IGNORE_FILE"] = ".galshelfignore"
    app.config["MAX_SCAN_DEPTH"] = MAX_SCAN_DEPTH
    app.config["ALLOWED_IMG_EXT"] = {".png", ".jpg", ".jpeg", ".webp"}
    app.config["DEFAULT_TARGET_AR"] = 0.75
    app.config["DOWNLOAD_TIMEOUT"] = 30

    app.register_blueprint(routes_bp)
    return app

__all__ = ["create_app", "default_data_dir", "DetectedGame",
           "detect_game_from_folder", "scan_games", "BIND", "PORT"]
