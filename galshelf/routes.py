from __future__ import annotations
import io
from pathlib import Path
from flask import Blueprint, current_app, render_template_string, redirect, url_for, flash, request, send_file, jsonify

from .launch import launch_game, running_games
from .media import download_cover, download_screenshot
from .scanning import scan_games, candidate_folders
from .sessions import append_session, load_sessions, total_playtime
from .settings import load_settings, save_settings
from .utils import (game_id_for, folder_size, find_save_directories, load_ignore_patterns,
                    detect_root_images, pick_best_image)

from .templates import INDEX_HTML

bp = Blueprint("galshelf", __name__)

def _cfg():
    c = current_app.config
    return (
        c["APP_TITLE"],
        Path(c["SETTINGS_FILE"]),
        Path(c["SESSIONS_FILE"]),
        c["IGNORE_FILE"],
        int(c["MAX_SCAN_DEPTH"]),
    )

def _error(msg: str, status: int = 400):
    return jsonify({"ok": False, "error": msg}), status

def _game_json(game) -> dict:
    d = game.to_dict()
    d["id"] = game_id_for(game.install_path)
    return d

def _scan_library(root: str, ignore_file: str, max_depth: int):
    patterns = load_ignore_patterns(Path(root), ignore_file)
    return scan_games(candidate_folders(root, patterns), max_depth)

def _json_body() -> dict:
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}

@bp.get("/")
def index():
    APP_TITLE, SETTINGS_FILE, _, IGNORE_FILE, MAX_DEPTH = _cfg()
    settings = load_settings(SETTINGS_FILE)
    games = []
    for root in settings["library_roots"]:
        games.extend(_scan_library(root, IGNORE_FILE, MAX_DEPTH))
    return render_template_string(
        INDEX_HTML,
        app_title=APP_TITLE,
        games=[_game_json(g) for g in games],
        roots=settings["library_roots"],
        running_ids=running_games(),
    )

@bp.post("/settings")
def settings_post():
    _, SETTINGS_FILE, *_ = _cfg()
    settings = load_settings(SETTINGS_FILE)
    raw = request.form.get("library_roots", "")
    settings["library_roots"] = [line.strip() for line in raw.splitlines() if line.strip()]
    save_settings(SETTINGS_FILE, settings)
    flash("Library folders saved.")
    return redirect(url_for("galshelf.index"))

@bp.post("/api/scan")
def api_scan():
    *_, MAX_DEPTH = _cfg()
    paths = _json_body().get("paths")
    if not isinstance(paths, list) or not all(isinstance(p, str) for p in paths):
        return _error("'paths' must be a list of strings.")
    games = scan_games(paths, MAX_DEPTH)
    return jsonify({"ok": True, "games": [_game_json(g) for g in games]})

@bp.post("/api/scan-library")
def api_scan_library():
    _, _, _, IGNORE_FILE, MAX_DEPTH = _cfg()
    root = _json_body().get("root")
    if not isinstance(root, str) or not root:
        return _error("'root' is required.")
    if not Path(root).is_dir():
        return _error(f"Not a folder: {root}", 404)
    games = _scan_library(root, IGNORE_FILE, MAX_DEPTH)
    return jsonify({"ok": True, "games": [_game_json(g) for g in games]})

@bp.post("/api/launch")
def api_launch():
    _, _, SESSIONS_FILE, *_ = _cfg()
    body = _json_body()
    exe_path = body.get("exe_path")
    if not isinstance(exe_path, str) or not exe_path:
        return _error("'exe_path' is required.")
    game_id = str(body.get("game_id") or "")

    ok, msg = launch_game(exe_path, game_id,
                          on_exit=lambda s: append_session(SESSIONS_FILE, s))
    if not ok:
        return _error(msg, 500)
    return jsonify({"ok": True, "message": msg})

@bp.get("/api/running")
def api_running():
    return jsonify({"ok": True, "running": sorted(running_games())})

@bp.get("/api/sessions")
def api_sessions():
    _, _, SESSIONS_FILE, *_ = _cfg()
    game_id = request.args.get("game_id") or None
    sessions = load_sessions(SESSIONS_FILE, game_id)
    return jsonify({
        "ok": True,
        "sessions": [s.to_dict() for s in sessions],
        "total_playtime": total_playtime(sessions),
    })

@bp.get("/api/folder-size")
def api_folder_size():
    path = request.args.get("path", "")
    if not path:
        return _error("'path' is required.")
    return jsonify({"ok": True, "size": folder_size(path)})

@bp.get("/api/save-dirs")
def api_save_dirs():
    path = request.args.get("path", "")
    if not path:
        return _error("'path' is required.")
    return jsonify({"ok": True, "dirs": find_save_directories(path)})

def _download(fn, dir_key: str):
    body = _json_body()
    url, filename = body.get("url"), body.get("filename")
    if not isinstance(url, str) or not isinstance(filename, str):
        return _error("'url' and 'filename' are required.")
    c = current_app.config
    ok, result = fn(url, Path(c[dir_key]), filename, timeout=c["DOWNLOAD_TIMEOUT"])
    if not ok:
        return _error(result, 502)
    return jsonify({"ok": True, "path": result})

@bp.post("/api/cover")
def api_cover():
    return _download(download_cover, "COVERS_DIR")

@bp.post("/api/screenshot")
def api_screenshot():
    return _download(download_screenshot, "SCREENSHOTS_DIR")

@bp.get("/cover")
def cover():
    c = current_app.config
    folder = Path(request.args.get("path", ""))
    title = request.args.get("title", "") or folder.name
    if folder.is_dir():
        images = detect_root_images(folder, c["ALLOWED_IMG_EXT"])
        chosen = pick_best_image(folder, images, float(c["DEFAULT_TARGET_AR"])) if images else None
        if chosen:
            return send_file(folder / chosen)
    svg = f"""
    <svg xmlns="http://www.w3.org/2000/svg" width="600" height="800">
      <rect width="100%" height="100%" fill="#1f2630"/>
      <text x="50%" y="50%" fill="#e0e6ee" font-size="28" text-anchor="middle" dominant-baseline="middle">
        {_svg_escape(title[:32])}
      </text>
    </svg>
    """
    return send_file(io.BytesIO(svg.encode("utf-8")), mimetype="image/svg+xml")

def _svg_escape(s: str) -> str:
    return s.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")

@bp.get("/favicon.ico")
def favicon():
    return ("", 204)
