# galshelf/launch.py
from __future__ import annotations

import subprocess
import threading
import time
from datetime import datetime, timezone
from pathlib import Path
from typing import Callable, Optional, Set, Tuple

from loguru import logger

from .models import PlaySession

SessionCallback = Callable[[PlaySession], None]

_running: Set[str] = set()
_running_lock = threading.Lock()

def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()

def running_games() -> Set[str]:
    with _running_lock:
        return set(_running)

def _track(p, game_id: str, exe_path: str, start_time: str, started: float,
           on_exit: Optional[SessionCallback]) -> None:
    """Wait for the child, then report the finished session."""
    exit_code = None
    try:
        exit_code = p.wait()
    finally:
        with _running_lock:
            _running.discard(game_id)
        session = PlaySession(
            game_id=game_id,
            exe_path=exe_path,
            start_time=start_time,
            end_time=_now_iso(),
            duration=int(time.monotonic() - started),
            exit_code=exit_code,
        )
        logger.info("Session ended for {}: {}s (exit {})", game_id, session.duration, exit_code)
        if on_exit is not None:
            try:
                on_exit(session)
            except Exception:
                logger.exception("Session callback failed for {}", game_id)

def launch_game(exe_path: str, game_id: str = "",
                on_exit: Optional[SessionCallback] = None) -> Tuple[bool, str]:
    """
    Spawn exe_path with its own folder as working directory.

    A daemon thread owns the process handle; once the game exits it builds a
    PlaySession and hands it to on_exit. There is no cancellation.
    """
    exe = Path(exe_path)
    if not exe.is_file():
        return False, f"Executable not found: {exe_path}"
    exe = exe.resolve()
    cwd = str(exe.parent)

    try:
        p = subprocess.Popen([str(exe)], cwd=cwd)
    except OSError as e:
        logger.error("Failed to launch {}: {}", exe_path, e)
        return False, f"Failed to launch game: {e}"

    game_id = game_id or str(exe)
    start_time = _now_iso()
    started = time.monotonic()
    with _running_lock:
        _running.add(game_id)
    logger.info("Launched {} (game {})", exe_path, game_id)

    threading.Thread(
        target=_track,
        args=(p, game_id, str(exe), start_time, started, on_exit),
        daemon=True,
    ).start()
    return True, "Launched."
