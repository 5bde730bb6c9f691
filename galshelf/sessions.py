import json
import threading
from pathlib import Path
from typing import List, Optional

from loguru import logger

from .models import PlaySession

_lock = threading.Lock()

def load_sessions(sessions_file: Path, game_id: Optional[str] = None) -> List[PlaySession]:
    sessions: List[PlaySession] = []
    try:
        if sessions_file.exists():
            data = json.loads(sessions_file.read_text("utf-8"))
        else:
            data = []
    except (OSError, ValueError) as e:
        logger.warning("Unreadable sessions file {}: {}", sessions_file, e)
        data = []
    if not isinstance(data, list):
        return sessions
    for item in data:
        if not isinstance(item, dict):
            continue
        try:
            s = PlaySession(
                game_id=str(item["game_id"]),
                exe_path=str(item.get("exe_path", "")),
                start_time=str(item["start_time"]),
                end_time=str(item["end_time"]),
                duration=int(item.get("duration", 0)),
                exit_code=item.get("exit_code"),
            )
        except (KeyError, TypeError, ValueError):
            continue
        if game_id is None or s.game_id == game_id:
            sessions.append(s)
    return sessions

def append_session(sessions_file: Path, session: PlaySession) -> None:
    with _lock:
        sessions = load_sessions(sessions_file)
        sessions.append(session)
        sessions_file.parent.mkdir(parents=True, exist_ok=True)
        sessions_file.write_text(
            json.dumps([s.to_dict() for s in sessions], indent=2), encoding="utf-8"
        )

def total_playtime(sessions: List[PlaySession]) -> int:
    return sum(s.duration for s in sessions)
