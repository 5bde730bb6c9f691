from dataclasses import dataclass, asdict
from typing import Optional

@dataclass(frozen=True)
class DetectedGame:
    title: str
    exe_path: str
    install_path: str
    engine: Optional[str] = None    # None = no marker file seen

    def to_dict(self) -> dict:
        return asdict(self)

@dataclass(frozen=True)
class PlaySession:
    game_id: str
    exe_path: str
    start_time: str                 # ISO-8601, UTC
    end_time: str
    duration: int                   # whole seconds
    exit_code: Optional[int] = None

    def to_dict(self) -> dict:
        return asdict(self)
