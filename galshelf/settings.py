import json
from typing import Dict
from pathlib import Path

def load_settings(settings_file: Path) -> Dict:
    default = {"library_roots": []}
    try:
        if settings_file.exists():
            data = json.loads(settings_file.read_text("utf-8"))
            default.update({k: data.get(k, default[k]) for k in default})
    except (OSError, ValueError, AttributeError):
        pass
    if not isinstance(default["library_roots"], list):
        default["library_roots"] = []
    default["library_roots"] = [str(r) for r in default["library_roots"] if r]
    return default

def save_settings(settings_file: Path, settings: dict) -> None:
    settings_file.parent.mkdir(parents=True, exist_ok=True)
    settings_file.write_text(json.dumps(settings, indent=2), encoding="utf-8")
