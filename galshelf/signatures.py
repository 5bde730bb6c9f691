from typing import Optional, Tuple

# (marker filename, engine name); compared whole-name, case-insensitive
ENGINE_SIGNATURES: Tuple[Tuple[str, str], ...] = (
    ("data.xp3", "KiriKiri"),
    ("data.xp4", "KiriKiri"),
    ("arc.nsa", "NScripter"),
    ("arc1.nsa", "NScripter"),
    ("nscript.dat", "NScripter"),
    ("BGI.exe", "BGI/Ethornell"),
    ("Majiro.arc", "Majiro"),
    ("rio.arc", "Liar-soft"),
    ("UnityPlayer.dll", "Unity"),
    ("GameAssembly.dll", "Unity/IL2CPP"),
    ("AdvHD.exe", "WillPlus AdvHD"),
    ("SiglusEngine.exe", "SiglusEngine"),
    ("RealLive.exe", "RealLive"),
    ("AGERC.DLL", "AGE"),
    ("CatSystem2.exe", "CatSystem2"),
    ("cg.mpk", "Malie"),
    ("start.meg", "Artemis"),
)

_BY_NAME = {}
for _marker, _engine in ENGINE_SIGNATURES:
    _BY_NAME.setdefault(_marker.lower(), _engine)

def match_engine(filename: str) -> Optional[str]:
    """Engine name for a marker filename, or None."""
    # ASCII-only case folding
    if not filename or not filename.isascii():
        return None
    return _BY_NAME.get(filename.lower())
