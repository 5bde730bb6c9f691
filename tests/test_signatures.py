from galshelf.signatures import ENGINE_SIGNATURES, match_engine


def test_exact_marker_names():
    assert match_engine("data.xp3") == "KiriKiri"
    assert match_engine("arc.nsa") == "NScripter"
    assert match_engine("UnityPlayer.dll") == "Unity"
    assert match_engine("GameAssembly.dll") == "Unity/IL2CPP"
    assert match_engine("start.meg") == "Artemis"


def test_case_insensitive():
    assert match_engine("DATA.XP3") == "KiriKiri"
    assert match_engine("agerc.dll") == "AGE"
    assert match_engine("siglusengine.EXE") == "SiglusEngine"


def test_whole_name_only():
    assert match_engine("data.xp3.bak") is None
    assert match_engine("mydata.xp3") is None
    assert match_engine("data") is None
    assert match_engine("") is None


def test_every_table_entry_resolves_to_its_engine():
    for marker, engine in ENGINE_SIGNATURES:
        assert match_engine(marker) == engine


def test_non_ascii_lookalikes_do_not_match():
    assert match_engine("arc.n\u017fa") is None      # long s
    assert match_engine("cg.mp\u212a") is None       # Kelvin sign
    assert match_engine("DATA.XP\u0033") == "KiriKiri"
