from pathlib import Path
import pytest
from spellrank import Engine
from spellrank.errors import ResourceCorrupt, UnsupportedLocale
from spellrank.registry import LocaleRegistry
from spellrank.DB.storage import build_resources

def _seed(tmp: Path) -> Path:
    root = tmp / "resources"; root.mkdir()
    build_resources({"hello": 10, "help": 5}, str(root / "en.words"), str(root / "en.freq"))
    build_resources({"coração": 10, "não": 50, "pão": 5}, str(root / "pt_PT.words"), str(root / "pt_PT.freq"))
    return root

@pytest.mark.e2e
def test_locale_tags_resolve_case_insensitively(tmp_path: Path):
    eng = Engine(resource_root=str(_seed(tmp_path)))
    try:
        s = eng.create_session("EN")
        assert s.locale == "en"
        assert s.resources.metric.name == "chord_en"
        p = eng.create_session("pt_pt")
        assert p.locale == "pt_PT"
        assert p.resources.metric.name == "chord_pt"
    finally:
        eng.shutdown()

@pytest.mark.e2e
def test_switching_locale_swaps_the_whole_snapshot(tmp_path: Path):
    eng = Engine(resource_root=str(_seed(tmp_path)))
    try:
        s = eng.create_session("en")
        en_snap = s.resources
        assert s.start("en") is en_snap            # same locale: no reload
        s.start("pt_PT")
        assert s.resources is not en_snap
        assert s.resources.dictionary.contains("não")
        assert s.get_suggestions("nao", 3)[0] == "não"
    finally:
        eng.shutdown()

@pytest.mark.e2e
def test_unsupported_locale_fails_and_keeps_previous_dictionary(tmp_path: Path):
    eng = Engine(resource_root=str(_seed(tmp_path)))
    try:
        s = eng.create_session("en")
        with pytest.raises(UnsupportedLocale):
            s.start("fr")
        assert s.locale == "en"
        assert s.get_suggestions("helo", 2)
        with pytest.raises(UnsupportedLocale):
            eng.create_session("")
    finally:
        eng.shutdown()

@pytest.mark.e2e
@pytest.mark.parametrize("tag", [None, ""])
def test_missing_locale_tag_on_started_session(tmp_path: Path, tag):
    eng = Engine(resource_root=str(_seed(tmp_path)))
    try:
        s = eng.create_session("en")
        with pytest.raises(UnsupportedLocale):
            s.start(tag)
        assert s.locale == "en"
    finally:
        eng.shutdown()

@pytest.mark.e2e
def test_corrupt_dictionary_fails_only_that_locale(tmp_path: Path):
    root = _seed(tmp_path)
    (root / "pt_PT.words").write_bytes(b"\xff\xfe\x00garbage")
    eng = Engine(resource_root=str(root))
    try:
        s = eng.create_session("en")
        with pytest.raises(ResourceCorrupt):
            s.start("pt_PT")
        assert s.locale == "en"
        assert eng.registry.loaded() == ["en"]
        other = eng.create_session("en")
        assert other.get_suggestions("help", 1) == ["help"]
    finally:
        eng.shutdown()

@pytest.mark.e2e
def test_corrupt_frequency_table_degrades_to_neutral(tmp_path: Path):
    root = _seed(tmp_path)
    (root / "en.freq").write_bytes(b"not a frequency table")
    eng = Engine(resource_root=str(root))
    try:
        s = eng.create_session("en")
        assert len(s.resources.frequencies) == 0
        cands = {c.text: c for c in s.explain("helo")}
        assert cands and all(c.frequency == 0.0 for c in cands.values())
    finally:
        eng.shutdown()

def test_registry_caches_and_reloads(tmp_path: Path):
    reg = LocaleRegistry(_seed(tmp_path))
    a = reg.get("en")
    assert reg.get("en") is a
    b = reg.get("en", reload=True)
    assert b is not a
    words, freq = reg.paths("EN")
    assert words.name == "en.words" and freq.name == "en.freq"
    reg.clear()
    assert reg.loaded() == []
