import pytest

from textdoc import DocumentProfile, load_profile, profile_from_cfg


def test_defaults():
    prof = profile_from_cfg(None)
    assert prof == DocumentProfile()
    assert prof.empty_average == "raise"
    assert prof.clone_flags is True
    assert prof.time_mask == "**:** **"


def test_profile_from_cfg_coerces_values():
    prof = profile_from_cfg({"name": "lenient", "empty_average": "NaN", "clone_flags": 0, "time_mask": "XX"})
    assert prof.name == "lenient"
    assert prof.empty_average == "nan"
    assert prof.clone_flags is False
    assert prof.time_mask == "XX"


def test_unknown_empty_average_policy():
    with pytest.raises(ValueError):
        profile_from_cfg({"empty_average": "ignore"})


def test_load_profile(tmp_path):
    path = tmp_path / "profile.yaml"
    path.write_text("name: redacted\nempty_average: zero\ntime_mask: '[time]'\n", encoding="utf-8")
    prof = load_profile(path)
    assert prof.name == "redacted"
    assert prof.empty_average == "zero"
    assert prof.time_mask == "[time]"
    assert prof.clone_flags is True


def test_load_empty_profile(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")
    assert load_profile(path) == DocumentProfile()


def test_load_profile_rejects_non_mapping(tmp_path):
    path = tmp_path / "list.yaml"
    path.write_text("- zero\n- nan\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_profile(str(path))


def test_profile_rejects_unknown_empty_average_directly():
    with pytest.raises(ValueError):
        DocumentProfile(empty_average="bogus")
