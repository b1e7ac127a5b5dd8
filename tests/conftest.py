from datetime import date

import pytest

from tidyname import naming_rules


@pytest.fixture(autouse=True)
def isolated_state(tmp_path, monkeypatch):
    """Point the state file and site rules at a scratch directory."""
    state = tmp_path / "state.json"
    monkeypatch.setenv("TIDYNAME_STATE_FILE", str(state))
    monkeypatch.setenv("SITE_RULES_PATH", str(tmp_path / "site_rules.json"))
    monkeypatch.delenv("TIDYNAME_ENABLED_DEFAULT", raising=False)
    monkeypatch.delenv("TIDYNAME_HISTORY_LIMIT", raising=False)
    monkeypatch.setattr(naming_rules, "_default_rules_path", lambda: tmp_path / "missing.json")
    naming_rules.reset_site_overrides()
    yield state
    naming_rules.reset_site_overrides()


@pytest.fixture
def today():
    return date(2024, 5, 17)
