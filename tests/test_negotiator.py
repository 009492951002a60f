from conftest import FakeHost
from launch_gate.display.catalog import DisplayModeCatalog
from launch_gate.display.negotiator import ResolutionNegotiator
from launch_gate.persistence.settings_store import SettingsStore


def _catalog(**kwargs):
    return DisplayModeCatalog(FakeHost(**kwargs)).build()


def test_no_stored_label_selects_current_monitor(store: SettingsStore):
    catalog = _catalog(current=(2560, 1440))
    result = ResolutionNegotiator(store).negotiate(catalog, None)
    assert result.selected_index == 0
    assert result.resolved_label == "2560 x 1440 (Monitor)"
    assert store.get_resolution() == "2560 x 1440 (Monitor)"


def test_stored_label_selects_matching_entry(store: SettingsStore):
    catalog = _catalog(modes=[(2560, 1440), (1920, 1080), (1280, 720)])
    result = ResolutionNegotiator(store).negotiate(catalog, "1280 x 720")
    assert result.selected_index == 3
    assert result.resolved_label == "1280 x 720"
    assert store.get_resolution() == "1280 x 720"


def test_first_match_wins(store: SettingsStore):
    catalog = _catalog(current=(1920, 1080), modes=[(1920, 1080)])
    result = ResolutionNegotiator(store).negotiate(catalog, "1920 x 1080 (Monitor)")
    assert result.selected_index == 0


def test_match_is_case_sensitive(store: SettingsStore):
    catalog = _catalog(current=(1920, 1080))
    result = ResolutionNegotiator(store).negotiate(catalog, "1920 x 1080 (monitor)")
    assert result.selected_index == 0
    assert result.resolved_label == "1920 x 1080 (Monitor)"


def test_unmatched_label_falls_back_and_is_overwritten(store: SettingsStore):
    store.set_resolution("3840 x 2160")
    catalog = _catalog(current=(1920, 1080), modes=[(1920, 1080), (1280, 720)])
    result = ResolutionNegotiator(store).negotiate(catalog, store.get_resolution())
    assert result.selected_index == 0
    assert result.resolved_label == "1920 x 1080 (Monitor)"
    assert store.get_resolution() == "1920 x 1080 (Monitor)"


def test_monitor_change_between_runs(store: SettingsStore):
    negotiator = ResolutionNegotiator(store)
    negotiator.negotiate(_catalog(current=(2560, 1440)), None)
    # Next run on a smaller monitor: the old monitor label no longer exists
    result = negotiator.negotiate(_catalog(current=(1920, 1080)), store.get_resolution())
    assert result.selected_index == 0
    assert store.get_resolution() == "1920 x 1080 (Monitor)"


def test_negotiation_is_idempotent(store: SettingsStore):
    catalog = _catalog()
    negotiator = ResolutionNegotiator(store)
    for label in (None, "1920 x 1080", "nonsense"):
        first = negotiator.negotiate(catalog, label)
        second = negotiator.negotiate(catalog, first.resolved_label)
        assert second.selected_index == first.selected_index


def test_select_writes_chosen_label(store: SettingsStore):
    catalog = _catalog(modes=[(1920, 1080), (1280, 720)])
    label = ResolutionNegotiator(store).select(catalog, 2)
    assert label == "1280 x 720"
    assert store.get_resolution() == "1280 x 720"
