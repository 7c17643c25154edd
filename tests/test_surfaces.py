"""
Unit Tests for the two import surfaces
"""

import subprocess
import sys

import pytest

import journalism_climate
from journalism_climate import web

FETCHERS = {"fetch_environment_canada_records", "fetch_environment_canada_records_async"}


def test_full_surface_exposes_everything():
    expected = {"compute_humidex", "get_season", *FETCHERS}

    assert expected <= set(journalism_climate.__all__)
    for name in journalism_climate.__all__:
        assert hasattr(journalism_climate, name)


def test_web_surface_is_pure_subset():
    assert set(web.__all__) == {
        "compute_humidex",
        "compute_humidex_from_dewpoint",
        "classify_humidex",
        "get_season",
    }
    assert set(web.__all__) <= set(journalism_climate.__all__)


def test_web_surface_never_exposes_fetcher():
    for name in FETCHERS:
        assert name not in web.__all__
        assert not hasattr(web, name)


def test_web_surface_has_no_network_or_file_dependencies():
    namespace = vars(web)

    assert "requests" not in namespace
    assert "load_data_catalog" not in namespace


def test_surfaces_share_implementations():
    assert web.compute_humidex is journalism_climate.compute_humidex
    assert web.get_season is journalism_climate.get_season


def test_importing_web_surface_loads_no_network_or_data_stack():
    """A fresh interpreter importing only the web surface stays free of heavy deps"""
    code = (
        "import sys, journalism_climate.web; "
        "print(','.join(m for m in ('requests', 'pandas', 'yaml') if m in sys.modules))"
    )
    result = subprocess.run(
        [sys.executable, "-c", code], capture_output=True, text=True, check=True
    )

    assert result.stdout.strip() == ""


def test_full_surface_resolves_fetcher_on_demand():
    from journalism_climate import fetch_environment_canada_records
    from journalism_climate.data_access import environment_canada

    assert fetch_environment_canada_records is environment_canada.fetch_environment_canada_records
    assert "records_to_frame" in dir(journalism_climate)


def test_unknown_attribute_raises_attribute_error():
    with pytest.raises(AttributeError):
        journalism_climate.not_a_helper
