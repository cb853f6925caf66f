"""Tests for the fixture data-quality checker."""

from ddf_api import dq_checks
from ddf_api.config import DEFAULT_FIXTURE
from tests.fixtures.sample_data import sample_listing, sample_listings, write_fixture


def test_sample_fixture_passes(fixture_path):
    assert dq_checks.run_checks(fixture_path) == []


def test_bundled_fixture_passes():
    assert dq_checks.run_checks(DEFAULT_FIXTURE) == []


def test_empty_fixture(tmp_path):
    issues = dq_checks.run_checks(write_fixture(tmp_path / "f.json", []))
    assert issues == ["Fixture contains no listings."]


def test_no_active_listings(tmp_path):
    p = write_fixture(tmp_path / "f.json", [sample_listing(status="Sold")])
    assert any("No Active listings" in i for i in dq_checks.run_checks(p))


def test_postal_code_coverage(tmp_path):
    listings = sample_listings()
    listings[0]["PostalCode"] = "12345"
    issues = dq_checks.run_checks(write_fixture(tmp_path / "f.json", listings))
    assert any(i.startswith("Postal code coverage low") for i in issues)


def test_missing_photos_and_bad_coordinates(tmp_path):
    listings = [
        sample_listing("A1"),
        sample_listing("B2", Photos=[]),
        sample_listing("C3", Latitude=51.5, Longitude=-0.12),
    ]
    issues = dq_checks.run_checks(write_fixture(tmp_path / "f.json", listings))
    assert "1 listing(s) without photos: B2" in issues
    assert "1 listing(s) with coordinates outside Canada: C3" in issues


def test_main_exit_codes(tmp_path, fixture_path, capsys):
    assert dq_checks.main([str(fixture_path)]) == 0
    assert "Passed" in capsys.readouterr().out

    bad = write_fixture(tmp_path / "bad.json", [sample_listing(Photos=[])])
    assert dq_checks.main([str(bad)]) == 1
    assert "Issues Detected" in capsys.readouterr().out

    assert dq_checks.main([str(tmp_path / "missing.json")]) == 2
    assert "could not run" in capsys.readouterr().err
