import pytest

from errors import AmbiguousAsset, AssetNotFound
from models.release import Asset
from tools.asset_matcher import match_asset, pattern_to_regex


def _assets(*names):
    return [Asset(name=n, download_url=f"https://example.com/{n}") for n in names]


def test_wildcard_pattern_selects_single_match():
    assets = _assets("eep-macos-10.11-x64", "eep-linux-x64")

    asset = match_asset("eep-macos-*-x64", assets)

    assert asset.name == "eep-macos-10.11-x64"
    assert asset.download_url == "https://example.com/eep-macos-10.11-x64"


def test_pattern_without_wildcard_is_exact_match():
    assets = _assets("eep-macos-10.11-x64", "eep-linux-x64", "eep-linux-x64.sha256")

    assert match_asset("eep-linux-x64", assets).name == "eep-linux-x64"


def test_wildcard_matches_empty_run():
    assert match_asset("eep-*linux-x64", _assets("eep-linux-x64")).name == "eep-linux-x64"


def test_no_match_raises_asset_not_found():
    with pytest.raises(AssetNotFound) as excinfo:
        match_asset("eep-windows-*", _assets("eep-macos-10.11-x64", "eep-linux-x64"))

    assert "eep-windows-*" in str(excinfo.value)
    assert "eep-linux-x64" in str(excinfo.value)


def test_empty_asset_list_raises_asset_not_found():
    with pytest.raises(AssetNotFound):
        match_asset("eep-linux-x64", [])


def test_multiple_matches_raise_ambiguous_asset():
    assets = _assets("eep-macos-10.11-x64", "eep-macos-12.0-x64")

    with pytest.raises(AmbiguousAsset) as excinfo:
        match_asset("eep-macos-*-x64", assets)

    assert "eep-macos-10.11-x64" in str(excinfo.value)
    assert "eep-macos-12.0-x64" in str(excinfo.value)


def test_match_is_anchored_at_both_ends():
    assets = _assets("prefix-eep-linux-x64", "eep-linux-x64-debug")

    with pytest.raises(AssetNotFound):
        match_asset("eep-linux-x64", assets)


def test_regex_metacharacters_are_literal():
    regex = pattern_to_regex("eep-macos-*.x64")

    assert regex.fullmatch("eep-macos-10.11.x64")
    assert not regex.fullmatch("eep-macos-10.11-x64")


def test_asset_without_download_url_is_rejected():
    with pytest.raises(AssetNotFound) as excinfo:
        match_asset("eep-linux-x64", [Asset(name="eep-linux-x64", download_url="")])

    assert "No download URL" in str(excinfo.value)


def test_trailing_newline_in_name_does_not_match():
    with pytest.raises(AssetNotFound):
        match_asset("eep-linux-x64", _assets("eep-linux-x64\n"))
