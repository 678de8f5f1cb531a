import pytest

from solstyle.utils import DiscoveryError, discover_sources


def make_tree(tmp_path):
    src = tmp_path / "src"
    (src / "tokens").mkdir(parents=True)
    (src / "Vault.sol").write_text("contract Vault {}\n", encoding="utf-8")
    (src / "Counter.sol").write_text("contract Counter {}\n", encoding="utf-8")
    (src / "tokens" / "Token.sol").write_text("contract Token {}\n", encoding="utf-8")
    (src / "README.md").write_text("notes\n", encoding="utf-8")
    return src


def test_wildcard_walks_recursively_and_skips_other_files(tmp_path):
    src = make_tree(tmp_path)

    files = discover_sources(src)

    assert [path.relative_to(src).as_posix() for path in files] == [
        "Counter.sol",
        "Vault.sol",
        "tokens/Token.sol",
    ]


def test_named_contracts_keep_requested_order(tmp_path):
    src = make_tree(tmp_path)

    files = discover_sources(src, ["Vault", "Counter"])

    assert [path.name for path in files] == ["Vault.sol", "Counter.sol"]


def test_missing_named_contract_raises(tmp_path):
    src = make_tree(tmp_path)

    with pytest.raises(DiscoveryError, match="Missing.sol"):
        discover_sources(src, ["Missing"])


def test_missing_source_directory_raises(tmp_path):
    with pytest.raises(DiscoveryError, match="Source directory not found"):
        discover_sources(tmp_path / "nope")
