"""
Unit tests for gdlookup/cli/

Coverage plan
─────────────
arg parsing   → global options, each subcommand, env default
cmd_* funcs   → show / item / ls / loot-table output on synthetic databases
main()        → end-to-end against an extracted install tree, exit codes
"""

from pathlib import Path

import pytest

from gdlookup.layout import pack_layout
from gdlookup.store.memory import MemoryDatabase


# ─────────────────────────────────────────────────────────────────────────────
# Helpers
# ─────────────────────────────────────────────────────────────────────────────

def _parse(args: list[str]):
    """Call the CLI argument parser and return the parsed namespace."""
    from gdlookup.cli.main import build_parser
    parser = build_parser()
    return parser.parse_args(args)


def _write_record(install: Path, pack: int, rid: str, fields: dict[str, str]) -> None:
    db_dir = pack_layout(pack).database_path(install).with_suffix("")
    path = db_dir / rid
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("".join(f"{k},{v},\n" for k, v in fields.items()), encoding="utf-8")


def _write_tags(install: Path, pack: int, tags: dict[str, str]) -> None:
    layout = pack_layout(pack)
    arc_dir = layout.tag_archive_path(install).with_suffix("")
    arc_dir.mkdir(parents=True, exist_ok=True)
    (arc_dir / layout.tag_entry).write_text(
        "".join(f"{k}={v}\n" for k, v in tags.items()), encoding="utf-8"
    )


@pytest.fixture
def install(tmp_path):
    """Base game + first expansion, extracted."""
    _write_record(tmp_path, 0, "records/items/relic_a.dbr",
                  {"Class": "ItemRelic", "itemNameTag": "t1", "levelRequirement": "50"})
    _write_record(tmp_path, 0, "records/items/relic_b.dbr",
                  {"Class": "ItemRelic", "itemNameTag": "t2"})
    _write_record(tmp_path, 0, "records/loot/table.dbr",
                  {"Class": "LootItemTable_DynWeight"})
    _write_record(tmp_path, 1, "records/items/relic_a.dbr",
                  {"Class": "ItemRelic", "itemNameTag": "t1", "levelRequirement": "65"})
    _write_record(tmp_path, 1, "records/loot/affixes.dbr",
                  {"Class": "LootRandomizer"})
    _write_tags(tmp_path, 0, {"t1": "Relic of the Ancients", "t2": "Relic of the Ancients Rare"})
    _write_tags(tmp_path, 1, {"t3": "Aether Crystal"})
    return tmp_path


@pytest.fixture
def databases():
    base = MemoryDatabase({
        "records/items/a.dbr": {"itemNameTag": "t1"},
        "records/items/b.dbr": {"itemNameTag": "t1"},
        "records/items/c.dbr": {"itemNameTag": "t2"},
        "records/skills/x.dbr": {"Class": "Skill"},
    }, source="base")
    gdx1 = MemoryDatabase({
        "records/skills/x.dbr": {"Class": "Skill", "patched": 1},
    }, source="gdx1")
    return [base, gdx1]


# ─────────────────────────────────────────────────────────────────────────────
# 1. Argument parsing
# ─────────────────────────────────────────────────────────────────────────────

class TestArgParsing:

    def test_global_options_parse(self):
        ns = _parse(["-i", "/games/gd", "-x", "2", "ls"])
        assert ns.install_path == "/games/gd"
        assert ns.xpac == 2
        assert ns.subcommand == "ls"
        assert ns.path is None

    def test_xpac_defaults_to_none(self):
        ns = _parse(["-i", "/games/gd", "show", "records/x.dbr"])
        assert ns.xpac is None
        assert ns.path == "records/x.dbr"

    def test_item_words_are_collected(self):
        ns = _parse(["-i", "/g", "item", "Aether", "Crystal"])
        assert ns.name == ["Aether", "Crystal"]

    def test_loot_table_defaults(self):
        ns = _parse(["-i", "/g", "loot-table", "records/loot/t.dbr"])
        assert ns.difficulty == "ultimate"
        assert ns.vendor is False

    def test_loot_table_options(self):
        ns = _parse(["-i", "/g", "loot-table", "-d", "elite", "--vendor", "records/loot/t.dbr"])
        assert ns.difficulty == "elite"
        assert ns.vendor is True

    def test_unknown_difficulty_is_rejected(self):
        with pytest.raises(SystemExit):
            _parse(["-i", "/g", "loot-table", "-d", "hard", "records/loot/t.dbr"])

    def test_install_path_defaults_to_environment(self, monkeypatch):
        monkeypatch.setenv("GD_INSTALL_PATH", "/from/env")
        ns = _parse(["ls"])
        assert ns.install_path == "/from/env"


# ─────────────────────────────────────────────────────────────────────────────
# 2. Command functions
# ─────────────────────────────────────────────────────────────────────────────

class TestShowCommand:

    def test_prints_record(self, databases, capsys):
        from gdlookup.cli.main import cmd_show
        cmd_show(databases[:1], "records/items/c.dbr")
        assert capsys.readouterr().out == "records/items/c.dbr\n  itemNameTag = t2\n"

    def test_duplicate_prints_latest(self, databases, capsys):
        from gdlookup.cli.main import cmd_show
        rec = cmd_show(databases, "records/skills/x.dbr")
        assert rec.data["patched"] == 1
        assert "patched = 1" in capsys.readouterr().out

    def test_missing_raises(self, databases):
        from gdlookup.cli.main import cmd_show
        from gdlookup.exceptions import RecordNotFoundError
        with pytest.raises(RecordNotFoundError):
            cmd_show(databases, "records/none.dbr")


class TestItemCommand:

    def test_lists_references_sorted(self, databases, capsys):
        from gdlookup.cli.main import cmd_item
        cmd_item(databases, {"t1": "Blade", "t2": "Shield"}, "Blade")
        assert capsys.readouterr().out == (
            "Blade is referenced in the following database records:\n"
            "  records/items/a.dbr\n"
            "  records/items/b.dbr\n"
        )

    def test_ambiguous_lists_candidates(self, databases, capsys):
        from gdlookup.cli.main import cmd_item
        from gdlookup.query.items import ItemMatchStatus
        tags = {"t1": "Relic of the Ancients", "t2": "Relic of the Ancients Rare"}
        match = cmd_item(databases, tags, "Relic")
        assert match.status == ItemMatchStatus.AMBIGUOUS
        assert capsys.readouterr().out == (
            "Multiple item tags found, please disambiguate:\n"
            "  Relic of the Ancients\n"
            "  Relic of the Ancients Rare\n"
        )

    def test_no_match_reports_on_stderr(self, databases, capsys):
        from gdlookup.cli.main import cmd_item
        cmd_item(databases, {"t1": "Blade"}, "Axe")
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "No matching items found" in captured.err


class TestLsCommand:

    def test_prints_one_label_per_line(self, databases, capsys):
        from gdlookup.cli.main import cmd_ls
        cmd_ls(databases, "records")
        assert capsys.readouterr().out == "items/\nskills/\n"


class TestLootTableCommand:

    def test_prints_located_record_only(self, databases, capsys):
        from gdlookup.cli.main import cmd_loot_table
        cmd_loot_table(databases, "records/items/a.dbr", "normal", vendor=True)
        assert capsys.readouterr().out == "records/items/a.dbr\n  itemNameTag = t1\n"


# ─────────────────────────────────────────────────────────────────────────────
# 3. main()
# ─────────────────────────────────────────────────────────────────────────────

class TestMain:

    def test_no_subcommand_prints_help(self, capsys):
        from gdlookup.cli.main import main
        assert main([]) == 0
        assert "usage" in capsys.readouterr().out.lower()

    def test_missing_install_path_is_usage_error(self, monkeypatch):
        from gdlookup.cli.main import main
        monkeypatch.delenv("GD_INSTALL_PATH", raising=False)
        with pytest.raises(SystemExit) as exc_info:
            main(["ls"])
        assert exc_info.value.code == 2

    def test_ls_root(self, install, capsys):
        from gdlookup.cli.main import main
        assert main(["-i", str(install), "ls"]) == 0
        assert capsys.readouterr().out == "records/\n"

    def test_ls_nested(self, install, capsys):
        from gdlookup.cli.main import main
        assert main(["-i", str(install), "ls", "records/items"]) == 0
        assert capsys.readouterr().out == "relic_a.dbr\nrelic_b.dbr\n"

    def test_show_prefers_later_expansion(self, install, capsys, caplog):
        from gdlookup.cli.main import main
        assert main(["-i", str(install), "show", "records/items/relic_a.dbr"]) == 0
        out = capsys.readouterr().out
        assert out.startswith("records/items/relic_a.dbr\n")
        assert "levelRequirement = 65" in out
        assert "showing latest" in caplog.text

    def test_show_restricted_to_base_game(self, install, capsys):
        from gdlookup.cli.main import main
        assert main(["-i", str(install), "-x", "0", "show", "records/items/relic_a.dbr"]) == 0
        assert "levelRequirement = 50" in capsys.readouterr().out

    def test_show_missing_record_exits_1(self, install, capsys):
        from gdlookup.cli.main import main
        assert main(["-i", str(install), "show", "records/none.dbr"]) == 1
        assert "not found: records/none.dbr" in capsys.readouterr().err

    def test_item_exact_name(self, install, capsys):
        from gdlookup.cli.main import main
        assert main(["-i", str(install), "item", "Relic", "of", "the", "Ancients"]) == 0
        assert capsys.readouterr().out == (
            "Relic of the Ancients is referenced in the following database records:\n"
            "  records/items/relic_a.dbr\n"
        )

    def test_item_ambiguous_exits_0(self, install, capsys):
        from gdlookup.cli.main import main
        assert main(["-i", str(install), "item", "Relic"]) == 0
        assert "please disambiguate" in capsys.readouterr().out

    def test_item_no_match_exits_0(self, install, capsys):
        from gdlookup.cli.main import main
        assert main(["-i", str(install), "item", "Nonexistent"]) == 0
        assert "No matching items found" in capsys.readouterr().err

    def test_loot_table(self, install, capsys):
        from gdlookup.cli.main import main
        code = main(["-i", str(install), "loot-table", "-d", "elite", "records/loot/table.dbr"])
        assert code == 0
        assert capsys.readouterr().out == (
            "records/loot/table.dbr\n  Class = LootItemTable_DynWeight\n"
        )

    def test_invalid_xpac_exits_1(self, install, capsys):
        from gdlookup.cli.main import main
        assert main(["-i", str(install), "-x", "7", "ls"]) == 1
        assert "xpac must be 0, 1, 2, or 3" in capsys.readouterr().err

    def test_wrong_install_path_exits_1(self, tmp_path, capsys):
        from gdlookup.cli.main import main
        assert main(["-i", str(tmp_path / "nowhere"), "ls"]) == 1
        assert "Could not read database files" in capsys.readouterr().err

    def test_missing_tag_files_exits_1(self, tmp_path, capsys):
        from gdlookup.cli.main import main
        _write_record(tmp_path, 0, "records/x.dbr", {"Class": "Skill"})
        assert main(["-i", str(tmp_path), "ls"]) == 1
        assert "Could not read tag files" in capsys.readouterr().err

    def test_corrupt_record_exits_1(self, install, capsys):
        from gdlookup.cli.main import main
        bad = pack_layout(0).database_path(install).with_suffix("") / "records/items/bad.dbr"
        bad.write_text("Class,ItemRelic,\nthis line is broken\n", encoding="utf-8")
        assert main(["-i", str(install), "show", "records/items/bad.dbr"]) == 1
        assert "Error parsing database records" in capsys.readouterr().err
