"""Tests for the goto-critic command line."""

import pytest

from gotocritic.cli import main


def run(argv):
    with pytest.raises(SystemExit) as exc:
        main(argv)
    return exc.value.code


class TestCli:
    def test_violation_exits_1(self, fixtures_dir, capsys):
        assert run([str(fixtures_dir / "goto_into_block.yaml")]) == 1
        out = capsys.readouterr().out
        assert "Do not enter a block via a goto at line 5, column 5." in out
        assert "(Severity: 4)" in out

    def test_clean_exits_0(self, fixtures_dir, capsys):
        path = fixtures_dir / "same_scope.json"
        assert run([str(path)]) == 0
        assert f"{path} source OK" in capsys.readouterr().out

    def test_verbose_level(self, fixtures_dir, capsys):
        assert run(["--verbose", "1", str(fixtures_dir / "goto_into_block.yaml")]) == 1
        assert capsys.readouterr().out == "lib/Jumpy.pm:5:5:Do not enter a block via a goto\n"

    def test_custom_format(self, fixtures_dir, capsys):
        assert run(["--verbose", r"%p\n", str(fixtures_dir / "goto_into_block.yaml")]) == 1
        assert capsys.readouterr().out == "ControlStructures::ProhibitGotoIntoBlock\n"

    def test_severity_flag(self, fixtures_dir):
        assert run(["--severity", "gentle", str(fixtures_dir / "goto_into_block.yaml")]) == 0

    def test_theme_flag(self, fixtures_dir):
        assert run(["--theme", "core", str(fixtures_dir / "goto_into_block.yaml")]) == 0
        assert run(["--theme", "bugs", str(fixtures_dir / "goto_into_block.yaml")]) == 1

    def test_repeated_theme_flag(self, fixtures_dir):
        tree = str(fixtures_dir / "goto_into_block.yaml")
        assert run(["--theme", "bugs", "--theme", "trw", tree]) == 1
        assert run(["--theme", "bugs", "--theme", "core", tree]) == 0

    def test_profile(self, fixtures_dir):
        assert run(["--profile", str(fixtures_dir / "strict.yaml"), str(fixtures_dir / "goto_into_block.yaml")]) == 0

    def test_bad_tree_exits_2_but_checks_the_rest(self, fixtures_dir, capsys):
        code = run([str(fixtures_dir / "broken.yaml"), str(fixtures_dir / "goto_into_block.yaml")])
        assert code == 2
        captured = capsys.readouterr()
        assert "unknown element kind" in captured.err
        assert "Do not enter a block via a goto" in captured.out

    def test_bad_profile_exits_2(self, tmp_path, fixtures_dir, capsys):
        profile = tmp_path / "bad.yaml"
        profile.write_text("policies:\n  Nope::Nope: {}\n")
        assert run(["--profile", str(profile), str(fixtures_dir / "same_scope.json")]) == 2
        assert "unknown policy" in capsys.readouterr().err

    def test_bad_severity_is_usage_error(self, fixtures_dir):
        assert run(["--severity", "loud", str(fixtures_dir / "same_scope.json")]) == 2

    def test_statistics(self, fixtures_dir, capsys):
        run(["--statistics", str(fixtures_dir / "goto_into_block.yaml"), str(fixtures_dir / "same_scope.json")])
        out = capsys.readouterr().out
        assert "2 files." in out
        assert "1 violations." in out
