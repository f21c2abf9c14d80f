"""Tests for the search-params CLI."""

import io
import os
from unittest.mock import patch

import pytest

from search_params.cli import main


@pytest.fixture(autouse=True)
def _isolated_env():
    with (
        patch("search_params.cli.dotenv.load_dotenv"),
        patch.dict(os.environ, {}, clear=True),
    ):
        yield


class TestMain:
    def test_prints_query_unchanged(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["?a=1&b=2"])
        assert capsys.readouterr().out == "a=1&b=2\n"

    def test_applies_operations(self, capsys: pytest.CaptureFixture[str]) -> None:
        main([
            "a=1&b=2&c=3",
            "--remove", "a",
            "--add", "d=4",
            "--set", "b=x y",
        ])
        assert capsys.readouterr().out == "b=x+y&c=3&d=4\n"

    def test_removes_before_adding(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["a=1", "--add", "a=2", "--remove", "a"])
        assert capsys.readouterr().out == "a=2\n"

    def test_value_may_contain_equals(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["", "--add", "k=a=b"])
        assert capsys.readouterr().out == "k=a%3Db\n"

    def test_reads_query_from_stdin(
        self, capsys: pytest.CaptureFixture[str], monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.setattr("sys.stdin", io.StringIO("?a=1\n"))
        main(["--add", "b=2"])
        assert capsys.readouterr().out == "a=1&b=2\n"

    def test_rejects_malformed_pair(self) -> None:
        with pytest.raises(SystemExit) as exc:
            main(["a=1", "--add", "novalue"])
        assert exc.value.code == 2


class TestReadOutput:
    def test_get_prints_first_values(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["a=1&a=2&b=", "--get", "a", "--get", "b", "--get", "c"])
        assert capsys.readouterr().out == "a=1\nb=\nc\n"

    def test_all_prints_every_key(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["a=1&b=2&a=3", "--all"])
        assert capsys.readouterr().out == "a=1\nb=2\n"


class TestPrefix:
    def test_flag(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["a=1", "--prefix"])
        assert capsys.readouterr().out == "?a=1\n"

    @pytest.mark.parametrize("value", ["1", "true", "YES", "on"])
    def test_env_enables_prefix(
        self, value: str, capsys: pytest.CaptureFixture[str],
    ) -> None:
        os.environ["SEARCH_PARAMS_PREFIX"] = value
        main(["a=1"])
        assert capsys.readouterr().out == "?a=1\n"

    def test_env_false_leaves_plain(self, capsys: pytest.CaptureFixture[str]) -> None:
        os.environ["SEARCH_PARAMS_PREFIX"] = "0"
        main(["a=1"])
        assert capsys.readouterr().out == "a=1\n"

    def test_loads_env_file(self) -> None:
        with patch("search_params.cli.dotenv.load_dotenv") as mock_load:
            main(["a=1"])
        mock_load.assert_called_once()
