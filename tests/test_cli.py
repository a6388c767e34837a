"""Tests for sitepack.cli — CLI entrypoint and sub-commands."""

import json
from pathlib import Path

import pytest

from sitepack.cli import main


class TestCLIHelp:
    def test_help_exits_zero(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--help"])
        assert exc_info.value.code == 0

    def test_build_help_exits_zero(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["build", "--help"])
        assert exc_info.value.code == 0

    def test_routes_help_exits_zero(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["routes", "--help"])
        assert exc_info.value.code == 0

    def test_bench_help_exits_zero(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["bench", "--help"])
        assert exc_info.value.code == 0


class TestCLIMissingArgs:
    def test_routes_missing_document(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["routes"])
        assert exc_info.value.code == 2

    def test_bench_bad_iterations(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["bench", "--iterations", "many"])
        assert exc_info.value.code == 2


class TestCLINoCommand:
    def test_no_command_exits_zero(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 0
        captured = capsys.readouterr()
        assert "sitepack" in captured.out


class TestBuildCommand:
    def test_build(
        self, site_dir: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        output = tmp_path / "bundle.html"
        main(["build", str(site_dir), "-o", str(output), "-q"])
        assert output.is_file()
        captured = capsys.readouterr()
        assert "Bundled 5 routes" in captured.out
        assert "/blog/first-post" in captured.out

    def test_build_options(self, site_dir: Path, tmp_path: Path) -> None:
        output = tmp_path / "bundle.html"
        main(
            [
                "build",
                str(site_dir),
                "-o",
                str(output),
                "--mount-id",
                "app",
                "--no-minify",
                "--no-next-compat",
                "-q",
            ]
        )
        document = output.read_text(encoding="utf-8")
        assert '<div id="app">' in document
        assert "__NEXT_DATA__" not in document
        assert "\n<body" in document

    def test_missing_input(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["build", str(tmp_path / "missing"), "-o", str(tmp_path / "x.html"), "-q"])
        assert exc_info.value.code == 1
        assert "Error:" in capsys.readouterr().err

    def test_missing_index(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        (tmp_path / "about.html").write_text("<html><body>a</body></html>", encoding="utf-8")
        with pytest.raises(SystemExit) as exc_info:
            main(["build", str(tmp_path), "-o", str(tmp_path / "x.html"), "-q"])
        assert exc_info.value.code == 1
        assert "No index route" in capsys.readouterr().err

    def test_invalid_option(
        self, site_dir: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["build", str(site_dir), "-o", str(tmp_path / "x.html"), "--static-prefix", "static"])
        assert exc_info.value.code == 1
        assert "static_prefix" in capsys.readouterr().err


class TestRoutesCommand:
    @pytest.fixture
    def document(self, site_dir: Path, tmp_path: Path) -> Path:
        output = tmp_path / "bundle.html"
        main(["build", str(site_dir), "-o", str(output), "-q"])
        return output

    def test_table(self, document: Path, capsys: pytest.CaptureFixture[str]) -> None:
        capsys.readouterr()
        main(["routes", str(document)])
        out = capsys.readouterr().out
        assert out.splitlines()[0].split() == ["PATH", "TITLE", "BODY"]
        assert "/blog/first-post" in out
        assert "First Post" in out

    def test_json(self, document: Path, capsys: pytest.CaptureFixture[str]) -> None:
        capsys.readouterr()
        main(["routes", str(document), "--json"])
        data = json.loads(capsys.readouterr().out)
        assert set(data) == {"/", "/404", "/about", "/blog", "/blog/first-post"}
        assert set(data["/"]) == {"head", "body"}

    def test_missing_file(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["routes", str(tmp_path / "nope.html")])
        assert exc_info.value.code == 1
        assert "Error:" in capsys.readouterr().err

    def test_not_a_bundle(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        plain = tmp_path / "plain.html"
        plain.write_text("<html></html>", encoding="utf-8")
        with pytest.raises(SystemExit) as exc_info:
            main(["routes", str(plain)])
        assert exc_info.value.code == 1
        assert "ROUTE_MAP_BASE64" in capsys.readouterr().err


class TestBenchCommand:
    def test_bench(self, site_dir: Path, capsys: pytest.CaptureFixture[str]) -> None:
        main(["bench", str(site_dir), "--iterations", "2", "-q"])
        out = capsys.readouterr().out
        assert "Iterations: 2" in out
        assert "Routes:     5" in out

    @pytest.mark.parametrize("iterations", [1, 3])
    def test_bundles_once_per_iteration(
        self,
        site_dir: Path,
        iterations: int,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        from sitepack.cli import _bench

        calls = []
        original = _bench.bundle_site

        def counting(source, config):
            calls.append(source)
            return original(source, config)

        monkeypatch.setattr(_bench, "bundle_site", counting)
        main(["bench", str(site_dir), "--iterations", str(iterations), "-q"])
        out = capsys.readouterr().out
        assert len(calls) == iterations
        assert f"Iterations: {iterations}" in out
        assert "Routes:     5" in out
        assert "Size:" in out

    def test_zero_iterations(self, site_dir: Path, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["bench", str(site_dir), "--iterations", "0"])
        assert exc_info.value.code == 1
        assert "--iterations" in capsys.readouterr().err
