"""Unit tests for the CLI entrypoint."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest

from flyer_sync.__main__ import main
from flyer_sync.pipeline import PipelineResult


def _make_image(tmp_path: Path, name: str = "flyer.jpg") -> Path:
    image = tmp_path / name
    image.write_bytes(b"\xff\xd8fake")
    return image


class TestCLI:
    """Unit tests for ``flyer_sync.__main__.main``."""

    def test_valid_file_runs_pipeline(
        self, tmp_path: Path, monkeypatch_env: dict[str, str]
    ) -> None:
        image = _make_image(tmp_path)

        with (
            patch(
                "flyer_sync.__main__.run_pipeline",
                return_value=PipelineResult(image_path=image),
            ) as mock_run,
            patch("flyer_sync.__main__.print_pipeline_result") as mock_print,
        ):
            exit_code = main([str(image)])

        assert exit_code == 0
        mock_run.assert_called_once()
        assert mock_run.call_args.args[0] == image
        assert mock_run.call_args.kwargs["dry_run"] is False
        mock_print.assert_called_once()

    def test_dry_run_flag(self, tmp_path: Path, monkeypatch_env: dict[str, str]) -> None:
        image = _make_image(tmp_path)

        with (
            patch(
                "flyer_sync.__main__.run_pipeline",
                return_value=PipelineResult(image_path=image),
            ) as mock_run,
            patch("flyer_sync.__main__.print_pipeline_result"),
        ):
            main([str(image), "--dry-run"])

        assert mock_run.call_args.kwargs["dry_run"] is True

    def test_contacts_override(self, tmp_path: Path, monkeypatch_env: dict[str, str]) -> None:
        image = _make_image(tmp_path)

        with (
            patch(
                "flyer_sync.__main__.run_pipeline",
                return_value=PipelineResult(image_path=image),
            ) as mock_run,
            patch("flyer_sync.__main__.print_pipeline_result"),
        ):
            main([str(image), "--contacts", "people.json"])

        settings = mock_run.call_args.args[1]
        assert settings.contacts_path == Path("people.json")

    def test_verbose_sets_debug(self, tmp_path: Path, monkeypatch_env: dict[str, str]) -> None:
        image = _make_image(tmp_path)

        with (
            patch(
                "flyer_sync.__main__.run_pipeline",
                return_value=PipelineResult(image_path=image),
            ),
            patch("flyer_sync.__main__.print_pipeline_result"),
            patch("flyer_sync.__main__.setup_logging") as mock_logging,
        ):
            main([str(image), "-v"])

        mock_logging.assert_called_once_with("DEBUG")

    def test_missing_file(
        self,
        tmp_path: Path,
        monkeypatch_env: dict[str, str],
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        exit_code = main([str(tmp_path / "nope.jpg")])

        assert exit_code == 1
        assert "File not found" in capsys.readouterr().err

    def test_directory_rejected(
        self,
        tmp_path: Path,
        monkeypatch_env: dict[str, str],
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        assert main([str(tmp_path)]) == 1
        assert "Not a file" in capsys.readouterr().err

    def test_missing_config(
        self, tmp_path: Path, clean_env: None, capsys: pytest.CaptureFixture[str]
    ) -> None:
        image = _make_image(tmp_path)

        assert main([str(image)]) == 1
        assert "GEMINI_API_KEY" in capsys.readouterr().err

    def test_no_arguments_is_usage_error(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 2
