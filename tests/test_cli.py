"""Tests for render settings and the command-line entry point."""

import logging

import pytest

from pathtracer.cli import main, parse_args, render_scene, settings_from_args
from pathtracer.config import (
    DEFAULT_OUTPUT,
    DEFAULT_SAMPLE_BUDGET,
    RenderSettings,
    parse_sample_budget,
)
from pathtracer.core.sampler import RandomSampler, StratifiedTentSampler


class TestParseSampleBudget:
    """Tests for the sample budget argument."""

    def test_missing_uses_default(self):
        assert parse_sample_budget(None) == DEFAULT_SAMPLE_BUDGET == 40

    def test_valid(self):
        assert parse_sample_budget("100") == 100

    @pytest.mark.parametrize("text", ["abc", "1.5", "", "0", "-8"])
    def test_invalid_falls_back(self, text, caplog):
        with caplog.at_level(logging.WARNING, logger="pathtracer.config"):
            assert parse_sample_budget(text) == DEFAULT_SAMPLE_BUDGET
        assert "using default" in caplog.text


class TestRenderSettings:
    """Tests for settings validation."""

    def test_defaults(self):
        settings = RenderSettings()
        assert (settings.width, settings.height) == (1024, 768)
        assert settings.sample_budget == 40
        assert settings.seed == 1234
        assert settings.output == DEFAULT_OUTPUT == "image.bmp"

    def test_unknown_sampler(self):
        with pytest.raises(ValueError, match="Unknown sampler"):
            RenderSettings(sampler="sobol")

    def test_bad_dimensions(self):
        with pytest.raises(ValueError, match="dimensions"):
            RenderSettings(width=0)

    def test_create_sampler(self):
        tent = RenderSettings(sample_budget=8).create_sampler()
        assert isinstance(tent, StratifiedTentSampler)
        assert tent.requested_samples == 2
        random = RenderSettings(sample_budget=8, sampler="random").create_sampler()
        assert isinstance(random, RandomSampler)
        assert random.samples_per_pixel == 8


class TestParseArgs:
    """Tests for argument parsing."""

    def test_defaults(self):
        settings = settings_from_args(parse_args([]))
        assert settings.sample_budget == DEFAULT_SAMPLE_BUDGET
        assert settings.sampler == "tent"
        assert settings.workers is None

    def test_all_options(self):
        args = parse_args(
            ["12", "--output", "out.bmp", "--seed", "5", "--workers", "3",
             "--sampler", "random", "--quiet"]
        )
        assert args.quiet
        settings = settings_from_args(args)
        assert settings.sample_budget == 12
        assert settings.output == "out.bmp"
        assert settings.seed == 5
        assert settings.workers == 3
        assert settings.sampler == "random"

    def test_invalid_samples_do_not_fail(self):
        settings = settings_from_args(parse_args(["lots"]))
        assert settings.sample_budget == DEFAULT_SAMPLE_BUDGET

    def test_unknown_sampler_rejected(self):
        with pytest.raises(SystemExit):
            parse_args(["--sampler", "sobol"])


class TestRenderScene:
    """Tests for rendering through the command-line helpers."""

    def test_writes_bitmap(self, tmp_path, capsys):
        output = tmp_path / "cornell.bmp"
        settings = RenderSettings(width=8, height=6, sample_budget=4, output=str(output))
        path = render_scene(settings)
        assert path == output
        assert output.read_bytes()[:2] == b"BM"
        assert "Rendering (4 spp) 100.00%" in capsys.readouterr().err

    def test_quiet_prints_nothing(self, tmp_path, capsys):
        settings = RenderSettings(width=8, height=6, sample_budget=1, output=str(tmp_path / "q.bmp"))
        render_scene(settings, quiet=True)
        assert capsys.readouterr().err == ""

    def test_main_reports_errors(self, tmp_path, capsys):
        # Zero workers is rejected before any rendering starts
        code = main(["1", "--quiet", "--output", str(tmp_path / "x.bmp"), "--workers", "0"])
        assert code == 1
        assert "Error:" in capsys.readouterr().err
