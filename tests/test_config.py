"""Tests for speechscore.config module."""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml

from speechscore.config import (
    CONFIG_FILENAME,
    ScoringWeights,
    SpeechScoreConfig,
    create_default_config,
    find_config,
    load_config,
    write_config,
)
from speechscore.exceptions import ConfigError
from speechscore.lexicon import DEFAULT_FILLERS


class TestScoringWeights:
    def test_default_weights_sum_to_one(self) -> None:
        weights = ScoringWeights()
        total = (
            weights.wpm + weights.filler + weights.vocabulary + weights.clarity + weights.confidence
        )
        assert abs(total - 1.0) < 0.01

    def test_default_values(self) -> None:
        weights = ScoringWeights()
        assert weights.wpm == 0.25
        assert weights.confidence == 0.15

    def test_custom_weights(self) -> None:
        weights = ScoringWeights(wpm=0.2, filler=0.2, vocabulary=0.2, clarity=0.2, confidence=0.2)
        assert weights.wpm == 0.2

    def test_bad_total_raises(self) -> None:
        with pytest.raises(ValueError):
            ScoringWeights(wpm=0.5)

    def test_negative_weight_raises(self) -> None:
        with pytest.raises(ValueError):
            ScoringWeights(wpm=-0.1, filler=0.55)


class TestSpeechScoreConfig:
    def test_default_config(self) -> None:
        config = SpeechScoreConfig()
        assert config.filler_words == list(DEFAULT_FILLERS)
        assert config.enrichment == "none"
        assert config.privacy_mode == "local"
        assert config.llm_timeout == 20
        assert config.llm_backend == "ollama"
        assert config.llm_model == "llama3.1"

    def test_filler_words_normalized(self) -> None:
        config = SpeechScoreConfig(filler_words=["UM", "  You   Know ", "um", ""])
        assert config.filler_words == ["um", "you know"]

    def test_empty_filler_words_raises(self) -> None:
        with pytest.raises(ValueError):
            SpeechScoreConfig(filler_words=[" "])

    def test_invalid_enrichment_raises(self) -> None:
        with pytest.raises(ValueError):
            SpeechScoreConfig(enrichment="magic")

    def test_invalid_privacy_mode_raises(self) -> None:
        with pytest.raises(ValueError):
            SpeechScoreConfig(privacy_mode="invalid")

    def test_invalid_llm_backend_raises(self) -> None:
        with pytest.raises(ValueError):
            SpeechScoreConfig(llm_backend="invalid")

    def test_non_positive_timeout_raises(self) -> None:
        with pytest.raises(ValueError):
            SpeechScoreConfig(llm_timeout=0)


class TestLoadConfig:
    def test_load_from_directory(self, config_dir: Path) -> None:
        config = load_config(config_dir)
        assert config.filler_words == ["um", "uh", "you know"]
        assert config.enrichment == "lexicon"

    def test_load_from_file(self, config_dir: Path) -> None:
        config = load_config(config_dir / CONFIG_FILENAME)
        assert config.enrichment == "lexicon"

    def test_missing_explicit_path_raises(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path)

    def test_defaults_when_nothing_found(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.chdir(tmp_path)
        assert load_config() == SpeechScoreConfig()

    def test_search_finds_parent_config(
        self, config_dir: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        nested = config_dir / "talks" / "2024"
        nested.mkdir(parents=True)
        monkeypatch.chdir(nested)
        assert load_config().enrichment == "lexicon"

    def test_empty_file_gives_defaults(self, tmp_path: Path) -> None:
        (tmp_path / CONFIG_FILENAME).write_text("")
        assert load_config(tmp_path) == SpeechScoreConfig()

    def test_invalid_yaml_raises(self, tmp_path: Path) -> None:
        (tmp_path / CONFIG_FILENAME).write_text("filler_words: [um, uh\n")
        with pytest.raises(ConfigError):
            load_config(tmp_path)

    def test_non_mapping_raises(self, tmp_path: Path) -> None:
        (tmp_path / CONFIG_FILENAME).write_text("- um\n- uh\n")
        with pytest.raises(ConfigError):
            load_config(tmp_path)

    def test_invalid_values_raise(self, tmp_path: Path) -> None:
        (tmp_path / CONFIG_FILENAME).write_text(yaml.dump({"weights": {"wpm": 0.9}}))
        with pytest.raises(ConfigError, match="Weights must sum"):
            load_config(tmp_path)


class TestFindConfig:
    def test_not_found(self, tmp_path: Path) -> None:
        assert find_config(tmp_path) is None

    def test_found_in_start(self, config_dir: Path) -> None:
        assert find_config(config_dir) == (config_dir / CONFIG_FILENAME).resolve()


class TestWriteConfig:
    def test_default_round_trip(self, tmp_path: Path) -> None:
        path = tmp_path / "sub" / CONFIG_FILENAME
        write_config(create_default_config(), path)
        assert path.exists()
        assert load_config(path) == SpeechScoreConfig()

    def test_written_yaml_is_readable(self, tmp_path: Path) -> None:
        path = tmp_path / CONFIG_FILENAME
        write_config(create_default_config(), path)
        data = yaml.safe_load(path.read_text())
        assert data["weights"]["wpm"] == 0.25
        assert "um" in data["filler_words"]
