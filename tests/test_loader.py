import logging
from pathlib import Path

import pytest

from blendsim.loader import load_mix, parse_mix_lines
from blendsim.mix import Mix


class TestParseMixLines:
    def test_one_value_per_line(self) -> None:
        m = parse_mix_lines(["0.5\n", "", "  0.25 ", "0.25"])
        assert m == Mix.of(0.5, 0.25, 0.25)

    def test_bad_line_reports_line_number(self) -> None:
        with pytest.raises(ValueError, match="line 2"):
            parse_mix_lines(["0.5", "merlot"])

    @pytest.mark.parametrize("bad", ["nan", "inf", "-inf"])
    def test_non_finite_line_reports_line_number(self, bad: str) -> None:
        with pytest.raises(ValueError, match="line 3"):
            parse_mix_lines(["0.5", "", bad])

    def test_empty_input(self) -> None:
        with pytest.raises(ValueError, match="empty"):
            parse_mix_lines(["", "  "])


class TestLoadMix:
    def test_load_from_file(self, tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
        p = tmp_path / "target.txt"
        p.write_text("0.6\n0.3\n0.1\n", encoding="utf-8")

        with caplog.at_level(logging.INFO, logger="blendsim.loader"):
            m = load_mix(p)

        assert m.isclose(Mix.of(0.6, 0.3, 0.1))
        assert "3 components" in caplog.text

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_mix(tmp_path / "nope.txt")
