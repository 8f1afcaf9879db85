import pytest

from src.cli import main


def _projection_years(out: str) -> list[int]:
    table = out.split("Projections", 1)[1]
    return [int(line.split()[0]) for line in table.splitlines() if line.strip()[:1].isdigit()]


class TestCLI:
    def test_ltr_run(self, capsys):
        assert main(["ltr", "--purchase-price", "250000", "--monthly-rent", "2000"]) == 0
        out = capsys.readouterr().out

        assert "LTR Pro Forma" in out
        assert "Mortgage Payment:     $1,330.60/mo" in out
        assert "Monthly Revenue" not in out
        assert _projection_years(out) == list(range(1, 31))

    def test_str_run(self, capsys):
        assert main(["str", "--years", "5"]) == 0
        out = capsys.readouterr().out

        assert "STR Pro Forma" in out
        assert "Gross Income:         $36,241/yr" in out
        assert "Vacancy Loss:         $0/yr" in out
        assert "Monthly Revenue" in out
        assert _projection_years(out) == [1, 2, 3, 4, 5]

    def test_rate_mode_seasonality(self, capsys):
        argv = [
            "str",
            "--avg-daily-rate", "999",
            "--occupancy-rate-pct", "50",
            "--seasonality", *["100"] * 12,
            "--seasonality-mode", "rate",
        ]
        assert main(argv) == 0
        assert "Gross Income:         $18,250/yr" in capsys.readouterr().out

    def test_invalid_scenario(self, capsys):
        assert main(["ltr", "--down-payment-pct", "250"]) == 2
        captured = capsys.readouterr()
        assert "Invalid scenario" in captured.err
        assert captured.out == ""

    @pytest.mark.parametrize("years", ["0", "-3", "51", "ten"])
    def test_years_out_of_range(self, capsys, years):
        with pytest.raises(SystemExit) as exc:
            main(["ltr", "--years", years])
        assert exc.value.code == 2
        assert "--years" in capsys.readouterr().err
