import sys
import os
import json

import numpy as np
import pandas as pd
from typer.testing import CliRunner

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from dmsangle.cli import app

runner = CliRunner()


class TestCli:

    def test_version(self):
        result = runner.invoke(app, ["version"])
        assert result.exit_code == 0
        assert "dmsangle 0.1.0" in result.stdout

    def test_to_decimal(self):
        result = runner.invoke(app, ["to-decimal", "45 30 15"])
        assert result.exit_code == 0
        np.testing.assert_allclose(float(result.stdout.strip()), 45.504166666666667, rtol=1e-12)

    def test_to_decimal_negative(self):
        result = runner.invoke(app, ["to-decimal", "--", "-10 0 0"])
        assert result.exit_code == 0
        assert result.stdout.strip() == "-10.0"

    def test_to_decimal_rejects_ambiguous_sign(self):
        result = runner.invoke(app, ["to-decimal", "12-34-56"])
        assert result.exit_code == 1

    def test_to_dms_rollover(self):
        result = runner.invoke(app, ["to-dms", "35.999999999"])
        assert result.exit_code == 0
        assert result.stdout.strip() == "36°0'0\""

    def test_to_dms_digits_and_sign(self):
        result = runner.invoke(app, ["to-dms", "--digits", "1", "--", "-0.0125"])
        assert result.exit_code == 0
        assert result.stdout.strip() == "-0°0'45.0\""

    def test_inspect(self):
        result = runner.invoke(app, ["inspect", "45 30 15"])
        assert result.exit_code == 0
        record = json.loads(result.stdout)
        assert record["text"] == "45°30'15\""
        assert record["degrees"] == 45.0
        assert record["minutes"] == 30.0
        assert record["seconds"] == 15.0
        assert record["sign"] == 1

    def test_inspect_decimal(self):
        result = runner.invoke(app, ["inspect", "--digits", "2", "12.25"])
        assert result.exit_code == 0
        assert json.loads(result.stdout)["text"] == "12°15'0.00\""

    def test_inspect_unreadable(self):
        result = runner.invoke(app, ["inspect", "junk"])
        assert result.exit_code == 1

    def test_convert_csv_to_file(self, tmp_path):
        src = tmp_path / "in.csv"
        dst = tmp_path / "out.csv"
        pd.DataFrame({"Point": ["P1", "P2"], "Lat": ["-33.5", "12.25"]}).to_csv(src, index=False)

        result = runner.invoke(app, ["convert-csv", str(src), "--column", "Lat", "--output", str(dst)])
        assert result.exit_code == 0
        out = pd.read_csv(dst, dtype=str)
        assert list(out["Lat_dms"]) == ["-33°30'0\"", "12°15'0\""]

    def test_convert_csv_to_stdout(self, tmp_path):
        src = tmp_path / "in.csv"
        pd.DataFrame({"Point": ["P1"], "Lat": ["-10 30 0"]}).to_csv(src, index=False)

        result = runner.invoke(app, ["convert-csv", str(src), "-c", "Lat", "--to", "decimal"])
        assert result.exit_code == 0
        assert "Lat_decimal" in result.stdout
        assert "-10.5" in result.stdout

    def test_convert_csv_unknown_column(self, tmp_path):
        src = tmp_path / "in.csv"
        pd.DataFrame({"Point": ["P1"], "Lat": ["1.0"]}).to_csv(src, index=False)

        result = runner.invoke(app, ["convert-csv", str(src), "--column", "Lon"])
        assert result.exit_code == 1
