# Test the command line analyzer
import json

from ..cli import main
from .conftest import make_image_bytes


class TestAnalyzeCommand:
    def test_prints_analysis(self, tmp_path, capsys):
        image_path = tmp_path / "login.png"
        image_path.write_bytes(make_image_bytes((255, 255, 255)))

        assert main([str(image_path), "--seed", "1"]) == 0

        result = json.loads(capsys.readouterr().out)
        assert result["id"] == 1
        assert 0 <= result["confidenceScore"] <= 100
        assert result["identifiedWebsite"] in {
            "Facebook",
            "Google",
            "Amazon",
            "Microsoft",
            "Apple",
        }

    def test_same_seed_same_output(self, tmp_path, capsys):
        image_path = tmp_path / "login.png"
        image_path.write_bytes(make_image_bytes((66, 133, 244)))

        main([str(image_path), "--seed", "3"])
        first = json.loads(capsys.readouterr().out)
        main([str(image_path), "--seed", "3"])
        second = json.loads(capsys.readouterr().out)

        assert first["analysisFactors"] == second["analysisFactors"]

    def test_missing_file(self, tmp_path):
        assert main([str(tmp_path / "missing.png")]) == 1

    def test_corrupt_file(self, tmp_path):
        image_path = tmp_path / "broken.png"
        image_path.write_bytes(b"broken")

        assert main([str(image_path)]) == 1
