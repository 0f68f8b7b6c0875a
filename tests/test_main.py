"""Tests for the command line entry point."""

from main import main


class TestParseCommand:
    """Tests for `main.py parse`."""

    def test_valid_key(self, capsys):
        assert main(["parse", "RuCrSgWw:Rr------"]) == 0
        out = capsys.readouterr().out
        assert "Normalized: RuCrSgWw:Rr------" in out
        assert "Layers: 2" in out
        assert "Layer 1: Rr------\nLayer 0: RuCrSgWw" in out

    def test_verbose(self, capsys):
        assert main(["parse", "-v", "Cr------"]) == 0
        assert "Layer 0: Circle/Red, -, -, -" in capsys.readouterr().out

    def test_invalid_key(self, capsys):
        assert main(["parse", "XzCw----"]) == 1
        err = capsys.readouterr().err
        assert 'Error: Invalid sub-shape "X" in 1st layer, 1st quad' in err
        assert 'Error: Invalid color "z" in 1st layer, 1st quad' in err

    def test_empty_key(self, capsys):
        assert main(["parse", ""]) == 1
        assert "Error: Empty input" in capsys.readouterr().err


class TestCheckCommand:
    """Tests for `main.py check`."""

    def test_all_valid(self, capsys):
        assert main(["check", "CuCuCuCu", "Rr------:Sg------"]) == 0
        out = capsys.readouterr().out
        assert "OK       CuCuCuCu" in out
        assert "OK       Rr------:Sg------" in out

    def test_some_invalid(self, capsys):
        assert main(["check", "CuCuCuCu", "Cu------:--------"]) == 1
        out = capsys.readouterr().out
        assert "INVALID  Cu------:--------" in out
        assert "  - 2nd layer is empty" in out


def test_no_command(capsys):
    assert main([]) == 0
    assert "usage" in capsys.readouterr().out
