from pathlib import Path
from wordlebot.datasets import validate_wordlists, pretty_summary, read_wordlist


def _write(p: Path, lines):
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")


def test_validate_wordlists_happy_path(tmp_path: Path):
    sol = tmp_path / "solutions.txt"
    words = tmp_path / "words.txt"
    _write(sol, ["crane", "raise", "stare"])
    _write(words, ["crane", "raise", "stare", "trace", "cared"])

    rep = validate_wordlists(5, str(sol), str(words))
    assert rep["passed"] is True
    assert rep["solutions_subset_words"] is True
    assert rep["universe"] == 5
    s = pretty_summary(rep)
    assert "N=5" in s and "solutions⊆words=True" in s and s.endswith("OK")


def test_validate_wordlists_flags_errors(tmp_path: Path):
    # N mismatch and invalid chars should be flagged; blanks are tolerated
    sol = tmp_path / "solutions.txt"
    words = tmp_path / "words.txt"
    sol.write_text("raiser\ncrane\n\n???\n", encoding="utf-8")
    words.write_text("raiser\nplanet\npalate\nplanet\n", encoding="utf-8")

    rep = validate_wordlists(6, str(sol), str(words))
    assert rep["passed"] is False
    assert rep["solutions"]["invalid_lines"] == 2
    assert rep["solutions"]["invalid_examples"] == [2, 4]
    assert rep["solutions"]["blank_lines"] == 1
    assert any("invalid" in msg for msg in rep["issues"])
    assert any("duplicate" in msg for msg in rep["issues"])


def test_validate_wordlists_subset_violation(tmp_path: Path):
    sol = tmp_path / "solutions.txt"
    words = tmp_path / "words.txt"
    _write(sol, ["crane", "raise", "stare"])
    _write(words, ["crane", "stare"])  # missing 'raise'

    rep = validate_wordlists(5, str(sol), str(words))
    assert rep["passed"] is False
    assert rep["solutions_subset_words"] is False
    assert any("subset" in msg and "raise" in msg for msg in rep["issues"])


def test_validate_wordlists_missing_file(tmp_path: Path):
    words = tmp_path / "words.txt"
    _write(words, ["crane"])
    rep = validate_wordlists(5, str(tmp_path / "nope.txt"), str(words))
    assert rep["passed"] is False
    assert any("not found" in msg for msg in rep["issues"])
    assert "FAIL" in pretty_summary(rep)


def test_read_wordlist_drops_blanks(tmp_path: Path):
    p = tmp_path / "words.txt"
    p.write_text("Crane\r\n\n  slate \n", encoding="utf-8")
    assert read_wordlist(p) == ["crane", "slate"]


def test_undecodable_line_counts_as_invalid(tmp_path: Path):
    sol = tmp_path / "solutions.txt"
    words = tmp_path / "words.txt"
    _write(sol, ["crane"])
    words.write_bytes(b"crane\n\xff\xfeabc\nslate\n")

    rep = validate_wordlists(5, str(sol), str(words))
    assert rep["passed"] is False
    assert rep["words"]["invalid_lines"] == 1
    assert rep["words"]["invalid_examples"] == [2]
    assert rep["words"]["unique"] == 2
