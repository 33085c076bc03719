from wordtally.cli import main


def _lines(text):
    return [line.split(" ") for line in text.splitlines()]


def test_no_arguments(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == "No Arguments Passed\n"


def test_single_file(tmp_path, capsys):
    path = tmp_path / "words.md"
    path.write_text("b a b")
    assert main([str(path)]) == 0
    assert capsys.readouterr().out == "b 2\na 1\n"


def test_directory_and_file_combined(tmp_path, capsys):
    (tmp_path / "one.txt").write_text("red green red")
    (tmp_path / "skip.log").write_text("red red red")
    extra = tmp_path / "extra.dat"
    extra.write_text("green blue")
    assert main([str(tmp_path), str(extra)]) == 0
    lines = _lines(capsys.readouterr().out)
    counts = {word: int(n) for word, n in lines}
    assert counts == {"red": 2, "green": 2, "blue": 1}
    numbers = [int(n) for _, n in lines]
    assert numbers == sorted(numbers, reverse=True)


def test_missing_path_reported(tmp_path, capsys):
    missing = tmp_path / "absent"
    good = tmp_path / "ok.txt"
    good.write_text("word")
    assert main([str(missing), str(good)]) == 0
    captured = capsys.readouterr()
    assert str(missing) in captured.err
    assert captured.out == "-1word 1\n"


def test_empty_file_prints_nothing(tmp_path, capsys):
    path = tmp_path / "empty.txt"
    path.write_text("123 ... ---")
    assert main([str(path)]) == 0
    assert capsys.readouterr().out == ""