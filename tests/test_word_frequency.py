from adtkit.word_frequency import DELIMITERS, main, tokenize, word_frequencies


def test_tokenize_splits_and_lowercases():
    assert tokenize("Hello, World! 42abc") == ["hello", "world", "abc"]


def test_tokenize_only_delimiters_is_empty():
    assert tokenize(DELIMITERS) == []


def test_tokenize_empty_line():
    assert tokenize("") == []


def test_tokens_contain_no_delimiters():
    tokens = tokenize("a-b_c=d+e(f)g[h]i{j}k|l~m`n!o@p#q$r%s^t&u*v")
    assert all(not set(token) & set(DELIMITERS) for token in tokens)
    assert "".join(tokens) == "abcdefghijklmnopqrstuv"


def test_frequencies_merge_case():
    counts = word_frequencies(["The cat", "the DOG", "THE end"])
    assert counts.get_value("the") == len(["The", "the", "THE"])
    assert "The" not in counts


def test_frequencies_total_equals_token_count():
    lines = ["one two two", "three three three", "", "four, four; four: four"]
    counts = word_frequencies(lines)
    total = sum(value for _, value in counts.items())
    assert total == sum(len(tokenize(line)) for line in lines)


def test_frequencies_keys_sorted_and_lowercase():
    counts = word_frequencies(["Zebra apple Mango banana", "apple ZEBRA"])
    keys = list(counts)
    assert keys == sorted(keys)
    assert all(key == key.lower() for key in keys)


def test_frequencies_tree_stays_balanced():
    lines = [f"word{chr(97 + i % 26)} alpha{chr(97 + i % 7)}" for i in range(60)]
    counts = word_frequencies(lines)
    assert counts.black_height() >= 1
    assert len(counts) == len(set(word for line in lines for word in tokenize(line)))


def test_main_writes_counts(tmp_path):
    source = tmp_path / "in.txt"
    target = tmp_path / "out.txt"
    source.write_text("Red fish\nblue FISH\n", encoding="utf-8")
    assert main([str(source), str(target)]) == 0
    expected = f"{word_frequencies(['Red fish', 'blue FISH'])}\n"
    assert target.read_text(encoding="utf-8") == expected


def test_main_rejects_wrong_argument_count(capsys):
    assert main([]) == 1
    assert "Usage" in capsys.readouterr().err


def test_main_reports_missing_input(tmp_path, capsys):
    missing = tmp_path / "missing.txt"
    assert main([str(missing), str(tmp_path / "out.txt")]) == 1
    assert "Unable to open file" in capsys.readouterr().err