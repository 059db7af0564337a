from pocketalgo.huffman_cli import main, parse_options


def test_parse_options_groups_values():
    assert parse_options(["-c", "a", "b", "-o", "x"]) == {"-c": ["a", "b"], "-o": ["x"]}


def test_parse_options_leading_values_go_under_empty_key():
    assert parse_options(["lead", "-x", "f"]) == {"": ["lead"], "-x": ["f"]}


def test_parse_options_option_without_values():
    assert parse_options(["-x"]) == {"-x": []}


def test_no_mode_prints_manual(capsys):
    assert main([]) == 0
    assert "Welcome to Huffman encoding user manual" in capsys.readouterr().out


def test_both_modes_print_manual(capsys):
    assert main(["-c", "a", "-x", "b"]) == 0
    assert "You may use only one mode at a time." in capsys.readouterr().out


def test_compress_then_extract_with_default_names(tmp_path):
    original = b"abracadabra " * 40
    source = tmp_path / "data.txt"
    source.write_bytes(original)

    assert main(["-c", str(source)]) == 0
    packed = tmp_path / "data.txt.huff"
    assert packed.exists()

    assert main(["-x", str(packed)]) == 0
    assert (tmp_path / "data.txt.huff.dehuff").read_bytes() == original


def test_explicit_output_paths(tmp_path):
    first = tmp_path / "one"
    second = tmp_path / "two"
    first.write_bytes(b"first file")
    second.write_bytes(b"second file, longer")
    out_one = tmp_path / "one.pack"
    out_two = tmp_path / "two.pack"

    assert main(["-c", str(first), str(second), "-o", str(out_one), str(out_two)]) == 0

    back_one = tmp_path / "one.back"
    back_two = tmp_path / "two.back"
    assert main(["-x", str(out_one), str(out_two), "-o", str(back_one), str(back_two)]) == 0
    assert back_one.read_bytes() == b"first file"
    assert back_two.read_bytes() == b"second file, longer"


def test_fewer_outputs_than_inputs_falls_back_to_default(tmp_path):
    first = tmp_path / "a"
    second = tmp_path / "b"
    first.write_bytes(b"aaa")
    second.write_bytes(b"bbb")
    named = tmp_path / "named"
    assert main(["-c", str(first), str(second), "-o", str(named)]) == 0
    assert named.exists()
    assert (tmp_path / "b.huff").exists()


def test_missing_input_fails(tmp_path, capsys):
    missing = tmp_path / "absent"
    assert main(["-c", str(missing)]) == 1
    assert "Failed to open input file" in capsys.readouterr().err


def test_corrupt_input_fails(tmp_path, capsys):
    broken = tmp_path / "broken.huff"
    broken.write_bytes(b"")
    assert main(["-x", str(broken)]) == 1
    assert "Failed to process" in capsys.readouterr().err