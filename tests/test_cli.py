# tests/test_cli.py
import io
import sys
import pytest
from pathlib import Path
from unittest.mock import patch

from domaincloud.cli import get_default_image_name, main, parse_extensions
from domaincloud.errors import RenderError


@pytest.fixture
def sources(tmp_path):
    (tmp_path / "a.c").write_text(
        "/* header */\nint count = 0; // counter\nchar *s = \"text\";\n", encoding="utf-8"
    )
    (tmp_path / "b.c").write_text("count++;\nreturn count;\n", encoding="utf-8")
    return tmp_path


# --- Helpers ---

def test_parse_extensions():
    assert parse_extensions("*") == {"*"}
    assert parse_extensions(".c, .h,") == {".c", ".h"}


def test_default_image_name():
    assert get_default_image_name(["-", "src/my file.c"]) == "my_file_cloud.png"
    assert get_default_image_name(["-"]) == "domain_cloud.png"


# --- Text modes ---

def test_substitute_only_to_file(sources):
    out = sources / "clean.txt"
    main(["-S", "-o", str(out), str(sources / "a.c")])

    assert out.read_text(encoding="utf-8") == " int count = 0; char *s = ; "


def test_substitute_only_from_stdin(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("x = 'y'; // z\n"))
    main(["-S", "-"])

    assert capsys.readouterr().out == "x = ; "


def test_list_with_frequency_over_all_inputs(sources, capsys):
    main(["-l", "freq", str(sources / "a.c"), str(sources / "b.c")])

    assert capsys.readouterr().out == (
        "char [1]\ncount [3]\nint [1]\nreturn [1]\ns [1]\n"
    )


def test_list_from_directory(sources, capsys):
    main(["-l", "alpha", "-e", ".c", str(sources)])

    assert capsys.readouterr().out == "char\ncount\nint\nreturn\ns\n"


def test_missing_input_is_reported_and_skipped(sources, capsys):
    missing = sources / "missing.c"
    main(["-l", "raw", str(missing), str(sources / "b.c")])

    captured = capsys.readouterr()
    assert "missing.c" in captured.err
    assert captured.out == "count\ncount\nreturn\n"


def test_version(capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(["--version"])
    assert exc_info.value.code == 0
    assert "domaincloud" in capsys.readouterr().out


def test_no_inputs_is_an_error():
    with pytest.raises(SystemExit) as exc_info:
        main([])
    assert exc_info.value.code == 2


# --- Word cloud ---

def test_word_cloud_gets_raw_word_list(sources, capsys):
    seen = {}

    def fake_render(text_file, image_file, program, width, height):
        seen["words"] = Path(text_file).read_text(encoding="utf-8")
        seen["text_file"] = Path(text_file)
        seen["args"] = (image_file, program, width, height)

    image = str(sources / "out.png")
    with patch("domaincloud.cli.generate_word_cloud", side_effect=fake_render):
        main(["-o", image, "--width", "640", "--height", "480", str(sources / "b.c")])

    assert seen["words"] == "count\ncount\nreturn\n"
    assert seen["args"] == (image, "wordcloud_cli", 640, 480)
    # Temporary word list is removed afterwards
    assert not seen["text_file"].exists()
    assert "Success!" in capsys.readouterr().out


def test_word_cloud_failure_exits(sources, capsys):
    with patch("domaincloud.cli.generate_word_cloud", side_effect=RenderError("renderer crashed")):
        with pytest.raises(SystemExit) as exc_info:
            main(["-o", str(sources / "out.png"), str(sources / "a.c")])

    assert exc_info.value.code == 1
    assert "renderer crashed" in capsys.readouterr().err


def test_word_cloud_refuses_stdout(sources):
    with pytest.raises(SystemExit) as exc_info:
        main(["-o", "-", str(sources / "a.c")])
    assert exc_info.value.code == 1


def test_out_of_memory_is_fatal(sources, capsys):
    with patch("domaincloud.cli.count_words", side_effect=MemoryError):
        with pytest.raises(SystemExit) as exc_info:
            main(["-l", "alpha", str(sources / "a.c")])

    assert exc_info.value.code == 1
    assert "Out of memory" in capsys.readouterr().err


# --- Output file inside a walked directory ---

def test_substitute_only_output_inside_input_dir(sources):
    out = sources / "clean.txt"
    main(["-S", "-e", "*", "-o", str(out), str(sources)])

    # Only a.c and b.c are read; the output is never fed back in
    assert out.read_text(encoding="utf-8") == (
        " int count = 0; char *s = ; " + "count++; return count; "
    )


def test_list_output_not_counted_on_rerun(tmp_path):
    (tmp_path / "main.c").write_text("alpha\n", encoding="utf-8")
    out = tmp_path / "words.txt"

    main(["-l", "freq", "-o", str(out), str(tmp_path)])
    main(["-l", "freq", "-o", str(out), str(tmp_path)])

    assert out.read_text(encoding="utf-8") == "alpha [1]\n"


def test_output_given_as_explicit_input_is_skipped(sources, capsys):
    out = sources / "words.txt"
    out.write_text("stale\n", encoding="utf-8")

    main(["-l", "alpha", "-o", str(out), str(out), str(sources / "b.c")])

    assert out.read_text(encoding="utf-8") == "count\nreturn\n"
    assert "output file" in capsys.readouterr().err


# --- Bytes that are not UTF-8 ---

def test_substitute_only_keeps_non_utf8_bytes(tmp_path):
    src = tmp_path / "latin1.c"
    src.write_bytes(b"int caf\xe9 = 1; /* \xe9t\xe9 */")
    out = tmp_path / "clean.txt"

    main(["-S", "-o", str(out), str(src)])

    assert out.read_bytes() == b"int caf\xe9 = 1; "


def test_stdin_accepts_non_utf8_bytes(tmp_path, monkeypatch):
    raw = b"x = caf\xe9; // \xff\n"
    monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(raw), encoding="utf-8"))
    out = tmp_path / "clean.txt"

    main(["-S", "-o", str(out), "-"])

    assert out.read_bytes() == b"x = caf\xe9; "


def test_non_utf8_bytes_end_words(tmp_path, capsys):
    src = tmp_path / "latin1.c"
    src.write_bytes(b"caf\xe9 bar")

    main(["-l", "alpha", str(src)])

    assert capsys.readouterr().out == "bar\ncaf\n"


# --- Interrupts ---

def test_cancel_message_stays_off_stdout(sources, capsys):
    with patch("domaincloud.cli.count_words", side_effect=KeyboardInterrupt):
        with pytest.raises(SystemExit) as exc_info:
            main(["-l", "alpha", str(sources / "a.c")])

    captured = capsys.readouterr()
    assert exc_info.value.code == 1
    assert captured.out == ""
    assert "Cancelled." in captured.err
