import io

from printlog.printer import print_text


def test_in_file_stream(tmp_path):
    filepath = tmp_path / "file.txt"
    text = "hello"
    with open(filepath, "w") as out:
        print_text(text, out)

    result = filepath.read_text().split()[0]
    assert result == text


def test_defaults_to_stdout(capsys):
    print_text("hello")
    assert capsys.readouterr().out == "hello"


def test_writes_without_newline():
    buffer = io.StringIO()
    print_text("one", buffer)
    print_text("two", buffer)
    assert buffer.getvalue() == "onetwo"


def test_empty_text_writes_nothing():
    buffer = io.StringIO()
    print_text("", buffer)
    assert buffer.getvalue() == ""