# printlog

A small library that writes text to a stream. It also has a command that
appends words read from standard input to a log file.

## Installation

```
pip install printlog
```

## Library use

`printlog.printer.print_text(text, out=None)` writes `text` to the text
stream `out` exactly as given and adds no newline. If `out` is left out,
the text goes to standard output:

```python
import sys
from printlog.printer import print_text

print_text("hello")              # standard output
print_text("hello", sys.stderr)

with open("log.txt", "w") as out:
    print_text("hello", out)
```

`printlog.demo.append_words(words, log_path)` appends each word to the file
at `log_path`, one word per line. The file is opened again in append mode
for every word:

```python
from printlog.demo import append_words

append_words(["first", "second"], "words.log")
```

`printlog.examples` holds two short examples:

- `example1()` prints `hello` to standard output.
- `example2(path="log.txt")` writes `hello` to the file at `path` and
  replaces whatever the file held before.

## Command line

`printlog-demo` reads whitespace-separated words from standard input. It
appends each word on its own line to the file named by the `LOG_PATH`
environment variable:

```
echo "alpha beta gamma" | LOG_PATH=words.log printlog-demo
```

If `LOG_PATH` is not set, the command prints
`undefined environment variable: LOG_PATH` to standard error and exits
with status 1. On success it exits with status 0.

## Running the tests

```
pip install "printlog[test]"
pytest
```