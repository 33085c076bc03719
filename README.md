# wordtally

`wordtally` counts how often each word appears in text files. It then prints
the words from most to least frequent.

## Installation

```
pip install .
```

## Usage

```
wordtally FILE_OR_DIRECTORY [FILE_OR_DIRECTORY ...]
```

Each argument can be a regular file or a directory.

- A regular file named on the command line is read, whatever its name.
- A directory is searched recursively. Only regular files whose names end in
  `.txt` are read. Entries whose names begin with `.` are skipped.
- Entries inside a directory that cannot be listed or examined are reported on
  standard error and skipped.

If an argument cannot be examined, the error is reported on standard error and
`-1` is written to standard output. No newline follows it. The argument is then
skipped.

If a file cannot be opened or read, the error is reported and the command
exits with status 1. Nothing is printed in that case.

If no arguments are given, `No Arguments Passed` is printed.

The output has one line per word. Each line holds the word followed by its
count:

```
the 12
and 7
it's 3
```

### Output order

Words are grouped by their first character:

- apostrophe
- each uppercase letter
- each lowercase letter

Within a group, words are ordered by count, highest first. Equal counts are
ordered with the alphabetically later word first.

At each step of the output, the first word of every group is compared. The one
with the highest count is printed next. If counts are equal, the word from the
later group wins. The groups rank in this order, later first:

1. lowercase letters, `z` down to `a`
2. uppercase letters, `Z` down to `A`
3. apostrophe

## What counts as a word

- A word is a run of ASCII letters (`A`–`Z`, `a`–`z`) and apostrophes (`'`).
- A single dash inside a word is kept, so `well-known` is one word.
- Two dashes in a row end the word.
- A dash at the end of a word is dropped.
- Dashes before a word are ignored.
- Any other byte ends the word. That includes digits, whitespace, punctuation
  and non-ASCII bytes.
- Case is significant, so `The` and `the` are counted separately.

## Library use

```python
from wordtally.counter import WordCounter, format_counts
from wordtally.processor import process_directory, process_file, tokenize

counter = WordCounter()
for word in tokenize([b"the cat and the hat"]):
    counter.add(word)
process_file("notes.txt", counter)      # raises OSError if unreadable
process_directory("docs", counter)

print(format_counts(counter.drain()), end="")
```

- `tokenize(chunks)` takes an iterable of `bytes` or `str` chunks and yields
  words. A word may span chunk boundaries.
- `WordCounter.add(word)` counts one occurrence of a word. Words that do not
  start with a letter or an apostrophe are ignored.
- `WordCounter.bucket(index)` returns the entries of one group, from 0 to 52.
  It raises `IndexError` for any other index.
- `len(counter)` is the number of distinct words.
- `WordCounter.drain()` yields `(word, count)` pairs in output order and
  empties the counter.
- `format_counts(pairs)` renders pairs as `word count` lines.
- `bucket_index(word)` gives the group of a word, or `None`.
- `ends_with_txt(filename)` tests the `.txt` suffix rule.
- The predicates in `wordtally.charclass` classify single characters or byte
  values.

## Running the tests

```
pip install ".[test]"
pytest
```