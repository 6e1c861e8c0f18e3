# retrokit

Small, dependency-free helpers for programs that juggle content paths,
archive paths such as `game.7z#disc.img`, UTF-8/UTF-16 text and simple
byte-oriented file streams.

## Installing

```
pip install retrokit
```

## What is in it

- `retrokit.paths`: pure string path helpers that know about archive
  delimiters (the first `#` right after `.zip`, `.apk` or `.7z` in the last
  path component): `basename`, `basename_nocompression`, `basedir`,
  `basedir_wrapper`, `parent_dir`, `parent_dir_name`, `get_extension`,
  `remove_extension`, `replace_extension`, `append_extension`,
  `is_compressed_file`, `contains_compressed_file`, `is_absolute`,
  `short_representation` and more. Separators follow the host system
  (`/`, plus `\` on Windows).
- `retrokit.resolve`: joining and resolving paths (`join`,
  `join_concat`, `join_noext`, `join_special_ext`, `join_delim`,
  `resolve_realpath`, `relative_to`, `resolve_relative`).
- `retrokit.specials`: expansion and abbreviation of a leading `~` (home
  directory, from `$HOME`) and `:` (directory of the running executable),
  `abbreviated_or_relative`, timestamped file names (`dated_filename`,
  `str_dated_filename`), and slash conversion and counting.
- `retrokit.pathio`: filesystem queries (`stat` returning `StatFlags`,
  `is_directory`, `is_character_special`, `is_valid`, `get_size`) and a
  recursive `mkdir` that accepts an existing directory.
- `retrokit.filestream`: the `FileStream` class, opened with `Access` and
  `Hint` flags, with `read`, `write`, `getc`, `gets`, `getline`, `putc`,
  `printf`, `scanf`, `seek`, `tell`, `rewind`, `truncate` and sticky
  `eof()` / `error()` flags; plus the helpers `exists`, `delete`, `rename`,
  `read_file` and `write_file`.
- `retrokit.rfile`: fopen-style access on top of `FileStream`
  (`parse_mode`, `rfopen`, `rfseek`, `rfread`, `rfwrite`).
- `retrokit.utf`: UTF-8, UTF-16 and UTF-32 conversion and counting
  (`utf8_conv_utf32`, `utf16_conv_utf8`, `utf8cpy`, `utf8skip`, `utf8len`,
  `utf8_walk`, `utf8_to_utf16`, `utf16_to_utf8` and others).
- `retrokit.text`: bounded string copy and concatenation (`strlcpy`,
  `strlcat`, `strldup`) and ASCII case-insensitive search (`strcasestr`).
- `retrokit.rtime`: `localtime`, a lock-guarded local time lookup.

Failures are reported with exceptions: `OSError` for filesystem problems,
`ValueError` for malformed input (such as a broken UTF-16 surrogate pair or
a `..` that climbs above the root), `EOFError` from `FileStream.scanf` when
input runs out.

## Examples

```python
from retrokit import paths, resolve

paths.basename("/roms/collection.7z#folder/game.img")   # "game.img"
paths.get_extension("/roms/game.sfc")                   # "sfc"
paths.replace_extension("/foo/bar/boo.c", ".asm")       # "/foo/bar/boo.asm"
resolve.join("/tmp/dir", "file.txt")                    # "/tmp/dir/file.txt"
resolve.relative_to("/a/b/e/f.cg", "/a/b/c/d/")         # "../../e/f.cg"
```

```python
from retrokit.filestream import Access, FileStream, read_file, write_file

write_file("scores.txt", b"alpha 10\nbeta 20\n")
with FileStream.open("scores.txt", Access.READ) as stream:
    print(stream.getline())        # b'alpha 10'
    print(stream.scanf("%s %d"))   # [b'beta', 20]
print(read_file("scores.txt"))
```

## What it does not do

- There is no pluggable virtual file system: streams and path queries always
  go to the real filesystem through Python's own file functions, and the
  access hints are accepted but change nothing.
- It does not open or list archives; it only recognises archive paths.
- It has no command-line tool.

## Running the tests

```
pip install -e ".[test]"
pytest
```