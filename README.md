# tmplkit

Small, self-contained helpers for tools that process templates and the files
around them. Each module can be used on its own.

## Modules

### `tmplkit.colors`

- `Attribute`: an `IntEnum` of ANSI SGR codes (`BOLD`, `FG_RED`, `BG_HI_BLUE`, ...).
- `Color`: a list of attributes; `add(*attributes)` appends to it and
  `sprint(*args)` wraps the text in escape sequences.
- `color(*names)`: builds a `Color` from names such as `"red"`, `"fgred"`,
  `"bold"` (case does not matter; names may be separated by any non-word
  characters, e.g. `"red ;green"`). Raises `ValueError` when no known name is
  given or when some name is unknown.
- `sprint_color(*args)`: leading arguments that are color names give the
  color; the rest is formatted with `format_message`.
- `format_message(*args)`: with several arguments, uses the first as a
  printf-style format when it contains `%` and every verb is satisfied;
  otherwise joins the arguments with spaces.
- `go_sprintf(format, *args)`: printf-style formatting supporting `%v %s %d
  %f %g %q %t %x %X %c %%`, widths and precisions, and reporting problems
  inline as `%!d(MISSING)`, `%!(EXTRA ...)` and the like.
- `color_print`, `color_println`, `color_printf` write to standard output;
  `color_error_print`, `color_error_println`, `color_error_printf` write to
  standard error. Each returns the number of characters written.

### `tmplkit.regex`

- `multi_match(s, *patterns)`: returns the named groups of the first compiled
  pattern that matches, and its index; `({}, -1)` when none matches.
- `get_regex_group(key, definitions)`: compiles the definitions once and
  caches them under `key`.

### `tmplkit.substitute`

- `init_replacers(*definitions)`: parses sed-like definitions such as
  `/search/replace`; the first character is the separator. A replacement of
  `d` deletes the match, and a search ending in `$` then also removes the
  line ending (multi-line mode is turned on). Raises `ValueError` for a
  malformed definition.
- `RegexReplacer.apply(content)`: replaces every match; the replacement may
  use `$1`, `${name}` and `$$`.
- `substitute(content, *replacers)`: applies the replacers in order.

### `tmplkit.lists`

- `merge_lists(*lists)`: `None` for no list, the list itself for one, the
  concatenation otherwise.
- `format_list(format, *values)`: applies `go_sprintf` to every value (a
  single list, tuple or set argument is expanded).
- `merge_dictionaries(*dicts)`: deep merge where earlier dictionaries win;
  `None` entries are skipped, and a non-mapping raises `TypeError`.

### `tmplkit.lorem`

- `LoremKind`: `WORD`, `SENTENCE`, `PARAGRAPH`, `HOST`, `EMAIL`, `URL`.
- `get_lorem_kind(name)`: accepts the numbers `"1"`..`"6"` and names such as
  `"word"`, `"sentence"` (also `""`), `"para"`, `"host"`, `"email"`, `"url"`;
  raises `ValueError` otherwise.
- `lorem(kind, min=3, max=10)`: random text from a built-in word list;
  e-mail addresses are generated at `example.com`.

### `tmplkit.files`

- `find_files(folder, recursive, follow_links, *patterns)` and
  `find_files_max_depth(folder, max_depth, follow_links, *patterns)`: glob
  the patterns in the folder and, down to the given depth, in its sub
  folders, optionally following symbolic links.
- `glob_func(*args)` / `glob_func_trim(*args)`: expand arguments containing
  glob characters; unmatched patterns are kept, or dropped by the `_trim`
  variant. Nested lists are flattened.
- `pwd()`, `relative(folder, file)`, `get_target_file(target_file,
  source_path, target_path)`.
- `extend(values)`: splits comma separated values and drops blanks.
- `double_star_match(pattern, name)`: path matching where `**` spans
  directories and `{a,b}` gives alternatives.
- `exclude(files, patterns)`: keeps the files that match none of the
  patterns, both taken as absolute paths.

### `tmplkit.scripts`

- `script_parts(content)` returns `(program, subprogram, source)` from a
  `#! program subprogram` first line; `is_shebang_script(content)` tells
  whether there is one.
- `is_command(text)`: true when the text holds no shell specific characters.
- `get_command_from_file(filename, *args)`: the command line (a list of
  strings) that runs the script, or `None` when its command cannot be found.
- `get_command_from_string(script, *args)`: the command line for a script
  text and the name of the temporary file written for it (empty when none
  was needed). Raises `FileNotFoundError` for a single unknown command.
- `default_shell()`: the first shell found on the `PATH`.
- `get_env(name, default)`.
- `is_terraform_file(file)` and `terraform_format(*files)`, which runs
  `terraform fmt` in the folders of the given Terraform files when
  `terraform` is installed, and raises `RuntimeError` on failure.

### `tmplkit.yamldata`

- `unmarshal(data)`: parses YAML (bytes or text); tabs become four spaces and
  mapping keys always come back as strings. Raises `ValueError` on bad YAML.
- `unmarshal_strict(data)`: the same, but also rejects duplicate keys and
  documents that are not mappings; an empty document gives `{}`.
- `to_yaml(value)`: block-style YAML with sorted keys.

## What it does not do

There is no template engine and no command-line program here: the package
does not render templates or process files by itself. The script helpers
build command lines but do not run them; only `terraform_format` starts a
process.

## Installation

```
pip install tmplkit
```

## Examples

```python
from tmplkit.substitute import init_replacers, substitute

replacers = init_replacers(r"/\b(\w{2})\b/$1$1", r"/\b(\w)\b/-$1-")
substitute("This is a test", *replacers)   # 'This isis -a- test'
```

```python
from tmplkit.colors import format_message

format_message("Hello %s! %d", "World", 100)   # 'Hello World! 100'
format_message("Hello %s! %d", "World")        # 'Hello %s! %d World'
format_message("Hello", "World")               # 'Hello World'
```

```python
from tmplkit.lists import merge_dictionaries

merge_dictionaries({"a": 1, "sub": {"x": 1}}, {"a": 2, "b": 3, "sub": {"y": 2}})
# {'a': 1, 'sub': {'x': 1, 'y': 2}, 'b': 3}
```

```python
from tmplkit.files import exclude

exclude(["./1.txt", "./f/1.txt", "./f/2.txt"], ["./f/*"])   # ['./1.txt']
```

```python
from tmplkit.yamldata import unmarshal, to_yaml

data = unmarshal("a: 1\nb:\n- x\n- y\n")   # {'a': 1, 'b': ['x', 'y']}
to_yaml(data)                              # 'a: 1\nb:\n- x\n- y\n'
```

## Running the tests

```
pip install -e .[test]
pytest
```