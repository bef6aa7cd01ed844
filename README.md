# gengo

Building blocks for programs that generate Go source code. The package
models Go types, gives them names in several naming systems, orders them,
tracks the imports a generated file needs and reads marker tags from
comments.

## Modules

- `gengo.types`: the type model. `Name`, `Kind`, `Type`, `Member`,
  `Signature`, `Package` and `Universe`, the builtin types (`STRING`,
  `INT64`, `BOOL`, ...), and the helpers `ref`, `parse_fully_qualified_name`,
  `is_integer` and `flatten_members`. A `Universe` creates packages and
  types on first lookup; builtin names in the package `""` resolve to the
  shared builtin types.
- `gengo.namer`: the `Namer` and `ImportTracker` interfaces, `NameStrategy`
  with `new_public_namer` (CamelCase) and `new_private_namer` (camelCase),
  and `RawNamer` / `new_raw_namer`, which writes a type the way Go code
  refers to it (`map[string]int`, `bar.Baz`). Also `ic`, `il`, `joiner` and
  `is_private_go_name`.
- `gengo.order`: `Orderer` sorts a universe or a list of types by the names
  its namer gives them.
- `gengo.plural`: `PluralNamer` with `new_public_plural_namer`,
  `new_private_plural_namer` and `new_all_lowercase_plural_namer`.
- `gengo.import_tracker`: `DefaultImportTracker`, which records the
  packages used and renders sorted import lines through the `local_name`
  and `print_import` callables you give it.
- `gengo.comments`: `extract_comment_tags` and
  `extract_single_bool_comment_tag`, which read `+key=value` markers;
  a non-boolean value raises `TagValueError`.
- `gengo.closure`: `transitive_closure` of a graph given as adjacency lists.
- `gengo.error_tracker`: `ErrorTracker` wraps a writer and keeps its first
  error instead of raising it.

## Installation

```
pip install .
```

## Naming types

```python
from gengo.types import Universe, Name, Kind
from gengo.namer import new_public_namer, new_raw_namer

u = Universe()
baz = u.type(Name(package="foo/bar", name="Baz"))
baz.kind = Kind.STRUCT

print(new_public_namer(1).name(baz))            # BarBaz
print(new_raw_namer("my/pkg", None).name(baz))  # bar.Baz
```

## Ordering

```python
from gengo.order import Orderer

ordered = Orderer(new_public_namer(0)).order_universe(u)
```

## Plural names

```python
from gengo.types import Type, Name
from gengo.plural import new_public_plural_namer

namer = new_public_plural_namer({"Endpoints": "endpoints"})
print(namer.name(Type(name=Name(name="Entry"))))  # Entries
```

## Tracking imports

```python
from gengo.types import Type, Name
from gengo.import_tracker import DefaultImportTracker

tracker = DefaultImportTracker(Name())
tracker.local_name = lambda n: n.package.rsplit("/", 1)[-1]
tracker.print_import = lambda path, name: f'{name} "{path}"'
tracker.add_type(Type(name=Name(package="net/http")))
print(tracker.import_lines())  # ['http "net/http"']
```

## Reading comment tags

```python
from gengo.comments import extract_comment_tags, extract_single_bool_comment_tag

extract_comment_tags("+", ["+foo=value1", "+bar", "+foo=value2"])
# {'foo': ['value1', 'value2'], 'bar': ['']}

extract_single_bool_comment_tag("+", "enabled", False, ["+enabled=true"])
# True
```

## Transitive closure

```python
from gengo.closure import transitive_closure

transitive_closure({"a": ["b"], "b": ["c"]})
# {'a': ['b', 'c'], 'b': ['c']}
```

## What this package does not do

It does not read or type-check Go source files, so a `Universe` is filled
in by your own code. It has no generator driver: nothing here runs
generators over a universe, assembles or formats output files, writes them
to disk or verifies existing output, and there is no template writer and
no command-line tool.

## Running the tests

```
pip install .[test]
pytest
```