# pkgtree

`pkgtree` holds the building blocks for describing packages that are built
inside containers: package names and versions, version constraints,
dependencies that may be guarded by a condition, build phases, and a reader
for a directory tree of layered `pkg.toml` files.

It has no dependencies outside the standard library.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Names, versions and constraints (`pkgtree.names`)

`PackageName` and `PackageVersion` are `str` subclasses.
`PackageVersionConstraint` pairs a comparator with a version; the only
comparator accepted is `=`.

```python
from pkgtree.names import parse_package_name, parse_package_version, parse_version_constraint

parse_package_name("gtk15")              # PackageName('gtk15')
parse_package_version("1.0.17asejg")     # PackageVersion('1.0.17asejg')

constraint = parse_version_constraint("=1.0.17")
str(constraint)                          # '=1.0.17'
constraint.matches("1.0.17")             # True
```

A name starts with a letter followed by letters or digits; a version starts
with a digit followed by digits, letters, `-`, `_` or `.`. Both parsers stop
at the first character that does not fit. Input that does not start a valid
name, version or constraint raises `ValueError`.

## Conditions (`pkgtree.condition`)

A `Condition` can require environment variables to be set (`has_env`), to
have given values (`env_eq`), or a particular build image (`in_image`).
`has_env` and `in_image` take one string or a list of strings. It is checked
against a `ConditionData` holding the image name (or `None`) and the
environment as `(name, value)` pairs.

```python
from pkgtree.condition import Condition, ConditionData

cond = Condition.from_dict({"in_image": "fooimage", "env_eq": {"A": "1"}})
cond.matches(ConditionData(image_name="fooimage", env=[("A", "1")]))  # True
cond.matches(ConditionData(image_name=None, env=[("A", "1")]))        # False
cond.to_dict()   # {'env_eq': {'A': '1'}, 'in_image': 'fooimage'}
```

When an image is required and `image_name` is `None`, the condition does not
match.

## Dependencies (`pkgtree.dependency`)

`Dependency` (runtime) and `BuildDependency` (build time only) are either a
plain string such as `"vim =8.2"` or a table with a `name` and a `condition`.

```python
from pkgtree.condition import ConditionData
from pkgtree.dependency import Dependency, parse_dependency_string

dep = Dependency.from_value({"name": "b =2", "condition": {"in_image": "fooimage"}})
dep.check_condition(ConditionData(image_name="fooimage"))   # True
dep.parse_as_name_and_version()   # (PackageName('b'), PackageVersionConstraint('=', ...'2'))
dep.to_value()                    # {'name': 'b =2', 'condition': {'in_image': 'fooimage'}}

parse_dependency_string("foo-bar1.2.3 =0.123")
```

A dependency without a condition always applies. Strings that are not
`<name> <constraint>` raise `ValueError`.

## Phases (`pkgtree.phase`)

A `Phase` is either inline script text (`PhaseKind.TEXT`, key `script`) or a
path to a script file (`PhaseKind.PATH`, key `path`).

```python
from pkgtree.phase import Phase

phase = Phase.from_value({"script": "make install"})
phase.to_value()   # {'script': 'make install'}
```

## Reading a pkg.toml tree (`pkgtree.fs`)

A repository is a directory tree in which every directory may hold a
`pkg.toml`. `FileSystemRepresentation.load(root)` reads every non-hidden
`pkg.toml` below `root` that lies on the same file system, without following
symbolic links, and keeps their contents in memory.

```
repo/
  pkg.toml            # shared defaults
  vim/
    pkg.toml          # the package itself
```

```python
from pkgtree.fs import FileSystemRepresentation

fsr = FileSystemRepresentation.load("repo")
fsr.files                              # [PurePath('pkg.toml'), PurePath('vim/pkg.toml')]
fsr.is_leaf_file("pkg.toml")           # False: there are packages below it
fsr.is_leaf_file("vim/pkg.toml")       # True
fsr.get_files_for("vim/pkg.toml")
# [(PurePath('pkg.toml'), '<content>'), (PurePath('vim/pkg.toml'), '<content>')]
```

`get_files_for` returns the trail of `(path, content)` pairs from the root
down to the given file, shallowest first. Asking about a path that was not
loaded raises `LookupError`; `path_component` raises `ValueError` for empty,
`.`, `..` or rooted parts.

## What the package does not do

- It does not parse the content of `pkg.toml` files or merge the layers into
  package objects; `get_files_for` hands back the raw text in order.
- There is no package or repository type, no lookup of packages by name or
  version, and no resolution of a dependency graph.
- It does not download sources, keep a source cache or verify source hashes.
- There is no command-line tool.