# objutil

A few small building blocks for everyday object handling:

- **`objutil.maps`**: `Map`, a mapping that keeps each entry's original key;
  `StrKeyMap`, a string-keyed map that can ignore case; and `SyncMap`, a
  map whose operations each run under a lock.
- **`objutil.sets`**: `Set`, `StrSet` (optionally case-insensitive) and
  `SyncSet`, built on the maps above.
- **`objutil.null`**: `is_null` and `not_null`.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Maps

```python
from objutil.maps import Map, StrKeyMap, SyncMap

m = Map()
m.put("aaa", "111")
m.get("aaa")                                # "111"
m.get("missing")                            # None
m.get("missing", "")                        # ""
m.get_if_absent("333", lambda k: "bbb")     # computes and stores "bbb"
m.get_if_absent("333", lambda k: "ccc")     # "bbb": already present
m.contains_keys("aaa", "333")               # True: every key is present
m.contains_any_keys("x", "y", "aaa")        # True: at least one key is present
m.remove("aaa")                             # True
m.remove("hhh")                             # False
len(m)                                      # 1

headers = StrKeyMap(case_sensitive=False)
headers.put("Content-Type", "text/plain")
headers.get("content-type")                 # "text/plain"
headers.put("CONTENT-TYPE", "text/html")    # replaces the entry and keeps the newest key
headers.keys()                              # ["CONTENT-TYPE"]
len(headers)                                # 1
```

A case-insensitive `StrKeyMap` compares keys by their `str.casefold()`
form; a case-sensitive one compares them as given.

Other methods:

- `get_entry(k)` returns an `Entry` (with `key` and `value`) or `None`.
- `put_all(other)` stores every pair of another map or of any object with
  an `items()` method, such as a `dict`.
- `remove_all(*keys)` removes every given key.
- `keys()`, `values()` and `items()` return lists of the current contents;
  `raw()` returns a plain `dict` of original keys to values.
- `is_empty()` tells whether the map holds nothing; iterating over a map
  gives its keys.

`SyncMap` has the same interface and takes a lock for each operation;
`get_if_absent` holds the lock while computing and storing the new value.
Methods made of several operations, such as `put_all` or `remove_all`,
lock each step separately rather than the whole call.

## Sets

```python
from objutil.sets import Set, StrSet, SyncSet

s = Set("a", "b", "c")
s.add("str")
s.contains("a", "b")          # True: all are present
s.contains_any("a", "d")      # True: at least one is present
s.remove("a")                 # True
len(s)                        # 3

names = StrSet(False, "abC")
names.add("abc", "Abc")
len(names)                    # 1
names.contains("ABC")         # True
```

`add_set` adds every element of another set or any iterable,
`remove_all` removes every given element, `is_empty` tells whether the set
holds nothing, and `raw()` returns the elements as a list. `SyncSet` is a
`Set` stored in a `SyncMap`.

## Null checks

```python
from objutil.null import is_null, not_null

is_null(None)    # True
is_null(0)       # False
not_null(0)      # True
```

`is_null` is true only for `None`.

## Not included

The package has no enum helpers; use Python's own `enum` module for
named constants.