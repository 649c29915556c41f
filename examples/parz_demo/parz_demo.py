#!/usr/bin/env python3
# %% [markdown]
# # parz — Interactive Demo
#
# This notebook walks through every feature of the fail-aware pipeline
# engine.  Each cell is self-contained; run them top to bottom.
#
# Install first: `pip install -e .`

# %% [markdown]
# ## Setup & Imports

# %%
import logging

from pydantic import BaseModel

from parz import (
    Fail,
    Result,
    create_model_parser,
    create_parser,
    create_validator,
    deflate,
    is_success,
    start_with,
)

logging.basicConfig(level=logging.INFO)


def show(label: str, res: Result) -> None:
    """Pretty-print a Result."""
    if is_success(res):
        print(f"  [OK]   {label}: {res.original!r} -> {res.target!r}")
    else:
        print(f"  [FAIL] {label}: {res.original!r}")
        for err in res.errors:
            print(f"         - {err}")


# %% [markdown]
# ## Step Definitions
#
# - A **validator** re-checks a value.  Failure is *soft*: the error is
#   recorded and the chain keeps going with the same value.
# - A **parser** turns a value into something new.  Failure is *hard*:
#   `None` halts the chain and every later step is skipped.

# %%
length_is_5 = create_validator(
    lambda s: len(s) == 5,
    lambda s: [f"String is not length 5, it is actually of length {len(s)}"],
)


def parse_int(text: str):
    try:
        return int(text)
    except ValueError:
        return None


string_to_int = create_parser(parse_int, lambda s: [f"{s} cannot be parsed to an integer"])

less_than_ten = create_validator(
    lambda n: n < 10,
    lambda n: [f"Expected a number less than 10, but was actually {n}"],
)

# %% [markdown]
# ## 1. Validation

# %%
show("length ok", start_with("12345").then(length_is_5).value())
show("length bad", start_with("1").then(length_is_5).value())

# %% [markdown]
# ## 2. Soft failures accumulate

# %%
show(
    "two soft failures",
    start_with("100").then(string_to_int).then(less_than_ten).then(less_than_ten).value(),
)

# %% [markdown]
# ## 3. Hard failures halt but keep what was collected

# %%
show(
    "soft, soft, hard",
    start_with("a").then(length_is_5).then(length_is_5).then(string_to_int).then(less_than_ten).value(),
)

# %% [markdown]
# ## 4. Branching from a shared intermediate pipeline

# %%
base = start_with("7").then(string_to_int)
show("branch A", base.then(less_than_ten).value())
show("branch B", base.then(create_parser(lambda n: n * 100, lambda n: ["never"])).then(less_than_ten).value())

# %% [markdown]
# ## 5. Deflate — join several independent pipelines

# %%
dims = {k: start_with(v).then(string_to_int).value() for k, v in [("length", "10"), ("width", "10"), ("height", "10")]}
show("volume", deflate(dims).map_deflated(lambda r: r["length"] * r["width"] * r["height"]).value())

junk = {k: start_with(v).then(string_to_int).value() for k, v in [("length", "Hello!"), ("width", "10"), ("height", ":-)")]}
show("junk volume", deflate(junk).map_deflated(lambda r: r["length"] * r["width"] * r["height"]).value())

# %% [markdown]
# ## 6. Structured error payloads

# %%
positive = create_validator(lambda n: n > 0, lambda n: [{"code": "NOT_POSITIVE", "value": n}])
res = start_with(-3).then(positive).value()
assert isinstance(res, Fail)
print(f"  structured errors: {list(res.errors)}")

# %% [markdown]
# ## 7. Pydantic models as parse steps


# %%
class Box(BaseModel):
    length: int
    width: int
    height: int


show("box", start_with('{"length": 2, "width": 3, "height": 4}').then(create_model_parser(Box)).value())
show("bad box", start_with({"length": "two"}).then(create_model_parser(Box)).value())
