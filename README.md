# mimefield

Small helpers for the parameters that follow a MIME header value. An example
is the `boundary="--abcdef"` in `Content-Type: multipart/mixed; boundary="--abcdef"`.

## Installation

```
pip install mimefield
```

## Usage

```python
from mimefield.fieldparam import FieldParam, IString, remove_external_blanks, remove_dquote

param = FieldParam.parse('\t charset = "utf-8" ')
param.name    # 'charset', as an IString
param.value   # 'utf-8'

# Parameter names compare and hash without regard to case.
param.name == "CHARSET"   # True

# Values holding any of ()\<>"@,;:/[]?= are put back in double quotes on output.
str(FieldParam("boundary", "--abc=def"))   # 'boundary="--abc=def"'
str(FieldParam("charset", "utf-8"))        # 'charset=utf-8'

remove_external_blanks("  text \t")   # 'text'
remove_dquote('"quoted"')             # 'quoted'
```

`FieldParam.parse` splits its input at the first `=`. It strips the spaces
and tabs around the name and the value. It then removes one pair of enclosing
double quotes from the value. Text with no `=` gives a parameter whose name
and value are both empty.

Setting `name` on a `FieldParam` stores it as an `IString`. Two `FieldParam`
objects are equal when their names match without regard to case and their
values match exactly.

## What it does not do

The package handles one parameter at a time. It does not split a whole header
line such as `multipart/mixed; boundary=...; charset=...` into its value and
its list of parameters. It does not decode encoded words or RFC 2231
parameter continuations, and it does not escape quotes inside values.

## Running the tests

```
pip install -e .[test]
pytest
```