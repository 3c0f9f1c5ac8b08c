# saba

The core pieces of a small browser engine, written for learning how
browsers work. It uses only the Python standard library.

## Modules

- `saba.url` — `Url.parse` splits an `http://` URL into `host`, `port`
  (default `"80"`), `path` and `searchpart`. Any other scheme raises
  `UnexpectedInputError`.
- `saba.http` — `HttpResponse.parse` reads a raw HTTP/1.1 response into
  `version`, `status_code`, `reason`, `headers` (a list of `Header`) and
  `body`. `HttpResponse.header_value(name)` returns the first matching
  header's value and raises `KeyError` when there is none.
- `saba.client` — `HttpClient.get(host, port, path)` sends a GET request over
  a TCP socket and parses the reply; `HttpClient.build_request` returns the
  request text. `handle_url(url, client=None)` parses a URL, fetches it and
  follows a single `302` redirect to its `Location` header.
- `saba.dom` — the document tree: `Window`, `Node`, `Document`, `Element`,
  `Text`, `ElementKind` and `Attribute`, with the helpers
  `get_element_by_id`, `get_target_element_node`, `get_style_content`,
  `get_js_content` and `convert_dom_to_string`.
- `saba.computed_style` — `Color`, `FontSize`, `DisplayType`,
  `TextDecoration` and `ComputedStyle`, whose `defaulting` method inherits
  non-initial values from a parent style and fills in the initial values.
- `saba.js_lexer`, `saba.js_ast`, `saba.js_runtime` — a tiny JavaScript
  subset: `var`, functions with parameters and `return`, `+` and `-`,
  assignment, and `document.getElementById(...)` with `textContent`
  assignment. `tokenize(js)` lists tokens, `parse(js)` builds a `Program`,
  and `JsRuntime` evaluates it against a document tree.
- `saba.constants` — window geometry and colours.

Errors are subclasses of `saba.errors.BrowserError`: `NetworkError`,
`UnexpectedInputError`, `InvalidUIError` and `OtherError`. Script failures
raise `saba.js_runtime.JsError`, also a `BrowserError`.

## Installation

```
pip install .
```

## Examples

Parse a URL:

```python
from saba.url import Url

url = Url.parse("http://example.com:8888/index.html?a=123&b=456")
print(url.host, url.port, url.path, url.searchpart)
# example.com 8888 index.html a=123&b=456
```

Parse an HTTP response:

```python
from saba.http import HttpResponse

res = HttpResponse.parse("HTTP/1.1 200 OK\nDate: xx xx xx\n\nbody message")
print(res.status_code, res.header_value("Date"), res.body)
# 200 xx xx xx body message
```

Evaluate a little JavaScript statement by statement:

```python
from saba.dom import Window
from saba.js_ast import parse
from saba.js_runtime import JsRuntime

runtime = JsRuntime(Window().document)
for statement in parse("var foo=42; foo+1").body:
    print(runtime.evaluate(statement))
# None
# 43
```

Change the text of an element from a script:

```python
from saba.dom import Attribute, Element, ElementKind, Node, Text, Window
from saba.js_ast import parse
from saba.js_runtime import JsRuntime

document = Window().document
p = Node(Element(ElementKind.P, [Attribute("id", "target")]), parent=document)
document.first_child = document.last_child = p

script = 'var target=document.getElementById("target"); target.textContent="hi";'
JsRuntime(document).execute(parse(script))
print(p.first_child.kind)
# Text(text='hi')
```

Fetch a page:

```python
from saba.client import HttpClient, handle_url

response = handle_url("http://example.com/index.html", HttpClient(timeout=5))
print(response.body)
```

## What it does not do

There is no HTML tokenizer or tree builder and no CSS parser: document trees
are built by linking `Node` objects directly. There is no layout, painting,
window or address bar, and no command to start a browser. Only plain
`http://` is supported, not HTTPS.

## Running the tests

```
pip install .[test]
pytest
```