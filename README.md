# webscrap

A small HTML scraping library. It downloads a page, walks every element
in it, keeps the ones that pass a set of filters and renders them in one
of several output formats.

## Installation

```
pip install .
```

The package has no dependencies beyond the Python standard library.
Python 3.10 or later is required.

## Fetching

`webscrap.fetch.fetch(url)` returns the body of an `http` or `https`
URL as a string, decoded with the charset the server announces (UTF-8
otherwise). An HTTP error status still returns the body that came with
it. Other schemes, and network failures, raise
`webscrap.fetch.FetchError`.

## Parsing

`webscrap.dom.parse_fragment(raw_html)` parses HTML into its top-level
nodes: `Element` objects, text strings and comments. An `Element` has a
`name`, an `id`, a list of `classes`, a dict of other `attributes`, its
`children` and its original `source` text. `Element.child_text()` joins
its direct text children with spaces. `parse_element(raw_html)` returns
the first node, which must be an element. Malformed markup, such as a
closing tag with nothing to close, raises `ValueError`.

## Filtering

`webscrap.scrape.scrape(raw_html, options)` returns the source text of
every element that passes the filters in a `ScrapeOptions`:

- `tags` – a `TagFilter` with the tag names to keep (required);
- `id_filter` – an `IdFilter`; the element's id must be one of those listed;
- `class_filter` – a `ClassFilter`; the element must carry all
  (`FilterType.AND`) or any (`FilterType.OR`) of the listed classes;
- `attributes_include` / `attributes_exclude` – an `AttributeFilter` of
  name/value pairs that must, or must not, match; in `AND` mode the
  names `id` and `class` are checked against the element's id and classes;
- `text_include` / `text_exclude` – a `TextFilter` of fragments that
  must, or must not, appear in the element's source text.

```python
from webscrap.scrape import ClassFilter, ScrapeOptions, TagFilter, scrape

options = ScrapeOptions(tags=TagFilter(["div"]), class_filter=ClassFilter(["test"]))
matches = scrape(html, options)
```

The single checks are available on their own as `has_tagname`, `has_id`,
`has_class`, `fulfill_attribute_filter` and `filter_by_text`.

## Rendering

`webscrap.options.StorageOptions` describes the output: whether tag
content is included at all (`include_tag_content`, off by default),
whether tag names are included, which attributes to record
(`include_attributes`; `None` means every attribute found, see
`discover_attributes`), `pretty_print` for JSON and XML, `delimiter` for
CSV and `custom_data_storage`, a callback for the custom format.
`column_order(data, options)` gives the resulting field list.

Each format has a generator taking the scraped strings and the options
and yielding chunks of output:

| Generator | Output |
| --------- | ------ |
| `webscrap.txt_format.txt_lines` | each element's HTML, unchanged |
| `webscrap.csv_format.csv_lines` | a header row, then one unquoted row per element |
| `webscrap.json_format.json_lines` | an array of objects, optionally pretty-printed |
| `webscrap.xml_format.xml_lines` | a declaration, then one `<data>` block per element |
| `webscrap.yaml_format.yaml_lines` | one `data:` block per element |
| `webscrap.custom_format.custom_lines` | passes each element to the callback, yields empty strings |

Values are written as they are, without escaping.

```python
from webscrap.json_format import json_lines
from webscrap.options import FileFormat, StorageOptions

options = StorageOptions("output.json", FileFormat.JSON,
                         include_tag_content=True, pretty_print=True)
with open(options.file_name, "w", encoding="utf-8") as out:
    out.writelines(json_lines(matches, options))
```

## What it does not do

There is no command-line program, and no function that picks a writer
from `StorageOptions.file_format` or writes to `file_name` on its own:
call the generator for the format you want and write its output
yourself, as above.

## Running the tests

```
pip install .[test]
pytest
```