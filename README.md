# odpsite

The Open Device Partnership website, written in plain Python with no
dependencies outside the standard library. Every page is built as an HTML
string. You can serve the pages through WSGI or write them out as a static
site.

## Pages

| Path                   | Page                                        |
|------------------------|---------------------------------------------|
| `/`                    | Home: banner, project links, introduction   |
| `/about`               | The partnership introduction                |
| `/boot-firmware`       | Boot firmware ("Coming soon...")            |
| `/contact`             | Contact ("Coming soon...")                  |
| `/documentation`       | Project links and "Coming soon..."          |
| `/embedded-controller` | Embedded controller firmware ("Coming soon...") |
| `/windows-ec-services` | Standard Windows-EC services ("Coming soon...") |

The router ignores query strings, fragments and trailing slashes. Any other
path renders the "not found" page.

## Installing

```
pip install .
```

## Command line

Serve the site with the standard library's WSGI server. The default address is
127.0.0.1:8000:

```
odpsite serve --host 127.0.0.1 --port 8000
```

If you run `odpsite` with no subcommand, it also serves on the default address.

Write every page as static HTML:

```
odpsite build public
```

This writes `public/index.html`, one `<route>/index.html` for each page and
`public/404.html`. It prints the path of each file it writes.

## Using it from Python

```python
from odpsite.app import application, build_site, render, render_document, resolve

html = render("/about")        # a complete HTML document
page = resolve("/nowhere")     # pages.not_found
html = render_document(page()) # wrap page content in the document shell
paths = build_site("public")   # list of files written
```

`application` is a WSGI callable. It handles requests as follows:

- `GET` on a known path returns `200` with the rendered document.
- `GET` on any other path returns `404` with the not-found page.
- `HEAD` returns the same status and headers as `GET`, with an empty body.
- Any other method returns `405` with an `Allow: GET, HEAD` header.

`odpsite.components` holds the page fragments: `navbar()`, `footer()`,
`projects()`, `intro_message()`, `welcome()` and `main_content()`.

`odpsite.pages` holds the full pages: `home()`, `about()`, `boot_firmware()`,
`contact()`, `documentation()`, `embedded_controller()`,
`windows_ec_services()` and `not_found()`. Every page except `not_found()` is
rendered through `error_boundary(render)`. If rendering raises, the boundary
returns `error_fallback(errors)` instead, which lists each error.

## What it does not do

The pages refer to `/style/output.css`, `/images/odplogo.png` and
`/images/laptop.jpg`. The package does not include these files. The WSGI
application does not serve them either: a request for any path outside the
routes above gets the HTML not-found page. Put the stylesheet and images next
to the output of `odpsite build`, or have a separate web server serve them.

## Tests

```
pip install .[test]
pytest
```