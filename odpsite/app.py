"""The site's router, document shell, WSGI application and command line."""

from __future__ import annotations

import argparse
from collections.abc import Callable, Iterable, Sequence
from pathlib import Path
from wsgiref.simple_server import make_server

from odpsite import pages
from odpsite.components import _Markup, _element, _fragment

TITLE = "Open Device Partnership"
STYLESHEET = "/style/output.css"

ROUTES: dict[str, Callable[[], str]] = {
    "/": pages.home,
    "/about": pages.about,
    "/boot-firmware": pages.boot_firmware,
    "/contact": pages.contact,
    "/documentation": pages.documentation,
    "/embedded-controller": pages.embedded_controller,
    "/windows-ec-services": pages.windows_ec_services,
}

_ALLOWED_METHODS = ("GET", "HEAD")


def _normalise(path: str) -> str:
    path = path.split("#", 1)[0].split("?", 1)[0]
    if not path.startswith("/"):
        path = "/" + path
    return path.rstrip("/") or "/"


def resolve(path: str) -> Callable[[], str]:
    """Return the page for a path, or the not-found page if no route matches."""
    return ROUTES.get(_normalise(path), pages.not_found)


def render_document(body: str) -> str:
    """Wrap rendered page content in a complete HTML document."""
    head = _element(
        "head",
        _element("meta", charset="UTF-8"),
        _element("meta", name="viewport", content="width=device-width, initial-scale=1.0"),
        _element("title", TITLE),
        _element("link", id="leptos", rel="stylesheet", href=STYLESHEET),
    )
    document = _element(
        "html",
        head,
        _element("body", _Markup(body)),
        lang="en",
        dir="ltr",
        data_theme="light",
    )
    return _fragment(_Markup("<!DOCTYPE html>"), document)


def render(path: str) -> str:
    """Render the full document served at a path."""
    return render_document(resolve(path)())


def application(environ: dict, start_response: Callable) -> Iterable[bytes]:
    """Serve the site's pages over WSGI."""
    method = environ.get("REQUEST_METHOD", "GET").upper()
    if method not in _ALLOWED_METHODS:
        body = b"Method Not Allowed"
        start_response(
            "405 Method Not Allowed",
            [
                ("Content-Type", "text/plain; charset=utf-8"),
                ("Content-Length", str(len(body))),
                ("Allow", ", ".join(_ALLOWED_METHODS)),
            ],
        )
        return [body]

    path = environ.get("PATH_INFO", "/") or "/"
    known = _normalise(path) in ROUTES
    payload = render(path).encode("utf-8")
    start_response(
        "200 OK" if known else "404 Not Found",
        [
            ("Content-Type", "text/html; charset=utf-8"),
            ("Content-Length", str(len(payload))),
        ],
    )
    return [b""] if method == "HEAD" else [payload]


def build_site(output_dir: str | Path) -> list[Path]:
    """Write every page as a static file under output_dir and return their paths."""
    root = Path(output_dir)
    written: list[Path] = []
    for route in ROUTES:
        directory = root.joinpath(*route.strip("/").split("/")) if route != "/" else root
        directory.mkdir(parents=True, exist_ok=True)
        target = directory / "index.html"
        target.write_text(render(route), encoding="utf-8")
        written.append(target)
    missing = root / "404.html"
    missing.write_text(render_document(pages.not_found()), encoding="utf-8")
    written.append(missing)
    return written


def main(argv: Sequence[str] | None = None) -> int:
    """Serve the site, or build it as static files."""
    parser = argparse.ArgumentParser(prog="odpsite", description=TITLE)
    commands = parser.add_subparsers(dest="command")
    serve = commands.add_parser("serve", help="serve the site over HTTP")
    serve.add_argument("--host", default="127.0.0.1")
    serve.add_argument("--port", type=int, default=8000)
    build = commands.add_parser("build", help="write the site as static HTML files")
    build.add_argument("output_dir")
    args = parser.parse_args(argv)

    if args.command == "build":
        for path in build_site(args.output_dir):
            print(path)
        return 0

    host = getattr(args, "host", "127.0.0.1")
    port = getattr(args, "port", 8000)
    with make_server(host, port, application) as server:
        print(f"Serving on http://{host}:{port}/")
        try:
            server.serve_forever()
        except KeyboardInterrupt:
            pass
    return 0