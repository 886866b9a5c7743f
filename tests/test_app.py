from pathlib import Path

import pytest

from odpsite import app, pages


def _call(path, method="GET"):
    captured = {}

    def start_response(status, headers):
        captured["status"] = status
        captured["headers"] = dict(headers)

    body = b"".join(app.application({"REQUEST_METHOD": method, "PATH_INFO": path}, start_response))
    return captured["status"], captured["headers"], body


@pytest.mark.parametrize(
    "path, page",
    [
        ("/", pages.home),
        ("/about", pages.about),
        ("/boot-firmware", pages.boot_firmware),
        ("/contact", pages.contact),
        ("/documentation", pages.documentation),
        ("/embedded-controller", pages.embedded_controller),
        ("/windows-ec-services", pages.windows_ec_services),
    ],
)
def test_resolve_known_routes(path, page):
    assert app.resolve(path) is page


def test_resolve_unknown_falls_back_to_not_found():
    assert app.resolve("/missing") is pages.not_found


def test_resolve_ignores_trailing_slash_and_query():
    assert app.resolve("/about/?x=1") is pages.about


def test_render_document_wraps_body():
    doc = app.render_document("<p>hi</p>")
    assert doc.startswith("<!DOCTYPE html>")
    assert '<html lang="en" dir="ltr" data-theme="light">' in doc
    assert "<title>Open Device Partnership</title>" in doc
    assert 'href="/style/output.css"' in doc
    assert "<body><p>hi</p></body>" in doc


def test_render_contains_page_content():
    assert pages.contact() in app.render("/contact")
    assert pages.not_found() in app.render("/nowhere")


def test_application_ok():
    status, headers, body = _call("/about")
    assert status == "200 OK"
    assert body.decode("utf-8") == app.render("/about")
    assert headers["Content-Length"] == str(len(body))


def test_application_not_found():
    status, _, body = _call("/nope")
    assert status == "404 Not Found"
    assert pages.not_found() in body.decode("utf-8")


def test_application_head_has_no_body():
    status, headers, body = _call("/", method="HEAD")
    assert status == "200 OK"
    assert body == b""
    assert int(headers["Content-Length"]) == len(app.render("/").encode("utf-8"))


def test_application_rejects_post():
    status, headers, _ = _call("/", method="POST")
    assert status == "405 Method Not Allowed"
    assert headers["Allow"] == "GET, HEAD"


def test_build_site_writes_every_route(tmp_path):
    written = app.build_site(tmp_path)
    assert len(written) == len(app.ROUTES) + 1
    assert (tmp_path / "index.html").read_text(encoding="utf-8") == app.render("/")
    about = tmp_path / "about" / "index.html"
    assert about.read_text(encoding="utf-8") == app.render("/about")
    assert (tmp_path / "404.html").read_text(encoding="utf-8") == app.render("/missing")


def test_main_build(tmp_path, capsys):
    assert app.main(["build", str(tmp_path)]) == 0
    out = capsys.readouterr().out
    assert str(Path(tmp_path) / "contact" / "index.html") in out
    assert (tmp_path / "documentation" / "index.html").exists()