"""Full pages of the site, each guarded by an error boundary."""

from __future__ import annotations

from collections.abc import Callable, Iterable

from odpsite.components import (
    _Markup,
    _element,
    _fragment,
    footer,
    intro_message,
    main_content,
    navbar,
    projects,
)

_COMING_SOON_CLASS = "text-white font-mono flex flex-col min-h-screen"


def error_fallback(errors: Iterable[object]) -> str:
    """Render a list of errors as strings, one list item each."""
    return _fragment(
        _element("h1", "Uh oh! Something went wrong!"),
        _element("p", "Errors: "),
        _element("ul", *(_element("li", str(error)) for error in errors)),
    )


def error_boundary(render: Callable[[], str]) -> str:
    """Render the content, or the error fallback if rendering raises."""
    try:
        return _Markup(render())
    except Exception as exc:
        return error_fallback([exc])


def _coming_soon(background: str) -> _Markup:
    return _element(
        "div",
        _element(
            "div",
            _element("h1", "Coming soon...", cls="text-9xl font-bold font-sans"),
            cls="flex flex-row-reverse flex-wrap m-auto",
        ),
        cls=background,
    )


def _placeholder_page(background: str) -> str:
    return error_boundary(
        lambda: _element("main", _Markup(navbar()), _coming_soon(background))
    )


def home() -> str:
    """The landing page."""
    return error_boundary(
        lambda: _fragment(_Markup(navbar()), _Markup(main_content()), _Markup(footer()))
    )


def about() -> str:
    """The page with the partnership introduction."""
    return error_boundary(
        lambda: _element(
            "main",
            _Markup(navbar()),
            _element("div", cls="bg-white h-32"),
            _Markup(intro_message()),
        )
    )


def boot_firmware() -> str:
    """The boot firmware project page."""
    return _placeholder_page(f"bg-gradient-to-tl from-indigo-500 to-indigo-500 {_COMING_SOON_CLASS}")


def contact() -> str:
    """The contact page."""
    return _placeholder_page(f"bg-gradient-to-tl from-blue-500 to-blue-500 {_COMING_SOON_CLASS}")


def documentation() -> str:
    """The documentation page listing the projects."""
    return error_boundary(
        lambda: _element(
            "main",
            _Markup(navbar()),
            _element("div", cls="h-36 bg-white"),
            _Markup(projects()),
            _coming_soon("bg-gradient-to-tl bg_white text-black font-mono flex flex-col min-h-screen"),
        )
    )


def embedded_controller() -> str:
    """The embedded controller firmware project page."""
    return _placeholder_page(f"bg-gradient-to-tl from-purple-500 to-purple-500 {_COMING_SOON_CLASS}")


def windows_ec_services() -> str:
    """The Windows-EC services project page."""
    return _placeholder_page(f"bg-gradient-to-tl from-pink-500 to-pink-500 {_COMING_SOON_CLASS}")


def not_found() -> str:
    """The page shown for unknown paths."""
    return _element("h1", "Uh oh!", _element("br"), "We couldn't find that page!")