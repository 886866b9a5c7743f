"""Reusable page fragments: navigation bar, footer, landing content."""

from __future__ import annotations

from html import escape

_VOID_ELEMENTS = frozenset({"br", "img", "meta", "link"})

_LINK_CLASS = "custom-text-gray-800 hover:custom-text-blue-600 transition duration-300"
_HEADING_CLASS = "font-bold text-2xl custom-text-gray-400"

REPOSITORIES_URL = "https://repositories.example.com/"
ADMIN_MAILTO = "mailto:odp-admin@example.com"

NAV_LINKS = (
    ("/about", "About"),
    ("/documentation", "Documentation"),
    (REPOSITORIES_URL, "Repositories"),
    ("/contact", "Contact"),
)

PROJECT_LINKS = (
    ("/boot-firmware", "Boot Firmware"),
    ("/embedded-controller", "Embedded Controller Firmware"),
    ("/windows-ec-services", "Standard Windows-EC Services"),
)

_ODP_PROJECTS = (
    ("Fast and Minimal Boot Firmware",
     " - A secure and efficient boot firmware for Windows devices"),
    ("Hardened Embedded Controller Firmware",
     " - An extensible, MCU-agnostic, secure embedded controller firmware"),
    ("Standardized Embedded Controller Services",
     " - A common method for interfacing embedded controller services with Windows"),
)

_VALUE_PROPOSITION = (
    ("Enhanced Security",
     " - As security threats continue to evolve, it is critical we take bold steps to "
     "protect devices from vulnerabilities by reducing the attack surface area, using "
     "secure hardware features, using modern programming languages to reduce human "
     "error-induced problems, and generally thinking about security first in every "
     "piece of code we design and author."),
    ("Standardization",
     " - While it is critical for device partners to differentiate in features and "
     "capabilities, unfortunately a large fraction of device software is often simply "
     "the infrastructure and plumbing necessary to pull everything together. Developing "
     "and maintaining this software is a development tax to be paid and worse, often "
     "paid for each device and each architecture (x86 & ARM). Developing and building "
     "on top of industry standards offers one option to simplify and maximize re-use "
     "and it is a centerpiece of the ODP strategy."),
    ("Accelerated Development",
     " - ODP is built on open-source collaboration with partners, sharing common goals "
     "and solutions, thus enabling faster and more efficient product development."),
)

_WELCOME_TEXT = (
    "An alliance of industry-leading PC ecosystem partners promoting secure, reusable, "
    "and trusted system software for client devices"
)


class _Markup(str):
    """Rendered HTML that is inserted as is, without further escaping."""


def _render_child(child: object) -> str:
    if isinstance(child, _Markup):
        return child
    return escape(str(child), quote=False)


def _element(tag: str, *children: object, cls: str | None = None, **attrs: object) -> _Markup:
    """Render one element; plain-text children are escaped, markup children are not."""
    attributes: dict[str, object] = {}
    if cls is not None:
        attributes["class"] = cls
    for name, value in attrs.items():
        attributes[name.rstrip("_").replace("_", "-")] = value
    rendered_attrs = "".join(
        f' {name}="{escape(str(value), quote=True)}"' for name, value in attributes.items()
    )
    if tag in _VOID_ELEMENTS:
        if children:
            raise ValueError(f"<{tag}> cannot have children")
        return _Markup(f"<{tag}{rendered_attrs}>")
    body = "".join(_render_child(child) for child in children)
    return _Markup(f"<{tag}{rendered_attrs}>{body}</{tag}>")


def _fragment(*children: object) -> _Markup:
    return _Markup("".join(_render_child(child) for child in children))


def _heading(text: str) -> _Markup:
    return _element("p", _element("span", text, cls=_HEADING_CLASS), cls="pb-4")


def _bold_list(items, item_cls: str | None = None) -> _Markup:
    return _element(
        "ul",
        *(_element("li", _element("b", title, cls=""), text, cls=item_cls) for title, text in items),
        cls="pb-4 text-lg list-disc list-inside",
    )


def footer() -> str:
    """The empty page footer band."""
    return _element("footer", cls="grid grid-cols-1 sm:grid-cols-2 custom-bg-gray-100 h-32")


def navbar() -> str:
    """The fixed navigation bar with the logo and the top-level links."""
    brand = _element(
        "a",
        _element("img", src="/images/odplogo.png", cls="h-14 w-14", alt="ODP Logo"),
        _element("p", "Open Device Partnership", cls="text-2xl md:text-3xl custom-text-gray-800 pl-4"),
        cls="flex items-center mb-4 md:mb-0",
        href="/",
    )
    links = _element(
        "div",
        *(_element("a", label, href=href, cls=_LINK_CLASS) for href, label in NAV_LINKS),
        cls="flex space-x-8 ml-4 mr-4",
    )
    bar = _element(
        "div",
        brand,
        _element("div", cls="flex-grow md:hidden"),
        links,
        cls="flex flex-col md:flex-row justify-between items-center p-4 border-b-4 border-gray-300",
    )
    return _element("nav", bar, cls="fixed w-screen custom-bg-white shadow-md z-50")


def intro_message() -> str:
    """The introduction to the partnership, its projects and goals."""
    return _element(
        "div",
        _heading("Introducing the Open Device Partnership (ODP)"),
        _element(
            "p",
            "ODP is an open initiative aimed at making it easier to build secure Windows "
            "devices with solid fundamentals. Integral to this vision is the idea of "
            "leveraging industry standards to build system software that spans the full "
            "range of silicon options available and to simplify and accelerate development "
            "of high-quality devices. ODP strives to set new standards for security, "
            "performance, battery life, and reliability while maximizing code re-use.",
            cls="pb-4 text-lg",
        ),
        _heading("ODP Projects"),
        _bold_list(_ODP_PROJECTS),
        _element(
            "p",
            "While we have ambitious goals for these first projects, we are also interested "
            "in adding new projects to the partnership that align with our shared goals. "
            "More information about partnership governance and how to start new projects "
            "will be provided shortly. In the meantime, please reach out to ",
            _element("a", "ODP Administrators", href=ADMIN_MAILTO, cls="underline custom-text-blue-600"),
            " with questions or comments.",
            cls="pb-4 text-lg",
        ),
        _heading("Value Proposition"),
        _bold_list(_VALUE_PROPOSITION, item_cls="pl-4"),
        _heading("Partner-Oriented Vision"),
        _element(
            "p",
            "We are committed to creating an inclusive ecosystem of partners, including "
            "device OEM/ODMs, IHVs, Silicon Vendors, independent developers, security "
            "researchers, and anyone interested in helping to build secure and "
            "high-quality devices.",
            cls="pb-4 text-lg",
        ),
        _heading("Get Involved"),
        _element(
            "p",
            "For more information about ODP and partnership opportunities, please consult "
            "the documentation, clone source code from our growing list of public "
            "repositories and issue your first pull request!",
            cls="pb-4 text-lg",
        ),
        cls="text-base px-4 sm:px-8 md:px-16 lg:px-24 xl:px-32 py-8 custom-bg-gray-100 custom-text-gray-800",
    )


def projects() -> str:
    """The grid of buttons leading to each current project."""
    buttons = (
        _element("a", _element("p", label, cls="text-xl text-center"), cls="btn-custom", href=href)
        for href, label in PROJECT_LINKS
    )
    return _element(
        "div",
        _element(
            "p",
            _element("span", "Current Projects", cls="font-bold text-3xl text-black dark:text-white"),
            cls="pb-8 pl-24",
        ),
        _element("div", *buttons, cls="grid grid-cols-1 sm:grid-cols-2 lg:grid-cols-3 gap-12 pl-28"),
        cls="p-4 bg-white dark:bg-gray-800",
    )


def welcome() -> str:
    """The landing banner followed by the projects grid and the introduction."""
    banner = _element(
        "div",
        _element(
            "div",
            _element("p", _WELCOME_TEXT, cls="text-2xl md:text-4xl text-center"),
            cls="flex items-center justify-center p-8 md:p-20",
        ),
        _element(
            "div",
            _element("img", src="/images/laptop.jpg", cls="w-full h-auto rounded-lg shadow-md"),
            cls="flex items-center justify-center p-8",
        ),
        cls="grid grid-cols-1 md:grid-cols-2 custom-bg-gray-100",
    )
    spacer = _element("div", cls="custom-bg-white h-2")
    return _element(
        "div",
        banner,
        spacer,
        _Markup(projects()),
        spacer,
        _element("div", _Markup(intro_message()), cls="custom-bg-white"),
        cls="pt-16 grid grid-cols-1 gap-4 custom-bg-white custom-text-gray-800",
    )


def main_content() -> str:
    """The main section of the home page."""
    return _element("main", _Markup(welcome()), cls="custom-bg-white custom-text-gray-800")