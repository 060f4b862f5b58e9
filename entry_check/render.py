"""HTML pages for the search form, results and errors."""

from __future__ import annotations

import html

from .models import RequirementView, ViewModel


TITLE = "Entry Requirements"


def _esc(value: str) -> str:
    return html.escape(value or "", quote=True)


def _layout(body: str) -> str:
    return (
        "<!DOCTYPE html>\n"
        '<html lang="en">\n'
        "<head>\n"
        '  <meta charset="utf-8">\n'
        f"  <title>{TITLE}</title>\n"
        "</head>\n"
        "<body>\n"
        f"{body}\n"
        "</body>\n"
        "</html>\n"
    )


def render_form(origin: str = "", destination: str = "") -> str:
    return _layout(
        f"<h1>{TITLE}</h1>\n"
        '<form action="/searchEntry" method="get">\n'
        '  <label for="from">From</label>\n'
        f'  <input id="from" name="from" value="{_esc(origin)}" placeholder="US">\n'
        '  <label for="destination">Destination</label>\n'
        f'  <input id="destination" name="destination" value="{_esc(destination)}" placeholder="FR">\n'
        '  <button type="submit">Search</button>\n'
        "</form>"
    )


def _render_requirement(requirement: RequirementView) -> str:
    parts = []
    if requirement.category:
        heading = requirement.category
        if requirement.sub_category:
            heading = f"{heading}: {requirement.sub_category}"
        parts.append(f"<h3>{_esc(heading)}</h3>")
    parts.append(f"<p>{_esc(requirement.summary)}</p>")
    if requirement.details:
        parts.append(f"<p>{_esc(requirement.details)}</p>")
    for document in requirement.documents:
        if document.has_link:
            parts.append(
                f'<p><a href="{_esc(document.url)}">{_esc(document.title)}</a></p>'
            )
        else:
            parts.append(f"<p>{_esc(document.title)}</p>")
    return '<section class="requirement">\n' + "\n".join(parts) + "\n</section>"


def render_result(view: ViewModel) -> str:
    lines = [
        f"<h1>Origin: {_esc(view.origin_name)} Destination: {_esc(view.destination_name)}</h1>",
        f"<h2>{_esc(view.status_label)}</h2>",
    ]
    summary = " ".join(part for part in (view.summary, view.details) if part)
    if summary:
        if view.start_date:
            summary = f"{summary} As of {view.start_date}."
        lines.append(f"<p>{_esc(summary)}</p>")
    lines.extend(_render_requirement(requirement) for requirement in view.requirements)
    if view.updated_at:
        lines.append(f"<p><small>Last updated {_esc(view.updated_at)}</small></p>")
    lines.append('<a href="/">Back to search</a>')
    return _layout("\n".join(lines))


def render_error(message: str) -> str:
    return _layout(
        f"<h1>{TITLE}</h1>\n"
        f'<p class="error">{_esc(message)}</p>\n'
        '<a href="/">Back to search</a>'
    )
