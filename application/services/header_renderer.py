# application/services/header_renderer.py
from __future__ import annotations

import click

from domain.http import Response


class HeaderRenderer:
    """
    Status line and headers in the layout of `curl -i`:

        HTTP/2 200
        content-type: text/plain
    """

    def render(self, response: Response, color: bool = False) -> str:
        status_line = response.status_line
        if color:
            status_line = click.style(status_line, fg="green", bold=True)
        lines = [status_line]
        for header in response.headers:
            name = click.style(header.name, fg="cyan", bold=True) if color else header.name
            lines.append(f"{name}: {header.value}")
        return "".join(f"{line}\n" for line in lines)
