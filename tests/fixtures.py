"""
HTML builders shared by the crawler tests.
"""


def item(href: str | None = "/t/1", date: str | None = "14/03/2024 09:00",
         css_class: str = "thread-item") -> str:
    anchor = f'<a href="{href}">Item</a>' if href is not None else ""
    date_span = f'<span class="date">{date}</span>' if date is not None else ""
    return f'<article class="{css_class}"><h2>{anchor}</h2>{date_span}</article>'


def page(*items: str, more: str | None = None, indicator: bool = True) -> str:
    pager = ""
    if indicator:
        attr = f' data-more="{more}"' if more is not None else ""
        pager = f'<div class="pages"{attr}>1 2 3</div>'
    return f"<html><body><main>{''.join(items)}</main>{pager}</body></html>"
