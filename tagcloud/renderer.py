"""
renderer.py - HTML Tag Cloud Page

Turns a finished cloud into an HTML page. Font sizes map onto the
f11 .. f48 classes of the tag cloud stylesheet.
"""

from bs4 import BeautifulSoup

from tagcloud.errors import OutputUnavailable


DEFAULT_STYLESHEET = (
    "http://web.cse.ohio-state.edu/software/2231/web-sw2/assignments/"
    "projects/tag-cloud-generator/data/tagcloud.css")

PAGE_SKELETON = "<html><head></head><body></body></html>"


def _span(soup, entry):
    span = soup.new_tag("span", attrs={
        "style": "cursor:default",
        "class": f"f{entry.font_size}",
        "title": f"count: {entry.count}",
    })
    span.string = entry.word
    return span


def render_page(cloud, stylesheet=DEFAULT_STYLESHEET):
    """
    Build the page for cloud and return it as a string.

    The <title> names the requested count, the <h2> header the number
    of words actually shown.
    """
    soup = BeautifulSoup(PAGE_SKELETON, "lxml")

    title = soup.new_tag("title")
    title.string = f"Top {cloud.requested} words in {cloud.source}"
    soup.head.append(title)
    soup.head.append(soup.new_tag(
        "link", attrs={"href": stylesheet, "rel": "stylesheet", "type": "text/css"}))

    header = soup.new_tag("h2")
    header.string = f"Top {cloud.effective} words in {cloud.source}"
    soup.body.append(header)
    soup.body.append(soup.new_tag("hr"))

    container = soup.new_tag("div", attrs={"class": "cdiv"})
    box = soup.new_tag("p", attrs={"class": "cbox"})
    for entry in cloud.entries:
        box.append(_span(soup, entry))
    container.append(box)
    soup.body.append(container)

    return str(soup)


def write_page(markup, path):
    """
    Write the rendered page to path (UTF-8).

    Raises:
        OutputUnavailable: if the file cannot be created or written
    """
    try:
        with open(path, "w", encoding="utf-8") as file:
            file.write(markup)
    except OSError as e:
        raise OutputUnavailable(path, e) from e
