"""
Pytest configuration and fixtures.
"""

import pytest

from tagquery import TagQuery

CONTAINER_HTML = """
<!doctype html>
<html>
  <body>
    <div id="container">
      <p class="intro">Hello</p>
      <div class="item" id="i1">Item 1</div>
      <div class="item">Item 2 <span class="badge">New</span></div>
    </div>
  </body>
</html>
"""


@pytest.fixture
def container_doc():
    """A document shaped div#container > (p.intro, div.item#i1, div.item > span.badge)."""
    return TagQuery(CONTAINER_HTML)
