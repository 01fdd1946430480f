# html_renderer.py
from __future__ import annotations

import html
from typing import List

from core import YourLibrary


DEFAULT_TITLE = "YourLibrary to html converter"

PAGE_BEFORE = """<!DOCTYPE html>
<html>
<head>
<meta charset="utf-8" />
<meta name="viewport" content="width=device-width, initial-scale=1" />
<title>{title}</title>
<link href="https://cdn.jsdelivr.net/npm/bootstrap@5.1.3/dist/css/bootstrap.min.css" rel="stylesheet" integrity="sha384-1BmE4kWBq78iYhFldvKuhfTAU6auU8tT94WrHftjDbrCEXSU1oBoqyl2QvZ6jIW3" crossorigin="anonymous">
<link href="https://cdn.datatables.net/1.11.5/css/dataTables.bootstrap5.min.css" rel="stylesheet"/>
<link href="https://cdn.datatables.net/select/1.3.4/css/select.dataTables.min.css" rel="stylesheet"/>
<link href="https://cdn.datatables.net/buttons/2.2.2/css/buttons.bootstrap5.min.css" rel="stylesheet"/>
<script src="https://cdn.jsdelivr.net/npm/bootstrap@5.1.3/dist/js/bootstrap.bundle.min.js" integrity="sha384-ka7Sk0Gln4gmtz2MlQnikT1wXgYsOg+OMhuP+IlRH9sENBO0LRn5q+8nbTov4+1p" crossorigin="anonymous"></script>
<script src="https://code.jquery.com/jquery-3.6.0.min.js"></script>
<script src="https://cdn.datatables.net/1.11.5/js/jquery.dataTables.min.js"></script>
<script src="https://cdn.datatables.net/1.11.5/js/dataTables.bootstrap5.min.js"></script>
<script src="https://cdn.datatables.net/select/1.3.4/js/dataTables.select.min.js"></script>
<script src="https://cdn.datatables.net/buttons/2.2.2/js/dataTables.buttons.min.js"></script>
<script src="https://cdn.datatables.net/buttons/2.2.2/js/buttons.bootstrap5.min.js"></script>
<script>
$(document).ready(function(){{
  $("table").DataTable({{
    paging: false,
    select: true,
    dom: 'Bfrtip',
    buttons: [
      'copy', 'csv', 'excel', 'pdf', 'print'
    ],
  }});
}});
</script>
</head>
<body>
<div class="container">
"""

PAGE_AFTER = """</div>
</body>
</html>
"""

TABLE_BEFORE = """<div class="table-responsive">
<table class="table" data-order='[[0,"asc"]]'>
<thead>
<tr>
<th scope="col">#</th>
<th scope="col">Artist</th>
<th scope="col">Track</th>
<th scope="col">Album</th>
</tr>
</thead>
<tbody>
"""

TABLE_AFTER = """</tbody>
</table>
</div>
"""


def _cell(value: str, escape: bool) -> str:
    # デフォルトはエスケープなし（値をそのまま埋め込む）
    return html.escape(value) if escape else value


def render_tracks(library: YourLibrary, escape: bool = False) -> str:
    if not library.tracks:
        return ""

    rows: List[str] = []
    for number, t in enumerate(library.tracks, start=1):
        artist = _cell(t.artist, escape)
        track = _cell(t.track, escape)
        album = _cell(t.album, escape)
        rows.append(
            f'<tr><th scope="col">{number}</th>'
            f"<td>{artist}</td><td>{track}</td><td>{album}</td></tr>\n"
        )

    return "<h2>Tracks</h2>\n" + TABLE_BEFORE + "".join(rows) + TABLE_AFTER


def render_html(
    library: YourLibrary,
    *,
    title: str = DEFAULT_TITLE,
    escape: bool = False,
) -> str:
    """
    YourLibrary から HTML ドキュメント全体を組み立てる。

    セクションを出すのは tracks だけ。ほかのカテゴリは描画しない。
    """
    body = render_tracks(library, escape=escape)
    return PAGE_BEFORE.format(title=html.escape(title)) + body + PAGE_AFTER
