"""HTML gallery rendering."""

import html as html_lib

from .models import EntryForm, VideoEntry
from .session import GallerySession, Mode

PLACEHOLDER_URL = "/placeholder.png"
CARD_TAG_LIMIT = 3


def _e(value: str | None) -> str:
    return html_lib.escape(value or "", quote=True)


STYLE = '''
        * { box-sizing: border-box; margin: 0; padding: 0; }
        body {
            font-family: -apple-system, BlinkMacSystemFont, "Segoe UI", Roboto, sans-serif;
            background: #fff;
            color: #111827;
        }
        header {
            position: sticky;
            top: 0;
            z-index: 10;
            background: rgba(255,255,255,0.9);
            border-bottom: 1px solid #f3f4f6;
            padding: 16px 20px;
        }
        .top { display: flex; align-items: center; gap: 12px; margin-bottom: 12px; }
        .logo { font-weight: 600; }
        .logo small { display: block; font-size: 12px; color: #6b7280; font-weight: 400; }
        .spacer { flex: 1; }
        .btn {
            padding: 8px 14px;
            font-size: 14px;
            border: 1px solid #e5e7eb;
            border-radius: 16px;
            background: #fff;
            cursor: pointer;
        }
        .btn:hover { background: #f9fafb; }
        .btn.primary { background: #f59e0b; color: #fff; border-color: #f59e0b; }
        .btn.danger { background: #ef4444; color: #fff; border-color: #ef4444; }
        .btn:disabled { background: #d1d5db; border-color: #d1d5db; cursor: not-allowed; }
        .search-box {
            width: 100%;
            padding: 12px 16px;
            font-size: 14px;
            border: 1px solid #e5e7eb;
            border-radius: 16px;
        }
        .gallery {
            display: grid;
            grid-template-columns: repeat(auto-fill, minmax(220px, 1fr));
            gap: 16px;
            padding: 20px;
        }
        .card {
            width: 100%;
            text-align: left;
            border: 1px solid #e5e7eb;
            border-radius: 16px;
            overflow: hidden;
            background: #fff;
            cursor: pointer;
        }
        .card:hover { box-shadow: 0 4px 12px rgba(0,0,0,0.08); }
        .card img { width: 100%; aspect-ratio: 16 / 9; object-fit: cover; display: block; background: #f3f4f6; }
        .card-info { padding: 10px 12px; }
        .card-title { font-weight: 500; white-space: nowrap; overflow: hidden; text-overflow: ellipsis; }
        .tags { margin-top: 4px; display: flex; flex-wrap: wrap; gap: 4px; }
        .tag {
            font-size: 10px;
            padding: 2px 8px;
            border-radius: 999px;
            background: #f3f4f6;
            border: 1px solid #e5e7eb;
        }
        .empty { grid-column: 1 / -1; text-align: center; color: #6b7280; padding: 80px 0; }
        .modal {
            position: fixed;
            inset: 0;
            background: rgba(0,0,0,0.6);
            z-index: 50;
            display: flex;
            align-items: center;
            justify-content: center;
            padding: 16px;
        }
        .dialog { background: #fff; border-radius: 16px; width: 100%; max-width: 720px; overflow: hidden; }
        .dialog.narrow { max-width: 480px; }
        .dialog-header {
            display: flex;
            align-items: center;
            justify-content: space-between;
            padding: 12px 16px;
            border-bottom: 1px solid #e5e7eb;
            font-weight: 600;
        }
        .dialog-body { padding: 16px; }
        .dialog-body label { display: block; margin-bottom: 12px; font-size: 12px; color: #6b7280; }
        .dialog-body input, .dialog-body textarea {
            display: block;
            width: 100%;
            margin-top: 4px;
            padding: 8px 12px;
            border: 1px solid #e5e7eb;
            border-radius: 12px;
            font-size: 14px;
        }
        .dialog-footer {
            display: flex;
            justify-content: flex-end;
            gap: 8px;
            padding: 12px 16px;
            border-top: 1px solid #e5e7eb;
            background: #f9fafb;
        }
        .dialog video { width: 100%; display: block; }
        .description { padding: 12px 16px; font-size: 14px; color: #4b5563; border-top: 1px solid #e5e7eb; }
        .hint { font-size: 12px; color: #6b7280; }
        .info {
            margin: 20px 20px 0;
            padding: 16px;
            border: 1px solid #fde68a;
            border-radius: 16px;
            background: #fffbeb;
            font-size: 14px;
            line-height: 1.5;
        }
        .info p { color: #374151; margin-top: 4px; }
        .info ul { padding-left: 20px; margin-top: 8px; color: #374151; }
        .info code { padding: 0 4px; background: #fff; border: 1px solid #e5e7eb; border-radius: 4px; }
        footer { padding: 40px 20px; font-size: 12px; color: #9ca3af; }
'''


def _hidden_query(query: str) -> str:
    return f'<input type="hidden" name="q" value="{_e(query)}">'


def render_info_banner() -> str:
    return '''    <div class="info">
        <strong>Instagram videos cannot be played directly</strong>
        <p>Platforms do not allow embedding their videos without a login. Add videos one of these ways instead:</p>
        <ul>
            <li>With the creator's permission, save the mp4 file into the <code>/videos</code> folder of the data directory</li>
            <li>Use a <b>direct link</b> to an mp4 you own, for example a public file in your cloud storage</li>
            <li>Add a thumbnail image so kids can pick videos easily</li>
        </ul>
    </div>
'''


def render_card(index: int, entry: VideoEntry, query: str) -> str:
    thumb = entry.thumbnail or PLACEHOLDER_URL
    tags_html = ''.join(f'<span class="tag">#{_e(t)}</span>' for t in entry.tags[:CARD_TAG_LIMIT])
    if tags_html:
        tags_html = f'<div class="tags">{tags_html}</div>'
    return f'''        <form method="post" action="/entries/{index}/open">
            {_hidden_query(query)}
            <button class="card" type="submit">
                <img src="{_e(thumb)}" alt="" loading="lazy">
                <div class="card-info">
                    <div class="card-title">{_e(entry.title)}</div>
                    {tags_html}
                </div>
            </button>
        </form>
'''


def render_player(entry: VideoEntry, query: str) -> str:
    alt_source = ''
    if entry.video_alt_url:
        alt_source = f'<source src="{_e(entry.video_alt_url)}" type="video/webm">'
    description = ''
    if entry.description:
        description = f'<div class="description">{_e(entry.description)}</div>'
    return f'''    <div class="modal" role="dialog" aria-modal="true">
        <div class="dialog">
            <form class="dialog-header" method="post" action="/close">
                {_hidden_query(query)}
                <span>{_e(entry.title)}</span>
                <button class="btn" type="submit" data-close>&times;</button>
            </form>
            <video controls poster="{_e(entry.thumbnail)}">
                <source src="{_e(entry.video_url)}" type="video/mp4">
                {alt_source}
                This browser does not support HTML5 video.
            </video>
            {description}
        </div>
    </div>
'''


def render_add_form(query: str, draft: EntryForm | None = None) -> str:
    """Add form; `draft` is a rejected submission whose values are shown again."""
    hint = "Only direct mp4 links can be played. Title and video URL are required."
    if draft is not None:
        hint = "Please fill in a title and a video URL."
    values = draft or EntryForm()
    fields = [
        ("title", "Title", "e.g. Snowflake slime"),
        ("thumbnail", "Thumbnail image URL", "(optional) jpg/png address"),
        ("video_url", "Video (mp4) URL", "https://... .mp4"),
        ("video_alt_url", "Alternate video (webm) URL", "(optional)"),
        ("tags", "Tags", "comma separated (e.g. slime, snow, paper)"),
        ("description", "Description", "(optional)"),
    ]
    inputs = ''.join(
        f'<label>{label}<input name="{name}" value="{_e(getattr(values, name))}"'
        f' placeholder="{_e(placeholder)}"></label>'
        for name, label, placeholder in fields
    )
    disabled = '' if values.can_save() else ' disabled'
    return f'''    <div class="modal" role="dialog" aria-modal="true">
        <div class="dialog narrow">
            <div class="dialog-header"><span>Add video</span></div>
            <form method="post" action="/add/submit" id="addForm">
                {_hidden_query(query)}
                <div class="dialog-body">
                    {inputs}
                    <p class="hint">{hint}</p>
                </div>
                <div class="dialog-footer">
                    <button class="btn" type="submit" form="cancelAdd" data-close>Cancel</button>
                    <button class="btn primary" type="submit" id="saveBtn"{disabled}>Save</button>
                </div>
            </form>
            <form method="post" action="/close" id="cancelAdd">{_hidden_query(query)}</form>
        </div>
    </div>
    <script>
        const addForm = document.getElementById('addForm');
        const saveBtn = document.getElementById('saveBtn');
        addForm.addEventListener('input', () => {{
            const title = addForm.elements['title'].value.trim();
            const videoUrl = addForm.elements['video_url'].value.trim();
            saveBtn.disabled = !(title && videoUrl);
        }});
    </script>
'''


def render_confirm_reset(query: str) -> str:
    return f'''    <div class="modal" role="dialog" aria-modal="true">
        <div class="dialog narrow">
            <div class="dialog-header"><span>Remove all added videos</span></div>
            <div class="dialog-body">Delete every video you added on this device? The built-in examples stay.</div>
            <form class="dialog-footer" method="post" action="/reset/confirm">
                {_hidden_query(query)}
                <button class="btn" type="submit" formaction="/close" data-close>Cancel</button>
                <button class="btn danger" type="submit">Delete</button>
            </form>
        </div>
    </div>
'''


def render_overlay(session: GallerySession, query: str) -> str:
    if session.mode == Mode.VIEWING and session.active is not None:
        return render_player(session.active, query)
    if session.mode == Mode.ADDING:
        return render_add_form(query, session.draft)
    if session.mode == Mode.CONFIRMING_RESET:
        return render_confirm_reset(query)
    return ''


def render_page(session: GallerySession, query: str = "") -> str:
    """Render the whole gallery page for the session's current mode."""
    # Cards post their position in the full list, not in the filtered one
    entries = session.store.current()
    visible = {id(e) for e in session.visible(query)}

    html = f'''<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>Craft Gallery</title>
    <style>{STYLE}    </style>
</head>
<body>
    <header>
        <div class="top">
            <div class="logo">Craft TV<small>For kids, no ads, no comments</small></div>
            <div class="spacer"></div>
            <form method="post" action="/add">{_hidden_query(query)}<button class="btn" type="submit">Add video</button></form>
            <form method="post" action="/reset">{_hidden_query(query)}<button class="btn" type="submit">Reset</button></form>
        </div>
        <form method="get" action="/">
            <input type="text" class="search-box" name="q" value="{_e(query)}"
                   placeholder="Search by title or tag (e.g. slime, snow, paper)">
        </form>
    </header>
{render_info_banner()}    <main class="gallery">
'''
    shown = 0
    for index, entry in enumerate(entries):
        if id(entry) not in visible:
            continue
        html += render_card(index, entry, query)
        shown += 1
    if shown == 0:
        html += '        <div class="empty">No matching videos. Use "Add video" at the top.</div>\n'

    html += '''    </main>
'''
    html += render_overlay(session, query)
    html += '''    <footer>A personal gallery for showing craft videos safely. Use other people's content only with their permission.</footer>
    <script>
        document.addEventListener('keydown', (e) => {
            if (e.key !== 'Escape') return;
            const close = document.querySelector('[data-close]');
            if (close) close.click();
        });
    </script>
</body>
</html>
'''
    return html
