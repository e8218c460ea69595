from __future__ import annotations

from html import escape

from .content import SiteContent

# (section, href, nav label, output path)
PAGES = [
    ("about", "/", "About", "index.html"),
    ("career", "/career", "Career", "career/index.html"),
    ("projects", "/projects", "Projects", "projects/index.html"),
    ("contact", "/contact", "Contact", "contact/index.html"),
]

STYLESHEET = """\
:root { --ink: #1f2328; --muted: #59636e; --accent: #0b6bcb; --card: #fff; --bg: #f6f7f9; }
* { box-sizing: border-box; }
body { font-family: system-ui, Arial, sans-serif; margin: 0; background: var(--bg); color: var(--ink); }
header, main, footer { max-width: 880px; margin: 0 auto; padding: 16px 24px; }
nav ul { list-style: none; display: flex; gap: 16px; padding: 0; margin: 0; }
nav a { color: var(--muted); text-decoration: none; }
nav a[aria-current="page"] { color: var(--accent); font-weight: 600; }
.timeline { list-style: none; padding: 0; border-left: 2px solid #d0d7de; }
.timeline li { margin: 0 0 20px 16px; }
.timeline .period { color: var(--muted); font-size: 0.9em; }
.cards { display: grid; grid-template-columns: repeat(auto-fit, minmax(240px, 1fr)); gap: 16px; }
.cards article { background: var(--card); border: 1px solid #ddd; border-radius: 12px; padding: 16px; }
.tags { color: var(--muted); font-size: 0.85em; }
form label { display: block; margin: 12px 0 4px; }
form input, form textarea { width: 100%; padding: 8px; }
footer { color: var(--muted); font-size: 0.85em; }
"""


def _nav(current: str) -> str:
    items = []
    for section, href, label, _ in PAGES:
        marker = ' aria-current="page"' if section == current else ''
        items.append(f'<li><a href="{href}"{marker}>{escape(label)}</a></li>')
    return f'<nav aria-label="Primary"><ul>{"".join(items)}</ul></nav>'


def _layout(content: SiteContent, section: str, title: str, body: str) -> str:
    site_title = escape(content.site_title)
    return f'''<!doctype html>
<html lang="en"><head><meta charset="utf-8">
<meta name="viewport" content="width=device-width, initial-scale=1">
<title>{escape(title)} | {site_title}</title>
<link rel="stylesheet" href="/assets/site.css">
</head>
<body>
<header><a href="/" class="brand">{site_title}</a>
{_nav(section)}</header>
<main data-section="{section}">
{body}
</main>
<footer><p>{escape(content.profile.name)}</p></footer>
</body></html>
'''


def render_about(content: SiteContent) -> str:
    profile = content.profile
    paras = ''.join(f'<p>{escape(p)}</p>' for p in profile.about)
    body = (f'<h1>About Me</h1>\n'
            f'<p class="lead">{escape(profile.name)}, {escape(profile.headline)}</p>\n'
            f'{paras}')
    return _layout(content, "about", "About", body)


def render_career(content: SiteContent) -> str:
    items = ''.join(
        f'<li data-timeline-item><span class="period">{escape(e.period)}</span>'
        f'<h2>{escape(e.role)}</h2><p class="org">{escape(e.organisation)}</p>'
        f'<p>{escape(e.summary)}</p></li>'
        for e in content.timeline
    )
    body = f'<h1>Career Timeline</h1>\n<ol class="timeline">{items}</ol>'
    return _layout(content, "career", "Career", body)


def render_projects(content: SiteContent) -> str:
    def tags(p):
        if not p.tags:
            return ''
        return f'<p class="tags">{escape(", ".join(p.tags))}</p>'
    cards = ''.join(
        f'<article data-project-card><h2>{escape(p.title)}</h2><p>{escape(p.summary)}</p>'
        f'{tags(p)}<a href="{escape(p.url)}">View project</a></article>'
        for p in content.projects
    )
    body = f'<h1>Projects</h1>\n<div class="cards">{cards}</div>'
    return _layout(content, "projects", "Projects", body)


def render_contact(content: SiteContent) -> str:
    contact = content.contact
    intro = f'<p>{escape(contact.intro)}</p>' if contact.intro else ''
    body = f'''<h1>Contact</h1>
{intro}
<form method="post" action="mailto:{escape(contact.email)}" enctype="text/plain">
<label for="name">Name</label><input id="name" name="name" type="text" required>
<label for="email">Email</label><input id="email" name="email" type="email" required>
<label for="message">Message</label><textarea id="message" name="message" rows="5" required></textarea>
<button type="submit">Send</button>
</form>'''
    return _layout(content, "contact", "Contact", body)


_RENDERERS = {
    "about": render_about,
    "career": render_career,
    "projects": render_projects,
    "contact": render_contact,
}


def render_pages(content: SiteContent) -> dict[str, str]:
    """Map each output path (relative to the output dir) to its HTML."""
    return {path: _RENDERERS[section](content) for section, _, _, path in PAGES}
