from __future__ import annotations

from .expectations import Expectation, contains, count_of, matches

# Attribute order inside a tag is not fixed by the build, hence the lookaheads.
_MAILTO_FORM = r'<form\b(?=[^>]*\baction="mailto:hello@example\.com")[^>]*>'
_EMAIL_INPUT = r'<input\b(?=[^>]*\bname="email")[^>]*>'
# Marker attributes end at whitespace, '=', '>' or '/'.
_TIMELINE_ITEM = r'\bdata-timeline-item(?=[\s=>/])'
_PROJECT_CARD = r'\bdata-project-card(?=[\s=>/])'

PAGE_EXPECTATIONS: dict[str, list[Expectation]] = {
    'index.html': [
        count_of('about_section', 'data-section="about"', 1),
        contains('about_heading', 'About Me'),
        contains('nav_career_link', 'href="/career"'),
        count_of('nav_current_page', 'aria-current="page"', 1),
    ],
    'career/index.html': [
        contains('career_section', 'data-section="career"'),
        contains('career_heading', 'Career Timeline'),
        count_of('timeline_items', _TIMELINE_ITEM, 3, literal=False),
    ],
    'projects/index.html': [
        contains('projects_section', 'data-section="projects"'),
        count_of('project_cards', _PROJECT_CARD, 3, literal=False),
        contains('project_example_link', 'href="https://example.com"'),
    ],
    'contact/index.html': [
        contains('contact_section', 'data-section="contact"'),
        matches('mailto_form', _MAILTO_FORM),
        matches('email_input', _EMAIL_INPUT),
    ],
}
